"""로깅 설정 및 유틸리티.

구조화된 로그 포맷과 로거 인스턴스를 제공합니다.
"""

import logging
import os
import sys
from typing import Any

# 로그 포맷 설정
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# set_log_level()로 지정한 레벨 (None이면 LOG_LEVEL 환경 변수)
_level_override: int | None = None

# get_logger()가 핸들러를 설정한 로거 이름
_configured_loggers: set[str] = set()


def _resolve_level(level: int | str | None) -> int:
    """로그 레벨을 정수로 변환합니다.

    level이 없으면 set_log_level()로 지정한 레벨, LOG_LEVEL 환경 변수, INFO 순서로 사용합니다.
    """
    if level is None:
        if _level_override is not None:
            return _level_override
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """로거 인스턴스를 생성하여 반환합니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        level: 로그 레벨 (기본값: LOG_LEVEL 환경 변수, 없으면 INFO)

    Returns:
        설정된 Logger 인스턴스

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("검색 시작")
    """
    logger = logging.getLogger(name)

    # 이미 핸들러가 설정되어 있으면 중복 설정 방지
    if logger.handlers:
        return logger

    resolved_level = _resolve_level(level)
    logger.setLevel(resolved_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # 상위 로거로 전파 방지 (중복 로그 방지)
    logger.propagate = False
    _configured_loggers.add(name)

    return logger


def log_with_context(
    logger: logging.Logger, level: int, message: str, **context: Any
) -> None:
    """컨텍스트 정보와 함께 로그를 기록합니다.

    Args:
        logger: Logger 인스턴스
        level: 로그 레벨
        message: 로그 메시지
        **context: 추가 컨텍스트 정보 (key-value)

    Example:
        >>> logger = get_logger(__name__)
        >>> log_with_context(
        ...     logger,
        ...     logging.INFO,
        ...     "검색 단계 완료",
        ...     tenant="sample",
        ...     step="localDrinks",
        ...     count=3,
        ... )
    """
    context_str = " | ".join(f"{k}={v}" for k, v in context.items())
    full_message = f"{message} | {context_str}" if context else message
    logger.log(level, full_message)


def set_log_level(level: int | str) -> int:
    """get_logger()로 만든 모든 로거의 레벨을 변경합니다.

    이후에 생성되는 로거도 같은 레벨을 사용합니다.

    Args:
        level: 로그 레벨 (logging 상수 또는 "DEBUG" 같은 이름)

    Returns:
        적용된 로그 레벨 (정수)
    """
    global _level_override

    resolved = _resolve_level(level)
    _level_override = resolved

    for name in _configured_loggers:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        for handler in logger.handlers:
            handler.setLevel(resolved)

    return resolved


def reset_log_level() -> None:
    """set_log_level()로 지정한 레벨을 해제합니다. (테스트용)"""
    global _level_override
    _level_override = None
