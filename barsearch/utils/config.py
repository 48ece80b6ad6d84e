"""애플리케이션 설정 관리.

환경 변수와 .env 파일에서 검색 엔진 설정을 로드합니다.
"""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .logger import get_logger

logger = get_logger(__name__)

# .env 파일 로드
load_dotenv()


class CocktailDBSettings(BaseSettings):
    """외부 CocktailDB API 설정."""

    model_config = SettingsConfigDict(env_prefix="COCKTAILDB_")

    base_url: str = Field(
        default="https://www.thecocktaildb.com/api/json/v1/1/",
        description="CocktailDB JSON API 기본 URL",
    )
    timeout_seconds: float = Field(default=10.0, gt=0, description="HTTP 요청 타임아웃 (초)")
    lookup_batch_size: int = Field(
        default=10, ge=1, description="상세 조회 동시 요청 배치 크기"
    )


class SearchSettings(BaseSettings):
    """검색 실행 설정."""

    model_config = SettingsConfigDict(env_prefix="SEARCH_")

    step_delay_ms: int = Field(
        default=0, ge=0, description="단계 사이 표시용 지연 (밀리초, 0이면 없음)"
    )
    step_timeout_seconds: float = Field(
        default=15.0, gt=0, description="검색 단계별 최대 실행 시간 (초)"
    )
    default_strategy: Literal["omni", "drinks"] = Field(
        default="omni", description="perform_search에 전략을 지정하지 않았을 때 사용할 전략"
    )


class TenantSettings(BaseSettings):
    """테넌트 설정."""

    model_config = SettingsConfigDict(env_prefix="TENANT_")

    default_slug: str = Field(default="sample", description="기본 테넌트 slug")


class AppConfig(BaseSettings):
    """애플리케이션 전체 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 알 수 없는 환경변수 무시
    )

    # 하위 설정
    cocktaildb: CocktailDBSettings = Field(default_factory=lambda: CocktailDBSettings())
    search: SearchSettings = Field(default_factory=lambda: SearchSettings())
    tenant: TenantSettings = Field(default_factory=lambda: TenantSettings())

    # 기타 설정
    data_file: Path | None = Field(default=None, description="바 데이터 JSON 파일 경로")
    debug: bool = Field(default=False, description="디버그 모드 (True이면 log_level 대신 DEBUG)")
    log_level: str = Field(default="INFO", description="로그 레벨")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


# 전역 설정 인스턴스
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """애플리케이션 설정을 반환합니다.

    싱글톤 패턴으로 설정 인스턴스를 관리합니다.

    Returns:
        AppConfig 인스턴스

    Raises:
        ConfigError: 환경 변수 값이 잘못된 경우

    Example:
        >>> config = get_config()
        >>> print(config.cocktaildb.base_url)
    """
    global _config

    if _config is None:
        try:
            _config = AppConfig()
            logger.info("애플리케이션 설정 로드 완료")
        except Exception as e:
            raise ConfigError(f"설정 로드 실패: {e}") from e

    return _config


def reset_config() -> None:
    """캐시된 설정을 제거합니다. (테스트용)"""
    global _config
    _config = None
