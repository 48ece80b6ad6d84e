"""공통 유틸리티 모듈.

로깅, 설정, 에러 처리 등 공통 기능을 제공합니다.
"""

from .config import get_config, reset_config
from .errors import (
    BarSearchError,
    ConfigError,
    DataSourceError,
    ExternalAPIError,
    StepError,
    TenantError,
)
from .logger import get_logger, log_with_context

__all__ = [
    "get_logger",
    "log_with_context",
    "get_config",
    "reset_config",
    "BarSearchError",
    "ConfigError",
    "DataSourceError",
    "ExternalAPIError",
    "StepError",
    "TenantError",
]
