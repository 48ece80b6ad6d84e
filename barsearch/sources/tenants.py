"""테넌트 설정 레지스트리.

테넌트 slug로 바별 설정(공용 음료 포함 여부 등)을 조회합니다.
"""

from .models import TenantConfig
from ..utils.errors import TenantError
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TENANTS: list[TenantConfig] = [
    TenantConfig(
        slug="sample",
        bar_name="Sample Bar",
        bar_data="sampleBar",
        description="A sample bar inventory for demonstration",
        include_common_drinks=True,
        include_random_cocktails=False,
        is_sample_data=True,
    ),
]


class TenantRegistry:
    """테넌트 설정 저장소.

    Examples:
        >>> registry = TenantRegistry(DEFAULT_TENANTS, default_slug="sample")
        >>> config = registry.get_tenant_config("sample") or registry.get_default_tenant_config()
        >>> config.include_common_drinks
        True
    """

    def __init__(self, tenants: list[TenantConfig], default_slug: str):
        """TenantRegistry를 초기화합니다.

        Args:
            tenants: 등록할 테넌트 설정 목록
            default_slug: 기본 테넌트 slug (tenants에 포함되어야 함)

        Raises:
            TenantError: 기본 테넌트가 등록 목록에 없는 경우
        """
        self._tenants: dict[str, TenantConfig] = {t.slug: t for t in tenants}
        if default_slug not in self._tenants:
            raise TenantError(f"기본 테넌트가 등록되어 있지 않습니다: {default_slug}")
        self.default_slug = default_slug

        logger.info(f"TenantRegistry 초기화 완료: {list(self._tenants.keys())}")

    def get_tenant_config(self, slug: str) -> TenantConfig | None:
        """slug에 해당하는 테넌트 설정을 반환합니다. 없으면 None."""
        return self._tenants.get(slug)

    def get_default_tenant_config(self) -> TenantConfig:
        """기본 테넌트 설정을 반환합니다."""
        return self._tenants[self.default_slug]

    def resolve(self, slug: str) -> TenantConfig:
        """slug의 설정을 반환하고, 없으면 기본 테넌트 설정으로 대체합니다."""
        config = self.get_tenant_config(slug)
        if config is None:
            logger.warning(f"테넌트를 찾을 수 없어 기본 설정 사용: {slug}")
            return self.get_default_tenant_config()
        return config

    def require(self, slug: str) -> TenantConfig:
        """slug의 설정을 반환합니다.

        Raises:
            TenantError: 등록되지 않은 테넌트인 경우
        """
        config = self.get_tenant_config(slug)
        if config is None:
            raise TenantError(f"등록되지 않은 테넌트: {slug}")
        return config

    def is_valid_tenant(self, slug: str) -> bool:
        return slug in self._tenants
