"""TenantRegistry 테스트."""

import pytest

from barsearch.sources.models import TenantConfig
from barsearch.sources.tenants import DEFAULT_TENANTS, TenantRegistry
from barsearch.utils.errors import TenantError
from tests.mocks import build_tenants


@pytest.fixture
def registry():
    return TenantRegistry(build_tenants(), default_slug="sample")


class TestTenantRegistry:
    """테넌트 설정 조회 테스트"""

    def test_get_tenant_config(self, registry):
        config = registry.get_tenant_config("solo")

        assert config is not None
        assert config.include_common_drinks is False

    def test_unknown_tenant(self, registry):
        assert registry.get_tenant_config("nowhere") is None
        assert not registry.is_valid_tenant("nowhere")

    def test_resolve_falls_back_to_default(self, registry):
        assert registry.resolve("nowhere").slug == "sample"
        assert registry.resolve("solo").slug == "solo"

    def test_require_unknown(self, registry):
        with pytest.raises(TenantError):
            registry.require("nowhere")

    def test_default_must_be_registered(self):
        with pytest.raises(TenantError):
            TenantRegistry([TenantConfig(slug="a", bar_name="A")], default_slug="b")

    def test_default_tenants(self):
        registry = TenantRegistry(DEFAULT_TENANTS, default_slug="sample")

        config = registry.get_default_tenant_config()
        assert config.include_common_drinks is True
        assert config.is_sample_data is True

    def test_camel_case_config(self):
        config = TenantConfig.model_validate(
            {"slug": "x", "barName": "X Bar", "includeCommonDrinks": True}
        )

        assert config.bar_name == "X Bar"
        assert config.include_common_drinks is True
