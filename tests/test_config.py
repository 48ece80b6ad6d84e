"""설정 로드 테스트."""

import pytest

from barsearch.utils.config import get_config, reset_config
from barsearch.utils.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_config():
    """테스트 전후로 캐시된 설정 제거"""
    reset_config()
    yield
    reset_config()


class TestConfig:
    """환경 변수 기반 설정 테스트"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("COCKTAILDB_BASE_URL", raising=False)
        monkeypatch.delenv("SEARCH_STEP_DELAY_MS", raising=False)
        monkeypatch.delenv("COCKTAILDB_LOOKUP_BATCH_SIZE", raising=False)

        config = get_config()

        assert config.cocktaildb.base_url.startswith("https://www.thecocktaildb.com/")
        assert config.cocktaildb.lookup_batch_size == 10
        assert config.search.step_delay_ms == 0

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("COCKTAILDB_BASE_URL", "http://localhost:9000/api/")
        monkeypatch.setenv("SEARCH_STEP_DELAY_MS", "250")
        monkeypatch.setenv("TENANT_DEFAULT_SLUG", "demo")

        config = get_config()

        assert config.cocktaildb.base_url == "http://localhost:9000/api/"
        assert config.search.step_delay_ms == 250
        assert config.tenant.default_slug == "demo"

    def test_singleton(self):
        assert get_config() is get_config()

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("COCKTAILDB_LOOKUP_BATCH_SIZE", "0")

        with pytest.raises(ConfigError):
            get_config()

    def test_default_strategy(self, monkeypatch):
        monkeypatch.setenv("SEARCH_DEFAULT_STRATEGY", "drinks")

        assert get_config().search.default_strategy == "drinks"

    def test_invalid_default_strategy(self, monkeypatch):
        monkeypatch.setenv("SEARCH_DEFAULT_STRATEGY", "fuzzy")

        with pytest.raises(ConfigError):
            get_config()

    def test_effective_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.delenv("DEBUG", raising=False)

        assert get_config().effective_log_level == "WARNING"

        reset_config()
        monkeypatch.setenv("DEBUG", "1")

        assert get_config().effective_log_level == "DEBUG"
