"""Unit tests for configuration loading."""

import pytest

from solana_wrapped.config import (
    HeliusConfig,
    WrappedConfig,
    get_env_var,
    get_helius_config,
    get_wrapped_config,
    page_size_validator,
    positive_int_validator,
    url_validator,
)
from solana_wrapped.utils.errors import ConfigurationError


@pytest.fixture
def clear_config_cache():
    """Reset the cached config factories around a test."""
    get_helius_config.cache_clear()
    get_wrapped_config.cache_clear()
    yield
    get_helius_config.cache_clear()
    get_wrapped_config.cache_clear()


def test_get_env_var_default(monkeypatch):
    monkeypatch.delenv("WRAPPED_TEST_VALUE", raising=False)
    assert get_env_var("WRAPPED_TEST_VALUE", "fallback") == "fallback"


def test_get_env_var_required(monkeypatch):
    monkeypatch.delenv("WRAPPED_TEST_VALUE", raising=False)
    with pytest.raises(ConfigurationError):
        get_env_var("WRAPPED_TEST_VALUE", required=True)


def test_get_env_var_validation_failure(monkeypatch):
    monkeypatch.setenv("WRAPPED_TEST_VALUE", "abc")
    with pytest.raises(ConfigurationError, match="WRAPPED_TEST_VALUE"):
        get_env_var("WRAPPED_TEST_VALUE", validator=positive_int_validator)


def test_validators():
    assert url_validator("https://mainnet.helius-rpc.com/") == "https://mainnet.helius-rpc.com"
    assert page_size_validator("50") == 50
    with pytest.raises(ValueError):
        page_size_validator("101")
    with pytest.raises(ValueError):
        url_validator("not a url")


def test_require_api_key():
    with pytest.raises(ConfigurationError, match="HELIUS_API_KEY not configured"):
        HeliusConfig().require_api_key()
    assert HeliusConfig(api_key="abc").require_api_key() == "abc"


def test_wrapped_config_validation():
    assert WrappedConfig().year_start_timestamp == 1735689600
    with pytest.raises(ConfigurationError):
        WrappedConfig(page_size=0)
    with pytest.raises(ConfigurationError):
        WrappedConfig(max_pages=0)
    with pytest.raises(ConfigurationError):
        WrappedConfig(page_delay_seconds=-1)


def test_configs_from_environment(monkeypatch, clear_config_cache):
    monkeypatch.setenv("HELIUS_API_KEY", "env-key")
    monkeypatch.setenv("HELIUS_RPC_URL", "https://rpc.example.com/")
    monkeypatch.setenv("WRAPPED_YEAR", "2024")
    monkeypatch.setenv("WRAPPED_MAX_PAGES", "7")
    monkeypatch.setenv("WRAPPED_PAGE_DELAY", "0.5")

    helius = get_helius_config()
    wrapped = get_wrapped_config()

    assert helius.api_key == "env-key"
    assert helius.rpc_url == "https://rpc.example.com"
    assert wrapped.year == 2024
    assert wrapped.year_start_timestamp == 1704067200
    assert wrapped.max_pages == 7
    assert wrapped.page_delay_seconds == 0.5
    assert wrapped.page_size == 100


def test_invalid_page_size_from_environment(monkeypatch, clear_config_cache):
    monkeypatch.setenv("WRAPPED_PAGE_SIZE", "500")
    with pytest.raises(ConfigurationError, match="WRAPPED_PAGE_SIZE"):
        get_wrapped_config()
