"""
Unit Tests for bigson Configuration Parsing

Tests the configuration module:
- Default values
- Custom values from environment variables
- Invalid values fall back to defaults or fail with BIG-010
"""

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from bigson.config import (
    BigsonConfig,
    DEFAULT_LOG_FALLBACKS,
    DEFAULT_TEXT_INT_BASE,
    get_bigson_config,
    reset_bigson_config,
    set_bigson_config,
)
from bigson.errors import BigsonConfigurationError, BigsonErrorCode


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_environment():
    """
    Clean environment variables before and after each test.
    """
    original_env = {}
    env_vars = [
        "BIGSON_TEXT_INT_BASE",
        "BIGSON_LOG_FALLBACKS",
    ]

    for var in env_vars:
        original_env[var] = os.environ.get(var)
        if var in os.environ:
            del os.environ[var]

    reset_bigson_config()

    yield

    for var, value in original_env.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]

    reset_bigson_config()


# =============================================================================
# Test Default Values
# =============================================================================

class TestDefaultValues:

    def test_default_text_base_is_prefix_aware(self) -> None:
        assert DEFAULT_TEXT_INT_BASE == 0

    def test_default_log_fallbacks_is_true(self) -> None:
        assert DEFAULT_LOG_FALLBACKS is True

    def test_dataclass_defaults(self) -> None:
        config = BigsonConfig()
        assert config.text_int_base == 0
        assert config.log_fallbacks is True

    def test_from_environment_uses_defaults_when_not_set(self) -> None:
        config = BigsonConfig.from_environment()
        assert config.to_dict() == {"text_int_base": 0, "log_fallbacks": True}


# =============================================================================
# Test Environment Parsing
# =============================================================================

class TestEnvironmentParsing:

    def test_custom_values(self) -> None:
        os.environ["BIGSON_TEXT_INT_BASE"] = " 10 "
        os.environ["BIGSON_LOG_FALLBACKS"] = "off"

        config = BigsonConfig.from_environment()

        assert config.text_int_base == 10
        assert config.log_fallbacks is False

    @pytest.mark.parametrize("raw", ["true", "1", "YES", "on"])
    def test_truthy_log_fallbacks(self, raw: str) -> None:
        os.environ["BIGSON_LOG_FALLBACKS"] = raw
        assert BigsonConfig.from_environment().log_fallbacks is True

    def test_non_numeric_base_uses_default(self) -> None:
        os.environ["BIGSON_TEXT_INT_BASE"] = "hex"
        config = BigsonConfig.from_environment()
        assert config.text_int_base == DEFAULT_TEXT_INT_BASE

    def test_out_of_range_base_fails_validation(self) -> None:
        os.environ["BIGSON_TEXT_INT_BASE"] = "1"

        with pytest.raises(BigsonConfigurationError) as exc_info:
            BigsonConfig.from_environment()

        assert exc_info.value.error_code == BigsonErrorCode.CONFIG_INVALID
        assert "BIG-010" in str(exc_info.value)

    def test_out_of_range_base_loads_without_validation(self) -> None:
        os.environ["BIGSON_TEXT_INT_BASE"] = "64"
        config = BigsonConfig.from_environment(validate=False)
        assert config.text_int_base == 64


# =============================================================================
# Test Global Instance
# =============================================================================

class TestGlobalInstance:

    def test_get_is_cached_until_reset(self) -> None:
        first = get_bigson_config()
        assert get_bigson_config() is first

        reset_bigson_config()
        assert get_bigson_config() is not first

    def test_set_installs_validated_instance(self) -> None:
        config = BigsonConfig(text_int_base=16)
        set_bigson_config(config)
        assert get_bigson_config() is config

    def test_set_rejects_invalid_instance(self) -> None:
        with pytest.raises(BigsonConfigurationError):
            set_bigson_config(BigsonConfig(text_int_base=37))

    def test_validate_rejects_bool_base(self) -> None:
        with pytest.raises(BigsonConfigurationError):
            BigsonConfig(text_int_base=True).validate()
