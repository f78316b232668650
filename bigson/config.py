"""
============================================================================
bigson - Configuration
============================================================================

This module provides configuration management for bigson codecs:
- Environment variable parsing with type safety
- Default values for every option
- Validation with BIG-010 on invalid values

ENVIRONMENT VARIABLES:
    - BIGSON_TEXT_INT_BASE: Base used when decoding BigInt text
      (default: 0, prefix-aware; 10 for strict decimal)
    - BIGSON_LOG_FALLBACKS: Log a warning when document decode substitutes
      zero for an unparseable numeral (default: true)

A .env file in the working directory is honoured through python-dotenv.

ERROR CODES:
    - BIG-010: Configuration invalid

============================================================================
"""

from dataclasses import dataclass
from typing import List, Optional
import logging
import os

from dotenv import load_dotenv

from bigson.errors import BigsonConfigurationError, BigsonErrorCode

# Load environment variables
load_dotenv()

# Configure module logger
logger = logging.getLogger(__name__)


# =============================================================================
# Default Values
# =============================================================================

# Default: detect 0x / 0o / 0b / 0 prefixes, underscores between digits
DEFAULT_TEXT_INT_BASE = 0

# Default: document-decode zero fallbacks are logged
DEFAULT_LOG_FALLBACKS = True

MIN_EXPLICIT_BASE = 2
MAX_EXPLICIT_BASE = 36


def is_supported_base(base: int) -> bool:
    """Return True for base 0 (prefix-aware) or an explicit base in 2..36."""
    return base == 0 or MIN_EXPLICIT_BASE <= base <= MAX_EXPLICIT_BASE


# =============================================================================
# BigsonConfig Class
# =============================================================================

@dataclass
class BigsonConfig:
    """
    bigson codec configuration.

    ============================================================================
    CONFIGURATION PARAMETERS:
    ============================================================================
    - text_int_base: Base for BigInt.unmarshal_text (default: 0)
    - log_fallbacks: Log document-decode zero substitutions (default: True)
    ============================================================================

    Document decoding always parses base 10 regardless of text_int_base.
    """

    text_int_base: int = DEFAULT_TEXT_INT_BASE
    log_fallbacks: bool = DEFAULT_LOG_FALLBACKS

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            BigsonConfigurationError: If any value is out of range (BIG-010)
        """
        errors: List[str] = []

        if isinstance(self.text_int_base, bool) or not isinstance(self.text_int_base, int):
            errors.append(
                f"BIGSON_TEXT_INT_BASE must be an integer, got: {self.text_int_base!r}"
            )
        elif not is_supported_base(self.text_int_base):
            errors.append(
                f"BIGSON_TEXT_INT_BASE must be 0 or between "
                f"{MIN_EXPLICIT_BASE} and {MAX_EXPLICIT_BASE}, got: {self.text_int_base}"
            )

        if errors:
            error_msg = "bigson configuration validation failed: " + "; ".join(errors)
            logger.error(f"[{BigsonErrorCode.CONFIG_INVALID}] {error_msg}")
            raise BigsonConfigurationError(error_msg)

        logger.info(
            f"[BIGSON-CONFIG] Configuration validated | "
            f"text_int_base={self.text_int_base} | "
            f"log_fallbacks={self.log_fallbacks}"
        )

    @classmethod
    def from_environment(cls, validate: bool = True) -> "BigsonConfig":
        """
        Load configuration from environment variables.

        Malformed values are replaced by their defaults with a warning.

        Args:
            validate: Whether to validate configuration after loading

        Returns:
            BigsonConfig instance with values from environment

        Raises:
            BigsonConfigurationError: If validation is requested and fails
        """
        base_str = os.environ.get("BIGSON_TEXT_INT_BASE", str(DEFAULT_TEXT_INT_BASE))
        try:
            text_int_base = int(base_str.strip())
        except ValueError:
            logger.warning(
                f"[BIGSON-CONFIG] Invalid BIGSON_TEXT_INT_BASE value: {base_str}, "
                f"using default: {DEFAULT_TEXT_INT_BASE}"
            )
            text_int_base = DEFAULT_TEXT_INT_BASE

        fallbacks_str = os.environ.get("BIGSON_LOG_FALLBACKS", "true").lower().strip()
        log_fallbacks = fallbacks_str in ("true", "1", "yes", "on")

        logger.info(
            f"[BIGSON-CONFIG] Loading configuration from environment | "
            f"BIGSON_TEXT_INT_BASE={text_int_base} | "
            f"BIGSON_LOG_FALLBACKS={log_fallbacks}"
        )

        config = cls(text_int_base=text_int_base, log_fallbacks=log_fallbacks)

        if validate:
            config.validate()

        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary for logging."""
        return {
            "text_int_base": self.text_int_base,
            "log_fallbacks": self.log_fallbacks,
        }


# =============================================================================
# Module-Level Configuration Instance
# =============================================================================

_config_instance: Optional[BigsonConfig] = None


def get_bigson_config() -> BigsonConfig:
    """
    Get the global bigson configuration instance.

    Loaded from the environment on first access.

    Raises:
        BigsonConfigurationError: If the environment holds an invalid base
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = BigsonConfig.from_environment(validate=True)

    return _config_instance


def set_bigson_config(config: BigsonConfig) -> None:
    """Install an explicit configuration instance after validating it."""
    global _config_instance
    config.validate()
    _config_instance = config


def reset_bigson_config() -> None:
    """Clear the global configuration instance so the next access reloads it."""
    global _config_instance
    _config_instance = None
    logger.debug("[BIGSON-CONFIG] Configuration instance reset")


__all__ = [
    "BigsonConfig",
    "DEFAULT_TEXT_INT_BASE",
    "DEFAULT_LOG_FALLBACKS",
    "is_supported_base",
    "get_bigson_config",
    "set_bigson_config",
    "reset_bigson_config",
]
