"""
============================================================================
bigson - Error Taxonomy
============================================================================

Every failure raised by bigson carries an error code so that log lines and
exception messages can be correlated:

ERROR CODES:
    - BIG-001: Malformed numeral (input does not parse as integer/decimal)
    - BIG-002: Wire type mismatch (document value is not a BSON string)
    - BIG-003: Unset magnitude (recovered locally, never raised)
    - BIG-010: Configuration invalid

POLICY:
    - Text decode and from_string surface BIG-001 to the caller
    - Document decode absorbs BIG-001 and substitutes zero
    - BIG-002 is always raised
    - BIG-003 is only ever logged

============================================================================
"""

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

class BigsonErrorCode:
    """bigson error codes for audit logging."""
    MALFORMED_NUMERAL = "BIG-001"
    WIRE_TYPE_MISMATCH = "BIG-002"
    UNSET_MAGNITUDE = "BIG-003"
    CONFIG_INVALID = "BIG-010"


# =============================================================================
# Exceptions
# =============================================================================

class BigsonError(Exception):
    """
    Base exception for all bigson failures.

    Args:
        message: Human-readable error message
        error_code: bigson error code prefixed to the message
    """

    def __init__(self, message: str, error_code: str):
        self.error_code = error_code
        self.message = message
        super().__init__(f"[{error_code}] {message}")


class MalformedNumeralError(BigsonError, ValueError):
    """
    Raised when bytes do not parse as a numeral of the expected kind.

    The value being decoded into has already been reset to zero when this
    is raised.
    """

    def __init__(self, message: str, text: Optional[str] = None):
        self.text = text
        super().__init__(message, BigsonErrorCode.MALFORMED_NUMERAL)


class WireTypeMismatchError(BigsonError, TypeError):
    """Raised when a document value cannot be interpreted as a BSON string."""

    def __init__(self, message: str, bson_type: Optional[int] = None):
        self.bson_type = bson_type
        super().__init__(message, BigsonErrorCode.WIRE_TYPE_MISMATCH)


class BigsonConfigurationError(BigsonError):
    """Raised by BigsonConfig.validate() when configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(message, BigsonErrorCode.CONFIG_INVALID)


__all__ = [
    "BigsonErrorCode",
    "BigsonError",
    "MalformedNumeralError",
    "WireTypeMismatchError",
    "BigsonConfigurationError",
]
