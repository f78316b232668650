"""
============================================================================
bigson - BigFloat
============================================================================

Arbitrary-precision decimal that crosses serialization boundaries without
precision loss. Both codecs emit fixed-point text with the minimal digits:
no exponent, no trailing zeros ("0.1", never "1e-1" or "0.10").

DECODE POLICY:
    - unmarshal_text: malformed input -> value becomes 0 AND BIG-001 raised
    - unmarshal_bson_value: non-string value -> BIG-002 raised, value kept
    - unmarshal_bson_value: malformed numeral -> value becomes 0, no error

BigFloat exposes no arithmetic.

============================================================================
"""

from decimal import Decimal
from typing import Optional, Tuple, Union
import logging

from bigson import magnitude
from bigson.codec import TextInput, decode_decimal_document, decode_decimal_text
from bigson.config import get_bigson_config
from bigson.errors import BigsonErrorCode, MalformedNumeralError
from bigson.wire import BsonType, encode_string_value

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

_ZERO_TEXT = "0"


def _check_decimal(value: Union[Decimal, int]) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise TypeError(
            f"expected Decimal or int, got {type(value).__name__}; "
            f"use BigFloat.from_float for floats"
        )
    result = Decimal(value)
    if not result.is_finite():
        raise ValueError(f"cannot wrap non-finite decimal: {value!r}")
    return result


# =============================================================================
# BigFloat Class
# =============================================================================

class BigFloat:
    """
    Arbitrary-precision decimal wrapper.

    Args:
        value: Decimal (or int) magnitude to wrap; None leaves the value unset
    """

    __slots__ = ("_magnitude",)

    def __init__(self, value: Optional[Union[Decimal, int]] = None):
        self._magnitude: Optional[Decimal] = None if value is None else _check_decimal(value)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_float(cls, value: float) -> "BigFloat":
        """
        Wrap a native double as the shortest decimal that round-trips it.

        BigFloat.from_float(0.1) holds exactly Decimal("0.1").

        Raises:
            ValueError: If value is NaN or infinite
        """
        if isinstance(value, bool):
            raise TypeError("expected float, got bool")
        return cls(magnitude.decimal_from_float(value))

    @classmethod
    def from_string(cls, text: str) -> Tuple[Optional["BigFloat"], bool]:
        """
        Parse a fixed-point or exponential decimal numeral.

        Returns:
            (BigFloat, True) on success, (None, False) on malformed input
        """
        value, ok = magnitude.parse_decimal(text)
        if not ok:
            return None, False
        return cls(value), True

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def is_unset(self) -> bool:
        """True while the value has never been assigned a magnitude."""
        return self._magnitude is None

    @property
    def magnitude(self) -> Decimal:
        """The wrapped Decimal; Decimal(0) while unset."""
        if self._magnitude is None:
            return Decimal(0)
        return self._magnitude

    def _encoded(self) -> str:
        if self._magnitude is None:
            logger.debug(
                f"[{BigsonErrorCode.UNSET_MAGNITUDE}] Encoding unset BigFloat as {_ZERO_TEXT!r}"
            )
            return _ZERO_TEXT
        return magnitude.format_decimal(self._magnitude)

    # -------------------------------------------------------------------------
    # Text codec
    # -------------------------------------------------------------------------

    def marshal_text(self) -> bytes:
        """Encode as fixed-point ASCII text. Never fails."""
        return self._encoded().encode("ascii")

    def unmarshal_text(self, data: TextInput) -> None:
        """
        Decode text into this value, overwriting it.

        Raises:
            MalformedNumeralError: If data is not a decimal numeral; the
                value has been set to zero (BIG-001)
        """
        result = decode_decimal_text(data)
        self._magnitude = result.or_zero()
        if not result.success:
            logger.warning(
                f"[{result.error_code}] BigFloat text decode failed, value reset to zero | "
                f"error={result.error_message}"
            )
            raise MalformedNumeralError(result.error_message, text=result.text)

    # -------------------------------------------------------------------------
    # Document codec
    # -------------------------------------------------------------------------

    def marshal_bson_value(self) -> Tuple[int, bytes]:
        """Encode as a BSON string value. Never fails."""
        return BsonType.STRING, encode_string_value(self._encoded())

    def unmarshal_bson_value(self, bson_type: int, data: bytes) -> None:
        """
        Decode a BSON string value into this value, overwriting it.

        Unparseable numerals silently become zero.

        Raises:
            WireTypeMismatchError: If the value is not a BSON string (BIG-002)
        """
        result = decode_decimal_document(bson_type, data)
        if not result.success and get_bigson_config().log_fallbacks:
            logger.warning(
                f"[{result.error_code}] BigFloat document decode fell back to zero | "
                f"error={result.error_message}"
            )
        self._magnitude = result.or_zero()

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self._encoded()

    def __repr__(self) -> str:
        if self._magnitude is None:
            return "BigFloat()"
        return f"BigFloat('{self._encoded()}')"

    def __hash__(self) -> int:
        return hash(self.magnitude)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BigFloat):
            return NotImplemented
        return self.magnitude == other.magnitude


__all__ = ["BigFloat"]
