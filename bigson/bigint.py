"""
============================================================================
bigson - BigInt
============================================================================

Arbitrary-precision integer that crosses serialization boundaries without
precision loss:
- Text codec: base-10 digits, used by JSON-like text marshaling
- Document codec: BSON string value holding the base-10 digits

DECODE POLICY:
    - unmarshal_text: malformed input -> value becomes 0 AND BIG-001 raised
    - unmarshal_bson_value: non-string value -> BIG-002 raised, value kept
    - unmarshal_bson_value: malformed digits -> value becomes 0, no error

A bare BigInt() is the unset state. It behaves as zero and encodes as "0".

ERROR CODES:
    - BIG-001: Malformed numeral
    - BIG-002: Wire type mismatch
    - BIG-003: Unset magnitude encoded as "0"

============================================================================
"""

from typing import Optional, Tuple
import logging

from bigson import magnitude
from bigson.codec import TextInput, decode_int_document, decode_int_text
from bigson.config import get_bigson_config
from bigson.errors import BigsonErrorCode, MalformedNumeralError
from bigson.wire import BsonType, encode_string_value

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1

_ZERO_TEXT = "0"


def _check_int(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


# =============================================================================
# BigInt Class
# =============================================================================

class BigInt:
    """
    Arbitrary-precision signed integer wrapper.

    Args:
        value: Magnitude to wrap; None leaves the value unset
    """

    __slots__ = ("_magnitude",)

    def __init__(self, value: Optional[int] = None):
        self._magnitude: Optional[int] = None if value is None else _check_int(value)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_int64(cls, value: int) -> "BigInt":
        """
        Wrap a signed 64-bit machine integer.

        Raises:
            ValueError: If value is outside the signed 64-bit range
        """
        _check_int(value)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"value out of int64 range: {value}")
        return cls(value)

    @classmethod
    def from_uint64(cls, value: int) -> "BigInt":
        """
        Wrap an unsigned 64-bit machine integer.

        Raises:
            ValueError: If value is outside the unsigned 64-bit range
        """
        _check_int(value)
        if not 0 <= value <= UINT64_MAX:
            raise ValueError(f"value out of uint64 range: {value}")
        return cls(value)

    @classmethod
    def from_string(cls, text: str, base: int = 10) -> Tuple[Optional["BigInt"], bool]:
        """
        Parse a numeral in the given base.

        Callers must check the flag before using the value.

        Args:
            text: Numeral to parse
            base: 0 (prefix-aware) or 2..36 (default: 10)

        Returns:
            (BigInt, True) on success, (None, False) on malformed input
        """
        value, ok = magnitude.parse_int(text, base)
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
    def magnitude(self) -> int:
        """The wrapped integer; 0 while unset."""
        if self._magnitude is None:
            return 0
        return self._magnitude

    def text(self, base: int = 10) -> str:
        """Format the magnitude in the given base."""
        return magnitude.format_int(self.magnitude, base)

    # -------------------------------------------------------------------------
    # Text codec
    # -------------------------------------------------------------------------

    def _encoded(self) -> str:
        if self._magnitude is None:
            logger.debug(
                f"[{BigsonErrorCode.UNSET_MAGNITUDE}] Encoding unset BigInt as {_ZERO_TEXT!r}"
            )
            return _ZERO_TEXT
        return magnitude.format_int(self._magnitude)

    def marshal_text(self) -> bytes:
        """Encode as base-10 ASCII digits. Never fails."""
        return self._encoded().encode("ascii")

    def unmarshal_text(self, data: TextInput) -> None:
        """
        Decode text into this value, overwriting it.

        Raises:
            MalformedNumeralError: If data is not an integer numeral; the
                value has been set to zero (BIG-001)
        """
        result = decode_int_text(data, get_bigson_config().text_int_base)
        self._magnitude = result.or_zero()
        if not result.success:
            logger.warning(
                f"[{result.error_code}] BigInt text decode failed, value reset to zero | "
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

        Unparseable digits silently become zero.

        Raises:
            WireTypeMismatchError: If the value is not a BSON string; the
                value is left untouched (BIG-002)
        """
        result = decode_int_document(bson_type, data)
        if not result.success and get_bigson_config().log_fallbacks:
            logger.warning(
                f"[{result.error_code}] BigInt document decode fell back to zero | "
                f"error={result.error_message}"
            )
        self._magnitude = result.or_zero()

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self.magnitude

    def __str__(self) -> str:
        return self._encoded()

    def __repr__(self) -> str:
        if self._magnitude is None:
            return "BigInt()"
        return f"BigInt({self._encoded()})"

    def __hash__(self) -> int:
        return hash(self.magnitude)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) >= 0

    def __add__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return sub(self, other)


# =============================================================================
# Arithmetic
# =============================================================================

def add(left: BigInt, right: BigInt) -> BigInt:
    """Exact sum left + right as a new value."""
    return BigInt(magnitude.add(left.magnitude, right.magnitude))


def sub(left: BigInt, right: BigInt) -> BigInt:
    """Exact difference left - right as a new value."""
    return BigInt(magnitude.sub(left.magnitude, right.magnitude))


def compare(left: BigInt, right: BigInt) -> int:
    """Three-way comparison of magnitudes: -1, 0 or 1."""
    return magnitude.compare(left.magnitude, right.magnitude)


__all__ = [
    "BigInt",
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
    "add",
    "sub",
    "compare",
]
