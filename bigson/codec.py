"""
============================================================================
bigson - Pure Decoders
============================================================================

Decoding is modelled as pure functions returning a DecodeResult instead of
mutating a value in place. Callers that need the zero-fallback behaviour
call DecodeResult.or_zero() explicitly.

TEXT vs DOCUMENT:
    - Text decoders use the caller-supplied base (BigInt) and leave the
      failure for the caller to surface
    - Document decoders validate the wire tag first (raising BIG-002) and
      always parse base 10; their callers absorb a BIG-001 result as zero

ERROR CODES:
    - BIG-001: Malformed numeral (returned in DecodeResult)
    - BIG-002: Wire type mismatch (raised by bigson.wire)

============================================================================
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from bigson.errors import BigsonErrorCode
from bigson.magnitude import parse_decimal, parse_int
from bigson.wire import read_string_value

Magnitude = Union[int, Decimal]
TextInput = Union[bytes, bytearray, memoryview, str]

# Base used for numerals stored in documents
DOCUMENT_INT_BASE = 10


# =============================================================================
# Result Dataclass
# =============================================================================

@dataclass
class DecodeResult:
    """
    Result of a decode operation.

    value is set only when success is True; zero is the magnitude a caller
    substitutes on failure.
    """
    success: bool
    value: Optional[Magnitude]
    error_code: Optional[str]
    error_message: Optional[str]
    text: Optional[str]
    zero: Magnitude = 0

    def or_zero(self) -> Magnitude:
        """Return the decoded magnitude, or zero if decoding failed."""
        if self.success:
            return self.value
        return self.zero


def _to_text(data: TextInput) -> Optional[str]:
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("ascii")
    except UnicodeDecodeError:
        return None


def _malformed(kind: str, text: Optional[str], raw: TextInput, zero: Magnitude) -> DecodeResult:
    shown = repr(text) if text is not None else repr(bytes(raw))
    return DecodeResult(
        success=False,
        value=None,
        error_code=BigsonErrorCode.MALFORMED_NUMERAL,
        error_message=f"cannot unmarshal {shown} into a {kind}",
        text=text,
        zero=zero,
    )


# =============================================================================
# Text Decoders
# =============================================================================

def decode_int_text(data: TextInput, base: int = 0) -> DecodeResult:
    """
    Decode integer text.

    Raises:
        ValueError: If base is not 0 or 2..36
    """
    text = _to_text(data)
    if text is not None:
        value, ok = parse_int(text, base)
        if ok:
            return DecodeResult(True, value, None, None, text)
    return _malformed("BigInt", text, data, 0)


def decode_decimal_text(data: TextInput) -> DecodeResult:
    """Decode fixed-point or exponential decimal text."""
    text = _to_text(data)
    if text is not None:
        value, ok = parse_decimal(text)
        if ok:
            return DecodeResult(True, value, None, None, text, zero=Decimal(0))
    return _malformed("BigFloat", text, data, Decimal(0))


# =============================================================================
# Document Decoders
# =============================================================================

def decode_int_document(bson_type: int, data: bytes) -> DecodeResult:
    """
    Decode a BSON string value holding a base-10 integer.

    Raises:
        WireTypeMismatchError: If the value is not a BSON string (BIG-002)
    """
    text = read_string_value(bson_type, data)
    value, ok = parse_int(text, DOCUMENT_INT_BASE)
    if not ok:
        return _malformed("BigInt", text, data, 0)
    return DecodeResult(True, value, None, None, text)


def decode_decimal_document(bson_type: int, data: bytes) -> DecodeResult:
    """
    Decode a BSON string value holding a decimal numeral.

    Raises:
        WireTypeMismatchError: If the value is not a BSON string (BIG-002)
    """
    text = read_string_value(bson_type, data)
    value, ok = parse_decimal(text)
    if not ok:
        return _malformed("BigFloat", text, data, Decimal(0))
    return DecodeResult(True, value, None, None, text, zero=Decimal(0))


__all__ = [
    "DecodeResult",
    "DOCUMENT_INT_BASE",
    "decode_int_text",
    "decode_decimal_text",
    "decode_int_document",
    "decode_decimal_document",
]
