"""
============================================================================
bigson - Magnitude Adapter
============================================================================

Thin adapter over the arithmetic types bigson wraps:
- int: exact, unbounded signed integers
- decimal.Decimal: exact decimal construction from numerals

Conversions between int and base-10 text go through Decimal so that the
interpreter's integer string-conversion digit limit never applies.

Parsers return (magnitude, ok) pairs and never raise for bad input.

============================================================================
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple
import re

from bigson.config import is_supported_base

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Fixed-point or exponential decimal numeral, ASCII digits only
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}

_FORMAT_SPECS = {2: "b", 8: "o", 16: "x"}

MIN_FORMAT_BASE = 2
MAX_FORMAT_BASE = 36

# Below the smallest digit limit the interpreter accepts (640)
_PARSE_CHUNK_DIGITS = 512


# =============================================================================
# Integer Parsing
# =============================================================================

def _split_sign(text: str) -> Tuple[int, str]:
    if text[:1] == "-":
        return -1, text[1:]
    if text[:1] == "+":
        return 1, text[1:]
    return 1, text


def _is_digits(text: str, base: int) -> bool:
    # lower() maps some non-ASCII letters (KELVIN SIGN) onto ASCII digits
    if not text or not text.isascii():
        return False
    allowed = _DIGITS[:base]
    return all(ch in allowed for ch in text.lower())


def _strip_separators(text: str, base: int, prefixed: bool) -> Optional[str]:
    """
    Remove '_' separators from a base-0 literal body.

    A separator may sit between two digits, or between a prefix and the
    first digit. Returns None if the layout is invalid.
    """
    if prefixed and text.startswith("_"):
        text = text[1:]
    groups = text.split("_")
    if not all(_is_digits(group, base) for group in groups):
        return None
    return "".join(groups)


def _detect_prefix(body: str) -> Tuple[int, str, bool]:
    lowered = body[:2].lower()
    if lowered in _PREFIXES:
        return _PREFIXES[lowered], body[2:], True
    if len(body) > 1 and body[0] == "0":
        return 8, body[1:], True
    return 10, body, False


def _digits_to_int(digits: str, base: int) -> int:
    if base == 10:
        return int(Decimal(digits))
    if base & (base - 1) == 0:
        return int(digits, base)

    # int(str, base) is capped by the digit limit for other bases
    value = 0
    for start in range(0, len(digits), _PARSE_CHUNK_DIGITS):
        chunk = digits[start:start + _PARSE_CHUNK_DIGITS]
        value = value * base ** len(chunk) + int(chunk, base)
    return value


def parse_int(text: str, base: int = 10) -> Tuple[Optional[int], bool]:
    """
    Parse an integer numeral.

    Base 0 detects 0x/0o/0b prefixes (a bare leading 0 means octal) and
    accepts single underscores between digits. Any explicit base accepts
    an optional sign followed by digits of that base only.

    Args:
        text: Numeral to parse
        base: 0, or an explicit base between 2 and 36

    Returns:
        (magnitude, True) on success, (None, False) on malformed input

    Raises:
        ValueError: If base is not supported
    """
    if not is_supported_base(base):
        raise ValueError(f"unsupported base: {base}")

    sign, body = _split_sign(text)

    if base == 0:
        base, body, prefixed = _detect_prefix(body)
        digits = _strip_separators(body, base, prefixed)
        if digits is None:
            return None, False
    elif _is_digits(body, base):
        digits = body
    else:
        return None, False

    return sign * _digits_to_int(digits, base), True


# =============================================================================
# Decimal Parsing
# =============================================================================

def parse_decimal(text: str) -> Tuple[Optional[Decimal], bool]:
    """
    Parse a fixed-point or exponential decimal numeral exactly.

    Whitespace, underscores, non-ASCII digits, inf and nan are rejected.
    """
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None, False
    try:
        value = Decimal(text)
    except (InvalidOperation, ValueError):
        return None, False
    if not value.is_finite():
        return None, False
    return value, True


# =============================================================================
# Formatting
# =============================================================================

def format_int(value: int, base: int = 10) -> str:
    """Format an integer in the given base (2..36), lowercase digits."""
    if not MIN_FORMAT_BASE <= base <= MAX_FORMAT_BASE:
        raise ValueError(f"unsupported base: {base}")

    if base == 10:
        return format(Decimal(value), "f")
    if base in _FORMAT_SPECS:
        return format(value, _FORMAT_SPECS[base])

    if value == 0:
        return "0"
    remaining = abs(value)
    digits = []
    while remaining:
        remaining, digit = divmod(remaining, base)
        digits.append(_DIGITS[digit])
    if value < 0:
        digits.append("-")
    return "".join(reversed(digits))


def format_decimal(value: Decimal) -> str:
    """
    Format a finite Decimal as fixed-point with the minimal digits.

    No exponent, no trailing fractional zeros, no trailing point, and
    negative zero renders as "0".
    """
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def decimal_from_float(value: float) -> Decimal:
    """
    Shortest decimal that round-trips the given double.

    Raises:
        ValueError: If value is NaN or infinite
    """
    result = Decimal(repr(float(value)))
    if not result.is_finite():
        raise ValueError(f"cannot wrap non-finite float: {value!r}")
    return result


# =============================================================================
# Arithmetic
# =============================================================================

def add(left: int, right: int) -> int:
    return left + right


def sub(left: int, right: int) -> int:
    return left - right


def compare(left, right) -> int:
    """Three-way comparison: -1, 0 or 1."""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


__all__ = [
    "parse_int",
    "parse_decimal",
    "format_int",
    "format_decimal",
    "decimal_from_float",
    "add",
    "sub",
    "compare",
]
