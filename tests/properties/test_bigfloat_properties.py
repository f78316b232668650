# ============================================================================
# bigson - Property-Based Tests for BigFloat
# ============================================================================
#
# Test Framework: Hypothesis (Property-Based Testing)
# Minimum Iterations: 100 per property
#
# Properties Covered:
#   1. Text round trip preserves the numeric value
#   2. Encoded text is fixed-point with minimal digits
#   3. Native floats encode as their shortest representation
#   4. Document decode absorbs malformed numerals
#
# ============================================================================

from decimal import Decimal
import os
import re
import sys

import pytest
from hypothesis import given, settings, strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from bigson import (
    BigFloat,
    BigsonConfig,
    BsonType,
    MalformedNumeralError,
    reset_bigson_config,
    set_bigson_config,
)
from bigson.magnitude import parse_decimal
from bigson.wire import encode_string_value

FIXED_POINT = re.compile(r"-?(0|[1-9][0-9]*)(\.[0-9]*[1-9])?")

finite_decimals = st.decimals(
    min_value=Decimal("-1e40"),
    max_value=Decimal("1e40"),
    allow_nan=False,
    allow_infinity=False,
)

finite_floats = st.floats(allow_nan=False, allow_infinity=False)

malformed_decimals = st.text(
    alphabet="0123456789eE+-.,_ xq", min_size=1, max_size=30
).filter(lambda text: parse_decimal(text)[1] is False)


@pytest.fixture(autouse=True)
def default_config():
    set_bigson_config(BigsonConfig(log_fallbacks=False))
    yield
    reset_bigson_config()


# ============================================================================
# Property 1: Text round trip preserves value
# ============================================================================

@settings(max_examples=100)
@given(finite_decimals)
def test_text_round_trip_preserves_value(value: Decimal):
    parsed, ok = BigFloat.from_string(str(value))
    assert ok

    decoded = BigFloat()
    decoded.unmarshal_text(parsed.marshal_text())

    assert decoded.magnitude == value


@settings(max_examples=100)
@given(finite_decimals)
def test_document_round_trip_preserves_value(value: Decimal):
    decoded = BigFloat()
    decoded.unmarshal_bson_value(*BigFloat(value).marshal_bson_value())

    assert decoded.magnitude == value


# ============================================================================
# Property 2: Fixed-point, minimal digits
# ============================================================================

@settings(max_examples=100)
@given(finite_decimals)
def test_encoding_is_minimal_fixed_point(value: Decimal):
    text = BigFloat(value).marshal_text().decode("ascii")

    assert FIXED_POINT.fullmatch(text), text
    assert text != "-0"


# ============================================================================
# Property 3: Native floats
# ============================================================================

@settings(max_examples=100)
@given(finite_floats)
def test_from_float_encodes_shortest_round_trip(value: float):
    text = BigFloat.from_float(value).marshal_text().decode("ascii")

    assert float(text) == value
    assert Decimal(text) == Decimal(repr(value))


# ============================================================================
# Property 4: Decode policies for malformed numerals
# ============================================================================

@settings(max_examples=100)
@given(finite_decimals, malformed_decimals)
def test_malformed_text_raises(start: Decimal, text: str):
    value = BigFloat(start)

    with pytest.raises(MalformedNumeralError):
        value.unmarshal_text(text)

    assert value.magnitude == 0


@settings(max_examples=100)
@given(finite_decimals, malformed_decimals)
def test_malformed_document_is_zero_without_error(start: Decimal, text: str):
    value = BigFloat(start)

    value.unmarshal_bson_value(BsonType.STRING, encode_string_value(text))

    assert value.magnitude == 0
