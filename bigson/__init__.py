# ============================================================================
# bigson v1.0.0
# Arbitrary-precision numbers for text and BSON serialization
# ============================================================================
#
# Components:
#   - BigInt: Arbitrary-precision integer with text/BSON codecs and arithmetic
#   - BigFloat: Arbitrary-precision decimal with text/BSON codecs
#   - DecodeResult: Pure decode outcome with explicit zero fallback
#   - BigsonJSONEncoder / bigson_codec_options: serializer integration
#
# Decode policy:
#   - Text decode reports malformed numerals (BIG-001)
#   - Document decode absorbs malformed numerals as zero
#   - Non-string document values are always rejected (BIG-002)
#
# ============================================================================

from bigson.bigint import BigInt, add, sub, compare
from bigson.bigfloat import BigFloat
from bigson.codec import (
    DecodeResult,
    decode_int_text,
    decode_decimal_text,
    decode_int_document,
    decode_decimal_document,
)
from bigson.config import (
    BigsonConfig,
    get_bigson_config,
    set_bigson_config,
    reset_bigson_config,
)
from bigson.errors import (
    BigsonErrorCode,
    BigsonError,
    MalformedNumeralError,
    WireTypeMismatchError,
    BigsonConfigurationError,
)
from bigson.wire import BsonType
from bigson.adapters import (
    BigsonJSONEncoder,
    BigIntBSONEncoder,
    BigFloatBSONEncoder,
    bigson_codec_options,
    decode_document_field,
)

__version__ = "1.0.0"

__all__ = [
    # Value types
    "BigInt",
    "BigFloat",
    # Arithmetic
    "add",
    "sub",
    "compare",
    # Pure decoders
    "DecodeResult",
    "decode_int_text",
    "decode_decimal_text",
    "decode_int_document",
    "decode_decimal_document",
    # Configuration
    "BigsonConfig",
    "get_bigson_config",
    "set_bigson_config",
    "reset_bigson_config",
    # Errors
    "BigsonErrorCode",
    "BigsonError",
    "MalformedNumeralError",
    "WireTypeMismatchError",
    "BigsonConfigurationError",
    # Wire
    "BsonType",
    # Integrations
    "BigsonJSONEncoder",
    "BigIntBSONEncoder",
    "BigFloatBSONEncoder",
    "bigson_codec_options",
    "decode_document_field",
]
