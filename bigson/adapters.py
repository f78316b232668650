"""
============================================================================
bigson - Serialization Adapters
============================================================================

Hooks that let BigInt and BigFloat ride through existing serializers:
- BigsonJSONEncoder: json.dumps(..., cls=BigsonJSONEncoder)
- BigIntBSONEncoder / BigFloatBSONEncoder: pymongo type registry encoders,
  bundled by bigson_codec_options()
- decode_document_field: read a decoded BSON field back into a value

Both encoders emit the text codec output as a string, so values survive
as exact numerals.

============================================================================
"""

from decimal import Decimal
from typing import Any, Mapping, Type, Union
import json

from bson.codec_options import CodecOptions, TypeEncoder, TypeRegistry

from bigson.bigfloat import BigFloat
from bigson.bigint import BigInt
from bigson.errors import WireTypeMismatchError
from bigson.magnitude import format_decimal
from bigson.wire import BsonType, encode_string_value

BigValue = Union[BigInt, BigFloat]


# =============================================================================
# JSON
# =============================================================================

class BigsonJSONEncoder(json.JSONEncoder):
    """
    JSON encoder for bigson values.

    Handles:
    - BigInt -> str (base-10 digits)
    - BigFloat -> str (fixed-point)
    - Decimal -> str (fixed-point, finite values only)
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (BigInt, BigFloat)):
            return obj.marshal_text().decode("ascii")
        if isinstance(obj, Decimal) and obj.is_finite():
            return format_decimal(obj)
        return super().default(obj)


# =============================================================================
# BSON documents
# =============================================================================

class BigIntBSONEncoder(TypeEncoder):
    """Store BigInt as a BSON string."""
    python_type = BigInt

    def transform_python(self, value: BigInt) -> str:
        return value.marshal_text().decode("ascii")


class BigFloatBSONEncoder(TypeEncoder):
    """Store BigFloat as a BSON string."""
    python_type = BigFloat

    def transform_python(self, value: BigFloat) -> str:
        return value.marshal_text().decode("ascii")


def bigson_codec_options(**kwargs: Any) -> CodecOptions:
    """
    CodecOptions whose type registry encodes BigInt and BigFloat.

    Extra keyword arguments are passed to CodecOptions.
    """
    registry = TypeRegistry([BigIntBSONEncoder(), BigFloatBSONEncoder()])
    return CodecOptions(type_registry=registry, **kwargs)


def decode_document_field(
    document: Mapping[str, Any],
    key: str,
    kind: Type[BigValue],
) -> BigValue:
    """
    Read a field of a decoded BSON document into a BigInt or BigFloat.

    Follows the document decode policy: unparseable numerals become zero.

    Raises:
        KeyError: If key is missing
        WireTypeMismatchError: If the field does not hold a string (BIG-002)
    """
    raw = document[key]
    if not isinstance(raw, str):
        raise WireTypeMismatchError(
            f"cannot interpret payload as string (field={key!r}, "
            f"python_type={type(raw).__name__})"
        )
    target = kind()
    target.unmarshal_bson_value(BsonType.STRING, encode_string_value(raw))
    return target


__all__ = [
    "BigsonJSONEncoder",
    "BigIntBSONEncoder",
    "BigFloatBSONEncoder",
    "bigson_codec_options",
    "decode_document_field",
]
