"""
bigson - BSON string-value wire layer.

A document value travels as a (type tag, payload) pair. bigson only ever
writes the string tag; the payload layout (int32 length, UTF-8 bytes,
trailing NUL) is produced and read back by the bson package shipped with
pymongo, through a one-element envelope document.
"""

from enum import IntEnum
import logging
import struct

import bson
from bson.errors import InvalidBSON

from bigson.errors import BigsonErrorCode, WireTypeMismatchError

logger = logging.getLogger(__name__)

# Envelope: int32 size | tag | empty key (NUL) | payload | document NUL
_ENVELOPE_HEADER_SIZE = 4 + 1 + 1
_ENVELOPE_OVERHEAD = _ENVELOPE_HEADER_SIZE + 1
_ENVELOPE_KEY = ""


class BsonType(IntEnum):
    """BSON element type tags."""
    DOUBLE = 0x01
    STRING = 0x02
    DOCUMENT = 0x03
    ARRAY = 0x04
    BINARY = 0x05
    OBJECT_ID = 0x07
    BOOLEAN = 0x08
    DATETIME = 0x09
    NULL = 0x0A
    INT32 = 0x10
    TIMESTAMP = 0x11
    INT64 = 0x12
    DECIMAL128 = 0x13


def _type_name(bson_type) -> str:
    try:
        return BsonType(bson_type).name
    except ValueError:
        if isinstance(bson_type, int):
            return f"0x{bson_type:02x}"
        return repr(bson_type)


def encode_string_value(text: str) -> bytes:
    """Return the BSON string payload for text."""
    envelope = bson.encode({_ENVELOPE_KEY: text})
    return envelope[_ENVELOPE_HEADER_SIZE:-1]


def read_string_value(bson_type: int, data: bytes) -> str:
    """
    Extract the string carried by a BSON string value.

    Args:
        bson_type: Wire type tag of the value
        data: Payload bytes of the value

    Returns:
        The decoded string

    Raises:
        WireTypeMismatchError: If the tag is not STRING or the payload is
            not a well-formed BSON string (BIG-002)
    """
    if bson_type != BsonType.STRING:
        logger.error(
            f"[{BigsonErrorCode.WIRE_TYPE_MISMATCH}] Document value is not a string | "
            f"bson_type={_type_name(bson_type)}"
        )
        raise WireTypeMismatchError(
            f"cannot interpret payload as string (bson_type={_type_name(bson_type)})",
            bson_type=bson_type,
        )

    payload = bytes(data)
    envelope = (
        struct.pack("<i", len(payload) + _ENVELOPE_OVERHEAD)
        + bytes([BsonType.STRING])
        + b"\x00"
        + payload
        + b"\x00"
    )
    try:
        document = bson.decode(envelope)
    except (InvalidBSON, UnicodeDecodeError) as e:
        logger.error(
            f"[{BigsonErrorCode.WIRE_TYPE_MISMATCH}] Malformed string payload | "
            f"payload_size={len(payload)} | error={e}"
        )
        raise WireTypeMismatchError(
            "cannot interpret payload as string", bson_type=bson_type
        ) from e

    value = document.get(_ENVELOPE_KEY)
    if len(document) != 1 or not isinstance(value, str):
        raise WireTypeMismatchError(
            "cannot interpret payload as string", bson_type=bson_type
        )
    return value


__all__ = [
    "BsonType",
    "encode_string_value",
    "read_string_value",
]
