"""Byte codecs for sending a Result across a process or network boundary.

The wire shape is ``Result.to_dict()``. Decoding never raises: bytes that do
not parse, or parse into the wrong shape, decode to a ``DecodeError`` failure.

Usage:
    >>> from railkit.result import encode_result, decode_result, failure
    >>> payload = encode_result(failure(ValueError("boom")))
    >>> decode_result(payload).error.name
    'ValueError'
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import msgpack
import orjson

from railkit.foundation.config import get_settings
from railkit.foundation.errors import ErrorName, SerializableError
from railkit.observability import get_logger

from .result import Result, failure

if TYPE_CHECKING:
    from railkit.foundation.errors import JsonValue

log = get_logger("railkit.codec")


class CodecType(StrEnum):
    """Supported codec types."""
    JSON = "json"
    MSGPACK = "msgpack"


@runtime_checkable
class Codec(Protocol):
    """Protocol for serialization codecs."""

    name: str
    content_type: str

    def encode(self, data: JsonValue) -> bytes: ...
    def decode(self, data: bytes) -> JsonValue: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Codec Implementations
# ═══════════════════════════════════════════════════════════════════════════════


class JsonCodec:
    """orjson codec."""

    __slots__ = ("_option",)
    name = "json"
    content_type = "application/json"

    def __init__(self, *, sort_keys: bool = False) -> None:
        self._option = orjson.OPT_NON_STR_KEYS | (orjson.OPT_SORT_KEYS if sort_keys else 0)

    def encode(self, data: JsonValue) -> bytes:
        return orjson.dumps(data, option=self._option)

    def decode(self, data: bytes) -> JsonValue:
        return orjson.loads(data)


class MsgpackCodec:
    """MessagePack codec - binary, smaller payloads than JSON."""

    __slots__ = ()
    name = "msgpack"
    content_type = "application/msgpack"

    def encode(self, data: JsonValue) -> bytes:
        return msgpack.packb(data, use_bin_type=True)

    def decode(self, data: bytes) -> JsonValue:
        return msgpack.unpackb(data, raw=False)


def get_codec(format: str | CodecType | None = None) -> Codec:  # noqa: A002
    """Codec for ``format``, defaulting to the configured codec format.

    Raises:
        ValueError: If the format is unknown
    """
    settings = get_settings().codec
    match CodecType(format or settings.format):
        case CodecType.JSON:
            return JsonCodec(sort_keys=settings.sort_keys)
        case CodecType.MSGPACK:
            return MsgpackCodec()


# ═══════════════════════════════════════════════════════════════════════════════
# Result Transport
# ═══════════════════════════════════════════════════════════════════════════════


def encode_result(result: Result[object], format: str | CodecType | None = None) -> bytes:  # noqa: A002
    """Serialize a Result's ``{data, error}`` record to bytes.

    Unlike ``decode_result``, an unencodable payload is a caller bug rather
    than wire data, so it raises instead of becoming a failure.

    Raises:
        TypeError: If the success payload holds a value the codec cannot encode
        ValueError: If the format is unknown
    """
    return get_codec(format).encode(result.to_dict())


def decode_result(payload: bytes, format: str | CodecType | None = None) -> Result[object]:  # noqa: A002
    """Rebuild a Result from bytes produced by ``encode_result``."""
    codec = get_codec(format)
    try:
        return Result.from_dict(codec.decode(payload))  # type: ignore[arg-type]
    except ValueError as e:  # orjson and msgpack decode errors both subclass ValueError
        log.debug("decode failed", codec=codec.name, size=len(payload), error=str(e))
        return failure(SerializableError(name=ErrorName.DECODE.value, message=str(e)))
