"""Result type, its constructors and its transport codecs.

Example:
    >>> from railkit.result import success, failure
    >>>
    >>> def divide(a: int, b: int):
    ...     if b == 0:
    ...         return failure(ZeroDivisionError("division by zero"))
    ...     return success(a / b)
    >>>
    >>> divide(1, 0).error.name
    'ZeroDivisionError'
"""

from .codec import Codec, CodecType, JsonCodec, MsgpackCodec, decode_result, encode_result, get_codec
from .result import Result, failure, success

__all__ = [
    # Core type
    "Result",
    "success",
    "failure",
    # Transport
    "Codec",
    "CodecType",
    "JsonCodec",
    "MsgpackCodec",
    "get_codec",
    "encode_result",
    "decode_result",
]
