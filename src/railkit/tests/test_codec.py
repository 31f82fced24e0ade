"""Tests for sending Results across a boundary as bytes."""

from __future__ import annotations

import msgpack
import orjson
import pytest

from railkit import ErrorName, SerializableError, clear_settings_cache, decode_result, encode_result, failure, success
from railkit.observability import CaptureRenderer
from railkit.result import CodecType, JsonCodec, MsgpackCodec, get_codec


class QuotaError(Exception):
    code = "QUOTA"


# ═════════════════════════════════════════════════════════════════════════════
# Wire Shape
# ═════════════════════════════════════════════════════════════════════════════


def test_json_wire_shape_matches_record() -> None:
    assert orjson.loads(encode_result(success({"id": 1}))) == {"data": {"id": 1}, "error": None}
    assert orjson.loads(encode_result(failure())) == {
        "data": None,
        "error": {"name": "Unknown error", "message": "Unknown error"},
    }


@pytest.mark.parametrize("fmt", [CodecType.JSON, CodecType.MSGPACK])
def test_failure_survives_transport(fmt: CodecType) -> None:
    sent = failure(QuotaError("over limit"))
    received = decode_result(encode_result(sent, fmt), fmt)

    assert received == sent
    assert received.error == SerializableError(name="QuotaError", message="over limit", code="QUOTA")


@pytest.mark.parametrize("fmt", ["json", "msgpack"])
def test_success_survives_transport(fmt: str) -> None:
    assert decode_result(encode_result(success([1, "two", None]), fmt), fmt) == success([1, "two", None])


@pytest.mark.parametrize("fmt", ["json", "msgpack"])
def test_unencodable_payload_raises(fmt: str) -> None:
    with pytest.raises(TypeError):
        encode_result(success(object()), fmt)


def test_sorted_json_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAILKIT_CODEC_SORT_KEYS", "true")
    clear_settings_cache()

    assert encode_result(success({"b": 1, "a": 2})) == b'{"data":{"a":2,"b":1},"error":null}'


# ═════════════════════════════════════════════════════════════════════════════
# Codec Selection
# ═════════════════════════════════════════════════════════════════════════════


def test_default_codec_is_json() -> None:
    assert isinstance(get_codec(), JsonCodec)


def test_default_codec_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAILKIT_CODEC_FORMAT", "msgpack")
    clear_settings_cache()

    assert isinstance(get_codec(), MsgpackCodec)
    assert msgpack.unpackb(encode_result(success(1))) == {"data": 1, "error": None}


def test_unknown_codec_rejected() -> None:
    with pytest.raises(ValueError):
        get_codec("xml")


# ═════════════════════════════════════════════════════════════════════════════
# Decode Failures
# ═════════════════════════════════════════════════════════════════════════════


def test_garbage_bytes_decode_to_failure(captured: CaptureRenderer) -> None:
    result = decode_result(b"{not json")

    assert result.error is not None
    assert result.error.name == ErrorName.DECODE
    assert captured.events == ["decode failed"]
    assert captured.entries[0].level == "debug"
    assert captured.entries[0].context["codec"] == "json"


def test_wrong_shape_decodes_to_failure() -> None:
    result = decode_result(b'{"payload": 1}')

    assert result.error is not None
    assert result.error.name == ErrorName.DECODE


def test_truncated_msgpack_decodes_to_failure() -> None:
    payload = encode_result(success("hello"), "msgpack")

    assert decode_result(payload[:-2], "msgpack").is_failure()
