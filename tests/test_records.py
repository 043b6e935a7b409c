from __future__ import annotations

import pytest

from sensorcloud.codec.records import (
    UPLOAD_HEADER_SIZE,
    UPLOAD_POINT_SIZE,
    decode_auth_response,
    decode_upload_body,
    encode_channel_body,
    encode_sensor_body,
    encode_upload_body,
)
from sensorcloud.codec.xdr import XdrUnpacker
from sensorcloud.models.data import Point, SampleRate, SampleRateType
from tests.fakes import auth_body, xdr_string


def test_upload_body_layout(points: list[Point]) -> None:
    body = encode_upload_body(version=1, sample_rate=SampleRate.hertz(1), points=points)
    assert len(body) == 4 + 4 + 4 + 4 + len(points) * (8 + 4)
    assert len(body) == UPLOAD_HEADER_SIZE + len(points) * UPLOAD_POINT_SIZE

    unpacker = XdrUnpacker(body)
    assert unpacker.unpack_int() == 1
    assert unpacker.unpack_int() == 1
    assert unpacker.unpack_uint() == 1
    assert unpacker.unpack_int() == 3
    for point in points:
        assert unpacker.unpack_uhyper() == point.timestamp
        assert unpacker.unpack_float() == point.value
    unpacker.done()


def test_upload_body_keeps_caller_order() -> None:
    points = [Point(timestamp=30, value=3.0), Point(timestamp=10, value=1.0), Point(timestamp=30, value=3.0)]
    _, _, decoded = decode_upload_body(
        encode_upload_body(version=1, sample_rate=SampleRate.seconds(5), points=points)
    )
    assert decoded == points


def test_empty_upload_body_is_header_only() -> None:
    body = encode_upload_body(version=1, sample_rate=SampleRate.seconds(60), points=[])
    assert len(body) == 16
    version, rate, decoded = decode_upload_body(body)
    assert (version, rate, decoded) == (1, SampleRate(SampleRateType.SECONDS, 60), [])


def test_sample_rate_type_codes() -> None:
    assert SampleRate.hertz(10).type_code == 1
    assert SampleRate.seconds(10).type_code == 0


def test_sensor_body_is_version_and_three_empty_fields() -> None:
    body = encode_sensor_body(version=1)
    assert len(body) == 4 + 52 + 52 + 1000
    assert body[:4] == b"\x00\x00\x00\x01"
    assert body[4:] == b"\x00" * (52 + 52 + 1000)


def test_channel_body_is_version_and_two_empty_fields() -> None:
    body = encode_channel_body(version=1)
    assert len(body) == 4 + 52 + 1000
    assert body[4:] == b"\x00" * (52 + 1000)


def test_decode_auth_response() -> None:
    token = "token-0123456789abcdefgh"
    assert decode_auth_response(auth_body(token, "eu.sensorcloud.test")) == (
        token,
        "eu.sensorcloud.test",
    )


def test_decode_auth_response_bounds_host_by_token_field() -> None:
    with pytest.raises(ValueError):
        decode_auth_response(xdr_string("ab") + xdr_string("a-much-longer-host.example"))
