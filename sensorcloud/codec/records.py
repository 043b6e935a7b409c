from __future__ import annotations

from collections.abc import Sequence

from sensorcloud.codec.xdr import XdrPacker, XdrUnpacker
from sensorcloud.models.data import Point, SampleRate, SampleRateType

NAME_MAX_LEN = 50
LABEL_MAX_LEN = 50
DESCRIPTION_MAX_LEN = 1000

UPLOAD_HEADER_SIZE = 16
UPLOAD_POINT_SIZE = 12


def encode_upload_body(
    *, version: int, sample_rate: SampleRate, points: Sequence[Point]
) -> bytes:
    packer = XdrPacker()
    packer.pack_int(version)
    packer.pack_int(sample_rate.type_code)
    packer.pack_uint(sample_rate.value)
    packer.pack_int(len(points))
    for point in points:
        packer.pack_uhyper(point.timestamp)
        packer.pack_float(point.value)
    return packer.get_buffer()


def decode_upload_body(data: bytes) -> tuple[int, SampleRate, list[Point]]:
    unpacker = XdrUnpacker(data)
    version = unpacker.unpack_int()
    rate_type = SampleRateType(unpacker.unpack_int())
    rate_value = unpacker.unpack_uint()
    count = unpacker.unpack_int()
    points = [
        Point(timestamp=unpacker.unpack_uhyper(), value=unpacker.unpack_float())
        for _ in range(count)
    ]
    unpacker.done()
    return version, SampleRate(rate_type, rate_value), points


def encode_sensor_body(
    *, version: int, name: str = "", label: str = "", description: str = ""
) -> bytes:
    packer = XdrPacker()
    packer.pack_int(version)
    packer.pack_fstring(name, NAME_MAX_LEN)
    packer.pack_fstring(label, LABEL_MAX_LEN)
    packer.pack_fstring(description, DESCRIPTION_MAX_LEN)
    return packer.get_buffer()


def encode_channel_body(*, version: int, name: str = "", description: str = "") -> bytes:
    packer = XdrPacker()
    packer.pack_int(version)
    packer.pack_fstring(name, NAME_MAX_LEN)
    packer.pack_fstring(description, DESCRIPTION_MAX_LEN)
    return packer.get_buffer()


def decode_auth_response(data: bytes) -> tuple[str, str]:
    """Return ``(auth_token, server_host)`` from an authentication reply.

    The host string is bounded by the number of bytes the token occupied.
    """
    unpacker = XdrUnpacker(data)
    auth_token, consumed = unpacker.unpack_string()
    server_host, _ = unpacker.unpack_string(max_len=consumed)
    return auth_token, server_host
