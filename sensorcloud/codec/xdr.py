"""XDR-style record encoding for the SensorCloud wire format.

Only the shapes the service consumes are covered: big-endian 4-byte integers
and floats, 8-byte unsigned timestamps and fixed-width zero-padded strings.
The authentication response is the one place a variable-length (length
prefixed) string is read, so that primitive lives on the unpacker only.
"""

from __future__ import annotations

import struct

XDR_CONTENT_TYPE = "application/xdr"

_INT = struct.Struct(">i")
_UINT = struct.Struct(">I")
_UHYPER = struct.Struct(">Q")
_FLOAT = struct.Struct(">f")


def align4(n: int) -> int:
    if n < 0:
        raise ValueError(f"Negative length: {n}")
    return (n + 3) & ~3


class XdrPacker:
    def __init__(self) -> None:
        self._buf = bytearray()

    def get_buffer(self) -> bytes:
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)

    def pack_int(self, value: int) -> None:
        self._buf += _INT.pack(value)

    def pack_uint(self, value: int) -> None:
        self._buf += _UINT.pack(value)

    def pack_uhyper(self, value: int) -> None:
        self._buf += _UHYPER.pack(value)

    def pack_float(self, value: float) -> None:
        self._buf += _FLOAT.pack(value)

    def pack_fstring(self, value: str, max_len: int) -> None:
        """Write ``value`` into a field of ``align4(max_len)`` bytes.

        The width depends on ``max_len`` only: the string is not length
        prefixed and the rest of the field is zero filled.
        """
        width = align4(max_len)
        data = value.encode("utf-8")
        if len(data) > max_len:
            raise ValueError(f"String of {len(data)} bytes exceeds field width {max_len}")
        self._buf += data
        self._buf += b"\x00" * (width - len(data))


class XdrUnpacker:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def done(self) -> None:
        if self._pos < len(self._data):
            raise ValueError(f"{self.remaining()} unread bytes left in buffer")

    def _take(self, n: int) -> bytes:
        end = self._pos + n
        if end > len(self._data):
            raise ValueError(
                f"Need {n} bytes at offset {self._pos}, only {self.remaining()} left"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack_int(self) -> int:
        return _INT.unpack(self._take(4))[0]

    def unpack_uint(self) -> int:
        return _UINT.unpack(self._take(4))[0]

    def unpack_uhyper(self) -> int:
        return _UHYPER.unpack(self._take(8))[0]

    def unpack_float(self) -> float:
        return _FLOAT.unpack(self._take(4))[0]

    def unpack_fstring(self, max_len: int) -> str:
        raw = self._take(align4(max_len))
        return raw.rstrip(b"\x00").decode("utf-8")

    def unpack_string(self, max_len: int | None = None) -> tuple[str, int]:
        """Read a length-prefixed string.

        Returns the decoded value and the number of bytes consumed (length
        word, data and padding).
        """
        start = self._pos
        length = self.unpack_uint()
        if max_len is not None and length > max_len:
            self._pos = start
            raise ValueError(f"String length {length} exceeds maximum {max_len}")
        raw = self._take(align4(length))
        return raw[:length].decode("utf-8"), self._pos - start
