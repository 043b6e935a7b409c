from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class SampleRateType(IntEnum):
    SECONDS = 0
    HERTZ = 1


@dataclass(frozen=True)
class Point:
    timestamp: int  # nanoseconds since the epoch
    value: float


@dataclass(frozen=True)
class SampleRate:
    rate_type: SampleRateType
    value: int

    @classmethod
    def hertz(cls, value: int) -> SampleRate:
        return cls(SampleRateType.HERTZ, value)

    @classmethod
    def seconds(cls, value: int) -> SampleRate:
        return cls(SampleRateType.SECONDS, value)

    @property
    def type_code(self) -> int:
        return int(self.rate_type)
