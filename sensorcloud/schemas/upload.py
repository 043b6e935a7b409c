from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from sensorcloud.models.data import SampleRateType

RESOURCE_NAME_MAX_LEN = 50
UINT32_MAX = 2**32 - 1


def _not_dot_segment(value: str) -> str:
    # "." and ".." would be collapsed out of the URL path.
    if value in {".", ".."}:
        raise ValueError(f"'{value}' is not a usable resource name")
    return value


ResourceName = Annotated[
    str,
    Field(min_length=1, max_length=RESOURCE_NAME_MAX_LEN),
    AfterValidator(_not_dot_segment),
]


class SampleRateSpec(BaseModel):
    rate_type: SampleRateType
    value: int = Field(ge=0, le=UINT32_MAX)


class UploadTarget(BaseModel):
    sensor: ResourceName
    channel: ResourceName
    sample_rate: SampleRateSpec


class SensorTarget(BaseModel):
    sensor: ResourceName


class ChannelTarget(BaseModel):
    sensor: ResourceName
    channel: ResourceName
