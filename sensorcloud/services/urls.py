from __future__ import annotations

from urllib.parse import quote


def _segment(name: str) -> str:
    return quote(name, safe="")


def authenticate_url(*, scheme: str, host: str, base_path: str) -> str:
    return f"{scheme}://{host}{base_path}authenticate/"


def sensor_url(*, scheme: str, host: str, base_path: str, sensor: str) -> str:
    return f"{scheme}://{host}{base_path}sensors/{_segment(sensor)}/"


def channel_url(
    *, scheme: str, host: str, base_path: str, sensor: str, channel: str
) -> str:
    return sensor_url(scheme=scheme, host=host, base_path=base_path, sensor=sensor) + (
        f"channels/{_segment(channel)}/"
    )


def timeseries_data_url(
    *, scheme: str, host: str, base_path: str, sensor: str, channel: str
) -> str:
    return (
        channel_url(
            scheme=scheme, host=host, base_path=base_path, sensor=sensor, channel=channel
        )
        + "streams/timeseries/data/"
    )
