from __future__ import annotations

from dataclasses import dataclass, field

from sensorcloud.core.config import DEFAULT_AUTH_HOST


@dataclass(frozen=True)
class DeviceIdentity:
    device_id: str
    auth_key: str = field(repr=False)
    api_version: int = 1
    scheme: str = "https"
    auth_host: str = DEFAULT_AUTH_HOST

    @property
    def base_path(self) -> str:
        return f"/SensorCloud/devices/{self.device_id}/"
