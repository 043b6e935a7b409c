from __future__ import annotations

from sensorcloud.clients.transport import HttpTransport, HttpxTransport
from sensorcloud.core.config import Settings, load_settings
from sensorcloud.device import Device


def create_device(
    settings: Settings | None = None, *, transport: HttpTransport | None = None
) -> Device:
    settings = settings or load_settings()
    transport = transport or HttpxTransport(
        user_agent=settings.user_agent,
        timeout_seconds=settings.timeout_seconds,
    )
    return Device(
        settings.device_id,
        settings.device_key.get_secret_value(),
        transport=transport,
        api_version=settings.api_version,
        scheme=settings.scheme,
        auth_host=settings.auth_host,
    )
