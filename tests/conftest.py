from __future__ import annotations

import pytest

from sensorcloud.clients.transport import HttpResponse
from sensorcloud.device import Device
from sensorcloud.models.data import Point
from tests.fakes import FakeTransport, auth_body

FIRST_TS = 1_700_000_000 * 1_000_000_000


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def authed_transport(transport: FakeTransport) -> FakeTransport:
    transport.script("GET", HttpResponse(200, auth_body()))
    return transport


@pytest.fixture()
def device(transport: FakeTransport) -> Device:
    return Device("dev1", "device-key", transport=transport)


@pytest.fixture()
def points() -> list[Point]:
    return [
        Point(timestamp=FIRST_TS, value=1.0),
        Point(timestamp=FIRST_TS + 1_000_000_000, value=2.0),
        Point(timestamp=FIRST_TS + 2_000_000_000, value=3.5),
    ]
