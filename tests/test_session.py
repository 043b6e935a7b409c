from __future__ import annotations

import httpx
import pytest

from sensorcloud.clients.transport import HttpResponse
from sensorcloud.core.errors import ErrorKind, SensorCloudError
from sensorcloud.device import Device
from tests.fakes import FakeTransport, xdr_string


def test_authenticate_sets_session(authed_transport: FakeTransport, device: Device) -> None:
    assert not device.authenticated

    device.authenticate()

    assert device.authenticated
    assert device.server_host == "dsx.sensorcloud.test"
    [req] = authed_transport.requests
    assert req.method == "GET"
    assert req.url == "https://sensorcloud.microstrain.com/SensorCloud/devices/dev1/authenticate/"
    assert req.params == {"version": "1", "key": "device-key"}
    assert req.headers["Accept"] == "application/xdr"


def test_authenticate_again_overwrites_session(transport: FakeTransport, device: Device) -> None:
    transport.script(
        "GET",
        HttpResponse(200, xdr_string("first-token") + xdr_string("one.test")),
        HttpResponse(200, xdr_string("second-token") + xdr_string("two.test")),
    )
    device.authenticate()
    device.authenticate()
    assert device.server_host == "two.test"


@pytest.mark.parametrize("status_code", [401, 403, 500, 201])
def test_non_200_is_invalid_credentials(
    transport: FakeTransport, device: Device, status_code: int
) -> None:
    transport.script("GET", HttpResponse(status_code, b""))
    with pytest.raises(SensorCloudError) as exc_info:
        device.authenticate()
    assert exc_info.value.kind is ErrorKind.INVALID_CREDENTIALS
    assert not device.authenticated


def test_transport_failure(transport: FakeTransport, device: Device) -> None:
    cause = httpx.ConnectError("connection refused")
    transport.script("GET", cause)
    with pytest.raises(SensorCloudError) as exc_info:
        device.authenticate()
    assert exc_info.value.kind is ErrorKind.TRANSPORT_ERROR
    assert exc_info.value.cause is cause


def test_undecodable_body_is_malformed_response(transport: FakeTransport, device: Device) -> None:
    transport.script("GET", HttpResponse(200, b"\x00\x00"))
    with pytest.raises(SensorCloudError) as exc_info:
        device.authenticate()
    assert exc_info.value.kind is ErrorKind.MALFORMED_RESPONSE
    assert not device.authenticated


@pytest.mark.parametrize("host", ["", "a\x00b", "host name", "evil.test/path"])
def test_unusable_server_host_is_malformed_response(
    transport: FakeTransport, device: Device, host: str
) -> None:
    body = xdr_string("token-0123456789abcdef") + xdr_string(host)
    transport.script("GET", HttpResponse(200, body))
    with pytest.raises(SensorCloudError) as exc_info:
        device.authenticate()
    assert exc_info.value.kind is ErrorKind.MALFORMED_RESPONSE
    assert not device.authenticated
    assert transport.calls("POST") == []
