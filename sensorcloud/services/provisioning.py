from __future__ import annotations

import logging

from sensorcloud.clients.transport import HttpTransport
from sensorcloud.codec.records import encode_channel_body, encode_sensor_body
from sensorcloud.codec.xdr import XDR_CONTENT_TYPE
from sensorcloud.core.errors import SensorCloudError
from sensorcloud.models.device import DeviceIdentity
from sensorcloud.models.session import Session
from sensorcloud.services.status import classify_provision_status
from sensorcloud.services.urls import channel_url, sensor_url

logger = logging.getLogger(__name__)


class ResourceProvisioner:
    """Creates sensors and channels on the server.

    Requires an authenticated session; the token is read at call time.
    """

    def __init__(
        self, *, transport: HttpTransport, identity: DeviceIdentity, session: Session
    ) -> None:
        self._transport = transport
        self._identity = identity
        self._session = session

    def create_sensor(
        self, sensor: str, *, name: str = "", label: str = "", description: str = ""
    ) -> None:
        url = sensor_url(
            scheme=self._identity.scheme,
            host=self._session.server_host,
            base_path=self._identity.base_path,
            sensor=sensor,
        )
        body = encode_sensor_body(
            version=self._identity.api_version,
            name=name,
            label=label,
            description=description,
        )
        self._put(url, body)

    def create_channel(
        self, sensor: str, channel: str, *, name: str = "", description: str = ""
    ) -> None:
        url = channel_url(
            scheme=self._identity.scheme,
            host=self._session.server_host,
            base_path=self._identity.base_path,
            sensor=sensor,
            channel=channel,
        )
        body = encode_channel_body(
            version=self._identity.api_version, name=name, description=description
        )
        self._put(url, body)

    def _put(self, url: str, body: bytes) -> None:
        params = {
            "version": str(self._identity.api_version),
            "auth_token": self._session.auth_token,
        }
        logger.info("Provisioning %s", url)
        resp = self._transport.request(
            "PUT",
            url,
            params=params,
            headers={"Content-Type": XDR_CONTENT_TYPE},
            content=body,
        )
        kind = classify_provision_status(resp.status_code)
        if kind is not None:
            logger.warning(
                "Provisioning %s rejected (HTTP %s): %s",
                url,
                resp.status_code,
                resp.text,
            )
            raise SensorCloudError(kind, status_code=resp.status_code, detail=resp.text or None)
