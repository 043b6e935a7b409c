from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sensorcloud.clients.transport import HttpTransport
from sensorcloud.codec.records import encode_upload_body
from sensorcloud.codec.xdr import XDR_CONTENT_TYPE
from sensorcloud.core.errors import ErrorKind, SensorCloudError
from sensorcloud.models.data import Point, SampleRate
from sensorcloud.models.device import DeviceIdentity
from sensorcloud.services.provisioning import ResourceProvisioner
from sensorcloud.services.session import SessionManager
from sensorcloud.services.status import classify_upload_status
from sensorcloud.services.urls import timeseries_data_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    status_code: int
    attempts: int
    provisioned: bool


class UploadOrchestrator:
    def __init__(
        self,
        *,
        transport: HttpTransport,
        identity: DeviceIdentity,
        sessions: SessionManager,
        provisioner: ResourceProvisioner,
    ) -> None:
        self._transport = transport
        self._identity = identity
        self._sessions = sessions
        self._provisioner = provisioner

    def upload_data(
        self,
        sensor: str,
        channel: str,
        sample_rate: SampleRate,
        points: Sequence[Point],
    ) -> UploadResult:
        self._sessions.ensure_authenticated()
        session = self._sessions.session

        url = timeseries_data_url(
            scheme=self._identity.scheme,
            host=session.server_host,
            base_path=self._identity.base_path,
            sensor=sensor,
            channel=channel,
        )
        params = {
            "version": str(self._identity.api_version),
            "auth_token": session.auth_token,
        }
        body = encode_upload_body(
            version=self._identity.api_version, sample_rate=sample_rate, points=points
        )

        try:
            status_code = self._send(url, params, body)
        except SensorCloudError as e:
            if e.kind is not ErrorKind.CHANNEL_NOT_FOUND:
                raise
            # The 404 names the channel, yet the server is asked for a sensor
            # and create_channel is never tried. Kept as-is for wire
            # compatibility; the actual cause of the 404 is unconfirmed.
            logger.info("Upload target %s/%s missing, creating sensor", sensor, channel)
            self._provisioner.create_sensor(sensor)
            status_code = self._send(url, params, body)
            return UploadResult(status_code=status_code, attempts=2, provisioned=True)
        return UploadResult(status_code=status_code, attempts=1, provisioned=False)

    def _send(self, url: str, params: dict[str, str], body: bytes) -> int:
        logger.info("Uploading data: %s (%d bytes)", url, len(body))
        resp = self._transport.request(
            "POST",
            url,
            params=params,
            headers={"Content-Type": XDR_CONTENT_TYPE},
            content=body,
        )
        kind = classify_upload_status(resp.status_code)
        if kind is not None:
            raise SensorCloudError(kind, status_code=resp.status_code)
        return resp.status_code
