from __future__ import annotations

import logging

from sensorcloud.clients.transport import HttpTransport
from sensorcloud.codec.records import decode_auth_response
from sensorcloud.codec.xdr import XDR_CONTENT_TYPE
from sensorcloud.core.errors import ErrorKind, SensorCloudError
from sensorcloud.models.device import DeviceIdentity
from sensorcloud.models.session import Session
from sensorcloud.services.status import classify_auth_status
from sensorcloud.services.urls import authenticate_url

logger = logging.getLogger(__name__)


class SessionManager:
    def __init__(
        self, *, transport: HttpTransport, identity: DeviceIdentity, session: Session
    ) -> None:
        self._transport = transport
        self._identity = identity
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def ensure_authenticated(self) -> None:
        if not self._session.authenticated:
            self.authenticate()

    def authenticate(self) -> None:
        url = authenticate_url(
            scheme=self._identity.scheme,
            host=self._identity.auth_host,
            base_path=self._identity.base_path,
        )
        logger.info("Authenticating device %s", self._identity.device_id)
        resp = self._transport.request(
            "GET",
            url,
            params={"version": str(self._identity.api_version), "key": self._identity.auth_key},
            headers={"Accept": XDR_CONTENT_TYPE},
        )
        kind = classify_auth_status(resp.status_code)
        if kind is not None:
            raise SensorCloudError(kind, status_code=resp.status_code)

        try:
            auth_token, server_host = decode_auth_response(resp.content)
        except (ValueError, UnicodeDecodeError) as e:
            raise SensorCloudError(
                ErrorKind.MALFORMED_RESPONSE,
                status_code=resp.status_code,
                detail=str(e),
            ) from e

        if not _is_usable_host(server_host):
            raise SensorCloudError(
                ErrorKind.MALFORMED_RESPONSE,
                status_code=resp.status_code,
                detail=f"Unusable server host {server_host!r}",
            )

        self._session.establish(auth_token=auth_token, server_host=server_host)
        logger.info("Device %s authenticated, server %s", self._identity.device_id, server_host)


def _is_usable_host(host: str) -> bool:
    if not host or not host.isprintable():
        return False
    return not any(c in host for c in " /?#@\\")
