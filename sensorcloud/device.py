from __future__ import annotations

from collections.abc import Sequence

from sensorcloud.clients.transport import HttpTransport
from sensorcloud.core.config import DEFAULT_AUTH_HOST
from sensorcloud.models.data import Point, SampleRate
from sensorcloud.models.device import DeviceIdentity
from sensorcloud.models.session import Session
from sensorcloud.schemas.upload import ChannelTarget, SensorTarget, UploadTarget
from sensorcloud.services.provisioning import ResourceProvisioner
from sensorcloud.services.session import SessionManager
from sensorcloud.services.upload import UploadOrchestrator, UploadResult


class Device:
    """One remote device identity and its session.

    A Device is not safe for concurrent calls: share it between threads only
    behind a lock, or give each worker its own instance.
    """

    def __init__(
        self,
        device_id: str,
        auth_key: str,
        *,
        transport: HttpTransport,
        api_version: int = 1,
        scheme: str = "https",
        auth_host: str = DEFAULT_AUTH_HOST,
    ) -> None:
        self._identity = DeviceIdentity(
            device_id=device_id,
            auth_key=auth_key,
            api_version=api_version,
            scheme=scheme,
            auth_host=auth_host,
        )
        self._transport = transport
        self._session = Session()
        self._sessions = SessionManager(
            transport=transport, identity=self._identity, session=self._session
        )
        self._provisioner = ResourceProvisioner(
            transport=transport, identity=self._identity, session=self._session
        )
        self._uploader = UploadOrchestrator(
            transport=transport,
            identity=self._identity,
            sessions=self._sessions,
            provisioner=self._provisioner,
        )

    def __enter__(self) -> Device:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    @property
    def device_id(self) -> str:
        return self._identity.device_id

    @property
    def base_path(self) -> str:
        return self._identity.base_path

    @property
    def authenticated(self) -> bool:
        return self._session.authenticated

    @property
    def server_host(self) -> str:
        return self._session.server_host

    def authenticate(self) -> None:
        self._sessions.authenticate()

    def upload_data(
        self,
        sensor: str,
        channel: str,
        sample_rate: SampleRate,
        points: Sequence[Point],
    ) -> UploadResult:
        UploadTarget(
            sensor=sensor,
            channel=channel,
            sample_rate={"rate_type": sample_rate.rate_type, "value": sample_rate.value},
        )
        return self._uploader.upload_data(sensor, channel, sample_rate, points)

    def create_sensor(
        self, sensor: str, *, name: str = "", label: str = "", description: str = ""
    ) -> None:
        SensorTarget(sensor=sensor)
        self._sessions.ensure_authenticated()
        self._provisioner.create_sensor(
            sensor, name=name, label=label, description=description
        )

    def create_channel(
        self, sensor: str, channel: str, *, name: str = "", description: str = ""
    ) -> None:
        ChannelTarget(sensor=sensor, channel=channel)
        self._sessions.ensure_authenticated()
        self._provisioner.create_channel(sensor, channel, name=name, description=description)
