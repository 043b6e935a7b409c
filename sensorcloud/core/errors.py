from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNAUTHORIZED = "unauthorized"
    INVALID_CREDENTIALS = "invalid_credentials"
    CHANNEL_NOT_FOUND = "channel_not_found"
    INVALID_PARAMETERS = "invalid_parameters"
    UNKNOWN_STATUS = "unknown_status"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_RESPONSE = "malformed_response"


class SensorCloudError(Exception):
    """Single error type for every SensorCloud failure.

    Callers branch on ``kind``. ``status_code`` is set for
    ``UNKNOWN_STATUS`` (and whenever a response was received), ``cause`` for
    ``TRANSPORT_ERROR``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.cause = cause
        self.detail = detail
        super().__init__(self._message())

    def _message(self) -> str:
        msg = self.kind.value
        if self.status_code is not None:
            msg = f"{msg} (HTTP {self.status_code})"
        if self.detail:
            msg = f"{msg}: {self.detail}"
        elif self.cause is not None:
            msg = f"{msg}: {self.cause}"
        return msg

    @classmethod
    def transport(cls, cause: BaseException) -> SensorCloudError:
        return cls(ErrorKind.TRANSPORT_ERROR, cause=cause)

    @classmethod
    def unknown_status(cls, status_code: int) -> SensorCloudError:
        return cls(ErrorKind.UNKNOWN_STATUS, status_code=status_code)
