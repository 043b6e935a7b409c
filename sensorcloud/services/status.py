"""Mapping from HTTP status codes to outcomes, one function per endpoint.

``None`` means success. Kept apart from the request code so the mapping can be
checked without a transport.
"""

from __future__ import annotations

from sensorcloud.core.errors import ErrorKind

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_UNAUTHORIZED = 401
HTTP_NOT_FOUND = 404


def classify_auth_status(status_code: int) -> ErrorKind | None:
    if status_code == HTTP_OK:
        return None
    return ErrorKind.INVALID_CREDENTIALS


def classify_upload_status(status_code: int) -> ErrorKind | None:
    if status_code == HTTP_CREATED:
        return None
    if status_code == HTTP_NOT_FOUND:
        return ErrorKind.CHANNEL_NOT_FOUND
    if status_code == HTTP_UNAUTHORIZED:
        return ErrorKind.UNAUTHORIZED
    return ErrorKind.UNKNOWN_STATUS


def classify_provision_status(status_code: int) -> ErrorKind | None:
    if status_code == HTTP_CREATED:
        return None
    return ErrorKind.INVALID_PARAMETERS
