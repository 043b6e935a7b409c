from __future__ import annotations

import pytest

from sensorcloud.core.errors import ErrorKind
from sensorcloud.services.status import (
    classify_auth_status,
    classify_provision_status,
    classify_upload_status,
)


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (201, None),
        (404, ErrorKind.CHANNEL_NOT_FOUND),
        (401, ErrorKind.UNAUTHORIZED),
        (200, ErrorKind.UNKNOWN_STATUS),
        (500, ErrorKind.UNKNOWN_STATUS),
    ],
)
def test_classify_upload_status(status_code: int, expected: ErrorKind | None) -> None:
    assert classify_upload_status(status_code) is expected


def test_classify_auth_status() -> None:
    assert classify_auth_status(200) is None
    assert classify_auth_status(201) is ErrorKind.INVALID_CREDENTIALS
    assert classify_auth_status(401) is ErrorKind.INVALID_CREDENTIALS


def test_classify_provision_status() -> None:
    assert classify_provision_status(201) is None
    assert classify_provision_status(200) is ErrorKind.INVALID_PARAMETERS
    assert classify_provision_status(400) is ErrorKind.INVALID_PARAMETERS
