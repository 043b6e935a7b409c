from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from sensorcloud.core.errors import SensorCloudError


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    content: bytes = b""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class HttpTransport(Protocol):
    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> HttpResponse: ...

    def close(self) -> None: ...


class HttpxTransport:
    def __init__(
        self,
        *,
        user_agent: str,
        timeout_seconds: float,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(
            timeout=timeout_seconds,
            headers={"User-Agent": user_agent},
        )

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> HttpResponse:
        try:
            resp = self._client.request(
                method,
                url,
                params=dict(params) if params else None,
                headers=dict(headers) if headers else None,
                content=content,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SensorCloudError.transport(e) from e
        return HttpResponse(status_code=resp.status_code, content=resp.content)
