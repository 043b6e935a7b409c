from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Session:
    authenticated: bool = False
    auth_token: str = ""
    server_host: str = ""

    def establish(self, *, auth_token: str, server_host: str) -> None:
        self.auth_token = auth_token
        self.server_host = server_host
        self.authenticated = True
