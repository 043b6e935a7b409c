from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTH_HOST = "sensorcloud.microstrain.com"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SENSORCLOUD_",
        case_sensitive=False,
    )

    device_id: str = Field(min_length=1, max_length=64)
    device_key: SecretStr

    auth_host: str = Field(default=DEFAULT_AUTH_HOST, min_length=1)
    scheme: str = Field(default="https", pattern=r"^https?$")
    api_version: int = Field(default=1, ge=1)

    timeout_seconds: float = Field(default=10.0, ge=1.0, le=120.0)
    user_agent: str = Field(
        default="sensorcloud-client/0.1",
        min_length=3,
        max_length=256,
    )
    log_level: str = Field(default="INFO")


def load_settings() -> Settings:
    return Settings()
