"""wakeonlan configuration: Pydantic BaseSettings loaded from env / .env."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wakeonlan.utils.transport import ACCEPTED_PORTS


class Settings(BaseSettings):
    """Settings for the CLI and HTTP front-ends; the packet core reads none of these."""

    app_name: str = "wakeonlan"
    log_level: str = "WARNING"

    # Mode: dev = validate but never send, prod = send packets
    mode: str = "prod"

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8000
    api_prefix: str = "/api"

    # Magic packet destination defaults
    default_ip: str = "255.255.255.255"
    default_port: str = "9"

    @property
    def is_dev_mode(self) -> bool:
        return self.mode == "dev"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WAKEONLAN_",
        extra="ignore",
    )

    @field_validator("default_port")
    @classmethod
    def check_default_port(cls, value: str) -> str:
        if value and (not value.isdigit() or int(value) not in ACCEPTED_PORTS):
            raise ValueError(f"default_port must be one of {ACCEPTED_PORTS}")
        return value

    @field_validator("mode")
    @classmethod
    def check_mode(cls, value: str) -> str:
        if value not in ("dev", "prod"):
            raise ValueError("mode must be 'dev' or 'prod'")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
