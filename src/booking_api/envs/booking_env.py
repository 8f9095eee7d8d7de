from __future__ import annotations

import os
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator


class MissingSettingsError(ValueError):
    """Raised when required BOOKING_* environment variables are unset."""


class Settings(BaseModel):
    """Typed settings for talking to the booking API, sourced from env vars."""

    base_url: str
    username: str
    password: str
    api_version: str = "1.0"
    timeout: float = 30.0

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v:
            raise ValueError("Base URL cannot be empty")
        parsed = urlparse(v)
        if parsed.scheme not in {"http", "https"}:
            raise ValueError("Base URL must start with http:// or https://")
        if not parsed.netloc:
            raise ValueError("Base URL must include a host")
        return v.rstrip("/")

    @field_validator("username", "password")
    @classmethod
    def validate_credential(cls, v: str) -> str:
        if not v:
            raise ValueError("Credentials cannot be empty")
        return v


def get_settings() -> Settings:
    base_url = os.environ.get("BOOKING_BASE_URL")
    username = os.environ.get("BOOKING_USERNAME")
    password = os.environ.get("BOOKING_PASSWORD")
    required = {
        "BOOKING_BASE_URL": base_url,
        "BOOKING_USERNAME": username,
        "BOOKING_PASSWORD": password,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise MissingSettingsError(
            f"Missing required environment variables: {', '.join(missing)}"
        )
    return Settings(
        base_url=base_url,
        username=username,
        password=password,
        api_version=os.environ.get("BOOKING_API_VERSION", "1.0"),
        timeout=float(os.environ.get("BOOKING_TIMEOUT", "30.0")),
    )
