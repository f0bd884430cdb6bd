"""Load .env and settings.yaml, expose all configuration."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

log = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_EPOCH = datetime(2025, 8, 11, tzinfo=timezone.utc)

# Environment variable -> settings field
ENV_OVERRIDES = {
    "RAINBET_API_KEY": "api_key",
    "PORT": "port",
    "SELF_URL": "self_url",
}


def _load_env() -> None:
    env_path = PROJECT_ROOT / ".env"
    load_dotenv(env_path)


def _load_yaml(settings_path: Path | None = None) -> dict:
    settings_path = settings_path or PROJECT_ROOT / "settings.yaml"
    if settings_path.exists():
        try:
            with open(settings_path) as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError:
            log.warning("Failed to parse %s, using defaults", settings_path.name)
            return {}
    return {}


class Settings(BaseModel):
    api_key: str = ""

    @field_validator("api_key", "self_url")
    @classmethod
    def strip_strings(cls, v: str) -> str:
        return v.strip()

    upstream_base_url: str = "https://services.rainbet.com"
    host: str = "0.0.0.0"
    port: int = 3000
    # Public URL pinged to keep free-tier hosts awake; empty disables it
    self_url: str = ""
    refresh_interval: float = Field(default=300, gt=0)
    keepalive_interval: float = Field(default=270, gt=0)
    request_timeout: float = Field(default=15.0, gt=0)
    leaderboard_size: int = Field(default=10, ge=1)
    cycle_epoch: datetime = DEFAULT_EPOCH
    cycle_days: int = Field(default=14, ge=1)
    log_level: str = "INFO"

    @field_validator("cycle_epoch")
    @classmethod
    def epoch_as_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @property
    def cycle_length(self) -> timedelta:
        return timedelta(days=self.cycle_days)


def load_settings(settings_path: Path | None = None) -> Settings:
    _load_env()
    raw = _load_yaml(settings_path)
    for env_name, field in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            raw[field] = value
    return Settings(**raw)
