"""Environment-driven configuration for the permit checker."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_rule_table_path() -> str:
    return str(Path(__file__).resolve().parent / "regulation" / "tables" / "us48.yaml")


def _default_offline_assets() -> list[str]:
    return [
        "/",
        "/static/css/styles.css",
        "/static/js/app.js",
        "/manifest.json",
    ]


class Settings(BaseSettings):
    """Validated settings; environment variables always win over defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTEGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_title: str = Field(default="RouteGuard Permit Checker")
    log_level: str = Field(default="INFO")

    rule_table_path: str = Field(default_factory=_default_rule_table_path)
    default_jurisdiction: str = Field(default="OK")

    # Service worker cache; bump the version whenever the asset list changes.
    cache_name: str = Field(default="routeguard-v1")
    offline_assets: list[str] = Field(default_factory=_default_offline_assets)

    @field_validator("default_jurisdiction")
    @classmethod
    def _normalise_code(cls, value: str) -> str:
        return str(value).strip().upper()


settings = Settings()


__all__ = ["Settings", "settings"]
