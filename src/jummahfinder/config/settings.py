# src/jummahfinder/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/jummahfinder/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `JUMMAHFINDER_CONFIG_PATH`
- environment variables (e.g., `JUMMAHFINDER_API_URL`, `JUMMAHFINDER_API_TOKEN`)

Design rule:
- Tuning knobs live in YAML, not hard-coded in search/proximity logic.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from jummahfinder.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `jummahfinder.config`."""
    text = resources.files("jummahfinder.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "Jummah Finder"
    http_timeout_seconds: float = 15
    log_level: str = "INFO"


class BackendSettings(BaseModel):
    base_url: str = "http://localhost:5000/api"
    token: str | None = None


class CatalogSettings(BaseModel):
    path: str = "data/masjids.json"


class SearchSettings(BaseModel):
    default_radius_km: float = Field(5.0, gt=0)
    max_radius_km: float = Field(50.0, gt=0)

    @model_validator(mode="after")
    def _validate_radius(self) -> "SearchSettings":
        if self.default_radius_km > self.max_radius_km:
            raise ValueError("search.default_radius_km must not exceed search.max_radius_km")
        return self


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    backend: BackendSettings = Field(default_factory=BackendSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: the whitelist stays small; everything else belongs in YAML.
    """
    data = dict(data)

    log_level = os.getenv("JUMMAHFINDER_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    api_url = os.getenv("JUMMAHFINDER_API_URL")
    if api_url:
        data.setdefault("backend", {})["base_url"] = api_url

    api_token = os.getenv("JUMMAHFINDER_API_TOKEN")
    if api_token:
        data.setdefault("backend", {})["token"] = api_token

    catalog_path = os.getenv("JUMMAHFINDER_CATALOG_PATH")
    if catalog_path:
        data.setdefault("catalog", {})["path"] = catalog_path

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("JUMMAHFINDER_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
