"""Configuration loading for the RFC document cache."""

from __future__ import annotations

import dataclasses
import os
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_DOWNLOAD_SOURCE = "https://www.rfc-editor.org/rfc/rfc#.txt"
DEFAULT_REQUEST_TIMEOUT = 30.0

_ENV_TO_FIELD = {
    "RFC_CACHE_DIR": "cache_directory",
    "RFC_DOWNLOAD_ENABLED": "download_enabled",
    "RFC_DOWNLOAD_SOURCE": "download_source",
    "RFC_REQUEST_TIMEOUT": "request_timeout",
}

_ALLOWED_KEYS = set(_ENV_TO_FIELD.values())

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def default_cache_directory(platform: str | None = None) -> str:
    """Return the unexpanded default cache directory for a platform."""
    platform = platform or sys.platform
    if platform == "darwin":
        return "~/Library/Caches/RFC"
    if platform.startswith("win"):
        return "~/AppData/Local/RFC"
    return "~/.cache/rfc"


def _as_bool(value: str | bool) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean value, got: {value!r}")


@dataclass(frozen=True)
class RfcConfig:
    """Resolved settings for locating and downloading RFC documents."""

    cache_directory: str
    download_enabled: bool = True
    download_source: str = DEFAULT_DOWNLOAD_SOURCE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def load(cls, config_path: Path | None = None) -> RfcConfig:
        """Load config with precedence: defaults < YAML < environment."""
        values: dict[str, str | bool | float] = {
            "cache_directory": default_cache_directory(),
            "download_enabled": True,
            "download_source": DEFAULT_DOWNLOAD_SOURCE,
            "request_timeout": DEFAULT_REQUEST_TIMEOUT,
        }

        values.update(cls._load_yaml_values(config_path))

        for env_key, field_name in _ENV_TO_FIELD.items():
            env_value = os.environ.get(env_key)
            if env_value is None or env_value == "":
                continue
            values[field_name] = env_value

        return cls(
            cache_directory=str(values["cache_directory"] or ""),
            download_enabled=_as_bool(values["download_enabled"]),  # type: ignore[arg-type]
            download_source=str(values["download_source"]),
            request_timeout=float(values["request_timeout"]),
        )

    @classmethod
    def _load_yaml_values(cls, config_path: Path | None) -> dict[str, str | bool | float]:
        candidates = (
            [config_path.expanduser()]
            if config_path is not None
            else [Path("~/.config/rfcnav/config.yaml").expanduser()]
        )

        for candidate in candidates:
            if not candidate.exists():
                continue

            with candidate.open("r", encoding="utf-8") as config_file:
                loaded = yaml.safe_load(config_file) or {}
            if not isinstance(loaded, dict):
                return {}

            return {key: value for key, value in loaded.items() if key in _ALLOWED_KEYS}

        return {}

    def replace(self, **changes) -> RfcConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def download_url(self, number: int) -> str:
        """Return the download URL with every ``#`` replaced by ``number``."""
        return self.download_source.replace("#", str(number))
