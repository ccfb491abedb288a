"""Runtime settings for the CLI and the session service.

Settings come from an optional JSON or YAML file; omitted keys fall back to the
defaults declared on :class:`Settings`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

__all__ = ["ConfigError", "LOG_LEVELS", "Settings", "load_settings"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a settings file cannot be parsed or holds invalid values."""


@dataclass(frozen=True)
class Settings:
    """Configuration shared by the command line demo and the HTTP service."""

    history_path: Optional[Path] = None
    max_sessions: int = 10
    log_level: str = "WARNING"
    sort_by: str = "popularity.desc"
    max_live_sessions: int = 1000

    def __post_init__(self) -> None:
        for name in ("max_sessions", "max_live_sessions"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer")
            if value <= 0:
                raise ConfigError(f"{name} must be positive")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}; got {self.log_level!r}"
            )
        if not isinstance(self.sort_by, str) or not self.sort_by:
            raise ConfigError("sort_by must be a non-empty string")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.WARNING)


def load_settings(path: Union[str, Path, None] = None) -> Settings:
    """Load :class:`Settings` from *path*, returning defaults when it is ``None``."""

    if path is None:
        return Settings()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Settings file not found: {config_path}")

    text = config_path.read_text(encoding="utf-8")
    suffix = config_path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        elif suffix == ".json":
            data = json.loads(text)
        else:
            raise ConfigError(f"Unsupported settings format: {config_path.suffix!r}")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Invalid settings file {config_path}: {exc}") from exc

    if data is None:
        return Settings()
    if not isinstance(data, Mapping):
        raise ConfigError("Settings file must contain a mapping at the top level")
    return _settings_from_mapping(data)


def _settings_from_mapping(data: Mapping[str, Any]) -> Settings:
    known = {field.name for field in fields(Settings)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")

    overrides: dict[str, Any] = dict(data)
    history_path = overrides.get("history_path")
    if history_path is not None:
        overrides["history_path"] = Path(str(history_path)).expanduser()
    if "log_level" in overrides:
        overrides["log_level"] = str(overrides["log_level"]).upper()
    return replace(Settings(), **overrides)
