from __future__ import annotations

"""Loader for ingestion settings shared by the CLI and embedding applications."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from rmlIngest.core.formats import Format

CONFIG_ENV = "RML_INGEST_CONFIG"
SEARCH_PATH_ENV = "RML_INGEST_SEARCH_PATH"

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(slots=True)
class LoggingConfig:
    """Logging toggles with quiet defaults."""

    level: str = "WARNING"
    json_events: bool = True
    max_details_bytes: int = 4096

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level, logging.WARNING)


@dataclass(slots=True)
class IngestConfig:
    """Search roots and parsing defaults for mapping documents."""

    search_path: list[str] = field(default_factory=lambda: ["."])
    default_format: Format = Format.TURTLE
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def search_directories(self) -> list[Path]:
        return [Path(entry).expanduser() for entry in self.search_path]


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_format(value: Any) -> Format:
    raw = str(value or "").strip().lower()
    for fmt in Format:
        if raw in (fmt.value, fmt.name.lower()):
            return fmt
    return Format.TURTLE


def _coerce_search_path(value: Any) -> list[str]:
    if isinstance(value, str):
        entries = value.split(os.pathsep)
    elif isinstance(value, (list, tuple)):
        entries = [str(item) for item in value]
    else:
        return ["."]
    entries = [entry.strip() for entry in entries if entry and entry.strip()]
    return entries or ["."]


def _load_logging(data: Mapping[str, Any] | None) -> LoggingConfig:
    if not data:
        return LoggingConfig()
    level = str(data.get("level", "WARNING")).upper()
    return LoggingConfig(
        level=level if level in _LEVELS else "WARNING",
        json_events=bool(data.get("json_events", True)),
        max_details_bytes=max(0, _coerce_int(data.get("max_details_bytes"), 4096)),
    )


def config_path() -> Path | None:
    env = os.getenv(CONFIG_ENV)
    if env:
        return Path(env)
    return None


def load_config(path: Path | None = None) -> IngestConfig:
    """Load ingestion settings from YAML, then apply environment overrides."""

    if path is None:
        path = config_path()
    raw: dict[str, Any] = {}
    if path is not None and path.exists():
        loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if isinstance(loaded, dict):
            raw = loaded
    search_path = _coerce_search_path(raw.get("search_path", ["."]))
    env_search = os.getenv(SEARCH_PATH_ENV)
    if env_search:
        search_path = _coerce_search_path(env_search)
    return IngestConfig(
        search_path=search_path,
        default_format=_coerce_format(raw.get("default_format", Format.TURTLE.value)),
        logging=_load_logging(raw.get("logging")),
    )


__all__ = [
    "CONFIG_ENV",
    "SEARCH_PATH_ENV",
    "LoggingConfig",
    "IngestConfig",
    "config_path",
    "load_config",
]
