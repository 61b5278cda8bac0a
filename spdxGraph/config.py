from __future__ import annotations

"""Loader for mapper configuration (markup parser and structured logging)."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from spdxGraph.transforms.markup import DEFAULT_PARSER, SUPPORTED_PARSERS

CONFIG_ENV = "SPDXGRAPH_CONFIG"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be interpreted."""


@dataclass(slots=True)
class LoggingConfig:
    """Settings for the structured JSON event log."""

    enabled: bool = True
    sample_rate: float = 1.0
    max_details_bytes: int = 2048


@dataclass(slots=True)
class MappingConfig:
    """Runtime settings for loading and saving license nodes."""

    html_parser: str = DEFAULT_PARSER
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _coerce_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _load_logging(data: Mapping[str, Any] | None) -> LoggingConfig:
    if not data:
        return LoggingConfig()
    return LoggingConfig(
        enabled=bool(data.get("enabled", True)),
        sample_rate=max(0.0, min(1.0, _coerce_float(data.get("sample_rate"), 1.0))),
        max_details_bytes=max(0, _coerce_int(data.get("max_details_bytes"), 2048)),
    )


def config_path() -> Path | None:
    env = os.getenv(CONFIG_ENV)
    return Path(env) if env else None


def load_config(path: Path | None = None) -> MappingConfig:
    """Load mapper settings from YAML with safe defaults."""

    if path is None:
        path = config_path()
    if path is None or not path.exists():
        return MappingConfig()
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config: {path}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Config root must be a mapping: {path}")
    parser = str((raw.get("markup") or {}).get("parser", DEFAULT_PARSER))
    if parser not in SUPPORTED_PARSERS:
        raise ConfigError(
            f"Unsupported markup parser {parser!r}; expected one of {', '.join(SUPPORTED_PARSERS)}"
        )
    return MappingConfig(html_parser=parser, logging=_load_logging(raw.get("logging")))


__all__ = [
    "CONFIG_ENV",
    "ConfigError",
    "LoggingConfig",
    "MappingConfig",
    "config_path",
    "load_config",
]
