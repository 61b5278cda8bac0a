from __future__ import annotations

"""Structured JSON logger for mapper events."""

import json
import logging
import random
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, MutableMapping

from rdflib.term import Node

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# License texts run to many kilobytes; events only carry a preview.
MAX_STRING_CHARS = 120


def _shorten(value: str) -> str:
    if len(value) <= MAX_STRING_CHARS:
        return value
    return value[:MAX_STRING_CHARS] + f"...(+{len(value) - MAX_STRING_CHARS} chars)"


def _sanitize(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {str(k): _sanitize(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, (list, tuple)):
        return [_sanitize(v) for v in obj]
    if isinstance(obj, (int, float, bool)):
        return obj
    if obj is None:
        return None
    if isinstance(obj, Node):
        return str(obj)
    return _shorten(str(obj))


def _truncate(details: Mapping[str, Any] | Iterable[Any], max_bytes: int) -> Any:
    if max_bytes <= 0:
        return details
    serialized = json.dumps(details, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    blob = serialized.encode("utf-8")
    if len(blob) <= max_bytes:
        return details
    preview = blob[:max_bytes].decode("utf-8", errors="ignore")
    return {"note": "truncated", "preview": preview}


class JsonLogger:
    """Emit structured JSON events with consistent keys."""

    def __init__(
        self,
        service: str,
        *,
        logger: logging.Logger | None = None,
        enabled: bool = True,
        max_details_bytes: int = 2048,
        sample_rate: float = 1.0,
    ) -> None:
        self._service = service
        self._logger = logger or logging.getLogger(f"spdxgraph.{service}.json")
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)
        self._logger.propagate = False
        self._logger.setLevel(logging.INFO)
        self._enabled = enabled
        self._max_details_bytes = max(0, int(max_details_bytes))
        self._sample_rate = max(0.0, min(1.0, float(sample_rate)))

    @classmethod
    def from_config(cls, service: str, config: Any, **kwargs: Any) -> "JsonLogger":
        """Build a logger from a :class:`~spdxGraph.config.LoggingConfig`."""

        return cls(
            service,
            enabled=config.enabled,
            max_details_bytes=config.max_details_bytes,
            sample_rate=config.sample_rate,
            **kwargs,
        )

    def debug(self, event: str, **fields: Any) -> None:
        return self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        return self._emit("INFO", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        return self._emit("WARNING", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        return self._emit("ERROR", event, fields)

    def emit(self, level: str, event: str, **fields: Any) -> None:
        return self._emit(level.upper(), event, dict(fields))

    def should_sample(self) -> bool:
        if self._sample_rate >= 1.0:
            return True
        return random.random() <= self._sample_rate

    def _emit(self, level: str, event: str, fields: MutableMapping[str, Any]) -> dict[str, Any] | None:
        if not self._enabled or not self.should_sample():
            return None
        level = level.upper()
        if not self._logger.isEnabledFor(_LEVEL_MAP.get(level, logging.INFO)):
            return None
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "service": self._service,
            "event": event,
        }
        for key in ("node", "license_id"):
            value = fields.pop(key, None)
            if value is not None:
                entry[key] = _sanitize(value)
        details = fields.pop("details", None)
        if details is not None:
            entry["details"] = _truncate(_sanitize(details), self._max_details_bytes)
        if fields:
            residual = _truncate(_sanitize(fields), self._max_details_bytes)
            if "details" in entry and isinstance(entry["details"], dict) and isinstance(residual, dict):
                entry["details"].update(residual)
            else:
                entry["details"] = residual
        payload = json.dumps(entry, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
        self._logger.log(_LEVEL_MAP.get(level, logging.INFO), payload)
        return entry


__all__ = ["JsonLogger", "MAX_STRING_CHARS"]
