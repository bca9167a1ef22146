from __future__ import annotations

"""One-line JSON events for command-line runs.

Each event is a flat object with ``ts``, ``level``, ``service`` and ``event``
keys, an optional ``status`` and a ``details`` object built from keyword
arguments. Events go to ``sys.stderr`` so they never mix with command output.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


class _StderrHandler(logging.StreamHandler):
    """Write to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def _plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(v) for v in value]
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return str(value)


def _dumps(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def _cap(details: dict[str, Any], limit: int) -> dict[str, Any]:
    encoded = _dumps(details).encode("utf-8")
    if limit <= 0 or len(encoded) <= limit:
        return details
    return {
        "note": "truncated",
        "bytes": len(encoded),
        "preview": encoded[:limit].decode("utf-8", errors="ignore"),
    }


class JsonLogger:
    """Structured event sink for one service, such as the CLI."""

    def __init__(
        self,
        service: str,
        *,
        logger: logging.Logger | None = None,
        enabled: bool = True,
        max_details_bytes: int = 4096,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.service = service
        self.enabled = enabled
        self.max_details_bytes = max(0, int(max_details_bytes))
        self.context = dict(context or {})
        if logger is None:
            logger = logging.getLogger(f"rmlingest.events.{service}")
            if not logger.handlers:
                handler = _StderrHandler()
                handler.setFormatter(logging.Formatter("%(message)s"))
                logger.addHandler(handler)
            logger.propagate = False
        logger.setLevel(logging.DEBUG)
        self._logger = logger

    def bind(self, **context: Any) -> "JsonLogger":
        """Return a logger whose events also carry ``context`` as details."""

        return JsonLogger(
            self.service,
            logger=self._logger,
            enabled=self.enabled,
            max_details_bytes=self.max_details_bytes,
            context={**self.context, **context},
        )

    def event(self, level: int, event: str, **fields: Any) -> dict[str, Any] | None:
        if not self.enabled:
            return None
        status = fields.pop("status", None)
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "service": self.service,
            "event": event,
        }
        if status is not None:
            entry["status"] = status
        details = _plain({**self.context, **fields})
        if details:
            entry["details"] = _cap(details, self.max_details_bytes)
        self._logger.log(level, _dumps(entry))
        return entry

    def info(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self.event(logging.INFO, event, **fields)

    def warning(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self.event(logging.WARNING, event, **fields)

    def error(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self.event(logging.ERROR, event, **fields)


__all__ = ["JsonLogger"]
