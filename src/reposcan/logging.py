from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator

LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}


class ScanLogger:
    """Structured JSON logger writing to stderr, with optional GitHub Actions annotations."""

    def __init__(self, scan_id: str, *, min_level: str = "warning", annotations: bool = False):
        self.scan_id = scan_id
        self.min_level = min_level
        self.annotations = annotations

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("error", message, **kwargs)

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS.get(self.min_level, LEVELS["warning"])

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Context manager that tracks stage timing."""
        start = datetime.now(timezone.utc)
        self.info("stage_start", stage=name)
        status = "ok"
        try:
            yield
        except Exception as exc:  # pragma: no cover - pass-through
            status = "error"
            self.error("stage_error", stage=name, error=str(exc))
            raise
        finally:
            end = datetime.now(timezone.utc)
            duration_ms = int((end - start).total_seconds() * 1000)
            self.info("stage_end", stage=name, duration_ms=duration_ms, status=status)

    def _emit(self, level: str, message: str, **kwargs: Any) -> None:
        """Emit structured JSON log + GitHub annotation for warnings and errors."""
        if not self.enabled_for(level):
            return
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "scan_id": self.scan_id,
            "message": message,
        }
        payload.update(self._sanitize(kwargs))

        sys.stderr.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        sys.stderr.flush()

        if not self.annotations:
            return
        if level == "error":
            sys.stderr.write(f"::error::{message}\n")
            sys.stderr.flush()
        elif level == "warning":
            sys.stderr.write(f"::warning::{message}\n")
            sys.stderr.flush()

    @staticmethod
    def _sanitize(fields: Dict[str, Any]) -> Dict[str, Any]:
        redacted: Dict[str, Any] = {}
        for key, value in fields.items():
            if ScanLogger._is_sensitive_key(key):
                redacted[key] = "***"
            else:
                redacted[key] = value
        return redacted

    @staticmethod
    def _is_sensitive_key(key: str) -> bool:
        lowered = key.lower()
        return any(token in lowered for token in ("token", "secret", "password", "api_key", "apikey"))
