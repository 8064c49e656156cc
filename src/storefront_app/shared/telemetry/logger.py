from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .events import TelemetryEvent

logger = logging.getLogger(__name__)

DEFAULT_TELEMETRY_DIR = Path("artifacts") / "telemetry"


class TelemetryLogger:
    """Appends screen events to a JSONL file when enabled."""

    def __init__(self, *, app_name: str, enabled: bool = False, log_file: str | Path | None = None) -> None:
        self.app_name = app_name
        self.enabled = enabled
        self.log_file = Path(log_file) if log_file else DEFAULT_TELEMETRY_DIR / f"{app_name}.jsonl"

    @classmethod
    def from_env(cls, *, app_name: str) -> TelemetryLogger:
        enabled = os.getenv("ELECTROHUB_TELEMETRY_ENABLED", "0").strip().lower() in {"1", "true", "yes", "on"}
        log_file = (os.getenv("ELECTROHUB_TELEMETRY_FILE") or "").strip() or None
        return cls(app_name=app_name, enabled=enabled, log_file=log_file)

    def emit(self, event: TelemetryEvent) -> bool:
        logger.debug(
            "telemetry_event",
            extra={"screen": event.screen, "action": event.action, "success": event.success},
        )
        if not self.enabled:
            return False
        record = {"app_name": self.app_name, **event.to_dict()}
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with self.log_file.open("a", encoding="utf-8") as fp:
            fp.write(f"{json.dumps(record, sort_keys=True)}\n")
        return True
