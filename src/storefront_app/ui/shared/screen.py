from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from electrohub_sdk.load_state import LoadCoordinator, LoadStatus

from storefront_app.shared.telemetry.events import load_event, mutation_event
from storefront_app.shared.telemetry.logger import TelemetryLogger
from storefront_app.ui.shared.notification_center import TOP_CENTER, NotificationCenter

logger = logging.getLogger(__name__)


def _disabled_telemetry() -> TelemetryLogger:
    return TelemetryLogger(app_name="storefront", enabled=False)


def _record_count(records: Any) -> int | None:
    if isinstance(records, (list, tuple, set, frozenset)):
        return len(records)
    return None


@dataclass
class ScreenBase:
    """Shared wiring for screens: per-source loads, toasts and telemetry."""

    telemetry: TelemetryLogger = field(default_factory=_disabled_telemetry, kw_only=True)
    notifications: NotificationCenter = field(default_factory=NotificationCenter, kw_only=True)

    module = "screen"

    def _coordinator(self, *sources: str) -> LoadCoordinator:
        return LoadCoordinator(sources, on_error=self._report_failure)

    def _load(self, loads: LoadCoordinator, source: str, fetch: Callable[[], Any]) -> bool:
        started = time.monotonic()
        loaded = loads.run(source, fetch)
        duration_ms = int((time.monotonic() - started) * 1000)
        if loaded or loads.status(source) is LoadStatus.FAILED:
            self.telemetry.emit(
                load_event(
                    screen=self.module,
                    source=source,
                    success=loaded,
                    duration_ms=duration_ms,
                    record_count=_record_count(loads.records(source)) if loaded else None,
                    trace_id=getattr(loads.error(source), "trace_id", None),
                )
            )
        return loaded

    def _report_failure(self, source: str, error: Exception) -> None:
        trace_id = getattr(error, "trace_id", None)
        logger.warning("section_load_failed", extra={"screen": self.module, "source": source, "trace_id": trace_id})
        self.notifications.error(str(error), position=TOP_CENTER, details={"source": source, "trace_id": trace_id})

    def _emit_mutation(self, action: str, *, success: bool, trace_id: str | None = None, **context: Any) -> None:
        self.telemetry.emit(
            mutation_event(
                screen=self.module,
                action=action,
                success=success,
                trace_id=trace_id,
                context=context,
            )
        )
