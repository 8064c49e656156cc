"""Screen telemetry events.

Two things are recorded: a source finishing its load (with how long the fetch
took and how many records came back) and the outcome of a shopper mutation.
Events describe what the screen did, never who the shopper is, so context is
limited to the keys in ``CONTEXT_KEYS``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

CONTEXT_KEYS = frozenset({"source", "record_count", "product_id", "review_id"})


class TelemetryCategory(str, Enum):
    SOURCE_LOAD = "source_load"
    MUTATION = "mutation"


@dataclass(frozen=True)
class TelemetryEvent:
    category: TelemetryCategory
    screen: str
    action: str
    success: bool
    timestamp_utc: str
    trace_id: str | None = None
    duration_ms: int | None = None
    error_code: str | None = None
    context: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "category": self.category.value,
            "screen": self.screen,
            "action": self.action,
            "success": self.success,
            "timestamp_utc": self.timestamp_utc,
        }
        for key in ("trace_id", "duration_ms", "error_code"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        if self.context:
            payload["context"] = dict(self.context)
        return payload


def _checked_context(context: Mapping[str, Any] | None) -> dict[str, Any]:
    if not context:
        return {}
    unexpected = sorted(key for key in context if key not in CONTEXT_KEYS)
    if unexpected:
        raise ValueError(f"Unsupported telemetry context keys: {unexpected}")
    return {key: value for key, value in context.items() if value is not None}


def _timestamp(now: datetime | None) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def load_event(
    *,
    screen: str,
    source: str,
    success: bool,
    duration_ms: int,
    record_count: int | None = None,
    trace_id: str | None = None,
    now: datetime | None = None,
) -> TelemetryEvent:
    return TelemetryEvent(
        category=TelemetryCategory.SOURCE_LOAD,
        screen=screen,
        action=f"{source}.load",
        success=success,
        timestamp_utc=_timestamp(now),
        trace_id=trace_id,
        duration_ms=duration_ms,
        error_code=None if success else "read_failed",
        context=_checked_context({"source": source, "record_count": record_count}),
    )


def mutation_event(
    *,
    screen: str,
    action: str,
    success: bool,
    trace_id: str | None = None,
    context: Mapping[str, Any] | None = None,
    now: datetime | None = None,
) -> TelemetryEvent:
    return TelemetryEvent(
        category=TelemetryCategory.MUTATION,
        screen=screen,
        action=action,
        success=success,
        timestamp_utc=_timestamp(now),
        trace_id=trace_id,
        error_code=None if success else "mutation_failed",
        context=_checked_context(context),
    )
