from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from storefront_app.shared.telemetry.events import TelemetryCategory, load_event, mutation_event
from storefront_app.shared.telemetry.logger import DEFAULT_TELEMETRY_DIR, TelemetryLogger


def test_load_event_shape() -> None:
    event = load_event(
        screen="seller_dashboard",
        source="orders",
        success=True,
        duration_ms=42,
        record_count=12,
        now=datetime(2024, 3, 7, tzinfo=timezone.utc),
    )

    assert event.category is TelemetryCategory.SOURCE_LOAD
    assert event.to_dict() == {
        "category": "source_load",
        "screen": "seller_dashboard",
        "action": "orders.load",
        "success": True,
        "timestamp_utc": "2024-03-07T00:00:00+00:00",
        "duration_ms": 42,
        "context": {"source": "orders", "record_count": 12},
    }


def test_failed_load_event_carries_error_code_and_trace() -> None:
    event = load_event(screen="user_orders", source="orders", success=False, duration_ms=5, trace_id="trace-9")

    payload = event.to_dict()
    assert payload["error_code"] == "read_failed"
    assert payload["trace_id"] == "trace-9"
    assert payload["context"] == {"source": "orders"}


def test_mutation_event_keeps_target_ids() -> None:
    event = mutation_event(screen="user_wishlist", action="wishlist.delete", success=False, context={"product_id": 7})

    assert event.to_dict()["context"] == {"product_id": 7}
    assert event.error_code == "mutation_failed"


@pytest.mark.parametrize("key", ["customer_name", "email", "token"])
def test_context_outside_allowed_keys_is_rejected(key: str) -> None:
    with pytest.raises(ValueError, match="Unsupported telemetry context keys"):
        mutation_event(screen="s", action="a", success=True, context={key: "value"})


def test_logger_appends_jsonl_when_enabled(tmp_path) -> None:
    log_file = tmp_path / "telemetry.jsonl"
    telemetry = TelemetryLogger(app_name="storefront", enabled=True, log_file=log_file)

    assert telemetry.emit(mutation_event(screen="user_wishlist", action="cart.add", success=True)) is True
    assert telemetry.emit(mutation_event(screen="user_wishlist", action="cart.add", success=False)) is True

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [line["success"] for line in lines] == [True, False]
    assert lines[0]["app_name"] == "storefront"
    assert lines[0]["action"] == "cart.add"


def test_logger_is_disabled_by_default(tmp_path) -> None:
    telemetry = TelemetryLogger(app_name="storefront", log_file=tmp_path / "t.jsonl")

    assert telemetry.emit(mutation_event(screen="s", action="a", success=True)) is False
    assert not (tmp_path / "t.jsonl").exists()


def test_from_env_reads_flag_and_file(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("ELECTROHUB_TELEMETRY_ENABLED", "yes")
    monkeypatch.setenv("ELECTROHUB_TELEMETRY_FILE", str(tmp_path / "events.jsonl"))

    telemetry = TelemetryLogger.from_env(app_name="storefront")

    assert telemetry.enabled is True
    assert telemetry.log_file == tmp_path / "events.jsonl"


def test_from_env_defaults_to_disabled() -> None:
    telemetry = TelemetryLogger.from_env(app_name="storefront")

    assert telemetry.enabled is False
    assert telemetry.log_file == DEFAULT_TELEMETRY_DIR / "storefront.jsonl"
