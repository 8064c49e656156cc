from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from electrohub_sdk.load_state import LoadStatus


class ViewStateStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    SUCCESS = "success"
    FAILED = "failed"
    SIGNED_OUT = "signed_out"


@dataclass(frozen=True)
class ViewState:
    status: ViewStateStatus
    message: str | None = None
    data_available: bool = False

    @property
    def shows_placeholder(self) -> bool:
        return self.status in {ViewStateStatus.LOADING, ViewStateStatus.FAILED}

    def render(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "data_available": self.data_available,
            "placeholder": self.shows_placeholder,
        }


def resolve_section_state(
    load_status: LoadStatus,
    *,
    has_data: bool,
    empty_message: str = "No data found",
    error: str | None = None,
) -> ViewState:
    """Render state of one section, driven only by its own source."""
    if load_status is LoadStatus.FAILED:
        # A failed source keeps its skeleton; the toast carries the error.
        return ViewState(ViewStateStatus.FAILED, error)
    if load_status is not LoadStatus.LOADED:
        return ViewState(ViewStateStatus.LOADING, "Loading data...")
    if not has_data:
        return ViewState(ViewStateStatus.EMPTY, empty_message)
    return ViewState(ViewStateStatus.SUCCESS, "Ready", data_available=True)


def signed_out_state() -> ViewState:
    return ViewState(ViewStateStatus.SIGNED_OUT, "Sign in to continue")
