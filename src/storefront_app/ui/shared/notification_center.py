from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

TOP_CENTER = "top-center"
BOTTOM_CENTER = "bottom-center"


@dataclass
class NotificationCenter:
    """Transient toast notices shown above the screen."""

    messages: list[dict[str, Any]] = field(default_factory=list)

    def push(
        self,
        *,
        level: str,
        message: str,
        position: str = TOP_CENTER,
        details: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        payload = {
            "level": level,
            "message": message,
            "position": position,
            "details": details or {},
        }
        self.messages.append(payload)
        return payload

    def success(self, message: str, *, position: str = TOP_CENTER) -> dict[str, Any]:
        return self.push(level="success", message=message, position=position)

    def error(self, message: str, *, position: str = TOP_CENTER, details: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.push(level="error", message=message, position=position, details=details)

    def clear(self) -> None:
        self.messages.clear()

    def render(self) -> dict[str, Any]:
        return {"count": len(self.messages), "messages": list(self.messages)}
