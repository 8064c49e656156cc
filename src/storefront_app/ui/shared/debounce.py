from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

DEFAULT_SEARCH_DEBOUNCE_MS = 300


@dataclass
class SearchDebouncer:
    """Holds back search text until typing has paused for ``wait_ms``."""

    wait_ms: int = DEFAULT_SEARCH_DEBOUNCE_MS
    now: Callable[[], float] = time.monotonic
    pending: str = ""
    settled: str = ""
    _changed_at: float | None = field(default=None, init=False)

    def update(self, term: str) -> None:
        self.pending = term
        if self.wait_ms <= 0:
            self.settled = term
            self._changed_at = None
            return
        self._changed_at = self.now()

    def poll(self) -> str:
        if self._changed_at is not None and (self.now() - self._changed_at) * 1000 >= self.wait_ms:
            self.settled = self.pending
            self._changed_at = None
        return self.settled

    def flush(self) -> str:
        self.settled = self.pending
        self._changed_at = None
        return self.settled

    def reset(self) -> None:
        self.pending = ""
        self.settled = ""
        self._changed_at = None
