"""Per-source loading state for screens that fetch several record sources.

Each source (``orders``, ``sales_statistics``, ...) moves through
``idle -> loading -> loaded | failed`` on its own, so one section can render
while a sibling still shows its placeholder or has failed.

Every ``begin`` hands out a ticket stamped with the source's generation. A
result is applied only while that generation is still current; ``reset`` and a
change of the tracked dependency (for example the authentication flag) advance
all generations, so a response that arrives after the screen moved on is
dropped instead of overwriting newer state.

Failures are terminal until the dependency changes or the screen remounts:
there is no automatic retry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[str, Exception], None]

_UNSET = object()


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceState:
    status: LoadStatus = LoadStatus.IDLE
    records: Any = None
    error: Exception | None = None
    generation: int = 0


@dataclass(frozen=True)
class LoadTicket:
    source: str
    generation: int


class UnknownSourceError(KeyError):
    pass


@dataclass
class LoadCoordinator:
    sources: Iterable[str]
    on_error: ErrorCallback | None = None
    _states: dict[str, SourceState] = field(init=False, default_factory=dict)
    _dependency: Any = field(init=False, default=_UNSET)

    def __post_init__(self) -> None:
        self.sources = tuple(self.sources)
        self._states = {source: SourceState() for source in self.sources}

    def state(self, source: str) -> SourceState:
        try:
            return self._states[source]
        except KeyError:
            raise UnknownSourceError(source) from None

    def status(self, source: str) -> LoadStatus:
        return self.state(source).status

    def is_loaded(self, source: str) -> bool:
        return self.status(source) is LoadStatus.LOADED

    def is_pending(self, source: str) -> bool:
        """True while the section should keep its placeholder, including after a failure."""
        return not self.is_loaded(source)

    def needs_fetch(self, source: str) -> bool:
        return self.status(source) is LoadStatus.IDLE

    def records(self, source: str, default: Any = None) -> Any:
        """Loaded records, or an empty stand-in so derivations never see a failure."""
        state = self.state(source)
        if state.status is not LoadStatus.LOADED:
            return [] if default is None else default
        return state.records

    def error(self, source: str) -> Exception | None:
        return self.state(source).error

    def begin(self, source: str) -> LoadTicket:
        current = self.state(source)
        generation = current.generation + 1
        self._states[source] = SourceState(status=LoadStatus.LOADING, generation=generation)
        logger.debug("load_begin", extra={"source": source, "generation": generation})
        return LoadTicket(source=source, generation=generation)

    def is_current(self, ticket: LoadTicket) -> bool:
        current = self.state(ticket.source)
        return current.generation == ticket.generation and current.status is LoadStatus.LOADING

    def resolve(self, ticket: LoadTicket, records: Any) -> bool:
        if not self.is_current(ticket):
            logger.info("load_discarded_stale", extra={"source": ticket.source, "generation": ticket.generation})
            return False
        self._states[ticket.source] = replace(self.state(ticket.source), status=LoadStatus.LOADED, records=records)
        logger.debug("load_resolved", extra={"source": ticket.source, "generation": ticket.generation})
        return True

    def fail(self, ticket: LoadTicket, error: Exception) -> bool:
        if not self.is_current(ticket):
            logger.info("load_discarded_stale", extra={"source": ticket.source, "generation": ticket.generation})
            return False
        self._states[ticket.source] = replace(self.state(ticket.source), status=LoadStatus.FAILED, error=error)
        logger.warning(
            "load_failed",
            extra={"source": ticket.source, "generation": ticket.generation, "error": str(error)},
        )
        if self.on_error is not None:
            self.on_error(ticket.source, error)
        return True

    def run(self, source: str, fetch: Callable[[], Sequence[Any] | Any]) -> bool:
        """Fetch one source and record the outcome; errors end up in ``failed``."""
        ticket = self.begin(source)
        try:
            records = fetch()
        except Exception as exc:
            self.fail(ticket, exc)
            return False
        return self.resolve(ticket, records)

    def replace_records(self, source: str, records: Any) -> bool:
        """Apply a local edit (e.g. a removed row) to a loaded source."""
        state = self.state(source)
        if state.status is not LoadStatus.LOADED:
            return False
        self._states[source] = replace(state, records=records)
        return True

    def sync_dependency(self, value: Any) -> bool:
        """Track the value loads depend on; a change sends every source back to idle."""
        if self._dependency is not _UNSET and self._dependency == value:
            return False
        first = self._dependency is _UNSET
        self._dependency = value
        if not first:
            logger.info("load_dependency_changed", extra={"sources": list(self._states)})
            self._invalidate_all()
        return True

    def reset(self) -> None:
        self._dependency = _UNSET
        self._invalidate_all()

    def _invalidate_all(self) -> None:
        for source, state in self._states.items():
            self._states[source] = SourceState(generation=state.generation + 1)
