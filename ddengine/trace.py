"""Observational trace sinks for diagram runs.

A sink receives human-readable events while the engine expands and compacts
layers. Sinks never influence control flow. `NullTraceSink` discards events;
`LoggingTraceSink` writes one line per event to the ``ddengine.trace`` logger.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

from ddengine.logging import get_trace_logger
from ddengine.model.state import State


class TraceSink(Protocol):
    """Receiver of diagram run events."""

    def root(self, state: State) -> None: ...

    def candidates(
        self, index: int, state: State, candidates: Sequence[Any]
    ) -> None: ...

    def transition(
        self, index: int, candidate: Any, state: State, inserted: bool
    ) -> None: ...

    def depth(self, index: int, variable: Any, states: Sequence[State]) -> None: ...

    def compacting(self, index: int, size: int, width_limit: int) -> None: ...

    def compacted(self, index: int, states: Sequence[State]) -> None: ...


class NullTraceSink:
    """Sink that ignores every event."""

    def root(self, state: State) -> None:
        pass

    def candidates(self, index: int, state: State, candidates: Sequence[Any]) -> None:
        pass

    def transition(
        self, index: int, candidate: Any, state: State, inserted: bool
    ) -> None:
        pass

    def depth(self, index: int, variable: Any, states: Sequence[State]) -> None:
        pass

    def compacting(self, index: int, size: int, width_limit: int) -> None:
        pass

    def compacted(self, index: int, states: Sequence[State]) -> None:
        pass


class LoggingTraceSink:
    """Sink that writes each event as one line to a logger.

    Args:
        logger: Destination logger. Defaults to ``ddengine.trace``.
        level: Level used for every event line.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO):
        self.logger = logger or get_trace_logger()
        self.level = level

    def _emit(self, message: str, *args: Any) -> None:
        self.logger.log(self.level, message, *args)

    def root(self, state: State) -> None:
        self._emit(" * Forwarding at the root %s", dict(state))

    def candidates(self, index: int, state: State, candidates: Sequence[Any]) -> None:
        self._emit("  - In %s we have the candidates %r", dict(state), list(candidates))

    def transition(
        self, index: int, candidate: Any, state: State, inserted: bool
    ) -> None:
        outcome = "kept" if inserted else "rejected"
        self._emit(
            "   > Candidate %r generated state %s (%s)", candidate, dict(state), outcome
        )

    def depth(self, index: int, variable: Any, states: Sequence[State]) -> None:
        self._emit(
            " * Depth %d (variable %r) has %d states: %s",
            index,
            variable,
            len(states),
            [dict(s) for s in states],
        )

    def compacting(self, index: int, size: int, width_limit: int) -> None:
        self._emit(
            " * Compacting layer %d from %d to %d states", index, size, width_limit
        )

    def compacted(self, index: int, states: Sequence[State]) -> None:
        self._emit(
            " * Layer %d states after compaction: %s", index, [dict(s) for s in states]
        )
