"""Strategy contracts consumed by the decision diagram engine.

The engine is generic: what a candidate means, how a successor is built, which
states are redundant, and how an over-wide layer is compacted are supplied by
the caller. Strategies may be four plain callables or one `Strategy` object.

Signatures (``index`` is the 0-based position of the variable being decided):

- candidates: ``(index, state, diagram) -> Iterable[candidate]``
- transition: ``(index, state, candidate, diagram) -> State``
- redundancy: ``(index, state, layer_states) -> bool`` (True keeps the state)
- compaction: ``(index, layer_states, diagram) -> Sequence[State]``

The redundancy strategy is a pure predicate. It receives a read-only view of
the layer and cannot remove existing entries; pruning of existing states
belongs in compaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, Sequence

from ddengine.model.state import State

if TYPE_CHECKING:
    from ddengine.model.diagram import DecisionDiagram

CandidatesFn = Callable[[int, State, "DecisionDiagram"], Iterable[Any]]
TransitionFn = Callable[[int, State, Any, "DecisionDiagram"], State]
RedundancyFn = Callable[[int, State, Sequence[State]], bool]
CompactionFn = Callable[[int, Sequence[State], "DecisionDiagram"], Sequence[State]]


class Strategy(ABC):
    """Bundle of the four strategies as methods.

    Subclasses implement `candidates` and `transition`. `keep` defaults to
    accepting every new state. Override `compact` to support a width limit;
    leaving it unimplemented means the diagram has no compaction strategy.
    """

    @abstractmethod
    def candidates(
        self, index: int, state: State, diagram: "DecisionDiagram"
    ) -> Iterable[Any]:
        """Return the candidates extending `state` at `index`."""

    @abstractmethod
    def transition(
        self, index: int, state: State, candidate: Any, diagram: "DecisionDiagram"
    ) -> State:
        """Return the successor of `state` under `candidate`."""

    def keep(self, index: int, state: State, layer_states: Sequence[State]) -> bool:
        return True

    def compact(
        self, index: int, layer_states: Sequence[State], diagram: "DecisionDiagram"
    ) -> Sequence[State]:
        raise NotImplementedError

    def compaction(self) -> Optional[CompactionFn]:
        """Return the bound `compact` method, or None if it is not overridden."""
        if type(self).compact is Strategy.compact:
            return None
        return self.compact


def accept_all(index: int, state: State, layer_states: Sequence[State]) -> bool:
    """Redundancy strategy that keeps every state not already in the layer."""
    return True
