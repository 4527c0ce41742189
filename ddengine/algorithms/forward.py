from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from ddengine.algorithms.insert import add_state
from ddengine.model.state import State
from ddengine.trace import TraceSink

if TYPE_CHECKING:
    from ddengine.model.diagram import DecisionDiagram


def forward(
    index: int,
    state: State,
    diagram: DecisionDiagram,
    tracer: TraceSink | None = None,
) -> int:
    """
    Expand `state` by the variable at `index` into layer `index`.

    Candidates are taken in the order the candidate strategy returns them. When
    it returns nothing, the diagram's sentinel candidate is used, so every state
    gets at least one transition attempt.

    Args:
        index: Index of the variable (and target layer).
        state: State being expanded.
        diagram: Diagram providing strategies and layers.
        tracer: Optional trace sink; defaults to the diagram's.
    Returns:
        Number of successor states inserted into the target layer.
    """
    if tracer is None:
        tracer = diagram.tracer

    produced = diagram.candidates(index, state, diagram)
    candidates: List[Any] = list(produced) if produced is not None else []
    if not candidates:
        candidates = [diagram.empty_candidate]

    tracer.candidates(index, state, candidates)

    inserted = 0
    for candidate in candidates:
        next_state = State.coerce(diagram.transition(index, state, candidate, diagram))
        added = add_state(index, next_state, diagram)
        tracer.transition(index, candidate, next_state, added)
        inserted += int(added)
    return inserted
