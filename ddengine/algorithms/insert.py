from __future__ import annotations

from typing import TYPE_CHECKING

from ddengine.logging import get_logger
from ddengine.model.state import State

if TYPE_CHECKING:
    from ddengine.model.diagram import DecisionDiagram

logger = get_logger(__name__)


def add_state(index: int, state: State, diagram: DecisionDiagram) -> bool:
    """
    Insert `state` into layer `index` if it is new and not redundant.

    The redundancy strategy is consulted only for states that are not already
    present by structural equality. Rejected states are dropped silently.

    Args:
        index: Target layer index.
        state: Candidate state.
        diagram: Diagram owning the layer.
    Returns:
        True if the state was inserted.
    """
    layer = diagram.layers[index]
    if state in layer:
        return False
    if not diagram.redundancy(index, state, layer.view):
        logger.debug("Layer %d: redundancy strategy rejected %r", index, state)
        return False
    return layer.add(state)
