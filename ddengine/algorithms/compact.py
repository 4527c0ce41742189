from __future__ import annotations

from typing import TYPE_CHECKING, List

from ddengine.exceptions import WidthLimitError
from ddengine.logging import get_logger
from ddengine.model.state import State
from ddengine.trace import TraceSink

if TYPE_CHECKING:
    from ddengine.model.diagram import DecisionDiagram

logger = get_logger(__name__)


def compact_width(
    index: int,
    diagram: DecisionDiagram,
    tracer: TraceSink | None = None,
) -> bool:
    """
    Enforce the width limit on layer `index` once its expansion is complete.

    Layers within the limit are left untouched. Otherwise the compaction
    strategy's output replaces the layer; duplicates in that output are
    dropped, and the result is not validated further beyond a warning.

    Args:
        index: Layer index.
        diagram: Diagram owning the layer.
        tracer: Optional trace sink; defaults to the diagram's.
    Returns:
        True if the compaction strategy was invoked.
    Raises:
        WidthLimitError: The layer exceeds the limit and there is no
            compaction strategy.
        TypeError: The compaction strategy returned None.
    """
    layer = diagram.layers[index]
    size = len(layer)
    width_limit = diagram.width_limit
    if width_limit is None or size <= width_limit:
        return False

    if diagram.compaction is None:
        logger.error(
            "Layer %d has %d states, above width limit %d, and no compaction strategy",
            index,
            size,
            width_limit,
        )
        raise WidthLimitError(width_limit, index=index, size=size)

    if tracer is None:
        tracer = diagram.tracer
    tracer.compacting(index, size, width_limit)

    compacted = diagram.compaction(index, layer.view, diagram)
    if compacted is None:
        raise TypeError(
            f"Compaction strategy returned None for layer {index}; "
            "it must return the states to keep"
        )
    # Materialize first: the strategy may hand back the live view itself
    kept: List[State] = [State.coerce(s) for s in compacted]
    layer.replace(kept)

    if len(layer) > width_limit:
        logger.warning(
            "Layer %d still has %d states after compaction (width limit %d)",
            index,
            len(layer),
            width_limit,
        )
    logger.debug("Layer %d compacted from %d to %d states", index, size, len(layer))
    tracer.compacted(index, layer.states)
    return True
