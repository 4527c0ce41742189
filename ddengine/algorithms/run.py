"""Depth-by-depth construction of a decision diagram.

The orchestrator forwards the root state into the first layer, then for each
following variable forwards every state of the previous layer and compacts
the new layer. A layer is sealed once it has been compacted, so it is only
read while the next layer is built.
"""

from __future__ import annotations

from time import perf_counter
from typing import TYPE_CHECKING

from ddengine.algorithms.compact import compact_width
from ddengine.algorithms.forward import forward
from ddengine.exceptions import InfeasibleError
from ddengine.logging import get_logger
from ddengine.results import DiagramResult

if TYPE_CHECKING:
    from ddengine.model.diagram import DecisionDiagram

logger = get_logger(__name__)


def run_diagram(diagram: DecisionDiagram) -> DiagramResult:
    """Build every layer of `diagram` in variable order.

    Args:
        diagram: A configured diagram whose layers are all empty.

    Returns:
        DiagramResult with the surviving states of every layer.

    Raises:
        InfeasibleError: A layer is empty before the last variable, or the
            last layer is empty. No further layer is processed.
        WidthLimitError: A layer exceeds the width limit without a
            compaction strategy.
    """
    tracer = diagram.tracer
    variables = diagram.variables
    layers = diagram.layers
    start = perf_counter()

    tracer.root(diagram.initial_state)
    forward(0, diagram.initial_state, diagram, tracer)
    tracer.depth(0, variables[0], layers[0].states)
    compact_width(0, diagram, tracer)
    layers[0].seal()
    logger.debug("Depth 0 (%r) has %d states", variables[0], len(layers[0]))

    for index in range(1, len(variables)):
        source = layers[index - 1]
        if not source:
            logger.debug("Layer %d is empty; stopping", index - 1)
            raise InfeasibleError(index - 1, variables[index - 1])

        for state in source:
            forward(index, state, diagram, tracer)

        tracer.depth(index, variables[index], layers[index].states)
        compact_width(index, diagram, tracer)
        layers[index].seal()
        logger.debug(
            "Depth %d (%r) has %d states", index, variables[index], len(layers[index])
        )

    last = len(variables) - 1
    if not layers[last]:
        raise InfeasibleError(last, variables[last])

    logger.debug(
        "Built %d layers in %.3f seconds (final width %d)",
        len(layers),
        perf_counter() - start,
        len(layers[last]),
    )
    return DiagramResult.from_layers(variables, layers)
