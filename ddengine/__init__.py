"""ddengine: width-limited layered decision diagram engine.

Builds a decision diagram one ordered variable at a time. Each layer holds the
distinct states reachable at that depth, filtered by a redundancy strategy and
compacted when it exceeds the width limit. Problem semantics come entirely
from four caller-supplied strategies.

Primary API:
    DecisionDiagram - Configuration, layer storage, and `run()`
    State - Immutable, structurally comparable partial configuration
    Strategy - Optional base class bundling the four strategies
    DiagramResult - Surviving states per layer
    Scenario - YAML-described diagram with strategies referenced by name

Example:
    from ddengine import DecisionDiagram

    dd = DecisionDiagram(
        variables=["x1", "x2", "x3"],
        initial_state={"x": 0},
        candidates=lambda index, state, diagram: [0, 1],
        transition=lambda index, state, c, diagram: state.set(
            diagram.variables[index], c
        ),
    )
    result = dd.run()
    result.widths  # (2, 4, 8)
"""

from __future__ import annotations

from ddengine import logging
from ddengine._version import __version__
from ddengine.exceptions import DecisionDiagramError, InfeasibleError, WidthLimitError
from ddengine.model.diagram import DecisionDiagram
from ddengine.model.layer import Layer
from ddengine.model.state import State
from ddengine.results import DiagramResult
from ddengine.scenario import Scenario
from ddengine.strategies import Strategy, accept_all, register_strategy
from ddengine.trace import LoggingTraceSink, NullTraceSink, TraceSink

__all__ = [
    "__version__",
    # Model
    "DecisionDiagram",
    "Layer",
    "State",
    "DiagramResult",
    # Strategies
    "Strategy",
    "accept_all",
    "register_strategy",
    # Errors
    "DecisionDiagramError",
    "InfeasibleError",
    "WidthLimitError",
    # Scenario files
    "Scenario",
    # Tracing
    "TraceSink",
    "NullTraceSink",
    "LoggingTraceSink",
    "logging",
]
