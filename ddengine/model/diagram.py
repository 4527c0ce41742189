"""Decision diagram configuration and per-layer state storage.

`DecisionDiagram` owns everything a run needs: the variable ordering, the root
state, the width limit, the sentinel candidate, the strategies, and one
`Layer` per variable. It is built once and run once.

Example:
    dd = DecisionDiagram(
        variables=["x1", "x2", "x3"],
        initial_state={"x": 0},
        candidates=lambda i, s, d: [0, 1],
        transition=lambda i, s, c, d: s.set(d.variables[i], c),
    )
    result = dd.run()
    assert result.widths == (2, 4, 8)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Union

from ddengine.algorithms.run import run_diagram
from ddengine.exceptions import WidthLimitError
from ddengine.logging import get_logger
from ddengine.model.layer import Layer
from ddengine.model.state import State
from ddengine.results import DiagramResult
from ddengine.strategies.base import (
    CandidatesFn,
    CompactionFn,
    RedundancyFn,
    Strategy,
    TransitionFn,
    accept_all,
)
from ddengine.trace import LoggingTraceSink, NullTraceSink, TraceSink

logger = get_logger(__name__)


@dataclass
class DecisionDiagram:
    """Configuration and layer storage for one width-limited diagram run.

    Attributes:
        variables: Ordered variables; one layer is built per variable.
        initial_state: Root state forwarded into the first layer.
        candidates: Candidate strategy.
        transition: Transition strategy.
        redundancy: Redundancy predicate; keeps every new state by default.
        compaction: Optional compaction strategy, required when `width_limit`
            is set.
        width_limit: Maximum number of states per layer, or None for no limit.
        empty_candidate: Sentinel candidate used when a state has no candidates.
        domain: Candidate domain. The engine stores it for strategies to read
            (see the ``domain`` built-in candidate strategy) and never consults
            it itself.
        trace: True to trace through the ``ddengine.trace`` logger, or a
            custom `TraceSink`.
        layers: One layer per variable, populated by `run()`.
    """

    variables: Sequence[Any]
    initial_state: Mapping[Any, Any]
    candidates: CandidatesFn
    transition: TransitionFn
    redundancy: RedundancyFn = accept_all
    compaction: Optional[CompactionFn] = None
    width_limit: Optional[int] = None
    empty_candidate: Any = None
    domain: Sequence[Any] = field(default_factory=tuple)
    trace: Union[bool, TraceSink] = False
    layers: List[Layer] = field(init=False, repr=False)
    _has_run: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Normalize inputs and validate the configuration.

        Raises:
            ValueError: If there are no variables or the width limit is not a
                positive integer.
            TypeError: If a strategy is not callable or the initial state is not
                a mapping of hashable values.
            WidthLimitError: If a width limit is set without a compaction
                strategy.
        """
        self.variables = tuple(self.variables)
        if not self.variables:
            logger.error("DecisionDiagram requires at least one variable")
            raise ValueError("DecisionDiagram requires at least one variable")

        self.initial_state = State.coerce(self.initial_state)
        self.domain = tuple(self.domain)

        for name in ("candidates", "transition", "redundancy"):
            if not callable(getattr(self, name)):
                logger.error("DecisionDiagram.%s must be callable", name)
                raise TypeError(f"DecisionDiagram.{name} strategy must be callable")
        if self.compaction is not None and not callable(self.compaction):
            logger.error("DecisionDiagram.compaction must be callable or None")
            raise TypeError("DecisionDiagram.compaction strategy must be callable")

        if self.width_limit is not None:
            if (
                isinstance(self.width_limit, bool)
                or not isinstance(self.width_limit, int)
                or self.width_limit < 1
            ):
                logger.error(
                    "DecisionDiagram.width_limit must be a positive int: %r",
                    self.width_limit,
                )
                raise ValueError("DecisionDiagram.width_limit must be a positive int")
            if self.compaction is None:
                logger.error(
                    "Width limit %d configured without a compaction strategy",
                    self.width_limit,
                )
                raise WidthLimitError(self.width_limit)

        self.layers = [Layer(index) for index in range(len(self.variables))]

    @classmethod
    def from_strategy(
        cls,
        strategy: Strategy,
        variables: Sequence[Any],
        initial_state: Mapping[Any, Any],
        **kwargs: Any,
    ) -> DecisionDiagram:
        """Build a diagram whose four strategies come from one `Strategy` object.

        Args:
            strategy: Strategy implementation.
            variables: Ordered variables.
            initial_state: Root state.
            **kwargs: Remaining `DecisionDiagram` fields (width_limit, domain, ...).

        Returns:
            A new, unrun DecisionDiagram.
        """
        return cls(
            variables=variables,
            initial_state=initial_state,
            candidates=strategy.candidates,
            transition=strategy.transition,
            redundancy=strategy.keep,
            compaction=strategy.compaction(),
            **kwargs,
        )

    @property
    def tracer(self) -> TraceSink:
        """Trace sink resolved from the `trace` field."""
        if self.trace is True:
            return LoggingTraceSink()
        if self.trace is False or self.trace is None:
            return NullTraceSink()
        return self.trace

    @property
    def has_run(self) -> bool:
        return self._has_run

    def run(self) -> DiagramResult:
        """Build every layer and return the surviving states.

        Returns:
            DiagramResult with one tuple of states per variable.

        Raises:
            RuntimeError: If the diagram was already run.
            WidthLimitError: If a layer outgrows the width limit without a
                compaction strategy.
            InfeasibleError: If a layer ends up empty.
        """
        if self._has_run:
            raise RuntimeError(
                "DecisionDiagram has already been run; build a new instance"
            )
        self._has_run = True
        return run_diagram(self)
