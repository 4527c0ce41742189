"""Scenario class for describing a diagram run in YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ddengine.dsl.loader import load_scenario_yaml
from ddengine.logging import get_logger
from ddengine.model.diagram import DecisionDiagram
from ddengine.results import DiagramResult
from ddengine.strategies import resolve_strategy
from ddengine.strategies.base import accept_all
from ddengine.utils.seed_manager import SeedManager

logger = get_logger(__name__)


@dataclass
class Scenario:
    """A diagram configuration whose strategies are referenced by name.

    Typical usage example:

        scenario = Scenario.from_yaml(yaml_str)
        result = scenario.run()
        print(result.widths)

    Attributes:
        variables: Ordered variables.
        initial_state: Root state as a plain mapping.
        strategies: Strategy references keyed by kind (see
            `ddengine.strategies.registry`).
        domain: Candidate domain exposed to strategies.
        width_limit: Maximum layer width, or None.
        empty_candidate: Sentinel candidate.
        seed: Master seed for randomized strategies.
        trace: Whether runs trace through the ``ddengine.trace`` logger.
    """

    variables: List[Any]
    initial_state: Dict[Any, Any]
    strategies: Dict[str, Any]
    domain: List[Any] = field(default_factory=list)
    width_limit: Optional[int] = None
    empty_candidate: Any = None
    seed: Optional[int] = None
    trace: bool = False

    @property
    def seed_manager(self) -> SeedManager:
        return SeedManager(self.seed)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> Scenario:
        """Construct a Scenario from a YAML string.

        Top-level keys: ``variables`` and ``initial_state`` and ``strategies``
        (required); ``domain``, ``width_limit``, ``empty_candidate``, ``seed``,
        ``trace`` and ``vars`` (anchors only) are optional.

        Raises:
            ValueError: On unknown keys or malformed sections.
            jsonschema.ValidationError: If the document fails schema validation.
        """
        data = load_scenario_yaml(yaml_str)
        return cls(
            variables=list(data["variables"]),
            initial_state=dict(data.get("initial_state") or {}),
            strategies=dict(data["strategies"]),
            domain=list(data.get("domain") or []),
            width_limit=data.get("width_limit"),
            empty_candidate=data.get("empty_candidate"),
            seed=data.get("seed"),
            trace=bool(data.get("trace", False)),
        )

    def build_diagram(self, trace: Optional[bool] = None) -> DecisionDiagram:
        """Resolve the strategy references and return a fresh diagram.

        Args:
            trace: Overrides the scenario's ``trace`` flag when given.
        """
        seeds = self.seed_manager
        resolved = {
            kind: resolve_strategy(kind, self.strategies.get(kind), seeds)
            for kind in ("candidates", "transition", "redundancy", "compaction")
        }
        return DecisionDiagram(
            variables=self.variables,
            initial_state=self.initial_state,
            candidates=resolved["candidates"],
            transition=resolved["transition"],
            redundancy=resolved["redundancy"] or accept_all,
            compaction=resolved["compaction"],
            width_limit=self.width_limit,
            empty_candidate=self.empty_candidate,
            domain=self.domain,
            trace=self.trace if trace is None else trace,
        )

    def run(self, trace: Optional[bool] = None) -> DiagramResult:
        """Build a new diagram and run it."""
        diagram = self.build_diagram(trace=trace)
        logger.debug(
            "Running diagram: %d variables, width limit %s",
            len(diagram.variables),
            diagram.width_limit,
        )
        return diagram.run()

    def describe(self) -> Dict[str, Any]:
        """Summary used by ``ddengine inspect``."""
        return {
            "variables": len(self.variables),
            "domain": len(self.domain),
            "width_limit": self.width_limit,
            "empty_candidate": self.empty_candidate,
            "seed": self.seed,
            "strategies": {
                kind: self.strategies.get(kind)
                for kind in ("candidates", "transition", "redundancy", "compaction")
            },
        }
