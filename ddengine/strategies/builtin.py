"""Problem-agnostic strategies available by name in scenario files.

These cover the common generic cases: drawing candidates from the diagram's
domain, recording the chosen candidate under the variable label, keeping
every state, and restricting an over-wide layer by keeping a subset.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ddengine.model.state import State
from ddengine.strategies.base import accept_all
from ddengine.strategies.registry import register_strategy
from ddengine.utils.seed_manager import SeedManager


@register_strategy("candidates", "domain")
def domain_candidates(seed_manager: Optional[SeedManager] = None):
    """Every state may take any value of ``diagram.domain``."""

    def candidates(index: int, state: State, diagram: Any) -> List[Any]:
        return list(diagram.domain)

    return candidates


@register_strategy("transition", "assign")
def assign_transition(seed_manager: Optional[SeedManager] = None):
    """Bind the candidate to the current variable's label."""

    def transition(index: int, state: State, candidate: Any, diagram: Any) -> State:
        return state.set(diagram.variables[index], candidate)

    return transition


@register_strategy("redundancy", "accept_all")
def accept_all_redundancy(seed_manager: Optional[SeedManager] = None):
    return accept_all


def _limit(diagram: Any, width: Optional[int]) -> int:
    if width is not None:
        return width
    return diagram.width_limit


@register_strategy("compaction", "keep_first")
def keep_first(width: Optional[int] = None, seed_manager: Optional[SeedManager] = None):
    """Keep the earliest inserted states.

    Args:
        width: States to keep; defaults to the diagram's width limit.
    """

    def compact(index: int, states: Sequence[State], diagram: Any) -> List[State]:
        return list(states[: _limit(diagram, width)])

    return compact


@register_strategy("compaction", "keep_last")
def keep_last(width: Optional[int] = None, seed_manager: Optional[SeedManager] = None):
    """Keep the most recently inserted states."""

    def compact(index: int, states: Sequence[State], diagram: Any) -> List[State]:
        limit = _limit(diagram, width)
        return list(states[max(0, len(states) - limit) :])

    return compact


@register_strategy("compaction", "keep_random")
def keep_random(
    width: Optional[int] = None,
    seed: Optional[int] = None,
    seed_manager: Optional[SeedManager] = None,
):
    """Keep a random subset, preserving insertion order among kept states.

    Draws are seeded per layer. An explicit ``seed`` overrides the scenario
    seed; with neither, the choice is not reproducible.
    """
    manager = SeedManager(seed) if seed is not None else seed_manager or SeedManager()

    def compact(index: int, states: Sequence[State], diagram: Any) -> List[State]:
        limit = _limit(diagram, width)
        rng = manager.create_random_state("compaction", "keep_random", index)
        chosen = sorted(rng.sample(range(len(states)), min(limit, len(states))))
        return [states[i] for i in chosen]

    return compact
