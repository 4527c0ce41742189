"""Shared fixtures: small diagrams and a 0/1 knapsack strategy."""

from __future__ import annotations

from typing import Any, Callable, List, Sequence

import pytest

from ddengine import DecisionDiagram, State, Strategy


def binary_candidates(index: int, state: State, diagram: Any) -> List[int]:
    return [0, 1]


def assign_variable(index: int, state: State, candidate: Any, diagram: Any) -> State:
    return state.set(diagram.variables[index], candidate)


@pytest.fixture
def binary_diagram() -> Callable[..., DecisionDiagram]:
    """Factory for the binary diagram: every state branches on {0, 1}."""

    def make(n: int = 3, **kwargs: Any) -> DecisionDiagram:
        params = dict(
            variables=[f"x{i + 1}" for i in range(n)],
            initial_state={"x": 0},
            candidates=binary_candidates,
            transition=assign_variable,
        )
        params.update(kwargs)
        return DecisionDiagram(**params)

    return make


class KnapsackStrategy(Strategy):
    """0/1 knapsack: state holds the remaining capacity only.

    Taking item ``index`` is allowed when it fits. States are merged by
    remaining capacity, so the layer width is bounded by capacity + 1.
    Compaction keeps the states with the most remaining capacity.
    """

    def __init__(self, weights: Sequence[int], capacity: int) -> None:
        self.weights = list(weights)
        self.capacity = capacity

    def candidates(self, index: int, state: State, diagram: Any) -> List[int]:
        if self.weights[index] <= state["room"]:
            return [0, 1]
        return [0]

    def transition(
        self, index: int, state: State, candidate: Any, diagram: Any
    ) -> State:
        return state.set("room", state["room"] - candidate * self.weights[index])

    def compact(
        self, index: int, layer_states: Sequence[State], diagram: Any
    ) -> List[State]:
        ranked = sorted(layer_states, key=lambda s: s["room"], reverse=True)
        return ranked[: diagram.width_limit]


class UncompactedKnapsack(KnapsackStrategy):
    compact = Strategy.compact


@pytest.fixture
def knapsack() -> KnapsackStrategy:
    return KnapsackStrategy(weights=[2, 3, 4], capacity=6)


@pytest.fixture
def knapsack_without_compaction() -> KnapsackStrategy:
    return UncompactedKnapsack(weights=[2, 3, 4], capacity=6)
