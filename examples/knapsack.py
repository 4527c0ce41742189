"""Restricted decision diagram for a small 0/1 knapsack.

Each state tracks the remaining capacity and the value collected so far.
States with the same remaining capacity but less value are dominated, and
over-wide layers keep the most valuable states.

Run:
    python examples/knapsack.py
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from ddengine import DecisionDiagram, State, Strategy
from ddengine.logging import set_global_log_level

WEIGHTS = [4, 3, 5, 2, 6, 1]
VALUES = [10, 7, 12, 3, 13, 2]
CAPACITY = 12


class Knapsack(Strategy):
    def candidates(self, index: int, state: State, diagram: Any) -> List[int]:
        return [0, 1] if WEIGHTS[index] <= state["room"] else [0]

    def transition(self, index: int, state: State, take: Any, diagram: Any) -> State:
        return state.update(
            room=state["room"] - take * WEIGHTS[index],
            value=state["value"] + take * VALUES[index],
        )

    def keep(self, index: int, state: State, layer_states: Sequence[State]) -> bool:
        # Dominated: another state has at least as much room and value
        return not any(
            other["room"] >= state["room"] and other["value"] >= state["value"]
            for other in layer_states
        )

    def compact(
        self, index: int, layer_states: Sequence[State], diagram: Any
    ) -> List[State]:
        ranked = sorted(layer_states, key=lambda s: s["value"], reverse=True)
        return ranked[: diagram.width_limit]


def main() -> None:
    set_global_log_level(logging.INFO)
    dd = DecisionDiagram.from_strategy(
        Knapsack(),
        variables=[f"item{i}" for i in range(len(WEIGHTS))],
        initial_state={"room": CAPACITY, "value": 0},
        width_limit=4,
        trace=True,
    )
    result = dd.run()
    print("Layer widths:", result.widths)
    best = max(result.final_layer, key=lambda s: s["value"])
    print("Best value found in the restricted diagram:", best["value"])


if __name__ == "__main__":
    main()
