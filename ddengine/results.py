"""Result container for a completed diagram run.

`DiagramResult` is an immutable snapshot of the surviving states per layer.
`to_dict()` returns JSON-safe primitives: state keys become strings and
non-primitive values are converted to lists or strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from ddengine.model.state import State


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted((_json_safe(v) for v in value), key=repr)
    if isinstance(value, dict) or isinstance(value, State):
        return {str(k): _json_safe(v) for k, v in value.items()}
    return str(value)


@dataclass(frozen=True)
class DiagramResult:
    """Surviving states of every layer after a successful run.

    Attributes:
        variables: Ordered variables, one per layer.
        layers: States per layer in insertion order.
    """

    variables: Tuple[Any, ...]
    layers: Tuple[Tuple[State, ...], ...]

    @classmethod
    def from_layers(
        cls, variables: Sequence[Any], layers: Iterable[Iterable[State]]
    ) -> DiagramResult:
        return cls(
            variables=tuple(variables),
            layers=tuple(tuple(layer) for layer in layers),
        )

    @property
    def final_layer(self) -> Tuple[State, ...]:
        return self.layers[-1]

    @property
    def widths(self) -> Tuple[int, ...]:
        """Number of states in each layer."""
        return tuple(len(layer) for layer in self.layers)

    @property
    def max_width(self) -> int:
        return max(self.widths)

    def layer(self, index: int) -> Tuple[State, ...]:
        """Return the states of the layer at `index`."""
        return self.layers[index]

    def layer_for(self, variable: Any) -> Tuple[State, ...]:
        """Return the states of the layer labelled by `variable`.

        Raises:
            KeyError: If `variable` is not one of the diagram's variables.
        """
        try:
            return self.layers[self.variables.index(variable)]
        except ValueError:
            raise KeyError(variable) from None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        layers: List[Dict[str, Any]] = []
        for index, (variable, states) in enumerate(zip(self.variables, self.layers)):
            layers.append(
                {
                    "index": index,
                    "variable": _json_safe(variable),
                    "width": len(states),
                    "states": [_json_safe(state) for state in states],
                }
            )
        return {
            "variables": [_json_safe(v) for v in self.variables],
            "widths": list(self.widths),
            "layers": layers,
        }
