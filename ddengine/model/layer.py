"""Per-depth state collection.

A `Layer` keeps insertion order for deterministic iteration and tracing, and a
hash index for membership by structural equality. It grows during the forward
phase of its depth, is replaced at most once by compaction, and is then sealed
so it can serve as read-only input for the next depth.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable, Iterator, List, Set, Tuple

from ddengine.model.state import State


class Layer:
    """Ordered, duplicate-free collection of states for one depth.

    Attributes:
        index: Position of the layer (and its variable) in the diagram.
    """

    __slots__ = ("index", "_states", "_members", "_sealed")

    def __init__(self, index: int, states: Iterable[State] = ()) -> None:
        self.index = index
        self._states: List[State] = []
        self._members: Set[State] = set()
        self._sealed = False
        for state in states:
            self.add(state)

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __contains__(self, state: object) -> bool:
        try:
            return state in self._members
        except TypeError:
            return False

    def __bool__(self) -> bool:
        return bool(self._states)

    def __repr__(self) -> str:
        return f"Layer(index={self.index}, states={self._states!r})"

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def states(self) -> Tuple[State, ...]:
        """Snapshot of the states in insertion order."""
        return tuple(self._states)

    @property
    def view(self) -> LayerView:
        """Live read-only view handed to strategies."""
        return LayerView(self)

    def add(self, state: State) -> bool:
        """Append `state` unless an equal state is present.

        Returns:
            True if the state was appended.

        Raises:
            RuntimeError: If the layer is sealed.
        """
        self._check_writable()
        if state in self._members:
            return False
        self._states.append(state)
        self._members.add(state)
        return True

    def replace(self, states: Iterable[State]) -> None:
        """Replace the contents with `states`, dropping structural duplicates."""
        self._check_writable()
        self._states = []
        self._members = set()
        for state in states:
            self.add(State.coerce(state))

    def seal(self) -> None:
        """Make the layer read-only."""
        self._sealed = True

    def _check_writable(self) -> None:
        if self._sealed:
            raise RuntimeError(f"Layer {self.index} is sealed and cannot be modified")


class LayerView(Sequence):
    """Read-only sequence view over a layer's states.

    Membership tests use the layer's hash index. The view reflects later
    changes to the layer.
    """

    __slots__ = ("_layer",)

    def __init__(self, layer: "Layer") -> None:
        self._layer = layer

    def __getitem__(self, item):
        return self._layer._states[item]

    def __len__(self) -> int:
        return len(self._layer._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._layer._states)

    def __contains__(self, state: object) -> bool:
        return state in self._layer

    def __repr__(self) -> str:
        return f"LayerView({self._layer._states!r})"
