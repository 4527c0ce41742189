"""Immutable, structurally comparable partial configurations.

A `State` is a read-only mapping. Two states are equal when their mappings are
equal, and equal states hash the same, so layers can deduplicate them with a
set lookup. Keys and values must therefore be hashable.

Example:
    root = State({"x": 0})
    child = root.set("x1", 1)
    assert child == State(x=0, x1=1)
    assert root == {"x": 0}
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from typing import Any, Optional


class State(Mapping):
    """Immutable mapping from hashable keys to hashable values."""

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Optional[Mapping[Hashable, Any]] = None, **kwargs: Any):
        items = dict(data) if data is not None else {}
        items.update(kwargs)
        for key, value in items.items():
            if not isinstance(value, Hashable):
                raise TypeError(
                    f"State value for key {key!r} must be hashable, "
                    f"got {type(value).__name__}"
                )
        self._data = items
        self._hash: Optional[int] = None

    @classmethod
    def coerce(cls, value: Mapping[Hashable, Any]) -> State:
        """Return `value` as a State, wrapping plain mappings."""
        if isinstance(value, State):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(
                f"State must be built from a mapping, got {type(value).__name__}"
            )
        return cls(value)

    def __getitem__(self, key: Hashable) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, State):
            if self is other:
                return True
            if hash(self) != hash(other):
                return False
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"State({self._data!r})"

    def set(self, key: Hashable, value: Any) -> State:
        """Return a new state with `key` bound to `value`."""
        data = dict(self._data)
        data[key] = value
        return State(data)

    def update(
        self, other: Optional[Mapping[Hashable, Any]] = None, **kwargs: Any
    ) -> State:
        """Return a new state with the given bindings added or replaced."""
        data = dict(self._data)
        if other is not None:
            data.update(other)
        data.update(kwargs)
        return State(data)

    def remove(self, *keys: Hashable) -> State:
        """Return a new state without `keys`. Missing keys are ignored."""
        return State({k: v for k, v in self._data.items() if k not in keys})

    def to_dict(self) -> dict[Hashable, Any]:
        """Return a shallow, mutable copy of the mapping."""
        return dict(self._data)
