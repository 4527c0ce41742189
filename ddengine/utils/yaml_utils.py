"""Helpers for YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Convert mapping keys to strings.

    YAML 1.1 turns keys such as ``yes``/``no``/``on``/``off`` into booleans and
    bare numbers into ints. Scenario sections keyed by names (for example a
    strategy mapping) need string keys, so every key is stringified; booleans
    become ``"True"``/``"False"``.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, 2: "b", "c": 3})
        {'True': 1, '2': 'b', 'c': 3}
    """
    return {str(key): value for key, value in data.items()}
