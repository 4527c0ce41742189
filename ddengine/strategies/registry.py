"""Name-based lookup of strategies for scenario files.

Scenario YAML refers to strategies either by a registered name or by an import
path of the form ``package.module:attribute``. A reference may be a plain
string or a mapping with a ``type`` key plus parameters:

    strategies:
      candidates: domain
      transition: mypkg.knapsack:take_item
      compaction:
        type: keep_random

Registered names map to factories. A factory is called with the reference's
parameters plus a ``seed_manager`` keyword and returns the strategy callable.
An import path resolves to the strategy itself, or to a factory when
parameters are given.
"""

from __future__ import annotations

import importlib
from typing import Any, Callable, Dict, Optional

from ddengine.logging import get_logger
from ddengine.utils.seed_manager import SeedManager

logger = get_logger(__name__)

STRATEGY_KINDS = ("candidates", "transition", "redundancy", "compaction")

# kind -> name -> factory
STRATEGY_REGISTRY: Dict[str, Dict[str, Callable[..., Callable]]] = {
    kind: {} for kind in STRATEGY_KINDS
}


def register_strategy(kind: str, name: str):
    """Return a decorator that registers a strategy factory.

    Args:
        kind: One of `STRATEGY_KINDS`.
        name: Registry key used in scenario files.

    Returns:
        A function decorator that adds the factory to `STRATEGY_REGISTRY`.
    """
    if kind not in STRATEGY_REGISTRY:
        raise ValueError(
            f"Unknown strategy kind '{kind}'. Expected one of {list(STRATEGY_KINDS)}"
        )

    def decorator(factory: Callable[..., Callable]) -> Callable[..., Callable]:
        STRATEGY_REGISTRY[kind][name] = factory
        return factory

    return decorator


def import_object(path: str) -> Any:
    """Import ``package.module:attribute`` (dotted attributes allowed)."""
    module_name, _, attr_path = path.partition(":")
    if not module_name or not attr_path:
        raise ValueError(
            f"Invalid import path '{path}'; expected 'package.module:attribute'"
        )
    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj


def resolve_strategy(
    kind: str,
    ref: Any,
    seed_manager: Optional[SeedManager] = None,
) -> Optional[Callable]:
    """Turn a scenario strategy reference into a callable.

    Args:
        kind: Strategy kind the reference is for.
        ref: Name, import path, mapping with ``type``, or None.
        seed_manager: Seed source passed to registered factories.

    Returns:
        The strategy callable, or None when `ref` is None.

    Raises:
        ValueError: The reference is malformed or names nothing known.
        TypeError: The reference resolves to something not callable.
    """
    if ref is None:
        return None
    if kind not in STRATEGY_REGISTRY:
        raise ValueError(f"Unknown strategy kind '{kind}'")

    if isinstance(ref, str):
        name, params = ref, {}
    elif isinstance(ref, dict):
        params = dict(ref)
        name = params.pop("type", None)
        if not isinstance(name, str) or not name:
            raise ValueError(f"Strategy '{kind}' mapping must have a 'type' string")
    else:
        raise ValueError(
            f"Strategy '{kind}' must be a name or mapping, got {type(ref).__name__}"
        )

    if name in STRATEGY_REGISTRY[kind]:
        logger.debug("Resolved %s strategy '%s' from registry", kind, name)
        strategy = STRATEGY_REGISTRY[kind][name](
            seed_manager=seed_manager or SeedManager(), **params
        )
    elif ":" in name:
        target = import_object(name)
        strategy = target(**params) if params else target
        logger.debug("Resolved %s strategy '%s' by import", kind, name)
    else:
        known = sorted(STRATEGY_REGISTRY[kind])
        raise ValueError(
            f"Unknown {kind} strategy '{name}'. Registered: {known}; "
            "or use 'package.module:attribute'"
        )

    if not callable(strategy):
        raise TypeError(f"{kind} strategy '{name}' did not resolve to a callable")
    return strategy
