"""Strategy contracts, registry, and built-in generic strategies."""

from __future__ import annotations

from ddengine.strategies import builtin  # noqa: F401  (registers built-ins)
from ddengine.strategies.base import Strategy, accept_all
from ddengine.strategies.registry import (
    STRATEGY_KINDS,
    STRATEGY_REGISTRY,
    register_strategy,
    resolve_strategy,
)

__all__ = [
    "Strategy",
    "accept_all",
    "STRATEGY_KINDS",
    "STRATEGY_REGISTRY",
    "register_strategy",
    "resolve_strategy",
]
