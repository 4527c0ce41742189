"""YAML loader and schema validation for scenario files.

Provides a single entrypoint that parses a YAML string, normalizes the
strategy section keys, validates the document against the packaged JSON
schema, and returns a plain dictionary for `Scenario` to consume.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

from ddengine.strategies.registry import STRATEGY_KINDS
from ddengine.utils.yaml_utils import normalize_yaml_dict_keys

RECOGNIZED_KEYS = {
    "vars",
    "variables",
    "domain",
    "initial_state",
    "width_limit",
    "empty_candidate",
    "seed",
    "trace",
    "strategies",
}


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("ddengine.schemas")
        .joinpath("scenario.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_scenario_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load, normalize, and validate a scenario YAML string.

    Args:
        yaml_str: Scenario document.

    Returns:
        Validated scenario dictionary.

    Raises:
        ValueError: The document is not a mapping, has unknown top-level keys,
            or has an unknown strategy kind.
        jsonschema.ValidationError: The document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    # Checked before the schema to give a friendlier message
    extra = set(map(str, data.keys())) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in scenario: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    strategies = data.get("strategies")
    if isinstance(strategies, dict):
        strategies = normalize_yaml_dict_keys(strategies)
        unknown = set(strategies) - set(STRATEGY_KINDS)
        if unknown:
            raise ValueError(
                f"Unrecognized strategy kind(s): {', '.join(sorted(unknown))}. "
                f"Allowed kinds are {list(STRATEGY_KINDS)}"
            )
        data["strategies"] = strategies

    if "initial_state" in data and data["initial_state"] is None:
        data["initial_state"] = {}

    jsonschema.validate(data, _load_schema())
    return data
