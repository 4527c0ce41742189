import jsonschema
import pytest

from ddengine.dsl.loader import load_scenario_yaml

MINIMAL = """
variables: [a, b]
initial_state: {x: 0}
strategies:
  candidates: domain
  transition: assign
"""


def test_minimal_scenario_loads():
    data = load_scenario_yaml(MINIMAL)
    assert data["variables"] == ["a", "b"]
    assert data["initial_state"] == {"x": 0}
    assert data["strategies"] == {"candidates": "domain", "transition": "assign"}


def test_non_mapping_document_rejected():
    with pytest.raises(ValueError, match="dictionary"):
        load_scenario_yaml("- a\n- b\n")


def test_unknown_top_level_key_rejected():
    with pytest.raises(ValueError, match="Unrecognized top-level key"):
        load_scenario_yaml(MINIMAL + "network: {}\n")


def test_unknown_strategy_kind_rejected():
    text = MINIMAL + "  pruning: keep_first\n"
    with pytest.raises(ValueError, match="Unrecognized strategy kind"):
        load_scenario_yaml(text)


def test_schema_rejects_missing_transition():
    text = """
variables: [a]
initial_state: {}
strategies:
  candidates: domain
"""
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml(text)


@pytest.mark.parametrize("width", ["0", "-2", "wide"])
def test_schema_rejects_bad_width_limit(width):
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml(MINIMAL + f"width_limit: {width}\n")


def test_schema_rejects_empty_variables():
    text = MINIMAL.replace("[a, b]", "[]")
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml(text)


def test_strategy_mapping_requires_type():
    text = MINIMAL + "  compaction: {width: 2}\n"
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml(text)


def test_null_initial_state_becomes_empty_mapping():
    text = MINIMAL.replace("initial_state: {x: 0}", "initial_state:")
    assert load_scenario_yaml(text)["initial_state"] == {}


def test_anchors_in_vars_section():
    text = """
vars:
  domain: &dom [0, 1, 2]
variables: [a]
domain: *dom
initial_state: {}
strategies:
  candidates: domain
  transition: assign
"""
    assert load_scenario_yaml(text)["domain"] == [0, 1, 2]
