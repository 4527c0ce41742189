import json
from pathlib import Path

import pytest

from ddengine import cli
from ddengine.strategies import STRATEGY_REGISTRY, register_strategy

EXAMPLES = Path(__file__).resolve().parents[2] / "examples" / "scenarios"

WIDTH_WITHOUT_COMPACTION = """
variables: [a, b]
domain: [0, 1]
initial_state: {}
width_limit: 1
strategies:
  candidates: domain
  transition: assign
"""

INFEASIBLE = """
variables: [a, b]
domain: [0, 1]
initial_state: {}
strategies:
  candidates: domain
  transition: assign
  redundancy: test_cli_reject_all
"""


def extract_json_from_stdout(output: str) -> str:
    """Return the first balanced JSON object printed to stdout."""
    json_start = output.find("{")
    if json_start == -1:
        return output

    depth = 0
    for i in range(json_start, len(output)):
        if output[i] == "{":
            depth += 1
        elif output[i] == "}":
            depth -= 1
            if depth == 0:
                return output[json_start : i + 1]
    return output[json_start:]


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_run_writes_results_file(tmp_path: Path) -> None:
    results_path = tmp_path / "res.json"
    cli.main(["run", str(EXAMPLES / "unbounded.yaml"), "--results", str(results_path)])

    data = json.loads(results_path.read_text())
    assert data["widths"] == [2, 4, 8]
    assert data["variables"] == ["x1", "x2", "x3"]
    assert data["layers"][0]["states"] == [{"x": 0, "x1": 0}, {"x": 0, "x1": 1}]


def test_run_default_results_path_and_stdout(
    tmp_path: Path, capsys, monkeypatch
) -> None:
    monkeypatch.chdir(tmp_path)
    cli.main(["run", str(EXAMPLES / "binary.yaml"), "--stdout"])

    assert (tmp_path / "binary.results.json").exists()
    out = capsys.readouterr().out
    payload = json.loads(extract_json_from_stdout(out))
    assert payload["widths"] == [2, 2, 2]


def test_run_output_dir(tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    cli.main(["run", str(EXAMPLES / "binary.yaml"), "--output", str(out_dir)])
    assert (out_dir / "binary.results.json").exists()


def test_run_no_results(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    cli.main(["run", str(EXAMPLES / "unbounded.yaml"), "--no-results"])
    assert not list(tmp_path.glob("*.json"))
    assert "Layer" in capsys.readouterr().out


def test_run_missing_file_exits_1(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(tmp_path / "missing.yaml"), "--no-results"])
    assert exc_info.value.code == 1


def test_run_width_limit_without_compaction_exits_2(tmp_path: Path) -> None:
    path = _write(tmp_path, "wide.yaml", WIDTH_WITHOUT_COMPACTION)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(path), "--no-results"])
    assert exc_info.value.code == 2


def test_run_infeasible_exits_3(tmp_path: Path, capsys) -> None:
    @register_strategy("redundancy", "test_cli_reject_all")
    def reject_all(seed_manager=None):
        return lambda index, state, layer_states: False

    path = _write(tmp_path, "infeasible.yaml", INFEASIBLE)
    try:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["run", str(path), "--no-results"])
    finally:
        del STRATEGY_REGISTRY["redundancy"]["test_cli_reject_all"]
    assert exc_info.value.code == 3
    assert "InfeasibleError" in capsys.readouterr().out


def test_run_invalid_scenario_exits_1(tmp_path: Path) -> None:
    path = _write(tmp_path, "bad.yaml", "variables: []\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(path), "--no-results"])
    assert exc_info.value.code == 1


def test_inspect_prints_configuration(capsys) -> None:
    cli.main(["inspect", str(EXAMPLES / "binary.yaml")])
    out = capsys.readouterr().out
    assert "Variables: 3" in out
    assert "keep_random" in out
    assert "Width limit: 2" in out


def test_inspect_width_limit_without_compaction_exits_2(tmp_path: Path) -> None:
    path = _write(tmp_path, "wide.yaml", WIDTH_WITHOUT_COMPACTION)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])
    assert exc_info.value.code == 2


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_format_helpers() -> None:
    assert cli._format_duration(0.5) == "500.0 ms"
    assert cli._format_duration(2.5) == "2.50 s"
    assert cli._format_duration(75.2) == "1m 15.2s"
    assert cli._format_table(["A"], []) == ""
    table = cli._format_table(["Layer", "Width"], [[0, 2]])
    assert "Layer" in table and "-+-" in table
