"""Command-line interface for ddengine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from ddengine.config import ENGINE_CONFIG
from ddengine.exceptions import DecisionDiagramError
from ddengine.logging import get_logger, set_global_log_level
from ddengine.scenario import Scenario
from ddengine.utils.output_paths import ensure_parent_dir, results_path_for_run

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format data as a simple ASCII table."""
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in all_data[1:])
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - minutes * 60:.1f}s"


def _load_scenario(path: Path) -> Scenario:
    logger.info(f"Loading scenario from: {path}")
    return Scenario.from_yaml(path.read_text())


def _inspect_scenario(path: Path) -> None:
    """Validate a scenario file and print its configuration."""
    try:
        scenario = _load_scenario(path)
        diagram = scenario.build_diagram(trace=False)
    except FileNotFoundError:
        print(f"ERROR: Scenario file not found: {path}")
        sys.exit(ENGINE_CONFIG.exit_code_error)
    except DecisionDiagramError as e:
        logger.error(f"Invalid scenario: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(ENGINE_CONFIG.exit_code_for(e))
    except Exception as e:
        logger.error(f"Failed to inspect scenario: {e}")
        print("ERROR: Failed to inspect scenario")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(ENGINE_CONFIG.exit_code_error)

    summary = scenario.describe()
    print("=" * 60)
    print(f"SCENARIO: {path}")
    print("=" * 60)
    print(f"  Variables: {summary['variables']}")
    print(f"  Domain size: {summary['domain']}")
    print(f"  Width limit: {summary['width_limit'] or 'unbounded'}")
    print(f"  Empty candidate: {summary['empty_candidate']!r}")
    print(f"  Seed: {summary['seed']}")
    print(f"  Initial state: {dict(diagram.initial_state)}")
    print("\n  Strategies:")
    rows = [
        [kind, json.dumps(ref) if ref is not None else "-"]
        for kind, ref in summary["strategies"].items()
    ]
    print(_format_table(["Kind", "Reference"], rows))
    print(f"\nReady to run. Usage: python -m ddengine run {path}")


def _run_scenario(
    path: Path,
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
    trace: bool,
    output_dir: Optional[Path] = None,
) -> None:
    """Run a scenario file and export the layers as JSON by default.

    Exit status follows `EngineConfig`: width-limit misconfiguration and
    infeasibility get their own codes.
    """
    start = perf_counter()
    try:
        scenario = _load_scenario(path)
        logger.info("Starting diagram construction")
        result = scenario.run(trace=trace or None)
    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        print(f"ERROR: Scenario file not found: {path}")
        sys.exit(ENGINE_CONFIG.exit_code_error)
    except DecisionDiagramError as e:
        logger.error(f"Diagram construction failed: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(ENGINE_CONFIG.exit_code_for(e))
    except Exception as e:
        logger.error(f"Failed to run scenario: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to run scenario: {type(e).__name__}: {e}")
        sys.exit(ENGINE_CONFIG.exit_code_error)

    print("Diagram construction completed")
    print(
        _format_table(
            ["Layer", "Variable", "Width"],
            [
                [i, v, w]
                for i, (v, w) in enumerate(zip(result.variables, result.widths))
            ],
        )
    )

    json_str = json.dumps(result.to_dict(), indent=2, default=str)
    if not no_results:
        effective_output = results_path_for_run(path, output_dir, results_override)
        ensure_parent_dir(effective_output)
        logger.info(f"Writing results to: {effective_output}")
        effective_output.write_text(json_str)
        print(f"Results written to: {effective_output}")
    if stdout:
        print(json_str)

    elapsed = _format_duration(perf_counter() - start)
    logger.info(f"Scenario run completed successfully in {elapsed}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``ddengine`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="ddengine",
        description="Build width-limited decision diagrams from scenario files.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Build the diagram of a scenario")
    run_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to this JSON file (default: <scenario_name>.results.json)",
    )
    run_parser.add_argument(
        "--no-results", action="store_true", help="Disable results file generation"
    )
    run_parser.add_argument(
        "--stdout", action="store_true", help="Print results JSON to stdout"
    )
    run_parser.add_argument(
        "--trace",
        action="store_true",
        help="Trace expansion and compaction events through the log",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory for the results file",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a scenario and show its configuration"
    )
    inspect_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_scenario(
            path=args.scenario,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
            trace=args.trace,
            output_dir=args.output,
        )
    elif args.command == "inspect":
        _inspect_scenario(args.scenario)


if __name__ == "__main__":
    main()
