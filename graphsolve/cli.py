"""Command-line interface for graphsolve."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import yaml

from graphsolve.errors import GraphValidationError, IterationLimitError
from graphsolve.logging import apply_verbosity, get_logger
from graphsolve.samples import example
from graphsolve.scenario import Result, Scenario
from graphsolve.types.base import Algorithm
from graphsolve.types.dto import FlowResult, MstResult, PathResult

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 8) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_number(value: Any) -> str:
    """Return a number with up to three decimals.

    Trims trailing zeros and the decimal point when not needed.

    Examples:
        10.0 -> "10"; 1234.567 -> "1,234.567"; inf -> "inf".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)
    if v in (float("inf"), float("-inf")):
        return str(v)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_percent(fraction: float) -> str:
    return f"{round(fraction * 100)}%"


def _format_duration(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def render_result(scenario: Scenario, result: Result) -> str:
    """Render a result as human-readable text."""
    lines: List[str] = []
    title = scenario.name or scenario.algorithm.name.lower()
    lines.append(f"{title} ({scenario.algorithm.name.lower()})")

    if isinstance(result, FlowResult):
        lines.append(f"   Maximum flow: {_format_number(result.max_flow)}")
        lines.append(
            f"   Active edges: {len(result.active_edges)} of {len(result.flow_edges)}"
        )
        lines.append(f"   Efficiency: {_format_percent(result.efficiency)}")
        rows = [
            [
                e.source,
                e.target,
                _format_number(e.capacity),
                _format_number(e.flow),
                _format_percent(e.utilization),
            ]
            for e in result.flow_edges
        ]
        table = _format_table(["Source", "Target", "Capacity", "Flow", "Used"], rows)
    elif isinstance(result, MstResult):
        lines.append(f"   Total cost: {_format_number(result.total_cost)}")
        if not result.connected:
            lines.append(
                "   Graph is disconnected; unreached nodes: "
                + ", ".join(str(n) for n in result.unreached)
            )
        rows = [[e.source, e.target, _format_number(e.weight)] for e in result.mst_edges]
        table = _format_table(["Source", "Target", "Cost"], rows)
    elif isinstance(result, PathResult):
        if not result.path_exists:
            lines.append(f"   No path from {scenario.source} to {scenario.target}")
            return "\n".join(lines)
        lines.append(f"   Distance: {_format_number(result.distance)}")
        lines.append("   Path: " + " -> ".join(str(n) for n in result.path))
        rows = [
            [s.source, s.target, _format_number(s.distance)] for s in result.segments
        ]
        table = _format_table(["From", "To", "Distance"], rows)
    else:
        raise TypeError(f"Unsupported result type: {type(result).__name__}")

    if table:
        lines.append("")
        lines.append(table)
    return "\n".join(lines)


def _emit(scenario: Scenario, as_json: bool, output: Optional[Path]) -> None:
    start = perf_counter()
    result = scenario.run()
    logger.info(f"Computation finished in {_format_duration(perf_counter() - start)}")

    payload = {"scenario": scenario.to_dict(), "result": result.to_dict()}
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
        logger.info(f"Results written to: {output}")

    if as_json:
        print(json.dumps(payload, indent=2, default=str))
    else:
        print(render_result(scenario, result))


def _run_scenario(path: Path, as_json: bool, output: Optional[Path]) -> None:
    """Load a scenario file, run it and print the result.

    Exits with status 1 when the file is missing or the input is invalid.
    """
    try:
        scenario = Scenario.from_file(path)
        _emit(scenario, as_json, output)
    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        print(f"ERROR: Scenario file not found: {path}")
        sys.exit(1)
    except (GraphValidationError, IterationLimitError, yaml.YAMLError) as e:
        logger.error(f"Failed to run scenario: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to run scenario: {type(e).__name__}: {e}")
        sys.exit(1)


def _run_example(name: str, as_json: bool, output: Optional[Path]) -> None:
    try:
        algorithm = Algorithm.from_string(name)
    except GraphValidationError as e:
        logger.error(str(e))
        print(f"ERROR: {e}")
        sys.exit(1)
    _emit(example(algorithm), as_json, output)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graphsolve`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="graphsolve",
        description="Compute max flow, minimum spanning trees and shortest paths.",
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
        metavar="{run,example}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run a scenario file")
    run_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")

    example_parser = subparsers.add_parser(
        "example", help="Run one of the built-in example graphs"
    )
    example_parser.add_argument(
        "algorithm",
        help="Algorithm name or alias (max_flow/flow, mst, shortest_path/spf)",
    )

    for p in (run_parser, example_parser):
        p.add_argument(
            "--json", action="store_true", help="Print results as JSON"
        )
        p.add_argument(
            "--output",
            "-o",
            type=Path,
            default=None,
            help="Also write JSON results to this file",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    level = apply_verbosity(args.verbose, args.quiet)
    logger.debug(f"Log level set to {logging.getLevelName(level)}")

    if args.command == "run":
        _run_scenario(args.scenario, args.json, args.output)
    elif args.command == "example":
        _run_example(args.algorithm, args.json, args.output)


if __name__ == "__main__":
    main()
