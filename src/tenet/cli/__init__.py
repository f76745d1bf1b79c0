"""CLI module for running declared scenarios."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tenet.config import TenetConfig, load_config
from tenet.errors import ConfigError, MalformedScenarioError
from tenet.reports import ConsoleReporter, Reporter
from tenet.reports.registry import import_object
from tenet.runner import default_reporter, run_scenarios


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for tenet CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        raise SystemExit(_run(args))

    parser.print_help()
    raise SystemExit(0)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tenet", description="Declarative test-execution engine")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run declared scenarios")
    run_parser.add_argument(
        "targets",
        nargs="+",
        help="Scenario collections as module:attribute (a sequence or a callable returning one)",
    )
    run_parser.add_argument("--reporter", help="Reporter registry name or import string")
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Note each invocation and any untested return values",
    )
    run_parser.add_argument(
        "-s",
        "--show-output",
        action="store_true",
        help="Show stdout/stderr of invoked code live (still captured)",
    )
    run_parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
    run_parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase CLI output"
    )
    return parser


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _resolve_config(args: argparse.Namespace) -> TenetConfig:
    config = load_config()
    overrides: dict[str, Any] = {}
    if args.debug:
        overrides["debug"] = True
    if args.show_output:
        overrides["swallow_output"] = False
    if args.reporter:
        overrides["reporter"] = args.reporter
    return config.model_copy(update=overrides)


def _resolve_verbosity(args: argparse.Namespace, config: TenetConfig) -> int:
    return config.reporter_options.get("verbosity", 0) + args.verbose - args.quiet + int(config.debug)


def _resolve_reporter(args: argparse.Namespace, config: TenetConfig, console: Console) -> Reporter:
    if config.reporter == "ConsoleReporter":
        return ConsoleReporter(console=console, verbosity=_resolve_verbosity(args, config))
    return default_reporter(config)


def _load_scenarios(targets: Iterable[str]) -> list[Any]:
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    scenarios: list[Any] = []
    for target in targets:
        collection = import_object(target)
        if callable(collection):
            collection = collection()
        if isinstance(collection, (str, bytes)) or not isinstance(collection, Iterable):
            msg = f"{target} is not a sequence of scenarios"
            raise TypeError(msg)
        scenarios.extend(collection)
    return scenarios


def _run(args: argparse.Namespace) -> int:
    console = Console(highlight=False)

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    _configure_logging(config.debug)

    try:
        scenarios = _load_scenarios(args.targets)
        reporter = _resolve_reporter(args, config, console)
    except (ImportError, ValueError, TypeError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    try:
        results = run_scenarios(scenarios, reporter=reporter, config=config)
    except MalformedScenarioError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    return 0 if all(result.passed for result in results) else 1


__all__ = ["main"]
