"""CLI module for the cadence test runner."""

from __future__ import annotations

import argparse
import asyncio
import importlib
import logging
import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cadence.config import CadenceConfig, load_config
from cadence.exceptions import CadenceError, ConfigError, SuiteLoadError
from cadence.reports import CompositeReporter, ConsoleReporter, resolve_reporters
from cadence.testing.runner import Runner, RunSummary
from cadence.testing.suite import MutableSuite


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the cadence CLI."""
    load_dotenv()
    raise SystemExit(run_cli(sys.argv[1:] if argv is None else argv))


def run_cli(argv: Sequence[str], console: Console | None = None) -> int:
    """Parse ``argv``, run the selected suites and return the exit status."""
    console = console or Console()
    parser = _build_parser()
    args = parser.parse_args(list(argv))

    try:
        config = load_config()
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    verbosity = _resolve_verbosity(args, config)
    _configure_logging(verbosity)

    import_paths = args.suites or config.suites
    if not import_paths:
        console.print("[red]No suites given and none configured in \\[tool.cadence][/red]")
        return 2

    try:
        suites = [suite for path in import_paths for suite in load_suites(path)]
    except SuiteLoadError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    max_parallelism = _resolve_max_parallelism(args, config)
    if max_parallelism is not None:
        for suite in suites:
            suite.max_parallelism = max_parallelism

    if args.list:
        for suite in suites:
            console.print(f"[bold]{escape(suite.name)}[/bold]")
            for name in suite.names():
                console.print(f"  {escape(name)}")
        return 0

    try:
        reporters = resolve_reporters(args.reporters or config.reporters)
    except (ValueError, TypeError, ImportError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2
    for target in reporters:
        if isinstance(target, ConsoleReporter):
            target.console = console
            target.verbosity = verbosity

    try:
        summaries = asyncio.run(
            _run_suites(suites, _resolve_filter_args(args, config), reporters, args.threads)
        )
    except (ValueError, ConfigError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2
    except CadenceError as exc:
        console.print(f"[red]Run aborted: {escape(str(exc))}[/red]")
        return 1

    for target in reporters:
        if isinstance(target, ConsoleReporter) and len(suites) > 1:
            target.print_totals()

    return 0 if all(summary.ok for summary in summaries) else 1


def load_suites(import_path: str) -> list[MutableSuite]:
    """Load suites from ``module:attribute`` or every suite defined in ``module``.

    Attributes may be suite instances or suite classes with a no-argument
    constructor.
    """
    module_path, _, attribute = import_path.partition(":")
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise SuiteLoadError(import_path, str(exc)) from exc

    if attribute:
        try:
            target = getattr(module, attribute)
        except AttributeError as exc:
            raise SuiteLoadError(import_path, f"no attribute {attribute!r}") from exc
        suite = _as_suite(target)
        if suite is None:
            raise SuiteLoadError(import_path, f"{attribute!r} is not a suite")
        return [suite]

    suites = [
        value
        for name, value in vars(module).items()
        if not name.startswith("_") and isinstance(value, MutableSuite)
    ]
    if not suites:
        raise SuiteLoadError(import_path, "module defines no suites")
    return suites


def _as_suite(target: object) -> MutableSuite | None:
    if isinstance(target, MutableSuite):
        return target
    if isinstance(target, type) and issubclass(target, MutableSuite):
        return target()
    return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cadence", description="Cadence test runner")
    parser.add_argument("suites", nargs="*", help="Suites as module or module:attribute")
    parser.add_argument(
        "-o",
        "--only",
        action="append",
        help="Run tests whose '<suite>.<test>' name matches this glob (repeatable)",
    )
    parser.add_argument("-k", "--keyword", help="Filter tests by keyword expression")
    parser.add_argument(
        "--max-parallelism",
        type=int,
        help="Override the maximum number of concurrently running tests per suite",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=0,
        help="Run synchronous test bodies on a thread pool of this size (default: inline)",
    )
    parser.add_argument(
        "-r",
        "--reporter",
        dest="reporters",
        action="append",
        help="Reporter name or import string (repeatable)",
    )
    parser.add_argument("--list", action="store_true", help="List registered tests and exit")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce output")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output")
    return parser


def _resolve_verbosity(args: argparse.Namespace, config: CadenceConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_max_parallelism(args: argparse.Namespace, config: CadenceConfig) -> int | None:
    if args.max_parallelism is not None:
        return args.max_parallelism
    return config.max_parallelism


def _resolve_filter_args(args: argparse.Namespace, config: CadenceConfig) -> list[str]:
    only = args.only or config.only
    keyword = args.keyword or config.keyword
    return CadenceConfig(only=only, keyword=keyword).as_args()


def _configure_logging(verbosity: int) -> None:
    level = logging.DEBUG if verbosity >= 2 else logging.INFO if verbosity == 1 else logging.WARNING
    package_logger = logging.getLogger("cadence")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


async def _run_suites(
    suites: list[MutableSuite],
    filter_args: list[str],
    reporters: list[object],
    threads: int,
) -> list[RunSummary]:
    reporter = reporters[0] if len(reporters) == 1 else CompositeReporter(reporters)
    if threads <= 0:
        return await Runner().run_all(suites, filter_args, reporter)
    with ThreadPoolExecutor(max_workers=threads, thread_name_prefix="cadence") as executor:
        return await Runner(executor=executor).run_all(suites, filter_args, reporter)


__all__ = ["load_suites", "main", "run_cli"]
