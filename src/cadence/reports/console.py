"""Console reporter rendering outcomes with rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from cadence.testing.outcome import Cancelled, Failure, Ignored, Outcome
from cadence.testing.runner import RunSummary
from cadence.types import StatusKind

_STYLES = {
    StatusKind.SUCCESS: ("+", "green"),
    StatusKind.FAILURE: ("-", "red"),
    StatusKind.CANCELLED: ("~", "yellow"),
    StatusKind.IGNORED: ("!", "blue"),
}


class ConsoleReporter:
    """Prints one line per outcome and a summary per suite.

    Verbosity below 0 prints failures only; 1 and above adds tracebacks and
    the log entries of every test, not just failing ones.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity
        self.failures: list[Outcome] = []
        self.summaries: list[RunSummary] = []

    async def on_suite_start(self, suite_name: str) -> None:
        if self.verbosity >= 0:
            self.console.print(f"[bold]{escape(suite_name)}[/bold]")

    async def on_outcome(self, outcome: Outcome) -> None:
        if outcome.is_failure():
            self.failures.append(outcome)
        elif self.verbosity < 0:
            return

        symbol, color = _STYLES[outcome.kind]
        line = f"[{color}]{symbol} {escape(outcome.name)}[/{color}]"
        if outcome.duration_ms is not None and outcome.kind is StatusKind.SUCCESS:
            line += f" [dim]{outcome.duration_ms:.0f}ms[/dim]"

        status = outcome.status
        if isinstance(status, (Cancelled, Ignored)) and status.reason:
            line += f" [dim]{escape(status.reason)}[/dim]"
        self.console.print(line)

        if isinstance(status, Failure):
            self._print_failure(outcome, status)
        elif self.verbosity >= 1:
            self._print_log(outcome)

    async def on_suite_complete(self, summary: RunSummary) -> None:
        self.summaries.append(summary)
        if self.verbosity >= 0:
            self.console.print(self._format_summary(summary))
            self.console.print()

    def print_totals(self) -> None:
        """Print an aggregate line over every suite seen so far."""
        total = RunSummary(suite_name="total")
        for summary in self.summaries:
            total.counts.update(summary.counts)
            total.duration_ms += summary.duration_ms
        self.console.print(self._format_summary(total))

    def _print_failure(self, outcome: Outcome, failure: Failure) -> None:
        self.console.print(f"    [red]{escape(failure.message)}[/red]")
        if outcome.location is not None:
            self.console.print(f"    [dim]at {escape(str(outcome.location))}[/dim]")
        if self.verbosity >= 1:
            for text in failure.format_traceback().rstrip().splitlines():
                self.console.print(f"    {escape(text)}", highlight=False)
        self._print_log(outcome)

    def _print_log(self, outcome: Outcome) -> None:
        for entry in outcome.log:
            self.console.print(
                f"    [dim]\\[{entry.level_name}] {escape(entry.message)}[/dim]",
                highlight=False,
            )

    @staticmethod
    def _format_summary(summary: RunSummary) -> str:
        parts = [f"[green]{summary.succeeded} passed[/green]"]
        if summary.failed:
            parts.append(f"[red]{summary.failed} failed[/red]")
        if summary.cancelled:
            parts.append(f"[yellow]{summary.cancelled} cancelled[/yellow]")
        if summary.ignored:
            parts.append(f"[blue]{summary.ignored} ignored[/blue]")
        seconds = summary.duration_ms / 1000
        return f"{escape(summary.suite_name)}: " + ", ".join(parts) + f" in {seconds:.2f}s"
