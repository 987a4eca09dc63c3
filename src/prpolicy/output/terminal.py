"""Rich terminal reporter — one row per predicate with a status pill."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from prpolicy.evaluation.models import EvaluationReport

_STATUS_STYLE = {
    "satisfied": "bold black on green",
    "unsatisfied": "bold white on dark_orange",
    "error": "bold white on red",
    "skipped": "dim",
}


def _status_pill(status: str) -> Text:
    return Text(f" {status.upper()} ", style=_STATUS_STYLE.get(status, ""))


def render(
    report: EvaluationReport,
    *,
    console: Console | None = None,
    show_summary: bool = True,
) -> None:
    """Print evaluation results to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not report.outcomes:
        console.print("[dim]No predicates configured.[/dim]")
        return

    table = Table(
        title="Policy Predicates",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Status", justify="center", width=15)
    table.add_column("Predicate", style="cyan", min_width=20)
    table.add_column("Triggers", style="magenta")
    table.add_column("Details", min_width=20)

    for outcome in report.outcomes:
        table.add_row(
            _status_pill(outcome.status),
            outcome.name,
            ", ".join(outcome.trigger.labels) or "-",
            outcome.error or outcome.description or "-",
        )

    console.print(table)

    if show_summary:
        console.print()
        console.print(f"[dim]Evaluated:[/dim]    {len(report.evaluated)}")
        console.print(f"[dim]Unsatisfied:[/dim]  {len(report.unsatisfied)}")
        console.print(f"[dim]Errors:[/dim]       {len(report.errors)}")
        console.print(f"[dim]Duration:[/dim]     {report.duration_ms:.0f}ms")

    console.print()
    if report.failed:
        console.print("[bold red]❌ UNDETERMINED — some predicates could not be evaluated.[/bold red]")
    elif report.satisfied:
        console.print("[bold green]✅ All predicates are satisfied.[/bold green]")
    else:
        console.print("[bold yellow]⚠️  Some predicates are not satisfied.[/bold yellow]")
