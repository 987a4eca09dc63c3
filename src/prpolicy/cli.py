"""prpolicy CLI — Typer application with evaluate, triggers, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from prpolicy import __version__

app = typer.Typer(
    name="prpolicy",
    help="Evaluate pull-request policy predicates.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load_settings(config: Optional[str], verbose: bool):
    """Load .prpolicy.toml from the working directory, exit 2 on failure."""
    from prpolicy.config.loader import ConfigError, load_config
    from prpolicy.logs import setup_logging

    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    setup_logging("DEBUG" if verbose else cfg.logging.level)
    return cfg


def _load_policy(path: str) -> List:
    from prpolicy.common.errors import PolicyError
    from prpolicy.predicate.registry import load_predicates

    try:
        return load_predicates(Path(path))
    except PolicyError as exc:
        console.print(f"[bold red]Policy error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── evaluate ──────────────────────────────────────────────────────────────────


@app.command()
def evaluate(
    pull: str = typer.Option(..., "--pull", "-p", help="Pull request snapshot (YAML)"),
    policy: Optional[str] = typer.Option(None, "--policy", help="Predicate document (YAML)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .prpolicy.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    event: Optional[str] = typer.Option(None, "--event", "-e", help="Only re-run predicates triggered by: pull_request | commit"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Evaluate the policy's predicates against a pull request snapshot."""
    from prpolicy.common.context import EvalContext
    from prpolicy.common.errors import ContextError
    from prpolicy.common.trigger import Trigger
    from prpolicy.config.schema import OUTPUT_FORMATS
    from prpolicy.evaluation.engine import evaluate as run_evaluation
    from prpolicy.output import json_report, terminal
    from prpolicy.pull.context import SnapshotContext

    cfg = _load_settings(config, verbose)

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    trigger: Optional[Trigger] = None
    if event:
        trigger = Trigger.parse(event)
        if trigger is None:
            console.print(f"[bold red]Invalid event:[/bold red] {event}")
            raise typer.Exit(code=2)

    predicates = _load_policy(policy or cfg.policy.path)

    try:
        prctx = SnapshotContext.from_file(Path(pull))
    except ContextError as exc:
        console.print(f"[bold red]Snapshot error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    report = run_evaluation(predicates, EvalContext(), prctx, event=trigger)

    if cfg.output.format == "json":
        print(json_report.render(report))
    else:
        terminal.render(report, console=console, show_summary=cfg.output.show_summary)

    if output:
        Path(output).write_text(json_report.render(report), encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    if report.failed:
        raise typer.Exit(code=2)
    if not report.satisfied:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── triggers ──────────────────────────────────────────────────────────────────


@app.command()
def triggers(
    policy: Optional[str] = typer.Option(None, "--policy", help="Predicate document (YAML)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .prpolicy.toml"),
) -> None:
    """List each predicate and the webhook events that re-evaluate it."""
    from prpolicy.evaluation.engine import predicate_name

    cfg = _load_settings(config, verbose=False)
    predicates = _load_policy(policy or cfg.policy.path)

    if not predicates:
        console.print("[dim]No predicates configured.[/dim]")
        raise typer.Exit(code=0)

    for pred in predicates:
        labels = ", ".join(pred.trigger().labels) or "-"
        print(f"{predicate_name(pred)}: {labels}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .prpolicy.toml and .prpolicy.yml."""
    from prpolicy.config.defaults import DEFAULT_POLICY, DEFAULT_TOML
    from prpolicy.config.loader import CONFIG_FILENAME

    root = Path.cwd()
    targets = [(root / CONFIG_FILENAME, DEFAULT_TOML), (root / ".prpolicy.yml", DEFAULT_POLICY)]

    existing = [p for p, _ in targets if p.exists()]
    if existing:
        for p in existing:
            console.print(f"[yellow]⚠[/yellow]  {p.name} already exists at {p}")
        raise typer.Exit(code=1)

    for path, template in targets:
        path.write_text(template, encoding="utf-8")
        console.print(f"[green]✓[/green] Created {path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"prpolicy {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """prpolicy — evaluate pull-request policy predicates."""
