"""Command-line interface for the Rolodex."""

import asyncio
import sys
from datetime import date
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from rolodex import __version__
from rolodex.core.config import get_config, setup_logging
from rolodex.core.exceptions import ConfigurationError, RolodexError, ValidationError
from rolodex.core.models import ExportConfig, Workspace
from rolodex.core.types import DatasetKind, PipelineKind
from rolodex.engines import ContactImporter, LoadEngine
from rolodex.parsers import parse_workspace
from rolodex.pipeline import (
    CTO_NEXT_ACTIONS,
    FOLLOW_UP_ACTIONS,
    pipeline_health,
    resolve_stage,
    stages_for,
    transition_map,
)
from rolodex.runner import WorkspaceLoader
from rolodex.search import search as run_search

console = Console()

KIND_CHOICE = click.Choice([k.value for k in PipelineKind])


def _load_workspace(workspace_path: Optional[str]) -> Workspace:
    path = workspace_path or str(get_config().workspace)
    workspace_config = parse_workspace(path)
    return asyncio.run(WorkspaceLoader(workspace_config).load())


def _workspace_option(func):
    return click.option(
        "--workspace",
        "-w",
        "workspace_path",
        type=click.Path(),
        default=None,
        help="Workspace manifest (defaults to ROLODEX_WORKSPACE).",
    )(func)


@click.group()
@click.version_option(version=__version__, prog_name="rolodex")
def cli() -> None:
    """The Rolodex - contacts, events and relationship pipelines."""
    setup_logging(get_config())


@cli.command()
@click.argument("query")
@_workspace_option
@click.option(
    "--limit", "-n", type=click.IntRange(min=1), default=None, help="Maximum results."
)
def search(query: str, workspace_path: Optional[str], limit: Optional[int]) -> None:
    """Search contacts, events and pipeline entries.

    Example:
        rolodex search acme
    """
    cfg = get_config()
    if len(query.strip()) < cfg.search_min_query_length:
        console.print(
            f"[yellow]Type at least {cfg.search_min_query_length} "
            f"characters to search[/yellow]"
        )
        return

    try:
        workspace = _load_workspace(workspace_path)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)
    except RolodexError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    results = run_search(
        query,
        workspace.contacts,
        workspace.events,
        workspace.pipeline,
        max_results=limit if limit is not None else cfg.search_max_results,
        min_query_length=cfg.search_min_query_length,
    )

    if not results:
        console.print(f'No results found for "{query}"')
        return

    table = Table(title=f'Results for "{query}"')
    table.add_column("Type")
    table.add_column("Title")
    table.add_column("Details")
    table.add_column("Link")
    table.add_column("Score", justify="right")
    for result in results:
        table.add_row(
            result.type.value,
            result.title,
            f"{result.subtitle}\n{result.description}",
            result.url,
            str(result.relevance),
        )
    console.print(table)


@cli.command("resolve-stage")
@click.option("--kind", "-k", type=KIND_CHOICE, default=PipelineKind.RELATIONSHIP.value)
@click.argument("current_stage")
@click.argument("action")
def resolve_stage_cmd(kind: str, current_stage: str, action: str) -> None:
    """Show the stage an entry moves to when ACTION is selected.

    Example:
        rolodex resolve-stage "Forming the Relationship" "Send valuable insight"
    """
    pipeline_kind = PipelineKind(kind)
    stage = resolve_stage(pipeline_kind, current_stage, action)

    if current_stage not in stages_for(pipeline_kind):
        console.print(
            f"[yellow]Warning: {current_stage!r} is not a known {kind} stage[/yellow]"
        )
    if stage == current_stage:
        console.print(f"{stage} [dim](unchanged)[/dim]")
    else:
        console.print(f"{current_stage} -> [green]{stage}[/green]")


@cli.command()
@click.option("--kind", "-k", type=KIND_CHOICE, default=None)
def actions(kind: Optional[str]) -> None:
    """List known next actions and the stage each one implies."""
    kinds = [PipelineKind(kind)] if kind else list(PipelineKind)

    for pipeline_kind in kinds:
        mapping = transition_map(pipeline_kind)
        table = Table(title=f"{pipeline_kind.value} actions")
        table.add_column("Category")
        table.add_column("Action")
        table.add_column("Moves to")

        if pipeline_kind is PipelineKind.RELATIONSHIP:
            for category in FOLLOW_UP_ACTIONS.values():
                for action in category["actions"]:
                    table.add_row(category["label"], action, mapping.get(action) or "-")
        else:
            for action in CTO_NEXT_ACTIONS:
                table.add_row("", action, mapping.get(action) or "(unchanged)")
        console.print(table)


@cli.command()
@_workspace_option
def health(workspace_path: Optional[str]) -> None:
    """Report next-action health for both pipelines."""
    try:
        workspace = _load_workspace(workspace_path)
    except RolodexError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    today = date.today()
    for label, entries in (
        ("Relationship pipeline", workspace.pipeline),
        ("CTO club pipeline", workspace.cto_pipeline),
    ):
        report = pipeline_health(entries, today)
        console.print(f"\n[bold]{label}[/bold] ({len(entries)} entries)")
        console.print(f"  Health score: {report.score}")
        console.print(f"  Overdue: {report.overdue}")
        console.print(f"  Due today: {report.actionable_today}")
        console.print(f"  No next action date: {report.no_next_action}")


@cli.command()
@click.argument("kind", type=click.Choice([k.value for k in DatasetKind]))
@click.argument("destination", type=click.Path())
@_workspace_option
def export(kind: str, destination: str, workspace_path: Optional[str]) -> None:
    """Export a collection to CSV, JSON, JSONL or Parquet.

    Example:
        rolodex export pipeline out/pipeline.csv
    """
    try:
        workspace = _load_workspace(workspace_path)
        engine = LoadEngine(ExportConfig(kind=DatasetKind(kind), destination=destination))
        written = asyncio.run(engine.load(getattr(workspace, kind)))
    except RolodexError as e:
        console.print(f"[red]Export failed: {e}[/red]")
        sys.exit(1)

    console.print(f"[green]Exported {written} {kind} to {destination}[/green]")


@cli.command("import-contacts")
@click.argument("csv_path", type=click.Path(exists=True))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Write accepted contacts to this file.",
)
def import_contacts(csv_path: str, output: Optional[str]) -> None:
    """Validate a contacts CSV and report rejected rows."""
    try:
        report = asyncio.run(ContactImporter(csv_path).run())
    except RolodexError as e:
        console.print(f"[red]Import failed: {e}[/red]")
        sys.exit(1)

    console.print(
        f"Rows: {report.total}  Valid: [green]{len(report.valid)}[/green]  "
        f"Errors: [red]{len(report.errors)}[/red]"
    )
    for row_error in report.errors:
        console.print(f"  Row {row_error.row}: {'; '.join(row_error.errors)}")

    if output and report.valid:
        engine = LoadEngine(ExportConfig(kind=DatasetKind.CONTACTS, destination=output))
        try:
            asyncio.run(engine.load(report.valid))
        except RolodexError as e:
            console.print(f"[red]Could not write {output}: {e}[/red]")
            sys.exit(1)
        console.print(f"[green]Wrote {len(report.valid)} contacts to {output}[/green]")

    if report.errors:
        sys.exit(1)


@cli.command()
@click.argument("manifest_path", type=click.Path(exists=True))
def validate(manifest_path: str) -> None:
    """Validate a workspace manifest.

    Example:
        rolodex validate rolodex.yaml
    """
    try:
        console.print(f"[cyan]Validating workspace: {manifest_path}[/cyan]")
        workspace_config = parse_workspace(manifest_path)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]✗ Validation failed: {e}[/red]")
        sys.exit(1)

    console.print("[green]✓ Workspace is valid[/green]")
    if workspace_config.name:
        console.print(f"  Name: {workspace_config.name}")
    for dataset in workspace_config.datasets():
        console.print(f"  {dataset.kind.value}: {dataset.source}")


@cli.command()
def version() -> None:
    """Show Rolodex version."""
    console.print(f"Rolodex version {__version__}")


if __name__ == "__main__":
    cli()
