"""Command-line interface for DerbyJSON documents."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import AmbiguousClockEvent, DerbyJSONError, format_location
from .loader import dumps, load_document, load_roster
from .models import DerbyJSON, DocumentCore, Jam, Note, Rosters, Timeout, TimestampKind
from .utils import setup_logging

console = Console()

KINDS = ("rosters", "document")
FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _load(ctx: click.Context, path: Path, kind: str, timestamp_kinds: tuple[str, ...] = ()) -> DocumentCore:
    """Load a file as a roster or full document, exiting with status 1 on failure."""
    context = {"timestamp_kinds": list(timestamp_kinds)} if timestamp_kinds else None
    try:
        with path.open("rb") as stream:
            if kind == "rosters":
                return load_roster(stream, context=context)
            return load_document(stream, context=context)
    except DerbyJSONError as e:
        console.print(f"[red]✗ {type(e).__name__}: {escape(str(e))}[/red]")
        if isinstance(e, AmbiguousClockEvent):
            for variant, failures in e.attempts.items():
                for failure in failures:
                    where = format_location(tuple(failure["loc"]))
                    console.print(f"[dim]  as {variant}: {escape(where)}: {escape(failure['msg'])}[/dim]")
        ctx.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Output logs as JSON")
@click.pass_context
def main(ctx: click.Context, verbose: bool, json_logs: bool) -> None:
    """DerbyJSON tools - validate and inspect roller derby documents."""
    setup_logging(level="DEBUG" if verbose else "INFO", json_output=json_logs)


@main.command()
@click.argument("path", type=FILE)
@click.option("--kind", "-k", type=click.Choice(KINDS), default="document", show_default=True)
@click.pass_context
def validate(ctx: click.Context, path: Path, kind: str) -> None:
    """Check that a file is a structurally valid DerbyJSON document."""
    document = _load(ctx, path, kind)

    summary = f"{len(document.teams)} teams"
    if isinstance(document, DerbyJSON):
        summary += f", {len(document.periods)} periods"
    console.print(
        f"[green]✓ Valid {document.objecttype.value} document ({escape(summary)})[/green]"
    )


@main.command()
@click.argument("path", type=FILE)
@click.option("--kind", "-k", type=click.Choice(KINDS), default="rosters", show_default=True)
@click.pass_context
def show_roster(ctx: click.Context, path: Path, kind: str) -> None:
    """Display each team's persons in a formatted table."""
    document = _load(ctx, path, kind)

    for key, team in document.teams.items():
        title = team.name or key
        if team.league:
            title += f" ({team.league})"

        table = Table(title=escape(title), show_header=True)
        table.add_column("#", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("Roles", style="dim")

        for person in sorted(team.persons, key=lambda p: p.number or ""):
            table.add_row(
                escape(person.number or ""),
                escape(person.name),
                escape(", ".join(person.roles)),
            )
        console.print(table)

    if isinstance(document, Rosters) and document.leagues:
        console.print(f"[dim]{len(document.leagues)} leagues[/dim]")


@main.command()
@click.argument("path", type=FILE)
@click.option(
    "--timestamp-kind",
    "-t",
    "timestamp_kinds",
    multiple=True,
    type=click.Choice([kind.value for kind in TimestampKind]),
    help="Accept only these kinds for bare timestamps",
)
@click.pass_context
def show_timeline(ctx: click.Context, path: Path, timestamp_kinds: tuple[str, ...]) -> None:
    """List the jams, timeouts and notes of every period."""
    document = _load(ctx, path, "document", timestamp_kinds)

    if not document.periods:
        console.print("[yellow]No periods in document[/yellow]")
        return

    for number, period in enumerate(document.periods, start=1):
        table = Table(title=f"Period {number}", show_header=True)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Entry", style="green")
        table.add_column("Detail")

        for index, entry in enumerate(period.jams, start=1):
            if isinstance(entry, Jam):
                detail = f"Jam {entry.number}: {len(entry.events)} events"
                table.add_row(str(index), "jam", detail)
            elif isinstance(entry, Timeout):
                detail = f"{entry.timeout.value}, {entry.duration}s"
                if entry.review:
                    detail += f", review: {entry.review}"
                table.add_row(str(index), "timeout", escape(detail))
            elif isinstance(entry, Note):
                table.add_row(str(index), "note", escape(entry.note))
        console.print(table)


@main.command()
@click.argument("path", type=FILE)
@click.option("--kind", "-k", type=click.Choice(KINDS), default="document", show_default=True)
@click.option("--indent", type=int, default=None, help="Indent output by this many spaces")
@click.option(
    "--timestamp-kind",
    "-t",
    "timestamp_kinds",
    multiple=True,
    type=click.Choice([kind.value for kind in TimestampKind]),
    help="Accept only these kinds for bare timestamps",
)
@click.pass_context
def reencode(
    ctx: click.Context, path: Path, kind: str, indent: int | None, timestamp_kinds: tuple[str, ...]
) -> None:
    """Decode a document and write it back out as DerbyJSON."""
    document = _load(ctx, path, kind, timestamp_kinds)
    click.echo(dumps(document, indent=indent))


if __name__ == "__main__":
    main()
