"""Typer-based CLI for inspecting buildlog files."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import BuildlogConfig
from .errors import BuildlogSchemaError, BuildlogSyntaxError
from .files import get_extension, is_buildlog_file
from .formatting import format_bytes, format_duration
from .models import BuildlogV2
from .operations import BuildlogStatsV2, compute_stats, estimate_document_size, to_slim
from .validator import (
    decode_json,
    document_size_bytes,
    load_document,
    serialize_document,
    validate_document,
)

app = typer.Typer(
    name="buildlog",
    help="Validate and inspect .buildlog session recordings",
    add_completion=False,
)

console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
):
    """Validate and inspect .buildlog session recordings."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _load_or_exit(file: Path):
    try:
        return load_document(file)
    except OSError as e:
        console.print(f"[red]Error: Cannot read {file}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except BuildlogSyntaxError as e:
        console.print(f"[red]Error: {file} is not valid JSON: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except BuildlogSchemaError as e:
        console.print(f"[red]Error: {file} is not a valid buildlog ({len(e.issues)} issue(s))[/red]")
        console.print("[yellow]Run 'buildlog validate' for details[/yellow]")
        raise typer.Exit(code=1)


@app.command()
def validate(
    files: list[Path] = typer.Argument(..., help="Buildlog files to validate"),
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML config file (default: .buildlog/config.toml in repo root)",
    ),
):
    """Validate one or more buildlog files.

    Exits with code 1 if any file is unreadable, malformed or invalid.
    Size advisories are reported but do not fail validation.
    """
    config = BuildlogConfig.from_env(config_path)
    failed = 0

    for file in files:
        if not is_buildlog_file(file.name):
            console.print(f"[yellow]Note: {file} does not have a buildlog extension[/yellow]")

        try:
            data = decode_json(file.read_bytes())
        except OSError as e:
            console.print(f"[red]✗ {file}: cannot read ({escape(str(e))})[/red]")
            failed += 1
            continue
        except BuildlogSyntaxError as e:
            console.print(f"[red]✗ {file}: invalid JSON ({escape(str(e))})[/red]")
            failed += 1
            continue

        result = validate_document(data, config)
        if not result.valid:
            failed += 1
            console.print(f"[red]✗ {file}: {len(result.errors)} issue(s)[/red]")
            table = Table()
            table.add_column("Path", style="cyan")
            table.add_column("Code", style="magenta")
            table.add_column("Message")
            for issue in result.errors:
                table.add_row(escape(issue.path or "<root>"), issue.code, escape(issue.message))
            console.print(table)
            continue

        console.print(f"[green]✓ {file}[/green]")
        for warning in result.warnings or []:
            console.print(f"  [yellow]Warning ({warning.path or '<root>'}): {escape(warning.message)}[/yellow]")
            console.print(f"  [dim]{escape(warning.suggestion)}[/dim]")

    if failed:
        console.print(f"\n[red]{failed} of {len(files)} file(s) failed validation[/red]")
        raise typer.Exit(code=1)


@app.command()
def stats(
    file: Path = typer.Argument(..., help="Buildlog file"),
):
    """Show statistics for a buildlog file."""
    document = _load_or_exit(file)
    computed = compute_stats(document)
    size = document_size_bytes(document)

    table = Table(title=f"{escape(document.metadata.title)} (v{document.version})")
    table.add_column("Stat", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Duration", format_duration(computed.duration_seconds))
    table.add_row("Size", f"{format_bytes(size)} ({estimate_document_size(document)})")

    if isinstance(computed, BuildlogStatsV2):
        table.add_row("Format", computed.format.value)
        table.add_row("Steps", str(computed.step_count))
        table.add_row("Prompts", str(computed.prompt_count))
        table.add_row("Actions", str(computed.action_count))
        table.add_row("Terminal", str(computed.terminal_count))
        table.add_row("Notes", str(computed.note_count))
        table.add_row("Checkpoints", str(computed.checkpoint_count))
        table.add_row("Errors", str(computed.error_count))
        table.add_row("Files created", str(computed.files_created))
        table.add_row("Files modified", str(computed.files_modified))
        table.add_row("Replicable", "yes" if computed.is_replicable else "no")
    else:
        table.add_row("Events", str(computed.event_count))
        table.add_row("Prompts", str(computed.prompt_count))
        table.add_row("Responses", str(computed.response_count))
        table.add_row("Files", str(computed.file_count))
        table.add_row("Lines", f"+{computed.lines_added} -{computed.lines_removed}")
        table.add_row("Languages", ", ".join(computed.languages) or "-")

    console.print(table)


@app.command()
def slim(
    file: Path = typer.Argument(..., help="Full-format v2 buildlog file"),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (default: <name>.slim.buildlog next to the input)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Allow overwriting the input file",
    ),
):
    """Write a slim copy of a v2 buildlog (drops AI responses, diffs and terminal output)."""
    document = _load_or_exit(file)
    if not isinstance(document, BuildlogV2):
        console.print(f"[red]Error: {file} is a v{document.version} buildlog; slim conversion needs v2[/red]")
        raise typer.Exit(code=1)

    if output is None:
        output = file.with_name(f"{file.stem}.slim{get_extension()}")

    if output.resolve() == file.resolve() and not force:
        console.print(f"[red]Error: {output} is the input file; pass --force to overwrite it[/red]")
        raise typer.Exit(code=1)

    slimmed = to_slim(document)
    output.write_text(serialize_document(slimmed, indent=2) + "\n", encoding="utf-8")

    before = document_size_bytes(document)
    after = document_size_bytes(slimmed)
    console.print(f"[green]Wrote slim buildlog:[/green] {output}")
    console.print(f"  Size: {format_bytes(before)} → {format_bytes(after)}")


@app.command()
def version():
    """Show buildlog package version."""
    from . import __version__
    console.print(f"buildlog v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
