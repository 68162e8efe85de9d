"""CLI entry point for elmdoc.

Invoked as::

    elmdoc [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m elmdoc.cli.main

Commands
--------
fmt         Reformat a ``{-| ... -}`` comment to a page width
parse       Dump the parsed comment to JSON or YAML
tags        Show the ``@docs`` groups of a module comment
version     Show version information

The page width defaults to 80 columns and can be set with ``--width`` or
the ``ELMDOC_WIDTH`` environment variable.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from elmdoc.ast.nodes import Comment

console = Console()
err_console = Console(stderr=True)

_KIND_CHOICE = click.Choice(["doc", "file"], case_sensitive=False)


def _read_source(path: str) -> str:
    """Read a comment source file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _parse_source(source: str, kind: str) -> Comment:
    """Strip the delimiters from ``source`` and parse it as ``kind``."""
    from elmdoc.parser import parse_doc_comment, parse_file_comment, strip_delimiters

    body = strip_delimiters(source)
    if kind.lower() == "file":
        return parse_file_comment(body)
    return parse_doc_comment(body)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="elmdoc")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Documentation comment toolkit: parser, tag layout, width-aware formatter."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from elmdoc import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]elmdoc[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# fmt command
# ---------------------------------------------------------------------------


@cli.command(name="fmt")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--width",
    type=click.IntRange(min=1),
    default=80,
    show_default=True,
    envvar="ELMDOC_WIDTH",
    help="Page width in columns",
)
@click.option("--kind", type=_KIND_CHOICE, default="doc", help="Declaration or module comment")
@click.option("--check", is_flag=True, default=False, help="Check if file is already formatted")
@click.option("--in-place", is_flag=True, default=False, help="Rewrite the file in place")
def fmt_command(file: str, width: int, kind: str, check: bool, in_place: bool) -> None:
    """Reformat a documentation comment.

    FILE holds a single comment, delimiters included.

    Without --check or --in-place, prints the formatted output to stdout.
    """
    from elmdoc.formatter import CommentFormatter, FormatConfig

    source = _read_source(file)
    comment = _parse_source(source, kind)
    formatter = CommentFormatter(FormatConfig(width=width))
    if kind.lower() == "file":
        formatted, _ = formatter.format_file(comment)  # type: ignore[arg-type]
    else:
        formatted = formatter.format_doc(comment)  # type: ignore[arg-type]
    formatted += "\n"

    if check:
        if formatted == source:
            console.print(f"[green]OK[/green] {file}: already formatted")
            sys.exit(0)
        else:
            console.print(f"[yellow]NEEDS FORMATTING[/yellow] {file}")
            sys.exit(1)
    elif in_place:
        Path(file).write_text(formatted, encoding="utf-8")
        console.print(f"[green]Formatted[/green] {file}")
    else:
        click.echo(formatted, nl=False)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("file", type=click.Path(exists=False))
@click.option("--kind", type=_KIND_CHOICE, default="doc", help="Declaration or module comment")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def parse_command(file: str, kind: str, output_format: str, output: str | None) -> None:
    """Parse a documentation comment and dump its parts.

    FILE holds a single comment, delimiters included.
    """
    from elmdoc.ast import CommentSerializer

    source = _read_source(file)
    comment = _parse_source(source, kind)

    serializer = CommentSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(comment, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(comment)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Comment written to[/green] {output}")
    else:
        syntax = Syntax(text, lang, line_numbers=True)
        console.print(syntax)


# ---------------------------------------------------------------------------
# tags command
# ---------------------------------------------------------------------------


@cli.command(name="tags")
@click.argument("file", type=click.Path(exists=False))
def tags_command(file: str) -> None:
    """Show the @docs groups of a module comment, in source order.

    FILE holds a single module comment, delimiters included.
    """
    from elmdoc.formatter import group_tags

    source = _read_source(file)
    comment = _parse_source(source, "file")
    groups = group_tags(comment.parts())

    if not groups:
        console.print(f"[yellow]No @docs groups[/yellow] in {file}")
        sys.exit(0)

    table = Table(title=f"@docs groups: {file}", show_lines=True)
    table.add_column("Group", style="bold", min_width=6)
    table.add_column("Names")
    for index, names in enumerate(groups, start=1):
        table.add_row(str(index), ", ".join(names) or "[dim](empty)[/dim]")

    console.print(table)
    console.print(f"\n[bold]{len(groups)}[/bold] group(s), {sum(len(g) for g in groups)} name(s)")


if __name__ == "__main__":
    cli()
