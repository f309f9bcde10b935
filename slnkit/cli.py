"""slnkit CLI - inspect and normalise Visual Studio solution files."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from slnkit.errors import SolutionError
from slnkit.output import solution_to_dict, write_output
from slnkit.pipeline import parse
from slnkit.solution import Solution
from slnkit.writer import render, write


def _setup_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    # stderr keeps `show --json` and `format` output clean
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load(path: str) -> Solution:
    try:
        return parse(path)
    except (SolutionError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """slnkit - Read, inspect and rewrite .sln files."""
    _setup_logging(verbose)


@cli.command("show")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the solution as JSON")
@click.option("-o", "--output", "output_path", default=None, help="Write JSON to a file")
def show_cmd(path: str, as_json: bool, output_path: str | None) -> None:
    """Summarise the projects, folders and configurations of a solution."""
    solution = _load(path)

    if output_path:
        write_output(solution, output_path)
        return
    if as_json:
        click.echo(json.dumps(solution_to_dict(solution), indent=2))
        return

    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    from rich.tree import Tree

    console = Console()

    table = Table(title=f"Solution: {solution.name}", show_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Format version", solution.file_format_version)
    table.add_row("Visual Studio", solution.visual_studio_version.version or "-")
    table.add_row("Minimum version", solution.visual_studio_version.minimum_version or "-")
    table.add_row("Projects", str(len(solution.buildable_projects)))
    table.add_row("Folders", str(len(solution.solution_folders)))
    table.add_row(
        "Configurations",
        ", ".join(cp.name for cp in solution.configuration_platforms) or "-",
    )
    table.add_row("Solution GUID", solution.guid or "-")
    console.print(table)

    tree = Tree(f"[bold]{escape(solution.name or '')}[/bold]")

    def _add(node: Tree, entry) -> None:
        if entry.is_folder:
            branch = node.add(f"[blue]{escape(entry.name)}/[/blue]")
            for file in entry.files:
                branch.add(f"[dim]{escape(file)}[/dim]")
            for child in solution.children_of(entry):
                _add(branch, child)
        else:
            node.add(f"{escape(entry.name)} [dim]({escape(entry.path)})[/dim]")

    for entry in solution.root_projects:
        _add(tree, entry)
    console.print(tree)


@cli.command("format")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", default=None, help="Output .sln path (default: stdout)")
def format_cmd(path: str, output_path: str | None) -> None:
    """Parse a solution and write it back in canonical form."""
    solution = _load(path)

    if output_path is None:
        click.echo(render(solution), nl=False)
        return

    write(solution, output_path)
    from rich.console import Console
    Console(stderr=True).print(f"[green]Solution written to:[/green] {Path(output_path)}")


@cli.command("check")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def check_cmd(path: str) -> None:
    """Report declarations that were skipped while parsing."""
    solution = _load(path)

    if not solution.diagnostics:
        click.echo(f"{path}: OK ({len(solution.projects)} entries)")
        return

    for diagnostic in solution.diagnostics:
        click.echo(f"{path}: {diagnostic.message}: {diagnostic.line}")
    sys.exit(1)


if __name__ == "__main__":
    cli()
