"""CLI interface for category-harvest."""

import logging
import math
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from category_harvest.consts import (
    DEFAULT_INDEX_MODULE_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_OVERRIDES_PATH,
    DEFAULT_SOURCE_TREE,
)
from category_harvest.errors import HarvestError
from category_harvest.index.service import CategoryService
from category_harvest.models.model_storage import HarvestOutput
from category_harvest.pipeline import build_static_index, run_harvest_pipeline
from category_harvest.storage.file_manager import FileManager

app = typer.Typer(
    name="category-harvest",
    help="Classify package templates into categories and build the lookup index",
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _format_score(score: float) -> str:
    """Format a score for display; override scores are infinite."""
    if math.isinf(score):
        return "forced"
    return f"{score:.1f}"


def _summary_table(output: HarvestOutput) -> Table:
    table = Table(title="Packages by Category")
    table.add_column("Category", style="cyan")
    table.add_column("Count", justify="right", style="magenta")
    for entry in output.metadata.summary:
        table.add_row(entry.category, str(entry.packages))
    return table


@app.command()
def harvest(
    source_tree: Path = typer.Option(
        DEFAULT_SOURCE_TREE, "--source-tree", help="Package template tree (srcpkgs/)"
    ),
    overrides: Path = typer.Option(
        DEFAULT_OVERRIDES_PATH, "--overrides", help="Category override file (TOML or JSON)"
    ),
    output: Path = typer.Option(DEFAULT_OUTPUT_PATH, "--output", "-o", help="Artifact path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress logs"),
) -> None:
    """Classify every package template and write the suggestions artifact."""
    _configure_logging(verbose)

    try:
        result, path = run_harvest_pipeline(
            source_tree=source_tree,
            overrides_path=overrides,
            output_path=output,
        )
    except HarvestError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(
        f"Wrote {result.metadata.total_packages} package suggestions to {escape(str(path))}",
        soft_wrap=True,
    )
    if result.metadata.overrides_applied:
        console.print(f"Overrides applied: {result.metadata.overrides_applied}")
    if result.metadata.summary:
        console.print()
        console.print(_summary_table(result))


@app.command("build-index")
def build_index(
    artifact: Path = typer.Option(DEFAULT_OUTPUT_PATH, "--artifact", "-a", help="Harvest artifact"),
    module: Path = typer.Option(
        DEFAULT_INDEX_MODULE_PATH, "--module", "-m", help="Generated Python module path"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress logs"),
) -> None:
    """Compile the artifact into the static package -> category module."""
    _configure_logging(verbose)

    try:
        count, path = build_static_index(artifact, module)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error building index:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"Indexed {count} packages into {escape(str(path))}", soft_wrap=True)


@app.command()
def lookup(
    names: list[str] = typer.Argument(..., help="Package names to look up"),
    artifact: Path | None = typer.Option(
        None, "--artifact", "-a", help="Read a harvest artifact instead of the compiled index"
    ),
) -> None:
    """Show the category and icon of packages."""
    service = CategoryService.from_artifact(artifact) if artifact else CategoryService.default()

    table = Table(title="Package Categories")
    table.add_column("Package", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Icon", style="dim")
    for name in names:
        category = service.category_for(name)
        table.add_row(escape(name), category, service.icon_for_category(category))

    console.print(table)


@app.command()
def explain(
    name: str = typer.Argument(..., help="Package name"),
    artifact: Path = typer.Option(DEFAULT_OUTPUT_PATH, "--artifact", "-a", help="Harvest artifact"),
) -> None:
    """Show why a package received its category."""
    output = FileManager().load_output(artifact)
    if output is None:
        console.print(f"[red]Error:[/red] No harvest artifact at {escape(str(artifact))}")
        raise typer.Exit(1)

    wanted = name.lower()
    suggestion = next((p for p in output.packages if p.pkgname.lower() == wanted), None)
    if suggestion is None:
        console.print(f"[yellow]Package '{escape(name)}' not found in artifact[/yellow]")
        raise typer.Exit(1)

    console.print(f"[bold]{escape(suggestion.pkgname)}[/bold] -> {suggestion.category}")
    console.print(f"Score: {_format_score(suggestion.score)}")
    if suggestion.override_applied:
        console.print("Override applied")
    for reason in suggestion.reasons:
        console.print(f"  - {escape(reason)}")

    if suggestion.alternatives:
        table = Table(title="Alternatives")
        table.add_column("Category", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("Reasons", style="dim")
        for alt in suggestion.alternatives:
            table.add_row(alt.category, _format_score(alt.score), escape("; ".join(alt.reasons)))
        console.print(table)


if __name__ == "__main__":
    app()
