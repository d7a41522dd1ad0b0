import logging
from collections.abc import Hashable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from sccsort._equivalence import Equivalence, KeyEquivalence, key_function
from sccsort._errors import CycleError, GraphFileError
from sccsort._graph import DependencyGraph, find_and_sort_strongly_connected_components, topological_sort
from sccsort._io import GraphDocument, components_to_dict, dumps, load_graph, order_to_dict

from .config import OUTPUT_FORMATS, ConfigError, SccsortConfig, get_config
from .render import render_components_table, render_cycles, render_order_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a .toml or .json graph file (defaults to [tool.sccsort].graph)"),
]
FormatOption = Annotated[
    str | None,
    typer.Option("-f", "--format", help="Output format: table, json or toml"),
]
IgnoreCaseOption = Annotated[
    bool | None,
    typer.Option("--ignore-case/--match-case", help="Compare vertex names case-insensitively"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Sort dependency graphs into strongly connected components."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


@dataclass(slots=True, frozen=True)
class _Settings:
    document: GraphDocument
    format: str
    equivalence: Equivalence[str] | None


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✗ {message}[/red]")
    return typer.Exit(code=2)


def _load_config() -> SccsortConfig:
    try:
        return get_config()
    except ConfigError as e:
        raise _fail(str(e)) from e


def _settings(graph: Path | None, output_format: str | None, ignore_case: bool | None) -> _Settings:
    """Merge command-line options with [tool.sccsort] and load the graph."""
    config = _load_config()

    graph = graph or config.graph
    if graph is None:
        msg = "No graph file given and no [tool.sccsort].graph configured"
        raise _fail(msg)

    output_format = output_format or config.format or "table"
    if output_format not in OUTPUT_FORMATS:
        msg = f"Unknown format '{output_format}' (expected one of {', '.join(OUTPUT_FORMATS)})"
        raise _fail(msg)

    if ignore_case is None:
        ignore_case = bool(config.ignore_case)

    logger.debug(f"Loading graph from {graph}")
    try:
        document = load_graph(graph)
    except GraphFileError as e:
        raise _fail(str(e)) from e

    return _Settings(
        document=document,
        format=output_format,
        equivalence=KeyEquivalence(str.casefold) if ignore_case else None,
    )


@app.command()
def components(
    graph: GraphArgument = None,
    *,
    output_format: FormatOption = None,
    ignore_case: IgnoreCaseOption = None,
) -> None:
    """Print the strongly connected components, dependencies first."""
    settings = _settings(graph, output_format, ignore_case)
    document = settings.document

    result = find_and_sort_strongly_connected_components(
        document.seed_vertices(),
        document.edges,
        settings.equivalence,
    )

    if settings.format != "table":
        typer.echo(dumps(components_to_dict(result), settings.format), nl=False)
        return

    render_components_table(result, out_console)
    n_cyclic = sum(1 for component in result if len(component) > 1)
    if n_cyclic:
        err_console.print(f"[yellow]⚠ {n_cyclic} cyclic component(s)[/yellow]")


@app.command()
def order(
    graph: GraphArgument = None,
    *,
    output_format: FormatOption = None,
    ignore_case: IgnoreCaseOption = None,
) -> None:
    """Print the vertices in topological order (fails on cycles)."""
    settings = _settings(graph, output_format, ignore_case)
    document = settings.document

    try:
        result = topological_sort(document.seed_vertices(), document.edges, settings.equivalence)
    except CycleError as e:
        err_console.print("[red]✗ Cycles in graph:[/red]")
        render_cycles(e.components, err_console)
        raise typer.Exit(code=1) from e

    if settings.format != "table":
        typer.echo(dumps(order_to_dict(result), settings.format), nl=False)
        return

    render_order_table(result, out_console)


def _dependency_graph(document: GraphDocument, equivalence: Equivalence[str] | None) -> DependencyGraph[str]:
    """Build a DependencyGraph where equivalent vertex names share their first spelling."""
    key = key_function(equivalence)
    spelling: dict[Hashable, str] = {}

    def canonical(name: str) -> str:
        return spelling.setdefault(key(name), name)

    vertices = [canonical(v) for v in document.seed_vertices()]
    edges = [(canonical(e.source), canonical(e.target)) for e in document.edges]
    return DependencyGraph.from_edges(edges, vertices=vertices)


@app.command()
def check(
    graph: GraphArgument = None,
    *,
    ignore_case: IgnoreCaseOption = None,
) -> None:
    """Check whether a graph is acyclic (self-dependencies count as cycles)."""
    settings = _settings(graph, None, ignore_case)
    dependency_graph = _dependency_graph(settings.document, settings.equivalence)

    table = Table(show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Vertices", str(len(dependency_graph)))
    table.add_row("Edges", str(len(dependency_graph.edges())))
    table.add_row("Components", str(len(dependency_graph.strongly_connected_components())))
    table.add_row("Roots", str(len(dependency_graph.roots())))
    table.add_row("Leaves", str(len(dependency_graph.leaves())))
    err_console.print(Panel(table, title="[bold]Graph[/bold]", border_style="cyan"))

    cycles = dependency_graph.cycles()
    if cycles:
        err_console.print(f"[red]✗ Graph has {len(cycles)} cycle(s):[/red]")
        render_cycles(cycles, err_console)
        raise typer.Exit(code=1)

    err_console.print("[green]✓ Graph is acyclic[/green]")


def main() -> None:
    app()
