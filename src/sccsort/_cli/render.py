"""Rich rendering utilities for sort results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console


def _format_vertices(vertices: list[str]) -> str:
    return ", ".join(escape(v) for v in vertices)


def render_components_table(components: list[list[str]], console: Console) -> None:
    """Render sorted components as a Rich table, cyclic components highlighted.

    Args:
        components: Components in dependency order.
        console: Rich Console to output to.

    """
    if not components:
        console.print("[dim]Graph is empty[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertices")
    table.add_column("Size", justify="right")

    for i, component in enumerate(components, start=1):
        style = "yellow" if len(component) > 1 else None
        table.add_row(str(i), _format_vertices(component), str(len(component)), style=style)

    console.print(table)


def render_order_table(order: list[str], console: Console) -> None:
    """Render a topological order as a Rich table."""
    if not order:
        console.print("[dim]Graph is empty[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertex")

    for i, vertex in enumerate(order, start=1):
        table.add_row(str(i), escape(vertex))

    console.print(table)


def render_cycles(cycles: list[list[str]], console: Console) -> None:
    """Render cyclic components as a bulleted list."""
    for cycle in cycles:
        console.print(f"  [yellow]•[/yellow] {_format_vertices(cycle)}")
