"""Rich rendering of simulation history.

One table per simulated day showing each item's name, kind, sell_in and
quality, with expired and worthless values highlighted.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from katabox.models import DaySnapshot, Item, ItemKind
from katabox.rules import classify_item

_KIND_STYLES = {
    ItemKind.ORDINARY: "white",
    ItemKind.AGED: "yellow",
    ItemKind.EVENT_PASS: "cyan",
    ItemKind.LEGENDARY: "magenta",
    ItemKind.CONJURED: "green",
}


def _fmt_sell_in(item: Item) -> str:
    if item.sell_in < 0:
        return f"[red]{item.sell_in}[/red]"
    return str(item.sell_in)


def _fmt_quality(item: Item) -> str:
    if item.quality == 0:
        return "[dim]0[/dim]"
    return str(item.quality)


def build_day_table(snapshot: DaySnapshot) -> Table:
    """Build the table for a single day."""
    table = Table(
        title=f"Day {snapshot.day}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Item", min_width=30)
    table.add_column("Kind", min_width=10)
    table.add_column("Sell in", justify="right")
    table.add_column("Quality", justify="right")

    for item in snapshot.items:
        kind = classify_item(item.name)
        style = _KIND_STYLES[kind]
        table.add_row(
            item.name,
            f"[{style}]{kind.value}[/{style}]",
            _fmt_sell_in(item),
            _fmt_quality(item),
        )
    return table


def render_history(history: list[DaySnapshot], console: Console) -> None:
    """Print every day of a simulation."""
    if not history:
        console.print("[yellow]Nothing to show.[/yellow]")
        return

    for snapshot in history:
        console.print()
        console.print(build_day_table(snapshot))
    console.print()
