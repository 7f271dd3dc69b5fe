"""CLI for katabox.

Usage:
    python -m katabox list                              # Show available katas
    python -m katabox simulate                          # Age the sample stock for 5 days
    python -m katabox simulate --days 3 --item "Aged Brie:2:0"
    python -m katabox simulate --json                   # Day snapshots as JSON
    python -m katabox pairsum 50 10 15 25 35 40         # First pair summing to 50
    python -m katabox pairsum 10 -3 8 4 13              # Negative numbers are fine
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from katabox.catalog import list_katas, load_kata
from katabox.pairsum import find_pair_summing_to
from katabox.render import render_history
from katabox.simulation import default_days, parse_item_spec, sample_stock, simulate

app = typer.Typer(
    name="katabox",
    help="Gilded Rose inventory aging and pair-sum katas",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


@app.command("list")
def cmd_list(
    name: Optional[str] = typer.Argument(None, help="Show only this kata (e.g., 'gilded-rose')"),
) -> None:
    """Show available katas."""
    if name:
        kata = load_kata(name)
        if not kata:
            console.print(f"[red]Unknown kata: {name}[/red]")
            raise typer.Exit(1)
        katas = [kata]
    else:
        katas = list_katas()

    table = Table(title="Available Katas", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=12)
    table.add_column("Description", min_width=30)
    table.add_column("Command")
    table.add_column("Entry point", style="dim")

    for k in katas:
        table.add_row(k.name, k.description, k.command, k.entry_point)

    out.print()
    out.print(table)
    out.print()


@app.command("simulate")
def cmd_simulate(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Days to simulate (default: $KATABOX_DAYS or 5)"),
    item: Optional[list[str]] = typer.Option(None, "--item", "-i", help="NAME:SELL_IN:QUALITY, repeatable; replaces the sample stock"),
    as_json: bool = typer.Option(False, "--json", help="Print snapshots as JSON instead of tables"),
) -> None:
    """Age a stock of items one day at a time and show every day."""
    if days is None:
        days = default_days()

    try:
        items = [parse_item_spec(s) for s in item] if item else sample_stock()
        history = simulate(items, days)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([snap.to_dict() for snap in history], indent=2))
        return
    render_history(history, out)


# Negative numbers look like options to click; let them through as arguments.
@app.command("pairsum", context_settings={"ignore_unknown_options": True})
def cmd_pairsum(
    target: int = typer.Argument(help="Sum to look for"),
    numbers: list[int] = typer.Argument(help="Numbers to scan, in order"),
) -> None:
    """Find the first pair of numbers that add up to TARGET."""
    pair = find_pair_summing_to(numbers, target)
    if pair is None:
        console.print(f"[yellow]No pair sums to {target}.[/yellow]")
        raise typer.Exit(1)
    out.print(f"{pair[0]} + {pair[1]} = {target}")


if __name__ == "__main__":
    app()
