"""Multi-day simulation driver for the aging engine.

Data flow per run:
1. Start from the sample stock or caller-supplied items
2. Snapshot day 0
3. advance_one_day() once per simulated day, snapshotting after each
"""

from __future__ import annotations

import os

from katabox.models import DaySnapshot, Item
from katabox.rules import (
    AGED_BRIE,
    BACKSTAGE_PASSES,
    CONJURED,
    LEGENDARY_QUALITY,
    SULFURAS,
    advance_one_day,
)

DEFAULT_DAYS = 5

# name, sell_in, quality
_SAMPLE_STOCK = [
    ("+5 Dexterity Vest", 10, 20),
    (AGED_BRIE, 2, 0),
    ("Elixir of the Mongoose", 5, 7),
    (SULFURAS, 0, LEGENDARY_QUALITY),
    (SULFURAS, -1, LEGENDARY_QUALITY),
    (BACKSTAGE_PASSES, 15, 20),
    (BACKSTAGE_PASSES, 10, 49),
    (BACKSTAGE_PASSES, 5, 49),
    (CONJURED, 3, 6),
]


def sample_stock() -> list[Item]:
    """Fresh copy of the demo inventory."""
    return [Item(name, sell_in, quality) for name, sell_in, quality in _SAMPLE_STOCK]


def default_days() -> int:
    """Days to simulate when none are given. Overridable via KATABOX_DAYS."""
    raw = os.environ.get("KATABOX_DAYS", "")
    try:
        days = int(raw)
    except ValueError:
        return DEFAULT_DAYS
    return days if days >= 0 else DEFAULT_DAYS


def parse_item_spec(spec: str) -> Item:
    """Parse a NAME:SELL_IN:QUALITY item spec.

    The name may itself contain colons; the two numeric fields are split
    off from the right.

    Raises:
        ValueError: If the spec has no name or non-integer numeric fields.
    """
    parts = spec.rsplit(":", 2)
    if len(parts) != 3 or not parts[0].strip():
        raise ValueError(f"Invalid item spec {spec!r}, expected NAME:SELL_IN:QUALITY")
    name, sell_in, quality = parts
    try:
        return Item(name.strip(), int(sell_in), int(quality))
    except ValueError:
        raise ValueError(
            f"Invalid item spec {spec!r}: SELL_IN and QUALITY must be integers"
        ) from None


def simulate(items: list[Item], days: int) -> list[DaySnapshot]:
    """Age items for a number of days and record each day.

    The items are mutated in place; the snapshots hold copies.

    Returns:
        days + 1 snapshots, day 0 first.
    """
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")

    history = [DaySnapshot.capture(0, items)]
    for day in range(1, days + 1):
        advance_one_day(items)
        history.append(DaySnapshot.capture(day, items))
    return history
