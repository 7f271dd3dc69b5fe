"""Data models for katabox.

ItemKind enum, Item, DaySnapshot — the typed structures that flow through
rules → simulation → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ItemKind(str, Enum):
    """Aging behaviors an item can be dispatched to."""

    ORDINARY = "ordinary"
    AGED = "aged"
    EVENT_PASS = "event-pass"
    LEGENDARY = "legendary"
    CONJURED = "conjured"


@dataclass
class Item:
    """A stock item. Mutated in place by the aging engine."""

    name: str
    sell_in: int
    quality: int

    def copy(self) -> Item:
        return Item(self.name, self.sell_in, self.quality)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "name": self.name,
            "sell_in": self.sell_in,
            "quality": self.quality,
        }


@dataclass
class DaySnapshot:
    """State of the stock at the end of one simulated day.

    Day 0 is the stock as supplied, before any update.
    """

    day: int
    items: list[Item] = field(default_factory=list)

    @classmethod
    def capture(cls, day: int, items: list[Item]) -> DaySnapshot:
        """Copy the items so later updates don't leak into this snapshot."""
        return cls(day=day, items=[item.copy() for item in items])

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "items": [item.to_dict() for item in self.items],
        }
