"""Item-aging rules — one simulated day of the Gilded Rose inventory.

Each item is classified once per update by exact name lookup in
ITEM_REGISTRY. Names not in the registry age as ordinary items. The kind then
selects a single update function from RULES, which moves quality first and
then sell_in.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional

from katabox.models import Item, ItemKind

MAX_QUALITY = 50
MIN_QUALITY = 0
# Legendary items carry this quality forever; it is never clamped.
LEGENDARY_QUALITY = 80

AGED_BRIE = "Aged Brie"
BACKSTAGE_PASSES = "Backstage passes to a TAFKAL80ETC concert"
SULFURAS = "Sulfuras, Hand of Ragnaros"
CONJURED = "Conjured"

ITEM_REGISTRY: Mapping[str, ItemKind] = MappingProxyType({
    AGED_BRIE: ItemKind.AGED,
    BACKSTAGE_PASSES: ItemKind.EVENT_PASS,
    SULFURAS: ItemKind.LEGENDARY,
    CONJURED: ItemKind.CONJURED,
})


def classify_item(name: str) -> ItemKind:
    """Map an item name to its aging behavior.

    Exact, case-sensitive match only. "aged brie" or "Conjured Mana Cake"
    are ordinary items.
    """
    return ITEM_REGISTRY.get(name, ItemKind.ORDINARY)


def _raise_quality(item: Item, amount: int = 1) -> None:
    item.quality = min(item.quality + amount, MAX_QUALITY)


def _lower_quality(item: Item, amount: int = 1) -> None:
    item.quality = max(item.quality - amount, MIN_QUALITY)


def _expired(item: Item) -> bool:
    # Checked after the day's decrement, so sell_in == 0 on entry counts.
    return item.sell_in < 0


def age_ordinary(item: Item) -> None:
    _lower_quality(item)
    item.sell_in -= 1
    if _expired(item):
        _lower_quality(item)


def age_aged(item: Item) -> None:
    _raise_quality(item)
    item.sell_in -= 1
    if _expired(item):
        _raise_quality(item)


def age_event_pass(item: Item) -> None:
    """Staircase increase, then worthless once the event has happened."""
    if item.sell_in > 10:
        _raise_quality(item)
    elif item.sell_in > 5:
        _raise_quality(item, 2)
    elif item.sell_in > 0:
        _raise_quality(item, 3)
    else:
        item.quality = 0
    item.sell_in -= 1


def age_legendary(item: Item) -> None:
    """Legendary items never change."""


def age_conjured(item: Item) -> None:
    _lower_quality(item, 2)
    item.sell_in -= 1
    if _expired(item):
        _lower_quality(item, 2)


RULES: Mapping[ItemKind, Callable[[Item], None]] = MappingProxyType({
    ItemKind.ORDINARY: age_ordinary,
    ItemKind.AGED: age_aged,
    ItemKind.EVENT_PASS: age_event_pass,
    ItemKind.LEGENDARY: age_legendary,
    ItemKind.CONJURED: age_conjured,
})


def advance_one_day(items: list[Item]) -> list[Item]:
    """Age every item by one day, in place.

    Inputs are not validated: unknown names get the ordinary rule and
    out-of-range values are aged as-is.

    Args:
        items: Stock to update.

    Returns:
        The same list, for chaining.
    """
    for item in items:
        RULES[classify_item(item.name)](item)
    return items


class GildedRose:
    """The shop: holds the stock and ages it one day per update_quality()."""

    def __init__(self, items: Optional[list[Item]] = None) -> None:
        self.items = items if items is not None else []

    def update_quality(self) -> list[Item]:
        return advance_one_day(self.items)
