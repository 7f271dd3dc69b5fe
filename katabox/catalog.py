"""Catalog of the katas shipped in katabox."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class KataInfo:
    """Metadata about one kata."""

    name: str
    description: str
    entry_point: str
    command: str


_KATAS = [
    KataInfo(
        name="gilded-rose",
        description="Age inventory items one day at a time by per-item rules",
        entry_point="katabox.rules.advance_one_day",
        command="simulate",
    ),
    KataInfo(
        name="pair-sum",
        description="Find the first pair of numbers summing to a target",
        entry_point="katabox.pairsum.find_pair_summing_to",
        command="pairsum",
    ),
]


def list_katas() -> list[KataInfo]:
    """All katas, in display order."""
    return list(_KATAS)


def load_kata(name: str) -> Optional[KataInfo]:
    """Look up a kata by name. Returns None if unknown."""
    for kata in _KATAS:
        if kata.name == name:
            return kata
    return None
