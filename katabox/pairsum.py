"""Pair-sum lookup: the first two numbers in a sequence that add up to a target."""

from __future__ import annotations

from typing import Iterable, Optional


def find_pair_summing_to(numbers: Iterable[int], target: int) -> Optional[list[int]]:
    """Scan once for the first pair summing to target.

    The complement is looked up before the current number is recorded, so a
    number only pairs with itself if it already appeared earlier.

    Args:
        numbers: Numbers to scan, in order.
        target: Sum to look for.

    Returns:
        [complement, number] where complement was seen before number, or
        None if no pair exists.
    """
    seen: set[int] = set()
    for num in numbers:
        complement = target - num
        if complement in seen:
            return [complement, num]
        seen.add(num)
    return None
