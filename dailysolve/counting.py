"""Counting and simple arithmetic answers over numbers and collections."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def min_masks(n: int, a: int) -> int:
    """Fewest masks needed among ``n`` people of whom ``a`` are infected."""
    return min(a, n - a)


def can_split_odd_product(values: Iterable[int]) -> bool:
    """Tell whether the values split into two groups whose sums are both odd."""
    items = list(values)
    return sum(items) % 2 == 0 and any(value % 2 for value in items)


def min_removals_to_equal(values: Iterable[int]) -> int:
    """Fewest removals that leave only equal values."""
    counts = Counter(values)
    if not counts:
        return 0
    (_, most), = counts.most_common(1)
    return sum(counts.values()) - most


def can_pair_animals(animals: Iterable[int]) -> bool:
    """Tell whether every animal type appears an even number of times."""
    return all(count % 2 == 0 for count in Counter(animals).values())


def count_recent_contests(contests: Iterable[str]) -> tuple[int, int]:
    """Count the ``START38`` and ``LTIME108`` entries, in that order."""
    counts = Counter(contests)
    return counts["START38"], counts["LTIME108"]


def count_tuesdays(n: int) -> int:
    """Number of Tuesdays in the first ``n`` days of a month that starts on Monday."""
    if n < 2:
        return 0
    return 1 + (n - 2) // 7


def max_baths(x: int, y: int) -> int:
    """How many baths of ``2 * y`` litres fit in ``x`` litres of water."""
    return x // (2 * y)


def sale_price(a: int, b: int, c: int) -> int:
    """Price of three items when the cheapest one is free."""
    return a + b + c - min(a, b, c)


def presents_paid(n: int) -> int:
    """Items paid for when every fifth one is free."""
    return n - n // 5


def min_packets(x: int, y: int, r: int) -> int:
    """Packets of ``y`` sticks needed for ``x`` sticks plus one per 30 minutes of ``r``."""
    sticks = x + r // 30
    return -(-sticks // y)