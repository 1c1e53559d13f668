"""Answers that come from walking through a sequence of values or events."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def max_occupancy(initial: int, changes: Iterable[int]) -> int:
    """Largest number of people in a room that starts with ``initial`` and then changes."""
    return max(accumulate(changes, initial=initial))


def atm_outcomes(balance: int, withdrawals: Iterable[int]) -> str:
    """Serve withdrawals in order from ``balance``.

    Returns one character per request: ``"1"`` when it succeeds, ``"0"`` when it does not.
    """
    outcome = []
    for amount in withdrawals:
        if balance >= amount:
            balance -= amount
            outcome.append("1")
        else:
            outcome.append("0")
    return "".join(outcome)


def _is_sorted(values: Sequence[int]) -> bool:
    return all(left <= right for left, right in pairwise(values))


def is_pseudo_sorted(values: Iterable[int]) -> bool:
    """Tell whether the values are sorted, or become sorted after one adjacent swap."""
    items = list(values)
    violations = [
        index for index, (left, right) in enumerate(pairwise(items)) if left > right
    ]
    if not violations:
        return True
    if len(violations) > 1:
        return False
    index = violations[0]
    items[index], items[index + 1] = items[index + 1], items[index]
    return _is_sorted(items)


def polynomial_degree(coefficients: Sequence[int]) -> int | None:
    """Degree of a polynomial given by its coefficients from the constant term up.

    Returns None when every coefficient is zero.
    """
    for power in reversed(range(len(coefficients))):
        if coefficients[power] != 0:
            return power
    return None


def coin_position(start: int, swaps: Iterable[tuple[int, int]]) -> int:
    """Follow a coin under cup ``start`` through a series of cup swaps."""
    position = start
    for first, second in swaps:
        if position == first:
            position = second
        elif position == second:
            position = first
    return position


def max_distance(m: int, values: Iterable[int]) -> int:
    """Largest total distance from the values to numbers chosen freely in ``1..m``."""
    total = 0
    for value in values:
        if 2 * value <= m:
            total += m - value
        else:
            total += value - 1
    return total


def min_inferno_time(x: int, health: Sequence[int]) -> int:
    """Fewest seconds to defeat every enemy.

    Either hit all enemies for one point a second, or one enemy for ``x`` points a second.
    """
    if not health:
        raise ValueError("at least one enemy is required")
    multi_target = max(health)
    single_target = sum(-(-points // x) for points in health)
    return min(multi_target, single_target)


def can_candidate_win(
    extra_votes: int, a_votes: Sequence[int], b_votes: Sequence[int]
) -> bool:
    """Tell whether candidate A can win a majority of states with ``extra_votes`` to spend."""
    if len(a_votes) != len(b_votes):
        raise ValueError("vote lists must have the same length")
    required = len(a_votes) // 2 + 1
    wins = 0
    shortfalls = []
    for a, b in zip(a_votes, b_votes):
        if a > b:
            wins += 1
        else:
            shortfalls.append(b - a + 1)
    for needed in sorted(shortfalls):
        if wins >= required or needed > extra_votes:
            break
        extra_votes -= needed
        wins += 1
    return wins >= required


def max_people_in_office(swipes: Iterable[int]) -> int:
    """Most people inside at once, where each swipe toggles a person in or out."""
    inside: set[int] = set()
    peak = 0
    for person in swipes:
        if person in inside:
            inside.remove(person)
        else:
            inside.add(person)
        peak = max(peak, len(inside))
    return peak