"""Verdicts that follow from comparing a few scores or counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

QUALIFYING_POINTS = 12
MAJORITY_VOTES = 50
BLACKJACK_TARGET = 21
CARD_MIN = 1
CARD_MAX = 10
NIBBLE_BITS = 4


def cwc_qualifies(score: int) -> bool:
    """Return True if a team's score is enough to qualify (12 points or more)."""
    return score >= QUALIFYING_POINTS


def exam_winner(dragon: Sequence[int], sloth: Sequence[int]) -> str:
    """Rank two students by their (DSA, TOC, DM) marks.

    The higher total wins; ties are broken by DSA, then by TOC.
    Returns ``"Dragon"``, ``"Sloth"`` or ``"Tie"``.
    """
    dragon_dsa, dragon_toc, dragon_dm = dragon
    sloth_dsa, sloth_toc, sloth_dm = sloth
    dragon_key = (dragon_dsa + dragon_toc + dragon_dm, dragon_dsa, dragon_toc)
    sloth_key = (sloth_dsa + sloth_toc + sloth_dm, sloth_dsa, sloth_toc)
    if dragon_key > sloth_key:
        return "Dragon"
    if sloth_key > dragon_key:
        return "Sloth"
    return "Tie"


def election_winner(votes_a: int, votes_b: int, votes_c: int) -> str:
    """Return the party holding a strict majority of the votes, or ``"NOTA"``."""
    for party, votes in (("A", votes_a), ("B", votes_b), ("C", votes_c)):
        if votes > MAJORITY_VOTES:
            return party
    return "NOTA"


def chef_score_possible(n: int, x: int, y: int) -> bool:
    """Tell whether a score ``y`` can be reached with at most ``n`` problems of ``x`` points."""
    return y % x == 0 and y // x <= n


def chef_games_verdict(results: Iterable[int]) -> str:
    """Return ``"IN"`` if every result is zero, otherwise ``"OUT"``."""
    still_in = all(result == 0 for result in results)
    if still_in:
        return "IN"
    return "OUT"


def nibble_verdict(bits: int) -> str:
    """Return ``"Good"`` when the memory size in bits is a whole number of nibbles."""
    leftover = bits % NIBBLE_BITS
    if leftover == 0:
        return "Good"
    return "Not Good"


def blackjack_third_card(a: int, b: int) -> int | None:
    """Return the third card that makes the hand total 21, or None if no card can."""
    needed = BLACKJACK_TARGET - (a + b)
    if CARD_MIN <= needed <= CARD_MAX:
        return needed
    return None


def qualify_verdict(x: int, a: int, b: int) -> str:
    """Judge qualification: ``a`` one-point and ``b`` two-point results against cutoff ``x``."""
    points = a + 2 * b
    if points >= x:
        return "Qualify"
    return "NotQualify"


def pass_or_fail(n: int, x: int, p: int) -> str:
    """Score ``x`` correct answers of ``n`` (+3 each, -1 per wrong one) against pass mark ``p``."""
    score = 3 * x - (n - x)
    return "PASS" if score >= p else "FAIL"