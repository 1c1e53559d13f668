"""Named problems that read whitespace-separated input and produce one answer per line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from dailysolve.counting import (
    can_pair_animals,
    can_split_odd_product,
    count_recent_contests,
    count_tuesdays,
    max_baths,
    min_masks,
    min_packets,
    min_removals_to_equal,
    presents_paid,
    sale_price,
)
from dailysolve.misc import (
    battle_time,
    encode_message,
    faster_transport,
    max_rental_months,
    max_tastiness,
    min_attacks,
    nationality,
)
from dailysolve.scores import (
    blackjack_third_card,
    chef_games_verdict,
    chef_score_possible,
    cwc_qualifies,
    election_winner,
    exam_winner,
    nibble_verdict,
    pass_or_fail,
    qualify_verdict,
)
from dailysolve.sequences import (
    atm_outcomes,
    can_candidate_win,
    coin_position,
    is_pseudo_sorted,
    max_distance,
    max_occupancy,
    max_people_in_office,
    min_inferno_time,
    polynomial_degree,
)


class _Tokens:
    """Reads whitespace-separated tokens one at a time."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


@dataclass(frozen=True)
class Problem:
    """A problem code, a one-line summary and the handler that answers its input."""

    code: str
    summary: str
    handler: Callable[[_Tokens], Iterator[str]]


_REGISTRY: dict[str, Problem] = {}
PROBLEMS = MappingProxyType(_REGISTRY)


def _problem(code: str, summary: str, *, multi: bool = True):
    """Register a per-case solver; multi-case problems start with a case count."""

    def decorate(solve: Callable[[_Tokens], str | None]):
        def handler(tokens: _Tokens) -> Iterator[str]:
            count = tokens.number() if multi else 1
            for _ in range(count):
                line = solve(tokens)
                if line is not None:
                    yield line

        _REGISTRY[code] = Problem(code, summary, handler)
        return solve

    return decorate


def _yes_no(flag: bool) -> str:
    if flag:
        return "YES"
    return "NO"


@_problem("CWC23QUALIF", "Does a team score of 12 or more qualify?", multi=False)
def _cwc23qualif(tokens: _Tokens) -> str:
    score = tokens.number()
    if cwc_qualifies(score):
        return "Yes"
    return "No"


@_problem("EXAMTIME", "Rank Dragon and Sloth by total, then DSA, then TOC.")
def _examtime(tokens: _Tokens) -> str:
    dragon = tokens.numbers(3)
    sloth = tokens.numbers(3)
    return exam_winner(dragon, sloth)


@_problem("REMOVEBAD", "Fewest removals so all array elements are equal.")
def _removebad(tokens: _Tokens) -> str:
    n = tokens.number()
    return str(min_removals_to_equal(tokens.numbers(n)))


@_problem("ELECTIONS", "Which party holds a strict majority, if any.")
def _elections(tokens: _Tokens) -> str:
    return election_winner(*tokens.numbers(3))


@_problem("HOSTELROOM", "Most people in a room over a series of arrivals and departures.")
def _hostelroom(tokens: _Tokens) -> str:
    n, initial = tokens.numbers(2)
    return str(max_occupancy(initial, tokens.numbers(n)))


@_problem("ATM2", "Which withdrawals an ATM can serve, in order.")
def _atm2(tokens: _Tokens) -> str:
    n, balance = tokens.numbers(2)
    return atm_outcomes(balance, tokens.numbers(n))


@_problem("PSEUDOSORT", "Is the array sorted after at most one adjacent swap?")
def _pseudosort(tokens: _Tokens) -> str:
    n = tokens.number()
    return _yes_no(is_pseudo_sorted(tokens.numbers(n)))


@_problem("WATERCOOLER2", "Most months renting stays cheaper than buying.")
def _watercooler2(tokens: _Tokens) -> str:
    return str(max_rental_months(*tokens.numbers(2)))


@_problem("MASKPOL", "Fewest masks needed among infected and healthy people.")
def _maskpol(tokens: _Tokens) -> str:
    return str(min_masks(*tokens.numbers(2)))


@_problem("COUNTP", "Can the array split into two parts with odd sums?")
def _countp(tokens: _Tokens) -> str:
    n = tokens.number()
    return _yes_no(can_split_odd_product(tokens.numbers(n)))


@_problem("HEADBOB", "Judge nationality from head gestures.")
def _headbob(tokens: _Tokens) -> str:
    tokens.number()
    return nationality(tokens.word())


@_problem("REMOVECARDS", "Fewest cards to remove so all remaining cards match.")
def _removecards(tokens: _Tokens) -> str:
    n = tokens.number()
    return str(min_removals_to_equal(tokens.numbers(n)))


@_problem("MAXTASTE", "Best tastiness choosing one from each of two pairs.")
def _maxtaste(tokens: _Tokens) -> str:
    return str(max_tastiness(*tokens.numbers(4)))


@_problem("PETSTORE", "Can the animals be split into two equal halves by type?")
def _petstore(tokens: _Tokens) -> str:
    n = tokens.number()
    return _yes_no(can_pair_animals(tokens.numbers(n)))


@_problem("ENCMSG", "Encode a message by swapping pairs and mirroring letters.")
def _encmsg(tokens: _Tokens) -> str:
    tokens.number()
    return encode_message(tokens.word())


@_problem("TRAVELFAST", "Is the bike or the car faster?")
def _travelfast(tokens: _Tokens) -> str:
    return faster_transport(*tokens.numbers(2))


@_problem("BIN_BAT", "Time to finish a knockout battle.")
def _bin_bat(tokens: _Tokens) -> str:
    return str(battle_time(*tokens.numbers(3)))


@_problem("CHEFSCORE", "Can the score be reached with the given problems?")
def _chefscore(tokens: _Tokens) -> str:
    return _yes_no(chef_score_possible(*tokens.numbers(3)))


@_problem("CHEFGAMES", "Is Chef still in after four rounds?")
def _chefgames(tokens: _Tokens) -> str:
    return chef_games_verdict(tokens.numbers(4))


@_problem("SINGLEUSE", "Fewest attacks with a normal attack and one single-use attack.")
def _singleuse(tokens: _Tokens) -> str:
    return str(min_attacks(*tokens.numbers(3)))


@_problem("DPOLY", "Degree of a polynomial from its coefficients.")
def _dpoly(tokens: _Tokens) -> str | None:
    n = tokens.number()
    degree = polynomial_degree(tokens.numbers(n))
    return None if degree is None else str(degree)


@_problem("RECENTCONT", "Count START38 and LTIME108 entries.")
def _recentcont(tokens: _Tokens) -> str:
    n = tokens.number()
    start, lunchtime = count_recent_contests(tokens.word() for _ in range(n))
    return f"{start} {lunchtime}"


@_problem("CHEAT", "Tuesdays in the first N days of a month starting on Monday.")
def _cheat(tokens: _Tokens) -> str:
    return str(count_tuesdays(tokens.number()))


@_problem("NIBBLE", "Is the memory size a whole number of nibbles?")
def _nibble(tokens: _Tokens) -> str:
    return nibble_verdict(tokens.number())


@_problem("BLACKJACK", "Third card that brings the hand to 21, or -1.")
def _blackjack(tokens: _Tokens) -> str:
    card = blackjack_third_card(*tokens.numbers(2))
    return str(-1 if card is None else card)


@_problem("QUALIFY", "Does Chef reach the qualifying points?")
def _qualify(tokens: _Tokens) -> str:
    return qualify_verdict(*tokens.numbers(3))


@_problem("MAGICHF", "Where the coin ends up after a series of swaps.")
def _magichf(tokens: _Tokens) -> str:
    _, start, count = tokens.numbers(3)
    swaps = [(tokens.number(), tokens.number()) for _ in range(count)]
    return str(coin_position(start, swaps))


@_problem("FARAWAY", "Largest total distance to freely chosen values in 1..M.")
def _faraway(tokens: _Tokens) -> str:
    n, m = tokens.numbers(2)
    return str(max_distance(m, tokens.numbers(n)))


@_problem("INFERNO", "Fewest seconds to defeat all enemies with one of two modes.")
def _inferno(tokens: _Tokens) -> str:
    n, x = tokens.numbers(2)
    return str(min_inferno_time(x, tokens.numbers(n)))


@_problem("USELEC", "Can candidate A win a majority of states with extra votes?")
def _uselec(tokens: _Tokens) -> str:
    n, extra = tokens.numbers(2)
    a_votes = tokens.numbers(n)
    b_votes = tokens.numbers(n)
    return _yes_no(can_candidate_win(extra, a_votes, b_votes))


@_problem("BATH", "How many baths the water allows.")
def _bath(tokens: _Tokens) -> str:
    return str(max_baths(*tokens.numbers(2)))


@_problem("SALE", "Price of three items when the cheapest is free.")
def _sale(tokens: _Tokens) -> str:
    return str(sale_price(*tokens.numbers(3)))


@_problem("PASSORFAIL", "Pass or fail with +3 per right and -1 per wrong answer.")
def _passorfail(tokens: _Tokens) -> str:
    return pass_or_fail(*tokens.numbers(3))


@_problem("CARDSWIPE", "Most people in the office at once.")
def _cardswipe(tokens: _Tokens) -> str:
    n = tokens.number()
    return str(max_people_in_office(tokens.numbers(n)))


@_problem("PRESENTS", "Items paid for when every fifth one is free.")
def _presents(tokens: _Tokens) -> str:
    return str(presents_paid(tokens.number()))


@_problem("MOZZ", "Packets of sticks needed for a session.")
def _mozz(tokens: _Tokens) -> str:
    return str(min_packets(*tokens.numbers(3)))


def problem_codes() -> tuple[str, ...]:
    """All known problem codes, sorted."""
    return tuple(sorted(_REGISTRY))


def run(code: str, text: str) -> str:
    """Answer the input ``text`` for problem ``code``; one line per answer."""
    try:
        problem = _REGISTRY[code]
    except KeyError:
        raise ValueError(f"unknown problem code: {code!r}") from None
    return "".join(f"{line}\n" for line in problem.handler(_Tokens(text)))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answers."""
    parser = argparse.ArgumentParser(
        prog="dailysolve",
        description="Solve a named problem, reading its input from standard input.",
    )
    parser.add_argument("code", choices=problem_codes(), metavar="CODE", help="problem code")
    args = parser.parse_args(argv)
    try:
        output = run(args.code, sys.stdin.read())
    except ValueError as error:
        print(f"dailysolve: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0