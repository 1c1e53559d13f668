import pytest

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


@pytest.mark.parametrize("score", [12, 13, 20])
def test_cwc_qualifies_at_or_above_twelve(score):
    assert cwc_qualifies(score)


@pytest.mark.parametrize("score", [0, 5, 11])
def test_cwc_does_not_qualify_below_twelve(score):
    assert not cwc_qualifies(score)


def test_exam_winner_by_total():
    assert exam_winner((50, 50, 50), (40, 40, 40)) == "Dragon"
    assert exam_winner((10, 10, 10), (40, 40, 40)) == "Sloth"


def test_exam_winner_tie_broken_by_dsa():
    assert exam_winner((10, 20, 30), (30, 20, 10)) == "Sloth"


def test_exam_winner_tie_broken_by_toc():
    assert exam_winner((10, 30, 20), (10, 20, 30)) == "Dragon"


def test_exam_winner_full_tie():
    assert exam_winner((10, 20, 30), (10, 20, 30)) == "Tie"


@pytest.mark.parametrize(
    "dragon, sloth",
    [((1, 2, 3), (3, 2, 1)), ((5, 5, 5), (4, 6, 5)), ((9, 0, 0), (0, 0, 9))],
)
def test_exam_winner_is_symmetric(dragon, sloth):
    swap = {"Dragon": "Sloth", "Sloth": "Dragon", "Tie": "Tie"}
    assert exam_winner(sloth, dragon) == swap[exam_winner(dragon, sloth)]


def test_election_winner_majorities():
    assert election_winner(51, 20, 29) == "A"
    assert election_winner(20, 51, 29) == "B"
    assert election_winner(20, 29, 51) == "C"


def test_election_without_strict_majority():
    assert election_winner(50, 25, 25) == "NOTA"
    assert election_winner(34, 33, 33) == "NOTA"


def test_chef_score_possible():
    assert chef_score_possible(10, 3, 30)
    assert not chef_score_possible(9, 3, 30)
    assert not chef_score_possible(10, 3, 31)


def test_chef_games_verdict():
    assert chef_games_verdict((0, 0, 0, 0)) == "IN"
    assert chef_games_verdict((0, 0, 1, 0)) == "OUT"
    assert chef_games_verdict([1, 1, 1, 1]) == "OUT"


@pytest.mark.parametrize("bits", [4, 8, 100])
def test_nibble_good(bits):
    assert nibble_verdict(bits) == "Good"


@pytest.mark.parametrize("bits", [1, 7, 99])
def test_nibble_not_good(bits):
    assert nibble_verdict(bits) == "Not Good"


def test_blackjack_third_card_completes_hand():
    for a in range(1, 11):
        for b in range(1, 11):
            card = blackjack_third_card(a, b)
            if card is not None:
                assert 1 <= card <= 10
                assert a + b + card == 21


def test_blackjack_last_possible_card():
    assert blackjack_third_card(10, 1) == 10


def test_qualify_verdict():
    assert qualify_verdict(10, 2, 4) == "Qualify"
    assert qualify_verdict(10, 2, 3) == "NotQualify"


def test_pass_or_fail():
    assert pass_or_fail(5, 3, 7) == "PASS"
    assert pass_or_fail(5, 3, 8) == "FAIL"
    assert pass_or_fail(5, 5, 15) == "PASS"