import pytest

from dailysolve.misc import (
    battle_time,
    encode_message,
    faster_transport,
    max_rental_months,
    max_tastiness,
    min_attacks,
    nationality,
)


@pytest.mark.parametrize("a,b,c,d", [(1, 2, 3, 4), (9, 1, 1, 9), (5, 5, 5, 5), (0, 7, 2, 0)])
def test_max_tastiness_is_best_combination(a, b, c, d):
    combos = [a + c, a + d, b + c, b + d]
    result = max_tastiness(a, b, c, d)
    assert result in combos
    assert all(result >= combo for combo in combos)


def test_encode_single_letter():
    assert encode_message("a") == "z"


def test_encode_pair():
    assert encode_message("ab") == "yz"


@pytest.mark.parametrize("text", ["", "a", "abc", "sharechat", "zyxwvu"])
def test_encode_round_trip(text):
    encoded = encode_message(text)
    assert len(encoded) == len(text)
    assert encode_message(encoded) == text


def test_encode_rejects_other_characters():
    with pytest.raises(ValueError):
        encode_message("Hello")


@pytest.mark.parametrize("x,y,expected", [(1, 2, "BIKE"), (3, 2, "CAR"), (4, 4, "SAME")])
def test_faster_transport(x, y, expected):
    assert faster_transport(x, y) == expected


@pytest.mark.parametrize("b,c", [(3, 4), (10, 1), (7, 7)])
def test_battle_time_single_player(b, c):
    assert battle_time(1, b, c) == -c


@pytest.mark.parametrize("b,c", [(3, 4), (10, 1)])
def test_battle_time_two_players(b, c):
    assert battle_time(2, b, c) == b


@pytest.mark.parametrize("b,c", [(3, 4), (10, 1)])
def test_battle_time_same_rounds_in_power_range(b, c):
    assert battle_time(4, b, c) == battle_time(7, b, c) == 2 * b + c


@pytest.mark.parametrize("x,k,y", [(5, 2, 1), (3, 4, 3), (10, 1, 2)])
def test_min_attacks_exact_multiples(x, k, y):
    assert min_attacks(x * k, x, y) == k


@pytest.mark.parametrize("x,y", [(2, 5), (1, 3), (4, 9)])
def test_min_attacks_special_hit_alone(x, y):
    assert min_attacks(y, x, y) == 1


@pytest.mark.parametrize("x,y", [(2, 5), (5, 2), (3, 3)])
def test_min_attacks_monotonic_in_health(x, y):
    results = [min_attacks(h, x, y) for h in range(y, y + 20)]
    assert results == sorted(results)


@pytest.mark.parametrize("x,y", [(5, 5), (9, 2)])
def test_rental_not_worth_it(x, y):
    assert max_rental_months(x, y) == 0


@pytest.mark.parametrize("y", [2, 10, 37])
def test_rental_unit_cost(y):
    assert max_rental_months(1, y) == y - 1


@pytest.mark.parametrize("x,y", [(3, 10), (4, 12), (7, 50)])
def test_rental_months_is_largest_cheaper(x, y):
    months = max_rental_months(x, y)
    assert months * x < y
    assert (months + 1) * x >= y


@pytest.mark.parametrize(
    "gestures,expected",
    [("NYNI", "INDIAN"), ("NNY", "NOT INDIAN"), ("NNNN", "NOT SURE"), ("IY", "INDIAN")],
)
def test_nationality(gestures, expected):
    assert nationality(gestures) == expected