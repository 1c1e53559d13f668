"""Small standalone answers: comparisons, formulas and a string encoding."""

from __future__ import annotations

from string import ascii_lowercase

_MIRROR = str.maketrans(ascii_lowercase, ascii_lowercase[::-1])


def max_tastiness(a: int, b: int, c: int, d: int) -> int:
    """Best total choosing one of ``a``/``b`` and one of ``c``/``d``."""
    return max(a, b) + max(c, d)


def encode_message(text: str) -> str:
    """Swap characters in pairs, then mirror each letter (``a`` to ``z``, ``b`` to ``y``)."""
    if any(char not in ascii_lowercase for char in text):
        raise ValueError("message must contain only lowercase letters")
    chars = list(text)
    chars[0:len(chars) - 1:2], chars[1::2] = chars[1::2], chars[0:len(chars) - 1:2]
    return "".join(chars).translate(_MIRROR)


def faster_transport(x: int, y: int) -> str:
    """Compare travel times ``x`` by bike and ``y`` by car."""
    if x < y:
        return "BIKE"
    if x > y:
        return "CAR"
    return "SAME"


def battle_time(a: int, b: int, c: int) -> int:
    """Time to win a binary battle of ``a`` players, ``b`` per round and ``c`` between rounds."""
    rounds = abs(a).bit_length() - 1
    return rounds * b + (rounds - 1) * c


def min_attacks(h: int, x: int, y: int) -> int:
    """Fewest attacks to remove ``h`` health with a repeatable ``x`` hit and a single ``y`` hit."""
    if x >= y:
        return -(-h // x)
    return -(-(h - y) // x) + 1


def max_rental_months(x: int, y: int) -> int:
    """Most months renting at ``x`` a month stays cheaper than buying at ``y``."""
    if x >= y:
        return 0
    return (y - 1) // x


def nationality(gestures: str) -> str:
    """Judge nationality from a string of head gestures."""
    if "I" in gestures:
        return "INDIAN"
    if "Y" in gestures:
        return "NOT INDIAN"
    return "NOT SURE"