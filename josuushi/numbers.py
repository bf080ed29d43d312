"""
Japanese number readings for josuushi.

Converts integers, decimals and numeric text to their kana reading,
grouping digits by ten-thousands the way Japanese counts
(まん, おく, ちょう, ...).
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Union

from josuushi.characters import geminate
from josuushi.errors import InvalidNumber

Number = Union[int, float, Decimal, str]

# ============================================================================
# Digit Reading Tables
# ============================================================================

# Digit to kana reading
DIGIT_TO_KANA = MappingProxyType({
    0: "れい",
    1: "いち",
    2: "に",
    3: "さん",
    4: "よん",
    5: "ご",
    6: "ろく",
    7: "なな",
    8: "はち",
    9: "きゅう",
})

# Power within a four-digit group to kana reading
POWER_TO_KANA = MappingProxyType({
    1: "じゅう",
    2: "ひゃく",
    3: "せん",
})

# Contracted forms at hundreds and thousands
SPECIAL_MORPHEMES = {
    (2, 3): "さんびゃく",
    (2, 6): "ろっぴゃく",
    (2, 8): "はっぴゃく",
    (3, 3): "さんぜん",
    (3, 8): "はっせん",
}


def _build_place_morphemes():
    table = {0: dict(DIGIT_TO_KANA)}
    del table[0][0]
    for place, power in POWER_TO_KANA.items():
        row = {}
        for digit in range(1, 10):
            if (place, digit) in SPECIAL_MORPHEMES:
                row[digit] = SPECIAL_MORPHEMES[(place, digit)]
            elif digit == 1:
                # 十, 百, 千 are read without いち
                row[digit] = power
            else:
                row[digit] = DIGIT_TO_KANA[digit] + power
        table[place] = row
    return MappingProxyType({p: MappingProxyType(row) for p, row in table.items()})


# place (0 = ones .. 3 = thousands) -> digit (1-9) -> kana
PLACE_MORPHEMES = _build_place_morphemes()

# Ten-thousand groups: group index -> kana (万 = 1, 億 = 2, 兆 = 3, ...)
GROUP_POWERS = MappingProxyType({
    1: "まん",
    2: "おく",
    3: "ちょう",
    4: "けい",
    5: "がい",
    6: "じょ",
    7: "じょう",
    8: "こう",
    9: "かん",
    10: "せい",
    11: "さい",
    12: "ごく",
})

# Group index -> numeral endings that geminate before the group power
# (いっちょう, はっちょう, じゅっちょう, ろっけい, ひゃっけい)
GROUP_SANDHI = MappingProxyType({
    3: frozenset({1, 8, 10}),
    4: frozenset({1, 6, 8, 10, 100}),
})

DECIMAL_POINT = "てん"

MAX_GROUPS = len(GROUP_POWERS) + 1

_NUMERIC_PATTERN = re.compile(r"^[+-]?\d+(\.\d+)?$", re.ASCII)

# Full-width digits and signs as typed with a Japanese IME
_FULL_WIDTH = str.maketrans("０１２３４５６７８９＋－．", "0123456789+-.")


# ============================================================================
# Magnitude Parsing
# ============================================================================

@dataclass(frozen=True)
class Magnitude:
    """
    A parsed quantity.

    ``integer`` is the canonical digit string (no leading zeros unless the
    integer part is exactly zero) and ``fraction`` holds the fractional
    digits with trailing zeros removed.
    """
    negative: bool
    integer: str
    fraction: str = ""

    @property
    def is_zero(self) -> bool:
        return self.integer == "0" and not self.fraction

    @property
    def has_fraction(self) -> bool:
        return bool(self.fraction)


def numeric_text(value: Number) -> str:
    """
    Get the textual form of a numeric value.

    Integral floats are written without a decimal point, so ``5.0`` gives
    ``"5"`` and ``5.5`` gives ``"5.5"``.

    Raises:
        InvalidNumber: If the value is not a number or numeric text.
    """
    if isinstance(value, bool):
        raise InvalidNumber(str(value), "booleans are not numbers")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidNumber(str(value), "must be finite")
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidNumber(str(value), "must be finite")
        return format(value, "f")
    if isinstance(value, str):
        return value.translate(_FULL_WIDTH).strip()
    raise InvalidNumber(repr(value), "must be a number or numeric string")


def parse_magnitude(value: Number) -> Magnitude:
    """
    Parse a value into a canonical :class:`Magnitude`.

    Example:
        >>> parse_magnitude("-007.50")
        Magnitude(negative=True, integer='7', fraction='5')

    Raises:
        InvalidNumber: If the value is not a valid decimal number.
    """
    text = numeric_text(value)
    if not _NUMERIC_PATTERN.match(text):
        raise InvalidNumber(text, "invalid numeric format")

    negative = text.startswith("-")
    unsigned = text.lstrip("+-")
    integer, _, fraction = unsigned.partition(".")

    return Magnitude(
        negative=negative,
        integer=integer.lstrip("0") or "0",
        fraction=fraction.rstrip("0"),
    )


def last_digit(value: Number) -> int:
    """Get the ones digit of the integer part of a value."""
    return int(parse_magnitude(value).integer[-1])


def numeral_ending(n: int) -> int:
    """
    Get the unit that ends the reading of a non-negative integer.

    This is the ones digit when it is not zero. Otherwise it is the power
    of ten whose morpheme ends the reading: 10, 100 or 1000 inside a
    group, or the group power (10**4, 10**8, ...) for larger numbers.
    Zero gives 0.

    Example:
        >>> numeral_ending(21), numeral_ending(300), numeral_ending(150000)
        (1, 100, 10000)
    """
    if n == 0:
        return 0
    exponent = 0
    while n % 10 == 0:
        n //= 10
        exponent += 1
    if exponent == 0:
        return n % 10
    if exponent >= 4:
        exponent -= exponent % 4
    return 10 ** exponent


# ============================================================================
# Number to Kana Conversion
# ============================================================================

def group_to_kana(group: int) -> str:
    """
    Convert a four-digit group (0-9999) to kana.

    Example:
        >>> group_to_kana(3608)
        'さんぜんろっぴゃくはち'
    """
    result = ""
    for place in (3, 2, 1, 0):
        digit = group // 10 ** place % 10
        if digit:
            result += PLACE_MORPHEMES[place][digit]
    return result


def split_groups(integer: str):
    """Split a digit string into four-digit groups, most significant first."""
    groups = []
    while integer:
        groups.append(int(integer[-4:]))
        integer = integer[:-4]
    groups.reverse()
    return groups


def integer_to_kana(integer: str) -> str:
    """Read a canonical digit string."""
    if integer == "0":
        return DIGIT_TO_KANA[0]

    groups = split_groups(integer)
    if len(groups) > MAX_GROUPS:
        raise InvalidNumber(integer, "too large to read")

    result = ""
    for i, group in enumerate(groups):
        if not group:
            continue
        index = len(groups) - i - 1
        kana = group_to_kana(group)
        if index:
            if numeral_ending(group) in GROUP_SANDHI.get(index, ()):
                kana = geminate(kana)
            kana += GROUP_POWERS[index]
        result += kana
    return result


def fraction_to_kana(fraction: str) -> str:
    """Read fractional digits one by one."""
    return "".join(DIGIT_TO_KANA[int(d)] for d in fraction)


def magnitude_to_kana(magnitude: Magnitude) -> str:
    """Read a parsed magnitude. The sign is not read."""
    result = integer_to_kana(magnitude.integer)
    if magnitude.fraction:
        result += DECIMAL_POINT + fraction_to_kana(magnitude.fraction)
    return result


def number_to_kana(value: Number) -> str:
    """
    Convert a number to its kana reading.

    Args:
        value: int, float, Decimal or numeric text. A leading sign is
            accepted and dropped; leading zeros are ignored.

    Returns:
        Kana reading of the number.

    Raises:
        InvalidNumber: If the value is not a valid number.

    Example:
        >>> number_to_kana(123)
        'ひゃくにじゅうさん'
        >>> number_to_kana("3.14")
        'さんてんいちよん'
        >>> number_to_kana(10 ** 12)
        'いっちょう'
    """
    return magnitude_to_kana(parse_magnitude(value))
