"""
Counters with lexical exceptions.

Some quantities have readings that no composition rule produces:
二十歳 is はたち, 一日 (day of the month) is ついたち, 二人 is ふたり.
These readings are looked up first; regular composition is only the
fallback.
"""

from types import MappingProxyType

from josuushi.digit_ending import digit_ending_counter_to_kana
from josuushi.errors import DecimalNotAllowed
from josuushi.numbers import Number, number_to_kana, numeric_text, parse_magnitude

AGE_SUFFIX = "さい"
DATE_SUFFIX = "にち"
PEOPLE_COUNTER = "人"

AGE_READINGS = MappingProxyType({
    20: "はたち",
})

# Days of the month read with native numerals
DATE_READINGS = MappingProxyType({
    1: "ついたち",
    2: "ふつか",
    3: "みっか",
    4: "よっか",
    5: "いつか",
    6: "むいか",
    7: "なのか",
    8: "ようか",
    9: "ここのか",
    10: "とおか",
    14: "じゅうよっか",
    20: "はつか",
    24: "にじゅうよっか",
})

PEOPLE_READINGS = MappingProxyType({
    1: "ひとり",
    2: "ふたり",
})


def age_counter_to_kana(value: Number, counter: str = "歳") -> str:
    """
    Read an age (歳/才).

    The exception check runs on the normalized value, so "020" and "-20"
    are both はたち. Every other value renders the original input, sign
    and leading zeros included, through number_to_kana.

    Raises:
        DecimalNotAllowed: If the textual form contains a decimal point.
        InvalidNumber: If the value is not a number.
    """
    text = numeric_text(value)
    if "." in text:
        raise DecimalNotAllowed(text, counter)

    normalized = int(parse_magnitude(text).integer)
    if normalized in AGE_READINGS:
        return AGE_READINGS[normalized]

    return number_to_kana(value) + AGE_SUFFIX


def date_counter_to_kana(value: Number) -> str:
    """
    Read a day count or day of the month (日).

    Days with a native reading (1-10, 14, 20, 24) come from DATE_READINGS.
    Anything else, including zero, negative and fractional values, is
    read as number + にち.

    Example:
        >>> date_counter_to_kana(20), date_counter_to_kana(21)
        ('はつか', 'にじゅういちにち')
    """
    magnitude = parse_magnitude(value)
    if not magnitude.negative and not magnitude.has_fraction:
        reading = DATE_READINGS.get(int(magnitude.integer))
        if reading is not None:
            return reading

    return number_to_kana(value) + DATE_SUFFIX


def people_counter_to_kana(value: Number) -> str:
    """Read a number of people (人): ひとり, ふたり, then regular にん."""
    magnitude = parse_magnitude(value)
    if not magnitude.negative and not magnitude.has_fraction:
        reading = PEOPLE_READINGS.get(int(magnitude.integer))
        if reading is not None:
            return reading

    return digit_ending_counter_to_kana(PEOPLE_COUNTER, value)
