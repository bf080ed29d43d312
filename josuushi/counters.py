"""
Counter dispatch for josuushi.

Resolves a counter suffix to the handler that reads it:

- 歳, 才 -> age (はたち for 20)
- 日 -> day of the month / day count (ついたち, はつか, ...)
- 人 -> people (ひとり, ふたり)
- anything in DIGIT_ENDING_COUNTERS -> numeral + counter with euphony rules

Counter strings are matched exactly; nothing is trimmed or folded.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import List

from josuushi.characters import as_katakana
from josuushi.digit_ending import DIGIT_ENDING_COUNTERS, digit_ending_counter_to_kana
from josuushi.errors import UnsupportedCounter
from josuushi.irregular import age_counter_to_kana, date_counter_to_kana, people_counter_to_kana
from josuushi.models import CounterReading
from josuushi.numbers import Number, numeric_text

logger = logging.getLogger(__name__)


class CounterCategory(Enum):
    """Kind of handler a counter is read with."""
    AGE = "age"
    DATE = "date"
    PEOPLE = "people"
    DIGIT_ENDING = "digit_ending"


# Counters with their own handler; checked before the digit-ending registry
SPECIAL_COUNTERS = MappingProxyType({
    "歳": CounterCategory.AGE,
    "才": CounterCategory.AGE,
    "日": CounterCategory.DATE,
    "人": CounterCategory.PEOPLE,
})


def resolve_counter(counter: str) -> CounterCategory:
    """
    Get the category a counter is read with.

    Raises:
        UnsupportedCounter: If no handler exists for the counter.
    """
    category = SPECIAL_COUNTERS.get(counter)
    if category is not None:
        return category
    if counter in DIGIT_ENDING_COUNTERS:
        return CounterCategory.DIGIT_ENDING
    raise UnsupportedCounter(counter)


def is_supported(counter: str) -> bool:
    """Check if a counter can be read."""
    return counter in SPECIAL_COUNTERS or counter in DIGIT_ENDING_COUNTERS


def supported_counters() -> List[str]:
    """Get all supported counters, special counters first."""
    counters = list(SPECIAL_COUNTERS)
    counters.extend(c for c in DIGIT_ENDING_COUNTERS if c not in SPECIAL_COUNTERS)
    return counters


def counter_to_kana(counter: str, value: Number) -> str:
    """
    Read a quantity with a counter.

    Args:
        counter: Counter suffix, e.g. "本", "歳", "日".
        value: The quantity, as a number or numeric text.

    Returns:
        Hiragana reading of the whole expression.

    Raises:
        UnsupportedCounter: If the counter has no handler.
        DecimalNotAllowed: If the counter only counts whole things.
        NegativeNotAllowed: If the counter needs a non-negative quantity.
        InvalidNumber: If the value is not a number.

    Example:
        >>> counter_to_kana("本", 3)
        'さんぼん'
        >>> counter_to_kana("歳", 20)
        'はたち'
    """
    category = resolve_counter(counter)
    logger.debug("Reading %r with counter %r as %s", value, counter, category.value)

    if category is CounterCategory.AGE:
        return age_counter_to_kana(value, counter)
    if category is CounterCategory.DATE:
        return date_counter_to_kana(value)
    if category is CounterCategory.PEOPLE:
        return people_counter_to_kana(value)
    return digit_ending_counter_to_kana(counter, value)


def read_counter(counter: str, value: Number) -> CounterReading:
    """
    Read a quantity with a counter and return the full result.

    Example:
        >>> read_counter("匹", 3).katakana
        'サンビキ'
    """
    category = resolve_counter(counter)
    kana = counter_to_kana(counter, value)

    counter_class = None
    if category is CounterCategory.DIGIT_ENDING:
        counter_class = DIGIT_ENDING_COUNTERS[counter].counter_class.value

    return CounterReading(
        counter=counter,
        category=category.value,
        counter_class=counter_class,
        quantity=numeric_text(value),
        kana=kana,
        katakana=as_katakana(kana),
    )
