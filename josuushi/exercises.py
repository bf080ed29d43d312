"""
Exercise generation and answer checking.

A template gives a sentence with ``<ans>`` placeholders and the range
the quantity is drawn from. Generating an exercise picks a quantity,
fills the sentence and computes the expected reading; checking an
answer compares the learner's kana against it.
"""

import logging
import random
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import Optional, Union

from josuushi.characters import normalize_kana
from josuushi.counters import counter_to_kana
from josuushi.errors import InvalidExercise
from josuushi.models import ANSWER_PLACEHOLDER, BLANK, Exercise, ExerciseTemplate

logger = logging.getLogger(__name__)


def draw_quantity(template: ExerciseTemplate, rng: Optional[random.Random] = None) -> str:
    """
    Draw a quantity within the template range.

    The quantity is a multiple of 10**-decimal_points, written with exactly
    ``decimal_points`` fractional digits.

    Raises:
        InvalidExercise: If no such quantity lies in the range.
    """
    rng = rng or random.Random()
    scale = 10 ** template.decimal_points

    low = (Decimal(str(template.min_count)) * scale).to_integral_value(rounding=ROUND_CEILING)
    high = (Decimal(str(template.max_count)) * scale).to_integral_value(rounding=ROUND_FLOOR)
    if low > high:
        raise InvalidExercise(
            f"No quantity with {template.decimal_points} decimal places between "
            f"{template.min_count} and {template.max_count}"
        )

    units = rng.randint(int(low), int(high))
    quantity = Decimal(units).scaleb(-template.decimal_points)
    return f"{quantity:.{template.decimal_points}f}"


def generate_exercise(template: ExerciseTemplate, rng: Optional[random.Random] = None) -> Exercise:
    """
    Create a concrete exercise from a template.

    Args:
        template: The exercise template.
        rng: Random generator, for reproducible exercises.

    Returns:
        Exercise with the expected hiragana answer.

    Raises:
        InvalidExercise: If the range holds no quantity.
        UnsupportedCounter: If the template counter cannot be read.
        DecimalNotAllowed: If the template asks decimals of a whole-number counter.
    """
    quantity = draw_quantity(template, rng)
    answer = counter_to_kana(template.counter, quantity)
    prompt = quantity + template.counter

    logger.debug("Generated exercise %s -> %s", prompt, answer)

    return Exercise(
        counter=template.counter,
        quantity=quantity,
        prompt=prompt,
        question=template.sentence.replace(ANSWER_PLACEHOLDER, BLANK),
        display=template.sentence.replace(ANSWER_PLACEHOLDER, prompt),
        answer=answer,
    )


def check_answer(expected: Union[Exercise, str], answer: str) -> bool:
    """
    Check a learner's answer against the expected reading.

    Katakana, half-width kana and whitespace are accepted:
    "サン ボン" matches "さんぼん".
    """
    if isinstance(expected, Exercise):
        expected = expected.answer
    given = normalize_kana(answer)
    return bool(given) and given == normalize_kana(expected)
