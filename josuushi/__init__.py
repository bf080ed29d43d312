"""
josuushi: kana readings for Japanese counter expressions.

    >>> import josuushi
    >>> josuushi.counter_to_kana("本", 3)
    'さんぼん'
    >>> josuushi.counter_to_kana("歳", 20)
    'はたち'
    >>> josuushi.number_to_kana(1234)
    'せんにひゃくさんじゅうよん'
"""

__version__ = "0.1.0"

from josuushi.counters import (
    CounterCategory,
    counter_to_kana,
    is_supported,
    read_counter,
    resolve_counter,
    supported_counters,
)
from josuushi.digit_ending import DIGIT_ENDING_COUNTERS, digit_ending_counter_to_kana
from josuushi.errors import (
    CounterError,
    DecimalNotAllowed,
    InvalidExercise,
    InvalidNumber,
    NegativeNotAllowed,
    UnknownCounterClass,
    UnsupportedCounter,
)
from josuushi.euphony import CounterClass
from josuushi.exercises import check_answer, generate_exercise
from josuushi.irregular import age_counter_to_kana, date_counter_to_kana, people_counter_to_kana
from josuushi.models import CounterReading, Exercise, ExerciseTemplate
from josuushi.numbers import number_to_kana, parse_magnitude

__all__ = [
    'CounterCategory',
    'CounterClass',
    'CounterError',
    'CounterReading',
    'DIGIT_ENDING_COUNTERS',
    'DecimalNotAllowed',
    'Exercise',
    'ExerciseTemplate',
    'InvalidExercise',
    'InvalidNumber',
    'NegativeNotAllowed',
    'UnknownCounterClass',
    'UnsupportedCounter',
    'age_counter_to_kana',
    'check_answer',
    'counter_to_kana',
    'date_counter_to_kana',
    'digit_ending_counter_to_kana',
    'generate_exercise',
    'is_supported',
    'number_to_kana',
    'parse_magnitude',
    'people_counter_to_kana',
    'read_counter',
    'resolve_counter',
    'supported_counters',
]
