"""
Counters whose reading depends on how the numeral ends.

Most counters are read as numeral + counter, with the join changed by
the last digit (or last power of ten) of the numeral: 一本 いっぽん,
三本 さんぼん, 十本 じゅっぽん, 百一本 ひゃくいっぽん.
"""

from dataclasses import dataclass
from types import MappingProxyType

from josuushi.errors import DecimalNotAllowed, NegativeNotAllowed, UnknownCounterClass
from josuushi.euphony import CounterClass, counter_join
from josuushi.numbers import Number, integer_to_kana, numeral_ending, parse_magnitude


@dataclass(frozen=True)
class DigitEndingCounter:
    """A registered counter: its base kana reading and mutation family."""
    kana: str
    counter_class: CounterClass


# Counter text -> (base kana, euphony class)
_REGISTRY = {
    # No change
    "枚": ("まい", CounterClass.NONE),
    "台": ("だい", CounterClass.NONE),
    "番": ("ばん", CounterClass.NONE),
    "度": ("ど", CounterClass.NONE),
    "倍": ("ばい", CounterClass.NONE),
    "秒": ("びょう", CounterClass.NONE),
    "名": ("めい", CounterClass.NONE),
    # 4 read as よ
    "年": ("ねん", CounterClass.YO_FOUR),
    "円": ("えん", CounterClass.YO_FOUR),
    "時間": ("じかん", CounterClass.YO_FOUR),
    "人": ("にん", CounterClass.YO_FOUR),
    "時": ("じ", CounterClass.CLOCK),
    "月": ("がつ", CounterClass.MONTH),
    # ほ/ぼ/ぽ
    "本": ("ほん", CounterClass.H_ALTERNATION),
    "匹": ("ひき", CounterClass.H_ALTERNATION),
    "杯": ("はい", CounterClass.H_ALTERNATION),
    "分": ("ふん", CounterClass.H_PLOSIVE_AFTER_N),
    "歩": ("ほ", CounterClass.H_PLOSIVE_AFTER_N),
    "泊": ("はく", CounterClass.H_PLOSIVE_AFTER_N),
    "発": ("はつ", CounterClass.H_PLOSIVE_AFTER_N),
    # か行
    "個": ("こ", CounterClass.K_GEMINATION),
    "回": ("かい", CounterClass.K_GEMINATION),
    "ヶ月": ("かげつ", CounterClass.K_GEMINATION),
    "か月": ("かげつ", CounterClass.K_GEMINATION),
    "課": ("か", CounterClass.K_GEMINATION),
    "曲": ("きょく", CounterClass.K_GEMINATION),
    "階": ("かい", CounterClass.K_VOICED_AFTER_THREE),
    "軒": ("けん", CounterClass.K_VOICED_AFTER_THREE),
    # さ行
    "冊": ("さつ", CounterClass.S_GEMINATION),
    "週間": ("しゅうかん", CounterClass.S_GEMINATION),
    "隻": ("せき", CounterClass.S_GEMINATION),
    "足": ("そく", CounterClass.S_VOICED_AFTER_THREE),
    # た行
    "頭": ("とう", CounterClass.T_GEMINATION),
    "通": ("つう", CounterClass.T_GEMINATION),
    "点": ("てん", CounterClass.T_GEMINATION),
    "着": ("ちゃく", CounterClass.T_GEMINATION),
    "羽": ("わ", CounterClass.W_ALTERNATION),
}

DIGIT_ENDING_COUNTERS = MappingProxyType({
    text: DigitEndingCounter(kana, counter_class)
    for text, (kana, counter_class) in _REGISTRY.items()
})


def get_counter_class(counter: str) -> CounterClass:
    """
    Get the euphony class of a registered counter.

    Raises:
        UnknownCounterClass: If the counter is not registered.
    """
    entry = DIGIT_ENDING_COUNTERS.get(counter)
    if entry is None:
        raise UnknownCounterClass(counter)
    return entry.counter_class


def digit_ending_counter_to_kana(counter: str, value: Number) -> str:
    """
    Read a quantity with a digit-ending counter.

    Args:
        counter: Counter text, must be a key of DIGIT_ENDING_COUNTERS.
        value: Non-negative whole number or numeric text.

    Returns:
        Kana reading, e.g. ("本", 11) -> "じゅういっぽん".

    Raises:
        UnknownCounterClass: If the counter is not registered.
        DecimalNotAllowed: If the value has a fractional part.
        NegativeNotAllowed: If the value is negative.
        InvalidNumber: If the value is not a number.
    """
    entry = DIGIT_ENDING_COUNTERS.get(counter)
    if entry is None:
        raise UnknownCounterClass(counter)

    magnitude = parse_magnitude(value)
    if magnitude.has_fraction:
        raise DecimalNotAllowed(str(value), counter)
    if magnitude.negative and not magnitude.is_zero:
        raise NegativeNotAllowed(str(value), counter)

    number_kana = integer_to_kana(magnitude.integer)
    ending = numeral_ending(int(magnitude.integer))
    return counter_join(number_kana, ending, entry.kana, entry.counter_class)
