"""
Euphonic changes between a numeral and the counter that follows it.

Each counter belongs to a :class:`CounterClass`. The class decides, for
every possible ending of the numeral (see
:func:`josuushi.numbers.numeral_ending`), whether

- the final morpheme of the numeral is replaced (よん -> よ in よねん),
- the numeral geminates (いち -> いっ in いっこ),
- the onset of the counter is voiced or semi-voiced
  (ほん -> ぼん in さんぼん, ほん -> ぽん in いっぽん).

Examples:
- 一本 (いっぽん): H_ALTERNATION, ending 1 -> geminate + semi-voiced
- 三匹 (さんびき): H_ALTERNATION, ending 3 -> voiced
- 十冊 (じゅっさつ): S_GEMINATION, ending 10 -> geminate
- 四時 (よじ): CLOCK, ending 4 -> numeral よん replaced by よ
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from josuushi.characters import geminate, rendaku
from josuushi.numbers import DIGIT_TO_KANA


class CounterClass(Enum):
    """Mutation family of a counter."""
    NONE = "none"
    YO_FOUR = "yo_four"                              # 年, 円: 4 -> よ
    CLOCK = "clock"                                  # 時: 4 -> よ, 7 -> しち, 9 -> く
    MONTH = "month"                                  # 月: 4 -> し, 7 -> しち, 9 -> く
    H_ALTERNATION = "h_alternation"                  # 本, 匹, 杯: ほ/ぼ/ぽ
    H_PLOSIVE_AFTER_N = "h_plosive_after_n"          # 分, 歩: ぷん after ん
    K_GEMINATION = "k_gemination"                    # 個, 回
    K_VOICED_AFTER_THREE = "k_voiced_after_three"    # 階, 軒: さんがい
    S_GEMINATION = "s_gemination"                    # 冊, 週間
    S_VOICED_AFTER_THREE = "s_voiced_after_three"    # 足: さんぞく
    T_GEMINATION = "t_gemination"                    # 頭, 通, 点
    W_ALTERNATION = "w_alternation"                  # 羽: わ/ば/ぱ


class Onset(Enum):
    """Form of the first mora of the counter reading."""
    BASE = "base"
    VOICED = "voiced"
    SEMI_VOICED = "semi_voiced"


@dataclass(frozen=True)
class EuphonyRule:
    """
    How a numeral and a counter combine for one numeral ending.

    ``numeral`` replaces the final digit morpheme of the numeral reading
    when set; ``geminate`` turns the last mora of the numeral into っ.
    """
    geminate: bool = False
    onset: Onset = Onset.BASE
    numeral: Optional[str] = None


NO_CHANGE = EuphonyRule()

_G = EuphonyRule(geminate=True)
_GP = EuphonyRule(geminate=True, onset=Onset.SEMI_VOICED)
_V = EuphonyRule(onset=Onset.VOICED)
_P = EuphonyRule(onset=Onset.SEMI_VOICED)
_YO = EuphonyRule(numeral="よ")
_SHI = EuphonyRule(numeral="し")
_SHICHI = EuphonyRule(numeral="しち")
_KU = EuphonyRule(numeral="く")

_MAN = 10 ** 4

# わ is not voiced by regular rendaku; 羽 alternates with ば/ぱ
_W_ONSETS = {
    Onset.VOICED: {"わ": "ば", "ワ": "バ"},
    Onset.SEMI_VOICED: {"わ": "ぱ", "ワ": "パ"},
}

# CounterClass -> numeral ending -> rule. Endings not listed take NO_CHANGE.
EUPHONY_RULES = MappingProxyType({
    CounterClass.NONE: MappingProxyType({}),
    CounterClass.YO_FOUR: MappingProxyType({4: _YO}),
    CounterClass.CLOCK: MappingProxyType({4: _YO, 7: _SHICHI, 9: _KU}),
    CounterClass.MONTH: MappingProxyType({4: _SHI, 7: _SHICHI, 9: _KU}),
    CounterClass.H_ALTERNATION: MappingProxyType({
        1: _GP, 3: _V, 6: _GP, 8: _GP, 10: _GP, 100: _GP, 1000: _V, _MAN: _V,
    }),
    CounterClass.H_PLOSIVE_AFTER_N: MappingProxyType({
        1: _GP, 3: _P, 4: _P, 6: _GP, 8: _GP, 10: _GP, 100: _GP, 1000: _P, _MAN: _P,
    }),
    CounterClass.K_GEMINATION: MappingProxyType({
        1: _G, 6: _G, 8: _G, 10: _G, 100: _G,
    }),
    CounterClass.K_VOICED_AFTER_THREE: MappingProxyType({
        1: _G, 3: _V, 6: _G, 8: _G, 10: _G, 100: _G, 1000: _V, _MAN: _V,
    }),
    CounterClass.S_GEMINATION: MappingProxyType({1: _G, 8: _G, 10: _G}),
    CounterClass.S_VOICED_AFTER_THREE: MappingProxyType({
        1: _G, 3: _V, 8: _G, 10: _G, 1000: _V,
    }),
    CounterClass.T_GEMINATION: MappingProxyType({1: _G, 8: _G, 10: _G}),
    CounterClass.W_ALTERNATION: MappingProxyType({
        3: _V, 6: _GP, 8: _GP, 10: _GP, 100: _GP, 1000: _V, _MAN: _V,
    }),
})


def get_rule(counter_class: CounterClass, ending: int) -> EuphonyRule:
    """Get the rule for a numeral ending, NO_CHANGE when none applies."""
    return EUPHONY_RULES[counter_class].get(ending, NO_CHANGE)


def change_onset(kana: str, onset: Onset) -> str:
    """Apply an onset change to the first mora of a counter reading."""
    if onset is Onset.BASE or not kana:
        return kana
    w_form = _W_ONSETS[onset].get(kana[0])
    if w_form:
        return w_form + kana[1:]
    return rendaku(kana, handakuten=onset is Onset.SEMI_VOICED)


def counter_join(number_kana: str, ending: int, counter_kana: str,
                 counter_class: CounterClass) -> str:
    """
    Join a numeral reading with a counter reading, applying euphony rules.

    Args:
        number_kana: Kana reading of the numeral (e.g. "じゅういち").
        ending: Numeral ending from :func:`josuushi.numbers.numeral_ending`.
        counter_kana: Base reading of the counter (e.g. "ほん").
        counter_class: Mutation family of the counter.

    Returns:
        Combined reading (e.g. "じゅういっぽん").
    """
    rule = get_rule(counter_class, ending)

    if rule.numeral is not None:
        digit_kana = DIGIT_TO_KANA[ending]
        if number_kana.endswith(digit_kana):
            number_kana = number_kana[:-len(digit_kana)] + rule.numeral
    if rule.geminate:
        number_kana = geminate(number_kana)

    return number_kana + change_onset(counter_kana, rule.onset)
