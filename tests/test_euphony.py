"""
Tests for euphony.py - numeral/counter sound changes.
"""

import pytest

from josuushi.characters import as_katakana, geminate, rendaku
from josuushi.digit_ending import DIGIT_ENDING_COUNTERS
from josuushi.euphony import (
    EUPHONY_RULES,
    NO_CHANGE,
    CounterClass,
    EuphonyRule,
    Onset,
    change_onset,
    counter_join,
    get_rule,
)


class TestRuleTable:
    """Tests for the shape of the rule table."""

    def test_every_class_has_rules(self):
        """No counter class is left without an entry."""
        assert set(EUPHONY_RULES) == set(CounterClass)

    def test_every_registered_counter_has_a_class(self):
        for counter, entry in DIGIT_ENDING_COUNTERS.items():
            assert entry.counter_class in EUPHONY_RULES, counter

    def test_mutating_classes_have_rules(self):
        for counter_class in CounterClass:
            if counter_class is CounterClass.NONE:
                assert not EUPHONY_RULES[counter_class]
            else:
                assert EUPHONY_RULES[counter_class], counter_class

    def test_numeral_replacements_only_on_digits(self):
        """Numeral replacements apply to a final digit morpheme, never a power."""
        for rules in EUPHONY_RULES.values():
            for ending, rule in rules.items():
                if rule.numeral is not None:
                    assert 1 <= ending <= 9

    def test_missing_ending_is_no_change(self):
        assert get_rule(CounterClass.NONE, 1) is NO_CHANGE
        assert get_rule(CounterClass.H_ALTERNATION, 2) is NO_CHANGE
        assert get_rule(CounterClass.H_ALTERNATION, 1) == EuphonyRule(
            geminate=True, onset=Onset.SEMI_VOICED
        )


class TestOnset:
    """Tests for counter onset changes."""

    def test_base(self):
        assert change_onset("ほん", Onset.BASE) == "ほん"

    def test_voiced(self):
        assert change_onset("ほん", Onset.VOICED) == "ぼん"
        assert change_onset("かい", Onset.VOICED) == "がい"
        assert change_onset("そく", Onset.VOICED) == "ぞく"

    def test_semi_voiced(self):
        assert change_onset("ふん", Onset.SEMI_VOICED) == "ぷん"
        assert change_onset("ひき", Onset.SEMI_VOICED) == "ぴき"

    def test_wa_alternation(self):
        assert change_onset("わ", Onset.VOICED) == "ば"
        assert change_onset("わ", Onset.SEMI_VOICED) == "ぱ"
        assert change_onset("ワ", Onset.SEMI_VOICED) == "パ"

    def test_unvoiceable_onset_is_kept(self):
        assert change_onset("まい", Onset.VOICED) == "まい"
        assert change_onset("かい", Onset.SEMI_VOICED) == "かい"


class TestCounterJoin:
    """Tests for joining numeral and counter readings."""

    def test_gemination_and_semi_voicing(self):
        assert counter_join("いち", 1, "ほん", CounterClass.H_ALTERNATION) == "いっぽん"
        assert counter_join("さんびゃく", 100, "ほん", CounterClass.H_ALTERNATION) == "さんびゃっぽん"

    def test_numeral_replacement(self):
        assert counter_join("よん", 4, "ねん", CounterClass.YO_FOUR) == "よねん"
        assert counter_join("じゅうきゅう", 9, "じ", CounterClass.CLOCK) == "じゅうくじ"
        assert counter_join("よん", 4, "がつ", CounterClass.MONTH) == "しがつ"

    def test_no_change(self):
        assert counter_join("いち", 1, "まい", CounterClass.NONE) == "いちまい"


class TestCharacters:
    """Tests for the kana helpers used by the joins."""

    def test_geminate(self):
        assert geminate("いち") == "いっ"
        assert geminate("じゅう") == "じゅっ"
        assert geminate("ロク") == "ロッ"
        assert geminate("") == ""

    def test_rendaku(self):
        assert rendaku("ひき") == "びき"
        assert rendaku("ひき", handakuten=True) == "ぴき"
        assert rendaku("ホン", handakuten=True) == "ポン"
        assert rendaku("まい") == "まい"

    def test_as_katakana(self):
        assert as_katakana("いっぽん") == "イッポン"
        assert as_katakana("じゅっぴき") == "ジュッピキ"

    @pytest.mark.parametrize("counter_class", list(CounterClass))
    def test_rules_are_immutable(self, counter_class):
        with pytest.raises(TypeError):
            EUPHONY_RULES[counter_class][1] = NO_CHANGE
