"""
Tests for exercises.py - exercise generation and answer checking.
"""

import random

import pytest
from pydantic import ValidationError

from josuushi.errors import DecimalNotAllowed, InvalidExercise, UnsupportedCounter
from josuushi.exercises import check_answer, draw_quantity, generate_exercise
from josuushi.models import BLANK, Exercise, ExerciseTemplate


def make_template(**kwargs):
    data = {"counter": "本", "sentence": "ペンが<ans>あります。"}
    data.update(kwargs)
    return ExerciseTemplate(**data)


class TestExerciseTemplate:
    """Tests for template validation."""

    def test_defaults(self):
        template = make_template()
        assert template.min_count == 1
        assert template.max_count == 10
        assert template.decimal_points == 0

    def test_placeholder_required(self):
        with pytest.raises(ValidationError, match="placeholder"):
            make_template(sentence="ペンがあります。")

    def test_empty_counter(self):
        with pytest.raises(ValidationError):
            make_template(counter="")

    def test_sentence_too_long(self):
        with pytest.raises(ValidationError):
            make_template(sentence="<ans>" + "あ" * 5000)

    def test_range_order(self):
        with pytest.raises(ValidationError, match="min_count"):
            make_template(min_count=5, max_count=2)

    @pytest.mark.parametrize("field", ["min_count", "max_count", "decimal_points"])
    def test_negative_fields(self, field):
        with pytest.raises(ValidationError):
            make_template(**{field: -1})


class TestDrawQuantity:
    """Tests for quantity selection."""

    def test_in_range(self):
        template = make_template(min_count=1, max_count=10)
        rng = random.Random(42)
        for _ in range(100):
            quantity = draw_quantity(template, rng)
            assert 1 <= int(quantity) <= 10
            assert "." not in quantity

    def test_single_value(self):
        assert draw_quantity(make_template(min_count=3, max_count=3)) == "3"

    def test_decimal_places(self):
        template = make_template(min_count=1.5, max_count=1.5, decimal_points=2)
        assert draw_quantity(template) == "1.50"

    def test_decimal_range(self):
        template = make_template(min_count=0.5, max_count=2, decimal_points=1)
        rng = random.Random(7)
        for _ in range(50):
            quantity = draw_quantity(template, rng)
            integer, _, fraction = quantity.partition(".")
            assert len(fraction) == 1
            assert 0.5 <= float(quantity) <= 2

    def test_reproducible(self):
        template = make_template(min_count=1, max_count=1000)
        first = [draw_quantity(template, random.Random(1)) for _ in range(3)]
        second = [draw_quantity(template, random.Random(1)) for _ in range(3)]
        assert first == second

    def test_empty_range(self):
        template = make_template(min_count=1.01, max_count=1.09)
        with pytest.raises(InvalidExercise):
            draw_quantity(template)

    def test_empty_range_with_decimals(self):
        template = make_template(min_count=1.01, max_count=1.09, decimal_points=1)
        with pytest.raises(InvalidExercise):
            draw_quantity(template)


class TestGenerateExercise:
    """Tests for building exercises."""

    def test_fill(self):
        exercise = generate_exercise(make_template(min_count=3, max_count=3))
        assert exercise.counter == "本"
        assert exercise.quantity == "3"
        assert exercise.prompt == "3本"
        assert exercise.question == f"ペンが{BLANK}あります。"
        assert exercise.display == "ペンが3本あります。"
        assert exercise.answer == "さんぼん"

    def test_every_placeholder_filled(self):
        template = make_template(
            counter="匹", sentence="猫が<ans>、犬も<ans>います。", min_count=6, max_count=6,
        )
        exercise = generate_exercise(template)
        assert exercise.display == "猫が6匹、犬も6匹います。"
        assert exercise.question.count(BLANK) == 2
        assert exercise.answer == "ろっぴき"

    def test_special_counter(self):
        template = make_template(counter="歳", sentence="<ans>になりました。", min_count=20, max_count=20)
        assert generate_exercise(template).answer == "はたち"

    def test_answer_matches_quantity(self):
        template = make_template(counter="日", min_count=1, max_count=31)
        rng = random.Random(3)
        for _ in range(20):
            exercise = generate_exercise(template, rng)
            assert exercise.prompt == exercise.quantity + "日"
            assert exercise.answer

    def test_decimal_counter(self):
        template = make_template(counter="日", min_count=1.5, max_count=1.5, decimal_points=1)
        assert generate_exercise(template).answer == "いちてんごにち"

    def test_decimal_whole_number_counter(self):
        template = make_template(min_count=1.5, max_count=1.5, decimal_points=1)
        with pytest.raises(DecimalNotAllowed):
            generate_exercise(template)

    def test_unsupported_counter(self):
        with pytest.raises(UnsupportedCounter):
            generate_exercise(make_template(counter="不明"))


class TestCheckAnswer:
    """Tests for answer checking."""

    def test_exact(self):
        assert check_answer("さんぼん", "さんぼん")
        assert not check_answer("さんぼん", "さんほん")

    def test_katakana(self):
        assert check_answer("さんぼん", "サンボン")

    def test_half_width(self):
        assert check_answer("さんぼん", "ｻﾝﾎﾞﾝ")

    def test_whitespace(self):
        assert check_answer("さんぼん", " さん ぼん ")
        assert check_answer("さんぼん", "さん　ぼん")

    def test_empty(self):
        assert not check_answer("さんぼん", "")
        assert not check_answer("さんぼん", "   ")

    def test_exercise(self):
        exercise = Exercise(
            counter="人", quantity="2", prompt="2人", question=BLANK,
            display="2人", answer="ふたり",
        )
        assert check_answer(exercise, "フタリ")
        assert not check_answer(exercise, "ににん")
