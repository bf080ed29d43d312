"""
Pydantic models for josuushi results.

These models are what the surrounding application serializes:
- CounterReading: one quantity read with one counter
- ExerciseTemplate: a contributed exercise sentence with its quantity range
- Exercise: a concrete exercise drawn from a template

Usage:
    from josuushi.counters import read_counter

    reading = read_counter("本", 3)
    reading.model_dump()
    # {'counter': '本', 'category': 'digit_ending', 'counter_class': 'h_alternation',
    #  'quantity': '3', 'kana': 'さんぼん', 'katakana': 'サンボン'}
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

ANSWER_PLACEHOLDER = "<ans>"
BLANK = "____"


class CounterReading(BaseModel):
    """Reading of a quantity with a counter."""
    counter: str = Field(..., description="Counter suffix as given (e.g. '本')")
    category: str = Field(..., description="Handler category: 'age', 'date', 'people' or 'digit_ending'")
    counter_class: Optional[str] = Field(None, description="Euphony class for digit-ending counters")
    quantity: str = Field(..., description="Textual form of the quantity")
    kana: str = Field(..., description="Hiragana reading")
    katakana: str = Field(..., description="Katakana reading")


class ExerciseTemplate(BaseModel):
    """
    A fill-in exercise for one counter.

    The sentence holds one or more ``<ans>`` placeholders where the
    quantity and counter go.
    """
    counter: str = Field(..., min_length=1)
    sentence: str = Field(..., min_length=1, max_length=5000)
    min_count: float = Field(1, ge=0)
    max_count: float = Field(10, ge=0)
    decimal_points: int = Field(0, ge=0)

    @field_validator("sentence")
    @classmethod
    def _has_placeholder(cls, sentence: str) -> str:
        if ANSWER_PLACEHOLDER not in sentence:
            raise ValueError(
                f"Exercise sentence must contain at least one '{ANSWER_PLACEHOLDER}' "
                "placeholder for the answer"
            )
        return sentence

    @model_validator(mode="after")
    def _check_range(self) -> "ExerciseTemplate":
        if self.min_count > self.max_count:
            raise ValueError("min_count must be less than or equal to max_count")
        return self


class Exercise(BaseModel):
    """A concrete exercise: the question shown and the expected answer."""
    counter: str
    quantity: str = Field(..., description="Quantity drawn from the template range")
    prompt: str = Field(..., description="Quantity followed by the counter, e.g. '3本'")
    question: str = Field(..., description="Sentence with the answer blanked out")
    display: str = Field(..., description="Sentence with quantity and counter filled in")
    answer: str = Field(..., description="Expected hiragana reading")
