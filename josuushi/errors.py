"""
Exceptions raised by the josuushi reading engine.

Every error is raised where it is detected and propagated to the caller;
the engine never falls back to a default reading.
"""


class CounterError(ValueError):
    """Base class for all josuushi errors."""


class InvalidNumber(CounterError):
    """Raised when a value cannot be read as a number."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"'{text}' is not a number: {reason}")


class DecimalNotAllowed(CounterError):
    """Raised when a counter that only counts whole things gets a fraction."""

    def __init__(self, text: str, counter: str):
        self.text = text
        self.counter = counter
        super().__init__(f"Counter \"{counter}\" does not support decimals: {text}")


class NegativeNotAllowed(CounterError):
    """Raised when a counter that needs a non-negative quantity gets a negative one."""

    def __init__(self, text: str, counter: str):
        self.text = text
        self.counter = counter
        super().__init__(f"Counter \"{counter}\" requires a non-negative number: {text}")


class UnknownCounterClass(CounterError):
    """
    Raised when a counter is missing from the digit-ending registry.

    The dispatcher checks membership first, so seeing this means the
    registry and the dispatch table disagree.
    """

    def __init__(self, counter: str):
        self.counter = counter
        super().__init__(f"Counter \"{counter}\" has no euphony class")


class UnsupportedCounter(CounterError):
    """Raised when no handler exists for the requested counter."""

    def __init__(self, counter: str):
        self.counter = counter
        super().__init__(f"Counter \"{counter}\" is not supported")


class InvalidExercise(CounterError):
    """Raised when an exercise template cannot produce a quantity."""
