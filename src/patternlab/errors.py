"""
Error types raised by the pattern-matching engines.

Most bad input is handled by policy rather than exceptions: ``insert`` and
``add_pattern`` return ``False``, the numeric matchers strip foreign symbols.
These types cover the cases where a caller asked for something that cannot
be answered.
"""


class PatternLabError(Exception):
    """Base class for engine errors."""


class InvalidSequenceError(PatternLabError, ValueError):
    """Raised by strict validation when a sequence is empty or leaves the alphabet."""


class StaleAutomatonError(PatternLabError, RuntimeError):
    """Raised when a search session outlives a change to the pattern set."""


class UnknownDemoError(PatternLabError, KeyError):
    """Raised when a demo id is not present in the catalogue."""

    def __str__(self) -> str:
        return f"unknown demo: {self.args[0]!r}" if self.args else "unknown demo"
