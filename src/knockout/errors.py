"""
Exceptions raised by bracket generation.

A participant count below two is not an error: generation returns an empty
list for it.
"""


class BracketError(Exception):
    """Base class for bracket generation failures."""


class UnsupportedBracketStyle(BracketError, ValueError):
    """Raised when asked for a bracket style that is not implemented."""

    def __init__(self, style):
        self.style = style
        super().__init__(f"Unsupported bracket style: {style!r}")


class BracketInvariantError(BracketError, RuntimeError):
    """Raised when the match graph references a match that no longer exists.

    This is a programming error, not a recoverable condition.
    """
