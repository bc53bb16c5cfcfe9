"""Exception types raised by trigram.

The string operations themselves never fail for ``str`` input; these are
raised only for invalid parameters.
"""


class TrigramError(Exception):
    """Base class for all trigram errors."""


class ValidationError(TrigramError, ValueError):
    """A parameter is outside its allowed range or set of values."""


__all__ = ["TrigramError", "ValidationError"]
