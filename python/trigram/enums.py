"""Enums for trigram API."""

from enum import Enum


class NormalizationMode(str, Enum):
    """String normalization modes.

    Used by :func:`trigram.similarity` and :func:`trigram.normalize_string`
    to control how strings are preprocessed before trigram extraction.

    Example:
        >>> from trigram import similarity, NormalizationMode
        >>> similarity("same, but different?", "same but different",
        ...            normalize=NormalizationMode.WORDS)
        1.0
    """

    LOWERCASE = "lowercase"
    """Lowercase each character, keeping string length (the default)"""

    CASEFOLD = "casefold"
    """Full Unicode case folding (may change length, e.g. 'ß' -> 'ss')"""

    WORDS = "words"
    """Lowercase and collapse non-word runs into single spaces"""

    UNICODE_NFKD = "unicode_nfkd"
    """NFKD decomposition with combining marks dropped, then lowercase"""


__all__ = ["NormalizationMode"]
