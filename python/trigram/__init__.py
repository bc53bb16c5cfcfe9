"""
trigram - Fuzzy string similarity and search with trigrams

Scores strings the way the PostgreSQL pg_trgm extension does, by comparing
their multisets of 3-character substrings, and finds approximate
occurrences of a short string inside a longer one.

Example usage:
    >>> import trigram as tg

    # Simple similarity
    >>> tg.similarity("rustacean", "crustacean")
    0.6153846153846154

    # Fuzzy search, lazily
    >>> for m in tg.find_words_iter("cat", "The cat sat"):
    ...     print(m.start, m.end, m.text, m.score)
    4 7 cat 1.0

    # Rank candidates
    >>> [m.text for m in tg.best_matches(["food", "fool", "bar"], "foo", limit=2)]
    ['food', 'fool']
"""

from importlib.metadata import version as _get_version

# Register the .trigram expression namespace
import trigram.expr  # noqa: F401
from trigram import batch
from trigram.batch import best_matches, pairwise, similarity_matrix
from trigram.enums import NormalizationMode
from trigram.exceptions import TrigramError, ValidationError
from trigram.matching import (
    DEFAULT_THRESHOLD,
    WINDOW_SLACK,
    best_word_match,
    find_words,
    find_words_iter,
    window_lengths,
)
from trigram.normalize import fold_case, normalize_string
from trigram.polars_api import batch_similarity, find_words_frame
from trigram.results import Match, MatchResult
from trigram.scoring import multiset_similarity, similarity, trigrams

__version__ = _get_version("trigram")
__all__ = [
    # Version
    "__version__",
    # Exceptions
    "TrigramError",
    "ValidationError",
    # Result types
    "Match",
    "MatchResult",
    # Enums
    "NormalizationMode",
    # Similarity
    "trigrams",
    "multiset_similarity",
    "similarity",
    # Search
    "DEFAULT_THRESHOLD",
    "WINDOW_SLACK",
    "window_lengths",
    "find_words_iter",
    "find_words",
    "best_word_match",
    # Normalization
    "fold_case",
    "normalize_string",
    # Batch processing
    "batch",
    "best_matches",
    "pairwise",
    "similarity_matrix",
    # Polars Integration
    "batch_similarity",
    "find_words_frame",
]
