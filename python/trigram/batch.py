"""Batch operations API for trigram.

List-based helpers that score one query against many strings, or many
strings against many. The query's trigrams are extracted once per call;
nothing is indexed or kept between calls.

Example usage:
    >>> import trigram.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('hello', 0.57), ('hallo', 0.22), ('world', 0.0)]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["foo", "bar"], ["food", "barred"])
    [0.5, 0.375]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trigram._utils import check_str, check_unit_interval, normalize_mode
from trigram.enums import NormalizationMode
from trigram.exceptions import ValidationError
from trigram.normalize import normalize_string
from trigram.results import MatchResult
from trigram.scoring import multiset_similarity, trigrams

if TYPE_CHECKING:
    from collections import Counter

__all__ = [
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


def _prepare(text: str, mode: NormalizationMode) -> Counter[str]:
    return trigrams(normalize_string(check_str(text, "string"), mode))


def similarity(
    strings: list[str],
    query: str,
    normalize: str | NormalizationMode = NormalizationMode.LOWERCASE,
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        normalize: Normalization applied to every string (default "lowercase").

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in the input list.
    """
    mode = normalize_mode(normalize)
    query_grams = _prepare(query, mode)
    return [
        MatchResult(text=s, score=multiset_similarity(query_grams, _prepare(s, mode)), id=i)
        for i, s in enumerate(strings)
    ]


def best_matches(
    strings: list[str],
    query: str,
    limit: int = 5,
    min_similarity: float = 0.0,
    normalize: str | NormalizationMode = NormalizationMode.LOWERCASE,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).
        normalize: Normalization applied to every string (default "lowercase").

    Returns:
        List of MatchResult objects sorted by score descending. Equal scores
        keep their input order.

    Raises:
        ValidationError: If limit is negative or min_similarity is outside
            [0.0, 1.0].
    """
    if limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")
    check_unit_interval(min_similarity, "min_similarity")

    scored = [r for r in similarity(strings, query, normalize) if r.score >= min_similarity]
    scored.sort(key=lambda r: r.score, reverse=True)
    return scored[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    normalize: str | NormalizationMode = NormalizationMode.LOWERCASE,
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Raises:
        ValidationError: If left and right have different lengths.

    Example:
        >>> pairwise(["a", "abc"], ["ab", "def"])
        [0.25, 0.0]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    mode = normalize_mode(normalize)
    return [multiset_similarity(_prepare(a, mode), _prepare(b, mode)) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    normalize: str | NormalizationMode = NormalizationMode.LOWERCASE,
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].
    """
    mode = normalize_mode(normalize)
    choice_grams = [_prepare(c, mode) for c in choices]
    return [
        [multiset_similarity(query_grams, grams) for grams in choice_grams]
        for query_grams in (_prepare(q, mode) for q in queries)
    ]
