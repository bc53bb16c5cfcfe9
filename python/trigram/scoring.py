"""Trigram extraction and the similarity score.

Strings are padded with two leading spaces and one trailing space before
being cut into trigrams, so every string (the empty one included) yields at
least one trigram and word edges carry weight. Scores are a Jaccard index
over trigram *multisets*: a trigram occurring twice in both strings counts
twice.
"""

from collections import Counter
from typing import Union

from trigram._utils import check_str
from trigram.enums import NormalizationMode
from trigram.normalize import normalize_string

LEADING_PAD = "  "
TRAILING_PAD = " "


def trigrams(text: str) -> "Counter[str]":
    """Return the multiset of trigrams of ``text``.

    No normalization is applied; callers fold case first if they need to.
    The total count is always ``len(text) + 1``.

    Example:
        >>> sorted(trigrams("cat").items())
        [('  c', 1), (' ca', 1), ('at ', 1), ('cat', 1)]
        >>> trigrams("")
        Counter({'   ': 1})
    """
    padded = LEADING_PAD + text + TRAILING_PAD
    return Counter(padded[i : i + 3] for i in range(len(padded) - 2))


def multiset_similarity(a: "Counter[str]", b: "Counter[str]") -> float:
    """Score two trigram multisets as ``shared / (total_a + total_b - shared)``.

    ``shared`` is the size of the multiset intersection (per-trigram minimum
    of the two counts). Both multisets must be non-empty, which
    :func:`trigrams` guarantees.
    """
    if len(a) > len(b):
        a, b = b, a
    shared = sum(min(count, b[gram]) for gram, count in a.items() if gram in b)
    denominator = sum(a.values()) + sum(b.values()) - shared
    assert denominator > 0, "trigram multisets must not be empty"
    return shared / denominator


def similarity(
    a: str,
    b: str,
    normalize: Union[str, NormalizationMode] = NormalizationMode.LOWERCASE,
) -> float:
    """Return the trigram similarity of two strings, between 0.0 and 1.0.

    Both strings are normalized the same way (lowercased by default) before
    comparison, so different strings may score 1.0: ``"Rustacean"`` and
    ``"rustacean"`` are identical after folding.

    Args:
        a: First string.
        b: Second string.
        normalize: Normalization applied to both strings (default "lowercase").

    Returns:
        Similarity score; 1.0 for identical normalized strings, including two
        empty strings.

    Example:
        >>> similarity("rustacean", "crustacean")
        0.6153846153846154
        >>> similarity("foo", "food")
        0.5
    """
    check_str(a, "a")
    check_str(b, "b")
    ta = trigrams(normalize_string(a, normalize))
    tb = trigrams(normalize_string(b, normalize))
    return multiset_similarity(ta, tb)


__all__ = ["trigrams", "multiset_similarity", "similarity"]
