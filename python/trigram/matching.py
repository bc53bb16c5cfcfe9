"""Fuzzy search for a short needle inside a longer haystack.

The finder slides windows of several lengths around the needle's own length
over the haystack and scores every window with the trigram similarity.
A window may not contain more runs of non-word characters than the needle
does, so a single-word needle is only compared against pieces of single
words and a window never borrows trigrams from the word next to it.
Windows scoring at or above the threshold are candidates. A candidate that
overlaps the best window found so far describes the same occurrence: it
either replaces that window (if it scores higher) or is dropped. Only the
best window of each such cluster is reported.

Scanning proceeds by start offset, so once the scan reaches the end of the
current best window nothing later can overlap it. That is the point where
a match is produced, which keeps the search lazy and the matches in
ascending order of start offset.
"""

import re
from typing import Iterator, List, Optional, Tuple

from trigram._utils import check_str, check_unit_interval
from trigram.normalize import fold_case
from trigram.results import Match
from trigram.scoring import multiset_similarity, trigrams

DEFAULT_THRESHOLD = 0.3
"""Windows scoring below this are discarded."""

WINDOW_SLACK = 0.5
"""Window lengths range over needle length +/- this fraction of it (at least 1)."""

_GAP_RE = re.compile(r"\W+")


def _gap_count(text: str, start: int = 0, end: Optional[int] = None) -> int:
    if end is None:
        end = len(text)
    return len(_GAP_RE.findall(text, start, end))


def window_lengths(needle_len: int, haystack_len: int) -> range:
    """Return the window lengths tried for a needle of ``needle_len`` characters.

    The range is centred on ``needle_len``, never contains zero, and is
    clipped to ``haystack_len`` so that a needle longer than the haystack
    still compares against the whole haystack.

    Example:
        >>> window_lengths(7, 100)
        range(4, 11)
        >>> window_lengths(7, 5)
        range(4, 6)
    """
    slack = max(1, int(needle_len * WINDOW_SLACK))
    shortest = min(max(1, needle_len - slack), haystack_len)
    longest = min(needle_len + slack, haystack_len)
    return range(shortest, longest + 1)


def find_words_iter(
    needle: str,
    haystack: str,
    threshold: float = DEFAULT_THRESHOLD,
) -> Iterator[Match]:
    """Iterate over fuzzy occurrences of ``needle`` in ``haystack``.

    Matching ignores case. Each returned iterator is independent and only
    does as much scanning as needed to produce the matches pulled from it.

    Args:
        needle: The string to look for.
        haystack: The text to search.
        threshold: Minimum similarity for a window to count (0.0 to 1.0,
            default 0.3).

    Returns:
        Iterator of Match objects in ascending order of start offset. An
        empty needle or haystack yields nothing.

    Raises:
        ValidationError: If threshold is outside [0.0, 1.0].
        TypeError: If needle or haystack is not a string.

    Example:
        >>> [m.text for m in find_words_iter("cat", "The Cat sat")]
        ['Cat']
    """
    check_str(needle, "needle")
    check_str(haystack, "haystack")
    check_unit_interval(threshold, "threshold")
    return _scan(needle, haystack, threshold)


def _scan(needle: str, haystack: str, threshold: float) -> Iterator[Match]:
    if not needle or not haystack:
        return

    folded = fold_case(haystack)
    needle_grams = trigrams(fold_case(needle))
    needle_gaps = _gap_count(needle)
    lengths = window_lengths(len(needle), len(folded))

    # Best (start, end, score) of the open cluster.
    best: Optional[Tuple[int, int, float]] = None

    for start in range(len(folded)):
        if best is not None and start >= best[1]:
            yield _make_match(haystack, best)
            best = None

        for length in lengths:
            end = start + length
            if end > len(folded):
                break
            # Longer windows from the same start only gain gaps.
            if _gap_count(folded, start, end) > needle_gaps:
                break
            score = multiset_similarity(needle_grams, trigrams(folded[start:end]))
            if score < threshold:
                continue
            # Strictly greater: earlier starts and shorter windows win ties.
            if best is None or score > best[2]:
                best = (start, end, score)

    if best is not None:
        yield _make_match(haystack, best)


def _make_match(haystack: str, window: Tuple[int, int, float]) -> Match:
    start, end, score = window
    return Match(text=haystack[start:end], start=start, end=end, score=score)


def find_words(
    needle: str,
    haystack: str,
    threshold: float = DEFAULT_THRESHOLD,
) -> List[Match]:
    """Return all fuzzy occurrences of ``needle`` in ``haystack`` as a list.

    Eager version of :func:`find_words_iter`; see there for arguments.
    """
    return list(find_words_iter(needle, haystack, threshold))


def best_word_match(
    needle: str,
    haystack: str,
    threshold: float = DEFAULT_THRESHOLD,
) -> Optional[Match]:
    """Return the highest-scoring occurrence, or None if there is none.

    Ties go to the earliest occurrence.

    Example:
        >>> best_word_match("riddums", "funky riddims").text
        'riddims'
    """
    return max(find_words_iter(needle, haystack, threshold), key=lambda m: m.score, default=None)


__all__ = [
    "DEFAULT_THRESHOLD",
    "WINDOW_SLACK",
    "window_lengths",
    "find_words_iter",
    "find_words",
    "best_word_match",
]
