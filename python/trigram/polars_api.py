"""Batch Polars API for trigram matching.

Functions here take whole Series, prepare the trigrams of any literal side
once, and return Polars objects.

Functions in This Module
------------------------
- ``batch_similarity()``: Similarity between two Series, or a Series and a string
- ``find_words_frame()``: All fuzzy occurrences of a needle across a Series

Example Usage
-------------
>>> import polars as pl
>>> import trigram as tg
>>>
>>> df = df.with_columns(
...     score=tg.batch_similarity(df["col_a"], df["col_b"])
... )
>>>
>>> matches = tg.find_words_frame(df["description"], "buffalo")
"""

from typing import Union

import polars as pl

from trigram._utils import check_str, check_unit_interval
from trigram.batch import pairwise
from trigram.batch import similarity as _batch_similarity
from trigram.exceptions import ValidationError
from trigram.matching import DEFAULT_THRESHOLD, find_words_iter

MATCH_SCHEMA = {
    "row_idx": pl.Int64,
    "start": pl.Int64,
    "end": pl.Int64,
    "text": pl.Utf8,
    "score": pl.Float64,
}


def _to_strings(series: pl.Series) -> list:
    return [str(x) if x is not None else "" for x in series.to_list()]


def batch_similarity(
    left: pl.Series,
    right: Union[pl.Series, str],
) -> pl.Series:
    """
    Compute trigram similarity row by row.

    Null values compare as empty strings.

    Args:
        left: Series of strings
        right: Series of the same length, or a single string compared
            against every value of ``left``

    Returns:
        Float64 Series named "similarity"

    Raises:
        ValidationError: If both are Series of different lengths.

    Example:
        >>> tg.batch_similarity(pl.Series(["foo", "bar"]), "food")
    """
    values = _to_strings(left)
    if isinstance(right, str):
        scores = [r.score for r in _batch_similarity(values, right)]
    else:
        if len(left) != len(right):
            raise ValidationError("Series must have equal length")
        scores = pairwise(values, _to_strings(right))
    return pl.Series("similarity", scores, dtype=pl.Float64)


def find_words_frame(
    haystacks: pl.Series,
    needle: str,
    threshold: float = DEFAULT_THRESHOLD,
) -> pl.DataFrame:
    """
    Find fuzzy occurrences of ``needle`` in every value of a Series.

    Args:
        haystacks: Series of strings to search; nulls are skipped
        needle: The string to look for
        threshold: Minimum similarity score (0.0 to 1.0)

    Returns:
        DataFrame with columns:
        - row_idx: Index of the value in the input Series
        - start, end: Character offsets of the match in that value
        - text: The matched text
        - score: Similarity score
    """
    check_str(needle, "needle")
    check_unit_interval(threshold, "threshold")
    rows = []
    for row_idx, haystack in enumerate(haystacks.to_list()):
        if haystack is None:
            continue
        for m in find_words_iter(needle, str(haystack), threshold):
            rows.append(
                {
                    "row_idx": row_idx,
                    "start": m.start,
                    "end": m.end,
                    "text": m.text,
                    "score": m.score,
                }
            )

    if not rows:
        return pl.DataFrame(schema=MATCH_SCHEMA)
    return pl.DataFrame(rows, schema=MATCH_SCHEMA)


__all__ = ["batch_similarity", "find_words_frame"]
