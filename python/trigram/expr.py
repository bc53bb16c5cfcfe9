"""Polars expression namespace for trigram matching.

This module registers a `.trigram` namespace on Polars expressions,
enabling trigram similarity and fuzzy word search directly in Polars
expression contexts. Values are processed row by row with map_elements.

Warning:
    For large Series, prefer the batch helpers in ``trigram.polars_api``,
    which prepare the literal side's trigrams once per call.

Example:
    >>> import polars as pl
    >>> import trigram  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["Rustacean", "crustacean", "python"]})
    >>> df.with_columns(
    ...     score=pl.col("name").trigram.similarity("rustacean")
    ... )
"""

from typing import Union

import polars as pl

from trigram._utils import check_unit_interval
from trigram.matching import DEFAULT_THRESHOLD, find_words, find_words_iter
from trigram.scoring import similarity as _similarity

MATCH_DTYPE = pl.Struct(
    {"start": pl.Int64, "end": pl.Int64, "text": pl.Utf8, "score": pl.Float64}
)


@pl.api.register_expr_namespace("trigram")
class TrigramExprNamespace:
    """
    Trigram matching namespace for Polars expressions.

    Access via `.trigram` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(self, other: Union[str, pl.Expr]) -> pl.Expr:
        """
        Calculate trigram similarity between this column and another value/column.

        Args:
            other: String literal or column expression to compare against

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name1").trigram.similarity(pl.col("name2"))
            ... )
        """
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: _similarity(str(s), other),
                return_dtype=pl.Float64,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: _similarity(
                str(row["_left"]) if row["_left"] is not None else "",
                str(row["_right"]) if row["_right"] is not None else "",
            ),
            return_dtype=pl.Float64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = DEFAULT_THRESHOLD,
    ) -> pl.Expr:
        """
        Check if similarity is at least a minimum score.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum similarity score (0.0 to 1.0)

        Returns:
            Boolean expression
        """
        check_unit_interval(min_similarity, "min_similarity")
        return self.similarity(other) >= min_similarity

    def contains(self, needle: str, threshold: float = DEFAULT_THRESHOLD) -> pl.Expr:
        """
        Check whether each value contains a fuzzy occurrence of ``needle``.

        Stops scanning a value at its first occurrence.

        Example:
            >>> df.filter(pl.col("text").trigram.contains("buffalo"))
        """
        check_unit_interval(threshold, "threshold")
        return self._expr.map_elements(
            lambda s: next(find_words_iter(needle, str(s), threshold), None) is not None,
            return_dtype=pl.Boolean,
        )

    def find_words(self, needle: str, threshold: float = DEFAULT_THRESHOLD) -> pl.Expr:
        """
        List the fuzzy occurrences of ``needle`` in each value.

        Returns:
            Expression of lists of structs with fields start, end, text and score
        """
        check_unit_interval(threshold, "threshold")
        return self._expr.map_elements(
            lambda s: [
                {"start": m.start, "end": m.end, "text": m.text, "score": m.score}
                for m in find_words(needle, str(s), threshold)
            ],
            return_dtype=pl.List(MATCH_DTYPE),
        )
