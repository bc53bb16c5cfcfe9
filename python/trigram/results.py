"""Result types shared by the finder and the batch API."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Match:
    """One approximate occurrence of a needle inside a haystack.

    Attributes:
        text: The matched slice ``haystack[start:end]``, in original casing.
        start: Character offset of the first matched character.
        end: Character offset one past the last matched character.
        score: Similarity between the needle and ``text``.
    """

    text: str
    start: int
    end: int
    score: float

    @property
    def span(self) -> Tuple[int, int]:
        return (self.start, self.end)

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class MatchResult:
    """A candidate string scored against a query.

    Attributes:
        text: The candidate string.
        score: Similarity between the query and ``text``.
        id: Position of ``text`` in the input list.
    """

    text: str
    score: float
    id: int


__all__ = ["Match", "MatchResult"]
