"""String normalization applied before trigram extraction."""

import re
import unicodedata
from typing import Union

from trigram._utils import check_str, normalize_mode
from trigram.enums import NormalizationMode

_NON_WORD_RX = re.compile(r"\W+")


def fold_case(text: str) -> str:
    """Lowercase ``text`` without changing its length.

    A few characters lowercase to more than one character (``"İ"`` becomes
    ``"i̇"``). Those are kept as they are, so that offsets computed on the
    folded string are valid offsets into the original.

    Example:
        >>> fold_case("Rustacean")
        'rustacean'
    """
    folded = text.lower()
    if len(folded) == len(text):
        return folded
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def normalize_string(
    text: str,
    mode: Union[str, NormalizationMode] = NormalizationMode.LOWERCASE,
) -> str:
    """Normalize a string for comparison.

    Args:
        text: String to normalize.
        mode: Normalization mode (string or NormalizationMode enum):
            - "lowercase": Per-character lowercase, length preserving (default)
            - "casefold": Full Unicode case folding
            - "words": Lowercase, non-word runs collapsed to one space, stripped
            - "unicode_nfkd": NFKD with combining marks removed, lowercased

    Returns:
        The normalized string.

    Raises:
        ValidationError: If the mode name is not recognized.
        TypeError: If text is not a string.

    Example:
        >>> normalize_string("  Same, but different?", "words")
        'same but different'
        >>> normalize_string("Café", NormalizationMode.UNICODE_NFKD)
        'cafe'
    """
    check_str(text, "text")
    mode = normalize_mode(mode)

    if mode is NormalizationMode.LOWERCASE:
        return fold_case(text)
    if mode is NormalizationMode.CASEFOLD:
        return text.casefold()
    if mode is NormalizationMode.WORDS:
        return _NON_WORD_RX.sub(" ", text.lower()).strip()
    # UNICODE_NFKD
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


__all__ = ["fold_case", "normalize_string"]
