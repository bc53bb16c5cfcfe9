"""Internal utilities for trigram."""

from typing import Union

from trigram.enums import NormalizationMode
from trigram.exceptions import ValidationError


def normalize_mode(mode: Union[str, NormalizationMode]) -> NormalizationMode:
    """Convert a mode name to NormalizationMode, or pass an enum through.

    Args:
        mode: Either a NormalizationMode value or its string name.

    Returns:
        The matching NormalizationMode member.

    Raises:
        ValidationError: If the mode name is not recognized.
        TypeError: If mode is not a string or NormalizationMode enum.

    Example:
        >>> normalize_mode("Words")
        <NormalizationMode.WORDS: 'words'>
    """
    if isinstance(mode, NormalizationMode):
        return mode

    if isinstance(mode, str):
        try:
            return NormalizationMode(mode.lower())
        except ValueError:
            valid = sorted(m.value for m in NormalizationMode)
            raise ValidationError(
                f"Unknown normalization mode: '{mode}'. Valid options: {valid}"
            ) from None

    raise TypeError(
        f"mode must be str or NormalizationMode enum, got {type(mode).__name__}"
    )


def check_str(value: object, name: str) -> str:
    """Return value unchanged if it is a str, else raise TypeError."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def check_unit_interval(value: float, name: str) -> float:
    """Validate that a score parameter lies in [0.0, 1.0]."""
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name} must be between 0.0 and 1.0, got {value}")
    return value


__all__ = ["normalize_mode", "check_str", "check_unit_interval"]
