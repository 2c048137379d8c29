"""Text normalization for fuzzy matching of free-text job and tutor fields."""

import re
from typing import List

_WHITESPACE_RE = re.compile(r"\s+")
_PARENS_RE = re.compile(r"[()]")
_DIGITS_RE = re.compile(r"\d+")

# Tokens that mark a string as describing an education level ("Primary 4", "P5", "JC1")
LEVEL_DESCRIPTOR_RE = re.compile(r"primary|secondary|p\d|s\d|jc|grade|year")


def normalize(text: str) -> str:
    """Normalize text for matching.

    Normalization steps, in order:
    - Convert to lowercase
    - Collapse runs of whitespace to a single space
    - Remove parenthesis characters
    - Strip leading/trailing whitespace

    Args:
        text: Text to normalize

    Returns:
        Normalized text (empty input gives an empty string)

    Example:
        >>> normalize("  Sec 3  (Express) ")
        'sec 3 express'
    """
    normalized = text.lower()
    normalized = _WHITESPACE_RE.sub(" ", normalized)
    normalized = _PARENS_RE.sub("", normalized)
    return normalized.strip()


def extract_numbers(text: str) -> List[int]:
    """Return every run of digits in ``text`` as an integer, in order of appearance.

    Example:
        >>> extract_numbers("primary 1-3")
        [1, 3]
    """
    return [int(run) for run in _DIGITS_RE.findall(text)]


def looks_like_level(text: str) -> bool:
    """Whether normalized ``text`` reads as an education level descriptor."""
    return LEVEL_DESCRIPTOR_RE.search(text) is not None
