"""Text normalization helpers shared by the matching engine.

This module provides:
- normalize: lowercase, whitespace-collapsed, parenthesis-free text
- extract_numbers: digit runs as integers
- looks_like_level: level-descriptor test gating numeric range matching
"""

from .text import LEVEL_DESCRIPTOR_RE, extract_numbers, looks_like_level, normalize

__all__ = [
    "normalize",
    "extract_numbers",
    "looks_like_level",
    "LEVEL_DESCRIPTOR_RE",
]
