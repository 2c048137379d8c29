"""Fuzzy comparison of free-text subject, level and location values.

Strategies are tried in order and the first hit wins:
1. Exact match on normalized text
2. Substring match in either direction
3. Shared vocabulary group (subject or level alias tables)
4. Numeric range overlap, only when both sides read as level descriptors

Every strategy is symmetric, so ``fuzzy_match(a, b) == fuzzy_match(b, a)``.
"""

from typing import List, Optional

from tutormatch.normalization import extract_numbers, looks_like_level, normalize

from .vocabulary import DEFAULT_VOCABULARY, VocabularyTables


class FuzzyMatcher:
    """Decides whether two free-text values denote the same subject, level or place."""

    def __init__(self, vocabulary: Optional[VocabularyTables] = None):
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY

    def match(self, value1: str, value2: str) -> bool:
        norm1 = normalize(value1)
        norm2 = normalize(value2)

        if norm1 == norm2:
            return True

        if norm1 in norm2 or norm2 in norm1:
            return True

        if self.vocabulary.shares_group(norm1, norm2):
            return True

        return numeric_ranges_match(norm1, norm2)

    def first_match(self, value: str, candidates: List[str]) -> Optional[str]:
        """Return the first candidate that fuzzy-matches ``value``, or None."""
        for candidate in candidates:
            if self.match(value, candidate):
                return candidate
        return None

    def any_match(self, value: str, candidates: List[str]) -> bool:
        return self.first_match(value, candidates) is not None


def numeric_ranges_match(norm1: str, norm2: str) -> bool:
    """Compare the numbers in two normalized level descriptors.

    "primary 4" vs "primary 4-6" matches (4 lies in [4, 6]); "sec 1-2" vs
    "sec 3-4" does not. Non-level text such as "room 2" never takes part.
    Only one or two numbers per side are understood.
    """
    nums1 = extract_numbers(norm1)
    nums2 = extract_numbers(norm2)
    if not nums1 or not nums2:
        return False

    if not (looks_like_level(norm1) and looks_like_level(norm2)):
        return False

    if len(nums1) == 1 and len(nums2) == 1:
        return nums1[0] == nums2[0]

    if len(nums1) == 2 and len(nums2) == 1:
        low, high = nums1
        return low <= nums2[0] <= high

    if len(nums1) == 1 and len(nums2) == 2:
        low, high = nums2
        return low <= nums1[0] <= high

    if len(nums1) == 2 and len(nums2) == 2:
        min1, max1 = nums1
        min2, max2 = nums2
        return max1 >= min2 and max2 >= min1

    return False


_default_matcher = FuzzyMatcher()


def fuzzy_match(value1: str, value2: str) -> bool:
    """Match two free-text values using the built-in vocabulary.

    Example:
        >>> fuzzy_match("E Maths", "Mathematics")
        True
        >>> fuzzy_match("Primary 1-3", "Room 2")
        False
    """
    return _default_matcher.match(value1, value2)
