"""Rate parsing and rate compatibility scoring.

Job rates are free text ("$40-60/hr", "S$50/hour", "To be discussed"). A
representative number is pulled out and compared against the tutor's declared
band, with tolerance bands computed from the tutor's range rather than the job
rate so a wider declared band tolerates a wider dollar gap.
"""

import re
from enum import IntEnum
from typing import Optional

from tutormatch.domain.models import HourlyRates

# Unit and currency markers removed before looking for numbers, longest forms first
_UNIT_MARKERS_RE = re.compile(r"/hour|/hr|per hour|per hr|hour|hr|s\$")
_RANGE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*[-–~]|to\s*(\d+(?:\.\d+)?)")
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")

CLOSE_TOLERANCE = 0.2
PARTIAL_TOLERANCE = 0.4


class RateTier(IntEnum):
    """Rate compatibility tiers and the points each contributes."""

    NONE = 0
    PARTIAL = 5
    CLOSE = 10
    PERFECT = 20


def parse_rate(rate_string: str) -> Optional[float]:
    """Extract a representative hourly rate from free text.

    Ranges ("$40-60/hr", "40 ~ 60", "$40 to $60") give the midpoint of their
    first two numbers; otherwise the first number is used.

    Args:
        rate_string: Rate as written on the job posting

    Returns:
        The rate as a float, or None when the text has no numbers at all.
        None means "rate unknown", never zero dollars.

    Example:
        >>> parse_rate("S$50/hour")
        50.0
        >>> parse_rate("$40-$60/hr")
        50.0
        >>> parse_rate("To be discussed") is None
        True
    """
    cleaned = _UNIT_MARKERS_RE.sub("", rate_string.lower())
    cleaned = cleaned.replace("$", "").strip()

    if _RANGE_RE.search(cleaned):
        numbers = _NUMBER_RE.findall(cleaned)
        if len(numbers) >= 2:
            return (float(numbers[0]) + float(numbers[1])) / 2

    single = _NUMBER_RE.search(cleaned)
    if single:
        return float(single.group())

    return None


def rate_tier(job_rate: str, tutor_rates: HourlyRates) -> RateTier:
    """Classify how well a job's rate fits a tutor's declared band."""
    value = parse_rate(job_rate)
    if value is None:
        return RateTier.NONE

    if tutor_rates.min <= value <= tutor_rates.max:
        return RateTier.PERFECT

    if (
        tutor_rates.min * (1 - CLOSE_TOLERANCE)
        <= value
        <= tutor_rates.max * (1 + CLOSE_TOLERANCE)
    ):
        return RateTier.CLOSE

    if (
        tutor_rates.min * (1 - PARTIAL_TOLERANCE)
        <= value
        <= tutor_rates.max * (1 + PARTIAL_TOLERANCE)
    ):
        return RateTier.PARTIAL

    return RateTier.NONE


def rate_compatibility(job_rate: str, tutor_rates: HourlyRates) -> int:
    """Score a job's rate against a tutor's band: 20, 10, 5 or 0 points."""
    return int(rate_tier(job_rate, tutor_rates))
