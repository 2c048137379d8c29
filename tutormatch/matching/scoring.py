"""Match scoring: per-dimension points and human-readable match reasons.

Scores and reasons are computed independently from the same primitives, so
reasons never depend on how the score was assembled.
"""

from typing import List, Optional

from .fuzzy import FuzzyMatcher
from .models import LEVEL_POINTS, LOCATION_POINTS, SUBJECT_POINTS, ScoreBreakdown
from .rates import RateTier, rate_compatibility


class MatchScorer:
    """Scores jobs against tutor preferences using a FuzzyMatcher."""

    def __init__(self, fuzzy_matcher: Optional[FuzzyMatcher] = None):
        self.fuzzy = fuzzy_matcher or FuzzyMatcher()

    def breakdown(self, job, tutor) -> ScoreBreakdown:
        """Compute the four independently capped dimension scores.

        Args:
            job: Object with subject, level, location and rate attributes
            tutor: Object with subjects, levels, locations and hourly_rates attributes

        Returns:
            ScoreBreakdown whose total is the match score
        """
        subject = SUBJECT_POINTS if self.fuzzy.any_match(job.subject, tutor.subjects) else 0
        level = LEVEL_POINTS if self.fuzzy.any_match(job.level, tutor.levels) else 0
        location = LOCATION_POINTS if self.fuzzy.any_match(job.location, tutor.locations) else 0

        rate = 0
        if tutor.hourly_rates is not None:
            rate = rate_compatibility(job.rate, tutor.hourly_rates)

        return ScoreBreakdown(subject=subject, level=level, location=location, rate=rate)

    def score(self, job, tutor) -> int:
        return self.breakdown(job, tutor).total

    def reasons(self, job, tutor) -> List[str]:
        """Build display reasons in fixed order: subject, level, location, rate.

        Each reason names the first tutor preference that matched.
        """
        reasons: List[str] = []

        subject_match = self.fuzzy.first_match(job.subject, tutor.subjects)
        if subject_match is not None:
            reasons.append(f"Matches your subject: {subject_match}")

        level_match = self.fuzzy.first_match(job.level, tutor.levels)
        if level_match is not None:
            reasons.append(f"Matches your level: {level_match}")

        location_match = self.fuzzy.first_match(job.location, tutor.locations)
        if location_match is not None:
            reasons.append(f"Near your location: {location_match}")

        if tutor.hourly_rates is not None:
            rate_points = rate_compatibility(job.rate, tutor.hourly_rates)
            if rate_points >= RateTier.PERFECT:
                reasons.append("Rate matches your range")
            elif rate_points >= RateTier.CLOSE:
                reasons.append("Rate close to your range")

        return reasons


_default_scorer = MatchScorer()


def score_breakdown(job, tutor) -> ScoreBreakdown:
    return _default_scorer.breakdown(job, tutor)


def score(job, tutor) -> int:
    """Score a job for a tutor on a 0-100 scale using the built-in vocabulary."""
    return _default_scorer.score(job, tutor)


def match_reasons(job, tutor) -> List[str]:
    """Human-readable reasons a job suits a tutor, using the built-in vocabulary."""
    return _default_scorer.reasons(job, tutor)
