"""Data models for the matching engine."""

from dataclasses import dataclass, field
from typing import List

from tutormatch.domain.models import Job

SUBJECT_POINTS = 30
LEVEL_POINTS = 30
LOCATION_POINTS = 20
MAX_RATE_POINTS = 20


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-dimension points for one (job, tutor) pair.

    Attributes:
        subject: 30 if any tutor subject matched, else 0
        level: 30 if any tutor level matched, else 0
        location: 20 if any tutor location matched, else 0
        rate: Rate compatibility points (0, 5, 10 or 20)
    """

    subject: int = 0
    level: int = 0
    location: int = 0
    rate: int = 0

    @property
    def total(self) -> int:
        """Sum of all dimensions, always within [0, 100]."""
        return self.subject + self.level + self.location + self.rate


@dataclass
class MatchResult:
    """Result of scoring one job for one tutor.

    Built fresh on every ranking call and never cached.

    Attributes:
        job: The job that was scored
        score: Total score in [0, 100]
        match_reasons: Human-readable reasons, ordered subject, level, location, rate
        breakdown: Points per dimension (score == breakdown.total)
    """

    job: Job
    score: int
    match_reasons: List[str] = field(default_factory=list)
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    @property
    def match_quality(self) -> str:
        """Coarse label for display.

        Returns:
            "strong" for 80 and above, "good" for 50 and above,
            "weak" for anything above zero, otherwise "none"
        """
        if self.score >= 80:
            return "strong"
        if self.score >= 50:
            return "good"
        if self.score > 0:
            return "weak"
        return "none"
