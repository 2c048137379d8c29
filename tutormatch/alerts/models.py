"""Data models and exceptions for new-job alert planning."""

from dataclasses import dataclass, field
from typing import List

from tutormatch.domain.models import Tutor
from tutormatch.matching.models import MatchResult


class AlertError(Exception):
    """Base exception for alert-related errors."""

    pass


class AlertTemplateError(AlertError):
    """Raised when alert template rendering fails."""

    pass


@dataclass
class TutorAlert:
    """Jobs to push to one tutor in a single alert.

    Attributes:
        tutor: The tutor being alerted
        matches: Ranked matches to list in the alert (already truncated)
        total_matches: Number of new jobs that matched before truncation
    """

    tutor: Tutor
    matches: List[MatchResult] = field(default_factory=list)
    total_matches: int = 0

    @property
    def overflow_count(self) -> int:
        """How many matching jobs were left out of the alert."""
        return max(self.total_matches - len(self.matches), 0)

    @property
    def job_ids(self) -> List[str]:
        return [match.job.id for match in self.matches if match.job.id is not None]
