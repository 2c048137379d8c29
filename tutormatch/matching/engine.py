"""Ranking and filtering of job postings for a tutor.

This is the single matching implementation shared by the website's
recommended-jobs view and the notification bot's alert planning:
1. Score every job for the tutor (MatchScorer)
2. Attach human-readable match reasons
3. Stable-sort by score, highest first
4. Optionally keep only jobs at or above the recommendation threshold
"""

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional

from tutormatch.logging import get_logger

from .fuzzy import FuzzyMatcher
from .models import MatchResult
from .scoring import MatchScorer
from .vocabulary import DEFAULT_VOCABULARY, VocabularyTables

if TYPE_CHECKING:
    from tutormatch.config.models import AppConfig

logger = get_logger(__name__, component="matching")

# At least one full-weight dimension (subject or level) must match
DEFAULT_MIN_SCORE = 30
DEFAULT_RECOMMEND_LIMIT = 4


class JobMatcher:
    """Ranks and filters jobs for a tutor.

    Responsibilities:
    - Score each (job, tutor) pair and build its match reasons
    - Order jobs by score without disturbing ties
    - Select recommended jobs above a minimum score
    - Log ranking outcomes

    Instances hold no per-call state and can be shared across threads.
    """

    def __init__(
        self,
        vocabulary: Optional[VocabularyTables] = None,
        min_score: int = DEFAULT_MIN_SCORE,
        limit: int = DEFAULT_RECOMMEND_LIMIT,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize JobMatcher.

        Args:
            vocabulary: Alias tables for fuzzy matching (defaults to built-in tables)
            min_score: Minimum score for a job to be recommended
            limit: Default maximum number of recommended jobs
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY
        self.scorer = MatchScorer(FuzzyMatcher(self.vocabulary))
        self.min_score = min_score
        self.limit = limit
        self.logger = logger_instance or logger

    @classmethod
    def from_config(
        cls, app_config: "AppConfig", logger_instance: Optional[logging.Logger] = None
    ) -> "JobMatcher":
        """Build a matcher from application configuration."""
        return cls(
            vocabulary=app_config.build_vocabulary(),
            min_score=app_config.matching.min_score,
            limit=app_config.matching.recommend_limit,
            logger_instance=logger_instance,
        )

    def evaluate(self, job, tutor) -> MatchResult:
        """Score one job for one tutor."""
        breakdown = self.scorer.breakdown(job, tutor)
        result = MatchResult(
            job=job,
            score=breakdown.total,
            match_reasons=self.scorer.reasons(job, tutor),
            breakdown=breakdown,
        )

        self.logger.debug(
            "Job evaluated",
            extra={
                "event": "matching.job.evaluated",
                "job_id": getattr(job, "id", None),
                "tutor_id": getattr(tutor, "id", None),
                "score": result.score,
            },
        )
        return result

    def _ranked(self, jobs: Iterable, tutor) -> List[MatchResult]:
        results = [self.evaluate(job, tutor) for job in jobs]
        return sorted(results, key=lambda result: result.score, reverse=True)

    def _log_ranking(self, tutor, ranked: List[MatchResult], recommended_count: int) -> None:
        self.logger.info(
            "Ranked jobs for tutor",
            extra={
                "event": "matching.rank.completed",
                "tutor_id": getattr(tutor, "id", None),
                "job_count": len(ranked),
                "recommended_count": recommended_count,
                "top_score": ranked[0].score if ranked else None,
            },
        )

    def _qualifying(self, ranked: List[MatchResult]) -> List[MatchResult]:
        return [result for result in ranked if result.score >= self.min_score]

    def rank(self, jobs: Iterable, tutor) -> List[MatchResult]:
        """Score every job and sort by score, highest first.

        The sort is stable: jobs with equal scores keep their input order.
        The logged ``recommended_count`` is the number of jobs at or above
        the minimum score.

        Args:
            jobs: Jobs to rank
            tutor: Tutor whose preferences drive the scores

        Returns:
            One MatchResult per input job
        """
        ranked = self._ranked(jobs, tutor)
        self._log_ranking(tutor, ranked, len(self._qualifying(ranked)))
        return ranked

    def matching_jobs(self, jobs: Iterable, tutor) -> List[MatchResult]:
        """Ranked results at or above the minimum score, without truncation."""
        ranked = self._ranked(jobs, tutor)
        matches = self._qualifying(ranked)
        self._log_ranking(tutor, ranked, len(matches))
        return matches

    def recommend(self, jobs: Iterable, tutor, limit: Optional[int] = None) -> List[MatchResult]:
        """Return the best-scoring jobs above the minimum score.

        Args:
            jobs: Jobs to consider
            tutor: Tutor to recommend for
            limit: Maximum number of results (defaults to the matcher's limit)

        Returns:
            A prefix of the qualifying ranked results
        """
        if limit is None:
            limit = self.limit
        ranked = self._ranked(jobs, tutor)
        recommended = self._qualifying(ranked)[:limit]
        self._log_ranking(tutor, ranked, len(recommended))
        return recommended


_default_matcher = JobMatcher()


def rank(jobs: Iterable, tutor) -> List[MatchResult]:
    """Rank jobs for a tutor with the built-in vocabulary."""
    return _default_matcher.rank(jobs, tutor)


def recommend(jobs: Iterable, tutor, limit: Optional[int] = DEFAULT_RECOMMEND_LIMIT) -> List[MatchResult]:
    """Recommend up to ``limit`` jobs scoring at least 30 (``limit=None`` keeps all)."""
    if limit is None:
        return _default_matcher.matching_jobs(jobs, tutor)
    return _default_matcher.recommend(jobs, tutor, limit=limit)
