"""New-job alert planning for the notification bot.

Each alert cycle the bot fetches jobs posted since its last check and the
tutors who want alerts. The planner decides, per tutor, which of those new jobs
to push, using the same JobMatcher as the website. Delivery, deduplication of
already-sent jobs and scheduling belong to the bot.
"""

import logging
from typing import Iterable, List, Optional

from tutormatch.domain.models import Tutor
from tutormatch.logging import get_logger, log_context
from tutormatch.matching.engine import JobMatcher

from .models import TutorAlert
from .templates import AlertRenderer

logger = get_logger(__name__, component="alerts")

DEFAULT_MAX_JOBS_PER_ALERT = 5
OPEN_STATUS = "Open"


def is_open(job) -> bool:
    """Only open postings are pushed; filled or closed ones are skipped."""
    return getattr(job, "status", OPEN_STATUS) == OPEN_STATUS


class JobAlertPlanner:
    """Selects which newly posted jobs to push to which tutors.

    Responsibilities:
    - Skip tutors who disabled notifications or have no linked chat account
    - Skip jobs that are no longer open
    - Keep only jobs at or above the matcher's recommendation threshold
    - Cap the jobs listed per alert, remembering how many were left out
    - Render alert messages
    """

    def __init__(
        self,
        matcher: Optional[JobMatcher] = None,
        max_jobs_per_alert: int = DEFAULT_MAX_JOBS_PER_ALERT,
        renderer: Optional[AlertRenderer] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize JobAlertPlanner.

        Args:
            matcher: Shared JobMatcher (defaults to one with built-in settings)
            max_jobs_per_alert: Jobs listed per alert before the overflow note
            renderer: Message renderer (defaults to AlertRenderer)
            logger_instance: Optional logger instance (defaults to module logger)
        """
        if max_jobs_per_alert < 1:
            raise ValueError("max_jobs_per_alert must be at least 1")

        self.matcher = matcher or JobMatcher()
        self.max_jobs_per_alert = max_jobs_per_alert
        self.renderer = renderer or AlertRenderer()
        self.logger = logger_instance or logger

    @classmethod
    def from_config(cls, app_config, matcher: Optional[JobMatcher] = None) -> "JobAlertPlanner":
        """Build a planner from an AppConfig, sharing ``matcher`` when given."""
        return cls(
            matcher=matcher or JobMatcher.from_config(app_config),
            max_jobs_per_alert=app_config.alerts.max_jobs_per_alert,
        )

    def wants_alerts(self, tutor: Tutor) -> bool:
        return tutor.notifications_enabled and bool(tutor.telegram_id)

    def plan_for_tutor(self, new_jobs: List, tutor: Tutor) -> Optional[TutorAlert]:
        """Build the alert for one tutor, or None when nothing should be sent."""
        if not self.wants_alerts(tutor):
            self.logger.debug(
                "Tutor skipped for alerts",
                extra={"event": "alerts.tutor.skipped", "reason": "notifications_off_or_unlinked"},
            )
            return None

        open_jobs = [job for job in new_jobs if is_open(job)]
        matches = self.matcher.matching_jobs(open_jobs, tutor)
        if not matches:
            return None

        return TutorAlert(
            tutor=tutor,
            matches=matches[: self.max_jobs_per_alert],
            total_matches=len(matches),
        )

    def plan(self, new_jobs: Iterable, tutors: Iterable[Tutor]) -> List[TutorAlert]:
        """Plan alerts for every tutor, in tutor order.

        Args:
            new_jobs: Jobs posted since the last alert cycle
            tutors: Candidate tutors

        Returns:
            One TutorAlert per tutor with at least one matching new job
        """
        jobs = list(new_jobs)
        alerts: List[TutorAlert] = []
        tutor_count = 0

        for tutor in tutors:
            tutor_count += 1
            with log_context(tutor_id=tutor.id):
                alert = self.plan_for_tutor(jobs, tutor)
            if alert is not None:
                alerts.append(alert)

        self.logger.info(
            "Alert plan completed",
            extra={
                "event": "alerts.plan.completed",
                "new_job_count": len(jobs),
                "tutor_count": tutor_count,
                "alert_count": len(alerts),
            },
        )
        return alerts

    def render(self, alert: TutorAlert) -> str:
        """Render the chat message for ``alert``."""
        return self.renderer.render(alert)
