"""New-job alert planning and message rendering for the notification bot.

This module provides:
- JobAlertPlanner: picks which new jobs to push to which tutors
- TutorAlert: jobs selected for one tutor, with overflow tracking
- AlertRenderer: Jinja2 rendering of alert messages
"""

from .models import AlertError, AlertTemplateError, TutorAlert
from .service import DEFAULT_MAX_JOBS_PER_ALERT, JobAlertPlanner
from .templates import AlertRenderer

__all__ = [
    "JobAlertPlanner",
    "TutorAlert",
    "AlertRenderer",
    "AlertError",
    "AlertTemplateError",
    "DEFAULT_MAX_JOBS_PER_ALERT",
]
