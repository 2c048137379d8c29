"""Alert message rendering using Jinja2.

Messages are produced in the HTML subset accepted by chat clients
(<b>, <i>, <code>), so values are auto-escaped.
"""

import logging
from typing import Any, Dict

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from .models import AlertTemplateError, TutorAlert

logger = logging.getLogger(__name__)


class AlertRenderer:
    """Renders TutorAlert instances into chat message text."""

    def __init__(self, template_dir: str = "alert_templates", template_name: str = "job_alert.html.j2"):
        """Initialize the renderer.

        Args:
            template_dir: Directory name within the tutormatch.alerts package
            template_name: Filename of the alert template
        """
        self.template_name = template_name
        self.env = Environment(
            loader=PackageLoader("tutormatch.alerts", template_dir),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def build_context(self, alert: TutorAlert) -> Dict[str, Any]:
        jobs = []
        for match in alert.matches:
            job = match.job
            jobs.append({
                "id": job.id,
                "subject": job.subject,
                "level": job.level,
                "rate": job.rate,
                "location": job.location,
                "schedule": job.schedule,
                "lessons_per_week": job.lessons_per_week,
                "score": match.score,
                "match_reasons": match.match_reasons,
            })

        return {
            "tutor_name": alert.tutor.name,
            "jobs": jobs,
            "total_matches": alert.total_matches,
            "overflow_count": alert.overflow_count,
        }

    def render(self, alert: TutorAlert) -> str:
        """Render an alert message.

        Raises:
            AlertTemplateError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(self.template_name)
            text = template.render(self.build_context(alert))
        except TemplateError as e:
            error_msg = f"Alert template rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise AlertTemplateError(error_msg) from e

        return text.strip()
