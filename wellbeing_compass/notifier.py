import logging
from typing import Protocol

from wellbeing_compass import config
from wellbeing_compass.models import NotificationPayload

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, payload: NotificationPayload) -> None:
        """Deliver the payload or raise."""


class LoggingNotifier:
    """Stands in for the coach e-mail; writes the report to the log."""

    def __init__(self, recipient: str = config.COACH_EMAIL):
        self.recipient = recipient

    def notify(self, payload: NotificationPayload) -> None:
        logger.info(
            "Assessment report for %s",
            self.recipient,
            extra={
                "from_user": payload.full_name,
                "from_email": payload.email,
                "company": payload.company,
                "job_title": payload.job_title,
                "phone": payload.phone,
            },
        )
        logger.info("Assessment results:\n%s", payload.assessment_results)
        logger.info("Action plan:\n%s", payload.action_plan)
