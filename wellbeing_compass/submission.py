import logging

from wellbeing_compass.errors import (
    ExternalCallFailure,
    IncompleteAssessmentError,
    IncompletenessReason,
    MissingUserInfoError,
)
from wellbeing_compass.models import AssessmentData, AssessmentStage, ScoreKind, SubmissionReceipt
from wellbeing_compass.navigator import go_to
from wellbeing_compass.plan import item_plan_is_complete
from wellbeing_compass.reporting import build_notification_payload
from wellbeing_compass.scoring import all_scored

logger = logging.getLogger(__name__)

# Where to send the user back for each failed check, first match wins
REDIRECTS = [
    (IncompletenessReason.CURRENT_SCORES, AssessmentStage.CURRENT_SCORE),
    (IncompletenessReason.DESIRED_SCORES, AssessmentStage.DESIRED_SCORE),
    (IncompletenessReason.NO_ITEMS_SELECTED, AssessmentStage.SELECT_ITEMS),
    (IncompletenessReason.ACTIONS_INCOMPLETE, AssessmentStage.DEFINE_ACTIONS),
]


def find_incomplete(record: AssessmentData):
    reasons = []
    if not all_scored(record, ScoreKind.CURRENT):
        reasons.append(IncompletenessReason.CURRENT_SCORES)
    if not all_scored(record, ScoreKind.DESIRED):
        reasons.append(IncompletenessReason.DESIRED_SCORES)
    if not record.improvement_items:
        reasons.append(IncompletenessReason.NO_ITEMS_SELECTED)
    if not all(item_plan_is_complete(ii) for ii in record.improvement_items):
        reasons.append(IncompletenessReason.ACTIONS_INCOMPLETE)
    return reasons


def submit_assessment(record: AssessmentData, notifier, persistence=None) -> SubmissionReceipt:
    """
    Validate the whole record, send the report to the notifier and move to
    the summary. Validation failures redirect the stage and raise; a notifier
    failure raises ExternalCallFailure and leaves the record untouched.
    `persistence` receives the record afterwards as a best-effort audit write.
    """
    if record.user_info is None:
        go_to(record, AssessmentStage.USER_INFO)
        raise MissingUserInfoError()

    reasons = find_incomplete(record)
    if reasons:
        for reason, stage in REDIRECTS:
            if reason in reasons:
                go_to(record, stage)
                break
        raise IncompleteAssessmentError(reasons)

    payload = build_notification_payload(record)

    try:
        notifier.notify(payload)
    except Exception as e:
        logger.error("Sending assessment failed: %s", e)
        raise ExternalCallFailure("Sending assessment failed", cause=e) from e

    go_to(record, AssessmentStage.SUMMARY)

    doc_id = None
    if persistence is not None:
        try:
            doc_id = persistence.submit(record)
        except ExternalCallFailure as e:
            # Audit write only, never blocks the summary
            logger.warning("Assessment persistence failed: %s", e)

    return SubmissionReceipt(payload=payload, doc_id=doc_id)
