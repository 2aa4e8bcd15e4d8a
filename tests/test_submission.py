from unittest.mock import MagicMock, patch

import pytest

from tests.conftest import score_everything
from wellbeing_compass.catalog import WELLBEING_ITEMS
from wellbeing_compass.client import AssessmentApiClient
from wellbeing_compass.errors import (
    ExternalCallFailure,
    IncompleteAssessmentError,
    IncompletenessReason,
    MissingUserInfoError,
)
from wellbeing_compass.models import AssessmentStage, ScoreKind


def test_missing_user_info_redirects_and_skips_notifier(session, notifier):
    score_everything(session)
    session.go_to_stage("defineActions")

    with pytest.raises(MissingUserInfoError):
        session.submit_assessment()

    assert session.data.stage == AssessmentStage.USER_INFO
    notifier.notify.assert_not_called()


def test_missing_current_scores_redirects_first(session, notifier, user_info):
    session.update_user_info(user_info)
    session.go_to_stage("defineActions")

    with pytest.raises(IncompleteAssessmentError) as exc:
        session.submit_assessment()

    assert session.data.stage == AssessmentStage.CURRENT_SCORE
    assert exc.value.reasons == [
        IncompletenessReason.CURRENT_SCORES,
        IncompletenessReason.DESIRED_SCORES,
        IncompletenessReason.NO_ITEMS_SELECTED,
    ]
    notifier.notify.assert_not_called()


def test_missing_desired_score_redirects_to_desired(session, user_info):
    session.update_user_info(user_info)
    for item in WELLBEING_ITEMS:
        session.update_score(item.id, ScoreKind.CURRENT, 5)
    session.go_to_stage("summary")

    with pytest.raises(IncompleteAssessmentError):
        session.submit_assessment()
    assert session.data.stage == AssessmentStage.DESIRED_SCORE


def test_no_selection_redirects_to_select_items(session, user_info):
    session.update_user_info(user_info)
    score_everything(session)

    with pytest.raises(IncompleteAssessmentError) as exc:
        session.submit_assessment()
    assert exc.value.reasons == [IncompletenessReason.NO_ITEMS_SELECTED]
    assert session.data.stage == AssessmentStage.SELECT_ITEMS


def test_partial_action_redirects_to_define_actions(ready_session, notifier):
    ready_session.update_action_text("fisica", 2, "Walk")

    with pytest.raises(IncompleteAssessmentError) as exc:
        ready_session.submit_assessment()
    assert exc.value.reasons == [IncompletenessReason.ACTIONS_INCOMPLETE]
    assert ready_session.data.stage == AssessmentStage.DEFINE_ACTIONS
    notifier.notify.assert_not_called()


def test_successful_submit_moves_to_summary(ready_session, notifier):
    receipt = ready_session.submit_assessment()

    assert ready_session.data.stage == AssessmentStage.SUMMARY
    notifier.notify.assert_called_once_with(receipt.payload)
    assert receipt.payload.full_name == "Maria Silva"
    assert receipt.doc_id is None

    item_lines = [line for line in receipt.payload.assessment_results.splitlines() if "Atual 5" in line]
    assert len(item_lines) == len(WELLBEING_ITEMS)
    assert "Exercise" in receipt.payload.action_plan
    assert "01/01/2024" in receipt.payload.action_plan


def test_notifier_failure_leaves_record_untouched(ready_session, notifier):
    notifier.notify.side_effect = RuntimeError("smtp down")
    before = ready_session.data.model_copy(deep=True)

    with pytest.raises(ExternalCallFailure) as exc:
        ready_session.submit_assessment()

    assert isinstance(exc.value.cause, RuntimeError)
    assert ready_session.data == before

    # Retry is safe once the collaborator recovers
    notifier.notify.side_effect = None
    ready_session.submit_assessment()
    assert ready_session.data.stage == AssessmentStage.SUMMARY


def test_persistence_receives_record_after_success(ready_session):
    persistence = MagicMock()
    persistence.submit.return_value = "doc-1"
    ready_session.persistence = persistence

    receipt = ready_session.submit_assessment()

    assert receipt.doc_id == "doc-1"
    persistence.submit.assert_called_once_with(ready_session.data)


def test_persistence_failure_does_not_block_summary(ready_session):
    persistence = MagicMock()
    persistence.submit.side_effect = ExternalCallFailure("offline")
    ready_session.persistence = persistence

    receipt = ready_session.submit_assessment()

    assert receipt.doc_id is None
    assert ready_session.data.stage == AssessmentStage.SUMMARY


@pytest.mark.parametrize("body", [{"success": True}, [1]])
@patch("wellbeing_compass.client.requests.post")
def test_malformed_save_response_does_not_block_summary(mock_post, ready_session, notifier, body):
    mock_post.return_value = MagicMock(ok=True, status_code=200, json=MagicMock(return_value=body))
    ready_session.persistence = AssessmentApiClient(base_url="http://api.test")

    receipt = ready_session.submit_assessment()

    assert receipt.doc_id is None
    assert ready_session.data.stage == AssessmentStage.SUMMARY
    notifier.notify.assert_called_once()
