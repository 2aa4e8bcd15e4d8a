from datetime import date
from unittest.mock import MagicMock

import pytest

from wellbeing_compass.catalog import WELLBEING_ITEMS
from wellbeing_compass.models import ScoreKind, UserInfo
from wellbeing_compass.session import AssessmentSession


@pytest.fixture
def user_info():
    return UserInfo(
        full_name="Maria Silva",
        job_title="Gerente",
        company="Acme",
        email="maria@example.com",
        phone="(11) 99999-0000",
    )


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def session(notifier):
    return AssessmentSession(notifier=notifier)


def score_everything(session, current=5, desired=8):
    for item in WELLBEING_ITEMS:
        session.update_score(item.id, ScoreKind.CURRENT, current)
        session.update_score(item.id, ScoreKind.DESIRED, desired)


@pytest.fixture
def ready_session(session, user_info):
    """All scores set, one item selected with one complete action."""
    session.update_user_info(user_info)
    score_everything(session)
    session.select_item("fisica")
    session.update_action_text("fisica", 0, "Exercise")
    session.update_action_date("fisica", 0, date(2024, 1, 1))
    session.go_to_stage("defineActions")
    return session
