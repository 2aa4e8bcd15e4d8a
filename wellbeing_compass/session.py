from datetime import date

from wellbeing_compass import navigator, plan, scoring
from wellbeing_compass.catalog import initial_item_scores
from wellbeing_compass.models import AssessmentData, AssessmentStage, ScoreKind, UserInfo
from wellbeing_compass.notifier import LoggingNotifier
from wellbeing_compass.submission import submit_assessment


def new_assessment() -> AssessmentData:
    return AssessmentData(
        user_info=None,
        item_scores=initial_item_scores(),
        improvement_items=[],
        stage=AssessmentStage.USER_INFO,
    )


class AssessmentSession:
    """
    Owns one user's assessment record. Every change goes through the
    methods below; `data` is meant to be read, not written.
    """

    def __init__(self, notifier=None, persistence=None):
        self.data = new_assessment()
        self.notifier = notifier or LoggingNotifier()
        self.persistence = persistence

    # ---------------- User info / navigation ----------------

    def update_user_info(self, info: UserInfo):
        self.data.user_info = info
        navigator.go_to(self.data, AssessmentStage.CURRENT_SCORE)

    def go_to_stage(self, stage: AssessmentStage):
        navigator.go_to(self.data, stage)

    def go_back(self):
        stage = navigator.previous_stage(self.data.stage)
        if stage is not None:
            navigator.go_to(self.data, stage)

    def go_next(self) -> bool:
        """Moves forward only when the current stage is done."""
        stage = navigator.next_stage(self.data.stage)
        if stage is None or not navigator.can_leave_stage(self.data):
            return False
        navigator.go_to(self.data, stage)
        return True

    def can_leave_stage(self) -> bool:
        return navigator.can_leave_stage(self.data)

    def stage_details(self):
        return navigator.stage_details(self.data.stage)

    # ---------------- Scores ----------------

    def update_score(self, item_id: str, which: ScoreKind, value: int):
        scoring.update_score(self.data, item_id, which, value)

    def calculate_category_percentages(self):
        return scoring.calculate_category_percentages(self.data)

    def calculate_category_scores(self):
        return scoring.calculate_category_scores(self.data)

    # ---------------- Improvement plan ----------------

    def select_item(self, item_id: str):
        return plan.select_item(self.data, item_id)

    def deselect_item(self, item_id: str):
        plan.deselect_item(self.data, item_id)

    def is_selected(self, item_id: str) -> bool:
        return plan.is_selected(self.data, item_id)

    def get_actions_for_item(self, item_id: str):
        return plan.get_actions_for_item(self.data, item_id)

    def update_action_text(self, item_id: str, slot_index: int, text: str):
        plan.update_action_text(self.data, item_id, slot_index, text)

    def update_action_date(self, item_id: str, slot_index: int, completion_date: date | None):
        plan.update_action_date(self.data, item_id, slot_index, completion_date)

    def clear_action(self, item_id: str, slot_index: int):
        plan.clear_action(self.data, item_id, slot_index)

    def plan_is_complete(self) -> bool:
        return plan.plan_is_complete(self.data)

    # ---------------- Submit / restart ----------------

    def submit_assessment(self):
        return submit_assessment(self.data, self.notifier, self.persistence)

    def reset_assessment(self):
        self.data = new_assessment()
