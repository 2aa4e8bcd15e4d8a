from enum import Enum


class AssessmentError(Exception):
    """Base class for wellbeing assessment errors."""


class UnknownItemError(AssessmentError):
    def __init__(self, item_id):
        super().__init__(f"Unknown wellbeing item: {item_id}")
        self.item_id = item_id


class OutOfRangeError(AssessmentError):
    def __init__(self, slot_index):
        super().__init__(f"Action slot index out of range: {slot_index}")
        self.slot_index = slot_index


class MissingUserInfoError(AssessmentError):
    def __init__(self):
        super().__init__("User information is missing")


class IncompletenessReason(str, Enum):
    CURRENT_SCORES = "current_scores"
    DESIRED_SCORES = "desired_scores"
    NO_ITEMS_SELECTED = "no_items_selected"
    ACTIONS_INCOMPLETE = "actions_incomplete"


class IncompleteAssessmentError(AssessmentError):
    def __init__(self, reasons):
        self.reasons = list(reasons)
        super().__init__("Incomplete assessment: " + ", ".join(r.value for r in self.reasons))


class ExternalCallFailure(AssessmentError):
    """A notification or persistence call failed. `cause` holds the original error."""

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause
