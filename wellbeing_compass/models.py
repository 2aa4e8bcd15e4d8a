from datetime import date
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ACTION_SLOTS = 3
MAX_IMPROVEMENT_ITEMS = 3
MIN_SCORE = 1
MAX_SCORE = 10


class CamelModel(BaseModel):
    """Serialises to the camelCase keys the browser and the document store use."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------- Enums ----------------

class CategoryId(str, Enum):
    CAREER = "career"
    SOCIAL = "social"
    FINANCIAL = "financial"
    PHYSICAL = "physical"
    COMMUNITY = "community"


class AssessmentStage(str, Enum):
    USER_INFO = "userInfo"
    CURRENT_SCORE = "currentScore"
    DESIRED_SCORE = "desiredScore"
    SELECT_ITEMS = "selectItems"
    DEFINE_ACTIONS = "defineActions"
    SUMMARY = "summary"


class ScoreKind(str, Enum):
    CURRENT = "current"
    DESIRED = "desired"


class SelectionOutcome(str, Enum):
    ADDED = "added"
    ALREADY_SELECTED = "already_selected"
    CAP_REACHED = "cap_reached"


# ---------------- Catalog ----------------

class WellbeingCategory(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: CategoryId
    name: str
    color: str


class WellbeingItem(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category_id: CategoryId
    description: str | None = None


# ---------------- Session record ----------------

class UserInfo(CamelModel):
    full_name: str = Field(min_length=2)
    job_title: str = Field(min_length=2)
    company: str = Field(min_length=2)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str = Field(min_length=10, pattern=r"^\+?[0-9\s\-()]+$")


class ItemScore(CamelModel):
    model_config = ConfigDict(validate_assignment=True)

    item_id: str
    current_score: int | None = Field(default=None, ge=MIN_SCORE, le=MAX_SCORE)
    desired_score: int | None = Field(default=None, ge=MIN_SCORE, le=MAX_SCORE)


class ActionItem(CamelModel):
    id: str
    text: str = ""
    completion_date: date | None = None

    def is_filled(self) -> bool:
        return self.text.strip() != "" and self.completion_date is not None

    def is_partial(self) -> bool:
        return self.text.strip() != "" and self.completion_date is None


ActionSlots = Tuple[ActionItem, ActionItem, ActionItem]


class ImprovementItem(CamelModel):
    item_id: str
    actions: ActionSlots


class AssessmentData(CamelModel):
    user_info: UserInfo | None = None
    item_scores: List[ItemScore]
    improvement_items: List[ImprovementItem] = []
    stage: AssessmentStage = AssessmentStage.USER_INFO


# ---------------- Derived rows ----------------

class CategoryPercentage(CamelModel):
    category_id: CategoryId
    category_name: str
    category_color: str
    current_percentage: float | None
    desired_percentage: float | None


class CategoryScore(CamelModel):
    category_id: CategoryId
    category_name: str
    category_color: str
    current_average: float | None
    desired_average: float | None


# ---------------- Collaborator payloads ----------------

class NotificationPayload(CamelModel):
    full_name: str
    job_title: str
    company: str
    email: str
    phone: str
    assessment_results: str
    action_plan: str


class SubmissionReceipt(CamelModel):
    payload: NotificationPayload
    doc_id: str | None = None


class SaveResponse(CamelModel):
    success: bool
    doc_id: str


class SaveErrorResponse(CamelModel):
    success: bool = False
    error: str
    details: str
