import itertools
import logging
import uuid
from datetime import date

from wellbeing_compass.catalog import ITEMS_BY_ID
from wellbeing_compass.errors import OutOfRangeError, UnknownItemError
from wellbeing_compass.models import (
    ACTION_SLOTS,
    MAX_IMPROVEMENT_ITEMS,
    ActionItem,
    AssessmentData,
    ImprovementItem,
    SelectionOutcome,
)

logger = logging.getLogger(__name__)

_action_counter = itertools.count(1)


def generate_action_id(item_id: str, index: int) -> str:
    return f"{item_id}-action-{index}-{next(_action_counter)}-{uuid.uuid4().hex[:5]}"


def _find(record: AssessmentData, item_id: str):
    for improvement in record.improvement_items:
        if improvement.item_id == item_id:
            return improvement
    return None


def _find_slot(record, item_id, slot_index):
    improvement = _find(record, item_id)
    if improvement is None or not 0 <= slot_index < ACTION_SLOTS:
        return None
    return improvement.actions[slot_index]


# ---------------------------
# Selection
# ---------------------------
def is_selected(record: AssessmentData, item_id: str) -> bool:
    return _find(record, item_id) is not None


def select_item(record: AssessmentData, item_id: str) -> SelectionOutcome:
    if item_id not in ITEMS_BY_ID:
        raise UnknownItemError(item_id)
    if is_selected(record, item_id):
        return SelectionOutcome.ALREADY_SELECTED
    if len(record.improvement_items) >= MAX_IMPROVEMENT_ITEMS:
        logger.info("Selection cap reached, ignoring %s", item_id)
        return SelectionOutcome.CAP_REACHED

    actions = tuple(ActionItem(id=generate_action_id(item_id, i)) for i in range(ACTION_SLOTS))
    record.improvement_items.append(ImprovementItem(item_id=item_id, actions=actions))
    return SelectionOutcome.ADDED


def deselect_item(record: AssessmentData, item_id: str) -> None:
    record.improvement_items = [ii for ii in record.improvement_items if ii.item_id != item_id]


# ---------------------------
# Action slots
# ---------------------------
def get_actions_for_item(record: AssessmentData, item_id: str):
    improvement = _find(record, item_id)
    return improvement.actions if improvement else ()


def get_action(record: AssessmentData, item_id: str, slot_index: int) -> ActionItem:
    """Strict accessor: raises instead of ignoring a bad reference."""
    improvement = _find(record, item_id)
    if improvement is None:
        raise UnknownItemError(item_id)
    if not 0 <= slot_index < ACTION_SLOTS:
        raise OutOfRangeError(slot_index)
    return improvement.actions[slot_index]


def update_action_text(record: AssessmentData, item_id: str, slot_index: int, text: str) -> None:
    action = _find_slot(record, item_id, slot_index)
    if action is not None:
        action.text = text


def update_action_date(record: AssessmentData, item_id: str, slot_index: int, completion_date: date | None) -> None:
    action = _find_slot(record, item_id, slot_index)
    if action is not None:
        action.completion_date = completion_date


def clear_action(record: AssessmentData, item_id: str, slot_index: int) -> None:
    # The slot stays in place; only its contents are reset
    action = _find_slot(record, item_id, slot_index)
    if action is not None:
        action.text = ""
        action.completion_date = None


# ---------------------------
# Completeness
# ---------------------------
def item_plan_is_complete(improvement: ImprovementItem) -> bool:
    return (
        any(a.is_filled() for a in improvement.actions)
        and not any(a.is_partial() for a in improvement.actions)
    )


def plan_is_complete(record: AssessmentData) -> bool:
    if not record.improvement_items:
        return False
    return all(item_plan_is_complete(ii) for ii in record.improvement_items)
