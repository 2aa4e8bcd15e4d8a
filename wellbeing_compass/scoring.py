from typing import List

from wellbeing_compass.catalog import ITEM_IDS_BY_CATEGORY, ITEMS_BY_ID, WELLBEING_CATEGORIES
from wellbeing_compass.errors import UnknownItemError
from wellbeing_compass.models import (
    MAX_SCORE,
    AssessmentData,
    CategoryPercentage,
    CategoryScore,
    ScoreKind,
)

SCORE_FIELDS = {
    ScoreKind.CURRENT: "current_score",
    ScoreKind.DESIRED: "desired_score",
}


# ---------------------------
# Score mutation
# ---------------------------
def update_score(record: AssessmentData, item_id: str, which: ScoreKind, value: int) -> None:
    """Overwrite one item's current or desired score. Values outside 1-10 fail validation."""
    if item_id not in ITEMS_BY_ID:
        raise UnknownItemError(item_id)

    field = SCORE_FIELDS[ScoreKind(which)]
    for score in record.item_scores:
        if score.item_id == item_id:
            setattr(score, field, value)
            return


def all_scored(record: AssessmentData, which: ScoreKind) -> bool:
    field = SCORE_FIELDS[ScoreKind(which)]
    return all(getattr(s, field) is not None for s in record.item_scores)


# ---------------------------
# Category aggregates
# ---------------------------
def _scores_in_category(record, category_id, field):
    item_ids = ITEM_IDS_BY_CATEGORY.get(category_id, [])
    return [
        getattr(s, field) for s in record.item_scores
        if s.item_id in item_ids and getattr(s, field) is not None
    ]


def calculate_percentage(scores, item_count):
    """
    Share of the category's maximum (10 per catalog item) reached so far.
    Unscored items add nothing to the sum but still count towards the
    maximum. None when nothing has been scored yet, so it never reads as 0%.
    """
    if not scores or item_count == 0:
        return None
    return sum(scores) / (MAX_SCORE * item_count) * 100


def calculate_average(scores):
    if not scores:
        return None
    return sum(scores) / len(scores)


def calculate_category_percentages(record: AssessmentData) -> List[CategoryPercentage]:
    rows = []
    for category in WELLBEING_CATEGORIES:
        current = _scores_in_category(record, category.id, "current_score")
        desired = _scores_in_category(record, category.id, "desired_score")
        item_count = len(ITEM_IDS_BY_CATEGORY.get(category.id, []))
        rows.append(CategoryPercentage(
            category_id=category.id,
            category_name=category.name,
            category_color=category.color,
            current_percentage=calculate_percentage(current, item_count),
            desired_percentage=calculate_percentage(desired, item_count),
        ))
    return rows


def calculate_category_scores(record: AssessmentData) -> List[CategoryScore]:
    rows = []
    for category in WELLBEING_CATEGORIES:
        current = _scores_in_category(record, category.id, "current_score")
        desired = _scores_in_category(record, category.id, "desired_score")
        rows.append(CategoryScore(
            category_id=category.id,
            category_name=category.name,
            category_color=category.color,
            current_average=calculate_average(current),
            desired_average=calculate_average(desired),
        ))
    return rows
