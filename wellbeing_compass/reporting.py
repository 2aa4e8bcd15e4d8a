from wellbeing_compass.catalog import get_category_for_item, get_item
from wellbeing_compass.models import AssessmentData, NotificationPayload
from wellbeing_compass.scoring import calculate_category_percentages

NOT_AVAILABLE = "N/A"
NO_PLAN_TEXT = "Nenhum item selecionado para melhoria ou plano de ação definido."


def _fmt(value):
    return NOT_AVAILABLE if value is None else str(value)


def _fmt_percentage(value):
    return NOT_AVAILABLE if value is None else f"{value:.0f}%"


def format_assessment_results(record: AssessmentData) -> str:
    """
    Returns formatted string of:
    Category percentages
    Per item: current, desired and difference
    """
    result = ["Resultados da Roda do Bem-Estar:", ""]

    result.append("--- Percentuais por Categoria ---")
    for row in calculate_category_percentages(record):
        result.append(f"{row.category_name}:")
        result.append(f"  - Percentual Atual: {_fmt_percentage(row.current_percentage)}")
        result.append(f"  - Percentual Desejado: {_fmt_percentage(row.desired_percentage)}")
        result.append("")

    result.append("--- Pontuações por Item ---")
    for score in record.item_scores:
        item = get_item(score.item_id)
        category = get_category_for_item(score.item_id)
        difference = None
        if score.current_score is not None and score.desired_score is not None:
            difference = score.desired_score - score.current_score

        result.append(f"{item.name} ({category.name}): "
                      f"Atual {_fmt(score.current_score)} | "
                      f"Desejada {_fmt(score.desired_score)} | "
                      f"Diferença {_fmt(difference)}")

    return "\n".join(result)


def format_action_plan(record: AssessmentData) -> str:
    if not record.improvement_items:
        return NO_PLAN_TEXT

    result = ["Plano de Ação:", ""]
    for improvement in record.improvement_items:
        item = get_item(improvement.item_id)
        category = get_category_for_item(improvement.item_id)
        result.append(f"Item: {item.name} ({category.name})")

        for idx, action in enumerate(improvement.actions, start=1):
            if action.text.strip() == "" and action.completion_date is None:
                continue
            due = action.completion_date.strftime("%d/%m/%Y") if action.completion_date else "(Data não definida)"
            result.append(f"  Ação {idx}: {action.text or '(Ação não definida)'}")
            result.append(f"    Data de Conclusão: {due}")

        result.append("")

    return "\n".join(result)


def build_notification_payload(record: AssessmentData) -> NotificationPayload:
    user = record.user_info
    return NotificationPayload(
        full_name=user.full_name,
        job_title=user.job_title,
        company=user.company,
        email=user.email,
        phone=user.phone,
        assessment_results=format_assessment_results(record),
        action_plan=format_action_plan(record),
    )
