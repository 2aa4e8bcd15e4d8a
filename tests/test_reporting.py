from datetime import date

from wellbeing_compass.catalog import WELLBEING_ITEMS
from wellbeing_compass.models import ScoreKind
from wellbeing_compass.plan import select_item, update_action_date, update_action_text
from wellbeing_compass.reporting import NO_PLAN_TEXT, format_action_plan, format_assessment_results
from wellbeing_compass.scoring import update_score
from wellbeing_compass.session import new_assessment


def test_results_use_placeholders_for_missing_scores():
    record = new_assessment()
    update_score(record, "trabalho", ScoreKind.CURRENT, 4)
    update_score(record, "trabalho", ScoreKind.DESIRED, 9)
    update_score(record, "familia", ScoreKind.CURRENT, 6)

    lines = format_assessment_results(record).splitlines()

    assert "Trabalho (Carreira): Atual 4 | Desejada 9 | Diferença 5" in lines
    assert "Família (Social): Atual 6 | Desejada N/A | Diferença N/A" in lines
    assert "Conexão (Comunitário): Atual N/A | Desejada N/A | Diferença N/A" in lines
    assert sum(1 for line in lines if "| Diferença" in line) == len(WELLBEING_ITEMS)


def test_results_include_category_percentages():
    record = new_assessment()
    update_score(record, "controle", ScoreKind.CURRENT, 10)
    update_score(record, "recursos", ScoreKind.CURRENT, 5)

    text = format_assessment_results(record)

    assert "Financeiro:\n  - Percentual Atual: 75%\n  - Percentual Desejado: N/A" in text


def test_empty_plan_text():
    assert format_action_plan(new_assessment()) == NO_PLAN_TEXT


def test_action_plan_lists_only_filled_slots():
    record = new_assessment()
    select_item(record, "amigos")
    update_action_text(record, "amigos", 0, "Call Ana")
    update_action_date(record, "amigos", 0, date(2025, 7, 9))
    update_action_date(record, "amigos", 2, date(2025, 8, 1))

    lines = format_action_plan(record).splitlines()

    assert "Item: Amigos (Social)" in lines
    assert "  Ação 1: Call Ana" in lines
    assert "    Data de Conclusão: 09/07/2025" in lines
    assert not any(line.startswith("  Ação 2") for line in lines)
    assert "  Ação 3: (Ação não definida)" in lines


def test_action_plan_marks_missing_date():
    record = new_assessment()
    select_item(record, "amigos")
    update_action_text(record, "amigos", 1, "Dinner")
    assert "    Data de Conclusão: (Data não definida)" in format_action_plan(record).splitlines()
