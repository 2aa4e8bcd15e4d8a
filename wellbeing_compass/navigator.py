from typing import Dict, NamedTuple

from wellbeing_compass.models import AssessmentData, AssessmentStage, ScoreKind
from wellbeing_compass.plan import plan_is_complete
from wellbeing_compass.scoring import all_scored


class StageDetails(NamedTuple):
    title: str
    description: str
    progress: int


STAGE_DETAILS: Dict[AssessmentStage, StageDetails] = {
    AssessmentStage.USER_INFO: StageDetails(
        "Informações Pessoais",
        "Por favor, preencha suas informações para começar.",
        0,
    ),
    AssessmentStage.CURRENT_SCORE: StageDetails(
        "Avalie seu Bem-Estar Atual (por Item)",
        "Clique em cada item da Roda do Bem-Estar para dar uma nota de 1 a 10 para sua satisfação atual.",
        17,
    ),
    AssessmentStage.DESIRED_SCORE: StageDetails(
        "Defina seu Bem-Estar Desejado (por Item)",
        "Agora, clique novamente em cada item para indicar a nota que você deseja alcançar (1 a 10).",
        34,
    ),
    AssessmentStage.SELECT_ITEMS: StageDetails(
        "Selecione Itens para Melhorar",
        "Selecione até 3 itens para melhorar clicando no gráfico.",
        51,
    ),
    AssessmentStage.DEFINE_ACTIONS: StageDetails(
        "Defina seu Plano de Ação",
        "Para cada item selecionado, defina pelo menos uma ação com descrição e data de conclusão.",
        68,
    ),
    AssessmentStage.SUMMARY: StageDetails(
        "Resumo da Avaliação",
        "Revise sua avaliação e plano de ação. Você pode imprimir esta página.",
        100,
    ),
}

# Stages reachable with the back/next buttons. userInfo is only left by
# submitting the form and summary only entered by submitting the plan.
_WIZARD_ORDER = [
    AssessmentStage.USER_INFO,
    AssessmentStage.CURRENT_SCORE,
    AssessmentStage.DESIRED_SCORE,
    AssessmentStage.SELECT_ITEMS,
    AssessmentStage.DEFINE_ACTIONS,
]


def go_to(record: AssessmentData, stage: AssessmentStage) -> None:
    """Unconditional: gating is checked by the caller before asking to move."""
    record.stage = AssessmentStage(stage)


def stage_details(stage: AssessmentStage) -> StageDetails:
    return STAGE_DETAILS[AssessmentStage(stage)]


def previous_stage(stage: AssessmentStage):
    stage = AssessmentStage(stage)
    if stage not in _WIZARD_ORDER:
        return None
    idx = _WIZARD_ORDER.index(stage)
    return _WIZARD_ORDER[idx - 1] if idx > 0 else None


def next_stage(stage: AssessmentStage):
    stage = AssessmentStage(stage)
    if stage not in _WIZARD_ORDER or stage == AssessmentStage.USER_INFO:
        return None
    idx = _WIZARD_ORDER.index(stage)
    return _WIZARD_ORDER[idx + 1] if idx + 1 < len(_WIZARD_ORDER) else None


def can_leave_stage(record: AssessmentData) -> bool:
    """Whether the forward action of the current stage should be enabled."""
    match record.stage:
        case AssessmentStage.USER_INFO:
            return record.user_info is not None
        case AssessmentStage.CURRENT_SCORE:
            return all_scored(record, ScoreKind.CURRENT)
        case AssessmentStage.DESIRED_SCORE:
            return all_scored(record, ScoreKind.DESIRED)
        case AssessmentStage.SELECT_ITEMS:
            return len(record.improvement_items) > 0
        case AssessmentStage.DEFINE_ACTIONS:
            return plan_is_complete(record)
        case AssessmentStage.SUMMARY:
            return True
