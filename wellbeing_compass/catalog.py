from typing import Dict, List

from wellbeing_compass.models import CategoryId, ItemScore, WellbeingCategory, WellbeingItem

# ---------------------------
# Wellbeing categories
# ---------------------------
WELLBEING_CATEGORIES: List[WellbeingCategory] = [
    WellbeingCategory(id=CategoryId.CAREER, name="Carreira", color="hsl(var(--chart-1))"),
    WellbeingCategory(id=CategoryId.SOCIAL, name="Social", color="hsl(var(--chart-2))"),
    WellbeingCategory(id=CategoryId.FINANCIAL, name="Financeiro", color="hsl(var(--chart-3))"),
    WellbeingCategory(id=CategoryId.PHYSICAL, name="Saúde", color="hsl(var(--chart-4))"),
    WellbeingCategory(id=CategoryId.COMMUNITY, name="Comunitário", color="hsl(var(--chart-5))"),
]

# ---------------------------
# Wellbeing items, clockwise from the top of the wheel
# ---------------------------
WELLBEING_ITEMS: List[WellbeingItem] = [
    WellbeingItem(id="trabalho", name="Trabalho", category_id=CategoryId.CAREER,
                  description="Satisfação com sua ocupação principal e ambiente de trabalho."),
    WellbeingItem(id="desenvolvimento", name="Desenvolvimento Intelectual", category_id=CategoryId.CAREER,
                  description="Aprendizado contínuo e crescimento de habilidades."),
    WellbeingItem(id="realizacao", name="Realização e Propósito", category_id=CategoryId.CAREER,
                  description="Sentimento de significado e contribuição através do seu trabalho ou vocação."),
    WellbeingItem(id="familia", name="Família", category_id=CategoryId.SOCIAL,
                  description="Qualidade dos relacionamentos com membros da família."),
    WellbeingItem(id="amigos", name="Amigos", category_id=CategoryId.SOCIAL,
                  description="Conexões sociais e suporte de amigos."),
    WellbeingItem(id="lazer", name="Lazer", category_id=CategoryId.SOCIAL,
                  description="Tempo dedicado a atividades prazerosas e relaxantes."),
    WellbeingItem(id="relacionamento", name="Relacionamento Amoroso", category_id=CategoryId.SOCIAL,
                  description="Satisfação com a parceria íntima, se aplicável."),
    WellbeingItem(id="hobbies", name="Hobbies e Diversão", category_id=CategoryId.SOCIAL,
                  description="Engajamento em atividades recreativas e interesses pessoais."),
    WellbeingItem(id="controle", name="Controle Financeiro", category_id=CategoryId.FINANCIAL,
                  description="Capacidade de gerenciar suas finanças e orçamento."),
    WellbeingItem(id="recursos", name="Recursos Financeiros", category_id=CategoryId.FINANCIAL,
                  description="Suficiência de dinheiro para atender às necessidades e desejos."),
    WellbeingItem(id="fisica", name="Física", category_id=CategoryId.PHYSICAL,
                  description="Nível de saúde física, energia e vitalidade."),
    WellbeingItem(id="emocional", name="Emocional", category_id=CategoryId.PHYSICAL,
                  description="Bem-estar mental, gerenciamento de estresse e resiliência."),
    WellbeingItem(id="espiritual", name="Espiritual", category_id=CategoryId.PHYSICAL,
                  description="Conexão com valores, crenças ou um senso de propósito maior."),
    WellbeingItem(id="contribuicao", name="Contribuição", category_id=CategoryId.COMMUNITY,
                  description="Envolvimento em atividades que beneficiam a comunidade ou causas maiores."),
    WellbeingItem(id="conexao", name="Conexão", category_id=CategoryId.COMMUNITY,
                  description="Sentimento de pertencimento e conexão com a comunidade local ou grupos."),
]

ITEMS_BY_ID: Dict[str, WellbeingItem] = {item.id: item for item in WELLBEING_ITEMS}
CATEGORIES_BY_ID: Dict[CategoryId, WellbeingCategory] = {c.id: c for c in WELLBEING_CATEGORIES}

# Group item ids by category, keeping catalog order
ITEM_IDS_BY_CATEGORY: Dict[CategoryId, List[str]] = {}
for item in WELLBEING_ITEMS:
    ITEM_IDS_BY_CATEGORY.setdefault(item.category_id, []).append(item.id)


def get_item(item_id):
    return ITEMS_BY_ID.get(item_id)


def get_category_for_item(item_id):
    item = ITEMS_BY_ID.get(item_id)
    return CATEGORIES_BY_ID[item.category_id] if item else None


def initial_item_scores() -> List[ItemScore]:
    """One empty score per catalog item, in catalog order."""
    return [ItemScore(item_id=item.id) for item in WELLBEING_ITEMS]
