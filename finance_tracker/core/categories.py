# finance_tracker/core/categories.py
from types import MappingProxyType
from typing import List, Mapping, Union

from finance_tracker.core.models import Category

FALLBACK_COLOR = "#cccccc"
FALLBACK_ICON = "📄"
DEFAULT_CATEGORY = "Food"

# Categorias fixas do app. Não são dados do usuário: a transação guarda só o nome.
CATEGORIES: Mapping[str, Category] = MappingProxyType({
    cat.name: cat
    for cat in [
        Category("Food", "#EF4444", "🍔"),
        Category("Rent", "#6366F1", "🏠"),
        Category("Transport", "#F59E0B", "🚗"),
        Category("Entertainment", "#EC4899", "🎬"),
        Category("Shopping", "#8B5CF6", "🛍️"),
        Category("Health", "#10B981", "🏥"),
        Category("Salary", "#059669", "💰"),
        Category("Freelance", "#3B82F6", "💻"),
        Category("Other", "#64748B", "📦"),
    ]
})


def get_category(name: str, registry: Mapping[str, Category] = CATEGORIES) -> Union[Category, None]:
    """Busca exata (case-sensitive) pelo nome."""
    return registry.get(name)


def get_category_color(name: str, registry: Mapping[str, Category] = CATEGORIES) -> str:
    category = registry.get(name)
    return category.color if category else FALLBACK_COLOR


def get_category_icon(name: str, registry: Mapping[str, Category] = CATEGORIES) -> str:
    category = registry.get(name)
    return category.icon if category else FALLBACK_ICON


def category_names(registry: Mapping[str, Category] = CATEGORIES) -> List[str]:
    return list(registry.keys())


def resolve_category_name(text: str, registry: Mapping[str, Category] = CATEGORIES) -> str:
    """
    Converte o texto digitado para o nome da categoria cadastrada, ignorando
    maiúsculas/minúsculas. Texto desconhecido é mantido como está.
    Ex: "food" -> "Food", "  Padaria " -> "Padaria"
    """
    text = (text or "").strip()
    text_lower = text.lower()
    for name in registry:
        if name.lower() == text_lower:
            return name
    return text
