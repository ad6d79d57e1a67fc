"""
Totais e gastos por categoria calculados a partir de um extrato.

Funções puras: recebem a lista de transações (a "foto" atual do banco) e
devolvem os valores derivados. Não fazem I/O e podem ser chamadas de novo a
cada nova foto; o resultado anterior é simplesmente descartado.
"""
from typing import Any, Dict, Iterable, List, Mapping, Union

from finance_tracker.core.categories import CATEGORIES, get_category_color
from finance_tracker.core.models import EXPENSE, INCOME, Category, Transaction


def compute_totals(transactions: Iterable[Transaction]) -> Dict[str, float]:
    """
    Soma ganhos e gastos e calcula o saldo (ganhos - gastos).
    Sem arredondamento: a formatação fica para quem exibe.
    """
    snapshot = list(transactions)
    income = sum(t.amount for t in snapshot if t.type == INCOME)
    expense = sum(t.amount for t in snapshot if t.type == EXPENSE)
    return {"income": income, "expense": expense, "balance": income - expense}


def compute_category_breakdown(
    transactions: Iterable[Transaction],
    category_registry: Mapping[str, Category] = CATEGORIES,
) -> List[Dict[str, Any]]:
    """
    Agrupa os gastos por categoria, do maior para o menor.

    Ganhos ficam de fora (não são categoria de gasto). Categorias fora do
    cadastro recebem a cor padrão. Empates mantêm a ordem em que a categoria
    apareceu pela primeira vez na lista.
    """
    grouped: Dict[str, float] = {}
    for t in list(transactions):
        if t.type != EXPENSE:
            continue
        grouped[t.category] = grouped.get(t.category, 0) + t.amount

    breakdown = [
        {"name": name, "value": value, "color": get_category_color(name, category_registry)}
        for name, value in grouped.items()
    ]
    # sorted é estável também com reverse=True
    return sorted(breakdown, key=lambda item: item["value"], reverse=True)


def summarize(
    transactions: Iterable[Transaction],
    category_registry: Mapping[str, Category] = CATEGORIES,
) -> Dict[str, Any]:
    """Totais e gastos por categoria a partir da mesma foto."""
    snapshot = list(transactions)
    return {
        "totals": compute_totals(snapshot),
        "breakdown": compute_category_breakdown(snapshot, category_registry),
    }


def filter_transactions(
    transactions: Iterable[Transaction],
    start_date: Union[str, None] = None,
    end_date: Union[str, None] = None,
    transaction_type: Union[str, None] = None,
) -> List[Transaction]:
    """Filtra por período (datas ISO, inclusivas) e tipo, mantendo a ordem."""
    filtered = []
    for t in transactions:
        if start_date and t.date < start_date:
            continue
        if end_date and t.date > end_date:
            continue
        if transaction_type and t.type != transaction_type:
            continue
        filtered.append(t)
    return filtered
