# finance_tracker/core/models.py
import math
from typing import Any, Dict, Iterable, Optional, Union

from finance_tracker.logging_setup import get_logger

logger = get_logger(__name__)

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)


class Transaction:
    """
    Uma transação (ganho ou gasto) de um usuário.

    `id` e `created_at` são atribuídos pelo Supabase na inserção e nunca
    entram no payload enviado ao banco.
    """

    def __init__(
        self,
        amount: float,
        description: str,
        category: str,
        transaction_type: str,
        date: str,
        id: Optional[str] = None,
        created_at: Optional[str] = None,
    ):
        self.id = id
        self.amount = amount
        self.description = description
        self.category = category
        self.type = transaction_type
        self.date = date
        self.created_at = created_at

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Transaction":
        """Monta uma transação a partir de uma linha vinda do Supabase."""
        try:
            amount = float(record.get("amount"))
        except (TypeError, ValueError):
            # Valor não numérico vira NaN e segue adiante sem quebrar o extrato
            logger.warning("Transação %s com valor inválido: %r", record.get("id"), record.get("amount"))
            amount = math.nan

        if record.get("type") not in TRANSACTION_TYPES:
            # Fica fora dos totais e dos gastos por categoria
            logger.warning("Transação %s com tipo desconhecido: %r", record.get("id"), record.get("type"))

        return cls(
            amount=amount,
            description=record.get("description") or "",
            category=record.get("category") or "",
            transaction_type=record.get("type"),
            date=str(record.get("date") or ""),
            id=record.get("id"),
            created_at=record.get("created_at"),
        )

    def to_payload(self) -> Dict[str, Any]:
        """Campos editáveis, usados tanto na criação quanto na substituição."""
        return {
            "amount": self.amount,
            "description": self.description,
            "category": self.category,
            "type": self.type,
            "date": self.date,
        }

    @property
    def short_id(self) -> str:
        return (self.id or "")[:8]

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self.id!r}, type={self.type!r}, amount={self.amount!r}, "
            f"category={self.category!r}, date={self.date!r})"
        )


class Category:
    def __init__(self, name: str, color: str, icon: str):
        self.name = name
        self.color = color
        self.icon = icon

    def __repr__(self) -> str:
        return f"Category(name={self.name!r}, color={self.color!r}, icon={self.icon!r})"


def find_by_id_prefix(transactions: Iterable[Transaction], prefix: str) -> Union[Transaction, None]:
    """
    Encontra a transação cujo id começa com `prefix` (o id curto do extrato).
    Retorna None se nenhuma ou mais de uma transação combinar.
    """
    prefix = (prefix or "").strip().lower()
    if not prefix:
        return None

    matches = [t for t in transactions if t.id and t.id.lower().startswith(prefix)]
    if len(matches) != 1:
        return None
    return matches[0]
