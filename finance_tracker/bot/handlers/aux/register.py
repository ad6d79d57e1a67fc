from typing import Any, Dict

from telegram import ReplyKeyboardRemove, Update

from finance_tracker.core import db
from finance_tracker.core.models import INCOME, Transaction
from finance_tracker.utils.text_utils import format_amount


async def register_transaction(update: Update, session: Dict[str, Any], pending: Dict[str, Any]) -> bool:
    """Grava a transação pendente (criação ou edição) e avisa o usuário."""
    transaction = Transaction(
        amount=pending["amount"],
        description=pending["description"],
        category=pending["category"],
        transaction_type=pending["type"],
        date=pending["date"],
    )
    kind = "Ganho" if transaction.type == INCOME else "Gasto"
    editing_id = pending.get("editing_id")

    if editing_id:
        saved = db.update_transaction(session["client"], session["user_id"], editing_id, transaction)
        done = "atualizado"
    else:
        saved = db.add_transaction(session["client"], session["user_id"], transaction) is not None
        done = "registrado"

    if saved:
        await update.message.reply_text(
            f"✅ {kind} de {format_amount(transaction.amount)} ({transaction.description}) "
            f"em '{transaction.category}' {done} com sucesso! 🎉",
            reply_markup=ReplyKeyboardRemove(),
        )
    else:
        await update.message.reply_text(
            f"❌ Ocorreu um erro ao salvar seu {kind.lower()}. Tente novamente mais tarde. 😟",
            reply_markup=ReplyKeyboardRemove(),
        )
    return saved
