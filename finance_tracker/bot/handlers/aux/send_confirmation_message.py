from typing import Any, Dict

from telegram import ReplyKeyboardMarkup, Update
from telegram.helpers import escape_markdown

from finance_tracker.core.categories import get_category_icon
from finance_tracker.core.models import INCOME
from finance_tracker.utils.text_utils import format_amount

CONFIRMATION_KEYBOARD = [["Sim ✅", "Não ❌"]]


async def send_confirmation_message(update: Update, pending: Dict[str, Any]) -> None:
    """Envia o resumo da transação pendente e pede confirmação (Sim/Não)."""
    is_income = pending["type"] == INCOME
    kind = "ganho" if is_income else "gasto"
    action = "Atualizar" if pending.get("editing_id") else "Confirma"

    message_text = (
        f"{action} o *{kind}*? {get_category_icon(pending['category'])}\n"
        f"💰 Valor: *{'+' if is_income else '-'}{format_amount(pending['amount'])}*\n"
        f"📝 Descrição: {escape_markdown(pending['description'])}\n"
        f"🏷️ Categoria: {escape_markdown(pending['category'])}\n"
        f"📅 Data: *{pending['date']}*"
    )

    reply_markup = ReplyKeyboardMarkup(CONFIRMATION_KEYBOARD, one_time_keyboard=True, resize_keyboard=True)
    await update.message.reply_text(f"{message_text}\n\n*Tudo certo?* 🤔", reply_markup=reply_markup, parse_mode="Markdown")
