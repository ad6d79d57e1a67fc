from telegram import Update
from telegram.ext import ContextTypes, ConversationHandler

from finance_tracker.bot.handlers.aux import (
    ask_amount,
    ask_category,
    ask_date,
    ask_description,
    ask_type,
    send_confirmation_message,
)
from finance_tracker.bot.handlers.states import (
    ASKING_AMOUNT,
    ASKING_CATEGORY,
    ASKING_CONFIRMATION,
    ASKING_DATE,
    ASKING_DESCRIPTION,
    ASKING_TYPE,
    KEEP_VALUE,
    PENDING_KEY,
)
from finance_tracker.core.categories import resolve_category_name
from finance_tracker.core.models import EXPENSE, INCOME
from finance_tracker.utils.text_utils import parse_amount, parse_date


def _keeps_current(text: str, pending: dict, field: str) -> bool:
    return text == KEEP_VALUE and pending.get(field) is not None


async def _missing_pending(update: Update) -> int:
    await update.message.reply_text("Ops! 😬 Não encontrei um registro em andamento. Use /novo para começar. 🔄")
    return ConversationHandler.END


async def handle_type(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Recebe o tipo (gasto ou ganho)."""
    pending = context.user_data.get(PENDING_KEY)
    if pending is None:
        return await _missing_pending(update)

    text = update.message.text.strip().lower()
    if not _keeps_current(text, pending, "type"):
        if text.startswith("gasto") or text.startswith("expense"):
            pending["type"] = EXPENSE
        elif text.startswith("ganho") or text.startswith("income"):
            pending["type"] = INCOME
        else:
            await update.message.reply_text("Por favor, responda 'Gasto 📉' ou 'Ganho 📈'.")
            await ask_type(update, pending)
            return ASKING_TYPE

    await ask_amount(update, pending)
    return ASKING_AMOUNT


async def handle_amount(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Recebe o valor; só aceita números positivos."""
    pending = context.user_data.get(PENDING_KEY)
    if pending is None:
        return await _missing_pending(update)

    text = update.message.text.strip()
    if not _keeps_current(text, pending, "amount"):
        amount = parse_amount(text)
        if amount is None:
            await update.message.reply_text("Valor inválido. 🤔 Use um número maior que zero (ex: 42,90).")
            return ASKING_AMOUNT
        pending["amount"] = amount

    await ask_description(update, pending)
    return ASKING_DESCRIPTION


async def handle_description(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Recebe a descrição (não pode ser vazia)."""
    pending = context.user_data.get(PENDING_KEY)
    if pending is None:
        return await _missing_pending(update)

    text = update.message.text.strip()
    if not _keeps_current(text, pending, "description"):
        if not text:
            await update.message.reply_text("A descrição não pode ficar vazia. 📝")
            return ASKING_DESCRIPTION
        pending["description"] = text

    await ask_category(update, pending)
    return ASKING_CATEGORY


async def handle_category(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Recebe a categoria. Nomes fora da lista são aceitos como digitados."""
    pending = context.user_data.get(PENDING_KEY)
    if pending is None:
        return await _missing_pending(update)

    text = update.message.text.strip()
    if not _keeps_current(text, pending, "category"):
        category = resolve_category_name(text)
        if not category:
            await update.message.reply_text("Escolha uma categoria da lista. 🏷️")
            return ASKING_CATEGORY
        pending["category"] = category

    await ask_date(update, pending)
    return ASKING_DATE


async def handle_date(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Recebe a data e mostra o resumo para confirmação."""
    pending = context.user_data.get(PENDING_KEY)
    if pending is None:
        return await _missing_pending(update)

    text = update.message.text.strip()
    if not _keeps_current(text, pending, "date"):
        date = parse_date(text)
        if date is None:
            await update.message.reply_text("Data inválida. 📅 Envie `hoje`, `ontem` ou `AAAA-MM-DD`.", parse_mode="Markdown")
            return ASKING_DATE
        pending["date"] = date

    await send_confirmation_message(update, pending)
    return ASKING_CONFIRMATION
