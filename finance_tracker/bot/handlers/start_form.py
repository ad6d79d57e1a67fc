from telegram import ReplyKeyboardRemove, Update
from telegram.ext import ContextTypes, ConversationHandler

from finance_tracker.bot.handlers.aux import ask_type
from finance_tracker.bot.handlers.states import ASKING_TYPE, PENDING_KEY
from finance_tracker.bot.session import load_transactions, require_session
from finance_tracker.core.models import find_by_id_prefix


async def new_transaction_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Inicia o formulário de uma nova transação (/novo)."""
    if not await require_session(update, context):
        return ConversationHandler.END

    context.user_data[PENDING_KEY] = {
        "editing_id": None,
        "type": None,
        "amount": None,
        "description": None,
        "category": None,
        "date": None,
    }
    await ask_type(update, context.user_data[PENDING_KEY])
    return ASKING_TYPE


async def edit_transaction_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Inicia o formulário já preenchido com uma transação existente (/editar id)."""
    session = await require_session(update, context)
    if not session:
        return ConversationHandler.END

    if not context.args:
        await update.message.reply_text(
            "Uso: `/editar [id]`\nO id aparece entre colchetes no `/extrato`.",
            parse_mode="Markdown",
        )
        return ConversationHandler.END

    transactions = await load_transactions(update, session)
    if transactions is None:
        return ConversationHandler.END

    transaction = find_by_id_prefix(transactions, context.args[0])
    if not transaction:
        await update.message.reply_text(
            f"Não encontrei uma transação com o id '{context.args[0]}'. Confira no /extrato."
        )
        return ConversationHandler.END

    context.user_data[PENDING_KEY] = {
        "editing_id": transaction.id,
        "type": transaction.type,
        "amount": transaction.amount,
        "description": transaction.description,
        "category": transaction.category,
        "date": transaction.date,
    }
    await update.message.reply_text(f"✏️ Editando '{transaction.description}'.")
    await ask_type(update, context.user_data[PENDING_KEY])
    return ASKING_TYPE


async def cancel_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Cancela o formulário em andamento."""
    context.user_data.pop(PENDING_KEY, None)
    await update.message.reply_text("Registro cancelado. 👍", reply_markup=ReplyKeyboardRemove())
    return ConversationHandler.END
