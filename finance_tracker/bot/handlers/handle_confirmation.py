from telegram import ReplyKeyboardMarkup, Update
from telegram.ext import ContextTypes, ConversationHandler

from finance_tracker.bot.handlers.aux import ask_type, register_transaction
from finance_tracker.bot.handlers.aux.send_confirmation_message import CONFIRMATION_KEYBOARD
from finance_tracker.bot.handlers.states import ASKING_CONFIRMATION, ASKING_TYPE, KEEP_VALUE, PENDING_KEY
from finance_tracker.bot.session import require_session


async def handle_confirmation(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Lida com a confirmação (Sim/Não) da transação."""
    user_response = update.message.text.lower()
    pending = context.user_data.get(PENDING_KEY)

    if not pending:
        await update.message.reply_text("Ops! 😬 Não encontrei uma transação pendente para confirmar. 🔄")
        return ConversationHandler.END

    if user_response in ("sim ✅", "sim"):
        session = await require_session(update, context)
        if session:
            await register_transaction(update, session, pending)
        context.user_data.pop(PENDING_KEY, None)
        return ConversationHandler.END

    elif user_response in ("não ❌", "não", "nao"):
        # Volta ao início com os valores já preenchidos
        await update.message.reply_text(
            f"Entendido! 🤔 Vamos corrigir. Envie `{KEEP_VALUE}` nos campos que estão certos.",
            parse_mode="Markdown",
        )
        await ask_type(update, pending)
        return ASKING_TYPE

    else:
        reply_markup = ReplyKeyboardMarkup(CONFIRMATION_KEYBOARD, one_time_keyboard=True, resize_keyboard=True)
        await update.message.reply_text("Por favor, responda apenas 'Sim ✅' ou 'Não ❌'.", reply_markup=reply_markup)
        return ASKING_CONFIRMATION
