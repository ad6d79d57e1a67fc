from typing import Any, Dict, List, Union

from telegram import Update
from telegram.ext import ContextTypes

from finance_tracker.core import db
from finance_tracker.core.models import Transaction

SESSION_KEY = "session"


def get_session(context: ContextTypes.DEFAULT_TYPE) -> Union[Dict[str, Any], None]:
    """Sessão do chat: {'client': Client, 'user_id': str, 'email': str}."""
    return context.user_data.get(SESSION_KEY)


async def require_session(
    update: Update, context: ContextTypes.DEFAULT_TYPE
) -> Union[Dict[str, Any], None]:
    """Retorna a sessão ou avisa o usuário que é preciso entrar primeiro."""
    session = get_session(context)
    if not session:
        await update.message.reply_text(
            "🔒 Você precisa entrar primeiro: `/entrar email senha` "
            "(ou `/cadastrar email senha` para criar uma conta).",
            parse_mode="Markdown",
        )
    return session


async def load_transactions(
    update: Update, session: Dict[str, Any]
) -> Union[List[Transaction], None]:
    """Busca a foto atual do extrato; avisa o usuário se o banco falhar."""
    transactions = db.get_transactions(session["client"], session["user_id"])
    if transactions is None:
        await update.message.reply_text(
            "❌ Não consegui carregar suas transações agora. Tente novamente mais tarde. 😟"
        )
    return transactions
