from typing import Union

from telegram import Update
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from finance_tracker.bot.session import SESSION_KEY, get_session
from finance_tracker.core import auth
from finance_tracker.logging_setup import get_logger

logger = get_logger(__name__)


async def _read_credentials(update: Update, context: ContextTypes.DEFAULT_TYPE, usage: str) -> Union[tuple, None]:
    if len(context.args) != 2:
        await update.message.reply_text(usage, parse_mode="Markdown")
        return None

    # A mensagem tem a senha: apaga do histórico do chat
    try:
        await update.message.delete()
    except Exception as e:
        logger.debug("Não foi possível apagar a mensagem com a senha: %s", e)

    email, password = context.args
    return email.strip(), password


def _start_session(context: ContextTypes.DEFAULT_TYPE, client, user_id: str, email: str) -> None:
    user_data = context.user_data
    user_data[SESSION_KEY] = {"client": client, "user_id": user_id, "email": email}

    def _on_auth_change(current_user_id: Union[str, None]) -> None:
        # Logout ou sessão expirada no Supabase: esquece a sessão do chat
        session = user_data.get(SESSION_KEY)
        if session and session["client"] is client and current_user_id is None:
            user_data.pop(SESSION_KEY, None)

    user_data[SESSION_KEY]["subscription"] = auth.on_auth_change(client, _on_auth_change)


async def register_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Cria uma conta no Supabase Auth e já inicia a sessão."""
    credentials = await _read_credentials(
        update, context, "Uso: `/cadastrar [email] [senha]`\nEx: `/cadastrar ana@email.com minhaSenha123`"
    )
    if not credentials:
        return
    email, password = credentials

    client = context.bot_data["client_factory"]()
    user_id = auth.sign_up(client, email, password)
    if not user_id:
        await update.effective_chat.send_message(
            "❌ Não consegui criar sua conta. Verifique o email e use uma senha de pelo menos 6 caracteres."
        )
        return

    # Com confirmação de email ativa o Supabase não devolve sessão no cadastro
    if auth.get_user_id(client) != user_id:
        await update.effective_chat.send_message(
            "📧 Conta criada! Confirme seu email e depois use `/entrar email senha`.",
            parse_mode="Markdown",
        )
        return

    _start_session(context, client, user_id, email)
    await update.effective_chat.send_message(f"🎉 Conta criada! Você entrou como {email}.")


async def login_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Entra na conta com email e senha."""
    credentials = await _read_credentials(
        update, context, "Uso: `/entrar [email] [senha]`\nEx: `/entrar ana@email.com minhaSenha123`"
    )
    if not credentials:
        return
    email, password = credentials

    client = context.bot_data["client_factory"]()
    user_id = auth.sign_in(client, email, password)
    if not user_id:
        await update.effective_chat.send_message("❌ Email ou senha inválidos. Tente novamente.")
        return

    _start_session(context, client, user_id, email)
    logger.info("Chat %s entrou como usuário %s", update.effective_chat.id, user_id)
    await update.effective_chat.send_message(
        f"✅ Bem-vindo(a), {escape_markdown(email)}! Use `/novo` para registrar uma transação.",
        parse_mode="Markdown",
    )


async def logout_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Encerra a sessão atual."""
    session = get_session(context)
    if not session:
        await update.message.reply_text("Você não está conectado. 🙂")
        return

    auth.sign_out(session["client"])
    subscription = session.get("subscription")
    if subscription is not None:
        subscription.unsubscribe()
    context.user_data.pop(SESSION_KEY, None)
    context.user_data.pop("pending_transaction", None)
    await update.message.reply_text("👋 Sessão encerrada. Até logo!")
