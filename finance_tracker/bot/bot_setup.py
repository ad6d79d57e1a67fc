# finance_tracker/bot/bot_setup.py
from telegram.ext import Application, CommandHandler, ConversationHandler, MessageHandler, filters

from finance_tracker.bot.commands import ALL_COMMANDS
from finance_tracker.bot.handlers import (
    FORM_HANDLERS,
    cancel_command,
    edit_transaction_command,
    new_transaction_command,
)
from finance_tracker.logging_setup import get_logger

logger = get_logger(__name__)


def setup_bot(config: dict) -> Application:
    """
    Configura a aplicação do bot do Telegram (Comandos e o formulário de transações).
    `config` precisa de TELEGRAM_BOT_TOKEN e CLIENT_FACTORY (cria um cliente
    Supabase por sessão de usuário).
    """
    application = Application.builder().token(config["TELEGRAM_BOT_TOKEN"]).build()

    # Handlers e comandos criam os clientes Supabase por esta fábrica
    application.bot_data["client_factory"] = config["CLIENT_FACTORY"]

    # --- Formulário de criação/edição de transação ---
    # Registrado antes dos comandos para que /cancelar funcione no meio do formulário
    conv_handler = ConversationHandler(
        entry_points=[
            CommandHandler("novo", new_transaction_command),
            CommandHandler("editar", edit_transaction_command),
        ],
        states={
            state: [MessageHandler(filters.TEXT & ~filters.COMMAND, handler)]
            for state, handler in FORM_HANDLERS.items()
        },
        fallbacks=[CommandHandler("cancelar", cancel_command)],
    )
    application.add_handler(conv_handler)

    # --- Comandos acionados com '/' ---
    for name, command in ALL_COMMANDS.items():
        application.add_handler(CommandHandler(name, command))

    logger.info("Bot Telegram configurado com %d comandos.", len(ALL_COMMANDS))
    return application
