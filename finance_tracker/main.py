# finance_tracker/main.py
import asyncio
import sys

from flask import Flask, request, jsonify
from telegram import Update

from finance_tracker import config
from finance_tracker.bot.bot_setup import setup_bot
from finance_tracker.core.db import get_supabase_client
from finance_tracker.logging_setup import configure_logging, get_logger

logger = get_logger(__name__)


def _bot_config() -> dict:
    if not config.TELEGRAM_BOT_TOKEN:
        raise RuntimeError("TELEGRAM_BOT_TOKEN não configurado.")
    if not config.SUPABASE_URL or not config.SUPABASE_KEY:
        raise RuntimeError("SUPABASE_URL e SUPABASE_KEY precisam estar configurados.")
    return {
        "TELEGRAM_BOT_TOKEN": config.TELEGRAM_BOT_TOKEN,
        "CLIENT_FACTORY": get_supabase_client,
    }


def create_app() -> Flask:
    """
    Monta a aplicação Flask que recebe os webhooks do Telegram.
    Uso com Gunicorn (um worker síncrono): `gunicorn "finance_tracker.main:create_app()"`
    """
    configure_logging(config.LOG_LEVEL)

    ptb_application = setup_bot(_bot_config())

    # Um único event loop para a vida toda do processo: a aplicação PTB é
    # inicializada nele e todas as atualizações são processadas nele.
    loop = asyncio.new_event_loop()
    loop.run_until_complete(ptb_application.initialize())
    logger.info("python-telegram-bot Application inicializada.")

    flask_app = Flask(__name__)

    @flask_app.route(config.WEBHOOK_PATH, methods=["POST"])
    def telegram_webhook():
        if not request.is_json:
            logger.error("Webhook recebeu requisição sem JSON.")
            return jsonify({"status": "error", "message": "Request must be JSON"}), 400

        update_json = request.get_json()
        try:
            update = Update.de_json(update_json, ptb_application.bot)
            loop.run_until_complete(ptb_application.process_update(update))
            return jsonify({"status": "ok"}), 200
        except Exception:
            logger.exception("Falha ao processar atualização do Telegram.")
            return jsonify({"status": "error", "message": "Failed to process update"}), 500

    return flask_app


def main() -> None:
    """Roda o bot localmente por polling (sem webhook)."""
    configure_logging(config.LOG_LEVEL)
    try:
        application = setup_bot(_bot_config())
    except RuntimeError as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info("Iniciando o bot por polling...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
