from telegram import Update
from telegram.ext import ContextTypes

from finance_tracker.core.categories import CATEGORIES


async def category_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Lista as categorias disponíveis."""
    message = "**Categorias:**\n\n"
    for cat in CATEGORIES.values():
        message += f"{cat.icon} {cat.name}\n"
    await update.message.reply_text(message, parse_mode="Markdown")
