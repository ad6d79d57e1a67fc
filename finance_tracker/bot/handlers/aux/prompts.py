from typing import Any, Dict, List, Union

from telegram import ReplyKeyboardMarkup, ReplyKeyboardRemove, Update
from telegram.helpers import escape_markdown

from finance_tracker.bot.handlers.states import KEEP_VALUE
from finance_tracker.core import ai
from finance_tracker.core.categories import category_names
from finance_tracker.core.models import INCOME
from finance_tracker.utils.text_utils import format_amount

TYPE_KEYBOARD = [["Gasto 📉", "Ganho 📈"]]
DATE_KEYBOARD = [["hoje", "ontem"]]


def _keyboard(
    rows: List[List[str]], pending: Dict[str, Any], field: str
) -> Union[ReplyKeyboardMarkup, ReplyKeyboardRemove]:
    if pending.get(field) is not None:
        rows = rows + [[KEEP_VALUE]]
    if not rows:
        return ReplyKeyboardRemove()
    return ReplyKeyboardMarkup(rows, one_time_keyboard=True, resize_keyboard=True)


def _current(pending: Dict[str, Any], field: str, shown: str) -> str:
    if pending.get(field) is None:
        return ""
    return f"\n(atual: {escape_markdown(shown)}, envie `{KEEP_VALUE}` para manter)"


async def ask_type(update: Update, pending: Dict[str, Any]) -> None:
    shown = "Ganho" if pending.get("type") == INCOME else "Gasto"
    await update.message.reply_text(
        "É um *gasto* ou um *ganho*?" + _current(pending, "type", shown),
        reply_markup=_keyboard(TYPE_KEYBOARD, pending, "type"),
        parse_mode="Markdown",
    )


async def ask_amount(update: Update, pending: Dict[str, Any]) -> None:
    shown = format_amount(pending["amount"]) if pending.get("amount") is not None else ""
    await update.message.reply_text(
        "💰 Qual o valor? (ex: 42,90)" + _current(pending, "amount", shown),
        reply_markup=_keyboard([], pending, "amount"),
        parse_mode="Markdown",
    )


async def ask_description(update: Update, pending: Dict[str, Any]) -> None:
    await update.message.reply_text(
        "📝 Qual a descrição? (ex: Tacos)" + _current(pending, "description", pending.get("description") or ""),
        reply_markup=_keyboard([], pending, "description"),
        parse_mode="Markdown",
    )


async def ask_category(update: Update, pending: Dict[str, Any]) -> None:
    names = category_names()
    suggestion = ai.suggest_category(pending.get("description"), names)

    if suggestion:
        names = [suggestion] + [name for name in names if name != suggestion]
    rows = [names[i:i + 3] for i in range(0, len(names), 3)]

    message = "🏷️ Qual a categoria?"
    if suggestion:
        message += f"\n✨ Sugestão: *{suggestion}*"
    message += _current(pending, "category", pending.get("category") or "")

    await update.message.reply_text(
        message, reply_markup=_keyboard(rows, pending, "category"), parse_mode="Markdown"
    )


async def ask_date(update: Update, pending: Dict[str, Any]) -> None:
    await update.message.reply_text(
        "📅 Qual a data? Envie `hoje`, `ontem` ou `AAAA-MM-DD`." + _current(pending, "date", pending.get("date") or ""),
        reply_markup=_keyboard(DATE_KEYBOARD, pending, "date"),
        parse_mode="Markdown",
    )
