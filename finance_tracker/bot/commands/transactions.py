from telegram import Update
from telegram.constants import MessageLimit
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from finance_tracker.bot.session import load_transactions, require_session
from finance_tracker.core import db
from finance_tracker.core.categories import get_category_icon
from finance_tracker.core.export import export_transactions_csv
from finance_tracker.core.models import EXPENSE, INCOME, find_by_id_prefix
from finance_tracker.core.stats import compute_totals, filter_transactions
from finance_tracker.logging_setup import get_logger
from finance_tracker.utils.text_utils import chunk_lines, format_amount, month_range

logger = get_logger(__name__)

TYPE_FILTERS = {"ganho": INCOME, "ganhos": INCOME, "gasto": EXPENSE, "gastos": EXPENSE}
STATEMENT_USAGE = (
    "Uso: `/extrato [AAAA-MM] [ganhos|gastos]`\n"
    "Ex: `/extrato 2025-07` ou `/extrato 2025-07 gastos`"
)


def _parse_statement_args(args):
    """Lê o mês e o tipo opcionais do /extrato. Retorna None se algo for inválido."""
    month, period, transaction_type = None, None, None
    for arg in args:
        word = arg.strip().lower()
        if word in TYPE_FILTERS and transaction_type is None:
            transaction_type = TYPE_FILTERS[word]
        elif period is None and month_range(word):
            month, period = word, month_range(word)
        else:
            return None
    return month, period, transaction_type


async def list_transactions_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Lista as transações (todas ou de um mês), da mais recente para a mais antiga."""
    session = await require_session(update, context)
    if not session:
        return

    parsed = _parse_statement_args(context.args or [])
    if parsed is None:
        await update.message.reply_text(STATEMENT_USAGE, parse_mode="Markdown")
        return
    month, period, transaction_type = parsed
    start_date, end_date = period or (None, None)

    period_title = f" de {month}" if month else ""
    if transaction_type:
        period_title = (" (ganhos)" if transaction_type == INCOME else " (gastos)") + period_title

    transactions = await load_transactions(update, session)
    if transactions is None:
        return

    transactions = filter_transactions(
        transactions, start_date=start_date, end_date=end_date, transaction_type=transaction_type
    )
    if not transactions:
        await update.message.reply_text(f"Nenhuma transação encontrada{period_title}.")
        return

    lines = [f"**Extrato{period_title}:**", ""]
    for t in transactions:
        sign = "+" if t.type == INCOME else "-"
        lines.append(
            f"{get_category_icon(t.category)} `[{t.short_id}]` {escape_markdown(t.description)}: "
            f"*{sign}{format_amount(t.amount)}* ({escape_markdown(t.category)}) em {t.date}"
        )

    totals = compute_totals(transactions)
    lines += [
        "",
        f"Ganhos: {format_amount(totals['income'])} | Gastos: {format_amount(totals['expense'])}",
        f"**Saldo: {format_amount(totals['balance'])}**",
    ]

    # Telegram recusa mensagens acima do limite: manda o extrato em partes
    for chunk in chunk_lines(lines, MessageLimit.MAX_TEXT_LENGTH):
        await update.message.reply_text(chunk, parse_mode="Markdown")


async def delete_transaction_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Apaga uma transação pelo id curto mostrado no extrato."""
    session = await require_session(update, context)
    if not session:
        return

    if not context.args:
        await update.message.reply_text(
            "Uso: `/apagar [id]`\nO id aparece entre colchetes no `/extrato`.",
            parse_mode="Markdown",
        )
        return

    transactions = await load_transactions(update, session)
    if transactions is None:
        return

    transaction = find_by_id_prefix(transactions, context.args[0])
    if not transaction:
        await update.message.reply_text(
            f"Não encontrei uma transação com o id '{context.args[0]}'. Confira no /extrato."
        )
        return

    if db.delete_transaction(session["client"], session["user_id"], transaction.id):
        await update.message.reply_text(
            f"🗑️ Transação '{transaction.description}' de {format_amount(transaction.amount)} apagada."
        )
    else:
        await update.message.reply_text("❌ Ocorreu um erro ao apagar a transação. Tente novamente mais tarde.")


async def export_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Envia o extrato completo em CSV."""
    session = await require_session(update, context)
    if not session:
        return
    transactions = await load_transactions(update, session)
    if transactions is None:
        return

    csv_buffer = export_transactions_csv(transactions)
    if not csv_buffer:
        await update.message.reply_text("Nada para exportar ainda. Registre uma transação com /novo!")
        return

    logger.info("Exportando %d transações do usuário %s", len(transactions), session["user_id"])
    await update.message.reply_document(
        document=csv_buffer, filename=csv_buffer.name, caption="📄 Seu extrato em CSV."
    )
