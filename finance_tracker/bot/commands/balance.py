from telegram import Update
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from finance_tracker.bot.session import load_transactions, require_session
from finance_tracker.core import charts
from finance_tracker.core.categories import get_category_icon
from finance_tracker.core.stats import compute_totals, summarize
from finance_tracker.utils.text_utils import format_amount


async def balance_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Mostra o total de ganhos, gastos e o saldo, com gráfico."""
    session = await require_session(update, context)
    if not session:
        return
    transactions = await load_transactions(update, session)
    if transactions is None:
        return

    totals = compute_totals(transactions)
    message = (
        "**Seu resumo:**\n\n"
        f"📈 Ganhos: *+{format_amount(totals['income'])}*\n"
        f"📉 Gastos: *-{format_amount(totals['expense'])}*\n"
        f"💰 Saldo: *{format_amount(totals['balance'])}*"
    )
    await update.message.reply_text(message, parse_mode="Markdown")

    chart_buffer = charts.generate_balance_chart(totals)
    if chart_buffer:
        chart_buffer.name = "saldo_chart.png"
        await update.message.reply_photo(photo=chart_buffer, caption="Ganhos vs. Gastos")
    else:
        await update.message.reply_text(
            "Ainda não tenho dados suficientes para gerar um gráfico. Registre alguns ganhos e gastos com /novo!"
        )


async def category_spending_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Mostra os gastos agrupados por categoria, do maior para o menor, com gráfico."""
    session = await require_session(update, context)
    if not session:
        return
    transactions = await load_transactions(update, session)
    if transactions is None:
        return

    summary = summarize(transactions)
    breakdown = summary["breakdown"]
    if not breakdown:
        await update.message.reply_text("Nenhum gasto registrado ainda. Use /novo para adicionar um! 🧾")
        return

    message = "**Gastos por categoria:**\n\n"
    for item in breakdown:
        name = item["name"]
        message += f"{get_category_icon(name)} {escape_markdown(name)}: *{format_amount(item['value'])}*\n"
    message += f"\n**Total de gastos: {format_amount(summary['totals']['expense'])}**"
    await update.message.reply_text(message, parse_mode="Markdown")

    chart_buffer = charts.generate_category_chart(breakdown)
    if chart_buffer:
        chart_buffer.name = "gastos_por_categoria_chart.png"
        await update.message.reply_photo(photo=chart_buffer, caption="Aqui estão seus gastos por categoria:")
