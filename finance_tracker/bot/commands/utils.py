from telegram import Update
from telegram.ext import ContextTypes


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Envia uma mensagem quando o comando /start é emitido."""
    await update.message.reply_text(
        "Olá! Sou seu bot de finanças. 💸\n\n"
        "Para começar, crie uma conta com `/cadastrar email senha` "
        "ou entre com `/entrar email senha`.\n\n"
        "Depois disso:\n"
        "- `/novo` para registrar um ganho ou gasto.\n"
        "- `/saldo` para ver ganhos, gastos e saldo.\n"
        "- `/gastos_por_categoria` para ver para onde vai seu dinheiro.\n"
        "- `/extrato` para listar suas transações.\n"
        "- `/help` para mais informações.",
        parse_mode="Markdown",
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Envia uma mensagem quando o comando /help é emitido."""
    await update.message.reply_text(
        "**Conta:**\n"
        "- `/cadastrar [email] [senha]`: Cria sua conta.\n"
        "- `/entrar [email] [senha]`: Entra na sua conta.\n"
        "- `/sair`: Encerra a sessão.\n\n"
        "**Transações:**\n"
        "- `/novo`: Registra um ganho ou gasto (tipo, valor, descrição, categoria e data).\n"
        "- `/editar [id]`: Edita uma transação. Envie `-` para manter o valor atual de um campo.\n"
        "- `/apagar [id]`: Apaga uma transação.\n"
        "- `/extrato [AAAA-MM] [ganhos|gastos]`: Lista suas transações (ex: `/extrato 2025-07 gastos`). O id aparece entre colchetes.\n"
        "- `/cancelar`: Cancela o registro em andamento.\n\n"
        "**Relatórios:**\n"
        "- `/saldo`: Total de ganhos, gastos e saldo, com gráfico.\n"
        "- `/gastos_por_categoria`: Gastos agrupados por categoria, com gráfico.\n"
        "- `/categorias`: Lista as categorias disponíveis.\n"
        "- `/exportar`: Envia seu extrato em CSV.",
        parse_mode="Markdown",
    )
