# finance_tracker/bot/commands/__init__.py

from .utils import start_command, help_command
from .account import login_command, logout_command, register_command
from .balance import balance_command, category_spending_command
from .category import category_command
from .transactions import (
    delete_transaction_command,
    export_command,
    list_transactions_command,
)

# Nome do comando no Telegram -> função
ALL_COMMANDS = {
    "start": start_command,
    "help": help_command,
    "cadastrar": register_command,
    "entrar": login_command,
    "sair": logout_command,
    "saldo": balance_command,
    "gastos_por_categoria": category_spending_command,
    "categorias": category_command,
    "extrato": list_transactions_command,
    "apagar": delete_transaction_command,
    "exportar": export_command,
}
