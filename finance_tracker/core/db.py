# finance_tracker/core/db.py
from supabase import create_client, Client
from typing import List, Union

from finance_tracker.config import SUPABASE_URL, SUPABASE_KEY
from finance_tracker.core.models import Transaction
from finance_tracker.logging_setup import get_logger

logger = get_logger(__name__)

TRANSACTIONS_TABLE = "transactions"
TRANSACTION_COLUMNS = "id,amount,description,category,type,date,created_at"


def get_supabase_client() -> Client:
    """Retorna uma nova instância do cliente Supabase (uma por sessão de usuário)."""
    return create_client(SUPABASE_URL, SUPABASE_KEY)


# --- Funções para Transações ---
# Toda consulta filtra por user_id além do RLS do banco: um usuário nunca vê
# nem altera as transações de outro.

def get_transactions(supabase_client: Client, user_id: str) -> Union[List[Transaction], None]:
    """
    Obtém todas as transações do usuário, da mais recente para a mais antiga
    (data desc, depois created_at desc). Retorna None se o Supabase falhar.
    """
    try:
        response = (
            supabase_client.table(TRANSACTIONS_TABLE)
            .select(TRANSACTION_COLUMNS)
            .eq("user_id", user_id)
            .order("date", desc=True)
            .order("created_at", desc=True)
            .execute()
        )
        return [Transaction.from_record(record) for record in response.data]
    except Exception as e:
        logger.error("Erro ao obter transações do Supabase: %s", e)
        return None


def add_transaction(supabase_client: Client, user_id: str, transaction: Transaction) -> Union[str, None]:
    """Adiciona uma nova transação. O id e o created_at ficam a cargo do banco."""
    payload = transaction.to_payload()
    payload["user_id"] = user_id
    try:
        response = supabase_client.table(TRANSACTIONS_TABLE).insert(payload).execute()
        if not response.data:
            logger.error("Supabase não retornou a transação inserida.")
            return None
        new_id = response.data[0].get("id")
        logger.info("Transação %s criada para o usuário %s", new_id, user_id)
        return new_id
    except Exception as e:
        logger.error("Erro ao adicionar transação ao Supabase: %s", e)
        return None


def update_transaction(
    supabase_client: Client, user_id: str, transaction_id: str, transaction: Transaction
) -> bool:
    """Substitui todos os campos editáveis de uma transação (o created_at é preservado)."""
    try:
        response = (
            supabase_client.table(TRANSACTIONS_TABLE)
            .update(transaction.to_payload())
            .eq("id", transaction_id)
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            logger.warning("Transação %s não encontrada para atualizar.", transaction_id)
            return False
        return True
    except Exception as e:
        logger.error("Erro ao atualizar transação %s: %s", transaction_id, e)
        return False


def delete_transaction(supabase_client: Client, user_id: str, transaction_id: str) -> bool:
    """Remove uma transação do usuário."""
    try:
        response = (
            supabase_client.table(TRANSACTIONS_TABLE)
            .delete()
            .eq("id", transaction_id)
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            logger.warning("Transação %s não encontrada para remover.", transaction_id)
            return False
        return True
    except Exception as e:
        logger.error("Erro ao remover transação %s: %s", transaction_id, e)
        return False
