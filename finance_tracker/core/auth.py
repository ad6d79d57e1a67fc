# finance_tracker/core/auth.py
from supabase import Client
from typing import Any, Callable, Union

from finance_tracker.logging_setup import get_logger

logger = get_logger(__name__)


def _user_id_from(response: Any) -> Union[str, None]:
    user = getattr(response, "user", None)
    return getattr(user, "id", None) if user else None


def sign_up(supabase_client: Client, email: str, password: str) -> Union[str, None]:
    """Cria uma conta no Supabase Auth. Retorna o id do usuário criado."""
    try:
        response = supabase_client.auth.sign_up({"email": email, "password": password})
        user_id = _user_id_from(response)
        if user_id:
            logger.info("Conta criada para o usuário %s", user_id)
        return user_id
    except Exception as e:
        logger.error("Erro ao criar conta para '%s': %s", email, e)
        return None


def sign_in(supabase_client: Client, email: str, password: str) -> Union[str, None]:
    """Faz login com email e senha. Retorna o id do usuário ou None se falhar."""
    try:
        response = supabase_client.auth.sign_in_with_password({"email": email, "password": password})
        return _user_id_from(response)
    except Exception as e:
        logger.warning("Falha no login de '%s': %s", email, e)
        return None


def sign_out(supabase_client: Client) -> bool:
    """Encerra a sessão do cliente."""
    try:
        supabase_client.auth.sign_out()
        return True
    except Exception as e:
        logger.error("Erro ao encerrar sessão: %s", e)
        return False


def get_user_id(supabase_client: Client) -> Union[str, None]:
    """Id do usuário autenticado no cliente, ou None se não houver sessão."""
    try:
        return _user_id_from(supabase_client.auth.get_user())
    except Exception as e:
        logger.warning("Não foi possível obter o usuário atual: %s", e)
        return None


def on_auth_change(supabase_client: Client, callback: Callable[[Union[str, None]], None]) -> Any:
    """
    Registra `callback(user_id)` para cada mudança de autenticação
    (login, logout, renovação de token). Após o logout, user_id é None.
    Retorna a inscrição (use `.unsubscribe()` para cancelar).
    """
    def _listener(event, session) -> None:
        user_id = _user_id_from(session) if session else None
        logger.debug("Evento de autenticação %s (usuário %s)", event, user_id)
        callback(user_id)

    return supabase_client.auth.on_auth_state_change(_listener)
