# finance_tracker/core/ai.py
from typing import List, Union

import google.generativeai as genai
from google.generativeai.types import HarmCategory, HarmBlockThreshold

from finance_tracker.config import GOOGLE_API_KEY, GEMINI_MODEL
from finance_tracker.logging_setup import get_logger

logger = get_logger(__name__)

# Ajustes de segurança para o Gemini (recomendado para bots)
safety_settings = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_NONE,
}


def ask_gemini(prompt: str, model: str = GEMINI_MODEL) -> Union[str, None]:
    """Envia um prompt para o Gemini. Retorna None sem chave configurada ou em caso de erro."""
    if not GOOGLE_API_KEY:
        return None

    try:
        genai.configure(api_key=GOOGLE_API_KEY)
        model_instance = genai.GenerativeModel(
            model_name=model, safety_settings=safety_settings
        )
        response = model_instance.generate_content(prompt)

        # Resposta bloqueada ou vazia não tem parts
        if not response.parts:
            logger.debug("Gemini: resposta vazia ou bloqueada. Raw: %s", response)
            return None

        return response.text.strip()
    except Exception as e:
        logger.error("Erro ao conectar com Gemini: %s", e)
        return None


def suggest_category(description: str, category_names: List[str]) -> Union[str, None]:
    """
    Pede ao Gemini a categoria mais adequada para a descrição.
    Só aceita nomes da lista; qualquer outra resposta vira None.
    """
    if not description or not category_names:
        return None

    categories_list_str = ", ".join(category_names)
    prompt = f"""
    Classifique a transação financeira abaixo em UMA das categorias: {categories_list_str}.
    Responda APENAS com o nome exato da categoria, ou NENHUMA se nenhuma servir.

    Descrição: "{description}"
    """

    suggestion = ask_gemini(prompt)
    if not suggestion:
        return None

    suggestion = suggestion.strip().strip('."\'')
    for name in category_names:
        if name.lower() == suggestion.lower():
            return name
    return None
