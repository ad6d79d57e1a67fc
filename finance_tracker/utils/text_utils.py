# finance_tracker/utils/text_utils.py
import datetime
import math
from typing import List, Union


def parse_amount(text: Union[str, float, None]) -> Union[float, None]:
    """Converte o valor digitado em float positivo.
    Aceita vírgula ou ponto decimal: "18,50" -> 18.5, "$ 40" -> 40.0
    Retorna None para texto inválido, NaN, infinito, zero ou negativo.
    """
    if text is None:
        return None

    if isinstance(text, (int, float)):
        value = float(text)
    else:
        cleaned = text.strip().replace("$", "").replace(" ", "").replace(",", ".")
        try:
            value = float(cleaned)
        except ValueError:
            return None

    if math.isnan(value) or math.isinf(value) or value <= 0:
        return None
    return value


def parse_date(text: Union[str, None], today: Union[datetime.date, None] = None) -> Union[str, None]:
    """Converte a data digitada para AAAA-MM-DD.
    Aceita "hoje", "ontem" ou uma data ISO. Retorna None se não reconhecer.
    """
    if not text:
        return None

    today = today or datetime.date.today()
    text = text.strip().lower()

    if text == "hoje":
        return today.isoformat()
    if text == "ontem":
        return (today - datetime.timedelta(days=1)).isoformat()

    try:
        return datetime.datetime.strptime(text, "%Y-%m-%d").date().isoformat()
    except ValueError:
        return None


def month_range(text: str) -> Union[tuple, None]:
    """Converte "AAAA-MM" em (primeiro_dia, ultimo_dia) no formato ISO."""
    try:
        first_day = datetime.datetime.strptime(text.strip(), "%Y-%m").date()
    except ValueError:
        return None
    next_month = (first_day + datetime.timedelta(days=32)).replace(day=1)
    last_day = next_month - datetime.timedelta(days=1)
    return first_day.isoformat(), last_day.isoformat()


def format_amount(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def chunk_lines(lines: List[str], limit: int) -> List[str]:
    """Junta as linhas em blocos de até `limit` caracteres, sem quebrar linhas.
    Uma linha sozinha maior que o limite é cortada em pedaços.
    """
    chunks = []
    current = ""
    for line in lines:
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            candidate = line
        current = candidate
    if current:
        chunks.append(current)
    return chunks
