# finance_tracker/core/export.py
import csv
import io
from typing import Iterable, Union

import pandas as pd

from finance_tracker.core.models import Transaction

CSV_COLUMNS = ["Date", "Type", "Category", "Description", "Amount"]


def export_transactions_csv(transactions: Iterable[Transaction]) -> Union[io.BytesIO, None]:
    """
    Exporta o extrato em CSV (na mesma ordem recebida).
    Campos de texto vão entre aspas; o valor fica sem aspas.
    Retorna None se não houver transações.
    """
    rows = [
        [t.date, t.type, t.category, t.description, t.amount]
        for t in transactions
    ]
    if not rows:
        return None

    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    content = df.to_csv(index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")

    buf = io.BytesIO(content.encode("utf-8"))
    buf.name = "expenses_export.csv"
    return buf
