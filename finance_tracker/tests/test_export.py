import unittest

from finance_tracker.core.export import export_transactions_csv
from finance_tracker.core.models import EXPENSE, INCOME, Transaction


class TestExport(unittest.TestCase):
    def test_empty_returns_none(self):
        self.assertIsNone(export_transactions_csv([]))

    def test_csv_content(self):
        transactions = [
            Transaction(40.5, "Tacos, com amigos", "Food", EXPENSE, "2025-07-10", id="t2"),
            Transaction(1000.0, "Salário", "Salary", INCOME, "2025-07-01", id="t1"),
        ]
        buf = export_transactions_csv(transactions)

        self.assertEqual(buf.name, "expenses_export.csv")
        lines = buf.getvalue().decode("utf-8").splitlines()
        self.assertEqual(lines[0], '"Date","Type","Category","Description","Amount"')
        self.assertEqual(lines[1], '"2025-07-10","expense","Food","Tacos, com amigos",40.5')
        self.assertEqual(lines[2], '"2025-07-01","income","Salary","Salário",1000.0')
        self.assertEqual(len(lines), 3)
