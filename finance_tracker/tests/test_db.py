import math
import unittest
import uuid
from unittest.mock import MagicMock

from supabase import Client

from finance_tracker.core import db
from finance_tracker.core.models import EXPENSE, INCOME, Transaction


class TestDatabase(unittest.TestCase):
    def setUp(self):
        # Mock do cliente Supabase para todos os testes
        self.mock_supabase_client = MagicMock(spec=Client)
        self.mock_execute = MagicMock(data=[])

        # Métodos encadeáveis (.select().eq().order().execute()) devolvem o próprio mock
        self.mock_table_methods = MagicMock()
        for method in ("insert", "select", "update", "delete", "eq", "order"):
            getattr(self.mock_table_methods, method).return_value = self.mock_table_methods
        self.mock_table_methods.execute.return_value = self.mock_execute

        self.mock_supabase_client.table.return_value = self.mock_table_methods

        self.user_id = str(uuid.uuid4())
        self.transaction = Transaction(
            amount=150.0, description="Jantar", category="Food", transaction_type=EXPENSE, date="2025-07-10"
        )

    # --- Testes para get_transactions ---
    def test_get_transactions_empty(self):
        transactions = db.get_transactions(self.mock_supabase_client, self.user_id)
        self.assertEqual(transactions, [])

    def test_get_transactions_with_data(self):
        self.mock_execute.data = [
            {"id": "t2", "amount": 50.0, "description": "Cafe", "category": "Food",
             "type": "expense", "date": "2025-07-02", "created_at": "2025-07-02T10:00:00+00:00"},
            {"id": "t1", "amount": "1000", "description": "Salário", "category": "Salary",
             "type": "income", "date": "2025-07-01", "created_at": "2025-07-01T10:00:00+00:00"},
        ]
        transactions = db.get_transactions(self.mock_supabase_client, self.user_id)

        self.assertEqual([t.id for t in transactions], ["t2", "t1"])
        self.assertEqual(transactions[1].amount, 1000.0)
        self.assertEqual(transactions[1].type, INCOME)
        self.mock_supabase_client.table.assert_called_with("transactions")
        self.mock_table_methods.eq.assert_called_once_with("user_id", self.user_id)

    def test_get_transactions_ordering(self):
        db.get_transactions(self.mock_supabase_client, self.user_id)
        order_calls = [c.args + tuple(sorted(c.kwargs.items())) for c in self.mock_table_methods.order.call_args_list]
        self.assertEqual(order_calls, [("date", ("desc", True)), ("created_at", ("desc", True))])

    def test_get_transactions_malformed_amount(self):
        self.mock_execute.data = [{"id": "t1", "amount": None, "type": "expense", "date": "2025-07-01"}]
        transactions = db.get_transactions(self.mock_supabase_client, self.user_id)
        self.assertTrue(math.isnan(transactions[0].amount))

    def test_get_transactions_failure(self):
        self.mock_table_methods.execute.side_effect = Exception("Database connection error")
        self.assertIsNone(db.get_transactions(self.mock_supabase_client, self.user_id))

    # --- Testes para add_transaction ---
    def test_add_transaction_success(self):
        new_id = str(uuid.uuid4())
        self.mock_execute.data = [{"id": new_id}]

        result = db.add_transaction(self.mock_supabase_client, self.user_id, self.transaction)

        self.assertEqual(result, new_id)
        self.mock_table_methods.insert.assert_called_once()
        inserted_data = self.mock_table_methods.insert.call_args.args[0]
        self.assertEqual(inserted_data, {
            "amount": 150.0,
            "description": "Jantar",
            "category": "Food",
            "type": "expense",
            "date": "2025-07-10",
            "user_id": self.user_id,
        })
        self.assertNotIn("created_at", inserted_data)
        self.assertNotIn("id", inserted_data)

    def test_add_transaction_no_data_returned(self):
        self.assertIsNone(db.add_transaction(self.mock_supabase_client, self.user_id, self.transaction))

    def test_add_transaction_failure(self):
        self.mock_table_methods.execute.side_effect = Exception("Database connection error")
        self.assertIsNone(db.add_transaction(self.mock_supabase_client, self.user_id, self.transaction))

    # --- Testes para update_transaction ---
    def test_update_transaction_success(self):
        self.mock_execute.data = [{"id": "t1"}]
        self.transaction.created_at = "2025-07-10T12:00:00+00:00"

        result = db.update_transaction(self.mock_supabase_client, self.user_id, "t1", self.transaction)

        self.assertTrue(result)
        updated_data = self.mock_table_methods.update.call_args.args[0]
        self.assertNotIn("created_at", updated_data)
        self.assertNotIn("user_id", updated_data)
        self.assertEqual(updated_data["amount"], 150.0)
        eq_calls = [c.args for c in self.mock_table_methods.eq.call_args_list]
        self.assertIn(("id", "t1"), eq_calls)
        self.assertIn(("user_id", self.user_id), eq_calls)

    def test_update_transaction_not_found(self):
        self.assertFalse(db.update_transaction(self.mock_supabase_client, self.user_id, "t1", self.transaction))

    def test_update_transaction_failure(self):
        self.mock_table_methods.execute.side_effect = Exception("timeout")
        self.assertFalse(db.update_transaction(self.mock_supabase_client, self.user_id, "t1", self.transaction))

    # --- Testes para delete_transaction ---
    def test_delete_transaction_success(self):
        self.mock_execute.data = [{"id": "t1"}]
        self.assertTrue(db.delete_transaction(self.mock_supabase_client, self.user_id, "t1"))
        self.mock_table_methods.delete.assert_called_once()
        eq_calls = [c.args for c in self.mock_table_methods.eq.call_args_list]
        self.assertEqual(eq_calls, [("id", "t1"), ("user_id", self.user_id)])

    def test_delete_transaction_other_users_row(self):
        # O RLS e o filtro por user_id não retornam nada para linhas de outro usuário
        self.assertFalse(db.delete_transaction(self.mock_supabase_client, self.user_id, "t-de-outro"))

    def test_delete_transaction_failure(self):
        self.mock_table_methods.execute.side_effect = Exception("timeout")
        self.assertFalse(db.delete_transaction(self.mock_supabase_client, self.user_id, "t1"))
