# tests/test_stats.py
import math
import random
import unittest

from finance_tracker.core.categories import CATEGORIES, FALLBACK_COLOR
from finance_tracker.core.models import EXPENSE, INCOME, Category, Transaction
from finance_tracker.core import stats


def make_tx(amount, transaction_type, category="Other", date="2025-07-10", id=None):
    return Transaction(
        amount=amount,
        description="teste",
        category=category,
        transaction_type=transaction_type,
        date=date,
        id=id,
    )


class TestComputeTotals(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(stats.compute_totals([]), {"income": 0, "expense": 0, "balance": 0})

    def test_scenario_income_and_food_expenses(self):
        transactions = [
            make_tx(100, INCOME, "Salary"),
            make_tx(40, EXPENSE, "Food"),
            make_tx(10, EXPENSE, "Food"),
        ]
        self.assertEqual(stats.compute_totals(transactions), {"income": 100, "expense": 50, "balance": 50})

    def test_balance_is_income_minus_expense(self):
        transactions = [
            make_tx(0.1, INCOME),
            make_tx(0.2, INCOME),
            make_tx(0.3, EXPENSE),
            make_tx(1234.56, EXPENSE),
        ]
        totals = stats.compute_totals(transactions)
        self.assertEqual(totals["balance"], totals["income"] - totals["expense"])

    def test_negative_balance(self):
        totals = stats.compute_totals([make_tx(10, INCOME), make_tx(25, EXPENSE)])
        self.assertEqual(totals["balance"], -15)

    def test_non_negative_amounts_give_non_negative_totals(self):
        transactions = [make_tx(float(i), INCOME if i % 2 else EXPENSE) for i in range(20)]
        totals = stats.compute_totals(transactions)
        self.assertGreaterEqual(totals["income"], 0)
        self.assertGreaterEqual(totals["expense"], 0)

    def test_nan_amount_propagates(self):
        totals = stats.compute_totals([make_tx(math.nan, EXPENSE), make_tx(10, INCOME)])
        self.assertEqual(totals["income"], 10)
        self.assertTrue(math.isnan(totals["expense"]))
        self.assertTrue(math.isnan(totals["balance"]))

    def test_accepts_generator(self):
        totals = stats.compute_totals(t for t in [make_tx(5, INCOME), make_tx(2, EXPENSE)])
        self.assertEqual(totals, {"income": 5, "expense": 2, "balance": 3})

    def test_unknown_type_is_ignored(self):
        totals = stats.compute_totals([make_tx(5, "transfer"), make_tx(2, EXPENSE)])
        self.assertEqual(totals, {"income": 0, "expense": 2, "balance": -2})


class TestComputeCategoryBreakdown(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(stats.compute_category_breakdown([]), [])

    def test_only_income_gives_empty(self):
        transactions = [make_tx(100, INCOME, "Salary"), make_tx(50, INCOME, "Food")]
        self.assertEqual(stats.compute_category_breakdown(transactions), [])

    def test_scenario_food_grouped(self):
        transactions = [
            make_tx(100, INCOME, "Salary"),
            make_tx(40, EXPENSE, "Food"),
            make_tx(10, EXPENSE, "Food"),
        ]
        breakdown = stats.compute_category_breakdown(transactions)
        self.assertEqual(breakdown, [{"name": "Food", "value": 50, "color": CATEGORIES["Food"].color}])

    def test_unregistered_category_gets_fallback_color(self):
        transactions = [make_tx(7, EXPENSE, "Zzz"), make_tx(3, EXPENSE, "Zzz")]
        breakdown = stats.compute_category_breakdown(transactions)
        self.assertEqual(breakdown, [{"name": "Zzz", "value": 10, "color": FALLBACK_COLOR}])

    def test_lookup_is_case_sensitive(self):
        breakdown = stats.compute_category_breakdown([make_tx(5, EXPENSE, "food")])
        self.assertEqual(breakdown[0]["name"], "food")
        self.assertEqual(breakdown[0]["color"], FALLBACK_COLOR)

    def test_sorted_descending(self):
        transactions = [
            make_tx(5, EXPENSE, "Transport"),
            make_tx(30, EXPENSE, "Rent"),
            make_tx(12, EXPENSE, "Food"),
        ]
        names = [item["name"] for item in stats.compute_category_breakdown(transactions)]
        self.assertEqual(names, ["Rent", "Food", "Transport"])

    def test_ties_keep_first_seen_order(self):
        transactions = [
            make_tx(20, EXPENSE, "Health"),
            make_tx(20, EXPENSE, "Shopping"),
            make_tx(50, EXPENSE, "Rent"),
        ]
        breakdown = stats.compute_category_breakdown(transactions)
        self.assertEqual([item["name"] for item in breakdown], ["Rent", "Health", "Shopping"])
        self.assertEqual(sum(item["value"] for item in breakdown), 90)

        swapped = [transactions[1], transactions[0], transactions[2]]
        breakdown = stats.compute_category_breakdown(swapped)
        self.assertEqual([item["name"] for item in breakdown], ["Rent", "Shopping", "Health"])

    def test_income_only_category_is_excluded(self):
        transactions = [
            make_tx(1000, INCOME, "Freelance"),
            make_tx(15, EXPENSE, "Food"),
        ]
        names = [item["name"] for item in stats.compute_category_breakdown(transactions)]
        self.assertNotIn("Freelance", names)

    def test_sum_matches_expense_total(self):
        transactions = [
            make_tx(12.5, EXPENSE, "Food"),
            make_tx(3.25, EXPENSE, "Transport"),
            make_tx(100, INCOME, "Salary"),
            make_tx(7.75, EXPENSE, "Food"),
            make_tx(40, EXPENSE, "Zzz"),
        ]
        breakdown = stats.compute_category_breakdown(transactions)
        self.assertAlmostEqual(
            sum(item["value"] for item in breakdown),
            stats.compute_totals(transactions)["expense"],
        )

    def test_custom_registry(self):
        registry = {"Pets": Category("Pets", "#123456", "🐶")}
        breakdown = stats.compute_category_breakdown([make_tx(9, EXPENSE, "Pets")], registry)
        self.assertEqual(breakdown[0]["color"], "#123456")


class TestOrderIndependence(unittest.TestCase):
    def test_reordering_does_not_change_values(self):
        rng = random.Random(42)
        categories = ["Food", "Rent", "Transport", "Zzz"]
        # valores inteiros: a soma é exata em qualquer ordem
        transactions = [
            make_tx(rng.randint(1, 500), rng.choice([INCOME, EXPENSE]), rng.choice(categories))
            for _ in range(50)
        ]
        shuffled = list(transactions)
        rng.shuffle(shuffled)

        self.assertEqual(stats.compute_totals(transactions), stats.compute_totals(shuffled))

        original = {item["name"]: item["value"] for item in stats.compute_category_breakdown(transactions)}
        reordered = {item["name"]: item["value"] for item in stats.compute_category_breakdown(shuffled)}
        self.assertEqual(original, reordered)


class TestSummarizeAndFilter(unittest.TestCase):
    def test_summarize(self):
        transactions = [make_tx(100, INCOME, "Salary"), make_tx(30, EXPENSE, "Food")]
        summary = stats.summarize(transactions)
        self.assertEqual(summary["totals"]["balance"], 70)
        self.assertEqual(summary["breakdown"][0]["name"], "Food")

    def test_summarize_accepts_generator(self):
        summary = stats.summarize(t for t in [make_tx(30, EXPENSE, "Food")])
        self.assertEqual(summary["totals"]["expense"], 30)
        self.assertEqual(summary["breakdown"][0]["value"], 30)

    def test_filter_by_period_is_inclusive_and_keeps_order(self):
        transactions = [
            make_tx(1, EXPENSE, date="2025-08-01", id="a"),
            make_tx(2, EXPENSE, date="2025-07-31", id="b"),
            make_tx(3, INCOME, date="2025-07-15", id="c"),
            make_tx(4, EXPENSE, date="2025-07-01", id="d"),
            make_tx(5, EXPENSE, date="2025-06-30", id="e"),
        ]
        filtered = stats.filter_transactions(transactions, start_date="2025-07-01", end_date="2025-07-31")
        self.assertEqual([t.id for t in filtered], ["b", "c", "d"])

    def test_filter_by_type(self):
        transactions = [make_tx(1, EXPENSE, id="a"), make_tx(2, INCOME, id="b")]
        filtered = stats.filter_transactions(transactions, transaction_type=INCOME)
        self.assertEqual([t.id for t in filtered], ["b"])

    def test_filter_without_criteria_returns_everything(self):
        transactions = [make_tx(1, EXPENSE), make_tx(2, INCOME)]
        self.assertEqual(len(stats.filter_transactions(transactions)), 2)
