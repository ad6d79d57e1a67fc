import unittest

from finance_tracker.core import charts

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestCharts(unittest.TestCase):
    def test_balance_chart_without_data(self):
        self.assertIsNone(charts.generate_balance_chart({"income": 0, "expense": 0, "balance": 0}))
        self.assertIsNone(charts.generate_balance_chart({}))

    def test_balance_chart_png(self):
        buf = charts.generate_balance_chart({"income": 100.0, "expense": 150.0, "balance": -50.0})
        self.assertIsNotNone(buf)
        self.assertEqual(buf.read(8), PNG_SIGNATURE)

    def test_category_chart_without_data(self):
        self.assertIsNone(charts.generate_category_chart([]))

    def test_category_chart_png(self):
        breakdown = [
            {"name": "Rent", "value": 800.0, "color": "#6366F1"},
            {"name": "Zzz", "value": 20.0, "color": "#cccccc"},
        ]
        buf = charts.generate_category_chart(breakdown)
        self.assertIsNotNone(buf)
        self.assertEqual(buf.read(8), PNG_SIGNATURE)
