import unittest

from models.persisted_state import PersistedState
from models.transaction import Transaction
from services.budget_math import remaining, total_spent


class TestBudgetMath(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(total_spent([]), 0.0)
        self.assertEqual(remaining(100.0, []), 100.0)

    def test_seed_totals(self):
        seed = PersistedState.seeded()
        self.assertAlmostEqual(total_spent(seed.transactions), 778.46)
        self.assertAlmostEqual(remaining(seed.monthly_budget, seed.transactions), 1721.54)

    def test_income_counts_toward_spent(self):
        txs = [Transaction("rent", "x", -100.0), Transaction("salary", "x", 40.0)]
        self.assertEqual(total_spent(txs), 140.0)
        self.assertEqual(remaining(500.0, txs), 360.0)

    def test_remaining_can_go_negative(self):
        txs = [Transaction("car", "x", -800.0)]
        self.assertEqual(remaining(500.0, txs), -300.0)

    def test_remaining_is_recomputed(self):
        txs = [Transaction("a", "x", -10.0)]
        self.assertEqual(remaining(50.0, txs), 40.0)
        txs.append(Transaction("b", "x", -5.0))
        self.assertEqual(remaining(50.0, txs), 35.0)


if __name__ == "__main__":
    unittest.main()
