import json
import tempfile
import unittest
from pathlib import Path

from models.persisted_state import PersistedState
from models.transaction import Transaction
from services.budget_service import BudgetService
from storage.state_store import StateFormatError, StateStore


class TestStateStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "budget_data.json"
        self.store = StateStore(self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, payload):
        self.path.write_text(
            payload if isinstance(payload, str) else json.dumps(payload),
            encoding="utf-8",
        )

    def test_round_trip_preserves_order_and_budget(self):
        state = PersistedState(
            monthly_budget=1234.5,
            transactions=[
                Transaction("rent", "Aug 1, 2023", -900.0, (230, 78, 95, 255)),
                Transaction("salary", "Aug 2, 2023", 3000.0, (110, 220, 140, 255)),
                Transaction("rent", "Aug 1, 2023", -900.0, (230, 78, 95, 255)),
            ],
        )
        result = self.store.save(state)
        self.assertTrue(result.ok)

        loaded = self.store.load()
        self.assertEqual(loaded, state)

    def test_seed_state_round_trips(self):
        state = PersistedState.seeded()
        self.store.save(state)
        self.assertEqual(self.store.load(), state)

    def test_file_layout(self):
        self.store.save(PersistedState(
            monthly_budget=10.0,
            transactions=[Transaction("tea", "Today", -2.5, (88, 172, 255, 255))],
        ))
        data = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(data, {
            "monthly_budget": 10.0,
            "transactions": [
                {"title": "tea", "date": "Today", "amount": -2.5, "color": [88, 172, 255, 255]},
            ],
        })

    def test_missing_file(self):
        result = self.store.load_result()
        self.assertIsNone(result.value)
        self.assertIsInstance(result.error, FileNotFoundError)
        self.assertIsNone(self.store.load())

    def test_invalid_json(self):
        self._write("{not json")
        result = self.store.load_result()
        self.assertIsNone(result.value)
        self.assertIsInstance(result.error, json.JSONDecodeError)

    def test_integer_numbers_are_accepted(self):
        self._write({
            "monthly_budget": 100,
            "transactions": [{"title": "a", "date": "b", "amount": -3, "color": [1, 2, 3, 4]}],
        })
        loaded = self.store.load()
        self.assertEqual(loaded.monthly_budget, 100.0)
        self.assertEqual(loaded.transactions[0].amount, -3.0)
        self.assertEqual(loaded.transactions[0].color, (1, 2, 3, 4))

    def test_negative_budget_loads(self):
        self._write({"monthly_budget": -50.0, "transactions": []})
        self.assertEqual(self.store.load().monthly_budget, -50.0)

    def test_extra_keys_are_ignored(self):
        self._write({
            "monthly_budget": 5.0,
            "version": 3,
            "transactions": [
                {"title": "a", "date": "b", "amount": 1.0, "color": [0, 0, 0, 255], "note": "x"},
            ],
        })
        self.assertEqual(len(self.store.load().transactions), 1)

    def test_shape_mismatches_fall_back(self):
        good_tx = {"title": "a", "date": "b", "amount": 1.0, "color": [0, 0, 0, 255]}
        bad_payloads = [
            [],
            {"transactions": []},
            {"monthly_budget": "2500", "transactions": []},
            {"monthly_budget": True, "transactions": []},
            {"monthly_budget": 1.0},
            {"monthly_budget": 1.0, "transactions": {}},
            {"monthly_budget": 1.0, "transactions": ["x"]},
            {"monthly_budget": 1.0, "transactions": [dict(good_tx, title=None)]},
            {"monthly_budget": 1.0, "transactions": [dict(good_tx, date=7)]},
            {"monthly_budget": 1.0, "transactions": [dict(good_tx, amount="1")]},
            {"monthly_budget": 1.0, "transactions": [dict(good_tx, color=[0, 0, 0])]},
            {"monthly_budget": 1.0, "transactions": [dict(good_tx, color=[0, 0, 0, 256])]},
            {"monthly_budget": 1.0, "transactions": [dict(good_tx, color=[0, 0, 0, 1.5])]},
            {"monthly_budget": 1.0, "transactions": [good_tx, {"title": "only"}]},
        ]
        for payload in bad_payloads:
            with self.subTest(payload=payload):
                self._write(payload)
                result = self.store.load_result()
                self.assertIsNone(result.value)
                self.assertIsInstance(result.error, StateFormatError)

    def test_unusable_numbers_and_nesting_fall_back(self):
        huge = "1" + "0" * 400
        tx = '{"title": "a", "date": "b", "amount": %s, "color": [0, 0, 0, 255]}'
        payloads = {
            "nan budget": '{"monthly_budget": NaN, "transactions": []}',
            "infinite budget": '{"monthly_budget": Infinity, "transactions": []}',
            "negative infinite budget": '{"monthly_budget": -Infinity, "transactions": []}',
            "float overflow budget": '{"monthly_budget": 1e400, "transactions": []}',
            "huge integer budget": '{"monthly_budget": %s, "transactions": []}' % huge,
            "huge integer amount": '{"monthly_budget": 1, "transactions": [%s]}' % (tx % huge),
            "infinite amount": '{"monthly_budget": 1, "transactions": [%s]}' % (tx % "-Infinity"),
            "deep nesting": "[" * 100000 + "]" * 100000,
        }
        for name, payload in payloads.items():
            with self.subTest(name):
                self._write(payload)
                self.assertIsNone(self.store.load())
                state = BudgetService(self.store).initial_state()
                self.assertEqual(state.monthly_budget, 2500.0)
                self.assertEqual(state.transactions, PersistedState.seeded().transactions)

    def test_huge_integer_is_a_format_error(self):
        self._write('{"monthly_budget": 1%s, "transactions": []}' % ("0" * 400))
        self.assertIsInstance(self.store.load_result().error, StateFormatError)

    def test_deep_nesting_is_reported(self):
        self._write("{" + '"a":{' * 100000 + "}" * 100001)
        self.assertIsInstance(self.store.load_result().error, RecursionError)

    def test_save_failure_is_reported_not_raised(self):
        store = StateStore(Path(self._tmp.name) / "missing_dir" / "budget_data.json")
        result = store.save(PersistedState.seeded())
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, OSError)

    def test_save_overwrites(self):
        self.store.save(PersistedState.seeded())
        self.store.save(PersistedState(monthly_budget=1.0))
        loaded = self.store.load()
        self.assertEqual(loaded.monthly_budget, 1.0)
        self.assertEqual(loaded.transactions, [])


if __name__ == "__main__":
    unittest.main()
