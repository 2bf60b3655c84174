"""Load and save the budget snapshot as a single JSON document.

File shape:
    {"monthly_budget": <number>,
     "transactions": [{"title": str, "date": str, "amount": <number>,
                       "color": [r, g, b, a]}, ...]}

Any failure while loading means "use the defaults"; failures while saving are
reported through StoreResult and logged, never raised.
"""
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from models.persisted_state import PersistedState
from models.transaction import Transaction
from utils.colors import is_valid_color
from utils.constants import DATA_FILE

logger = logging.getLogger(__name__)


class StateFormatError(ValueError):
    """The file parsed as JSON but does not have the expected shape."""


@dataclass
class StoreResult:
    value: Optional[PersistedState] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        # integers beyond float range
        return False


class StateStore:
    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else Path(DATA_FILE)

    # ── Serialisation ────────────────────────────────────────────────────────

    def _transaction_to_dict(self, tx: Transaction) -> dict:
        return {
            "title": tx.title,
            "date": tx.date,
            "amount": tx.amount,
            "color": list(tx.color),
        }

    def _dict_to_transaction(self, data: Any, index: int) -> Transaction:
        if not isinstance(data, dict):
            raise StateFormatError(f"transactions[{index}] is not an object")
        title = data.get("title")
        date = data.get("date")
        amount = data.get("amount")
        color = data.get("color")
        if not isinstance(title, str):
            raise StateFormatError(f"transactions[{index}].title must be a string")
        if not isinstance(date, str):
            raise StateFormatError(f"transactions[{index}].date must be a string")
        if not _is_number(amount):
            raise StateFormatError(f"transactions[{index}].amount must be a number")
        if not is_valid_color(color):
            raise StateFormatError(f"transactions[{index}].color must be [r, g, b, a]")
        return Transaction(
            title=title,
            date=date,
            amount=float(amount),
            color=tuple(color),
        )

    def to_dict(self, state: PersistedState) -> dict:
        return {
            "monthly_budget": state.monthly_budget,
            "transactions": [self._transaction_to_dict(t) for t in state.transactions],
        }

    def from_dict(self, data: Any) -> PersistedState:
        """Build a PersistedState, raising StateFormatError on any shape mismatch."""
        if not isinstance(data, dict):
            raise StateFormatError("top level is not an object")
        budget = data.get("monthly_budget")
        if not _is_number(budget):
            raise StateFormatError("monthly_budget must be a number")
        raw_transactions = data.get("transactions")
        if not isinstance(raw_transactions, list):
            raise StateFormatError("transactions must be a list")
        return PersistedState(
            monthly_budget=float(budget),
            transactions=[
                self._dict_to_transaction(t, i) for i, t in enumerate(raw_transactions)
            ],
        )

    # ── I/O ──────────────────────────────────────────────────────────────────

    def load_result(self) -> StoreResult:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            state = self.from_dict(data)
        except FileNotFoundError as e:
            logger.info("No data file at %s; using defaults", self.path)
            return StoreResult(error=e)
        except (OSError, ValueError, RecursionError) as e:
            # JSONDecodeError, UnicodeDecodeError and StateFormatError are ValueErrors;
            # RecursionError comes from pathologically nested arrays or objects
            logger.warning("Could not load %s, using defaults: %s", self.path, e)
            return StoreResult(error=e)
        logger.info(
            "Loaded %d transactions from %s", len(state.transactions), self.path
        )
        return StoreResult(value=state)

    def load(self) -> Optional[PersistedState]:
        """Return the saved state, or None if it is missing or unusable."""
        return self.load_result().value

    def save(self, state: PersistedState) -> StoreResult:
        """Overwrite the data file with the full state. Not atomic."""
        try:
            text = json.dumps(self.to_dict(state), indent=2, allow_nan=False)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Could not save %s: %s", self.path, e)
            return StoreResult(value=state, error=e)
        return StoreResult(value=state)
