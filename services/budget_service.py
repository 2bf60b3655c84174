import logging
from dataclasses import dataclass
from typing import Optional

from models.app_state import AppState
from models.persisted_state import PersistedState
from models.transaction import Transaction
from storage.state_store import StateStore, StoreResult
from utils.constants import (
    DEFAULT_BUDGET_INPUT, DEFAULT_DATE_LABEL,
    EXPENSE_COLOR, INCOME_COLOR, QUICK_ADD_COLOR,
)
from utils.currency import parse_amount

logger = logging.getLogger(__name__)


@dataclass
class ActionOutcome:
    accepted: bool
    status: str
    save_result: Optional[StoreResult] = None


class BudgetService:
    """User actions on an AppState. Never raises; failures end up in the status."""

    def __init__(self, store: StateStore):
        self._store = store

    def initial_state(self) -> AppState:
        saved = self._store.load()
        if saved is not None:
            return AppState(
                monthly_budget=saved.monthly_budget,
                transactions=saved.transactions,
                budget_input=f"{saved.monthly_budget:.2f}",
            )
        seed = PersistedState.seeded()
        return AppState(
            monthly_budget=seed.monthly_budget,
            transactions=seed.transactions,
            budget_input=DEFAULT_BUDGET_INPUT,
        )

    # ── Budget ───────────────────────────────────────────────────────────────

    def set_budget(self, state: AppState) -> ActionOutcome:
        try:
            value = self._parse_budget(state.budget_input)
        except ValueError as e:
            return self._reject(state, str(e))
        state.monthly_budget = value
        state.status = f"Monthly budget set to ${value:.2f}"
        return self._accept(state)

    # ── Quick-add entry ──────────────────────────────────────────────────────

    def add_entry(self, state: AppState) -> ActionOutcome:
        """Append the quick-add description/amount as an expense dated 'Today'."""
        try:
            amount = self._parse_positive(state.entry_amount)
            title = self._require_text(
                state.entry_description, "Describe the entry before adding it."
            )
        except ValueError as e:
            return self._reject(state, str(e))

        state.transactions.append(Transaction(
            title=title,
            date=DEFAULT_DATE_LABEL,
            amount=-amount,
            color=QUICK_ADD_COLOR,
        ))
        state.entry_description = ""
        state.entry_amount = ""
        state.status = "Entry added."
        return self._accept(state)

    # ── Full add-transaction form ────────────────────────────────────────────

    def open_transaction_form(self, state: AppState):
        state.show_new_tx = True

    def cancel_transaction_form(self, state: AppState):
        state.show_new_tx = False

    def save_transaction_form(self, state: AppState) -> ActionOutcome:
        """Append the form's transaction with its typed sign, then clear and hide the form."""
        try:
            title = self._require_text(
                state.form_title, "Enter a title for the transaction."
            )
            amount = parse_amount(state.form_amount)
            if amount is None:
                raise ValueError("Enter a valid number for amount.")
        except ValueError as e:
            return self._reject(state, str(e))

        state.transactions.append(Transaction(
            title=title,
            date=state.form_date.strip(),
            amount=amount,
            color=EXPENSE_COLOR if amount < 0 else INCOME_COLOR,
        ))
        state.form_title = ""
        state.form_amount = ""
        state.form_date = DEFAULT_DATE_LABEL
        state.status = "Transaction saved."
        outcome = self._accept(state)
        state.show_new_tx = False
        return outcome

    # ── Helpers ──────────────────────────────────────────────────────────────

    def _accept(self, state: AppState) -> ActionOutcome:
        # A failed save is logged by the store but not shown to the user.
        result = self._store.save(state.to_persisted())
        return ActionOutcome(accepted=True, status=state.status, save_result=result)

    def _reject(self, state: AppState, message: str) -> ActionOutcome:
        logger.debug("Rejected input: %s", message)
        state.status = message
        return ActionOutcome(accepted=False, status=message)

    def _parse_budget(self, text: str) -> float:
        value = parse_amount(text)
        if value is None or value < 0:
            raise ValueError("Enter a valid non-negative number for the monthly budget.")
        return value

    def _parse_positive(self, text: str) -> float:
        value = parse_amount(text)
        if value is None or value <= 0:
            raise ValueError("Enter a positive number for the amount.")
        return value

    def _require_text(self, text: str, message: str) -> str:
        text = text.strip()
        if not text:
            raise ValueError(message)
        return text
