from dataclasses import dataclass, field

from models.persisted_state import PersistedState
from models.transaction import Transaction
from utils.constants import DEFAULT_DATE_LABEL


@dataclass
class AppState:
    """Everything the window needs: persisted data plus transient form text.

    Owned by the top-level window and handed to each BudgetService call.
    """
    monthly_budget: float
    transactions: list[Transaction] = field(default_factory=list)
    budget_input: str = ""
    entry_description: str = ""
    entry_amount: str = ""
    status: str = ""
    show_new_tx: bool = False
    form_title: str = ""
    form_amount: str = ""
    form_date: str = DEFAULT_DATE_LABEL

    def to_persisted(self) -> PersistedState:
        return PersistedState(
            monthly_budget=self.monthly_budget,
            transactions=list(self.transactions),
        )
