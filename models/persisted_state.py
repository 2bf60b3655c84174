from dataclasses import dataclass, field

from models.transaction import Transaction
from utils.constants import DEFAULT_MONTHLY_BUDGET, SEED_TRANSACTIONS


@dataclass
class PersistedState:
    """The on-disk snapshot: budget plus the ordered transaction list."""
    monthly_budget: float
    transactions: list[Transaction] = field(default_factory=list)

    @classmethod
    def seeded(cls) -> "PersistedState":
        """Default state used when no data file can be loaded."""
        return cls(
            monthly_budget=DEFAULT_MONTHLY_BUDGET,
            transactions=[Transaction(**t) for t in SEED_TRANSACTIONS],
        )
