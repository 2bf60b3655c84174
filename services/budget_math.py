from typing import Iterable

from models.transaction import Transaction


def total_spent(transactions: Iterable[Transaction]) -> float:
    """Sum of absolute amounts. Income counts toward spending too."""
    return sum((abs(t.amount) for t in transactions), 0.0)


def remaining(monthly_budget: float, transactions: Iterable[Transaction]) -> float:
    """Budget left after spending; may be negative."""
    return monthly_budget - total_spent(transactions)
