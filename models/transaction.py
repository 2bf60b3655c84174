from dataclasses import dataclass

from utils.colors import RGBA


@dataclass
class Transaction:
    title: str
    date: str               # free-form label, e.g. 'Aug 31, 2023' or 'Today'
    amount: float           # negative = expense, positive = income
    color: RGBA = (180, 180, 200, 255)

    @property
    def is_expense(self) -> bool:
        return self.amount < 0
