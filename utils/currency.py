import math
import re

from utils.constants import CURRENCY_CODE

# Plain decimal: optional sign, digits with optional fraction, optional exponent.
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_amount(text: str) -> float | None:
    """Parse user-typed text as a finite decimal, returning None on failure."""
    if text is None:
        return None
    text = text.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def format_currency(amount: float, code: str = CURRENCY_CODE) -> str:
    """Format a float with its currency code, e.g. 'PHP 1234.56'."""
    return f"{code} {amount:.2f}"


def format_signed(amount: float) -> str:
    """Format with an explicit +/- sign, e.g. '+12.00' or '-458.00'."""
    return f"{amount:+.2f}"
