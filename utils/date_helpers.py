from datetime import date, datetime

from utils.constants import DATE_LABEL_FORMAT, DEFAULT_DATE_LABEL


def today() -> date:
    return date.today()


def format_date_label(d: date) -> str:
    """Render a calendar date as a transaction label, e.g. 'Aug 31, 2023'."""
    return d.strftime(DATE_LABEL_FORMAT)


def parse_date_label(label: str) -> date | None:
    """Best-effort reverse of format_date_label.

    Labels are free-form text; 'Today' maps to today's date and anything
    unrecognised returns None.
    """
    if not label:
        return None
    label = label.strip()
    if label.lower() == DEFAULT_DATE_LABEL.lower():
        return today()
    for fmt in (DATE_LABEL_FORMAT, "%Y-%m-%d", "%m/%d/%Y"):
        try:
            return datetime.strptime(label, fmt).date()
        except ValueError:
            continue
    return None
