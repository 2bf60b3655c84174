from utils.colors import rgb

APP_NAME = "DYBudget"
APP_WIDTH = 1000
APP_HEIGHT = 700
DATA_FILE = "budget_data.json"

DEFAULT_MONTHLY_BUDGET = 2500.0
DEFAULT_BUDGET_INPUT = "2500"
DEFAULT_DATE_LABEL = "Today"
CURRENCY_CODE = "PHP"

# RGBA, as stored in the data file
QUICK_ADD_COLOR = rgb(88, 172, 255)
EXPENSE_COLOR = rgb(230, 78, 95)
INCOME_COLOR = rgb(110, 220, 140)

NEGATIVE_AMOUNT_HEX = "#F05064"
POSITIVE_AMOUNT_HEX = "#6EDC8C"
ACCENT_HEX = "#5C6AFF"
STATUS_HEX = "#8CB4FF"

SEED_TRANSACTIONS = [
    {"title": "teva overflow",      "date": "Aug 31, 2023", "amount": -458.00, "color": rgb(42, 201, 121)},
    {"title": "mcdonald",           "date": "Aug 30, 2023", "amount": -119.46, "color": rgb(230, 78, 95)},
    {"title": "bath and bodyworks", "date": "Aug 30, 2023", "amount": -80.00,  "color": rgb(110, 133, 255)},
    {"title": "dominos pizza",      "date": "Aug 28, 2023", "amount": -81.00,  "color": rgb(230, 156, 71)},
    {"title": "dr.locker",          "date": "Aug 28, 2023", "amount": -40.00,  "color": rgb(180, 180, 200)},
]

NAV_ITEMS = ["Home", "Accounts", "Categories"]
ANALYTICS_NAV_ITEMS = ["Cashflow", "Expenses", "Income"]
APPEARANCE_MODES = ["dark", "light", "system"]
DEFAULT_APPEARANCE_MODE = "dark"

# Display label format used by the calendar popup, e.g. "Aug 31, 2023"
DATE_LABEL_FORMAT = "%b %d, %Y"
