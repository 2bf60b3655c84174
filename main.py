import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from services.budget_service import BudgetService
from storage.state_store import StateStore
from ui.app_window import AppWindow
from utils.app_config import get_appearance_mode
from utils.constants import DATA_FILE


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ── State ────────────────────────────────────────────────────────────────
    store = StateStore(DATA_FILE)
    budget_svc = BudgetService(store)
    state = budget_svc.initial_state()

    # ── Appearance ───────────────────────────────────────────────────────────
    appearance = get_appearance_mode()
    ctk.set_appearance_mode(appearance)
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        budget_service=budget_svc,
        state=state,
        appearance_mode=appearance,
    )
    app.mainloop()


if __name__ == "__main__":
    main()
