import customtkinter as ctk
from models.app_state import AppState
from services.budget_service import BudgetService
from ui.dashboard_view import DashboardView
from utils.app_config import set_appearance_mode
from utils.constants import (
    ANALYTICS_NAV_ITEMS, APP_HEIGHT, APP_NAME, APP_WIDTH, APPEARANCE_MODES, NAV_ITEMS,
)


class AppWindow(ctk.CTk):
    def __init__(
        self,
        budget_service: BudgetService,
        state: AppState,
        appearance_mode: str = "dark",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._svc = budget_service
        self._state = state
        self._appearance_mode = appearance_mode

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._build_nav()
        self._dashboard = DashboardView(self, budget_service=self._svc, state=self._state)
        self._dashboard.grid(row=0, column=1, sticky="nsew")

    # ── Navigation column ────────────────────────────────────────────────────
    def _build_nav(self):
        nav = ctk.CTkFrame(self, width=190, corner_radius=0)
        nav.grid(row=0, column=0, sticky="ns")
        nav.grid_propagate(False)
        nav.grid_columnconfigure(0, weight=1)
        nav.grid_rowconfigure(20, weight=1)

        ctk.CTkLabel(
            nav, text="Spensieur", font=ctk.CTkFont(size=18, weight="bold"),
        ).grid(row=0, column=0, pady=(12, 16))

        r = 1
        for i, item in enumerate(NAV_ITEMS):
            self._nav_item(nav, item, selected=(i == 0)).grid(
                row=r, column=0, sticky="ew", padx=10, pady=2
            )
            r += 1

        ctk.CTkLabel(nav, text="Analytics", text_color="gray60", anchor="w").grid(
            row=r, column=0, sticky="ew", padx=16, pady=(18, 2)
        )
        r += 1
        for item in ANALYTICS_NAV_ITEMS:
            self._nav_item(nav, item).grid(row=r, column=0, sticky="ew", padx=10, pady=2)
            r += 1

        # Options: appearance mode, pinned to the bottom
        ctk.CTkLabel(nav, text="Options", text_color="gray60", anchor="w").grid(
            row=21, column=0, sticky="ew", padx=16, pady=(0, 2)
        )
        self._appearance_var = ctk.StringVar(value=self._appearance_mode.title())
        ctk.CTkOptionMenu(
            nav,
            values=[m.title() for m in APPEARANCE_MODES],
            variable=self._appearance_var,
            command=self._on_appearance_changed,
        ).grid(row=22, column=0, sticky="ew", padx=10, pady=(0, 12))

    def _nav_item(self, parent, label: str, selected: bool = False):
        return ctk.CTkLabel(
            parent, text=label, anchor="w", corner_radius=6,
            fg_color=("gray78", "#32323C") if selected else "transparent",
            font=ctk.CTkFont(weight="bold"), padx=10, height=32,
        )

    def _on_appearance_changed(self, value: str):
        mode = value.lower()
        set_appearance_mode(mode)
        ctk.set_appearance_mode(mode)
