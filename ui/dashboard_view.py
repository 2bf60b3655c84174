import customtkinter as ctk
from models.app_state import AppState
from models.transaction import Transaction
from services.budget_math import remaining, total_spent
from services.budget_service import BudgetService
from ui.components.transaction_form import TransactionForm
from utils.colors import to_hex
from utils.constants import (
    ACCENT_HEX, CURRENCY_CODE, NEGATIVE_AMOUNT_HEX, POSITIVE_AMOUNT_HEX, STATUS_HEX,
)
from utils.currency import format_currency, format_signed


class DashboardView(ctk.CTkFrame):
    """Budget card, quick-add row, recent transactions and status line.

    Widget text is copied into the AppState before each service call and
    copied back afterwards; the service decides what gets cleared.
    """

    def __init__(self, master, budget_service: BudgetService, state: AppState, **kwargs):
        super().__init__(master, fg_color=("gray92", "#121218"), corner_radius=0, **kwargs)
        self._svc = budget_service
        self._state = state

        self._budget_var = ctk.StringVar(value=state.budget_input)
        self._desc_var = ctk.StringVar(value=state.entry_description)
        self._amount_var = ctk.StringVar(value=state.entry_amount)
        self._status_var = ctk.StringVar(value=state.status)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(4, weight=1)

        self._build_header()
        self._build_summary_cards()
        self._build_budget_card()
        self._build_recent_list()
        self._build_status_line()
        self.refresh()

    # ── Layout ───────────────────────────────────────────────────────────────

    def _build_header(self):
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(14, 0))
        ctk.CTkLabel(
            header, text="Dashboard", font=ctk.CTkFont(size=20, weight="bold"),
        ).pack(side="left")
        ctk.CTkButton(
            header, text="New transaction", corner_radius=10,
            fg_color=ACCENT_HEX, text_color="white",
            font=ctk.CTkFont(weight="bold"),
            command=self._open_new_transaction,
        ).pack(side="right")

    def _build_summary_cards(self):
        self._card_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._card_frame.grid(row=1, column=0, sticky="ew", padx=10, pady=10)
        self._card_frame.grid_columnconfigure((0, 1), weight=1)

    def _build_budget_card(self):
        card = ctk.CTkFrame(
            self, fg_color=("gray86", "#191921"), corner_radius=12,
            border_width=1, border_color=("gray70", "#2D2D37"),
        )
        card.grid(row=2, column=0, sticky="ew", padx=16, pady=(0, 12))
        card.grid_columnconfigure(2, weight=1)

        ctk.CTkLabel(card, text="Monthly budget", text_color="gray60").grid(
            row=0, column=0, padx=(14, 12), pady=(12, 0), sticky="w"
        )
        self._budget_label = ctk.CTkLabel(
            card, text="", font=ctk.CTkFont(size=18, weight="bold")
        )
        self._budget_label.grid(row=1, column=0, padx=(14, 12), sticky="w")

        ctk.CTkLabel(card, text="Remaining", text_color="gray60").grid(
            row=0, column=1, padx=12, pady=(12, 0), sticky="w"
        )
        self._remaining_label = ctk.CTkLabel(
            card, text="", text_color=POSITIVE_AMOUNT_HEX,
            font=ctk.CTkFont(weight="bold"),
        )
        self._remaining_label.grid(row=1, column=1, padx=12, sticky="w")

        budget_row = ctk.CTkFrame(card, fg_color="transparent")
        budget_row.grid(row=0, column=3, rowspan=2, padx=14, pady=(12, 0), sticky="e")
        ctk.CTkLabel(budget_row, text=f"Budget ({CURRENCY_CODE})", text_color="gray70").pack(
            side="left", padx=(0, 6)
        )
        ctk.CTkEntry(budget_row, textvariable=self._budget_var, width=100).pack(side="left")
        ctk.CTkButton(
            budget_row, text="Update", width=80, command=self._on_update_budget,
        ).pack(side="left", padx=(6, 0))

        entry_row = ctk.CTkFrame(card, fg_color="transparent")
        entry_row.grid(row=2, column=0, columnspan=4, padx=14, pady=12, sticky="w")
        ctk.CTkLabel(entry_row, text="Add entry (description, amount)", text_color="gray70").pack(
            side="left", padx=(0, 6)
        )
        ctk.CTkEntry(
            entry_row, textvariable=self._desc_var, width=200,
        ).pack(side="left", padx=(0, 6))
        ctk.CTkEntry(
            entry_row, textvariable=self._amount_var, width=100,
        ).pack(side="left", padx=(0, 6))
        ctk.CTkButton(
            entry_row, text="Add", width=70, corner_radius=8,
            fg_color=ACCENT_HEX, text_color="white",
            font=ctk.CTkFont(weight="bold"),
            command=self._on_add_entry,
        ).pack(side="left")

    def _build_recent_list(self):
        ctk.CTkLabel(
            self, text="Recent transactions:",
            font=ctk.CTkFont(size=16, weight="bold"), anchor="w",
        ).grid(row=3, column=0, padx=16, sticky="ew")
        self._recent_frame = ctk.CTkScrollableFrame(self, fg_color="transparent", height=320)
        self._recent_frame.grid(row=4, column=0, sticky="nsew", padx=10, pady=(6, 0))
        self._recent_frame.grid_columnconfigure(0, weight=1)

    def _build_status_line(self):
        self._status_label = ctk.CTkLabel(
            self, textvariable=self._status_var, text_color=STATUS_HEX,
            font=ctk.CTkFont(size=13), anchor="w",
        )
        self._status_label.grid(row=5, column=0, padx=16, pady=(8, 12), sticky="ew")

    # ── State sync ───────────────────────────────────────────────────────────

    def _pull(self):
        self._state.budget_input = self._budget_var.get()
        self._state.entry_description = self._desc_var.get()
        self._state.entry_amount = self._amount_var.get()

    def _push(self):
        self._budget_var.set(self._state.budget_input)
        self._desc_var.set(self._state.entry_description)
        self._amount_var.set(self._state.entry_amount)
        self._status_var.set(self._state.status)

    # ── Actions ──────────────────────────────────────────────────────────────

    def _on_update_budget(self):
        self._pull()
        self._svc.set_budget(self._state)
        self.refresh()

    def _on_add_entry(self):
        self._pull()
        self._svc.add_entry(self._state)
        self.refresh()

    def _open_new_transaction(self):
        self._pull()
        self._svc.open_transaction_form(self._state)
        form = TransactionForm(self.winfo_toplevel(), self._svc, self._state)
        self.wait_window(form)
        self.refresh()

    # ── Rendering ────────────────────────────────────────────────────────────

    def refresh(self):
        self._push()
        spent = total_spent(self._state.transactions)

        for w in self._card_frame.winfo_children():
            w.destroy()
        self._make_card(self._card_frame, 0, f"All Account ({CURRENCY_CODE})", -spent, "#7F8AFF")
        self._make_card(self._card_frame, 1, f"Bank ({CURRENCY_CODE})", -spent, "#78FFCD")

        self._budget_label.configure(text=format_currency(self._state.monthly_budget))
        self._remaining_label.configure(
            text=format_currency(remaining(self._state.monthly_budget, self._state.transactions))
        )

        for w in self._recent_frame.winfo_children():
            w.destroy()
        for idx, tx in enumerate(reversed(self._state.transactions)):
            self._make_row(idx, tx)

    def _make_card(self, parent, col, label, value, color):
        card = ctk.CTkFrame(
            parent, fg_color=("gray86", "#23232D"), corner_radius=12,
            border_width=1, border_color=("gray70", "#3C3C50"),
        )
        card.grid(row=0, column=col, padx=6, sticky="ew")
        ctk.CTkLabel(
            card, text=label, font=ctk.CTkFont(size=13), text_color="gray65",
        ).grid(row=0, column=0, columnspan=2, pady=(12, 0), padx=12, sticky="w")
        ctk.CTkLabel(card, text=CURRENCY_CODE, text_color="gray65").grid(
            row=1, column=0, pady=(6, 12), padx=(12, 6), sticky="w"
        )
        ctk.CTkLabel(
            card, text=format_signed(value),
            font=ctk.CTkFont(size=20, weight="bold"), text_color=color,
        ).grid(row=1, column=1, pady=(6, 12), sticky="w")

    def _make_row(self, idx: int, tx: Transaction):
        f = ctk.CTkFrame(self._recent_frame, fg_color=("gray88", "#202028"), corner_radius=10)
        f.grid(row=idx, column=0, sticky="ew", padx=6, pady=3)
        f.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            f, text="●", text_color=to_hex(tx.color),
            font=ctk.CTkFont(size=22),
        ).grid(row=0, column=0, rowspan=2, padx=(12, 8), pady=8)
        ctk.CTkLabel(f, text=tx.title, font=ctk.CTkFont(weight="bold"), anchor="w").grid(
            row=0, column=1, sticky="ew", pady=(8, 0)
        )
        ctk.CTkLabel(
            f, text=tx.date, text_color="gray60", font=ctk.CTkFont(size=12), anchor="w",
        ).grid(row=1, column=1, sticky="ew", pady=(0, 8))
        ctk.CTkLabel(
            f, text=format_signed(tx.amount),
            text_color=NEGATIVE_AMOUNT_HEX if tx.is_expense else POSITIVE_AMOUNT_HEX,
            font=ctk.CTkFont(weight="bold"), anchor="e",
        ).grid(row=0, column=2, rowspan=2, padx=12)
