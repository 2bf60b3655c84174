import customtkinter as ctk
from models.app_state import AppState
from services.budget_service import BudgetService
from ui.components.date_picker import DateLabelPicker
from utils.constants import ACCENT_HEX


class TransactionForm(ctk.CTkToplevel):
    """Modal 'New transaction' dialog: title, date label and signed amount."""

    def __init__(
        self,
        master,
        budget_service: BudgetService,
        state: AppState,
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._svc = budget_service
        self._state = state

        self.title("New transaction")
        self.resizable(False, False)
        self.grid_columnconfigure(0, weight=1)

        r = 0
        ctk.CTkLabel(
            self, text="Add a new transaction",
            font=ctk.CTkFont(size=15, weight="bold"), anchor="w",
        ).grid(row=r, column=0, padx=16, pady=(16, 8), sticky="ew")
        r += 1

        # Title
        self._label("Title", r)
        r += 1
        self._title_var = ctk.StringVar(value=state.form_title)
        ctk.CTkEntry(self, textvariable=self._title_var, width=320).grid(
            row=r, column=0, padx=16, pady=(0, 6), sticky="ew"
        )
        r += 1

        # Date label
        self._label("Date", r)
        r += 1
        self._date_var = ctk.StringVar(value=state.form_date)
        DateLabelPicker(self, variable=self._date_var).grid(
            row=r, column=0, padx=16, pady=(0, 6), sticky="ew"
        )
        r += 1

        # Amount
        self._label("Amount (use negative for expense, positive for income)", r)
        r += 1
        self._amount_var = ctk.StringVar(value=state.form_amount)
        ctk.CTkEntry(self, textvariable=self._amount_var, width=320).grid(
            row=r, column=0, padx=16, pady=(0, 6), sticky="ew"
        )
        r += 1

        self._build_footer(r)

        self.protocol("WM_DELETE_WINDOW", self._on_cancel)
        self.transient(master)
        self.grab_set()
        self._center()

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text, anchor="w").grid(
            row=row, column=0, padx=16, pady=(4, 0), sticky="ew"
        )

    def _build_footer(self, r):
        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=320, anchor="w"
        ).grid(row=r, column=0, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Save", width=90,
            fg_color=ACCENT_HEX, text_color="white",
            command=self._on_save,
        ).pack(side="left")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._on_cancel,
        ).pack(side="left", padx=8)

    def _pull(self):
        self._state.form_title = self._title_var.get()
        self._state.form_date = self._date_var.get()
        self._state.form_amount = self._amount_var.get()

    def _on_save(self):
        self._pull()
        outcome = self._svc.save_transaction_form(self._state)
        if not outcome.accepted:
            self._error_var.set(outcome.status)
            return
        self.destroy()

    def _on_cancel(self):
        # Typed text survives until the next opening
        self._pull()
        self._svc.cancel_transaction_form(self._state)
        self.destroy()

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
