import customtkinter as ctk
from tkcalendar import Calendar
import tkinter as tk
from tkinter import ttk
from utils.date_helpers import format_date_label, parse_date_label, today


class DateLabelPicker(ctk.CTkFrame):
    """Free-text date label entry + calendar popup button.

    The label is stored exactly as typed ('Today', 'payday', 'Aug 31, 2023').
    Picking a day in the popup replaces the text with a formatted label.
    """

    def __init__(self, master, variable: tk.StringVar, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self._var = variable
        self._popup: ctk.CTkToplevel | None = None

        self._entry = ctk.CTkEntry(self, textvariable=self._var, width=200)
        self._entry.grid(row=0, column=0, sticky="ew")

        self._btn = ctk.CTkButton(
            self, text="📅", width=32, command=self._open_popup
        )
        self._btn.grid(row=0, column=1, padx=(4, 0))

    def _open_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._popup.destroy()
            self._popup = None
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        # Theme the calendar to match CTk appearance
        mode = ctk.get_appearance_mode()
        if mode == "Dark":
            bg, fg = "#24242E", "#DCE1EB"
        else:
            bg, fg = "#ffffff", "#000000"
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure(
            "Calendar.Treeview",
            background=bg, foreground=fg,
            fieldbackground=bg,
        )

        current = parse_date_label(self._var.get()) or today()

        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern="yyyy-mm-dd",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#5C6AFF",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_date_selected(cal, popup))

        # Position below the entry
        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")

        popup.bind("<FocusOut>", lambda e: self._maybe_close(popup))

    def _on_date_selected(self, cal, popup):
        self._var.set(format_date_label(cal.selection_get()))
        popup.destroy()
        self._popup = None

    def _maybe_close(self, popup):
        try:
            focused = popup.focus_get()
        except (KeyError, tk.TclError):
            # focus_get() raises when focus moved to a destroyed or foreign widget
            focused = None
        if focused is None or not str(focused).startswith(str(popup)):
            popup.destroy()
            self._popup = None
