"""
history_view.py

Verlauf: Filter (Zeitraum, Typ), Tabelle der Einträge, Löschen.

Refreshes itself when a new event is logged while the page is shown.
"""
from __future__ import annotations

import tkinter as tk
from datetime import date, timedelta
from tkinter import messagebox, ttk

from tkcalendar import DateEntry

from core.helpers import date_time_helper as dt
from core.theme.gui.theme_applier import MUTED_LABEL, TITLE_LABEL
from framework.gui.page_base import BasePage
from history.models.history_event import HistoryEvent

COLUMNS = ("time", "type", "user", "message")


class HistoryView(BasePage):
    def _build_ui(self) -> None:
        self.history = self.ctx.history

        self.title_label = ttk.Label(self, style=TITLE_LABEL)
        self.title_label.pack(anchor="w", padx=24, pady=(24, 12))

        filters = ttk.Frame(self)
        filters.pack(fill="x", padx=24)

        self.use_dates_var = tk.BooleanVar(value=False)
        self.use_dates_check = ttk.Checkbutton(filters, variable=self.use_dates_var,
                                               command=self._populate)
        self.use_dates_check.pack(side="left")
        self.from_label = ttk.Label(filters)
        self.from_label.pack(side="left", padx=(4, 2))
        self.start_entry = DateEntry(filters, date_pattern="dd.mm.yyyy", width=11)
        self.start_entry.set_date(date.today() - timedelta(days=30))
        self.start_entry.pack(side="left")
        self.to_label = ttk.Label(filters)
        self.to_label.pack(side="left", padx=(8, 2))
        self.end_entry = DateEntry(filters, date_pattern="dd.mm.yyyy", width=11)
        self.end_entry.set_date(date.today())
        self.end_entry.pack(side="left")

        self.type_label = ttk.Label(filters)
        self.type_label.pack(side="left", padx=(16, 2))
        self.type_var = tk.StringVar()
        self.type_combo = ttk.Combobox(filters, textvariable=self.type_var, state="readonly", width=24)
        self.type_combo.pack(side="left")
        self.type_combo.bind("<<ComboboxSelected>>", lambda _e: self._populate())

        self.refresh_button = ttk.Button(filters, command=self._populate)
        self.refresh_button.pack(side="left", padx=(16, 4))
        self.clear_button = ttk.Button(filters, command=self._on_clear)
        self.clear_button.pack(side="right")

        table = ttk.Frame(self)
        table.pack(fill="both", expand=True, padx=24, pady=12)
        self.tree = ttk.Treeview(table, columns=COLUMNS, show="headings")
        self.tree.column("time", width=150, stretch=False)
        self.tree.column("type", width=170, stretch=False)
        self.tree.column("user", width=120, stretch=False)
        self.tree.column("message", width=420)
        scroll = ttk.Scrollbar(table, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=scroll.set)
        self.tree.pack(side="left", fill="both", expand=True)
        scroll.pack(side="right", fill="y")

        self.count_label = ttk.Label(self, style=MUTED_LABEL)
        self.count_label.pack(anchor="w", padx=24, pady=(0, 16))

        self._count = 0
        self.history.subscribe(self._on_new_event)

    # ------------------------------------------------------------------ #
    def update_texts(self) -> None:
        self.title_label.configure(text=self.T("history"))
        self.from_label.configure(text=self.T("from"))
        self.to_label.configure(text=self.T("to"))
        self.type_label.configure(text=self.T("type"))
        self.refresh_button.configure(text=self.T("refresh"))
        self.clear_button.configure(text=self.T("clearHistory"))
        for col in COLUMNS:
            self.tree.heading(col, text=self.T(col))
        self._load_types()
        self.count_label.configure(text=self.T("eventsShown").format(count=self._count))

    def on_show(self) -> None:
        super().on_show()
        self._populate()

    def dispose(self) -> None:
        self.history.unsubscribe(self._on_new_event)
        super().dispose()

    # ------------------------------------------------------------------ #
    def _load_types(self) -> None:
        current = self.type_var.get()
        values = [self.T("all")] + self.history.event_types()
        self.type_combo.configure(values=values)
        self.type_var.set(current if current in values else values[0])

    def _selected_type(self) -> str | None:
        value = self.type_var.get()
        return None if not value or value == self.T("all") else value

    def _populate(self) -> None:
        start = end = None
        if self.use_dates_var.get():
            start, end = self.start_entry.get_date(), self.end_entry.get_date()
            if start > end:
                start, end = end, start
        events = self.history.get_history(event_type=self._selected_type(), start_day=start, end_day=end)

        self.tree.delete(*self.tree.get_children())
        for event in events:
            self.tree.insert("", "end", iid=str(event.id),
                             values=(dt.utc_to_local_str(event.at), event.type, event.user, event.message))
        self._count = len(events)
        self.count_label.configure(text=self.T("eventsShown").format(count=self._count))

    def _on_new_event(self, _event: HistoryEvent) -> None:
        if not self._disposed:
            self._load_types()
            self._populate()

    def _on_clear(self) -> None:
        if not messagebox.askyesno(self.T("clearHistory"), self.T("confirmClearHistory"), parent=self):
            return
        self.history.clear()
        self._load_types()
        self._populate()
