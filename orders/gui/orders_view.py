"""
orders/gui/orders_view.py

Orders page: new orders, search (background), CSV export, website.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, simpledialog, ttk
from typing import List

from core.theme.gui.theme_applier import MUTED_LABEL, TITLE_LABEL
from framework.gui.page_base import BasePage
from orders.logic.orders_service import OrdersService, suggested_export_name


class OrdersView(BasePage):
    def _build_ui(self) -> None:
        self.service: OrdersService = self.ctx.service("orders")
        self._results: List[str] = []
        self._searching = False

        self.title_label = ttk.Label(self, style=TITLE_LABEL)
        self.title_label.pack(anchor="w", padx=24, pady=(24, 12))

        buttons = ttk.Frame(self)
        buttons.pack(anchor="w", padx=24)
        self.new_button = ttk.Button(buttons, command=self._on_new_orders)
        self.search_button = ttk.Button(buttons, command=self._on_search)
        self.export_button = ttk.Button(buttons, command=self._on_export)
        self.website_button = ttk.Button(buttons, command=self._on_open_website)
        for btn in (self.new_button, self.search_button, self.export_button, self.website_button):
            btn.pack(side="left", padx=(0, 8))

        status_row = ttk.Frame(self)
        status_row.pack(fill="x", padx=24, pady=(16, 4))
        self.status_label = ttk.Label(status_row, style=MUTED_LABEL)
        self.status_label.pack(side="left")
        self.progress = ttk.Progressbar(status_row, mode="indeterminate", length=160)

        self.results_title = ttk.Label(self)
        self.results_list = tk.Listbox(self, height=8, activestyle="none", borderwidth=0)

        self._update_button_states()

    def update_texts(self) -> None:
        self.title_label.configure(text=self.T("orders"))
        self.new_button.configure(text=self.T("newOrders"))
        self.search_button.configure(text=self.T("searchOrders"))
        self.export_button.configure(text=self.T("export"))
        self.website_button.configure(text=self.T("openWebsite"))
        self.results_title.configure(text=self.T("searchResults"))
        if self._searching:
            self.status_label.configure(text=self.T("searching"))
        elif self._results:
            self.status_label.configure(text=self.T("ordersFound").format(count=len(self._results)))

    def _update_button_states(self) -> None:
        self.export_button.state(["!disabled"] if self.service.has_export_data() else ["disabled"])
        self.search_button.state(["disabled"] if self._searching else ["!disabled"])

    # ------------------------------------------------------------------ #
    #  Actions                                                           #
    # ------------------------------------------------------------------ #
    def _on_new_orders(self) -> None:
        self.service.open_new_orders()
        self.show_info(self.T("newOrdersInfo"), title_key="newOrders")

    def _on_search(self) -> None:
        term = simpledialog.askstring(self.T("searchOrders"), self.T("searchPrompt"), parent=self)
        if term is None or not term.strip():
            return
        term = term.strip()

        self._searching = True
        self.status_label.configure(text=self.T("searching"))
        self.progress.pack(side="left", padx=12)
        self.progress.start(12)
        self._update_button_states()

        self.ctx.dispatcher.run_in_background(
            lambda: self.service.search(term),
            on_success=lambda results: self._on_search_done(term, results),
            on_error=self._on_search_failed,
            token=self.token,
            name="orders-search",
        )

    def _stop_progress(self) -> None:
        self._searching = False
        self.progress.stop()
        self.progress.pack_forget()
        self._update_button_states()

    def _on_search_done(self, term: str, results: List[str]) -> None:
        self._stop_progress()
        self._results = list(results)
        self.results_list.delete(0, "end")
        for line in self._results:
            self.results_list.insert("end", line)
        self.results_title.pack(anchor="w", padx=24, pady=(12, 4))
        self.results_list.pack(fill="x", padx=24)
        if self._results:
            self.status_label.configure(text=self.T("ordersFound").format(count=len(self._results)))
        else:
            self.status_label.configure(text=self.T("noResultsFound"))
        self.service.record_search(term)
        self.set_status(self.status_label.cget("text"))

    def _on_search_failed(self, exc: BaseException) -> None:
        self._stop_progress()
        message = self.T("searchFailed").format(error=exc)
        self.status_label.configure(text=message)
        self.show_error(message)

    def _on_export(self) -> None:
        path = filedialog.asksaveasfilename(
            parent=self,
            title=self.T("export"),
            initialfile=suggested_export_name(),
            defaultextension=".csv",
            filetypes=[("CSV", "*.csv")],
        )
        if not path:
            return
        try:
            written = self.service.export_csv(path)
        except OSError as exc:
            self.show_error(self.T("exportFailed").format(error=exc))
            return
        self.show_info(self.T("exportDone").format(path=written), title_key="success")

    def _on_open_website(self) -> None:
        url = self.service.website_url()
        if not url:
            entered = simpledialog.askstring(self.T("openWebsite"), self.T("websitePrompt"), parent=self)
            if entered is None or not entered.strip():
                return
            url = self.service.store_website_url(entered)
        if not self.service.open_website(url):
            self.show_warning(self.T("websiteOpenFailed").format(url=url))
