# schoolgate/views/my_permissions.py
from __future__ import annotations
import customtkinter as ctk
import pandas as pd
from ..widgets.table import DataFrameTable
from ..widgets.forms import FormGrid
from ..widgets.cards import Section
from ..widgets.toast import run_or_toast, show_toast
from ..data.frames import to_frame

PERMISSION_TYPES = ["sick", "leave", "family", "other"]

class View(ctk.CTkFrame):
    """The student's own permission requests and a form to file a new one."""
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.svc = app.student_service
        self.export_df = pd.DataFrame()

        self.grid_columnconfigure(0, weight=3); self.grid_columnconfigure(1, weight=2)
        self.grid_rowconfigure(0, weight=1)

        self.table = DataFrameTable(self, pd.DataFrame(), searchable=False)
        self.table.grid(row=0, column=0, sticky="nsew", padx=6, pady=6)

        side = Section(self, "Request permission")
        side.grid(row=0, column=1, sticky="nsew", padx=(0, 6), pady=6)
        self.form = FormGrid(side, [
            ("type", "Type", PERMISSION_TYPES),
            ("startDate", "From (YYYY-MM-DD)"),
            ("endDate", "To (YYYY-MM-DD)"),
            ("reason", "Reason"),
        ])
        self.form.grid(row=1, column=0, sticky="ew", padx=10, pady=6)
        ctk.CTkButton(side, text="Submit", command=self._submit).grid(row=2, column=0, sticky="e", padx=10, pady=(4, 10))

        self.after_idle(self.reload)

    def reload(self):
        ok, data = run_or_toast(self, self.svc.get_student_permissions)
        if not ok: return
        self.export_df = to_frame(data)
        self.table.set_df(self.export_df)

    def _submit(self):
        v = self.form.values()
        if not v["startDate"] or not v["reason"]:
            show_toast(self, "Start date and reason are required.", kind="error"); return
        if not v["endDate"]:
            v["endDate"] = v["startDate"]
        ok, _ = run_or_toast(self, self.svc.request_permission, v, ok_message="Permission requested.")
        if ok:
            self.form.clear()
            self.reload()
