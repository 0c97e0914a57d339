# schoolgate/views/attendance.py
from __future__ import annotations
import customtkinter as ctk
import pandas as pd
from ..widgets.table import DataFrameTable
from ..widgets.cards import KPICard
from ..widgets.toast import run_or_toast
from ..data.frames import to_frame, pick_col, STATUS_KEYS

class View(ctk.CTkFrame):
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.export_df = pd.DataFrame()
        self.kpis = ctk.CTkFrame(self, fg_color="transparent")
        self.kpis.pack(fill="x", padx=6, pady=(6, 8))
        self.table = DataFrameTable(self, pd.DataFrame())
        self.table.pack(fill="both", expand=True, padx=6, pady=6)
        self.after_idle(self._load)

    def _load(self):
        ok, data = run_or_toast(self, self.app.student_service.get_student_attendance)
        if not ok: return
        self.export_df = to_frame(data)
        self.table.set_df(self.export_df)

        counts = [("Records", len(self.export_df))]
        col = pick_col(self.export_df, STATUS_KEYS)
        if col:
            vc = self.export_df[col].fillna("—").astype(str).value_counts()
            counts += [(str(k), int(v)) for k, v in vc.items()][:4]
        for i, (k, v) in enumerate(counts):
            self.kpis.grid_columnconfigure(i, weight=1)
            KPICard(self.kpis, title=k, value=v).grid(row=0, column=i, sticky="nsew", padx=6)
