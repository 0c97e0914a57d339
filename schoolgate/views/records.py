# schoolgate/views/records.py
from __future__ import annotations
import customtkinter as ctk
import pandas as pd
from ..widgets.table import DataFrameTable
from ..widgets.cards import KPICard
from ..widgets.toast import run_or_toast
from ..data.frames import to_frame, total_points
from ..theme.tokens import TOKENS

class View(ctk.CTkFrame):
    """Discipline records of the logged-in student."""
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.export_df = pd.DataFrame()
        self.kpi = KPICard(self, title="Total discipline points", value="0", color=TOKENS["color"]["danger"])
        self.kpi.pack(anchor="w", padx=6, pady=(6, 8))
        self.table = DataFrameTable(self, pd.DataFrame())
        self.table.pack(fill="both", expand=True, padx=6, pady=6)
        self.after_idle(self._load)

    def _load(self):
        ok, data = run_or_toast(self, self.app.student_service.get_student_discipline)
        if not ok: return
        self.export_df = to_frame(data)
        self.table.set_df(self.export_df)
        self.kpi.set_value(f"{total_points(self.export_df):g}")
