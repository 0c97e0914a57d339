# schoolgate/views/dashboard.py
from __future__ import annotations
import customtkinter as ctk
import pandas as pd
from ..widgets.cards import KPICard, Section
from ..widgets.charts import hbar, donut
from ..widgets.toast import run_or_toast
from ..data.frames import to_frame, scalar_stats, permission_counts, points_by_student

def _label(key: str) -> str:
    # "totalStudents" -> "Total students"
    out = "".join(" " + ch.lower() if ch.isupper() else ch for ch in key).replace("_", " ").strip()
    return out[:1].upper() + out[1:]

class View(ctk.CTkFrame):
    """Teacher home: statistics tiles, permission status split, top discipline points."""
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.export_df = pd.DataFrame()
        self.after_idle(self._load)

    def _load(self):
        svc = self.app.teacher_service
        ok, stats = run_or_toast(self, svc.get_student_stats)
        ok_p, perms = run_or_toast(self, svc.get_permissions)
        ok_d, points = run_or_toast(self, svc.get_discipline_points)
        perms = to_frame(perms if ok_p else [])
        points = to_frame(points if ok_d else [])

        pairs = scalar_stats(stats) if ok else []
        self.export_df = pd.DataFrame(pairs, columns=["Metric", "Value"])

        kpis = ctk.CTkFrame(self, fg_color="transparent")
        kpis.pack(fill="x", padx=6, pady=(6, 10))
        if not pairs:
            ctk.CTkLabel(kpis, text="No statistics available.", text_color="#6B7280").pack(anchor="w", padx=6)
        for i, (k, v) in enumerate(pairs[:6]):
            kpis.grid_columnconfigure(i, weight=1)
            KPICard(kpis, title=_label(k), value=v).grid(row=0, column=i, sticky="nsew", padx=6)

        row = ctk.CTkFrame(self, fg_color="transparent")
        row.pack(fill="both", expand=True, padx=6)
        row.grid_columnconfigure(0, weight=1); row.grid_columnconfigure(1, weight=2)

        left = Section(row, "Permission requests")
        left.grid(row=0, column=0, sticky="nsew", padx=(0, 6))
        donut(left, permission_counts(perms)).grid(row=1, column=0, sticky="nsew", padx=8, pady=8)

        right = Section(row, "Discipline points by student")
        right.grid(row=0, column=1, sticky="nsew")
        top = points_by_student(points, top=10)
        hbar(right, list(top.index), [float(v) for v in top.values]).grid(row=1, column=0, sticky="nsew", padx=8, pady=8)
