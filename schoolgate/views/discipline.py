# schoolgate/views/discipline.py
from __future__ import annotations
import customtkinter as ctk
import pandas as pd
from ..widgets.table import DataFrameTable
from ..widgets.forms import FormGrid
from ..widgets.cards import Section, KPICard
from ..widgets.toast import run_or_toast, show_toast
from ..data.frames import to_frame, pick_col, total_points, NAME_KEYS, STUDENT_ID_KEYS

def _options(records, id_keys, label_keys):
    """``"id - label"`` strings for option menus, with a lookup back to the id."""
    df = to_frame(records)
    idc, lbc = pick_col(df, id_keys), pick_col(df, label_keys)
    if df.empty or idc is None: return [], {}
    opts = {}
    for _, r in df.iterrows():
        text = f"{r[idc]} - {r[lbc]}" if lbc else str(r[idc])
        opts[text] = r[idc]
    return list(opts), opts

class View(ctk.CTkFrame):
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.svc = app.teacher_service
        self.export_df = pd.DataFrame()
        self._students, self._types = {}, {}

        self.grid_columnconfigure(0, weight=3); self.grid_columnconfigure(1, weight=2)
        self.grid_rowconfigure(1, weight=1)

        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.grid(row=0, column=0, sticky="ew", padx=6, pady=(6, 0))
        ctk.CTkLabel(bar, text="Student:").pack(side="left", padx=(0, 6))
        self.filter_var = ctk.StringVar(value="All")
        self.filter_menu = ctk.CTkOptionMenu(bar, values=["All"], variable=self.filter_var,
                                             command=lambda _=None: self.reload(), width=220)
        self.filter_menu.pack(side="left")
        self.kpi = KPICard(bar, title="Total points", value="0")
        self.kpi.pack(side="right")

        self.table = DataFrameTable(self, pd.DataFrame())
        self.table.grid(row=1, column=0, sticky="nsew", padx=6, pady=6)

        side = Section(self, "Add discipline point")
        side.grid(row=0, column=1, rowspan=2, sticky="nsew", padx=(0, 6), pady=6)
        self.form = FormGrid(side, [
            ("studentId", "Student", ["—"]),
            ("violationTypeId", "Violation", ["—"]),
            ("points", "Points"),
            ("date", "Date (YYYY-MM-DD)"),
            ("description", "Description"),
        ])
        self.form.grid(row=1, column=0, sticky="ew", padx=10, pady=6)
        ctk.CTkButton(side, text="Add", command=self._add).grid(row=2, column=0, sticky="e", padx=10, pady=(4, 10))

        self.after_idle(self._load_lookups)

    def _load_lookups(self):
        ok, students = run_or_toast(self, self.svc.get_students)
        if ok:
            names, self._students = _options(students, STUDENT_ID_KEYS, NAME_KEYS)
            self.form.set_choices("studentId", names)
            self.filter_menu.configure(values=["All"] + names)
        ok, types = run_or_toast(self, self.svc.get_violation_types)
        if ok:
            labels, self._types = _options(types, ["id", "violationTypeId", "ID"], ["name", "Name", "nama", "description"])
            self.form.set_choices("violationTypeId", labels)
        self.reload()

    def reload(self):
        sid = self._students.get(self.filter_var.get())
        ok, data = run_or_toast(self, self.svc.get_discipline_points, sid)
        if not ok: return
        self.export_df = to_frame(data)
        self.table.set_df(self.export_df)
        self.kpi.set_value(f"{total_points(self.export_df):g}")

    def _add(self):
        v = self.form.values()
        sid, vid = self._students.get(v["studentId"]), self._types.get(v["violationTypeId"])
        if sid is None or vid is None:
            show_toast(self, "Pick a student and a violation type.", kind="error"); return
        try:
            pts = float(v["points"]) if v["points"] else None
        except ValueError:
            show_toast(self, "Points must be a number.", kind="error"); return
        data = {"studentId": sid, "violationTypeId": vid}
        if pts is not None: data["points"] = f"{pts:g}"
        if v["date"]: data["date"] = v["date"]
        if v["description"]: data["description"] = v["description"]
        ok, _ = run_or_toast(self, self.svc.add_discipline_point, data, ok_message="Discipline point added.")
        if ok: self.reload()
