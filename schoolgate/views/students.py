# schoolgate/views/students.py
from __future__ import annotations
import customtkinter as ctk
from tkinter import messagebox
import pandas as pd
from ..widgets.table import DataFrameTable
from ..widgets.forms import FormGrid
from ..widgets.cards import Section
from ..widgets.toast import run_or_toast, show_toast
from ..data.frames import to_frame, pick_col, form_payload, STUDENT_ID_KEYS

STUDENT_FIELDS = [
    ("name", "Name"),
    ("nis", "NIS"),
    ("class", "Class"),
    ("username", "Username"),
    ("password", "Password"),
    ("gender", "Gender", ["L", "P"]),
    ("parentPhone", "Parent phone"),
]

class View(ctk.CTkFrame):
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.svc = app.teacher_service
        self.export_df = pd.DataFrame()
        self._selected_id = None
        self._loaded = {}

        self.grid_columnconfigure(0, weight=3); self.grid_columnconfigure(1, weight=2)
        self.grid_rowconfigure(0, weight=1)

        self.table = DataFrameTable(self, pd.DataFrame(), on_select=self._on_select)
        self.table.grid(row=0, column=0, sticky="nsew", padx=(6, 6), pady=6)

        side = Section(self, "Student")
        side.grid(row=0, column=1, sticky="nsew", padx=(0, 6), pady=6)
        self.form = FormGrid(side, STUDENT_FIELDS)
        self.form.grid(row=1, column=0, sticky="ew", padx=10, pady=6)

        btns = ctk.CTkFrame(side, fg_color="transparent")
        btns.grid(row=2, column=0, sticky="ew", padx=10, pady=(4, 10))
        ctk.CTkButton(btns, text="New", width=70, fg_color="#6B7280", command=self._new).pack(side="left")
        ctk.CTkButton(btns, text="Save", width=70, command=self._save).pack(side="left", padx=6)
        ctk.CTkButton(btns, text="Delete", width=70, fg_color="#EF4444", hover_color="#DC2626",
                      command=self._delete).pack(side="right")

        self.after_idle(self.reload)

    def reload(self):
        ok, data = run_or_toast(self, self.svc.get_students)
        if not ok: return
        self.export_df = to_frame(data)
        self.table.set_df(self.export_df)

    def _on_select(self, row: dict):
        col = pick_col(self.export_df, STUDENT_ID_KEYS)
        self._selected_id = row.get(col) if col else None
        self._loaded = row if self._selected_id else {}
        self.form.set_values(row)

    def _new(self):
        self._selected_id = None
        self._loaded = {}
        self.form.clear()

    def _save(self):
        data = form_payload(self.form.values(), self._loaded)
        if not data.get("name"):
            show_toast(self, "Name is required.", kind="error"); return
        if self._selected_id:
            ok, _ = run_or_toast(self, self.svc.update_student, self._selected_id, data, ok_message="Student updated.")
        else:
            ok, _ = run_or_toast(self, self.svc.add_student, data, ok_message="Student added.")
        if ok:
            self.reload()

    def _delete(self):
        if not self._selected_id:
            show_toast(self, "Select a student first.", kind="info"); return
        if not messagebox.askyesno("Delete", "Delete this student?"):
            return
        ok, _ = run_or_toast(self, self.svc.delete_student, self._selected_id, ok_message="Student deleted.")
        if ok:
            self._new()
            self.reload()
