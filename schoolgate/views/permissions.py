# schoolgate/views/permissions.py
from __future__ import annotations
import customtkinter as ctk
import pandas as pd
from ..widgets.table import DataFrameTable
from ..widgets.cards import Section
from ..widgets.toast import run_or_toast, show_toast
from ..data.frames import to_frame, pick_col, STATUS_KEYS

ID_KEYS = ["permissionId", "permission_id", "id", "ID"]
STATUS_FILTERS = ["All", "pending", "approved", "rejected"]

class View(ctk.CTkFrame):
    """Permission requests from students; the teacher approves or rejects the selected one."""
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.svc = app.teacher_service
        self._all = pd.DataFrame()
        self.export_df = self._all
        self._selected = None

        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.pack(fill="x", padx=6, pady=(6, 0))
        ctk.CTkLabel(bar, text="Status:").pack(side="left", padx=(0, 6))
        self.status_var = ctk.StringVar(value="All")
        ctk.CTkOptionMenu(bar, values=STATUS_FILTERS, variable=self.status_var,
                          command=lambda _=None: self._filter(), width=130).pack(side="left")
        ctk.CTkButton(bar, text="Refresh", width=90, command=self.reload).pack(side="right")

        self.table = DataFrameTable(self, pd.DataFrame(), on_select=self._on_select)
        self.table.pack(fill="both", expand=True, padx=6, pady=6)

        act = Section(self, "Decision")
        act.pack(fill="x", padx=6, pady=(0, 6))
        self.lbl_sel = ctk.CTkLabel(act, text="No request selected.", text_color="#6B7280")
        self.lbl_sel.grid(row=1, column=0, sticky="w", padx=10, pady=(4, 0))
        self.ent_notes = ctk.CTkEntry(act, placeholder_text="Notes (sent with a rejection)")
        self.ent_notes.grid(row=2, column=0, sticky="ew", padx=10, pady=6)
        btns = ctk.CTkFrame(act, fg_color="transparent")
        btns.grid(row=3, column=0, sticky="e", padx=10, pady=(0, 10))
        ctk.CTkButton(btns, text="Approve", fg_color="#22C55E", hover_color="#16A34A",
                      command=self._approve).pack(side="left", padx=(0, 6))
        ctk.CTkButton(btns, text="Reject", fg_color="#EF4444", hover_color="#DC2626",
                      command=self._reject).pack(side="left")

        self.after_idle(self.reload)

    def reload(self):
        ok, data = run_or_toast(self, self.svc.get_permissions)
        if not ok: return
        self._all = to_frame(data)
        self._filter()

    def _filter(self):
        col = pick_col(self._all, STATUS_KEYS)
        want = self.status_var.get()
        df = self._all
        if col and want != "All":
            df = df[df[col].astype(str).str.strip().str.lower() == want].reset_index(drop=True)
        self.export_df = df
        self.table.set_df(df)
        self._selected = None
        self.lbl_sel.configure(text="No request selected.")

    def _on_select(self, row: dict):
        col = pick_col(self.export_df, ID_KEYS)
        self._selected = row.get(col) if col else None
        self.lbl_sel.configure(text=f"Request #{self._selected}" if self._selected else "Row has no id.")

    def _approve(self):
        if not self._selected:
            show_toast(self, "Select a request first.", kind="info"); return
        ok, _ = run_or_toast(self, self.svc.approve_permission, self._selected, ok_message="Permission approved.")
        if ok: self.reload()

    def _reject(self):
        if not self._selected:
            show_toast(self, "Select a request first.", kind="info"); return
        notes = (self.ent_notes.get() or "").strip()
        ok, _ = run_or_toast(self, self.svc.reject_permission, self._selected, notes, ok_message="Permission rejected.")
        if ok:
            self.ent_notes.delete(0, "end")
            self.reload()
