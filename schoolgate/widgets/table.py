# schoolgate/widgets/table.py
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
import customtkinter as ctk
import pandas as pd
from ..data.frames import clean_record

def _cell(v):
    if isinstance(v, (list, dict, tuple)): return str(v)
    return "" if pd.isna(v) else v

class DataFrameTable(ctk.CTkFrame):
    def __init__(self, master, df: pd.DataFrame, *, height=14, columns=None, searchable=True, on_select=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self._df = df.copy()
        self._view = self._df
        self._on_select = on_select
        cols = columns or list(df.columns)

        if searchable:
            top = ctk.CTkFrame(self, fg_color="transparent")
            top.pack(fill="x", padx=2, pady=(2,0))
            ctk.CTkLabel(top, text="Search:").pack(side="left", padx=(2,6))
            self._q = tk.StringVar()
            ent = ctk.CTkEntry(top, textvariable=self._q, placeholder_text="keyword…", width=220)
            ent.pack(side="left", padx=(0,6))
            ent.bind("<KeyRelease>", lambda e: self._apply_filter())

        wrap = ctk.CTkFrame(self, fg_color="transparent")
        wrap.pack(fill="both", expand=True)

        self.tree = ttk.Treeview(wrap, columns=cols, show="headings", height=height, selectmode="browse")
        vsb = ttk.Scrollbar(wrap, orient="vertical", command=self.tree.yview)
        hsb = ttk.Scrollbar(wrap, orient="horizontal", command=self.tree.xview)
        self.tree.configure(yscroll=vsb.set, xscroll=hsb.set)
        self.tree.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")
        hsb.grid(row=1, column=0, sticky="ew")
        wrap.grid_rowconfigure(0, weight=1); wrap.grid_columnconfigure(0, weight=1)
        self.tree.bind("<<TreeviewSelect>>", lambda e: self._selected())

        self._set_columns(cols)
        self._populate(self._df)

    def _set_columns(self, cols):
        self.tree["columns"] = cols
        for c in cols:
            self.tree.heading(c, text=str(c), command=lambda cc=c: self._sort(cc, False))
            self.tree.column(c, width=max(80, int(len(str(c))*9)))

    def _populate(self, df):
        self._view = df
        self.tree.delete(*self.tree.get_children())
        for idx, row in df.iterrows():
            vals = [row[c] if c in row.index else "" for c in self.tree["columns"]]
            self.tree.insert("", "end", iid=str(idx), values=[_cell(v) for v in vals])

    def _sort(self, col, reverse):
        try: sorted_df = self._view.sort_values(by=col, ascending=not reverse)
        except Exception: sorted_df = self._view
        self._populate(sorted_df)
        self.tree.heading(col, command=lambda: self._sort(col, not reverse))

    def _apply_filter(self):
        q = (self._q.get() if hasattr(self, "_q") else "").strip().lower()
        if not q:
            self._populate(self._df); return
        mask = self._df.apply(lambda r: any(q in str(v).lower() for v in r.values), axis=1)
        self._populate(self._df[mask])

    def _selected(self):
        row = self.selected_row()
        if row is not None and callable(self._on_select):
            self._on_select(row)

    def selected_row(self) -> dict | None:
        sel = self.tree.selection()
        if not sel: return None
        try: return clean_record(self._df.loc[int(sel[0])].to_dict())
        except (KeyError, ValueError): return None

    def set_df(self, df: pd.DataFrame):
        self._df = df.copy()
        if list(df.columns) != list(self.tree["columns"]):
            self._set_columns(list(df.columns))
        self._populate(self._df)

    @property
    def df(self) -> pd.DataFrame:
        return self._df
