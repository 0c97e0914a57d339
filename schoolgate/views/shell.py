# schoolgate/views/shell.py
from __future__ import annotations
import customtkinter as ctk
from tkinter import filedialog, messagebox
from ..theme.tokens import TOKENS
from ..widgets.toast import show_toast
from . import dashboard, students, permissions, discipline, profile, my_permissions, attendance, records

_C = TOKENS.get("color", {})
COLOR_SURFACE_ALT = _C.get("surface_alt", "#0F172A")
COLOR_TEXT         = _C.get("text", "#E5E7EB")
COLOR_MUTED        = _C.get("muted", "#9CA3AF")
COLOR_PRIMARY      = _C.get("primary", "#3B82F6")
COLOR_ACTIVE_BG    = _C.get("active_bg", "#245DB0")
COLOR_HOVER_BG     = _C.get("hover_bg", "#245DB0")
COLOR_INDICATOR    = _C.get("indicator", COLOR_PRIMARY)

# role -> [(key, label, icon, module)]
NAV = {
    "teacher": [
        ("dashboard", "Dashboard", "🏠", dashboard),
        ("students", "Students", "👥", students),
        ("permissions", "Permissions", "📝", permissions),
        ("discipline", "Discipline", "⚖", discipline),
    ],
    "student": [
        ("profile", "Profile", "👤", profile),
        ("my_permissions", "My permissions", "📝", my_permissions),
        ("attendance", "Attendance", "📅", attendance),
        ("records", "Discipline", "⚖", records),
    ],
}


class SidebarItem(ctk.CTkFrame):
    def __init__(self, master, key: str, text: str, icon_text: str, on_click, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.key = key
        self.on_click = on_click

        self.box = ctk.CTkFrame(self, fg_color="transparent", corner_radius=10)
        self.box.pack(fill="x", padx=6, pady=3)

        self.indicator = ctk.CTkFrame(self.box, width=4, height=36, fg_color="transparent", corner_radius=3)
        self.indicator.pack(side="left", padx=(6, 10), pady=4)

        self.btn = ctk.CTkButton(
            self.box,
            text=f"{icon_text} {text}",
            command=lambda: self.on_click(self.key),
            anchor="w",
            fg_color="transparent",
            hover_color=COLOR_HOVER_BG,
            text_color=COLOR_TEXT,
            corner_radius=10,
            height=36
        )
        self.btn.pack(side="left", fill="x", expand=True, pady=4)

    def set_active(self, active: bool):
        if active:
            self.box.configure(fg_color=COLOR_ACTIVE_BG)
            self.indicator.configure(fg_color=COLOR_INDICATOR)
            self.btn.configure(text_color="#FFFFFF")
        else:
            self.box.configure(fg_color="transparent")
            self.indicator.configure(fg_color="transparent")
            self.btn.configure(text_color=COLOR_TEXT)


class Sidebar(ctk.CTkFrame):
    def __init__(self, master, nav_defs, title, on_nav, **kw):
        super().__init__(master, fg_color=COLOR_SURFACE_ALT, corner_radius=16, **kw)
        self.on_nav = on_nav
        self._items = []

        ctk.CTkLabel(self, text=title, text_color=COLOR_MUTED,
                     font=ctk.CTkFont(size=14, weight="bold")).pack(anchor="w", padx=14, pady=(12, 6))
        for key, label, icon, _mod in nav_defs:
            it = SidebarItem(self, key, label, icon, on_click=self._on_click)
            it.pack(fill="x")
            self._items.append(it)

    def _on_click(self, key: str):
        self.set_active(key)
        self.on_nav(key)

    def set_active(self, key: str):
        for it in self._items:
            it.set_active(it.key == key)


class Header(ctk.CTkFrame):
    def __init__(self, master, on_export_xlsx, on_logout):
        super().__init__(master, fg_color="transparent")
        self.title = ctk.CTkLabel(self, text="", font=ctk.CTkFont(size=20, weight="bold"))
        self.title.pack(side="left")
        self.user = ctk.CTkLabel(self, text="", text_color=COLOR_MUTED)
        self.user.pack(side="left", padx=12)
        ctk.CTkButton(self, text="Logout", fg_color="#EF4444", hover_color="#DC2626", command=on_logout).pack(side="right", padx=(6, 0))
        ctk.CTkButton(self, text="Export Excel", command=on_export_xlsx).pack(side="right")


class ShellView(ctk.CTkFrame):
    """Sidebar + header + content area; tabs depend on the logged-in role."""
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.sidebar = None; self.header = None; self.content = None
        self._role = None
        self._current = None
        self._current_view = None
        self.grid_rowconfigure(0, weight=1); self.grid_columnconfigure(1, weight=1)

        main = ctk.CTkFrame(self, fg_color="transparent")
        main.grid(row=0, column=1, sticky="nsew", padx=(2,8), pady=8)
        main.grid_rowconfigure(1, weight=1); main.grid_columnconfigure(0, weight=1)

        self.header = Header(main, on_export_xlsx=self._export_excel, on_logout=self._logout)
        self.header.grid(row=0, column=0, sticky="ew", padx=6, pady=(0,8))

        self.content = ctk.CTkFrame(main, fg_color=COLOR_SURFACE_ALT, corner_radius=18)
        self.content.grid(row=1, column=0, sticky="nsew")

    def _nav(self):
        return NAV.get(self._role, [])

    def on_show(self):
        user = self.app.auth.get_current_user()
        role = user.get("role")
        if role != self._role or self.sidebar is None:
            self._role = role
            if self.sidebar is not None:
                self.sidebar.destroy()
            self.sidebar = Sidebar(self, self._nav(), title=f"SchoolGate · {role or '?'}",
                                   on_nav=self.switch_tab, width=220)
            self.sidebar.grid(row=0, column=0, sticky="nsw", padx=8, pady=8)
            self._current = None
        self.header.user.configure(text=user.get("username") or "")
        nav = self._nav()
        if not nav:
            show_toast(self, f"Unknown role: {role}", kind="error"); return
        self.switch_tab(self._current or nav[0][0])

    def switch_tab(self, tab):
        entry = next((n for n in self._nav() if n[0] == tab), None)
        if entry is None: return
        key, label, _icon, module = entry
        self._current = key
        self.header.title.configure(text=label)
        self.sidebar.set_active(key)

        for w in self.content.winfo_children():
            w.destroy()
        self._current_view = module.View(self.content, app=self.app)
        self._current_view.pack(fill="both", expand=True, padx=8, pady=8)

    def _logout(self):
        if not messagebox.askyesno("Logout", "Do you really want to log out?"):
            return
        for w in self.content.winfo_children():
            w.destroy()
        self._current_view = None
        self._current = None
        self.app.auth.logout()

    def _export_excel(self):
        import pandas as pd
        df = getattr(self._current_view, "export_df", None)
        if df is None or df.empty:
            messagebox.showwarning("Export", "Nothing to export."); return
        path = filedialog.asksaveasfilename(defaultextension=".xlsx", filetypes=[("Excel","*.xlsx")],
                                            initialfile=f"schoolgate_{self._current}.xlsx")
        if not path: return
        with pd.ExcelWriter(path) as w:
            df.to_excel(w, index=False, sheet_name=(self._current or "data")[:31])
        show_toast(self, "Excel file exported.")
