# schoolgate/widgets/forms.py
from __future__ import annotations
import customtkinter as ctk
from ..utils import is_blank

class FormGrid(ctk.CTkFrame):
    """Label/input rows. ``fields`` is a list of (key, label) or (key, label, choices)."""
    def __init__(self, master, fields, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.grid_columnconfigure(1, weight=1)
        self._inputs = {}
        self._menus = {}
        for r, f in enumerate(fields):
            key, label = f[0], f[1]
            choices = f[2] if len(f) > 2 else None
            ctk.CTkLabel(self, text=label, text_color="#6B7280").grid(row=r, column=0, sticky="w", padx=(0, 8), pady=4)
            if choices:
                var = ctk.StringVar(value=choices[0] if choices else "")
                w = ctk.CTkOptionMenu(self, values=list(choices), variable=var)
                self._inputs[key] = var
                self._menus[key] = w
            else:
                w = ctk.CTkEntry(self)
                self._inputs[key] = w
            w.grid(row=r, column=1, sticky="ew", pady=4)

    def values(self) -> dict:
        return {k: (w.get() or "").strip() for k, w in self._inputs.items()}

    def set_values(self, data: dict):
        for k, w in self._inputs.items():
            v = "" if is_blank(data.get(k)) else str(data.get(k))
            if isinstance(w, ctk.StringVar):
                if v: w.set(v)
            else:
                w.delete(0, "end"); w.insert(0, v)

    def set_choices(self, key: str, choices):
        menu = self._menus.get(key)
        if menu is None: return
        choices = list(choices)
        menu.configure(values=choices or [""])
        self._inputs[key].set(choices[0] if choices else "")

    def clear(self):
        self.set_values({})
