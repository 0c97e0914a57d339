# schoolgate/widgets/cards.py
from __future__ import annotations
import tkinter as tk
import customtkinter as ctk
from ..theme.tokens import TOKENS
from ..utils import get_initials

SURFACE = TOKENS["color"]["surface"]
MUTED   = TOKENS["color"]["muted"]

class KPICard(ctk.CTkFrame):
    """
    Simple KPI tile:
      - title: small caption on top
      - value: large value
      - color: optional value color
    """
    def __init__(self, master, title: str, value: str | int | float = "—",
                 color: str | None = None, **kw):
        super().__init__(master, corner_radius=16, fg_color=SURFACE, **kw)
        self.grid_columnconfigure(0, weight=1)

        self.title_label = ctk.CTkLabel(self, text=title, text_color=MUTED,
                                        font=ctk.CTkFont(size=12))
        self.title_label.grid(row=0, column=0, sticky="w", padx=12, pady=(10, 0))

        self._value_var = tk.StringVar(value=str(value))
        self.value_label = ctk.CTkLabel(self, textvariable=self._value_var,
                                        font=ctk.CTkFont(size=24, weight="bold"))
        if color:
            self.value_label.configure(text_color=color)
        self.value_label.grid(row=1, column=0, sticky="w", padx=12, pady=(2, 12))

    def set_value(self, v):
        self._value_var.set(str(v))


class Section(ctk.CTkFrame):
    """Titled block; the title sits in row 0, content goes in later rows."""
    def __init__(self, master, title: str, **kw):
        super().__init__(master, corner_radius=12, fg_color=TOKENS["color"]["card"], **kw)
        self.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(self, text=title, font=ctk.CTkFont(size=14, weight="bold"),
                     text_color=TOKENS["color"]["text"]).grid(row=0, column=0, sticky="w", padx=8, pady=(8, 0))


class Avatar(ctk.CTkLabel):
    def __init__(self, master, name: str | None, size: int = 56, **kw):
        super().__init__(master, text=get_initials(name), width=size, height=size, corner_radius=size // 2,
                         fg_color=TOKENS["color"]["primary"], text_color="#FFFFFF",
                         font=ctk.CTkFont(size=size // 3, weight="bold"), **kw)
