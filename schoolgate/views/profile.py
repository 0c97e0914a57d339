# schoolgate/views/profile.py
from __future__ import annotations
import customtkinter as ctk
import pandas as pd
from ..widgets.cards import Avatar
from ..widgets.toast import run_or_toast
from ..data.frames import NAME_KEYS
from ..utils import format_date

HIDDEN_KEYS = {"password", "Password", "token"}

def _pretty_key(k: str) -> str:
    out = "".join(" " + ch.lower() if ch.isupper() else ch for ch in str(k)).replace("_", " ").strip()
    return out[:1].upper() + out[1:]

class View(ctk.CTkFrame):
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.export_df = pd.DataFrame()
        self.after_idle(self._load)

    def _load(self):
        ok, prof = run_or_toast(self, self.app.student_service.get_student_profile)
        if not ok: return
        prof = prof if isinstance(prof, dict) else {}
        rows = [(k, v) for k, v in prof.items() if k not in HIDDEN_KEYS and not isinstance(v, (dict, list))]
        self.export_df = pd.DataFrame(rows, columns=["Field", "Value"])
        name = next((prof.get(k) for k in NAME_KEYS if prof.get(k)), None) or self.app.auth.get_current_user().get("username")

        head = ctk.CTkFrame(self, corner_radius=16); head.pack(fill="x", padx=10, pady=(10, 8))
        Avatar(head, name).pack(side="left", padx=14, pady=14)
        ctk.CTkLabel(head, text=str(name or "—"), font=ctk.CTkFont(size=18, weight="bold")).pack(side="left")

        card = ctk.CTkFrame(self, corner_radius=16); card.pack(fill="x", padx=10, pady=8)
        grid = ctk.CTkFrame(card, fg_color="transparent"); grid.pack(fill="x", padx=14, pady=14)
        grid.grid_columnconfigure(1, weight=1)
        for r, (k, v) in enumerate(rows):
            val = format_date(v) if "date" in k.lower() or "birth" in k.lower() else v
            ctk.CTkLabel(grid, text=_pretty_key(k), text_color="#6B7280").grid(row=r, column=0, sticky="w", padx=(0,8), pady=3)
            ctk.CTkLabel(grid, text=str(val if val not in (None, "") else "—")).grid(row=r, column=1, sticky="w", pady=3)
