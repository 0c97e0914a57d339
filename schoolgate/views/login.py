# schoolgate/views/login.py
from __future__ import annotations
import customtkinter as ctk
import json, logging, os
from ..api.errors import APIError
from ..config import SETTINGS_FILE, ROLES

logger = logging.getLogger(__name__)

ROLE_LABELS = {"teacher": "Teacher", "student": "Student"}


class LoginView(ctk.CTkFrame):
    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self.auth = getattr(app, "auth", None)
        self._cfg_path = SETTINGS_FILE
        self._cfg = self._load_cfg()

        for i in range(3):
            self.grid_rowconfigure(i, weight=1)
            self.grid_columnconfigure(i, weight=1)

        self.card = ctk.CTkFrame(self, corner_radius=18, fg_color=("#FFFFFF","#0B1220"))
        self.card.grid(row=1, column=1, sticky="nsew", padx=32, pady=32)
        self.card.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(self.card, text="SchoolGate", font=ctk.CTkFont(size=22, weight="bold")).grid(row=0, column=0, pady=(18,2))
        ctk.CTkLabel(self.card, text="Sign in to continue").grid(row=1, column=0)

        form = ctk.CTkFrame(self.card, fg_color="transparent")
        form.grid(row=2, column=0, sticky="ew", padx=24, pady=(16,8))
        form.grid_columnconfigure(0, weight=1)
        self.ent_user = ctk.CTkEntry(form, placeholder_text="Username")
        self.ent_pass = ctk.CTkEntry(form, placeholder_text="Password", show="•")
        self.role_var = ctk.StringVar(value=ROLE_LABELS.get(self._cfg.get("last_role"), "Teacher"))
        self.seg_role = ctk.CTkSegmentedButton(form, values=[ROLE_LABELS[r] for r in ROLES], variable=self.role_var)
        self.seg_role.grid(row=0, column=0, sticky="ew", pady=(0,6))
        self.ent_user.grid(row=1, column=0, sticky="ew", pady=6)
        self.ent_pass.grid(row=2, column=0, sticky="ew", pady=6)

        self.lbl_error = ctk.CTkLabel(self.card, text="", text_color="red")
        self.lbl_error.grid(row=3, column=0, sticky="w", padx=24)

        self.btn_login = ctk.CTkButton(self.card, text="Sign in", command=self._login)
        self.btn_login.grid(row=4, column=0, sticky="ew", padx=24, pady=(6,18))

        self.ent_user.bind("<Return>", lambda e: self._login())
        self.ent_pass.bind("<Return>", lambda e: self._login())
        self.ent_user.bind("<Key>", lambda e: self.lbl_error.configure(text=""))
        self.ent_pass.bind("<Key>", lambda e: self.lbl_error.configure(text=""))

        if self._cfg.get("last_username"):
            self.ent_user.insert(0, self._cfg.get("last_username",""))
            self.ent_pass.focus()
        else:
            self.ent_user.focus()

    def reset(self, keep_username: bool = True, message: str = ""):
        if not keep_username:
            self.ent_user.delete(0, "end")
        self.ent_pass.delete(0, "end")
        self.lbl_error.configure(text=message)
        (self.ent_pass if (self.ent_user.get() or "").strip() else self.ent_user).focus()

    def _role(self) -> str:
        label = self.role_var.get()
        return next((k for k, v in ROLE_LABELS.items() if v == label), "teacher")

    def _load_cfg(self):
        try:
            if os.path.exists(self._cfg_path):
                with open(self._cfg_path,"r",encoding="utf-8") as f:
                    return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("cannot read %s: %s", self._cfg_path, e)
        return {}

    def _save_cfg(self, username, role):
        try:
            self._cfg.update(last_username=username, last_role=role)
            with open(self._cfg_path,"w",encoding="utf-8") as f:
                json.dump(self._cfg, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.warning("cannot write %s: %s", self._cfg_path, e)

    def _login(self):
        if not self.auth:
            self.lbl_error.configure(text="Auth service not available."); return
        u = (self.ent_user.get() or "").strip()
        p = (self.ent_pass.get() or "").strip()
        role = self._role()
        if not u or not p:
            self.lbl_error.configure(text="Username and password are required."); return
        try:
            resp = self.auth.login(u, p, role)
        except APIError as e:
            self.lbl_error.configure(text=e.message); return
        if resp.get("status") != "success":
            self.lbl_error.configure(text=str(resp.get("message") or "Invalid credentials.")); return
        if not self.auth.is_logged_in():
            self.lbl_error.configure(text="Server did not return a user id."); return

        self._save_cfg(u, role)
        self.ent_pass.delete(0, "end")
        if getattr(self.app, "show_view", None):
            self.app.show_view("shell")
