# schoolgate/app.py
from __future__ import annotations
import logging, sys, traceback
import customtkinter as ctk
from tkinter import messagebox
from schoolgate import config
from schoolgate.theme import apply_theme, set_matplotlib_style
from schoolgate.views.login import LoginView
from schoolgate.views.shell import ShellView
from schoolgate.api.client import APIClient
from schoolgate.state.store import AppState
from schoolgate.services.auth_service import AuthService
from schoolgate.services.teacher_service import TeacherService
from schoolgate.services.student_service import StudentService

logger = logging.getLogger(__name__)


class App(ctk.CTk):
    def __init__(self):
        super().__init__()
        self.title(config.APP_TITLE)
        self.geometry("1200x760"); self.minsize(1024, 640)

        self.app_state = AppState()
        self.api_client = APIClient(base_url=config.API_BASE_URL)
        self.auth = AuthService(self.api_client, self.app_state, on_logout=self._on_logout)
        self.teacher_service = TeacherService(self.api_client, self.auth)
        self.student_service = StudentService(self.api_client, self.auth)

        self.container = ctk.CTkFrame(self, fg_color="transparent")
        self.container.pack(fill="both", expand=True)
        self.views = {}; self.current_view = None

        self.protocol("WM_DELETE_WINDOW", self.on_close)
        self.show_view("login")

    def on_close(self):
        try:
            self.app_state.clear()
        finally:
            self.destroy()

    def _on_logout(self):
        login = self.views.get("login")
        if login is not None:
            login.reset(message="")
        self.show_view("login")

    def show_view(self, name: str):
        if name == "shell" and not self.auth.is_logged_in():
            name = "login"
        if self.current_view is not None:
            self.current_view.pack_forget()

        if name not in self.views:
            if name == "login":
                self.views[name] = LoginView(self.container, app=self)
            elif name == "shell":
                self.views[name] = ShellView(self.container, app=self)
            else:
                raise ValueError(f"Unknown view: {name}")

        if name == "login":
            self._apply_login_window_mode()
        else:
            self._apply_shell_window_mode()

        v = self.views[name]; v.pack(fill="both", expand=True); self.current_view = v
        if hasattr(v, "on_show"): self.after_idle(v.on_show)

    def _center(self, w=560, h=460):
        self.update_idletasks()
        sw, sh = self.winfo_screenwidth(), self.winfo_screenheight()
        x = int((sw - w) / 2.7); y = int((sh - h) / 3.2)
        self.geometry(f"{w}x{h}+{x}+{y}")

    def _apply_login_window_mode(self):
        try: self.state("normal")
        except Exception: pass
        self.resizable(False, False); self._center(560, 460)

    def _apply_shell_window_mode(self):
        self.resizable(True, True); self.minsize(1024, 640)
        try: self.state("zoomed")
        except Exception:
            self.update_idletasks()
            sw, sh = self.winfo_screenwidth(), self.winfo_screenheight()
            self.geometry(f"{sw}x{sh}+0+0")


def run():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    apply_theme(mode="light"); set_matplotlib_style()
    app = App()
    try: app.mainloop()
    except Exception as e:
        logger.exception("application crashed")
        try: messagebox.showerror("Application error", f"{type(e).__name__}: {e}")
        except Exception: traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    run()
