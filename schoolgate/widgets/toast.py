# schoolgate/widgets/toast.py
from __future__ import annotations
import customtkinter as ctk
from ..api.errors import APIError
from ..theme import toast_style


class Toast(ctk.CTkFrame):
    """Bottom-right notification; one per window, reused between messages."""
    def __init__(self, master, **kw):
        super().__init__(master, corner_radius=10, **kw)
        self.icon = ctk.CTkLabel(self, text="", text_color="#FFFFFF", font=ctk.CTkFont(size=16))
        self.icon.pack(side="left", padx=(14, 6), pady=10)
        self.label = ctk.CTkLabel(self, text="", text_color="#FFFFFF", wraplength=320, justify="left")
        self.label.pack(side="left", padx=(0, 14), pady=10)
        self._hide_job = None

    def show(self, message: str, kind: str = "success", duration: int = 3000):
        bg, icon = toast_style(kind)
        self.configure(fg_color=bg)
        self.icon.configure(text=icon)
        self.label.configure(text=str(message))
        if self._hide_job is not None:
            try: self.after_cancel(self._hide_job)
            except Exception: pass
        self.place(relx=1.0, rely=1.0, x=-16, y=-16, anchor="se")
        self.lift()
        self._hide_job = self.after(max(0, int(duration)), self.hide)

    def hide(self):
        self._hide_job = None
        self.place_forget()


def show_toast(master, message: str, kind: str = "success", duration: int = 3000):
    win = master.winfo_toplevel()
    toast = getattr(win, "_toast", None)
    if toast is None or not toast.winfo_exists():
        toast = Toast(win)
        win._toast = toast
    toast.show(message, kind=kind, duration=duration)
    return toast


def run_or_toast(widget, fn, *args, ok_message: str | None = None, **kwargs):
    """Call a service method as ``(ok, result)``; API failures also show an error toast."""
    try:
        result = fn(*args, **kwargs)
    except APIError as e:
        show_toast(widget, e.message, kind="error")
        return False, e.message
    if ok_message:
        show_toast(widget, ok_message, kind="success")
    return True, result
