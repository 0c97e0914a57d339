from __future__ import annotations
import customtkinter as ctk
from matplotlib import rcParams
from .tokens import TOKENS, TOAST_STYLES

def apply_theme(mode: str = "light"):
    try: ctk.set_appearance_mode(mode)
    except Exception: pass

def set_matplotlib_style():
    rcParams.update({
        "axes.facecolor": TOKENS["color"]["surface"],
        "figure.facecolor": TOKENS["color"]["surface"],
        "axes.edgecolor": TOKENS["color"]["border"],
        "grid.color": TOKENS["color"]["grid"],
        "text.color": TOKENS["color"]["text"],
        "axes.labelcolor": TOKENS["color"]["text"],
        "xtick.color": TOKENS["color"]["muted"],
        "ytick.color": TOKENS["color"]["muted"],
        "axes.grid": True,
        "grid.alpha": 0.18,
    })

def toast_style(kind: str):
    return TOAST_STYLES.get(kind, TOAST_STYLES["info"])
