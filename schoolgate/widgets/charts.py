# schoolgate/widgets/charts.py
from __future__ import annotations
import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from ..theme.tokens import TOKENS

class MatplotlibHost(ctk.CTkFrame):
    def __init__(self, master, figsize=(4,2), dpi=100, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.fig = Figure(figsize=figsize, dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=self)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def plot(self, fn):
        self.ax.clear(); fn(self.ax); self.canvas.draw_idle()

def hbar(parent, labels, values, title=""):
    height = max(2.4, 0.45 * max(1, len(labels)) + 1.0)
    host = MatplotlibHost(parent, figsize=(5.2, height))
    host.fig.subplots_adjust(left=0.32, right=0.95, top=0.88, bottom=0.12)
    def _plot(ax):
        if not labels:
            ax.text(0.5,0.5,"No data", ha="center", va="center"); ax.set_xticks([]); ax.set_yticks([]); return
        y = list(range(len(labels)))
        ax.barh(y, values, color=TOKENS["color"]["danger"], height=0.55)
        ax.set_yticks(y); ax.set_yticklabels(labels); ax.invert_yaxis()
        for yi, v in enumerate(values):
            ax.text(v, yi, f" {v:g}", va="center", ha="left", fontsize=9)
        if title: ax.set_title(title, fontsize=11)
        ax.grid(axis="x", alpha=0.2)
    host.plot(_plot); return host

def donut(parent, parts: dict[str, int], title=""):
    host = MatplotlibHost(parent, figsize=(3.0, 2.8))
    palette = {"approved": TOKENS["color"]["success"], "rejected": TOKENS["color"]["danger"],
               "pending": TOKENS["color"]["warning"]}
    def _plot(ax):
        if not parts or not sum(parts.values()):
            ax.text(0.5,0.5,"No data", ha="center", va="center"); ax.axis("off"); return
        labels = list(parts)
        ax.pie([parts[k] for k in labels], labels=labels, startangle=90,
               colors=[palette.get(k, TOKENS["color"]["primary"]) for k in labels],
               wedgeprops=dict(width=0.36, edgecolor="white"), textprops=dict(fontsize=9))
        ax.text(0, 0, str(sum(parts.values())), ha="center", va="center",
                fontsize=13, fontweight="bold", color=TOKENS["color"]["text"])
        if title: ax.set_title(title, fontsize=10)
        ax.set_aspect("equal")
    host.plot(_plot); return host
