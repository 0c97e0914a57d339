TOKENS = {
    "radius": {"sm":8, "md":12, "lg":18, "xl":22},
    "spacing": {"xs":4, "sm":8, "md":12, "lg":16, "xl":20},
    "font": {"h1":22, "h2":18, "body":12, "kpi":26},
    "color": {
        "primary": "#3B82F6",
        "primary_hover": "#2563EB",
        "success": "#22C55E",
        "warning": "#F59E0B",
        "danger":  "#EF4444",
        "info":    "#3B82F6",
        "muted":   "#6B7280",
        "text":    "#111827",
        "surface": "#FFFFFF",
        "surface_alt": "#F4F6FB",
        "card":   "#F9FAFE",
        "border":  "#E5E7EB",
        "grid":    "#E5E7EB",
    }
}

# kind -> (background, icon); anything unknown renders as "info"
TOAST_STYLES = {
    "success": (TOKENS["color"]["success"], "✔"),
    "error":   (TOKENS["color"]["danger"],  "⚠"),
    "info":    (TOKENS["color"]["info"],    "ℹ"),
}
