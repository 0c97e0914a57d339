# schoolgate/utils.py
from __future__ import annotations
from datetime import date, datetime
import pandas as pd

MONTHS_ID = ["Januari", "Februari", "Maret", "April", "Mei", "Juni",
             "Juli", "Agustus", "September", "Oktober", "November", "Desember"]


def is_blank(value) -> bool:
    """None, empty text, or a missing spreadsheet cell (NaN/NaT)."""
    if value is None: return True
    if isinstance(value, str): return value == ""
    if isinstance(value, (list, tuple, dict)): return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _to_date(value):
    if isinstance(value, date) and not isinstance(value, datetime): return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # epoch numbers are milliseconds, as the web app sends them
        ts = pd.to_datetime(value, unit="ms", errors="coerce")
    else:
        ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts): return None
    return ts.date()


def format_date(value) -> str:
    """Indonesian long date: ``"5 Januari 2024"``; unparsable input comes back as text."""
    if is_blank(value) or value is False or value == 0: return ""
    try:
        d = _to_date(value)
    except (TypeError, ValueError, OverflowError):
        d = None
    if d is None: return str(value)
    return f"{d.day} {MONTHS_ID[d.month - 1]} {d.year}"


def get_initials(name) -> str:
    if is_blank(name): return "XX"
    return "".join(part[0] for part in str(name).split(" ") if part)[:2].upper()
