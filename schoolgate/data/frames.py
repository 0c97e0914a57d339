# schoolgate/data/frames.py
from __future__ import annotations
import pandas as pd
from ..utils import format_date, is_blank

# spreadsheet headers are loose; first match wins
NAME_KEYS = ["name", "Name", "nama", "Nama", "fullName", "full_name", "studentName", "student_name"]
STUDENT_ID_KEYS = ["studentId", "student_id", "StudentId", "id"]
POINT_KEYS = ["points", "point", "Points", "poin", "Poin"]
STATUS_KEYS = ["status", "Status"]
DATE_KEYS = ("date", "Date", "tanggal", "createdAt", "created_at", "requestDate",
             "startDate", "endDate", "updatedAt", "approvedAt")


def pick_col(df: pd.DataFrame, keys) -> str | None:
    for k in keys:
        if k in df.columns:
            return k
    return None


def to_frame(records) -> pd.DataFrame:
    """DataFrame from a list of dicts (or a dict holding one), date columns formatted for display."""
    if isinstance(records, dict):
        for k in ("items", "records", "rows", "data"):
            if isinstance(records.get(k), list):
                records = records[k]; break
        else:
            records = [records]
    df = pd.DataFrame(records or [])
    for c in df.columns:
        if c in DATE_KEYS:
            df[c] = df[c].map(format_date)
    return df


def permission_counts(df: pd.DataFrame) -> dict[str, int]:
    col = pick_col(df, STATUS_KEYS) if df is not None else None
    if col is None or df.empty: return {}
    s = df[col].fillna("unknown").astype(str).str.strip().str.lower()
    return {k: int(v) for k, v in s.value_counts().items()}


def points_by_student(df: pd.DataFrame, top: int | None = 10) -> pd.Series:
    """Total discipline points per student, largest first."""
    if df is None or df.empty: return pd.Series(dtype="float64")
    pts = pick_col(df, POINT_KEYS)
    who = pick_col(df, NAME_KEYS) or pick_col(df, STUDENT_ID_KEYS)
    if pts is None or who is None: return pd.Series(dtype="float64")
    d = df[[who, pts]].copy()
    d[pts] = pd.to_numeric(d[pts], errors="coerce").fillna(0)
    s = d.groupby(d[who].astype(str))[pts].sum().sort_values(ascending=False)
    return s.head(top) if top else s


def total_points(df: pd.DataFrame) -> float:
    col = pick_col(df, POINT_KEYS) if df is not None else None
    if col is None: return 0.0
    return float(pd.to_numeric(df[col], errors="coerce").fillna(0).sum())


def scalar_stats(stats) -> list[tuple[str, object]]:
    """Flat (label, value) pairs from a statistics payload, nested dicts skipped."""
    if not isinstance(stats, dict): return []
    return [(str(k), v) for k, v in stats.items() if not isinstance(v, (dict, list))]


def clean_record(row: dict | None) -> dict:
    """Table row back to plain values; missing cells become None instead of NaN."""
    return {k: (None if is_blank(v) else v) for k, v in (row or {}).items()}


def form_payload(values: dict, original: dict | None = None) -> dict:
    """Fields to send from a form: filled ones, plus ones emptied since ``original`` was loaded."""
    original = original or {}
    return {k: v for k, v in values.items() if v != "" or not is_blank(original.get(k))}
