from datetime import date, datetime

import pandas as pd
import pytest

from schoolgate.utils import format_date, get_initials, is_blank


@pytest.mark.parametrize("value, expected", [
    ("2024-01-05", "5 Januari 2024"),
    ("2023-08-17T09:30:00", "17 Agustus 2023"),
    (date(2022, 12, 31), "31 Desember 2022"),
    (datetime(2021, 3, 1, 23, 59), "1 Maret 2021"),
    ("2020-05-20", "20 Mei 2020"),
])
def test_format_date_indonesian(value, expected):
    assert format_date(value) == expected


@pytest.mark.parametrize("value", [None, "", 0, float("nan"), pd.NaT])
def test_format_date_empty(value):
    assert format_date(value) == ""


def test_format_date_unparsable_returns_text():
    assert format_date("kemarin sore") == "kemarin sore"


@pytest.mark.parametrize("name, expected", [
    ("Andi Wijaya", "AW"),
    ("siti nur halizah", "SN"),
    ("Budi", "B"),
    ("  Dewi   Lestari ", "DL"),
    ("", "XX"),
    (None, "XX"),
])
def test_get_initials(name, expected):
    assert get_initials(name) == expected


def test_format_date_epoch_numbers_are_milliseconds():
    assert format_date(1704412800000) == "5 Januari 2024"
    assert format_date(1704412800000.0) == "5 Januari 2024"


@pytest.mark.parametrize("value, expected", [
    (None, True),
    ("", True),
    (float("nan"), True),
    (pd.NaT, True),
    ("nan", False),
    (0, False),
    ("Andi", False),
    ([1], False),
])
def test_is_blank(value, expected):
    assert is_blank(value) is expected
