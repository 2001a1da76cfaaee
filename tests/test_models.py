import sys
import os
import datetime as dt

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from notekeeper.core.errors import InvalidDate
from notekeeper.core.models import Date, Note


def test_today_matches_host_clock():
    today = dt.date.today()
    d = Date.today()
    assert (d.day, d.month, d.year) == (today.day, today.month, today.year)
    assert d.is_valid()


def test_from_parts_valid():
    assert Date.from_parts(31, 12, 2024) == Date(day=31, month=12, year=2024)


def test_leap_day():
    assert Date.from_parts(29, 2, 2024).day == 29
    assert Date.from_parts(29, 2, 2000).day == 29
    with pytest.raises(InvalidDate):
        Date.from_parts(29, 2, 2023)
    with pytest.raises(InvalidDate):
        Date.from_parts(29, 2, 1900)


@pytest.mark.parametrize("day,month,year", [
    (1, 0, 2024),
    (1, 13, 2024),
    (0, 5, 2024),
    (31, 4, 2024),
    (32, 1, 2024),
    (1, 1, 0),
    (1, 1, 10000),
])
def test_from_parts_rejects_out_of_range(day, month, year):
    with pytest.raises(InvalidDate):
        Date.from_parts(day, month, year)


def test_from_parts_rejects_non_integers():
    with pytest.raises(InvalidDate):
        Date.from_parts("1", 1, 2024)
    with pytest.raises(InvalidDate):
        Date.from_parts(True, 1, 2024)


def test_invalid_date_is_value_error():
    with pytest.raises(ValueError):
        Date.from_parts(30, 2, 2024)


def test_plain_construction_is_permissive():
    d = Date(day=45, month=14, year=2024)
    assert d.month == 14
    assert not d.is_valid()


def test_str_is_day_month_year():
    assert str(Date(day=5, month=3, year=2024)) == "05-03-2024"


def test_new_default():
    note = Note.new_default()
    assert note.title == "New Note"
    assert note.content == ""
    assert note.date == Date.today()


def test_has_title():
    assert Note(title="Ideas", content="").has_title()
    assert not Note(title="   ", content="").has_title()
    assert not Note(title="", content="").has_title()
