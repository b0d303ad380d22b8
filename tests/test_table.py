# tests/test_table.py

import pytest

from bsdate.core.errors import CalendarTableError, InvalidMonthError
from bsdate.engines import table as tbl
from bsdate.engines.table import (
    CALENDAR_TABLE_ENV,
    DEFAULT_MONTH_DAYS,
    CalendarTable,
    load_calendar_table,
    parse_calendar_csv,
)

@pytest.fixture
def packaged(monkeypatch):
    monkeypatch.delenv(CALENDAR_TABLE_ENV, raising=False)
    return load_calendar_table()

def test_packaged_table_metadata(packaged):
    assert packaged.version == "2082.1"
    assert packaged.years() == list(range(2080, 2091))
    assert packaged.source.endswith("bs_calendar.csv")

def test_month_length_conformance(packaged):
    for y in packaged.years():
        row = packaged.rows[y]
        assert len(row) == 12
        for m in range(1, 13):
            assert packaged.days_in_month(y, m) == row[m - 1]
        assert sum(packaged.days_in_month(y, m) for m in range(1, 13)) == packaged.days_in_year(y)

def test_known_year_lengths(packaged):
    # 2080 Baisakh 1 = 2023-04-14, 2081 = 2024-04-13, 2082 = 2025-04-14, 2083 = 2026-04-14
    assert packaged.days_in_year(2080) == 365
    assert packaged.days_in_year(2081) == 366
    assert packaged.days_in_year(2082) == 365

def test_fallback_pattern_for_unknown_year(packaged):
    assert not packaged.is_table_year(2000)
    for m in range(1, 13):
        assert packaged.days_in_month(2000, m) == DEFAULT_MONTH_DAYS[m - 1]
    assert packaged.days_in_year(2000) == 365
    assert sum(DEFAULT_MONTH_DAYS) == 365

@pytest.mark.parametrize("month", [0, 13, -1, 100])
def test_month_out_of_range_fails_fast(packaged, month):
    with pytest.raises(InvalidMonthError):
        packaged.days_in_month(2082, month)
    # same policy for years outside the table
    with pytest.raises(ValueError):
        packaged.days_in_month(1990, month)

def test_parse_csv_with_comments_and_version():
    lines = [
        "# some data\n",
        "# version: test-7\n",
        "\n",
        "year,m1,m2,m3,m4,m5,m6,m7,m8,m9,m10,m11,m12\n",
        "2100, 30,30,30,30,30,30,30,30,30,30,30,35\n",
    ]
    t = parse_calendar_csv(lines, source="inline")
    assert t.version == "test-7"
    assert t.days_in_month(2100, 12) == 35
    assert t.days_in_year(2100) == 365

@pytest.mark.parametrize("body, fragment", [
    ("2100,30,30\n", "13 columns"),
    ("2100,30,30,30,30,30,30,30,30,30,30,30,x\n", "inline:2"),
    ("2100,30,30,30,30,30,30,30,30,30,30,30,0\n", "positive"),
    ("2100,30,30,30,30,30,30,30,30,30,30,30,30\n2100,30,30,30,30,30,30,30,30,30,30,30,30\n", "duplicate"),
])
def test_parse_csv_rejects_bad_rows(body, fragment):
    text = "year,m1,m2,m3,m4,m5,m6,m7,m8,m9,m10,m11,m12\n" + body
    with pytest.raises(CalendarTableError) as e:
        parse_calendar_csv(text.splitlines(), source="inline")
    assert fragment in str(e.value)

def test_parse_csv_requires_header():
    with pytest.raises(CalendarTableError):
        parse_calendar_csv(["2100,30,30,30,30,30,30,30,30,30,30,30,30"], source="inline")
    with pytest.raises(CalendarTableError):
        parse_calendar_csv([], source="inline")

def test_from_rows_validates():
    with pytest.raises(CalendarTableError):
        CalendarTable.from_rows({2100: [30] * 11})
    t = CalendarTable.from_rows({2100: [30] * 12}, version="v")
    assert t.days_in_year(2100) == 360

def test_table_rows_are_read_only(packaged):
    with pytest.raises(TypeError):
        packaged.rows[2200] = (30,) * 12

def test_env_var_overrides_packaged(tmp_path, monkeypatch):
    path = tmp_path / "cal.csv"
    path.write_text(
        "# version: local\n"
        "year,m1,m2,m3,m4,m5,m6,m7,m8,m9,m10,m11,m12\n"
        "2200,31,31,31,31,31,31,31,31,31,31,31,31\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(CALENDAR_TABLE_ENV, str(path))
    t = load_calendar_table()
    assert t.version == "local"
    assert t.years() == [2200]

    # explicit path wins over the environment
    monkeypatch.setenv(CALENDAR_TABLE_ENV, str(tmp_path / "missing.csv"))
    assert load_calendar_table(path).version == "local"

def test_loaded_tables_are_cached(tmp_path):
    path = tmp_path / "cal.csv"
    path.write_text("year,m1,m2,m3,m4,m5,m6,m7,m8,m9,m10,m11,m12\n", encoding="utf-8")
    assert load_calendar_table(path) is load_calendar_table(str(path))
    assert tbl._load_packaged() is tbl._load_packaged()

def test_default_pattern_drives_fallback_year_length():
    t = CalendarTable.from_rows({})
    flat = CalendarTable(rows=t.rows, default_pattern=(30,) * 12)
    assert flat.days_in_year(2030) == 360
    assert flat.days_in_year(2030) == sum(flat.days_in_month(2030, m) for m in range(1, 13))

@pytest.mark.parametrize("pattern", [(30,) * 11, (30,) * 11 + (0,), (30,) * 11 + (30.5,)])
def test_default_pattern_is_validated(pattern):
    with pytest.raises(CalendarTableError):
        CalendarTable(rows={}, default_pattern=pattern)
