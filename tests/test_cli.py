# tests/test_cli.py

import logging

import pytest

from bsdate import api
from bsdate.cli import main

@pytest.fixture(autouse=True)
def restore_converter(monkeypatch):
    monkeypatch.delenv(api.LOCALE_ENV, raising=False)
    old = api.get_converter()
    yield
    api.set_converter(old)

def test_to_bs(capsys):
    assert main(["to-bs", "2025-12-29", "--locale", "en"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["14 Poush 2082", "Monday, 29 December 2025"]

def test_date_shorthand(capsys):
    assert main(["2025-12-29", "--style", "short"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "२०८२-०९-१४"

def test_to_ad_accepts_localized_digits(capsys):
    assert main(["to-ad", "२०८२-०९-१४"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "2025-12-29"

def test_to_ad_warns_outside_table(capsys):
    assert main(["to-ad", "2100-01-01", "--locale", "en"]) == 0
    assert "outside the calendar table" in capsys.readouterr().err

def test_relative(capsys):
    argv = ["relative", "2025-12-29T10:00:00Z", "--now", "2025-12-29T12:00:00Z", "--locale", "en"]
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == "2 hours ago"

def test_relative_dual(capsys):
    argv = ["relative", "2025-12-29T10:00:00Z", "--now", "2025-12-29T12:00:00Z", "--dual"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "१४ पुष २०८२" in out
    assert "२ घण्टा अघि" in out

def test_today(capsys):
    assert main(["today", "--locale", "en", "--style", "short"]) == 0
    assert capsys.readouterr().out.strip().count("-") == 2

def test_month_grid(capsys):
    assert main(["month", "2082", "9", "--locale", "en"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Poush 2082   (2025-12-16 .. 2026-01-14)")
    assert "12-16" in out and "01-14" in out

def test_custom_table(tmp_path, capsys):
    path = tmp_path / "cal.csv"
    path.write_text(
        "year,m1,m2,m3,m4,m5,m6,m7,m8,m9,m10,m11,m12\n"
        "2080,30,30,30,30,30,30,30,30,30,30,30,35\n",
        encoding="utf-8",
    )
    assert main(["to-bs", "2023-05-14", "--table", str(path), "--locale", "en", "--style", "short"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "2080-02-01"

def test_round_trip_diagnostic(capsys):
    assert main(["diag", "round-trip", "--N", "200"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out

def test_verbose_flag(capsys):
    assert main(["--verbose", "to-bs", "2025-12-29"]) == 0

def test_verbose_after_subcommand(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr("logging.basicConfig", lambda **kw: calls.append(kw))
    assert main(["to-bs", "2025-12-29", "--locale", "en", "--verbose"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "14 Poush 2082"
    assert calls and calls[0]["level"] == logging.DEBUG

def test_month_grid_uses_locale_env(monkeypatch, capsys):
    monkeypatch.setenv(api.LOCALE_ENV, "en")
    assert main(["month", "2082", "9"]) == 0
    assert capsys.readouterr().out.startswith("Poush 2082   (2025-12-16 .. 2026-01-14)")

def test_month_grid_custom_table(tmp_path, capsys):
    path = tmp_path / "cal.csv"
    path.write_text(
        "year,m1,m2,m3,m4,m5,m6,m7,m8,m9,m10,m11,m12\n"
        "2080,30,30,30,30,30,30,30,30,30,30,30,35\n",
        encoding="utf-8",
    )
    assert main(["month", "2080", "2", "--table", str(path), "--locale", "en"]) == 0
    assert capsys.readouterr().out.startswith("Jestha 2080   (2023-05-14 .. 2023-06-12)")
