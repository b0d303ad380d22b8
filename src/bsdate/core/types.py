from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Literal, Tuple

DateStyle = Literal["full", "short", "long"]

@dataclass(frozen=True, order=True)
class BSDate:
    """A Bikram Sambat date. Ordering is lexicographic on (year, month, day)."""
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class ReferenceAnchor:
    """A BS date and the AD date denoting the same civil day."""
    bs: BSDate
    ad: date

@dataclass(frozen=True)
class DualDate:
    bs: str
    ad: str
    bs_short: str
    weekday: str
    relative: str

@dataclass(frozen=True)
class Locale:
    """Glyph and name tables for one display language.

    Weekdays are Sunday first. The ``*_ago`` phrases are format templates
    taking a localized ``{n}``.
    """
    code: str
    name: str
    digits: Tuple[str, ...]
    bs_months: Tuple[str, ...]
    ad_months: Tuple[str, ...]
    weekdays: Tuple[str, ...]
    just_now: str
    minutes_ago: str
    hours_ago: str
    yesterday: str
    days_ago: str
    last_week: str
    weeks_ago: str
    last_month: str
    months_ago: str

    def __post_init__(self) -> None:
        for field_name, expected in (("digits", 10), ("bs_months", 12), ("ad_months", 12), ("weekdays", 7)):
            got = len(getattr(self, field_name))
            if got != expected:
                raise ValueError(f"Locale '{self.code}': {field_name} needs {expected} entries, got {got}")
        if any(len(g) != 1 for g in self.digits):
            raise ValueError(f"Locale '{self.code}': digit glyphs must be single characters")
