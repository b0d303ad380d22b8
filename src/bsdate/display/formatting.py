"""
bsdate.display.formatting
-------------------------
Locale rendering of BS and AD dates.

Styles for BS dates (Nepali shown, 2082-09-14):
  full   १४ पुष २०८२
  short  २०८२-०९-१४
  long   पुष १४, २०८२
"""

from __future__ import annotations

from datetime import timezone
from typing import Optional

from ..core.time import NEPAL_TZ, DateLike, civil_date, sunday_first_weekday
from ..core.types import BSDate, DateStyle, DualDate, Locale
from ..engines.converter import DateConverter
from ..engines.specs import NEPALI
from ..engines.table import check_month
from .digits import delocalize_digits, localize_digits

STYLES = ("full", "short", "long")


def month_name(month: int, locale: Locale = NEPALI) -> str:
    check_month(month)
    return locale.bs_months[month - 1]


def format_bs_date(bs: BSDate, style: DateStyle = "full", locale: Locale = NEPALI) -> str:
    def num(v) -> str:
        return localize_digits(v, locale.digits)

    if style == "short":
        check_month(bs.month)
        return f"{num(bs.year)}-{num(f'{bs.month:02d}')}-{num(f'{bs.day:02d}')}"
    if style == "long":
        return f"{month_name(bs.month, locale)} {num(bs.day)}, {num(bs.year)}"
    if style == "full":
        return f"{num(bs.day)} {month_name(bs.month, locale)} {num(bs.year)}"
    raise ValueError(f"Unknown style '{style}'. Expected one of {STYLES}")


def parse_bs_date(text: str, locale: Locale = NEPALI) -> BSDate:
    """Parse the ``short`` style back into a BSDate."""
    parts = delocalize_digits(text.strip(), locale.digits).split("-")
    if len(parts) != 3:
        raise ValueError(f"Expected YYYY-MM-DD, got {text!r}")
    y, m, d = (int(p) for p in parts)
    return BSDate(y, m, d)


def format_ad_date(value: DateLike, locale: Locale = NEPALI, *, tz: timezone = NEPAL_TZ) -> str:
    """AD date with the locale's month names and digits, e.g. २९ डिसेम्बर २०२५."""
    d = civil_date(value, tz=tz)
    return f"{localize_digits(d.day, locale.digits)} {locale.ad_months[d.month - 1]} {localize_digits(d.year, locale.digits)}"


def weekday_name(value: DateLike, locale: Locale = NEPALI, *, tz: timezone = NEPAL_TZ) -> str:
    return locale.weekdays[sunday_first_weekday(civil_date(value, tz=tz))]


def format_dual_date(
    value: DateLike,
    converter: DateConverter,
    locale: Locale = NEPALI,
    *,
    now: Optional[DateLike] = None,
) -> DualDate:
    from .relative import relative_time

    bs = converter.ad_to_bs(value)
    return DualDate(
        bs=format_bs_date(bs, "full", locale),
        ad=format_ad_date(value, locale, tz=converter.tz),
        bs_short=format_bs_date(bs, "short", locale),
        weekday=weekday_name(value, locale, tz=converter.tz),
        relative=relative_time(value, converter, locale, now=now),
    )


def format_bs_with_ad(value: DateLike, converter: DateConverter, locale: Locale = NEPALI) -> str:
    bs = converter.ad_to_bs(value)
    return f"{format_bs_date(bs, 'full', locale)} ({format_ad_date(value, locale, tz=converter.tz)})"


def format_article_date(
    value: DateLike,
    converter: DateConverter,
    locale: Locale = NEPALI,
    *,
    show_both: bool = True,
) -> str:
    bs_text = format_bs_date(converter.ad_to_bs(value), "full", locale)
    if show_both:
        return f"{bs_text} • {format_ad_date(value, locale, tz=converter.tz)}"
    return bs_text
