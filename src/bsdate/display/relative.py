"""
bsdate.display.relative
-----------------------
"N minutes ago"-style phrases for a past timestamp.

Buckets use floor division of whole elapsed seconds, checked in order:

  < 60 s      just now
  < 60 min    N minutes ago
  < 24 h      N hours ago
  1 day       yesterday
  < 7 days    N days ago
  1 week      last week
  < 4 weeks   N weeks ago
  1 month     last month     (month = 30 days)
  < 12 months N months ago
  otherwise   full BS date

Weeks and months are fixed 7- and 30-day spans, not calendar months.
Timestamps in the future render as the full BS date.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from ..core.time import DateLike, to_datetime
from ..core.types import Locale
from ..engines.converter import DateConverter
from ..engines.specs import NEPALI
from .digits import localize_digits
from .formatting import format_bs_date

_SECOND = timedelta(seconds=1)


def relative_time(
    value: DateLike,
    converter: DateConverter,
    locale: Locale = NEPALI,
    *,
    now: Optional[DateLike] = None,
) -> str:
    ts = to_datetime(value, tz=converter.tz)
    current = to_datetime(now if now is not None else converter.clock(), tz=converter.tz)
    elapsed = current - ts

    if elapsed < timedelta(0):
        return format_bs_date(converter.ad_to_bs(ts), "full", locale)

    secs = elapsed // _SECOND
    mins = secs // 60
    hours = mins // 60
    days = hours // 24
    weeks = days // 7
    months = days // 30

    def n(v: int) -> str:
        return localize_digits(v, locale.digits)

    if secs < 60:
        return locale.just_now
    if mins < 60:
        return locale.minutes_ago.format(n=n(mins))
    if hours < 24:
        return locale.hours_ago.format(n=n(hours))
    if days == 1:
        return locale.yesterday
    if days < 7:
        return locale.days_ago.format(n=n(days))
    if weeks == 1:
        return locale.last_week
    if weeks < 4:
        return locale.weeks_ago.format(n=n(weeks))
    if months == 1:
        return locale.last_month
    if months < 12:
        return locale.months_ago.format(n=n(months))

    return format_bs_date(converter.ad_to_bs(ts), "full", locale)
