"""bsdate public API.

Bikram Sambat <-> Gregorian conversion and Nepali/English date display.
Most users only need the functions re-exported here.
"""

# Initialize registry and default converter on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    ad_to_bs,
    bs_to_ad,
    today_bs,
    month_range,
    days_in_month,
    days_in_year,
    is_table_year,
    table_years,
    engine_info,
    use_calendar_table,
    list_locales,
    locale_info,
    register_locale,
    localize_digits,
    delocalize_digits,
    format_bs_date,
    parse_bs_date,
    month_name,
    format_ad_date,
    weekday_name,
    relative_time,
    format_dual_date,
    format_bs_with_ad,
    format_article_date,
    current_bs_date_string,
)
from .core.errors import BsDateError, CalendarTableError, InvalidMonthError, UnknownLocaleError
from .core.types import BSDate, DualDate, Locale, ReferenceAnchor
from .engines.converter import DEFAULT_ANCHOR, DateConverter
from .engines.table import CalendarTable, load_calendar_table

__version__ = "0.1.0"

__all__ = [
    "ad_to_bs",
    "bs_to_ad",
    "today_bs",
    "month_range",
    "days_in_month",
    "days_in_year",
    "is_table_year",
    "table_years",
    "engine_info",
    "use_calendar_table",
    "list_locales",
    "locale_info",
    "register_locale",
    "localize_digits",
    "delocalize_digits",
    "format_bs_date",
    "parse_bs_date",
    "month_name",
    "format_ad_date",
    "weekday_name",
    "relative_time",
    "format_dual_date",
    "format_bs_with_ad",
    "format_article_date",
    "current_bs_date_string",
    "BSDate",
    "DualDate",
    "Locale",
    "ReferenceAnchor",
    "DateConverter",
    "DEFAULT_ANCHOR",
    "CalendarTable",
    "load_calendar_table",
    "BsDateError",
    "CalendarTableError",
    "InvalidMonthError",
    "UnknownLocaleError",
]
