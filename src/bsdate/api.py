from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .core.engine import LocaleRegistry
from .core.time import DateLike
from .core.types import BSDate, DateStyle, DualDate, Locale
from .display import formatting as _fmt
from .display.digits import delocalize_digits as _delocalize, localize_digits as _localize
from .display.relative import relative_time as _relative_time
from .engines.converter import DateConverter
from .engines.table import load_calendar_table

LOCALE_ENV = "BSDATE_LOCALE"
DEFAULT_LOCALE = "ne"

_registry: Optional[LocaleRegistry] = None
_converter: Optional[DateConverter] = None

def set_registry(reg: LocaleRegistry) -> None:
    global _registry
    _registry = reg

def set_converter(conv: DateConverter) -> None:
    global _converter
    _converter = conv

def _reg() -> LocaleRegistry:
    if _registry is None:
        raise RuntimeError("Locale registry not initialized")
    return _registry

def get_converter() -> DateConverter:
    if _converter is None:
        raise RuntimeError("Date converter not initialized")
    return _converter

def _loc(locale: Optional[str]) -> Locale:
    if locale is None:
        locale = os.environ.get(LOCALE_ENV, "").strip() or DEFAULT_LOCALE
    return _reg().get(locale)

def use_calendar_table(path: Optional[Union[str, Path]] = None) -> DateConverter:
    """Rebuild the default converter over another calendar table, keeping anchor and clock."""
    old = get_converter()
    conv = DateConverter(load_calendar_table(path), old.anchor, tz=old.tz, clock=old.clock)
    set_converter(conv)
    return conv

# ============================================================
# Locales
# ============================================================

def list_locales() -> List[str]:
    return _reg().list()

def locale_info(locale: Optional[str] = None) -> Locale:
    """The named locale, or the default one ($BSDATE_LOCALE, else Nepali)."""
    return _loc(locale)

def register_locale(locale: Locale, *, overwrite: bool = False) -> None:
    _reg().register(locale, overwrite=overwrite)

def localize_digits(value: Union[int, str], *, locale: Optional[str] = None) -> str:
    return _localize(value, _loc(locale).digits)

def delocalize_digits(text: str, *, locale: Optional[str] = None) -> str:
    return _delocalize(text, _loc(locale).digits)

# ============================================================
# Calendar table
# ============================================================

def days_in_month(year: int, month: int) -> int:
    return get_converter().days_in_month(year, month)

def days_in_year(year: int) -> int:
    return get_converter().days_in_year(year)

def is_table_year(year: int) -> bool:
    return get_converter().table.is_table_year(year)

def table_years() -> List[int]:
    return get_converter().table.years()

def engine_info() -> Dict[str, Any]:
    return get_converter().info()

# ============================================================
# Conversion
# ============================================================

def ad_to_bs(value: DateLike) -> BSDate:
    return get_converter().ad_to_bs(value)

def bs_to_ad(bs: BSDate):
    return get_converter().bs_to_ad(bs)

def today_bs() -> BSDate:
    return get_converter().today()

def month_range(year: int, month: int):
    return get_converter().month_range(year, month)

# ============================================================
# Formatting
# ============================================================

def format_bs_date(bs: BSDate, style: DateStyle = "full", *, locale: Optional[str] = None) -> str:
    return _fmt.format_bs_date(bs, style, _loc(locale))

def parse_bs_date(text: str, *, locale: Optional[str] = None) -> BSDate:
    return _fmt.parse_bs_date(text, _loc(locale))

def month_name(month: int, *, locale: Optional[str] = None) -> str:
    return _fmt.month_name(month, _loc(locale))

def format_ad_date(value: DateLike, *, locale: Optional[str] = None) -> str:
    return _fmt.format_ad_date(value, _loc(locale), tz=get_converter().tz)

def weekday_name(value: DateLike, *, locale: Optional[str] = None) -> str:
    return _fmt.weekday_name(value, _loc(locale), tz=get_converter().tz)

def relative_time(value: DateLike, *, locale: Optional[str] = None, now: Optional[DateLike] = None) -> str:
    return _relative_time(value, get_converter(), _loc(locale), now=now)

def format_dual_date(value: DateLike, *, locale: Optional[str] = None, now: Optional[DateLike] = None) -> DualDate:
    return _fmt.format_dual_date(value, get_converter(), _loc(locale), now=now)

def format_bs_with_ad(value: DateLike, *, locale: Optional[str] = None) -> str:
    return _fmt.format_bs_with_ad(value, get_converter(), _loc(locale))

def format_article_date(value: DateLike, *, show_both: bool = True, locale: Optional[str] = None) -> str:
    return _fmt.format_article_date(value, get_converter(), _loc(locale), show_both=show_both)

def current_bs_date_string(style: DateStyle = "full", *, locale: Optional[str] = None) -> str:
    return _fmt.format_bs_date(today_bs(), style, _loc(locale))
