from __future__ import annotations
from bsdate.core.engine import LocaleRegistry
from bsdate.engines.converter import DateConverter
from bsdate.engines.specs import ALL_LOCALES
from bsdate.engines.table import load_calendar_table

def build_registry() -> LocaleRegistry:
    return LocaleRegistry(dict(ALL_LOCALES))

def build_converter() -> DateConverter:
    return DateConverter(load_calendar_table())
