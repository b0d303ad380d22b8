from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from .errors import UnknownLocaleError
from .types import Locale

@dataclass
class LocaleRegistry:
    _locales: Dict[str, Locale]

    def get(self, code: str) -> Locale:
        if code not in self._locales:
            raise UnknownLocaleError(f"Unknown locale '{code}'. Available: {sorted(self._locales)}")
        return self._locales[code]

    def list(self) -> List[str]:
        return sorted(self._locales.keys())

    def register(self, locale: Locale, *, overwrite: bool = False) -> None:
        if (not overwrite) and (locale.code in self._locales):
            raise KeyError(f"Locale '{locale.code}' already exists. Use overwrite=True to replace.")
        self._locales[locale.code] = locale
