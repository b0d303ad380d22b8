from __future__ import annotations
from typing import Sequence, Union

ASCII_DIGITS = "0123456789"


def localize_digits(value: Union[int, str], digits: Sequence[str]) -> str:
    """Replace each ASCII digit 0-9 with its glyph; everything else passes through."""
    return str(value).translate(str.maketrans(dict(zip(ASCII_DIGITS, digits))))


def delocalize_digits(text: str, digits: Sequence[str]) -> str:
    """Inverse of localize_digits for single-character glyphs."""
    return text.translate(str.maketrans(dict(zip(digits, ASCII_DIGITS))))
