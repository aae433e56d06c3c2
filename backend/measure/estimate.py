"""
Font-free text measurement.

Estimates glyph widths per character class (CJK ideographs wide, punctuation
narrow, ...). Deterministic and dependency-free, so server-side layout and
tests give the same boxes everywhere.
"""

from functools import lru_cache

from .base import BaseMeasurer

_MONO_RATIO = 0.6
WIDTH_CACHE_SIZE = 4096


def _char_ratio(char: str) -> float:
    """Width of one character as a fraction of the font size."""
    if char in "MW":
        return 1.0
    if char in "il|":
        return 0.3
    if char.isupper():
        return 0.8
    if char.islower():
        return 0.6
    if char.isdigit():
        return 0.7
    if char in ".,;:!?" or char == " ":
        return 0.3
    if char in "()[]{}/\\":
        return 0.4
    if char in "+-*=<>":
        return 0.6
    if char in "&@#$%":
        return 0.7
    code = ord(char)
    if code > 127:
        if 0x4E00 <= code <= 0x9FFF:
            # CJK Unified Ideographs
            return 1.2
        if 0x3040 <= code <= 0x30FF:
            # Hiragana / Katakana
            return 1.1
        return 0.8
    return 0.7


class EstimatingMeasurer(BaseMeasurer):
    def __init__(
        self,
        font_size: int = BaseMeasurer.font_size,
        padding: int = BaseMeasurer.padding,
        cache_size: int = WIDTH_CACHE_SIZE,
    ):
        self.font_size = font_size
        self.padding = padding
        # Evicts least recently used widths past cache_size
        self._cached_width = lru_cache(maxsize=cache_size)(self._estimate_width)

    def text_width(self, text: str, font_size: float, monospace: bool = False) -> float:
        if not text:
            return 0
        return self._cached_width(text, font_size, monospace)

    def cache_info(self):
        return self._cached_width.cache_info()

    @staticmethod
    def _estimate_width(text: str, font_size: float, monospace: bool) -> float:
        if monospace:
            return len(text) * font_size * _MONO_RATIO
        return sum(_char_ratio(c) for c in text) * font_size
