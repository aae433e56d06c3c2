"""Text measurement from real glyph metrics (Pillow FreeType fonts)."""

from typing import Dict, Optional, Tuple

from loguru import logger
from PIL import ImageFont

from .base import BaseMeasurer

DEFAULT_FONT = "DejaVuSans.ttf"
DEFAULT_MONO_FONT = "DejaVuSansMono.ttf"


class FontMeasurer(BaseMeasurer):
    """
    Measures with a TrueType font. If the font file cannot be opened, Pillow's
    built-in default font is used at the requested size.
    """

    def __init__(
        self,
        font_path: Optional[str] = None,
        mono_font_path: Optional[str] = None,
        font_size: int = BaseMeasurer.font_size,
        padding: int = BaseMeasurer.padding,
    ):
        self.font_path = font_path or DEFAULT_FONT
        self.mono_font_path = mono_font_path or DEFAULT_MONO_FONT
        self.font_size = font_size
        self.padding = padding
        self._font_cache: Dict[Tuple[str, int], ImageFont.ImageFont] = {}

    def _font(self, path: str, size: float):
        key_size = max(1, int(round(size)))
        cache_key = (path, key_size)
        font = self._font_cache.get(cache_key)
        if font is not None:
            return font
        try:
            font = ImageFont.truetype(path, key_size)
        except OSError:
            logger.debug("Font {} unavailable, using Pillow default font", path)
            font = ImageFont.load_default(size=key_size)
        self._font_cache[cache_key] = font
        return font

    def text_width(self, text: str, font_size: float, monospace: bool = False) -> float:
        if not text:
            return 0
        font = self._font(self.mono_font_path if monospace else self.font_path, font_size)
        return float(font.getlength(text))
