"""Content measurers - turn node text / tables / code blocks into content boxes."""

import os

from layout.measurer import ContentMeasurer, TextMeasurement

from .base import BaseMeasurer
from .estimate import EstimatingMeasurer
from .font import FontMeasurer


def create_measurer(kind: str = None, font_path: str = None) -> ContentMeasurer:
    """Build the measurer selected by MINDMAP_MEASURER (estimate|font)."""
    kind = (kind or os.environ.get("MINDMAP_MEASURER") or "estimate").lower()
    if kind == "font":
        return FontMeasurer(font_path=font_path or os.environ.get("MINDMAP_FONT_PATH"))
    if kind == "estimate":
        return EstimatingMeasurer()
    raise ValueError(f"Unknown measurer: {kind}")


__all__ = [
    "BaseMeasurer",
    "ContentMeasurer",
    "EstimatingMeasurer",
    "FontMeasurer",
    "TextMeasurement",
    "create_measurer",
]
