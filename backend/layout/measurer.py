"""Content measurement contract consumed by the layout engine. Implementations live in `measure`."""

from typing import Dict, NamedTuple, Optional, Protocol, Union

from mindmap.content import CodeBlockData, TableData

from .constants import ICON_GAP, ICON_SIZE, ICON_TEXT_PADDING

Icons = Union[Dict[str, str], str, None]


class TextMeasurement(NamedTuple):
    width: float
    height: float


class ContentMeasurer(Protocol):
    """
    Supplied by the hosting renderer (canvas metrics, DOM, font files...).
    Must be synchronous and deterministic for identical content within one pass;
    async content (remote images) reports a placeholder and triggers a later relayout.
    """

    def measure_text(self, text: str, icons: Icons = None, font_size: Optional[int] = None) -> TextMeasurement: ...

    def measure_table(self, table: TableData) -> TextMeasurement: ...

    def measure_code_block(self, code_block: CodeBlockData) -> TextMeasurement: ...


def icon_width(icons: Icons) -> float:
    """Width reserved for node icons: legacy single icon, or N icons with gaps."""
    if not icons:
        return 0
    if isinstance(icons, str):
        return ICON_SIZE + ICON_TEXT_PADDING
    count = len(icons)
    return count * ICON_SIZE + (count - 1) * ICON_GAP + ICON_TEXT_PADDING
