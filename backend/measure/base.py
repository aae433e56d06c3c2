"""
Shared table / code-block geometry.

A measurer turns node content into a content box. Subclasses only supply
`text_width`; table and code-block boxes are built from it with the same
cell/padding rules as the canvas renderer.
"""

import math
from typing import List, Optional

from layout.constants import (
    CODE_FONT_SIZE_DELTA,
    CODE_MARGIN_X,
    CODE_MAX_WIDTH,
    CODE_PADDING_X,
    CODE_PADDING_Y,
    DEFAULT_FONT_SIZE,
    LINE_HEIGHT_RATIO,
    NODE_PADDING,
    TABLE_BORDER_WIDTH,
    TABLE_CELL_FONT_SIZE,
    TABLE_CELL_PADDING_X,
    TABLE_CELL_PADDING_Y,
    TABLE_EMPTY_SIZE,
    TABLE_EXTRA_PADDING,
    TABLE_MARGIN_BOTTOM,
    TABLE_MARGIN_LEFT,
    TABLE_MARGIN_RIGHT,
    TABLE_MARGIN_TOP,
    TABLE_MAX_CELL_WIDTH,
    TABLE_MIN_CELL_WIDTH,
    TABLE_NODE_BORDER_WIDTH,
)
from layout.measurer import Icons, TextMeasurement, icon_width
from mindmap.content import CodeBlockData, TableData


class BaseMeasurer:
    font_size = DEFAULT_FONT_SIZE
    padding = NODE_PADDING

    def text_width(self, text: str, font_size: float, monospace: bool = False) -> float:
        raise NotImplementedError

    def measure_text(self, text: str, icons: Icons = None, font_size: Optional[int] = None) -> TextMeasurement:
        size = font_size or self.font_size
        width = self.text_width(text or "", size)
        return TextMeasurement(
            width=width + icon_width(icons) + self.padding * 2,
            height=size * LINE_HEIGHT_RATIO + self.padding * 2,
        )

    def measure_table(self, table: TableData) -> TextMeasurement:
        rows = table.rows if table else []
        if not rows:
            return TextMeasurement(*TABLE_EMPTY_SIZE)

        line_height = TABLE_CELL_FONT_SIZE * LINE_HEIGHT_RATIO
        col_count = len(rows[0])
        col_widths: List[float] = [TABLE_MIN_CELL_WIDTH + TABLE_CELL_PADDING_X * 2] * col_count

        def cell_text_width(content: str) -> float:
            return self.text_width(content or " ", TABLE_CELL_FONT_SIZE)

        for row in rows:
            for col, cell in enumerate(row[:col_count]):
                cell_width = min(
                    max(cell_text_width(cell.content), TABLE_MIN_CELL_WIDTH) + TABLE_CELL_PADDING_X * 2,
                    TABLE_MAX_CELL_WIDTH,
                )
                col_widths[col] = max(col_widths[col], cell_width)

        row_heights: List[float] = []
        for row in rows:
            row_height = line_height + TABLE_CELL_PADDING_Y * 2
            for col, cell in enumerate(row[:col_count]):
                content_width = col_widths[col] - TABLE_CELL_PADDING_X * 2
                lines = math.ceil(cell_text_width(cell.content) / content_width) or 1
                row_height = max(row_height, lines * line_height + TABLE_CELL_PADDING_Y * 2)
            row_heights.append(row_height)

        total_width = sum(col_widths) + TABLE_BORDER_WIDTH * (col_count + 1)
        total_height = sum(row_heights) + TABLE_BORDER_WIDTH * (len(rows) + 1)
        return TextMeasurement(
            width=total_width + TABLE_MARGIN_LEFT + TABLE_MARGIN_RIGHT + TABLE_NODE_BORDER_WIDTH + TABLE_EXTRA_PADDING,
            height=total_height + TABLE_MARGIN_TOP + TABLE_MARGIN_BOTTOM + TABLE_NODE_BORDER_WIDTH,
        )

    def measure_code_block(self, code_block: CodeBlockData) -> TextMeasurement:
        code_font_size = self.font_size - CODE_FONT_SIZE_DELTA
        line_height = code_font_size * LINE_HEIGHT_RATIO
        content_max_width = CODE_MAX_WIDTH - CODE_PADDING_X * 2

        total_lines = 0
        max_line_width = 0.0
        for line in (code_block.code if code_block else "").split("\n"):
            line_width = self.text_width(line, code_font_size, monospace=True)
            max_line_width = max(max_line_width, line_width)
            # Long lines soft-wrap inside the block
            total_lines += math.ceil(line_width / content_max_width) if line_width > content_max_width else 1

        content_width = min(max_line_width + CODE_PADDING_X * 2, CODE_MAX_WIDTH)
        return TextMeasurement(
            width=content_width + CODE_MARGIN_X * 2 + self.padding * 2,
            height=total_lines * line_height + CODE_PADDING_Y * 2 + self.padding * 2,
        )
