"""
Shared layout constants for the mind-map tree layout and the content measurers.
Values match the canvas renderer so node boxes line up with what is drawn.
"""

import os


def _float_env(name: str, default: float) -> float:
    v = os.environ.get(name)
    return float(v) if v is not None else default


def _int_env(name: str, default: int) -> int:
    v = os.environ.get(name)
    return int(v) if v is not None else default


# Vertical spacing between sibling subtrees
DEFAULT_NODE_SPACING = _float_env("MINDMAP_NODE_SPACING", 30)

# Horizontal gap between a parent and its children
DEFAULT_HORIZONTAL_GAP = _float_env("MINDMAP_HORIZONTAL_GAP", 100)

# Node box floors / text wrap width
DEFAULT_MIN_NODE_WIDTH = _float_env("MINDMAP_MIN_NODE_WIDTH", 120)
DEFAULT_MAX_NODE_WIDTH = _float_env("MINDMAP_MAX_NODE_WIDTH", 420)
DEFAULT_MIN_NODE_HEIGHT = _float_env("MINDMAP_MIN_NODE_HEIGHT", 41)

DEFAULT_FONT_SIZE = _int_env("MINDMAP_DEFAULT_FONT_SIZE", 14)
LINE_HEIGHT_RATIO = 1.5

# Wrapped text: usable line width is max width minus this, plus vertical padding
WRAP_WIDTH_SLACK = 20
WRAP_PADDING = 10

# Node padding used by the measurers (theme padding)
NODE_PADDING = 12

# Icons
ICON_SIZE = 20
ICON_TEXT_PADDING = 6
ICON_GAP = 4

# Images
IMAGE_MARGIN = 8
IMAGE_DEFAULT_DISPLAY_WIDTH = 200
IMAGE_VERTICAL_WIDTH_PADDING = 20

# Tables
TABLE_CELL_PADDING_X = 12
TABLE_CELL_PADDING_Y = 8
TABLE_CELL_FONT_SIZE = 13
TABLE_BORDER_WIDTH = 1
TABLE_MARGIN_TOP = 12
TABLE_MARGIN_RIGHT = 8
TABLE_MARGIN_BOTTOM = 8
TABLE_MARGIN_LEFT = 12
TABLE_MIN_CELL_WIDTH = 60
TABLE_MAX_CELL_WIDTH = 310
TABLE_NODE_BORDER_WIDTH = 4
TABLE_EXTRA_PADDING = 24
TABLE_EMPTY_SIZE = (100, 40)

# Code blocks
CODE_MAX_WIDTH = 390
CODE_PADDING_X = 6
CODE_PADDING_Y = 2
CODE_MARGIN_X = 2
CODE_FONT_SIZE_DELTA = 2
