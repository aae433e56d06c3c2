"""
Node box sizing: content measurement plus the engine-side merge policy.

The measurer reports the bare content box. On top of it the engine:
  - adds icon width for table / code-block content (text measurement already has it)
  - wraps over-wide text into extra lines at max_width
  - merges an embedded image box (left/right: widths add; above/below: heights add)
  - floors the result at min_width / min_height
"""

import math
from typing import Optional

from loguru import logger

from mindmap.content import ImageData
from mindmap.node import MindMapNode

from .config import LayoutConfig
from .constants import (
    IMAGE_DEFAULT_DISPLAY_WIDTH,
    IMAGE_MARGIN,
    IMAGE_VERTICAL_WIDTH_PADDING,
    LINE_HEIGHT_RATIO,
    WRAP_PADDING,
    WRAP_WIDTH_SLACK,
)
from .measurer import ContentMeasurer, TextMeasurement, icon_width


def _dimension(value: Optional[float]) -> float:
    """Missing, non-finite and negative measurements count as 0 (floored later)."""
    if value is None:
        return 0
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return value


def _box(raw) -> TextMeasurement:
    """Normalize a measurer result; a missing result is an empty box."""
    if raw is None:
        return TextMeasurement(0, 0)
    return TextMeasurement(_dimension(raw[0]), _dimension(raw[1]))


def wrap_text_size(size: TextMeasurement, font_size: float, config: LayoutConfig) -> TextMeasurement:
    """Over-wide text keeps max_width and grows by whole lines instead of clipping."""
    if size.width <= config.max_width:
        return size
    usable = max(config.max_width - WRAP_WIDTH_SLACK, 1)
    line_count = math.ceil(size.width / usable)
    return TextMeasurement(
        width=config.max_width,
        height=line_count * font_size * LINE_HEIGHT_RATIO + WRAP_PADDING * 2,
    )


def measure_content(node: MindMapNode, measurer: ContentMeasurer, config: LayoutConfig) -> TextMeasurement:
    """Content box for the node's text / table / code block, before image merge and floors."""
    node_config = node.config
    icons = node_config.node_icons
    attachment = node_config.attachment

    if attachment is not None and attachment.type == "table" and attachment.table is not None:
        size = _box(measurer.measure_table(attachment.table))
        return TextMeasurement(size.width + icon_width(icons), size.height)
    if attachment is not None and attachment.type == "code" and attachment.code_block is not None:
        size = _box(measurer.measure_code_block(attachment.code_block))
        return TextMeasurement(size.width + icon_width(icons), size.height)

    font_size = node_config.font_size
    size = _box(measurer.measure_text(node.measure_text, icons, font_size))
    return wrap_text_size(size, font_size or config.default_font_size, config)


def image_size(image: ImageData) -> TextMeasurement:
    """Displayed image box: display width (default 200) scaled by the natural aspect ratio."""
    width = image.display_width or IMAGE_DEFAULT_DISPLAY_WIDTH
    aspect_ratio = (image.height or 1) / (image.width or 1)
    return TextMeasurement(width, math.floor(width * aspect_ratio))


def merge_image_size(
    content: TextMeasurement,
    image: TextMeasurement,
    horizontal: bool,
    margin: float = IMAGE_MARGIN,
) -> TextMeasurement:
    if horizontal:
        return TextMeasurement(content.width + image.width + margin, max(content.height, image.height))
    return TextMeasurement(
        max(content.width, image.width + IMAGE_VERTICAL_WIDTH_PADDING),
        content.height + image.height + margin,
    )


def compute_node_size(node: MindMapNode, measurer: ContentMeasurer, config: LayoutConfig) -> TextMeasurement:
    size = measure_content(node, measurer, config)
    if size.width <= 0 or size.height <= 0:
        logger.debug("Node {} measured {}x{}, clamping to floors", node.id, size.width, size.height)

    image = node.config.image
    if image is not None:
        size = merge_image_size(size, image_size(image), image.is_horizontal)

    return TextMeasurement(max(size.width, config.min_width), max(size.height, config.min_height))


def measure_node(node: MindMapNode, measurer: ContentMeasurer, config: LayoutConfig) -> None:
    """Measure one node and store its box."""
    node.width, node.height = compute_node_size(node, measurer, config)
