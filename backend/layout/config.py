"""Layout configuration. Defaults come from constants (env-overridable); requests may override per call."""

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    DEFAULT_FONT_SIZE,
    DEFAULT_HORIZONTAL_GAP,
    DEFAULT_MAX_NODE_WIDTH,
    DEFAULT_MIN_NODE_HEIGHT,
    DEFAULT_MIN_NODE_WIDTH,
    DEFAULT_NODE_SPACING,
)


class LayoutConfig(BaseModel):
    """Spacing and size floors used by one layout pass."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    node_spacing: float = Field(default=DEFAULT_NODE_SPACING, ge=0, alias="nodeSpacing")
    horizontal_gap: float = Field(default=DEFAULT_HORIZONTAL_GAP, ge=0, alias="horizontalGap")
    min_width: float = Field(default=DEFAULT_MIN_NODE_WIDTH, ge=0, alias="minWidth")
    max_width: float = Field(default=DEFAULT_MAX_NODE_WIDTH, gt=0, alias="maxWidth")
    min_height: float = Field(default=DEFAULT_MIN_NODE_HEIGHT, ge=0, alias="minHeight")
    default_font_size: int = Field(default=DEFAULT_FONT_SIZE, gt=0, alias="defaultFontSize")


DEFAULT_CONFIG = LayoutConfig()
