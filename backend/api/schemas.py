"""Pydantic request schemas for the layout API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from layout import LayoutConfig


class LayoutRequest(BaseModel):
    """Full layout / positions-only request. Without an anchor the root keeps its current centre."""
    model_config = ConfigDict(populate_by_name=True)
    root: dict = Field(..., description="Nested node record")
    anchor_x: Optional[float] = Field(None, alias="anchorX")
    anchor_y: Optional[float] = Field(None, alias="anchorY")
    config: Optional[LayoutConfig] = None


class SizesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    root: dict = Field(..., description="Nested node record")
    config: Optional[LayoutConfig] = None


class SubtreeHeightRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    root: dict = Field(..., description="Nested node record")
    node_id: str = Field(..., alias="nodeId")
    config: Optional[LayoutConfig] = None
