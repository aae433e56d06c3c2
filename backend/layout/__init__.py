"""Layout module - computes bidirectional mind-map tree layouts."""

from typing import Any, Dict, Optional

from mindmap.node import MindMapNode
from mindmap.validation import validate_tree

from .config import DEFAULT_CONFIG, LayoutConfig
from .engine import LayoutEngine, MeasurementPolicy
from .measurer import ContentMeasurer, TextMeasurement
from .summary import summarize_layout


def compute_mind_map_layout(
    data: Dict[str, Any],
    measurer: ContentMeasurer,
    anchor_x: Optional[float] = None,
    anchor_y: Optional[float] = None,
    config: Optional[LayoutConfig] = None,
    policy: MeasurementPolicy = MeasurementPolicy.REMEASURE,
) -> Dict[str, Any]:
    """
    Build a tree from a nested record, validate it, lay it out and return
    {root: laid-out record, layout: summary}. Without an anchor the root keeps
    its current centre.
    """
    root = MindMapNode.from_data(data)
    validate_tree(root)
    engine = LayoutEngine(measurer, config)
    if anchor_x is None:
        anchor_x = root.center_x
    if anchor_y is None:
        anchor_y = root.center_y
    engine.layout(root, anchor_x, anchor_y, policy)
    return {"root": root.to_data(), "layout": summarize_layout(root)}


__all__ = [
    "DEFAULT_CONFIG",
    "ContentMeasurer",
    "LayoutConfig",
    "LayoutEngine",
    "MeasurementPolicy",
    "TextMeasurement",
    "compute_mind_map_layout",
    "summarize_layout",
]
