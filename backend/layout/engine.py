"""
Mind-map layout engine.

Two passes over the tree per call:
1. Measure every node bottom-up (skipped under MeasurementPolicy.REUSE_EXISTING)
2. Top-down placement: the root is centred on the anchor, its children split
   right/left by index, and every lower level keeps its parent's growth direction.

The engine only writes x/y/width/height. Children of collapsed nodes are left
where they were.
"""

from enum import Enum
from typing import Optional

from loguru import logger

from mindmap.node import LEFT, RIGHT, MindMapNode

from .config import DEFAULT_CONFIG, LayoutConfig
from .distributor import Distributor
from .extent import SubtreeExtent, visible_children
from .measurer import ContentMeasurer
from .partition import visible_root_sides
from .sizing import measure_node


class MeasurementPolicy(str, Enum):
    # Every node is measured again before placement
    REMEASURE = "remeasure"
    # Sizes were already written by someone else (e.g. DOM-measured rich text)
    REUSE_EXISTING = "reuse_existing"


class LayoutEngine:
    def __init__(self, measurer: ContentMeasurer, config: Optional[LayoutConfig] = None):
        self.measurer = measurer
        self.config = config or DEFAULT_CONFIG

    def layout(
        self,
        root: MindMapNode,
        anchor_x: float,
        anchor_y: float,
        policy: MeasurementPolicy = MeasurementPolicy.REMEASURE,
    ) -> None:
        """Position root centred at (anchor_x, anchor_y) and every visible descendant around it."""
        if policy == MeasurementPolicy.REMEASURE:
            self.recalculate_sizes(root)

        root.x = anchor_x - root.width / 2
        root.y = anchor_y - root.height / 2

        extent = SubtreeExtent(self.config.node_spacing)
        distributor = Distributor(extent, self.config.node_spacing, self.config.horizontal_gap)

        placed = 1
        right, left = visible_root_sides(root)
        if right:
            distributor.distribute(right, root.x + root.width + self.config.horizontal_gap, root.center_y, RIGHT)
            for child in right:
                placed += self._place_descendants(child, RIGHT, distributor)
        if left:
            distributor.distribute(left, root.x, root.center_y, LEFT)
            for child in left:
                placed += self._place_descendants(child, LEFT, distributor)

        logger.debug(
            "Laid out {} visible nodes around ({}, {}), root extent {:.1f}, policy={}",
            placed, anchor_x, anchor_y, extent(root), policy.value,
        )

    def layout_positions_only(self, root: MindMapNode, anchor_x: float, anchor_y: float) -> None:
        """Recompute positions from the sizes already on the nodes."""
        self.layout(root, anchor_x, anchor_y, MeasurementPolicy.REUSE_EXISTING)

    def relayout(self, root: MindMapNode, policy: MeasurementPolicy = MeasurementPolicy.REMEASURE) -> None:
        """Lay out again around the root's current centre, so the root stays put on screen."""
        self.layout(root, root.center_x, root.center_y, policy)

    def recalculate_sizes(self, node: MindMapNode) -> None:
        """Remeasure node and all descendants (collapsed ones too) without moving anything."""
        # Reversed pre-order visits every child before its parent
        for current in reversed(list(node.iter_nodes())):
            measure_node(current, self.measurer, self.config)

    def get_subtree_height(self, node: MindMapNode) -> float:
        """Vertical space node plus its visible descendants need, from current sizes."""
        return SubtreeExtent(self.config.node_spacing)(node)

    def _place_descendants(self, node: MindMapNode, direction: str, distributor: Distributor) -> int:
        """Place the visible subtree under node (node itself is already placed). Returns nodes placed, node included."""
        placed = 0
        stack = [node]
        while stack:
            parent = stack.pop()
            placed += 1
            children = visible_children(parent)
            if not children:
                continue
            if direction == RIGHT:
                anchor_x = parent.x + parent.width + self.config.horizontal_gap
            else:
                anchor_x = parent.x
            distributor.distribute(children, anchor_x, parent.center_y, direction)
            stack.extend(children)
        return placed
