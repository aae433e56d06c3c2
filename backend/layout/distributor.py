"""
Sibling distribution.

Siblings are stacked top to bottom, each in a band as tall as its subtree
extent, the whole stack centred on centre_y. Each sibling's own box sits in the
vertical middle of its band, so bands of different siblings never overlap.
"""

from typing import List

from mindmap.node import LEFT, RIGHT, MindMapNode

from .extent import SubtreeExtent


class Distributor:
    def __init__(self, extent: SubtreeExtent, spacing: float, horizontal_gap: float):
        self.extent = extent
        self.spacing = spacing
        self.horizontal_gap = horizontal_gap

    def distribute(self, siblings: List[MindMapNode], anchor_x: float, centre_y: float, direction: str) -> None:
        """
        Position siblings growing away from anchor_x.
        RIGHT: anchor_x is the left edge of the column (parent's right edge + gap).
        LEFT: anchor_x is the parent's left edge; each sibling ends one gap before it.
        """
        if not siblings:
            return
        if direction not in (LEFT, RIGHT):
            raise ValueError(f"Unknown growth direction: {direction}")

        cursor = centre_y - self.extent.of_group(siblings) / 2
        for sibling in siblings:
            band = self.extent(sibling)
            sibling.y = cursor + (band - sibling.height) / 2
            if direction == RIGHT:
                sibling.x = anchor_x
            else:
                sibling.x = anchor_x - sibling.width - self.horizontal_gap
            cursor += band + self.spacing
