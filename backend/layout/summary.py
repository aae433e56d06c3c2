"""
Flat layout result for renderers.

Returns {nodes: {id: {x,y,w,h}}, edges: [{from,to,points}], width, height, bounds}
for visible nodes only. Coordinates stay in tree space (the root keeps its
anchor); nothing is shifted to the origin.
"""

from typing import Any, Dict, List

from mindmap.node import LEFT, RIGHT, MindMapNode

from .extent import iter_visible, visible_children
from .partition import split_root_children


def _child_sides(parent: MindMapNode) -> Dict[int, str]:
    """Side of each visible child: root by index split, others by position."""
    sides: Dict[int, str] = {}
    if parent.is_root:
        _, left = split_root_children(parent)
        left_ids = {id(c) for c in left}
        for child in visible_children(parent):
            sides[id(child)] = LEFT if id(child) in left_ids else RIGHT
    else:
        for child in visible_children(parent):
            sides[id(child)] = parent.side_of(child)
    return sides


def _edge_points(parent: MindMapNode, child: MindMapNode, side: str) -> List[List[float]]:
    """Parent's facing edge midpoint -> child's facing edge midpoint."""
    if side == LEFT:
        start = [parent.x, parent.center_y]
        end = [child.x + child.width, child.center_y]
    else:
        start = [parent.x + parent.width, parent.center_y]
        end = [child.x, child.center_y]
    return [[round(start[0], 1), round(start[1], 1)], [round(end[0], 1), round(end[1], 1)]]


def summarize_layout(root: MindMapNode) -> Dict[str, Any]:
    nodes_out: Dict[str, Dict[str, float]] = {}
    edges_out: List[Dict[str, Any]] = []

    visible = list(iter_visible(root))
    for node in visible:
        nodes_out[node.id] = {
            "x": round(node.x, 1),
            "y": round(node.y, 1),
            "w": round(node.width, 1),
            "h": round(node.height, 1),
        }
        sides = _child_sides(node)
        for child in visible_children(node):
            edges_out.append({
                "from": node.id,
                "to": child.id,
                "points": _edge_points(node, child, sides[id(child)]),
            })

    min_x = min(n.x for n in visible)
    min_y = min(n.y for n in visible)
    max_x = max(n.x + n.width for n in visible)
    max_y = max(n.y + n.height for n in visible)

    return {
        "nodes": nodes_out,
        "edges": edges_out,
        "width": round(max_x - min_x, 1),
        "height": round(max_y - min_y, 1),
        "bounds": {
            "left": round(min_x, 1),
            "top": round(min_y, 1),
            "right": round(max_x, 1),
            "bottom": round(max_y, 1),
        },
    }
