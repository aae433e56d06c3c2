"""
Root child partitioning.

The root grows both ways: the first ceil(n/2) children go right, the rest go
left. The split is by index only, so reordering children can move one across.
"""

from typing import List, Tuple

from mindmap.node import MindMapNode


def split_root_children(root: MindMapNode) -> Tuple[List[MindMapNode], List[MindMapNode]]:
    """Return (right, left) child groups, each in original order."""
    mid = (len(root.children) + 1) // 2
    return root.children[:mid], root.children[mid:]


def visible_root_sides(root: MindMapNode) -> Tuple[List[MindMapNode], List[MindMapNode]]:
    """(right, left) groups with a collapsed side emptied."""
    right, left = split_root_children(root)
    return (right if root.expanded_right else []), (left if root.expanded_left else [])
