"""
Subtree extents and child visibility.

extent(node) = node.height                                   if no visible children
             = max(node.height, sum(extent(c) + spacing) - spacing)  otherwise

Extents depend on sizes and expand flags, which change between calls, so a
calculator instance is only meant to live for one layout pass.
"""

from typing import Dict, Iterable, Iterator, List

from mindmap.node import MindMapNode

from .partition import split_root_children, visible_root_sides


def visible_children(node: MindMapNode) -> List[MindMapNode]:
    """Children that get positioned. Root: per-side flags; others: `expanded`."""
    if node.is_root:
        right, left = visible_root_sides(node)
        return right + left
    return list(node.children) if node.expanded else []


def is_visible(node: MindMapNode) -> bool:
    """Walk up the ancestor chain; each ancestor's relevant flag must allow the path."""
    child, parent = node, node.parent
    while parent is not None:
        if parent.is_root:
            right, _ = split_root_children(parent)
            allowed = parent.expanded_right if any(c is child for c in right) else parent.expanded_left
        else:
            allowed = parent.expanded
        if not allowed:
            return False
        child, parent = parent, parent.parent
    return True


def iter_visible(root: MindMapNode) -> Iterator[MindMapNode]:
    """Pre-order walk over nodes reachable through visible children only."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(visible_children(node)))


class SubtreeExtent:
    def __init__(self, spacing: float):
        self.spacing = spacing
        self._memo: Dict[int, float] = {}

    def __call__(self, node: MindMapNode) -> float:
        cached = self._memo.get(id(node))
        if cached is not None:
            return cached

        # Post-order over the visible subtree; children are memoised before their parent
        stack = [(node, False)]
        while stack:
            current, children_done = stack.pop()
            if id(current) in self._memo:
                continue
            children = visible_children(current)
            if children_done or not children:
                value = max(current.height, self.of_group(children)) if children else current.height
                self._memo[id(current)] = value
                continue
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(children))
        return self._memo[id(node)]

    def of_group(self, siblings: Iterable[MindMapNode]) -> float:
        """Stacked extent of sibling subtrees; 0 for an empty group."""
        total = 0.0
        count = 0
        for sibling in siblings:
            total += self(sibling) + self.spacing
            count += 1
        return total - self.spacing if count else 0.0
