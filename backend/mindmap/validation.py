"""
Structural validation for node trees.
Layout assumes a well-formed tree; callers run this first and refuse to lay out on failure.
"""

from typing import Set

import networkx as nx

from .node import MindMapNode


class InvalidTreeError(ValueError):
    """Tree is not a rooted tree with unique ids and consistent parent links."""


def build_tree_graph(root: MindMapNode) -> nx.DiGraph:
    """Parent -> child graph keyed by node id. Stops descending at nodes already visited."""
    G = nx.DiGraph()
    G.add_node(root.id)
    seen: Set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        for child in node.children:
            G.add_edge(node.id, child.id)
            stack.append(child)
    return G


def validate_tree(root: MindMapNode) -> None:
    """Raise InvalidTreeError on duplicate ids, broken parent links, or cycles."""
    if root is None:
        raise InvalidTreeError("Tree has no root")
    if root.parent is not None:
        raise InvalidTreeError(f"Root {root.id!r} has a parent")

    ids: Set[str] = set()
    visited: Set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in visited:
            raise InvalidTreeError(f"Node {node.id!r} is reachable twice (cycle or shared child)")
        visited.add(id(node))
        if node.id in ids:
            raise InvalidTreeError(f"Duplicate node id: {node.id!r}")
        ids.add(node.id)
        for child in node.children:
            if child.parent is not node:
                raise InvalidTreeError(f"Node {child.id!r} does not point back to parent {node.id!r}")
            stack.append(child)

    G = build_tree_graph(root)
    if not nx.is_arborescence(G):
        raise InvalidTreeError("Node graph is not a tree")
