"""
Node manager - owns one tree's root plus an id index.
Structural edits (add/remove/update) go through here; layout never does them.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from .node import MindMapNode


class NodeManager:
    def __init__(self):
        self.root: Optional[MindMapNode] = None
        self._node_map: Dict[str, MindMapNode] = {}

    def set_root(self, data: Dict[str, Any]) -> MindMapNode:
        self.root = MindMapNode.from_data(data)
        self.refresh_node_map()
        return self.root

    def get_all_nodes(self) -> List[MindMapNode]:
        if self.root is None:
            return []
        return list(self.root.iter_nodes())

    def find_node(self, node_id: str) -> Optional[MindMapNode]:
        return self._node_map.get(node_id)

    def add_node(self, parent_id: str, data: Dict[str, Any]) -> Optional[MindMapNode]:
        parent = self.find_node(parent_id)
        if parent is None:
            logger.warning("Parent node not found: {}", parent_id)
            return None
        node = parent.add_child(data)
        self.refresh_node_map()
        return node

    def remove_node(self, node_id: str) -> bool:
        if self.root is not None and self.root.id == node_id:
            logger.warning("Cannot remove root node")
            return False
        node = self.find_node(node_id)
        if node is None or node.parent is None:
            return False
        removed = node.parent.remove_child(node_id)
        if removed:
            self.refresh_node_map()
        return removed

    def update_node(self, node_id: str, text: str) -> bool:
        node = self.find_node(node_id)
        if node is None:
            return False
        node.text = text
        return True

    def clear(self) -> None:
        self.root = None
        self._node_map.clear()

    def refresh_node_map(self) -> None:
        self._node_map = {n.id: n for n in self.get_all_nodes()}
