"""
Mind-map node tree.

Nodes own their children; `parent` is a plain back-reference. Layout fields
(x, y, width, height) are written by the layout engine only. A child's growth
side is never stored: it is read off its x relative to the parent.
"""

from typing import Any, Dict, Iterator, List, Optional

from .content import NodeConfig, RichContent

LEFT = "left"
RIGHT = "right"


class MindMapNode:
    def __init__(
        self,
        node_id: str,
        text: str = "",
        rich_content: Optional[RichContent] = None,
        config: Optional[NodeConfig] = None,
        parent: Optional["MindMapNode"] = None,
    ):
        self.id = node_id
        self.text = text
        self.rich_content = rich_content
        self.config = config or NodeConfig()
        self.parent = parent
        self.children: List["MindMapNode"] = []

        self.x: float = 0
        self.y: float = 0
        self.width: float = 0
        self.height: float = 0

        self.expanded = True
        # Root only: the root grows both ways
        self.expanded_left = True
        self.expanded_right = True

    def __repr__(self) -> str:
        return f"MindMapNode(id={self.id!r}, children={len(self.children)})"

    # ------------------------------------------------------------------
    # Nested record conversion
    # ------------------------------------------------------------------

    @classmethod
    def from_data(cls, data: Dict[str, Any], parent: Optional["MindMapNode"] = None) -> "MindMapNode":
        """Build a node (and its subtree) from a nested record. Persisted position/size/expand flags are restored."""
        root = cls._from_record(data, parent)
        stack = [(root, data)]
        while stack:
            node, record = stack.pop()
            for child_data in record.get("children") or []:
                child = cls._from_record(child_data, node)
                node.children.append(child)
                stack.append((child, child_data))
        return root

    @classmethod
    def _from_record(cls, data: Dict[str, Any], parent: Optional["MindMapNode"]) -> "MindMapNode":
        """One node from its record, children not included."""
        if not isinstance(data, dict):
            raise ValueError("node record must be an object")
        node_id = data.get("id")
        if not node_id or not isinstance(node_id, str):
            raise ValueError("node record must have a non-empty string id")

        rich = data.get("richContent")
        node = cls(
            node_id,
            text=data.get("text") or "",
            rich_content=RichContent.model_validate(rich) if rich else None,
            config=NodeConfig.model_validate(data.get("config") or {}),
            parent=parent,
        )
        for key in ("x", "y", "width", "height"):
            if data.get(key) is not None:
                setattr(node, key, float(data[key]))
        if data.get("expanded") is not None:
            node.expanded = bool(data["expanded"])
        if data.get("expandedLeft") is not None:
            node.expanded_left = bool(data["expandedLeft"])
        if data.get("expandedRight") is not None:
            node.expanded_right = bool(data["expandedRight"])
        return node

    def to_data(self) -> Dict[str, Any]:
        data = self._record()
        stack = [(self, data)]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                child_out = child._record()
                out["children"].append(child_out)
                stack.append((child, child_out))
        return data

    def _record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "richContent": self.rich_content.model_dump(by_alias=True, exclude_none=True) if self.rich_content else None,
            "config": self.config.model_dump(by_alias=True, exclude_none=True),
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "expanded": self.expanded,
            "expandedLeft": self.expanded_left,
            "expandedRight": self.expanded_right,
            "children": [],
        }

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def measure_text(self) -> str:
        """Text the measurer sees: rich text's plain form wins over the raw text."""
        if self.rich_content and self.rich_content.text:
            return self.rich_content.text
        return self.text

    def add_child(self, data: Dict[str, Any]) -> "MindMapNode":
        child = MindMapNode.from_data(data, parent=self)
        self.children.append(child)
        return child

    def remove_child(self, node_id: str) -> bool:
        for i, child in enumerate(self.children):
            if child.id == node_id:
                del self.children[i]
                child.parent = None
                return True
        return False

    def find_node(self, node_id: str) -> Optional["MindMapNode"]:
        for node in self.iter_nodes():
            if node.id == node_id:
                return node
        return None

    def iter_nodes(self) -> Iterator["MindMapNode"]:
        """Pre-order walk over this node and all descendants (collapsed ones included)."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def all_children_count(self) -> int:
        return sum(1 for _ in self.iter_nodes()) - 1

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def get_bounds(self) -> Dict[str, float]:
        return {
            "left": self.x,
            "top": self.y,
            "right": self.x + self.width,
            "bottom": self.y + self.height,
            "width": self.width,
            "height": self.height,
        }

    def side_of(self, child: "MindMapNode") -> str:
        return LEFT if child.x < self.x else RIGHT

    def children_direction(self) -> Optional[str]:
        """
        Side the children grow towards, judged by the first child.
        Before any layout pass (child still at 0,0) fall back to this node's own
        side relative to its parent, then to right.
        """
        if not self.children:
            return None
        first = self.children[0]
        if first.x == 0 and first.y == 0:
            if self.parent is not None and self.parent.x != 0:
                return LEFT if self.x < self.parent.x else RIGHT
            return RIGHT
        return self.side_of(first)

    def has_children_on_both_sides(self) -> bool:
        if not self.children or self.parent is not None:
            return False
        has_left = has_right = False
        for child in self.children:
            if child.x < self.x:
                has_left = True
            elif child.x > self.x:
                has_right = True
            if has_left and has_right:
                return True
        return False

    def children_count_on_side(self, side: str) -> int:
        """Number of nodes (whole subtrees) hanging off this node on one side."""
        return sum(
            1 + child.all_children_count()
            for child in self.children
            if self.side_of(child) == side
        )

    def reset(self) -> None:
        self.x = self.y = 0
        self.width = self.height = 0
