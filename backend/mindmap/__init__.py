"""Mind-map node tree: data model, id index, validation, nested-record exchange."""

from .content import CodeBlockData, ImageData, NodeAttachment, NodeConfig, RichContent, TableCell, TableData
from .io import dump_tree, load_tree
from .manager import NodeManager
from .node import LEFT, RIGHT, MindMapNode
from .validation import InvalidTreeError, validate_tree

__all__ = [
    "LEFT",
    "RIGHT",
    "CodeBlockData",
    "ImageData",
    "InvalidTreeError",
    "MindMapNode",
    "NodeAttachment",
    "NodeConfig",
    "NodeManager",
    "RichContent",
    "TableCell",
    "TableData",
    "dump_tree",
    "load_tree",
    "validate_tree",
]
