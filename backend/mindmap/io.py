"""Nested-record exchange for node trees. Uses orjson for faster JSON parsing."""

from typing import Union

import orjson

from .node import MindMapNode


def load_tree(raw: Union[bytes, str, dict]) -> MindMapNode:
    """Parse a nested record (JSON bytes/str or an already-decoded dict) into a node tree."""
    data = raw
    if isinstance(raw, (bytes, str)):
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError:
            raise ValueError("Invalid mind map format")
    return MindMapNode.from_data(data)


def dump_tree(root: MindMapNode, indent: bool = False) -> bytes:
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(root.to_data(), option=option)
