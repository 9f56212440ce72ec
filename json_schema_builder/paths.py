from __future__ import annotations

from typing import List, Optional

from .lookup import find_path
from .nodes import FieldNode

UNNAMED = "(unnamed)"


def escape_path_segment(segment: str) -> str:
    """Backslash-escape dots (and backslashes) so a dotted field name stays one label segment."""
    return segment.replace('\\', '\\\\').replace('.', '\\.')


def join_path(names: List[str]) -> str:
    return '.'.join(escape_path_segment(name) if name else UNNAMED for name in names)


def node_label(forest: List[FieldNode], key: Optional[int]) -> str:
    """Dot-path label of a node, e.g. 'user.address.city'.

    `None` stands for the top level. Unknown keys fall back to the bare key.
    """
    if key is None:
        return "(root)"
    chain = find_path(forest, key)
    if not chain:
        return f"#{key}"
    return join_path([node.name for node in chain])
