from __future__ import annotations

from typing import Iterator, List, Optional, Set

from .nodes import FieldNode


def find_node(forest: List[FieldNode], key: int) -> Optional[FieldNode]:
    """Return the node with `key`, or None when it is not in the forest.

    Depth-first pre-order: siblings in storage order, each subtree fully
    explored before the next sibling. Children are searched whatever the
    node's kind, since a kind edit keeps them in place.
    """
    for node in forest:
        if node.key == key:
            return node
        if node.children:
            found = find_node(node.children, key)
            if found is not None:
                return found
    return None


def iter_nodes(forest: List[FieldNode]) -> Iterator[FieldNode]:
    """Yield every node in the same pre-order as find_node."""
    for node in forest:
        yield node
        if node.children:
            yield from iter_nodes(node.children)


def find_path(forest: List[FieldNode], key: int) -> List[FieldNode]:
    """Return the nodes from a root down to `key` (inclusive), or [] if absent."""
    for node in forest:
        if node.key == key:
            return [node]
        if node.children:
            tail = find_path(node.children, key)
            if tail:
                return [node] + tail
    return []


def collect_keys(forest: List[FieldNode]) -> Set[int]:
    return {node.key for node in iter_nodes(forest)}
