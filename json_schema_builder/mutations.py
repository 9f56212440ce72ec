from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Union

from .exceptions import DuplicateNameError, EmptyNameError, ParentNotFoundError
from .lookup import find_node
from .nodes import FieldKind, FieldNode
from .paths import node_label
from .results import InsertResult
from .session import SchemaSession
from .validation import find_duplicate_names, has_global_duplicate, has_local_duplicate

logger = logging.getLogger(__name__)


def describe_duplicates(forest: List[FieldNode]) -> List[str]:
    """Human-readable warnings for every sibling group holding a repeated name."""
    messages: List[str] = []
    for parent_key, name in find_duplicate_names(forest):
        messages.append(f"Duplicate field name '{name}' under {node_label(forest, parent_key)}.")
    return messages


def insert_field(
    session: SchemaSession,
    parent_key: Optional[int],
    name: str,
    kind: Union[FieldKind, str],
) -> InsertResult:
    """Create a field under `parent_key` (or at the top level when None).

    Failures come back inside the result and leave the forest untouched.
    A duplicate found elsewhere after the insert is reported as a warning;
    the new node stays in place.
    """
    if session.insert_pending:
        logger.debug("Insert under %s dropped: another insert is in flight.", parent_key)
        return InsertResult(success=False, skipped=True)

    kind = FieldKind(kind)
    name = name or ""
    session.insert_pending = True
    try:
        if parent_key is None:
            if not name:
                return InsertResult(success=False, error=EmptyNameError())
            if has_local_duplicate(session.forest, name, None):
                return InsertResult(success=False, error=DuplicateNameError(name))
            node = FieldNode(
                key=session.allocator.next_key(),
                name=name,
                kind=kind,
                parent_key=None,
                indent_level=0,
            )
            session.forest.append(node)
        else:
            parent = find_node(session.forest, parent_key)
            # A leaf cannot take children, so it does not count as a parent.
            if parent is None or not parent.is_nested:
                logger.info("Insert skipped: no container field %s.", parent_key)
                return InsertResult(success=False, error=ParentNotFoundError(parent_key))
            # Only the first child of a container may start out unnamed.
            if not name and parent.children:
                return InsertResult(success=False, error=EmptyNameError(parent_key))
            if has_local_duplicate(parent.children, name, parent.key):
                return InsertResult(success=False, error=DuplicateNameError(name, parent_key))
            node = FieldNode(
                key=session.allocator.next_key(),
                name=name,
                kind=kind,
                parent_key=parent.key,
                indent_level=parent.indent_level + session.indent_step,
            )
            parent.children.append(node)

        logger.debug("Inserted field %s (%r, %s) under %s.", node.key, node.name, node.kind.value, parent_key)

        result = InsertResult(success=True, node=node)
        if has_global_duplicate(session.forest):
            result.warnings = describe_duplicates(session.forest)
            for message in result.warnings:
                logger.warning(message)
        return result
    finally:
        session.insert_pending = False


def remove_subtree(forest: List[FieldNode], key: int) -> List[FieldNode]:
    """Return a copy of `forest` without the node `key` and all of its descendants.

    An unknown key yields an equal forest.
    """
    kept: List[FieldNode] = []
    for node in forest:
        if node.key == key:
            continue
        if node.children:
            node = replace(node, children=remove_subtree(node.children, key))
        kept.append(node)
    return kept


def remove_field(session: SchemaSession, key: int) -> List[FieldNode]:
    session.forest = remove_subtree(session.forest, key)
    logger.debug("Removed field %s and its subtree.", key)
    return session.forest


def edit_field(
    session: SchemaSession,
    key: int,
    name: Optional[str] = None,
    kind: Optional[Union[FieldKind, str]] = None,
) -> Optional[FieldNode]:
    """Update a field's name and/or kind in place.

    Returns None when the key is gone. Switching away from nested keeps the
    existing children.
    """
    node = find_node(session.forest, key)
    if node is None:
        return None
    if name is not None:
        node.name = name
    if kind is not None:
        node.kind = FieldKind(kind)
    return node
