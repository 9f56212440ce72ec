from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from .config import JSON_INDENT
from .mutations import insert_field
from .nodes import FieldKind, FieldNode
from .results import InsertResult
from .session import SchemaSession

logger = logging.getLogger(__name__)


def node_to_document(node: FieldNode) -> Dict[str, Any]:
    """Convert one node into a single-key dict.

    Leaves map to their kind label, containers to the merge of their
    children. A later child overwrites an earlier one with the same name.
    """
    if node.is_nested:
        body: Dict[str, Any] = {}
        for child in node.children:
            body.update(node_to_document(child))
        return {node.name: body}
    return {node.name: node.kind.value}


def to_document(forest: List[FieldNode]) -> Dict[str, Any]:
    document: Dict[str, Any] = {}
    for node in forest:
        document.update(node_to_document(node))
    return document


def to_json(forest: List[FieldNode]) -> str:
    return json.dumps(to_document(forest), indent=JSON_INDENT, ensure_ascii=False)


def load_document(
    session: SchemaSession,
    document: Dict[str, Any],
    parent_key: Optional[int] = None,
) -> List[InsertResult]:
    """Rebuild fields from a document shaped like the output of to_document.

    Leaf values must be one of the leaf kind labels; dict values become
    nested fields. Every node goes through insert_field, so the usual name
    checks apply and their results are returned in document order.
    """
    if not isinstance(document, dict):
        raise ValueError("Schema document must be a JSON object.")

    results: List[InsertResult] = []
    for name, value in document.items():
        if isinstance(value, dict):
            result = insert_field(session, parent_key, name, FieldKind.NESTED)
            results.append(result)
            if result.success:
                results.extend(load_document(session, value, result.node.key))
        elif value in (FieldKind.NUMBER.value, FieldKind.STRING.value):
            results.append(insert_field(session, parent_key, name, value))
        else:
            raise ValueError(f"Unsupported value for field '{name}': {value!r}")

    if parent_key is None:
        failed = sum(1 for r in results if not r.success)
        logger.info("Loaded %d fields from document (%d rejected).", len(results) - failed, failed)
    return results
