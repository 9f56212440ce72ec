from __future__ import annotations

from typing import Iterator, List, Optional, Set, Tuple

from .nodes import FieldNode


def has_local_duplicate(siblings: List[FieldNode], candidate_name: str, parent_key: Optional[int]) -> bool:
    """True if `siblings` already holds `candidate_name` under the candidate's parent.

    Only nodes whose parent_key matches the candidate's parent count, so a
    stray node from another branch never blocks the name.
    """
    return any(node.name == candidate_name and node.parent_key == parent_key for node in siblings)


def iter_sibling_groups(
    forest: List[FieldNode],
    parent_key: Optional[int] = None,
) -> Iterator[Tuple[Optional[int], List[FieldNode]]]:
    """Yield (parent_key, children) for the roots and then for every node with children."""
    yield parent_key, forest
    for node in forest:
        if node.children:
            yield from iter_sibling_groups(node.children, node.key)


def find_duplicate_names(forest: List[FieldNode]) -> List[Tuple[Optional[int], str]]:
    """List every (parent_key, name) that appears more than once in one sibling group."""
    duplicates: List[Tuple[Optional[int], str]] = []
    for parent_key, group in iter_sibling_groups(forest):
        seen: Set[str] = set()
        reported: Set[str] = set()
        for node in group:
            if node.name in seen and node.name not in reported:
                duplicates.append((parent_key, node.name))
                reported.add(node.name)
            seen.add(node.name)
    return duplicates


def has_global_duplicate(forest: List[FieldNode]) -> bool:
    """True if any single sibling group holds two nodes with the same name.

    Equal names in different branches are fine.
    """
    for _, group in iter_sibling_groups(forest):
        seen: Set[str] = set()
        for node in group:
            if node.name in seen:
                return True
            seen.add(node.name)
    return False
