from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class FieldKind(str, Enum):
    NUMBER = "number"
    STRING = "string"
    NESTED = "nested"


FIELD_KINDS: List[str] = [kind.value for kind in FieldKind]


@dataclass
class FieldNode:
    """A single schema field, either a leaf or a container of further fields.

    `parent_key` is a plain copy of the parent's key. It is used for scope
    comparisons and never followed as a reference; navigation goes through
    key lookup instead.
    """

    key: int
    name: str
    kind: FieldKind
    parent_key: Optional[int] = None
    indent_level: int = 0
    children: List["FieldNode"] = field(default_factory=list)

    @property
    def is_nested(self) -> bool:
        return self.kind is FieldKind.NESTED
