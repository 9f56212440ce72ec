from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
from uuid import uuid4

from .config import INDENT_STEP
from .nodes import FieldNode


@dataclass
class KeyAllocator:
    """Issues strictly increasing node keys, starting at 0.

    Keys of removed nodes are never handed out again.
    """

    issued: int = 0

    def next_key(self) -> int:
        key = self.issued
        self.issued += 1
        return key


@dataclass
class SchemaSession:
    """State of one editing session: the forest plus its bookkeeping."""

    forest: List[FieldNode] = field(default_factory=list)
    allocator: KeyAllocator = field(default_factory=KeyAllocator)
    indent_step: int = INDENT_STEP
    # Busy flag for insert_field; set only while an insert is running.
    insert_pending: bool = False
    # Distinguishes widgets of this session from those of a replaced one.
    session_id: str = field(default_factory=lambda: uuid4().hex)
