from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import SchemaBuilderError
from .nodes import FieldNode


@dataclass
class InsertResult:
    success: bool
    node: Optional[FieldNode] = None
    error: Optional[SchemaBuilderError] = None
    # Set when the call was dropped because another insert was in flight.
    skipped: bool = False
    # Advisory messages raised after the insert was committed.
    warnings: List[str] = field(default_factory=list)
