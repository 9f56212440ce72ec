from __future__ import annotations

from typing import Optional


class SchemaBuilderError(Exception):
    pass


class EmptyNameError(SchemaBuilderError):
    def __init__(self, parent_key: Optional[int] = None):
        self.parent_key = parent_key
        super().__init__("Field name is missing.")


class DuplicateNameError(SchemaBuilderError):
    def __init__(self, name: str, parent_key: Optional[int] = None):
        self.name = name
        self.parent_key = parent_key
        super().__init__(f"A field named '{name}' already exists at this level.")


class ParentNotFoundError(SchemaBuilderError):
    def __init__(self, parent_key: int):
        self.parent_key = parent_key
        super().__init__(f"Parent field {parent_key} no longer exists or cannot hold fields.")
