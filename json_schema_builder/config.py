from __future__ import annotations

import os

from .nodes import FIELD_KINDS

# Log level for the json_schema_builder logger
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Horizontal offset added per tree depth (display only)
INDENT_STEP: int = int(os.getenv("SCHEMA_BUILDER_INDENT_STEP", "30"))

# The rendered document is always indented by two spaces
JSON_INDENT: int = 2

# Kind preselected in the "add field" dropdowns
DEFAULT_KIND: str = os.getenv("SCHEMA_BUILDER_DEFAULT_KIND", "number")
if DEFAULT_KIND not in FIELD_KINDS:
    raise ValueError(
        f"SCHEMA_BUILDER_DEFAULT_KIND must be one of {', '.join(FIELD_KINDS)}, got {DEFAULT_KIND!r}."
    )
