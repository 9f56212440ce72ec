from __future__ import annotations

import json
from typing import Any, Dict


def read_schema_document(file_obj) -> Dict[str, Any]:
    """Load an uploaded schema document; the top level must be a JSON object."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        raw = file_obj.read()
        document = json.loads(raw.decode('utf-8') if isinstance(raw, bytes) else raw)
    else:
        # Gradio hands over a temp-file path (or a wrapper carrying .name).
        with open(getattr(file_obj, 'name', file_obj), 'r', encoding='utf-8') as f:
            document = json.load(f)

    if not isinstance(document, dict):
        raise ValueError("Top level of a schema document must be a JSON object.")
    return document
