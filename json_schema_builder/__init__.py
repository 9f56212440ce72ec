"""Core logic for JSON Schema Builder.

The Gradio UI lives in `app.py`. This package contains the schema tree and
the pure-ish functions that:
- look up fields by key
- check field names for duplicates per sibling group
- insert, edit and remove fields
- serialize the tree into a nested JSON document
"""
