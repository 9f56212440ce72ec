from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional

import gradio as gr

from .config import DEFAULT_KIND
from .exceptions import DuplicateNameError, EmptyNameError, ParentNotFoundError
from .io_utils import read_schema_document
from .lookup import find_node, iter_nodes
from .mutations import describe_duplicates, edit_field, insert_field, remove_field
from .paths import node_label
from .results import InsertResult
from .serializer import load_document, to_json
from .session import SchemaSession

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    severity: str
    message: str


def notify(notifications: List[Notification]):
    for note in notifications:
        gr.Warning(note.message)


def widget_key(session: SchemaSession, role: str, key: int) -> str:
    # Node keys restart at 0 in a new session; the session id keeps widget keys apart.
    return f"{role}-{session.session_id}-{key}"


def working_copy(session: Optional[SchemaSession]) -> SchemaSession:
    # Gradio only fires State.change for a new value, so every event edits a copy.
    if session is None:
        return SchemaSession()
    return deepcopy(session)


def insert_notifications(result: InsertResult) -> List[Notification]:
    notes: List[Notification] = []
    if isinstance(result.error, EmptyNameError):
        notes.append(Notification("error", "Text missing: enter a field name first."))
    elif isinstance(result.error, (DuplicateNameError, ParentNotFoundError)):
        notes.append(Notification("error", str(result.error)))
    for message in result.warnings:
        notes.append(Notification("error", message))
    return notes


def status_text(notes: List[Notification], fallback: str) -> str:
    if notes:
        return " ".join(note.message for note in notes)
    return fallback


def handle_insert(session, parent_key, name, kind):
    session = working_copy(session)
    result = insert_field(session, parent_key, (name or "").strip(), kind or DEFAULT_KIND)
    notes = insert_notifications(result)
    notify(notes)

    if result.skipped:
        fallback = "Another insert is still running."
    elif result.success:
        fallback = f"Added '{node_label(session.forest, result.node.key)}'."
    else:
        fallback = "Field not added."
    return session, result, status_text(notes, fallback)


def handle_add_root(session, name, kind):
    session, result, status = handle_insert(session, None, name, kind)
    name_box = gr.update(value="") if result.success else gr.update()
    return session, to_json(session.forest), status, name_box


def handle_add_child(parent_key, session, name="", kind=DEFAULT_KIND):
    session, _, status = handle_insert(session, parent_key, name, kind)
    return session, to_json(session.forest), status


def handle_remove(key, session):
    session = working_copy(session)
    label = node_label(session.forest, key)
    before = len(list(iter_nodes(session.forest)))
    remove_field(session, key)
    removed = before - len(list(iter_nodes(session.forest)))
    if removed:
        status = f"Removed '{label}' ({removed} field{'s' if removed != 1 else ''})."
    else:
        status = "Nothing to remove."
    return session, to_json(session.forest), status


def handle_name_edit(key, session, new_name):
    new_name = (new_name or "").strip()
    current = find_node(session.forest, key) if session is not None else None
    if current is not None and current.name == new_name:
        # Blur without an edit; leave state and status alone.
        return session, to_json(session.forest), gr.update()

    session = working_copy(session)
    node = edit_field(session, key, name=new_name)
    if node is None:
        return session, to_json(session.forest), "Field no longer exists."

    notes: List[Notification] = []
    if not node.name:
        notes.append(Notification("error", "Text missing: enter a field name first."))
    notes.extend(Notification("error", message) for message in describe_duplicates(session.forest))
    notify(notes)
    return session, to_json(session.forest), status_text(notes, f"Renamed to '{node_label(session.forest, key)}'.")


def handle_kind_edit(key, session, new_kind):
    session = working_copy(session)
    try:
        node = edit_field(session, key, kind=new_kind)
    except ValueError:
        note = Notification("error", f"Unknown field kind: {new_kind!r}.")
        notify([note])
        return session, to_json(session.forest), note.message
    if node is None:
        return session, to_json(session.forest), "Field no longer exists."
    return session, to_json(session.forest), f"'{node_label(session.forest, key)}' is now {node.kind.value}."


def handle_upload(file_obj):
    session = SchemaSession()
    try:
        document = read_schema_document(file_obj)
        results = load_document(session, document)
    except Exception as e:
        logger.warning("Schema upload failed: %s", e)
        return SchemaSession(), to_json([]), f"Error loading schema: {str(e)}"

    notes: List[Notification] = []
    for result in results:
        notes.extend(insert_notifications(result))
    notify(notes)
    count = sum(1 for r in results if r.success)
    return session, to_json(session.forest), status_text(notes, f"Loaded {count} fields.")


def handle_reset():
    return SchemaSession(), to_json([]), "Started a new schema."
