import pytest

from json_schema_builder import handlers
from json_schema_builder.mutations import insert_field
from json_schema_builder.nodes import FieldKind
from json_schema_builder.session import SchemaSession


@pytest.fixture
def session():
    return SchemaSession(indent_step=30)


@pytest.fixture
def user_session(session):
    """A small tree: user{id, address{city}} plus a top-level 'age'."""
    user = insert_field(session, None, "user", FieldKind.NESTED).node
    insert_field(session, user.key, "id", FieldKind.NUMBER)
    address = insert_field(session, user.key, "address", FieldKind.NESTED).node
    insert_field(session, address.key, "city", FieldKind.STRING)
    insert_field(session, None, "age", FieldKind.NUMBER)
    return session


@pytest.fixture(autouse=True)
def captured_notifications(monkeypatch):
    """Collect toast notifications instead of sending them to Gradio."""
    sent = []
    monkeypatch.setattr(handlers, "notify", lambda notes: sent.extend(notes))
    return sent
