import copy
import random

import pytest

from json_schema_builder.exceptions import DuplicateNameError, EmptyNameError, ParentNotFoundError
from json_schema_builder.lookup import collect_keys, find_node, iter_nodes
from json_schema_builder.mutations import edit_field, insert_field, remove_field, remove_subtree
from json_schema_builder.nodes import FieldKind
from json_schema_builder.validation import iter_sibling_groups


def test_insert_root_field(session):
    result = insert_field(session, None, "age", "number")
    assert result.success
    assert result.node.key == 0
    assert result.node.parent_key is None
    assert result.node.indent_level == 0
    assert session.forest == [result.node]


def test_insert_child_sets_parent_and_indent(session):
    user = insert_field(session, None, "user", FieldKind.NESTED).node
    address = insert_field(session, user.key, "address", FieldKind.NESTED).node
    city = insert_field(session, address.key, "city", FieldKind.STRING).node
    assert address.parent_key == user.key
    assert address.indent_level == 30
    assert city.indent_level == 60
    assert user.children == [address]


def test_empty_root_name_is_rejected(session):
    result = insert_field(session, None, "", FieldKind.STRING)
    assert not result.success
    assert isinstance(result.error, EmptyNameError)
    assert session.forest == []


def test_first_child_may_be_unnamed(session):
    user = insert_field(session, None, "user", FieldKind.NESTED).node
    first = insert_field(session, user.key, "", FieldKind.NUMBER)
    assert first.success
    assert first.node.name == ""

    second = insert_field(session, user.key, "", FieldKind.NUMBER)
    assert isinstance(second.error, EmptyNameError)
    assert len(user.children) == 1


def test_local_duplicate_rejected_and_forest_unchanged(user_session):
    before = copy.deepcopy(user_session.forest)
    issued = user_session.allocator.issued
    result = insert_field(user_session, 0, "id", FieldKind.STRING)
    assert isinstance(result.error, DuplicateNameError)
    assert result.error.name == "id"
    assert user_session.forest == before
    assert user_session.allocator.issued == issued


def test_root_duplicate_rejected(user_session):
    result = insert_field(user_session, None, "age", FieldKind.STRING)
    assert isinstance(result.error, DuplicateNameError)


def test_same_name_allowed_in_another_branch(user_session):
    result = insert_field(user_session, 2, "id", FieldKind.NUMBER)
    assert result.success
    assert result.warnings == []


def test_missing_parent_is_reported_without_orphans(user_session):
    keys = collect_keys(user_session.forest)
    result = insert_field(user_session, 99, "ghost", FieldKind.NUMBER)
    assert isinstance(result.error, ParentNotFoundError)
    assert collect_keys(user_session.forest) == keys


def test_leaf_cannot_take_children(user_session):
    result = insert_field(user_session, 4, "x", FieldKind.NUMBER)
    assert isinstance(result.error, ParentNotFoundError)
    assert find_node(user_session.forest, 4).children == []


def test_insert_while_pending_is_a_no_op(session):
    session.insert_pending = True
    result = insert_field(session, None, "age", FieldKind.NUMBER)
    assert result.skipped
    assert not result.success
    assert session.forest == []
    assert session.allocator.issued == 0


def test_pending_flag_is_released_after_failure(session):
    insert_field(session, None, "", FieldKind.NUMBER)
    assert session.insert_pending is False
    assert insert_field(session, None, "age", FieldKind.NUMBER).success


def test_global_duplicate_warns_but_keeps_insert(user_session):
    edit_field(user_session, 4, name="user")
    result = insert_field(user_session, None, "email", FieldKind.STRING)
    assert result.success
    assert find_node(user_session.forest, result.node.key) is result.node
    assert result.warnings == ["Duplicate field name 'user' under (root)."]


def test_keys_are_not_reused_after_removal(session):
    first = insert_field(session, None, "a", FieldKind.NUMBER).node
    remove_field(session, first.key)
    second = insert_field(session, None, "a", FieldKind.NUMBER).node
    assert second.key == first.key + 1


def test_remove_takes_whole_subtree(user_session):
    forest = remove_field(user_session, 0)
    assert collect_keys(forest) == {4}
    assert user_session.forest is forest


def test_remove_nested_descendant(user_session):
    remove_field(user_session, 2)
    assert collect_keys(user_session.forest) == {0, 1, 4}
    assert [c.name for c in find_node(user_session.forest, 0).children] == ["id"]


def test_remove_subtree_does_not_touch_input(user_session):
    original = copy.deepcopy(user_session.forest)
    remove_subtree(user_session.forest, 3)
    assert user_session.forest == original


def test_remove_unknown_key_returns_equal_forest(user_session):
    before = copy.deepcopy(user_session.forest)
    assert remove_field(user_session, 1234) == before


def test_edit_name_and_kind(user_session):
    node = edit_field(user_session, 4, name="years", kind="string")
    assert node.name == "years"
    assert node.kind is FieldKind.STRING


def test_edit_missing_node_is_a_no_op(user_session):
    assert edit_field(user_session, 99, name="x") is None


def test_kind_change_keeps_children(user_session):
    node = edit_field(user_session, 2, kind=FieldKind.STRING)
    assert [c.name for c in node.children] == ["city"]


def test_edit_rejects_unknown_kind(user_session):
    with pytest.raises(ValueError):
        edit_field(user_session, 4, kind="boolean")


@pytest.mark.parametrize("seed", range(20))
def test_random_operations_keep_tree_consistent(session, seed):
    rng = random.Random(seed)
    names = ["a", "b", "c", "d", ""]
    kinds = list(FieldKind)

    for _ in range(80):
        nodes = list(iter_nodes(session.forest))
        if nodes and rng.random() < 0.3:
            target = rng.choice(nodes)
            doomed = collect_keys([target])
            remove_field(session, target.key)
            assert not doomed & collect_keys(session.forest)
            continue

        containers = [n.key for n in nodes if n.kind is FieldKind.NESTED]
        parent_key = rng.choice([None] + containers)
        insert_field(session, parent_key, rng.choice(names), rng.choice(kinds))

        all_keys = [n.key for n in iter_nodes(session.forest)]
        assert len(all_keys) == len(set(all_keys))
        for parent, group in iter_sibling_groups(session.forest):
            for node in group:
                assert node.parent_key == parent
                if parent is not None:
                    assert find_node(session.forest, parent) is not None
            named = [n.name for n in group]
            assert len(named) == len(set(named))
