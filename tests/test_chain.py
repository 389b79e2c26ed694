"""Unit tests for ClauseChain append operations."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from chainql.compile.chain import ClauseChain, ClauseNode
from chainql.compile.factory import insert, select, update
from chainql.schema.model import StatementKind


def test_insert_values(users):
    chain = insert(users).values(["1", "John"])
    assert chain.compile() == "INSERT INTO users VALUES (1, John)"


def test_insert_with_fields_and_values(users_with_fields):
    chain = insert(users_with_fields).values(["1", "'John'"])
    assert chain.compile() == "INSERT INTO users (id, name) VALUES (1, 'John')"


def test_values_renders_non_strings_with_str(users):
    assert insert(users).values([1, 2.5, None]).compile() == (
        "INSERT INTO users VALUES (1, 2.5, None)"
    )


def test_select_where_clause(users):
    chain = select(users).where_clause("id = 1")
    assert chain.compile() == "SELECT * FROM users WHERE id = 1"


def test_update_set(users_with_fields):
    chain = update(users_with_fields).set({"name": "John"})
    assert chain.compile() == "UPDATE users SET name = John"


def test_update_set_then_where(users_with_fields):
    chain = update(users_with_fields).set({"id": "2"}).where_clause("id = 1")
    assert chain.compile() == "UPDATE users SET id = 2 WHERE id = 1"


def test_set_preserves_mapping_order(users_with_fields):
    args = OrderedDict([("name", "'Ann'"), ("id", "7"), ("email", "NULL")])
    assert update(users_with_fields).set(args).compile() == (
        "UPDATE users SET name = 'Ann', id = 7, email = NULL"
    )


def test_set_accepts_pairs(users_with_fields):
    chain = update(users_with_fields).set([("b", "2"), ("a", "1")])
    assert chain.compile() == "UPDATE users SET b = 2, a = 1"


def test_degenerate_clauses_are_not_validated(users_with_fields):
    chain = update(users_with_fields).set({}).values([]).where_clause("")
    assert chain.fragments() == ["UPDATE users", "SET ", "VALUES ()", "WHERE "]


def test_appends_return_same_chain(users):
    chain = select(users)
    assert chain.where_clause("id = 1") is chain


def test_append_order_is_call_order(users_with_fields):
    chain = update(users_with_fields).where_clause("id = 1").set({"id": "2"})
    assert chain.compile() == "UPDATE users WHERE id = 1 SET id = 2"


def test_every_node_carries_chain_kind(users):
    chain = insert(users).values(["1"]).where_clause("1 = 1")
    assert [node.kind for node in chain] == [StatementKind.INSERT] * 3


def test_append_links_one_node_at_tail(users):
    chain = select(users)
    head = chain.head
    chain.where_clause("id = 1")
    assert chain.head is head
    assert head.text == "SELECT * FROM users"
    assert head.next is chain.tail
    assert chain.tail.text == "WHERE id = 1"
    assert chain.tail.next is None
    assert len(chain) == 2


def test_chain_from_prelinked_head_finds_tail():
    third = ClauseNode(text="c", kind=StatementKind.SELECT)
    second = ClauseNode(text="b", kind=StatementKind.SELECT, next=third)
    chain = ClauseChain(ClauseNode(text="a", kind=StatementKind.SELECT, next=second))
    assert chain.tail is third
    chain.where_clause("x")
    assert chain.fragments() == ["a", "b", "c", "WHERE x"]


def test_append_honours_node_linked_outside_handle(users):
    chain = select(users)
    chain.tail.next = ClauseNode(text="ORDER BY id", kind=StatementKind.SELECT)
    chain.where_clause("id > 0")
    assert chain.compile() == "SELECT * FROM users ORDER BY id WHERE id > 0"


def test_appending_matches_prelinked_construction(users_with_fields):
    appended = update(users_with_fields).set({"id": "2"}).where_clause("id = 1")
    prelinked = ClauseChain.from_fragments(
        StatementKind.UPDATE, ["UPDATE users", "SET id = 2", "WHERE id = 1"]
    )
    assert appended.compile() == prelinked.compile()
    assert appended.head == prelinked.head


def test_from_fragments_requires_a_fragment():
    with pytest.raises(ValueError):
        ClauseChain.from_fragments(StatementKind.SELECT, [])


def test_chains_are_independent(users):
    first = select(users)
    second = select(users)
    first.where_clause("id = 1")
    assert second.compile() == "SELECT * FROM users"


def test_repr_lists_fragments(users):
    chain = select(users).where_clause("id = 1")
    assert repr(chain) == (
        "ClauseChain(kind=SELECT, fragments=['SELECT * FROM users', 'WHERE id = 1'])"
    )
