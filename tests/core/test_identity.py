"""Tests for node identity.

Critical Invariants:
- Equality is by identifier value, not object identity
- Blank nodes are only equal within their owning dataset
- Blank nodes cannot be parsed without a scope
"""

import gc

import pytest
from rdflib import BNode, URIRef

from rdfmodels.core.identity import NodeId, is_identifier, parse
from rdfmodels.errors import InvalidIdentifierError
from rdfmodels.storage import LocalGraphStore


def test_iri_equality_is_by_value():
    """CRITICAL: two parses of one IRI are the same identifier.

    Why: Discovery deduplicates subjects across datasets by identifier.
    """
    first = parse("https://ex/alice")
    second = parse(URIRef("https://ex/alice"))

    assert first == second
    assert first is not second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_blank_nodes_are_scoped_to_their_dataset():
    """CRITICAL: _:b0 in two datasets denotes two subjects."""
    store_a = LocalGraphStore()
    store_b = LocalGraphStore()

    in_a = parse("_:b0", scope=store_a)
    also_in_a = parse(BNode("b0"), scope=store_a)
    in_b = parse("_:b0", scope=store_b)

    assert in_a == also_in_a
    assert in_a != in_b
    assert in_a.is_scoped_to(store_a)
    assert not in_a.is_scoped_to(store_b)


def test_blank_node_needs_scope():
    with pytest.raises(InvalidIdentifierError, match="needs an owning dataset"):
        parse("_:b0")

    with pytest.raises(InvalidIdentifierError):
        parse(BNode("b0"))


def test_blank_node_scope_is_held_weakly():
    store = LocalGraphStore()
    node = parse("_:b0", scope=store)
    assert node.scope is store

    del store
    gc.collect()

    assert node.scope is None
    assert node.blank


@pytest.mark.parametrize(
    "value",
    ["not an iri", "", "https://ex/has space", "no-scheme/path", 42, None, 3.5],
)
def test_parse_rejects_non_identifiers(value):
    with pytest.raises(InvalidIdentifierError):
        parse(value)


def test_parse_passes_node_ids_through():
    node = NodeId.iri("https://ex/alice")
    assert parse(node) is node


def test_to_term_round_trip():
    store = LocalGraphStore()
    assert parse("https://ex/alice").to_term() == URIRef("https://ex/alice")
    assert parse("_:b1", scope=store).to_term() == BNode("b1")


def test_str_forms():
    store = LocalGraphStore()
    assert str(parse("urn:isbn:0451450523")) == "urn:isbn:0451450523"
    assert str(parse("_:b1", scope=store)) == "_:b1"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://ex/alice", True),
        ("mailto:alice@example.org", True),
        ("_:b0", True),
        (URIRef("https://ex/alice"), True),
        (BNode("b0"), True),
        (NodeId.iri("https://ex/x"), True),
        ("alice", False),
        (None, False),
        (7, False),
    ],
)
def test_is_identifier(value, expected):
    assert is_identifier(value) is expected
