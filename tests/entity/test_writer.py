"""Tests for write-back."""

import logging

import pytest
from rdflib import Literal, Namespace, URIRef

from rdfmodels import (
    DEFAULT_GRAPH,
    PERSON,
    PRODUCT,
    Entity,
    LocalGraphStore,
    LocalizedString,
    NodeId,
    Quad,
    ValidationError,
    write_to,
)
from rdfmodels.core.vocabulary import A, FOAF, SCHEMA
from rdfmodels.entity import project

EX = Namespace("https://ex/")


class RecordingStore(LocalGraphStore):
    """Store that keeps every add() call, duplicates included."""

    def __init__(self):
        super().__init__()
        self.added = []

    def add(self, quad):
        self.added.append(quad)
        super().add(quad)


@pytest.fixture
def alice():
    entity = Entity(EX.alice, kind=PERSON)
    entity.buffer("names").add(LocalizedString("Alice", "en"))
    entity.buffer("emails").add("alice@example.org")
    return entity


def test_write_projects_types_and_buffers(alice, store):
    assert alice.write_to(store) is True

    assert set(store) == {
        Quad(EX.alice, A, FOAF.Person),
        Quad(EX.alice, FOAF.name, Literal("Alice", lang="en")),
        Quad(EX.alice, FOAF.mbox, URIRef("mailto:alice@example.org")),
    }


def test_entity_is_not_modified(alice, store):
    write_to(alice, store)

    assert alice.buffer("names") == {LocalizedString("Alice", "en")}
    assert alice.datasets == ()


def test_write_is_additive(alice):
    """CRITICAL: nothing is removed and nothing is checked first."""
    store = RecordingStore()
    old = Quad(EX.alice, FOAF.name, Literal("Old"))
    store.add(old)

    write_to(alice, store)
    write_to(alice, store)

    assert store.has(old)
    assert len(store.added) == 1 + 2 * 3
    assert store.size == 1 + 3


def test_types_are_written_first(alice):
    store = RecordingStore()

    write_to(alice, store)

    assert store.added[0] == Quad(EX.alice, A, FOAF.Person)


def test_write_to_named_graph(alice, store):
    assert write_to(alice, store, EX.g) is True

    assert {q.graph for q in store} == {EX.g}
    assert store.has(Quad(EX.alice, A, FOAF.Person, EX.g))
    assert not store.has(Quad(EX.alice, A, FOAF.Person, DEFAULT_GRAPH))


def test_graph_accepts_iri_forms(alice, store):
    write_to(alice, store, "https://ex/g1")
    write_to(alice, store, NodeId.iri("https://ex/g2"))

    assert {q.graph for q in store} == {EX.g1, EX.g2}


@pytest.mark.parametrize("graph", ["not a graph", 42, Literal("g")])
def test_invalid_graph_raises(alice, store, graph):
    with pytest.raises(ValidationError, match="graph"):
        write_to(alice, store, graph)

    assert store.size == 0


@pytest.mark.parametrize("dataset", [None, object(), "store", [LocalGraphStore()]])
def test_invalid_dataset_raises(alice, dataset):
    with pytest.raises(ValidationError, match="graph store"):
        write_to(alice, dataset)


def test_invalid_entity_raises(store):
    with pytest.raises(ValidationError, match="entity"):
        write_to("https://ex/alice", store)


def test_encoder_failure_returns_false(alice, caplog):
    """CRITICAL: a failed projection reports False and leaves partial quads."""
    store = RecordingStore()
    alice.buffer("emails").add("not an address")

    with caplog.at_level(logging.ERROR, logger="rdfmodels"):
        assert write_to(alice, store) is False

    assert store.added[0] == Quad(EX.alice, A, FOAF.Person)
    assert store.has(Quad(EX.alice, A, FOAF.Person))
    assert "Failed writing https://ex/alice" in caplog.text


def test_store_failure_returns_false(alice):
    class FullStore(LocalGraphStore):
        def add(self, quad):
            raise OSError("disk full")

    assert write_to(alice, FullStore()) is False


def test_text_encoding_of_product_ids(store):
    widget = Entity(EX.widget, kind=PRODUCT)
    widget.buffer("product_ids").add("W-1")
    widget.buffer("product_ids").add(LocalizedString("W-2", "en"))

    write_to(widget, store)

    assert store.has(Quad(EX.widget, SCHEMA.productID, Literal("W-1")))
    assert store.has(Quad(EX.widget, SCHEMA.productID, Literal("W-2")))


def test_project_is_lazy(alice):
    alice.buffer("emails").add("not an address")

    quads = project(alice)

    assert next(quads) == Quad(EX.alice, A, FOAF.Person)


def test_written_entity_reads_back(alice, store):
    write_to(alice, store)

    (found,) = PERSON.read_from(store)

    assert found == alice
    assert found.live("names") == alice.buffer("names")
    assert found.live("emails") == alice.buffer("emails")
