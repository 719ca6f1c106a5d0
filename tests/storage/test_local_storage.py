"""Unit tests for LocalGraphStore."""

from rdflib import Literal, Namespace

from rdfmodels.storage import DEFAULT_GRAPH, LocalGraphStore, Quad, is_graph_store

EX = Namespace("https://ex/")


def test_satisfies_graph_store_capability():
    assert is_graph_store(LocalGraphStore())


def test_triples_land_in_default_graph():
    store = LocalGraphStore()
    store.add((EX.a, EX.p, EX.b))

    assert store.has(Quad(EX.a, EX.p, EX.b, DEFAULT_GRAPH))
    assert store.has((EX.a, EX.p, EX.b, None))
    assert list(store.match()) == [Quad(EX.a, EX.p, EX.b, DEFAULT_GRAPH)]


def test_identical_quads_are_stored_once():
    store = LocalGraphStore()
    store.add(Quad(EX.a, EX.p, Literal("x")))
    store.add(Quad(EX.a, EX.p, Literal("x")))

    assert store.size == 1
    assert len(store) == 1


def test_same_triple_in_two_graphs_is_two_quads():
    store = LocalGraphStore()
    store.add(Quad(EX.a, EX.p, EX.b))
    store.add(Quad(EX.a, EX.p, EX.b, EX.g))

    assert store.size == 2
    assert [q.graph for q in store.match(graph=EX.g)] == [EX.g]
    assert len(list(store.match(EX.a, EX.p, EX.b))) == 2


def test_match_filters_each_position():
    store = LocalGraphStore(
        [
            (EX.a, EX.p, EX.b),
            (EX.a, EX.q, EX.c),
            (EX.d, EX.p, EX.b),
        ]
    )

    assert {q.subject for q in store.match(predicate=EX.p)} == {EX.a, EX.d}
    assert [q.object for q in store.match(EX.a, EX.q)] == [EX.c]
    assert [q.subject for q in store.match(object=EX.b)] == [EX.a, EX.d]
    assert list(store.match(EX.z)) == []


def test_delete():
    store = LocalGraphStore([(EX.a, EX.p, EX.b)])
    store.delete((EX.a, EX.p, EX.b))
    store.delete((EX.a, EX.p, EX.b))

    assert store.size == 0
    assert not store.has((EX.a, EX.p, EX.b))


def test_can_write_while_matching():
    store = LocalGraphStore([(EX.a, EX.p, EX.b)])

    for quad in store.match():
        store.add(Quad(quad.subject, quad.predicate, EX.c))

    assert store.size == 2


def test_iteration_follows_insertion_order():
    store = LocalGraphStore()
    for name in ("c", "a", "b"):
        store.add((EX[name], EX.p, EX.o))

    assert [q.subject for q in store] == [EX.c, EX.a, EX.b]
