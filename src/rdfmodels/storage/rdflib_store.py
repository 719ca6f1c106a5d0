"""GraphStore adapter over an rdflib Dataset.

Lets entities be discovered in, and written to, anything rdflib can parse.

Usage:
    from rdflib import Dataset

    dataset = Dataset()
    dataset.parse("people.trig", format="trig")
    store = RdflibGraphStore(dataset)
    people = read_from(store, kind=PERSON)
"""

from __future__ import annotations

from collections.abc import Iterator

from rdflib import Dataset, Graph
from rdflib.term import Node

from rdfmodels.storage.protocol import DEFAULT_GRAPH, Quad


class RdflibGraphStore:
    """Wraps an ``rdflib.Dataset`` so it satisfies the GraphStore protocol.

    The wrapper compares by identity. rdflib graphs compare by graph identifier,
    so two unrelated Datasets would otherwise look like the same store.

    Args:
        dataset: Dataset to wrap. A fresh one is created if omitted.
    """

    def __init__(self, dataset: Dataset | None = None):
        self._dataset = dataset if dataset is not None else Dataset()

    @property
    def dataset(self) -> Dataset:
        """The wrapped rdflib Dataset."""
        return self._dataset

    @staticmethod
    def _graph_id(context: Graph | Node | None) -> Node:
        """Map an rdflib context (graph object, identifier or None) to a graph id."""
        if context is None:
            return DEFAULT_GRAPH
        if isinstance(context, Graph):
            return context.identifier
        return context

    @staticmethod
    def _as_quad(statement: tuple[Node, ...]) -> tuple[Node, Node, Node, Node]:
        if len(statement) == 3:
            return (*statement, DEFAULT_GRAPH)
        subject, predicate, obj, graph = statement
        return subject, predicate, obj, DEFAULT_GRAPH if graph is None else graph

    def add(self, quad: tuple[Node, ...]) -> None:
        """Add a quad to the dataset (rdflib drops exact duplicates)."""
        self._dataset.add(self._as_quad(quad))

    def delete(self, quad: tuple[Node, ...]) -> None:
        """Remove a quad from the dataset."""
        self._dataset.remove(self._as_quad(quad))

    def has(self, quad: tuple[Node, ...]) -> bool:
        """Check whether a quad is present."""
        return self._as_quad(quad) in self._dataset

    def match(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        object: Node | None = None,
        graph: Node | None = None,
    ) -> Iterator[Quad]:
        """Find quads matching a pattern across all graphs, or in one graph.

        Args:
            subject: Subject to match, or None for any.
            predicate: Predicate to match, or None for any.
            object: Object to match, or None for any.
            graph: Graph identifier to match, or None for any graph.

        Yields:
            Matching quads in rdflib's iteration order.
        """
        for s, p, o, context in self._dataset.quads((subject, predicate, object, graph)):
            yield Quad(s, p, o, self._graph_id(context))

    @property
    def size(self) -> int:
        """Number of quads across all graphs."""
        return sum(1 for _ in self._dataset.quads((None, None, None, None)))

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"RdflibGraphStore(size={self.size})"
