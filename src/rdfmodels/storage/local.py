"""Local in-memory graph store implementation.

Simple dict-based storage suitable for single-process use and testing.
Not indexed - use RdflibGraphStore or an external engine for large datasets.

Usage:
    store = LocalGraphStore()
    store.add(Quad(alice, RDF.type, FOAF.Person))
    people = read_from(store, kind=PERSON)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from rdflib.term import Node

from rdfmodels.storage.protocol import DEFAULT_GRAPH, Quad


class LocalGraphStore:
    """In-memory quad store backed by an insertion-ordered dict.

    Structure:
        _quads[Quad(s, p, o, g)] = None

    Identical quads are stored once. Iteration follows insertion order.

    Args:
        quads: Optional initial quads (3-tuples land in the default graph).
    """

    def __init__(self, quads: Iterable[tuple[Node, ...]] = ()):
        """Initialize local store.

        Args:
            quads: Optional initial quads or triples.
        """
        self._quads: dict[Quad, None] = {}
        for quad in quads:
            self.add(quad)

    @staticmethod
    def _as_quad(statement: tuple[Node, ...]) -> Quad:
        """Normalize a triple or quad tuple into a Quad."""
        if isinstance(statement, Quad):
            return statement
        if len(statement) == 3:
            return Quad(*statement, DEFAULT_GRAPH)
        if len(statement) == 4:
            subject, predicate, obj, graph = statement
            return Quad(subject, predicate, obj, DEFAULT_GRAPH if graph is None else graph)
        raise ValueError(f"Expected a triple or quad, got {len(statement)} terms")

    def add(self, quad: tuple[Node, ...]) -> None:
        """Add a quad. Adding an existing quad is a no-op.

        Args:
            quad: Quad (or triple, for the default graph) to add.
        """
        self._quads[self._as_quad(quad)] = None

    def delete(self, quad: tuple[Node, ...]) -> None:
        """Remove a quad if present.

        Args:
            quad: Quad (or triple) to remove.
        """
        self._quads.pop(self._as_quad(quad), None)

    def has(self, quad: tuple[Node, ...]) -> bool:
        """Check whether a quad is present.

        Args:
            quad: Quad (or triple) to look for.

        Returns:
            True if present, False otherwise.
        """
        return self._as_quad(quad) in self._quads

    def match(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        object: Node | None = None,
        graph: Node | None = None,
    ) -> Iterator[Quad]:
        """Find quads matching a pattern.

        O(n) scan over a snapshot, so callers may write while iterating.

        Args:
            subject: Subject to match, or None for any.
            predicate: Predicate to match, or None for any.
            object: Object to match, or None for any.
            graph: Graph to match, or None for any graph.

        Yields:
            Matching quads in insertion order.
        """
        for quad in list(self._quads):
            if subject is not None and quad.subject != subject:
                continue
            if predicate is not None and quad.predicate != predicate:
                continue
            if object is not None and quad.object != object:
                continue
            if graph is not None and quad.graph != graph:
                continue
            yield quad

    @property
    def size(self) -> int:
        """Number of distinct quads held."""
        return len(self._quads)

    def __len__(self) -> int:
        return len(self._quads)

    def __iter__(self) -> Iterator[Quad]:
        return iter(list(self._quads))

    def __repr__(self) -> str:
        return f"LocalGraphStore(size={self.size})"
