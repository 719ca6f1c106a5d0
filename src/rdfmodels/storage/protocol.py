"""Graph store protocol for swappable triple engines.

The storage layer is not owned by this package. Any object offering the five
operations below can back entity discovery and write-back:
- LocalGraphStore, in-memory (default for tests and small datasets)
- RdflibGraphStore, over an ``rdflib.Dataset``
- anything else that matches the shape

Usage:
    store = LocalGraphStore()
    people = read_from(store, kind=PERSON)
"""

from __future__ import annotations

import inspect
from collections.abc import Iterator
from typing import Any, NamedTuple, Protocol, runtime_checkable

from rdflib.graph import DATASET_DEFAULT_GRAPH_ID
from rdflib.term import Node, URIRef

from rdfmodels.errors import ValidationError

DEFAULT_GRAPH: URIRef = DATASET_DEFAULT_GRAPH_ID
"""Identifier of the unnamed graph, shared with rdflib's Dataset."""

_REQUIRED_OPERATIONS = ("add", "delete", "has", "match")
_MISSING = object()


class Quad(NamedTuple):
    """One statement. ``graph`` is DEFAULT_GRAPH for the unnamed graph."""

    subject: Node
    predicate: Node
    object: Node
    graph: Node = DEFAULT_GRAPH


@runtime_checkable
class GraphStore(Protocol):
    """Minimal capability interface over a quad store."""

    def add(self, quad: Quad) -> None:
        """Add one quad."""
        ...

    def delete(self, quad: Quad) -> None:
        """Remove one quad if present."""
        ...

    def has(self, quad: Quad) -> bool:
        """Check whether the quad is present."""
        ...

    def match(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        object: Node | None = None,
        graph: Node | None = None,
    ) -> Iterator[Quad]:
        """Iterate quads matching the pattern. None matches anything."""
        ...

    @property
    def size(self) -> int:
        """Number of quads held."""
        ...


def is_graph_store(candidate: Any) -> bool:
    """Structural check for the GraphStore capability.

    Unlike ``isinstance(candidate, GraphStore)``, this also rejects objects whose
    operations exist but are not callable, and classes passed instead of instances.
    ``size`` is looked up statically and never evaluated.

    Args:
        candidate: Object to check.

    Returns:
        True if candidate offers callable add/delete/has/match and a size attribute.
    """
    if candidate is None or isinstance(candidate, type):
        return False
    for name in _REQUIRED_OPERATIONS:
        if not callable(getattr(candidate, name, None)):
            return False
    return inspect.getattr_static(candidate, "size", _MISSING) is not _MISSING


def ensure_graph_store(candidate: Any) -> GraphStore:
    """Validate a store at the API boundary.

    Args:
        candidate: Object that should satisfy GraphStore.

    Returns:
        The same object, typed as GraphStore.

    Raises:
        ValidationError: If candidate lacks a required operation.
    """
    if not is_graph_store(candidate):
        raise ValidationError(f"Not a graph store: {candidate!r}")
    return candidate
