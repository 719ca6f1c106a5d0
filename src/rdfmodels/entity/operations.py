"""Argument normalization shared by discovery, construction and write-back.

Every public entry point validates its arguments here, before touching a
dataset, so malformed input fails fast with ValidationError.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterable
from typing import Any

from rdflib.term import BNode, URIRef

from rdfmodels.core.identity import NodeId, is_iri
from rdfmodels.errors import ValidationError
from rdfmodels.storage.protocol import DEFAULT_GRAPH, GraphStore, is_graph_store


def normalize_datasets(datasets: Any, *, allow_empty: bool = False) -> list[GraphStore]:
    """Convert a store or collection of stores to a de-duplicated list.

    Handles:
    - a single store -> [store]
    - an iterable of stores -> stores in order, duplicates (by identity) dropped
    - None -> [] if allow_empty, else error

    Args:
        datasets: Store or iterable of stores.
        allow_empty: Accept None and empty collections.

    Returns:
        List of stores in first-seen order.

    Raises:
        ValidationError: If datasets is missing, contains a non-store, or a store
            that cannot be weakly referenced.
    """
    if datasets is None:
        if allow_empty:
            return []
        raise ValidationError("dataset not provided")
    # Check the store shape first: some stores are themselves iterable
    if is_graph_store(datasets):
        return [_referenceable(datasets)]
    if isinstance(datasets, (str, bytes)) or not isinstance(datasets, Iterable):
        raise ValidationError(f"dataset not recognised: {datasets!r}")

    result: list[GraphStore] = []
    seen: set[int] = set()
    for dataset in datasets:
        if not is_graph_store(dataset):
            raise ValidationError(f"dataset not recognised: {dataset!r}")
        if id(dataset) not in seen:
            seen.add(id(dataset))
            result.append(_referenceable(dataset))
    if not result and not allow_empty:
        raise ValidationError("dataset not provided")
    return result


def _referenceable(dataset: GraphStore) -> GraphStore:
    """Entities hold their datasets weakly; hashing is not required."""
    try:
        weakref.ref(dataset)
    except TypeError:
        raise ValidationError(f"dataset not weakly referenceable: {dataset!r}") from None
    return dataset


def normalize_type(rdf_type: Any) -> URIRef:
    """Convert one type marker (IRI string, URIRef or IRI NodeId) to a URIRef.

    Raises:
        ValidationError: If the value is not an IRI.
    """
    if isinstance(rdf_type, NodeId):
        if rdf_type.blank:
            raise ValidationError(f"rdf type not recognised: {rdf_type}")
        return URIRef(rdf_type.value)
    if isinstance(rdf_type, str) and not isinstance(rdf_type, BNode) and is_iri(rdf_type):
        return URIRef(rdf_type)
    raise ValidationError(f"rdf type not recognised: {rdf_type!r}")


def normalize_types(types: Any) -> frozenset[URIRef] | None:
    """Convert a type marker or collection of them to a frozenset.

    None and empty collections mean "no constraint" and yield None.

    Raises:
        ValidationError: If any entry is not an IRI.
    """
    if types is None:
        return None
    if isinstance(types, (str, NodeId)):
        return frozenset({normalize_type(types)})
    if not isinstance(types, Iterable):
        raise ValidationError(f"rdf type not recognised: {types!r}")
    result = frozenset(normalize_type(t) for t in types)
    return result or None


def normalize_count(count: Any) -> int | None:
    """Validate a result cap.

    Raises:
        ValidationError: If count is not None and not a positive int.
    """
    if count is None:
        return None
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(f"not a count: {count!r}")
    if count < 1:
        raise ValidationError(f"not a count: {count}")
    return count


def normalize_graph(graph: Any) -> URIRef:
    """Resolve a target graph. None means the default graph.

    Raises:
        ValidationError: If graph is given and is not an IRI.
    """
    if graph is None:
        return DEFAULT_GRAPH
    try:
        return normalize_type(graph)
    except ValidationError:
        raise ValidationError(f"Not a graph: {graph!r}") from None
