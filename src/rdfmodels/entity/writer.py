"""Write-back: project an entity's identity, types and buffered values as quads.

Writes are additive. Nothing is removed and nothing is checked for prior
existence, so writing twice adds every quad twice unless the store keeps
identical quads once. A failed write leaves the quads added before the
failure in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from rdfmodels.core.vocabulary import A
from rdfmodels.entity.entity import Entity
from rdfmodels.entity.operations import normalize_graph
from rdfmodels.errors import ValidationError
from rdfmodels.storage.protocol import GraphStore, Quad, ensure_graph_store

logger = logging.getLogger(__name__)


def project(entity: Entity, graph: Any = None) -> Iterator[Quad]:
    """Quads that represent ``entity`` in ``graph``, types first.

    Lazy: an encoder failure surfaces when its quad is reached.

    Args:
        entity: Entity to project.
        graph: Target graph IRI, None for the default graph.

    Yields:
        One quad per type marker, then one per buffered value.
    """
    target = normalize_graph(graph)
    subject = entity.id.to_term()
    for rdf_type in sorted(entity.types):
        yield Quad(subject, A, rdf_type, target)
    for name, spec in entity.kind.attributes.items():
        for value in entity.buffer(name):
            yield Quad(subject, spec.predicate, spec.encode(value), target)


def write_to(entity: Entity, dataset: GraphStore, graph: Any = None) -> bool:
    """Write an entity into a dataset.

    Args:
        entity: Entity to write. Not modified.
        dataset: Target store.
        graph: Target graph IRI, None for the default graph.

    Returns:
        True if every quad was added, False if projection failed part way.

    Raises:
        ValidationError: If entity, dataset or graph are malformed.
    """
    if not isinstance(entity, Entity):
        raise ValidationError(f"Not an entity: {entity!r}")
    store = ensure_graph_store(dataset)
    normalize_graph(graph)

    written = 0
    try:
        for quad in project(entity, graph):
            store.add(quad)
            written += 1
    except Exception:
        logger.exception("Failed writing %s after %d quad(s)", entity.id, written)
        return False
    logger.debug("Wrote %d quad(s) for %s", written, entity.id)
    return True


async def write_to_async(entity: Entity, dataset: GraphStore, graph: Any = None) -> bool:
    """Write an entity (async wrapper for write_to)."""
    return write_to(entity, dataset, graph)
