"""Entity discovery: scan datasets for typed subjects and build one entity per identity.

Usage:
    # Every typed subject, kind chosen from its types
    entities = read_from([store_a, store_b])

    # Persons only, at most ten
    people = read_from(store, kind=PERSON, count=10)

    # Custom construction
    things = read_from(store, types=EX.Thing, factory=make_thing)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from rdflib.term import BNode, URIRef

from rdfmodels.config import get_settings
from rdfmodels.core.identity import NodeId
from rdfmodels.core.kind import EntityKind, KindRegistry, get_kind_registry
from rdfmodels.core.vocabulary import A
from rdfmodels.entity.entity import Entity
from rdfmodels.entity.operations import normalize_count, normalize_datasets, normalize_types
from rdfmodels.errors import ValidationError
from rdfmodels.storage.protocol import GraphStore

logger = logging.getLogger(__name__)


class EntityFactory(Protocol):
    """Builds an entity from a discovered identifier."""

    def __call__(
        self,
        id: NodeId,
        *,
        types: frozenset[URIRef],
        datasets: list[GraphStore],
    ) -> Entity: ...


@dataclass(slots=True)
class Sighting:
    """What discovery learned about one identifier across datasets."""

    id: NodeId
    datasets: list[GraphStore] = field(default_factory=list)
    types: set[URIRef] = field(default_factory=set)

    def record(self, dataset: GraphStore, rdf_type: URIRef) -> None:
        """Merge one type triple into the sighting."""
        if not any(d is dataset for d in self.datasets):
            self.datasets.append(dataset)
        self.types.add(rdf_type)


def scan(
    datasets: Iterable[GraphStore],
    required: frozenset[URIRef] | None,
    *,
    count: int | None = None,
    include_blank_nodes: bool = False,
) -> dict[NodeId, Sighting]:
    """Collect typed subjects, merged by identity, in discovery order.

    Stops as soon as ``count`` distinct identifiers have been accepted.

    Args:
        datasets: Stores to scan, in order.
        required: Accepted type markers, or None for any.
        count: Maximum number of distinct identifiers.
        include_blank_nodes: Accept blank-node subjects, scoped to their dataset.

    Returns:
        Identifier -> sighting, in first-seen order.
    """
    sightings: dict[NodeId, Sighting] = {}
    for dataset in datasets:
        for quad in dataset.match(None, A, None):
            subject, rdf_type = quad.subject, quad.object
            if not isinstance(rdf_type, URIRef):
                continue
            if required is not None and rdf_type not in required:
                continue
            if isinstance(subject, URIRef):
                node_id = NodeId.iri(str(subject))
            elif isinstance(subject, BNode) and include_blank_nodes:
                node_id = NodeId.blank_node(str(subject), dataset)
            else:
                continue

            sighting = sightings.get(node_id)
            if sighting is None:
                sighting = sightings[node_id] = Sighting(node_id)
            sighting.record(dataset, rdf_type)
            if count is not None and len(sightings) >= count:
                return sightings
    return sightings


def read_from(
    datasets: Any,
    *,
    types: Any = None,
    kind: EntityKind | None = None,
    factory: EntityFactory | None = None,
    count: int | None = None,
    include_blank_nodes: bool | None = None,
    registry: KindRegistry | None = None,
) -> list[Entity]:
    """Discover entities in one or more datasets.

    Each distinct identifier yields exactly one entity, whose datasets are all the
    datasets it was typed in and whose types are all the matching types observed.

    Args:
        datasets: Store or iterable of stores.
        types: Required type marker(s). Defaults to the kind's types; None
            without a kind matches any type.
        kind: Kind for every built entity.
        factory: Entity constructor, overrides kind.
        count: Maximum number of entities (default from settings).
        include_blank_nodes: Accept blank-node subjects (default from settings).
        registry: Kind registry for type-driven construction when neither kind
            nor factory is given.

    Returns:
        Entities in discovery order. Entities that fail to build are logged and left out.

    Raises:
        ValidationError: If datasets, types, kind or count are malformed.
    """
    settings = get_settings()
    stores = normalize_datasets(datasets)
    required = normalize_types(types)
    if kind is not None and not isinstance(kind, EntityKind):
        raise ValidationError(f"Not an entity kind: {kind!r}")
    if required is None and kind is not None and kind.types:
        required = kind.types
    cap = normalize_count(count if count is not None else settings.default_count)
    if include_blank_nodes is None:
        include_blank_nodes = settings.include_blank_nodes
    if factory is None:
        factory = _kind_factory(kind, registry or get_kind_registry())

    sightings = scan(stores, required, count=cap, include_blank_nodes=include_blank_nodes)
    logger.debug(
        "Found %d subject(s) in %d dataset(s) for types %s",
        len(sightings),
        len(stores),
        sorted(required) if required else "any",
    )

    entities: list[Entity] = []
    for sighting in sightings.values():
        try:
            entity = factory(
                sighting.id, types=frozenset(sighting.types), datasets=sighting.datasets
            )
        except Exception as e:
            logger.warning("Skipping %s: could not build entity: %s", sighting.id, e)
            continue
        entities.append(entity)
    return entities


def _kind_factory(kind: EntityKind | None, registry: KindRegistry) -> EntityFactory:
    """Factory building entities of ``kind``, or of the kind their types select."""

    def build(id: NodeId, *, types: frozenset[URIRef], datasets: list[GraphStore]) -> Entity:
        return Entity(
            id, kind=kind or registry.kind_for(types), types=types, datasets=datasets
        )

    return build


def read_one(datasets: Any, **kwargs: Any) -> Entity | None:
    """First entity discovered in ``datasets``, or None.

    Accepts the keyword arguments of ``read_from`` except count.
    """
    kwargs.pop("count", None)
    entities = read_from(datasets, count=1, **kwargs)
    return entities[0] if entities else None


# Async variants - discovery never waits on I/O; these keep the call shape
# uniform for callers that await everything.


async def read_from_async(datasets: Any, **kwargs: Any) -> list[Entity]:
    """Discover entities (async wrapper for read_from)."""
    return read_from(datasets, **kwargs)


async def read_one_async(datasets: Any, **kwargs: Any) -> Entity | None:
    """First discovered entity (async wrapper for read_one)."""
    return read_one(datasets, **kwargs)
