"""Entity: a typed subject projected from one or more datasets.

Usage:
    alice = Entity("https://example.org/alice", kind=PERSON)
    alice.buffer("names").add(LocalizedString("Alice", "en"))
    alice.buffer("emails").add("alice@example.org")
    alice.write_to(store)

    for person in PERSON.read_from(store):
        print(person.id, person.get("names"))
"""

from __future__ import annotations

import logging
import warnings
import weakref
from collections.abc import Iterator
from typing import Any

from rdflib.term import URIRef

from rdfmodels.core.identity import NodeId, parse
from rdfmodels.core.kind import RESOURCE, EntityKind
from rdfmodels.entity.operations import normalize_datasets, normalize_types
from rdfmodels.errors import ValidationError
from rdfmodels.storage.protocol import GraphStore

logger = logging.getLogger(__name__)


class Entity:
    """One subject, its type markers, the datasets it came from and pending values.

    Identifier and types are fixed at construction. Datasets are shared with the
    caller and held through weak references, so stores need not be hashable
    but must be weakly referenceable. An entity never keeps a dataset alive,
    and a dataset that has been garbage collected stops contributing to live
    reads.

    Attribute values come from two places. ``live(name)`` re-queries every
    dataset on each call; ``buffer(name)`` is the mutable in-memory set of values
    not yet written anywhere. ``get(name)`` is their union.

    Args:
        id: Subject identifier (IRI string, URIRef or NodeId).
        kind: Attribute-mapping strategy (default RESOURCE).
        types: Type markers. Defaults to the kind's default types.
        datasets: Store or stores the subject was found in.
    """

    __slots__ = ("_id", "_kind", "_types", "_datasets", "_buffers", "__weakref__")

    def __init__(
        self,
        id: Any,
        *,
        kind: EntityKind = RESOURCE,
        types: Any = None,
        datasets: Any = None,
    ):
        if not isinstance(kind, EntityKind):
            raise ValidationError(f"Not an entity kind: {kind!r}")
        self._id: NodeId = parse(id)
        self._kind = kind
        explicit = normalize_types(types)
        if explicit and kind.types and kind.types.isdisjoint(explicit):
            warnings.warn(
                f"Entity {self._id} has none of the {kind.name!r} type markers "
                f"and will not be rediscovered as a {kind.name}.",
                stacklevel=2,
            )
        self._types: frozenset[URIRef] = explicit or kind.default_types
        self._datasets: list[weakref.ReferenceType[GraphStore]] = [
            weakref.ref(d) for d in normalize_datasets(datasets, allow_empty=True)
        ]
        self._buffers: dict[str, set[Any]] = {name: set() for name in kind.attributes}

    @property
    def id(self) -> NodeId:
        """Subject identifier."""
        return self._id

    @property
    def kind(self) -> EntityKind:
        """Attribute-mapping strategy."""
        return self._kind

    @property
    def types(self) -> frozenset[URIRef]:
        """Type markers (never empty)."""
        return self._types

    @property
    def datasets(self) -> tuple[GraphStore, ...]:
        """Datasets still alive that this entity reads from, in first-seen order."""
        return tuple(d for d in (ref() for ref in self._datasets) if d is not None)

    @property
    def attributes(self) -> tuple[str, ...]:
        """Names of the attributes this entity's kind defines."""
        return tuple(self._kind.attributes)

    def buffer(self, name: str) -> set[Any]:
        """Mutable set of values pending write-back.

        Raises:
            UnknownAttributeError: If the kind has no such attribute.
        """
        self._kind.attribute(name)
        return self._buffers[name]

    def live(self, name: str) -> set[Any]:
        """Query every dataset now for the attribute's values.

        No caching: each call scans again. Terms that do not decode are skipped;
        decoding faults are logged and skipped.

        Raises:
            UnknownAttributeError: If the kind has no such attribute.
        """
        spec = self._kind.attribute(name)
        subject = self._id.to_term()
        values: set[Any] = set()
        for dataset in self._sources():
            for quad in dataset.match(subject, spec.predicate, None):
                try:
                    value = spec.decode(quad.object)
                except Exception as e:
                    logger.warning(
                        "Skipping undecodable %s value for %s: %s", name, self._id, e
                    )
                    continue
                if value is not None:
                    values.add(value)
        return values

    def get(self, name: str) -> set[Any]:
        """Live values merged with buffered values.

        Raises:
            UnknownAttributeError: If the kind has no such attribute.
        """
        return self.live(name) | self.buffer(name)

    def iter_attributes(self) -> Iterator[tuple[str, set[Any]]]:
        """Yield (name, merged values) for every attribute of the kind."""
        for name in self._kind.attributes:
            yield name, self.get(name)

    def _sources(self) -> list[GraphStore]:
        """Datasets in which this entity's identifier is meaningful."""
        return [d for d in self.datasets if self._id.is_scoped_to(d)]

    def write_to(self, dataset: GraphStore, graph: Any = None) -> bool:
        """Project this entity into a dataset. See ``rdfmodels.entity.write_to``."""
        from rdfmodels.entity.writer import write_to

        return write_to(self, dataset, graph)

    def same_as(self, other: Any) -> bool:
        """Check whether other denotes the same subject."""
        return isinstance(other, Entity) and other._id == self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.same_as(other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        subject = str(self._id) if self._id.blank else f"<{self._id}>"
        types = ", ".join(f"<{t}>" for t in sorted(self._types))
        return f"{subject} a {types} ."

    def __repr__(self) -> str:
        return f"Entity({str(self._id)!r}, kind={self._kind.name!r})"
