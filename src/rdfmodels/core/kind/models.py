"""Entity kind models: attribute mapping tables.

A kind replaces a subclass per entity family. It names the type markers that
identify its subjects and maps each attribute to a predicate plus the rules
that turn store terms into values and back.

Usage:
    PERSON.attribute("names").predicate   # foaf:name
    people = PERSON.read_from(store, count=10)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from rdflib.term import Node, URIRef

from rdfmodels.core.vocabulary import RESOURCE_TYPE
from rdfmodels.errors import UnknownAttributeError

if TYPE_CHECKING:
    from rdfmodels.entity.entity import Entity

Decoder = Callable[[Node], Any]
"""Store term -> attribute value, or None when the term has the wrong shape."""

Encoder = Callable[[Any], Node]
"""Attribute value -> store term. Raises on values it cannot project."""


@dataclass(frozen=True, slots=True)
class AttributeSpec:
    """How one attribute maps onto a predicate."""

    name: str
    predicate: URIRef
    decode: Decoder
    encode: Encoder


@dataclass(frozen=True)
class EntityKind:
    """Attribute-mapping strategy for one family of types.

    Attributes:
        name: Kind name, unique within a registry.
        types: Type markers identifying subjects of this kind. Empty matches any.
        attributes: Attribute name -> mapping rule.
        default_types: Types given to entities built without explicit types.
    """

    name: str
    types: frozenset[URIRef] = frozenset()
    attributes: Mapping[str, AttributeSpec] = field(default_factory=dict)
    default_types: frozenset[URIRef] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", frozenset(self.types))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        default_types = frozenset(self.default_types) or self.types or frozenset({RESOURCE_TYPE})
        object.__setattr__(self, "default_types", default_types)

    @classmethod
    def define(
        cls,
        name: str,
        types: Iterable[URIRef] = (),
        attributes: Iterable[AttributeSpec] = (),
        default_types: Iterable[URIRef] = (),
    ) -> EntityKind:
        """Build a kind from a list of attribute specs.

        Raises:
            ValueError: If two specs share a name.
        """
        table: dict[str, AttributeSpec] = {}
        for spec in attributes:
            if spec.name in table:
                raise ValueError(f"Duplicate attribute {spec.name!r} in kind {name!r}")
            table[spec.name] = spec
        return cls(
            name=name,
            types=frozenset(types),
            attributes=table,
            default_types=frozenset(default_types),
        )

    def attribute(self, name: str) -> AttributeSpec:
        """Look up an attribute's mapping rule.

        Raises:
            UnknownAttributeError: If this kind has no such attribute.
        """
        try:
            return self.attributes[name]
        except KeyError:
            raise UnknownAttributeError(self.name, name) from None

    def matches(self, types: Iterable[URIRef]) -> bool:
        """Check whether any of ``types`` identifies this kind."""
        return not self.types.isdisjoint(types)

    def create(self, id: Any, **kwargs: Any) -> Entity:
        """Construct a dataset-less (or explicitly sourced) entity of this kind."""
        # Late import to avoid circular dependency
        from rdfmodels.entity.entity import Entity

        return Entity(id, kind=self, **kwargs)

    def read_from(self, datasets: Any, *, count: int | None = None, **kwargs: Any) -> list[Entity]:
        """Discover entities of this kind. See ``rdfmodels.entity.read_from``."""
        from rdfmodels.entity.discovery import read_from

        return read_from(datasets, kind=self, count=count, **kwargs)

    def read_one(self, datasets: Any, **kwargs: Any) -> Entity | None:
        """First entity of this kind found in ``datasets``, or None."""
        from rdfmodels.entity.discovery import read_one

        return read_one(datasets, kind=self, **kwargs)

    def __hash__(self) -> int:
        return hash((self.name, self.types))

    def __repr__(self) -> str:
        return f"EntityKind({self.name!r}, attributes={sorted(self.attributes)})"
