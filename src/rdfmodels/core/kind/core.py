"""Kind registry for type-driven entity construction.

Usage:
    registry = get_kind_registry()
    registry.register(ORGANIZATION)
    registry.kind_for({FOAF.Person})   # PERSON
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from rdflib.term import URIRef

from rdfmodels.core.kind.kinds import BUILTIN_KINDS, RESOURCE
from rdfmodels.core.kind.models import EntityKind


class KindRegistry:
    """Ordered mapping of kind names to kinds.

    ``kind_for`` picks the first registered kind whose type markers overlap the
    observed ones, so registration order decides ties.

    Args:
        fallback: Kind used when nothing matches (default RESOURCE).
    """

    def __init__(self, kinds: Iterable[EntityKind] = (), fallback: EntityKind = RESOURCE):
        """Initialize registry.

        Args:
            kinds: Kinds to register, in priority order.
            fallback: Kind used when no registered kind matches.
        """
        self._by_name: dict[str, EntityKind] = {}
        self._fallback = fallback
        for kind in kinds:
            self.register(kind)

    def register(self, kind: EntityKind) -> EntityKind:
        """Register a kind and return it.

        Args:
            kind: Kind to register.

        Returns:
            The registered kind (the existing one if already registered).

        Raises:
            ValueError: If a different kind is registered under the same name.
        """
        existing = self._by_name.get(kind.name)
        if existing is not None:
            if existing is not kind:
                raise ValueError(f"Kind name collision: {kind.name!r}")
            return existing
        self._by_name[kind.name] = kind
        return kind

    def get(self, name: str) -> EntityKind | None:
        """Look up a kind by name."""
        return self._by_name.get(name)

    def kind_for(self, types: Iterable[URIRef]) -> EntityKind:
        """Pick the kind that owns the observed types.

        Args:
            types: Type markers observed for a subject.

        Returns:
            First matching kind, or the fallback.
        """
        observed = frozenset(types)
        for kind in self._by_name.values():
            if kind.types and kind.matches(observed):
                return kind
        return self._fallback

    def __iter__(self) -> Iterator[EntityKind]:
        return iter(self._by_name.values())

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, EntityKind) and self._by_name.get(kind.name) is kind


# Module-level registry instance
_registry = KindRegistry(BUILTIN_KINDS)


def get_kind_registry() -> KindRegistry:
    """Access the global kind registry.

    Returns:
        The process-local KindRegistry, preloaded with the built-in kinds.
    """
    return _registry
