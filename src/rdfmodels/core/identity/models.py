"""Node identity models.

Usage:
    alice = NodeId.iri("https://example.org/alice")
    local = NodeId.blank_node("b0", scope=store)
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any

from rdflib.term import BNode, IdentifiedNode, URIRef


@dataclass(frozen=True, slots=True)
class NodeId:
    """Identifier of a subject: an IRI, or a blank-node label scoped to one dataset.

    Equality is by value. Blank nodes additionally compare their owning dataset,
    so ``_:b0`` in one store and ``_:b0`` in another are different subjects.
    The owning dataset is held weakly.
    """

    value: str
    blank: bool = False
    scope_key: int | None = field(default=None, repr=False)  # id() of the owning dataset
    scope_ref: weakref.ReferenceType[Any] | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @classmethod
    def iri(cls, value: str) -> NodeId:
        """Build an IRI identifier without validation (see ``parse`` for that)."""
        return cls(value=str(value))

    @classmethod
    def blank_node(cls, label: str, scope: Any) -> NodeId:
        """Build a blank-node identifier owned by ``scope``."""
        return cls(value=str(label), blank=True, scope_key=id(scope), scope_ref=weakref.ref(scope))

    @property
    def scope(self) -> Any | None:
        """Owning dataset of a blank node. None for IRIs or once the dataset is gone."""
        if self.scope_ref is None:
            return None
        return self.scope_ref()

    def is_scoped_to(self, dataset: Any) -> bool:
        """Check whether this identifier is meaningful inside ``dataset``.

        IRIs are global; blank nodes only belong to their owning dataset.
        """
        return not self.blank or self.scope is dataset

    def to_term(self) -> IdentifiedNode:
        """rdflib term for use in triple patterns."""
        return BNode(self.value) if self.blank else URIRef(self.value)

    def __str__(self) -> str:
        return f"_:{self.value}" if self.blank else self.value
