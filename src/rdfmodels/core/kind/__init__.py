"""Entity kinds: attribute mapping tables, codecs and the kind registry."""

from rdfmodels.core.kind.core import KindRegistry, get_kind_registry
from rdfmodels.core.kind.kinds import BUILTIN_KINDS, PERSON, PRODUCT, RESOURCE
from rdfmodels.core.kind.models import AttributeSpec, Decoder, EntityKind, Encoder

__all__ = [
    # Models
    "AttributeSpec",
    "Decoder",
    "Encoder",
    "EntityKind",
    # Registry
    "KindRegistry",
    "get_kind_registry",
    # Built-in kinds
    "BUILTIN_KINDS",
    "PERSON",
    "PRODUCT",
    "RESOURCE",
]
