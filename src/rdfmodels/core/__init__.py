"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains identity, literal values, vocabulary and kind definitions.
    None of it touches a dataset. For the stateful layer that does, see
    entity/ and storage/.
"""

from rdfmodels.core.identity import NodeId, is_identifier, is_iri, parse
from rdfmodels.core.kind import (
    PERSON,
    PRODUCT,
    RESOURCE,
    AttributeSpec,
    EntityKind,
    KindRegistry,
    get_kind_registry,
)
from rdfmodels.core.literal import (
    LanguageDescriptor,
    LanguageRegistry,
    LocalizedString,
    from_literal,
    get_language_registry,
    to_literal,
)
from rdfmodels.core.vocabulary import PREFIXES

__all__ = [
    # Identity
    "NodeId",
    "parse",
    "is_identifier",
    "is_iri",
    # Literals
    "LocalizedString",
    "LanguageDescriptor",
    "LanguageRegistry",
    "get_language_registry",
    "from_literal",
    "to_literal",
    # Kinds
    "AttributeSpec",
    "EntityKind",
    "KindRegistry",
    "get_kind_registry",
    "PERSON",
    "PRODUCT",
    "RESOURCE",
    # Vocabulary
    "PREFIXES",
]
