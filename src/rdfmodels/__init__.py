"""rdfmodels: typed entities projected from RDF triple stores.

Usage:
    from rdfmodels import PERSON, LocalGraphStore, LocalizedString, read_from

    store = LocalGraphStore()
    alice = PERSON.create("https://example.org/alice")
    alice.buffer("names").add(LocalizedString("Alice", "en"))
    alice.buffer("emails").add("alice@example.org")
    alice.write_to(store)

    for person in read_from(store, kind=PERSON):
        print(person.id, person.get("names"), person.get("emails"))
"""

__version__ = "0.1.0"

# Configuration
from rdfmodels.config import ModelSettings, configure_logging, get_settings

# Core primitives
from rdfmodels.core import (
    PERSON,
    PREFIXES,
    PRODUCT,
    RESOURCE,
    AttributeSpec,
    EntityKind,
    KindRegistry,
    LanguageDescriptor,
    LanguageRegistry,
    LocalizedString,
    NodeId,
    from_literal,
    get_kind_registry,
    get_language_registry,
    is_identifier,
    parse,
    to_literal,
)

# Entities
from rdfmodels.entity import (
    Entity,
    read_from,
    read_from_async,
    read_one,
    read_one_async,
    write_to,
    write_to_async,
)

# Errors
from rdfmodels.errors import (
    InvalidIdentifierError,
    InvalidLanguageError,
    RdfModelError,
    UnknownAttributeError,
    ValidationError,
)

# Storage
from rdfmodels.storage import (
    DEFAULT_GRAPH,
    GraphStore,
    LocalGraphStore,
    Quad,
    RdflibGraphStore,
    is_graph_store,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "ModelSettings",
    "configure_logging",
    "get_settings",
    # Core
    "NodeId",
    "parse",
    "is_identifier",
    "LocalizedString",
    "LanguageDescriptor",
    "LanguageRegistry",
    "get_language_registry",
    "from_literal",
    "to_literal",
    "AttributeSpec",
    "EntityKind",
    "KindRegistry",
    "get_kind_registry",
    "PERSON",
    "PRODUCT",
    "RESOURCE",
    "PREFIXES",
    # Entities
    "Entity",
    "read_from",
    "read_one",
    "read_from_async",
    "read_one_async",
    "write_to",
    "write_to_async",
    # Errors
    "RdfModelError",
    "ValidationError",
    "InvalidIdentifierError",
    "InvalidLanguageError",
    "UnknownAttributeError",
    # Storage
    "GraphStore",
    "Quad",
    "DEFAULT_GRAPH",
    "LocalGraphStore",
    "RdflibGraphStore",
    "is_graph_store",
]
