"""Graph store backends and the capability protocol they satisfy."""

from rdfmodels.storage.local import LocalGraphStore
from rdfmodels.storage.protocol import (
    DEFAULT_GRAPH,
    GraphStore,
    Quad,
    ensure_graph_store,
    is_graph_store,
)
from rdfmodels.storage.rdflib_store import RdflibGraphStore

__all__ = [
    "DEFAULT_GRAPH",
    "GraphStore",
    "Quad",
    "is_graph_store",
    "ensure_graph_store",
    "LocalGraphStore",
    "RdflibGraphStore",
]
