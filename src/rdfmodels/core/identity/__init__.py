"""Node identity: IRIs and dataset-scoped blank nodes."""

from rdfmodels.core.identity.models import NodeId
from rdfmodels.core.identity.operations import is_identifier, is_iri, parse

__all__ = [
    "NodeId",
    "is_identifier",
    "is_iri",
    "parse",
]
