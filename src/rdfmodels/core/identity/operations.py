"""Identifier parsing and validation."""

from __future__ import annotations

import re
from typing import Any

from rdflib.term import BNode, URIRef

from rdfmodels.core.identity.models import NodeId
from rdfmodels.errors import InvalidIdentifierError

# RFC 3987 scheme followed by at least one character; no characters IRIs forbid.
_IRI_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:[^\s<>"{}|\\^`]+$')
_BLANK_RE = re.compile(r"^_:([A-Za-z0-9_][A-Za-z0-9_.\-]*)$")


def is_iri(value: str) -> bool:
    """Check whether a string is a syntactically valid absolute IRI."""
    return bool(_IRI_RE.match(value))


def parse(value: Any, *, scope: Any = None) -> NodeId:
    """Parse a value into a NodeId.

    Accepts NodeId (returned unchanged), rdflib URIRef and BNode terms, IRI
    strings and ``_:label`` blank-node strings. Blank nodes need the dataset
    that owns them.

    Args:
        value: Value to parse.
        scope: Owning dataset, required for blank nodes.

    Returns:
        Parsed identifier.

    Raises:
        InvalidIdentifierError: If the value is not an identifier, or is a blank
            node without a scope.
    """
    if isinstance(value, NodeId):
        return value
    if isinstance(value, BNode):
        return _blank(str(value), scope)
    if isinstance(value, URIRef):
        if not is_iri(str(value)):
            raise InvalidIdentifierError(f"Not an IRI: {value!r}")
        return NodeId.iri(str(value))
    if isinstance(value, str):
        match = _BLANK_RE.match(value)
        if match:
            return _blank(match.group(1), scope)
        if is_iri(value):
            return NodeId.iri(value)
        raise InvalidIdentifierError(f"Not an identifier: {value!r}")
    raise InvalidIdentifierError(f"Not an identifier: {value!r}")


def _blank(label: str, scope: Any) -> NodeId:
    if scope is None:
        raise InvalidIdentifierError(f"Blank node _:{label} needs an owning dataset")
    return NodeId.blank_node(label, scope)


def is_identifier(value: Any) -> bool:
    """Check whether a value can serve as a node identifier.

    Blank-node strings and terms count even without a scope; they only need one
    once parsed.
    """
    if isinstance(value, (NodeId, BNode)):
        return True
    if isinstance(value, str):
        return is_iri(value) or bool(_BLANK_RE.match(value))
    return False
