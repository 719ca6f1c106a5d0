"""Decoders and encoders used by attribute specs.

Decoders return None for terms of the wrong shape, which the accessor skips
silently. Values of the right shape but malformed content are logged and
skipped here, or raised for the accessor to log.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, unquote, urlsplit

from rdflib import Literal, URIRef
from rdflib.term import Node

from rdfmodels.config import get_settings
from rdfmodels.core.literal import (
    LocalizedString,
    from_literal,
    is_language_literal,
    is_plain_literal,
    to_literal,
)

logger = logging.getLogger(__name__)

MAILTO = "mailto"
_MAILBOX_SAFE = "@.+-_~!$&'*="


def decode_localized(term: Node) -> LocalizedString | None:
    """Plain or language-tagged literal."""
    return from_literal(term)


def decode_language_tagged(term: Node) -> LocalizedString | None:
    """Language-tagged literal only."""
    if not is_language_literal(term):
        return None
    return from_literal(term)


def decode_text(term: Node) -> str | None:
    """Plain or ``xsd:string`` literal as bare text."""
    if not is_plain_literal(term):
        return None
    return str(term)


def encode_localized(value: LocalizedString | str) -> Literal:
    return to_literal(value)


def encode_text(value: Any) -> Literal:
    if isinstance(value, LocalizedString):
        return Literal(value.text)
    if not isinstance(value, str):
        raise TypeError(f"Cannot encode {type(value).__name__} as text")
    return Literal(value)


def is_email_address(address: str) -> bool:
    """Loose mailbox check: a non-empty local part, an ``@`` and a non-empty domain."""
    at = address.find("@")
    return len(address) >= 3 and 1 <= at < len(address) - 1


def parse_mailto(iri: str) -> str | None:
    """Extract the address from a ``mailto:`` IRI.

    Args:
        iri: IRI text.

    Returns:
        The address, or None if the IRI is not a well-formed mailto.
    """
    parts = urlsplit(iri)
    if parts.scheme.lower() != MAILTO:
        return None
    address = unquote(parts.path).strip()
    if not is_email_address(address):
        return None
    return address


def decode_mailbox(term: Node) -> str | None:
    """Address from a ``mailto:`` IRI, or from a literal in lenient mode.

    Non-mailto IRIs are ignored. Malformed mailto IRIs and literals are logged
    and skipped.
    """
    if isinstance(term, URIRef):
        if urlsplit(str(term)).scheme.lower() != MAILTO:
            return None
        address = parse_mailto(str(term))
        if address is None:
            logger.warning("Skipping malformed mailbox IRI <%s>", term)
        return address
    if isinstance(term, Literal) and get_settings().lenient_email_literals:
        if not (is_plain_literal(term) or is_language_literal(term)):
            return None
        address = str(term).strip()
        if address.lower().startswith(f"{MAILTO}:"):
            address = parse_mailto(address) or ""
        if not is_email_address(address):
            logger.warning("Skipping malformed mailbox literal %s", term.n3())
            return None
        return address
    return None


def encode_mailbox(value: Any) -> URIRef:
    """Bare address -> ``mailto:`` IRI."""
    if not isinstance(value, str):
        raise TypeError(f"Cannot encode {type(value).__name__} as a mailbox")
    address = parse_mailto(value) if value.lower().startswith(f"{MAILTO}:") else value.strip()
    if address is None or not is_email_address(address):
        raise ValueError(f"Not an email address: {value!r}")
    return URIRef(f"{MAILTO}:{quote(address, safe=_MAILBOX_SAFE)}")
