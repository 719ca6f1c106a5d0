"""Decoding and encoding of textual literals."""

from __future__ import annotations

from typing import Any

from rdflib import Literal

from rdfmodels.core.literal.language import LanguageRegistry
from rdfmodels.core.literal.models import LocalizedString
from rdfmodels.core.vocabulary import LANG_STRING, STRING


def is_plain_literal(term: Any) -> bool:
    """Untagged literal that is untyped or typed ``xsd:string``."""
    return (
        isinstance(term, Literal)
        and not term.language
        and (term.datatype is None or term.datatype == STRING)
    )


def is_language_literal(term: Any) -> bool:
    """Language-tagged literal (``rdf:langString``)."""
    return isinstance(term, Literal) and bool(term.language or term.datatype == LANG_STRING)


def from_literal(term: Any, registry: LanguageRegistry | None = None) -> LocalizedString | None:
    """Decode a store term into a LocalizedString.

    Two encodings are recognized: plain (or ``xsd:string``) literals, which decode
    without a language, and language-tagged literals. Anything else, including
    IRIs and literals of other datatypes, decodes to None.

    Args:
        term: Object term from a quad.
        registry: Language registry (defaults to the process-wide one).

    Returns:
        Decoded value, or None when the term has neither shape.

    Raises:
        InvalidLanguageError: If the literal's language is not registered.
    """
    if is_language_literal(term):
        return LocalizedString(str(term), term.language, registry=registry)
    if is_plain_literal(term):
        return LocalizedString(str(term), registry=registry)
    return None


def to_literal(value: LocalizedString | str) -> Literal:
    """Encode a LocalizedString (or bare str) as an rdflib literal."""
    if isinstance(value, LocalizedString):
        return value.to_literal()
    if isinstance(value, str):
        return Literal(value)
    raise TypeError(f"Cannot encode {type(value).__name__} as a textual literal")
