"""Textual literals: localized strings and the language registry they validate against."""

from rdfmodels.core.literal.language import (
    LanguageDescriptor,
    LanguageRegistry,
    PycountryLanguageRegistry,
    get_language_registry,
)
from rdfmodels.core.literal.models import LocalizedString
from rdfmodels.core.literal.operations import (
    from_literal,
    is_language_literal,
    is_plain_literal,
    to_literal,
)

__all__ = [
    "LocalizedString",
    "LanguageDescriptor",
    "LanguageRegistry",
    "PycountryLanguageRegistry",
    "get_language_registry",
    "from_literal",
    "to_literal",
    "is_plain_literal",
    "is_language_literal",
]
