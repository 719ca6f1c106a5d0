"""Localized string value.

Usage:
    name = LocalizedString("Alice", "en")
    name.base_language   # "en"
    name.n3()            # '"Alice"@en'
    LocalizedString("x", "xx-zz")  # InvalidLanguageError
"""

from __future__ import annotations

from dataclasses import KW_ONLY, InitVar, dataclass, field

from rdflib import Literal

from rdfmodels.core.literal.language import (
    LanguageDescriptor,
    LanguageRegistry,
    get_language_registry,
)
from rdfmodels.errors import InvalidLanguageError, ValidationError


@dataclass(frozen=True, slots=True)
class LocalizedString:
    """Immutable text with an optional language tag.

    A present tag must have a registered base subtag (the part before the first
    hyphen). Tags are lowercased, as RDF language tags compare case-insensitively.
    """

    text: str
    language: str | None = None
    _: KW_ONLY
    registry: InitVar[LanguageRegistry | None] = None
    descriptor: LanguageDescriptor | None = field(
        default=None, init=False, compare=False, repr=False
    )

    def __post_init__(self, registry: LanguageRegistry | None) -> None:
        if not isinstance(self.text, str):
            raise ValidationError(f"Not a string: {self.text!r}")
        # Literal and other str subclasses are stored as plain text
        object.__setattr__(self, "text", str(self.text))

        language = self.language
        if language is None or language == "":
            object.__setattr__(self, "language", None)
            return
        if not isinstance(language, str):
            raise ValidationError(f"Not a language tag: {language!r}")

        language = language.lower()
        base = language.split("-", 1)[0]
        descriptor = (registry or get_language_registry()).from_code(base)
        if descriptor is None:
            raise InvalidLanguageError(f"Not a registered language: {base!r} in {language!r}")
        object.__setattr__(self, "language", language)
        object.__setattr__(self, "descriptor", descriptor)

    @property
    def base_language(self) -> str | None:
        """Base subtag of the language tag, e.g. ``en`` for ``en-gb``."""
        if self.language is None:
            return None
        return self.language.split("-", 1)[0]

    def to_literal(self) -> Literal:
        """rdflib literal: language-tagged if a language is set, plain otherwise."""
        return Literal(self.text, lang=self.language)

    def n3(self) -> str:
        """Turtle form, e.g. ``"Alice"@en``."""
        return self.to_literal().n3()

    def __str__(self) -> str:
        return self.text
