"""Language registry backed by ISO 639 data from pycountry.

Usage:
    registry = get_language_registry()
    registry.from_code("en")   # LanguageDescriptor(code='en', ...)
    registry.from_code("xx")   # None
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import pycountry


@dataclass(frozen=True, slots=True)
class LanguageDescriptor:
    """Registered language a base subtag resolved to."""

    code: str
    name: str
    alpha_2: str | None = None
    alpha_3: str | None = None


@runtime_checkable
class LanguageRegistry(Protocol):
    """Lookup of base language subtags."""

    def from_code(self, code: str) -> LanguageDescriptor | None:
        """Resolve a base subtag such as ``en`` or ``fil``. None if unknown."""
        ...


class PycountryLanguageRegistry:
    """ISO 639-1 (two letter) and ISO 639-3 (three letter) codes.

    Lookups are cached per code; the underlying database is read-only.
    """

    def __init__(self) -> None:
        self._cache: dict[str, LanguageDescriptor | None] = {}

    def from_code(self, code: str) -> LanguageDescriptor | None:
        """Resolve a base subtag.

        Args:
            code: Two or three letter language code, any case.

        Returns:
            Descriptor if the code is registered, None otherwise.
        """
        key = code.lower()
        if key not in self._cache:
            self._cache[key] = self._lookup(key)
        return self._cache[key]

    @staticmethod
    def _lookup(code: str) -> LanguageDescriptor | None:
        if len(code) == 2:
            record = pycountry.languages.get(alpha_2=code)
        elif len(code) == 3:
            record = pycountry.languages.get(alpha_3=code)
        else:
            return None
        if record is None:
            return None
        return LanguageDescriptor(
            code=code,
            name=record.name,
            alpha_2=getattr(record, "alpha_2", None),
            alpha_3=getattr(record, "alpha_3", None),
        )


_registry = PycountryLanguageRegistry()


def get_language_registry() -> LanguageRegistry:
    """Access the process-wide language registry.

    Returns:
        The shared PycountryLanguageRegistry instance.
    """
    return _registry
