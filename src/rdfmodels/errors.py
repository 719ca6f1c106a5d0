"""Exception taxonomy.

Validation errors are raised synchronously, before any dataset is scanned or
written. Per-item faults during discovery and decoding are logged and skipped
instead of raised; write faults are reported as a ``False`` return value.
"""


class RdfModelError(Exception):
    """Base class for all rdfmodels errors."""

    pass


class ValidationError(RdfModelError, TypeError):
    """Raised when a dataset, type, count, graph or identifier argument is malformed."""

    pass


class InvalidIdentifierError(ValidationError, ValueError):
    """Raised when a value cannot be parsed into a node identifier."""

    pass


class InvalidLanguageError(ValidationError, ValueError):
    """Raised when a language tag's base subtag is not a registered language."""

    pass


class UnknownAttributeError(RdfModelError, KeyError):
    """Raised when an attribute is not defined by the entity's kind."""

    def __init__(self, kind: str, attribute: str):
        super().__init__(f"Kind {kind!r} has no attribute {attribute!r}")
        self.kind = kind
        self.attribute = attribute

    def __str__(self) -> str:
        return str(self.args[0])
