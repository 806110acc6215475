"""Wren exception hierarchy.

Validation failures are data (``ValidationOutcome``), never exceptions.
These types cover programming errors: bad configuration and references
to fields a form does not know about.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when options or field configuration are invalid.

    Also raised when an optional dependency needed for a feature
    is not installed.
    """


class UnknownFieldError(WrenError, KeyError):
    """Raised when a form operation names a field it was not configured with.

    Subclasses ``KeyError`` so ``except KeyError`` keeps working for
    callers treating a form like a mapping.
    """

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        super().__init__(name)

    def __str__(self) -> str:
        if self.known:
            return f"Unknown field {self.name!r}. Known fields: {', '.join(self.known)}"
        return f"Unknown field {self.name!r}"
