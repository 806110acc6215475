"""Validation outcome — immutable result of running one rule or a rule list."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """The outcome of validating a single string value.

    ``error`` is only ever set when ``is_valid`` is False. The outcome
    is falsy when invalid, so you can write::

        outcome = required(value)
        if not outcome:
            show(outcome.error)
    """

    is_valid: bool
    error: str | None = None

    def __post_init__(self) -> None:
        # A passing outcome never carries an error message
        if self.is_valid and self.error is not None:
            object.__setattr__(self, "error", None)

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        """A passing outcome."""
        return _OK

    @classmethod
    def fail(cls, error: str | None) -> "ValidationOutcome":
        """A failing outcome carrying *error*."""
        return cls(False, error)

    def __bool__(self) -> bool:
        """Falsy when invalid, for ``if not outcome:``."""
        return self.is_valid


_OK = ValidationOutcome(True)
