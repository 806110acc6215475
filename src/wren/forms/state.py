"""Field state records and the transitions shared by both controllers.

``FieldState`` is frozen; every transition returns a new record, so a
snapshot handed to a caller or listener never changes afterwards.

Lifecycle::

    pristine --set_value/validate--> dirty --blur--> touched
                                        \\--validate--> valid | invalid

``is_valid`` is False both before the first validation and after a
failing one. The two are told apart by ``error``: a failing rule
carries a message, a never-validated field has none.
"""

from dataclasses import dataclass, replace

from wren.validation.result import ValidationOutcome


@dataclass(frozen=True, slots=True)
class FieldState:
    """One field's value, last validation result, and interaction flags."""

    value: str = ""
    error: str | None = None
    is_valid: bool = False
    is_dirty: bool = False
    is_touched: bool = False


def initial_state(value: str = "") -> FieldState:
    return FieldState(value=value)


def with_value(state: FieldState, value: str, *, dirty: bool) -> FieldState:
    if dirty:
        return replace(state, value=value, is_dirty=True)
    return replace(state, value=value)


def with_outcome(state: FieldState, outcome: ValidationOutcome) -> FieldState:
    """Record a validation outcome. Validating always marks the field dirty."""
    return replace(state, error=outcome.error, is_valid=outcome.is_valid, is_dirty=True)


def with_error(state: FieldState, error: str) -> FieldState:
    return replace(state, error=error, is_valid=False)


def touched(state: FieldState) -> FieldState:
    return replace(state, is_touched=True)
