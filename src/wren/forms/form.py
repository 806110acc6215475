"""Multi-field form controller.

Owns a ``FieldState`` per configured field, mirrors the single-field
operations by name, and derives whole-form validity from the last
validation result of every field::

    form = FormController(
        {
            "email": [required, email],
            "nickname": FieldConfig([required, max_length(20)], initial_value="guest"),
        },
        FormOptions(validate_on_blur=True, language="en"),
    )
    form.set_value("email", "a@b.co")
    if form.validate_all():
        submit(form.values)

Field names are fixed at construction. Any operation on a name the
form was not built with raises ``UnknownFieldError``.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from wren.config import FieldConfig, FormOptions, normalize_form_config
from wren.context import use_language
from wren.errors import UnknownFieldError
from wren.forms import state as _state
from wren.forms.handlers import BlurHandler, ChangeHandler
from wren.forms.state import FieldState
from wren.validation.rules import Rule
from wren.validation.validator import run_rules

logger = logging.getLogger("wren.forms")

type FormListener = Callable[[str, FieldState], None]


class FormController:
    """State and validation for a fixed set of named fields."""

    __slots__ = ("_config", "_fields", "_initial", "_listeners", "_options")

    def __init__(
        self,
        config: Mapping[str, FieldConfig | Iterable[Rule]],
        options: FormOptions | None = None,
    ) -> None:
        self._config: Mapping[str, FieldConfig] = MappingProxyType(normalize_form_config(config))
        self._options = options or FormOptions()
        self._initial: Mapping[str, FieldState] = MappingProxyType(
            {name: _state.initial_state(fc.initial_value) for name, fc in self._config.items()}
        )
        self._fields: dict[str, FieldState] = dict(self._initial)
        self._listeners: list[FormListener] = []

    # -- State access --

    @property
    def config(self) -> Mapping[str, FieldConfig]:
        return self._config

    @property
    def options(self) -> FormOptions:
        return self._options

    @property
    def fields(self) -> Mapping[str, FieldState]:
        """Read-only live view of every field's state."""
        return MappingProxyType(self._fields)

    @property
    def names(self) -> tuple[str, ...]:
        """Field names in configuration order."""
        return tuple(self._config)

    @property
    def values(self) -> dict[str, str]:
        return {name: fs.value for name, fs in self._fields.items()}

    @property
    def errors(self) -> dict[str, str]:
        """Fields that currently carry an error message."""
        return {name: fs.error for name, fs in self._fields.items() if fs.error is not None}

    @property
    def is_valid(self) -> bool:
        """True iff every field passed its most recent validation.

        Read from state, never re-validated. Fields that have not been
        validated count as invalid, so a fresh form is invalid.
        """
        return all(fs.is_valid for fs in self._fields.values())

    @property
    def is_dirty(self) -> bool:
        return any(fs.is_dirty for fs in self._fields.values())

    def field(self, name: str) -> FieldState:
        """Current state of field *name*."""
        self._check(name)
        return self._fields[name]

    # -- Mutators --

    def set_value(self, name: str, value: str) -> None:
        """Store *value* for *name* and mark it dirty. Does not validate."""
        self._check(name)
        self._commit(name, _state.with_value(self._fields[name], value, dirty=True))

    def set_error(self, name: str, error: str) -> None:
        """Mark *name* invalid with *error* without running its rules.

        For errors the local rules cannot know about (a server rejecting
        a taken username). The next ``validate(name)`` replaces it.
        """
        self._check(name)
        logger.debug("error injected on %r: %r", name, error)
        self._commit(name, _state.with_error(self._fields[name], error))

    def mark_touched(self, name: str) -> None:
        self._check(name)
        self._commit(name, _state.touched(self._fields[name]))

    def bind(self, data: Mapping[str, str]) -> None:
        """``set_value`` every configured field present in *data*.

        Keys the form does not know are ignored, so a whole submitted
        form mapping can be passed as-is.
        """
        for name in self._config:
            if name in data:
                self.set_value(name, data[name])

    # -- Validation --

    def validate(self, name: str) -> bool:
        """Run *name*'s rules on its stored value; return whether it passed."""
        self._check(name)
        current = self._fields[name]
        with use_language(self._options.language):
            outcome = run_rules(current.value, self._config[name].rules)
        logger.debug("field %r validated: valid=%s error=%r", name, outcome.is_valid, outcome.error)
        self._commit(name, _state.with_outcome(self._fields[name], outcome))
        return outcome.is_valid

    def validate_all(self) -> bool:
        """Validate every field in configuration order.

        Every field is validated even after one fails.
        """
        results = [self.validate(name) for name in self._config]
        return all(results)

    # -- Reset --

    def reset(self, name: str) -> None:
        """Restore *name* to its configured initial value with all flags cleared."""
        self._check(name)
        logger.debug("field %r reset", name)
        self._commit(name, self._initial[name])

    def reset_all(self) -> None:
        """Restore every field to its state at construction."""
        logger.debug("form reset")
        for name in self._config:
            self._commit(name, self._initial[name])

    # -- UI event wiring --

    def change(self, name: str, event: Any) -> None:
        """Apply a change *event* to *name*: set the value, validate if configured."""
        self._check(name)
        self.set_value(name, self._options.extract_value(event))
        if self._options.validate_on_change:
            self.validate(name)

    def blur(self, name: str) -> None:
        """Apply focus loss to *name*: mark touched, validate if configured."""
        self.mark_touched(name)
        if self._options.validate_on_blur:
            self.validate(name)

    def handle_change(self, name: str) -> ChangeHandler:
        """Return a change handler bound to *name*."""
        self._check(name)
        return ChangeHandler(self, name)

    def handle_blur(self, name: str) -> BlurHandler:
        """Return a blur handler bound to *name*."""
        self._check(name)
        return BlurHandler(self, name)

    # -- Subscription --

    def subscribe(self, listener: FormListener) -> Callable[[], None]:
        """Call ``listener(name, state)`` after every field transition.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- Internals --

    def _check(self, name: str) -> None:
        if name not in self._config:
            raise UnknownFieldError(name, tuple(self._config))

    def _commit(self, name: str, new_state: FieldState) -> None:
        self._fields[name] = new_state
        for listener in list(self._listeners):
            listener(name, new_state)

    def __contains__(self, name: object) -> bool:
        return name in self._config

    def __repr__(self) -> str:
        return f"FormController(fields={list(self._config)!r}, is_valid={self.is_valid})"
