"""Single-field controller.

Owns one field's state and runs its rule list. A UI layer wires its
input events to ``on_change``/``on_blur`` and re-renders from the
state passed to ``subscribe`` listeners::

    name = FieldController([required, min_length(3)],
                           FormOptions(validate_on_blur=True))
    name.subscribe(render)
    name.on_change(event)
    name.on_blur()
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from wren.config import FormOptions
from wren.context import use_language
from wren.forms import state as _state
from wren.forms.state import FieldState
from wren.validation.result import ValidationOutcome
from wren.validation.rules import Rule
from wren.validation.validator import run_rules

logger = logging.getLogger("wren.forms")

type FieldListener = Callable[[FieldState], None]


class FieldController:
    """Value, dirtiness, touch state, and validity of one input."""

    __slots__ = ("_listeners", "_options", "_rules", "_state")

    def __init__(self, rules: Iterable[Rule] = (), options: FormOptions | None = None) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)
        self._options = options or FormOptions()
        self._state = _state.initial_state()
        self._listeners: list[FieldListener] = []

    # -- State access --

    @property
    def state(self) -> FieldState:
        """Current state snapshot."""
        return self._state

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def options(self) -> FormOptions:
        return self._options

    @property
    def value(self) -> str:
        return self._state.value

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def is_valid(self) -> bool:
        return self._state.is_valid

    @property
    def is_dirty(self) -> bool:
        return self._state.is_dirty

    @property
    def is_touched(self) -> bool:
        return self._state.is_touched

    # -- Operations --

    def set(self, value: str) -> None:
        """Store *value*. Neither validates nor marks the field dirty."""
        self._commit(_state.with_value(self._state, value, dirty=False))

    def validate(self, value: str | None = None) -> ValidationOutcome:
        """Run the rules against *value* (or the stored value).

        Stops at the first failing rule and records its error. Always
        marks the field dirty. The stored value is not replaced by
        *value*.
        """
        target = self._state.value if value is None else value
        with use_language(self._options.language):
            outcome = run_rules(target, self._rules)
        logger.debug("field validated: valid=%s error=%r", outcome.is_valid, outcome.error)
        self._commit(_state.with_outcome(self._state, outcome))
        return outcome

    def on_change(self, event: Any) -> None:
        """Handle an input change: store the new value, validate if configured.

        The field only becomes dirty through the validation this may run.
        """
        value = self._options.extract_value(event)
        self._commit(_state.with_value(self._state, value, dirty=False))
        if self._options.validate_on_change:
            self.validate(value)

    def on_blur(self) -> None:
        """Handle focus loss: mark touched, validate if configured."""
        self.mark_touched()
        if self._options.validate_on_blur:
            self.validate()

    def mark_touched(self) -> None:
        self._commit(_state.touched(self._state))

    def reset(self) -> None:
        """Clear the value and every flag."""
        self._commit(_state.initial_state())

    # -- Subscription --

    def subscribe(self, listener: FieldListener) -> Callable[[], None]:
        """Call *listener* with the new state after every transition.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: FieldState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    def __repr__(self) -> str:
        return f"FieldController(rules={len(self._rules)}, state={self._state!r})"
