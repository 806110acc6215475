"""Event handlers bound to one form field.

``FormController.handle_change(name)`` and ``handle_blur(name)`` return
these instead of closures: the field name is an explicit attribute,
handlers compare equal when bound to the same form and field, and a UI
layer can cache them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wren.forms.form import FormController


@dataclass(frozen=True, slots=True, eq=False)
class ChangeHandler:
    """Calls ``form.change(name, event)`` when invoked with a change event."""

    form: FormController
    name: str

    def __call__(self, event: Any) -> None:
        self.form.change(self.name, event)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChangeHandler):
            return NotImplemented
        return self.form is other.form and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self.form), self.name, "change"))


@dataclass(frozen=True, slots=True, eq=False)
class BlurHandler:
    """Calls ``form.blur(name)`` when invoked. Any event argument is ignored."""

    form: FormController
    name: str

    def __call__(self, event: Any = None) -> None:
        self.form.blur(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlurHandler):
            return NotImplemented
        return self.form is other.form and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self.form), self.name, "blur"))
