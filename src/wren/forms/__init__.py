"""Stateful form binding — single fields and whole forms.

Controllers own field state, run rule lists on demand or on UI events,
and notify subscribers after every transition. They know nothing about
any UI toolkit.
"""

from wren.forms.field import FieldController
from wren.forms.form import FormController
from wren.forms.handlers import BlurHandler, ChangeHandler
from wren.forms.state import FieldState

__all__ = [
    "BlurHandler",
    "ChangeHandler",
    "FieldController",
    "FieldState",
    "FormController",
]
