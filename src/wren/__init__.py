"""Wren — composable input validation with stateful form binding.

Rules are plain callables returning a ``ValidationOutcome``. Field and
form controllers run ordered rule lists, track dirty/touched/valid
state, and notify subscribers; any UI layer can drive them.

Basic usage::

    from wren import FormController, FormOptions, required, min_length, email

    form = FormController(
        {"name": [required, min_length(3)], "email": [required, email]},
        FormOptions(language="en"),
    )
    form.set_value("name", "ab")
    form.validate_all()       # False
    form.field("name").error  # "Please enter at least 3 characters"

Single values::

    from wren import Validator, required

    Validator("en").add_rule(required).validate("")
"""

__version__ = "0.1.0"
__all__ = [
    "BlurHandler",
    "ChangeHandler",
    "ConfigurationError",
    "FieldConfig",
    "FieldController",
    "FieldState",
    "FormController",
    "FormOptions",
    "MESSAGES",
    "UnknownFieldError",
    "ValidationOutcome",
    "Validator",
    "WrenError",
    "alphanumeric",
    "credit_card",
    "date",
    "email",
    "english_only",
    "get_language",
    "get_message",
    "korean_only",
    "max_length",
    "min_length",
    "number",
    "password",
    "pattern",
    "phone",
    "required",
    "url",
    "use_language",
    "validate",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "BlurHandler": "wren.forms.handlers",
    "ChangeHandler": "wren.forms.handlers",
    "ConfigurationError": "wren.errors",
    "FieldConfig": "wren.config",
    "FieldController": "wren.forms.field",
    "FieldState": "wren.forms.state",
    "FormController": "wren.forms.form",
    "FormOptions": "wren.config",
    "MESSAGES": "wren.messages",
    "UnknownFieldError": "wren.errors",
    "ValidationOutcome": "wren.validation.result",
    "Validator": "wren.validation.validator",
    "WrenError": "wren.errors",
    "alphanumeric": "wren.validation.rules",
    "credit_card": "wren.validation.rules",
    "date": "wren.validation.rules",
    "email": "wren.validation.rules",
    "english_only": "wren.validation.rules",
    "get_language": "wren.context",
    "get_message": "wren.messages",
    "korean_only": "wren.validation.rules",
    "max_length": "wren.validation.rules",
    "min_length": "wren.validation.rules",
    "number": "wren.validation.rules",
    "password": "wren.validation.rules",
    "pattern": "wren.validation.rules",
    "phone": "wren.validation.rules",
    "required": "wren.validation.rules",
    "url": "wren.validation.rules",
    "use_language": "wren.context",
    "validate": "wren.validation.validator",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
