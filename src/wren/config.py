"""Form configuration.

FormOptions and FieldConfig are frozen dataclasses: immutable after
creation, checked once in ``__post_init__``.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from wren._internal.events import extract_value
from wren._internal.types import DEFAULT_LANGUAGE, Language, ValueExtractor
from wren.context import check_language
from wren.errors import ConfigurationError
from wren.validation.rules import Rule


@dataclass(frozen=True, slots=True)
class FormOptions:
    """Controller behaviour. Immutable after creation.

    Override what you need::

        options = FormOptions(validate_on_blur=True, language="en")
    """

    # Validation triggers
    validate_on_change: bool = False
    validate_on_blur: bool = False

    # Locale active while rules run
    language: Language = DEFAULT_LANGUAGE

    # Maps a raw change event to the new value
    extract_value: ValueExtractor = extract_value

    def __post_init__(self) -> None:
        check_language(self.language)
        if not callable(self.extract_value):
            msg = "FormOptions.extract_value must be callable"
            raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class FieldConfig:
    """One field of a form: its ordered rules and initial value."""

    rules: tuple[Rule, ...] = ()
    initial_value: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))
        for rule in self.rules:
            if not callable(rule):
                msg = f"Field rules must be callable, got {rule!r}"
                raise ConfigurationError(msg)
        if not isinstance(self.initial_value, str):
            msg = f"initial_value must be a str, got {type(self.initial_value).__name__}"
            raise ConfigurationError(msg)


def normalize_form_config(
    config: Mapping[str, FieldConfig | Iterable[Rule]],
) -> dict[str, FieldConfig]:
    """Coerce a form config into ``{name: FieldConfig}``, keeping key order.

    A bare iterable of rules is shorthand for ``FieldConfig(rules)``.
    """
    normalized: dict[str, FieldConfig] = {}
    for name, entry in config.items():
        if not isinstance(name, str) or not name:
            msg = f"Field names must be non-empty strings, got {name!r}"
            raise ConfigurationError(msg)
        if isinstance(entry, FieldConfig):
            normalized[name] = entry
        else:
            normalized[name] = FieldConfig(rules=tuple(entry))
    return normalized
