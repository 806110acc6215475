"""Rule-list aggregation for single values.

``run_rules`` is the one place rule lists are evaluated: in order,
stopping at the first failure. ``Validator`` and both form controllers
go through it.
"""

from collections.abc import Iterable
from typing import Self

from wren._internal.types import DEFAULT_LANGUAGE, Language
from wren.context import check_language, use_language
from wren.validation.result import ValidationOutcome
from wren.validation.rules import Rule


def run_rules(value: str, rules: Iterable[Rule]) -> ValidationOutcome:
    """Run *rules* against *value* and return the first failure, or a pass.

    Rules after the first failing one are not called.
    """
    for rule in rules:
        outcome = rule(value)
        if not outcome.is_valid:
            return outcome
    return ValidationOutcome.ok()


def validate(value: str, rules: Iterable[Rule]) -> ValidationOutcome:
    """Validate *value* against *rules* in the active language.

    Usage::

        outcome = validate("ab", [required, min_length(3)])
        if not outcome:
            print(outcome.error)
    """
    return run_rules(value, rules)


class Validator:
    """A reusable, chainable rule list bound to a language.

    Usage::

        v = Validator("en").add_rule(required).add_rule(max_length(20))
        v.validate("")  # ValidationOutcome(False, "This field is required")
    """

    __slots__ = ("_language", "_rules")

    def __init__(self, language: Language = DEFAULT_LANGUAGE) -> None:
        self._language: Language = check_language(language)
        self._rules: list[Rule] = []

    @property
    def language(self) -> Language:
        return self._language

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def set_language(self, language: Language) -> Self:
        self._language = check_language(language)
        return self

    def add_rule(self, rule: Rule) -> Self:
        self._rules.append(rule)
        return self

    def validate(self, value: str) -> ValidationOutcome:
        """Run the rules in order with this validator's language active."""
        with use_language(self._language):
            return run_rules(value, self._rules)

    def reset(self) -> Self:
        """Remove every rule. The language is kept."""
        self._rules.clear()
        return self

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Validator(language={self._language!r}, rules={len(self._rules)})"
