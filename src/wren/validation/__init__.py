"""Validation rules — composable, localized, ordered.

Usage::

    from wren.validation import validate, required, min_length, email

    outcome = validate(value, [required, min_length(3)])
    if not outcome:
        print(outcome.error)

Rule lists run in order and stop at the first failing rule.
"""

from wren.validation.result import ValidationOutcome
from wren.validation.rules import (
    Rule,
    alphanumeric,
    credit_card,
    date,
    email,
    english_only,
    korean_only,
    luhn_checksum,
    max_length,
    min_length,
    number,
    password,
    pattern,
    phone,
    required,
    url,
)
from wren.validation.validator import Validator, run_rules, validate

__all__ = [
    "Rule",
    "ValidationOutcome",
    "Validator",
    "alphanumeric",
    "credit_card",
    "date",
    "email",
    "english_only",
    "korean_only",
    "luhn_checksum",
    "max_length",
    "min_length",
    "number",
    "password",
    "pattern",
    "phone",
    "required",
    "run_rules",
    "url",
    "validate",
]
