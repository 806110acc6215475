"""Built-in validation rules.

Each rule is a callable with the signature::

    def rule(value: str, language: Language | None = None) -> ValidationOutcome:
        ...

Controllers call rules with the value only; the message language then
comes from the active context (see ``wren.context``). Pass ``language``
to pin it.

Parameterized rules are factory functions that return a rule::

    def min_length(n: int) -> Rule:
        def check(value: str, language: Language | None = None) -> ValidationOutcome:
            ...
        return check

Custom rules follow the same protocol — any callable matching
``(str) -> ValidationOutcome`` can sit in a rule list.
"""

import re
from collections.abc import Callable
from datetime import date as _date
from urllib.parse import urlsplit

from wren._internal.types import Language
from wren.context import get_language
from wren.messages import get_message
from wren.validation.result import ValidationOutcome

# Type alias for a rule function
type Rule = Callable[[str], ValidationOutcome]


def _outcome(passed: bool, kind: str, language: Language | None, *args: int) -> ValidationOutcome:
    if passed:
        return ValidationOutcome.ok()
    return ValidationOutcome.fail(get_message(kind, language or get_language(), *args))


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: str, language: Language | None = None) -> ValidationOutcome:
    """Field must contain something other than whitespace."""
    return _outcome(bool(value.strip()), "required", language)


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int, language: Language | None = None) -> Rule:
    """String must be at least *n* characters."""

    def check(value: str, lang: Language | None = None) -> ValidationOutcome:
        return _outcome(len(value) >= n, "min_length", lang or language, n)

    return check


def max_length(n: int, language: Language | None = None) -> Rule:
    """String must be at most *n* characters."""

    def check(value: str, lang: Language | None = None) -> ValidationOutcome:
        return _outcome(len(value) <= n, "max_length", lang or language, n)

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structure only: one @, no whitespace, a dot in the domain
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Korean mobile numbers: 010-1234-5678, 01012345678, 011-123-4567
_PHONE_RE = re.compile(r"(01[0-9])-?([0-9]{3,4})-?([0-9]{4})")

_WHITESPACE_RE = re.compile(r"\s")


def email(value: str, language: Language | None = None) -> ValidationOutcome:
    """Value must look like an email address (basic format check)."""
    return _outcome(_EMAIL_RE.fullmatch(value) is not None, "email", language)


def phone(value: str, language: Language | None = None) -> ValidationOutcome:
    """Value must be a Korean mobile number. Whitespace is ignored."""
    compact = _WHITESPACE_RE.sub("", value)
    return _outcome(_PHONE_RE.fullmatch(compact) is not None, "phone", language)


_SPECIAL_RE = re.compile(r'[!@#$%^&*(),.?":{}|<>]')
_LETTER_RE = re.compile(r"[a-zA-Z]")
_DIGIT_RE = re.compile(r"[0-9]")


def password(value: str, language: Language | None = None) -> ValidationOutcome:
    """At least 8 characters with a letter, a digit, and a special character."""
    strong = (
        len(value) >= 8
        and _LETTER_RE.search(value) is not None
        and _DIGIT_RE.search(value) is not None
        and _SPECIAL_RE.search(value) is not None
    )
    return _outcome(strong, "password", language)


# Schemes that need a host after "//"
_HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def url(value: str, language: Language | None = None) -> ValidationOutcome:
    """Value must be an absolute URL (``https://example.com``, ``mailto:a@b.c``)."""
    return _outcome(_is_absolute_url(value), "url", language)


def _is_absolute_url(value: str) -> bool:
    if not value or _WHITESPACE_RE.search(value):
        return False
    try:
        parts = urlsplit(value)
        parts.port  # noqa: B018 (raises ValueError on a malformed port)
    except ValueError:
        return False
    if not parts.scheme:
        return False
    if parts.scheme.lower() in _HIERARCHICAL_SCHEMES:
        return bool(parts.netloc)
    return bool(parts.netloc or parts.path)


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

_NUMBER_RE = re.compile(r"[0-9]+")
_ALNUM_RE = re.compile(r"[a-zA-Z0-9]+")
_KOREAN_RE = re.compile(r"[ㄱ-ㅎ가-힣\s]+")
_ENGLISH_RE = re.compile(r"[a-zA-Z\s]+")


def number(value: str, language: Language | None = None) -> ValidationOutcome:
    """Digits only (no sign, no decimal point)."""
    return _outcome(_NUMBER_RE.fullmatch(value) is not None, "number", language)


def alphanumeric(value: str, language: Language | None = None) -> ValidationOutcome:
    """ASCII letters and digits only."""
    return _outcome(_ALNUM_RE.fullmatch(value) is not None, "alphanumeric", language)


def korean_only(value: str, language: Language | None = None) -> ValidationOutcome:
    """Hangul syllables, jamo consonants, and whitespace only."""
    return _outcome(_KOREAN_RE.fullmatch(value) is not None, "korean_only", language)


def english_only(value: str, language: Language | None = None) -> ValidationOutcome:
    """ASCII letters and whitespace only."""
    return _outcome(_ENGLISH_RE.fullmatch(value) is not None, "english_only", language)


# ---------------------------------------------------------------------------
# Checksums and dates
# ---------------------------------------------------------------------------

_CARD_SEPARATORS_RE = re.compile(r"[\s-]")


def credit_card(value: str, language: Language | None = None) -> ValidationOutcome:
    """Card number must pass the Luhn checksum. Spaces and dashes are ignored."""
    digits = _CARD_SEPARATORS_RE.sub("", value)
    if _NUMBER_RE.fullmatch(digits) is None:
        return _outcome(False, "credit_card", language)
    return _outcome(luhn_checksum(digits) % 10 == 0, "credit_card", language)


def luhn_checksum(digits: str) -> int:
    """Luhn sum of an ASCII digit string (valid numbers sum to a multiple of 10)."""
    total = 0
    for i, ch in enumerate(reversed(digits)):
        digit = int(ch)
        if i % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total


_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def date(value: str, language: Language | None = None) -> ValidationOutcome:
    """``YYYY-MM-DD`` naming a real calendar day."""
    if _DATE_RE.fullmatch(value) is None:
        return _outcome(False, "date", language)
    try:
        _date.fromisoformat(value)
    except ValueError:
        return _outcome(False, "date", language)
    return ValidationOutcome.ok()


# ---------------------------------------------------------------------------
# Custom
# ---------------------------------------------------------------------------


def pattern(regex: str | re.Pattern[str], message: str) -> Rule:
    """Value must contain a match for *regex*; fails with *message*.

    Anchor the expression (``^...$``) to require a full match.
    """
    compiled = re.compile(regex)

    def check(value: str, language: Language | None = None) -> ValidationOutcome:
        if compiled.search(value) is None:
            return ValidationOutcome.fail(message)
        return ValidationOutcome.ok()

    return check
