"""Active language via ContextVar.

Rules that are not given an explicit language read it from here.
Controllers and ``Validator`` set it while they run their rules, so a
rule list written once follows whichever form runs it.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local across
    threads. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from wren._internal.types import DEFAULT_LANGUAGE, LANGUAGES, Language
from wren.errors import ConfigurationError

language_var: ContextVar[Language] = ContextVar("wren_language", default=DEFAULT_LANGUAGE)
"""The language rules use when none is passed explicitly."""


def get_language() -> Language:
    """Return the active language (``"ko"`` unless set)."""
    return language_var.get()


def check_language(language: str) -> Language:
    """Return *language* if supported, else raise ``ConfigurationError``."""
    if language not in LANGUAGES:
        msg = f"Unsupported language {language!r}. Supported: {', '.join(LANGUAGES)}"
        raise ConfigurationError(msg)
    return language  # type: ignore[return-value]


@contextmanager
def use_language(language: Language) -> Iterator[Language]:
    """Make *language* active for the duration of the block.

    Usage::

        with use_language("en"):
            required("")  # ValidationOutcome(False, "This field is required")
    """
    token = language_var.set(check_language(language))
    try:
        yield language
    finally:
        language_var.reset(token)
