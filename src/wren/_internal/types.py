"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, Literal, TypeAlias

# Supported message locales
Language: TypeAlias = Literal["ko", "en"]

LANGUAGES: tuple[str, ...] = ("ko", "en")
DEFAULT_LANGUAGE: Language = "ko"

# Change-event adapter: maps a raw UI change notification to the new value
ValueExtractor: TypeAlias = Callable[[Any], str]
