"""Localized validation messages.

The catalog is built once at import and never mutated. Each entry is a
kida template source per language; parameterized entries name the
positional arguments ``get_message()`` binds into the template::

    get_message("min_length", "en", 3)
    # "Please enter at least 3 characters"

Unknown kinds resolve to an empty string.
"""

from types import MappingProxyType
from typing import Any

from kida import Environment

from wren._internal.types import DEFAULT_LANGUAGE, Language
from wren.context import check_language

MESSAGES: MappingProxyType[str, MappingProxyType[str, str]] = MappingProxyType(
    {
        kind: MappingProxyType(texts)
        for kind, texts in {
            "required": {
                "ko": "필수 입력 항목입니다",
                "en": "This field is required",
            },
            "email": {
                "ko": "올바른 이메일 형식이 아닙니다",
                "en": "Invalid email format",
            },
            "phone": {
                "ko": "올바른 전화번호 형식이 아닙니다",
                "en": "Invalid phone number format",
            },
            "password": {
                "ko": "비밀번호는 8자 이상, 영문, 숫자, 특수문자를 포함해야 합니다",
                "en": (
                    "Password must be at least 8 characters with letters, "
                    "numbers, and special characters"
                ),
            },
            "min_length": {
                "ko": "최소 {{ min }}자 이상 입력해주세요",
                "en": "Please enter at least {{ min }} characters",
            },
            "max_length": {
                "ko": "최대 {{ max }}자까지 입력 가능합니다",
                "en": "Maximum {{ max }} characters allowed",
            },
            "number": {
                "ko": "숫자만 입력 가능합니다",
                "en": "Only numbers are allowed",
            },
            "alphanumeric": {
                "ko": "영문과 숫자만 입력 가능합니다",
                "en": "Only alphanumeric characters are allowed",
            },
            "url": {
                "ko": "올바른 URL 형식이 아닙니다",
                "en": "Invalid URL format",
            },
            "korean_only": {
                "ko": "한글만 입력 가능합니다",
                "en": "Only Korean characters are allowed",
            },
            "english_only": {
                "ko": "영문만 입력 가능합니다",
                "en": "Only English characters are allowed",
            },
            "credit_card": {
                "ko": "올바른 신용카드 번호가 아닙니다",
                "en": "Invalid credit card number",
            },
            "date": {
                "ko": "올바른 날짜 형식이 아닙니다 (YYYY-MM-DD)",
                "en": "Invalid date format (YYYY-MM-DD)",
            },
        }.items()
    }
)
"""Message template sources: kind -> language -> kida source."""

# Positional argument names for parameterized kinds
_PARAMS: dict[str, tuple[str, ...]] = {
    "min_length": ("min",),
    "max_length": ("max",),
}

# camelCase kind names accepted for compatibility with JS callers
_ALIASES: dict[str, str] = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "koreanOnly": "korean_only",
    "englishOnly": "english_only",
    "creditCard": "credit_card",
}

_env = Environment(autoescape=False)

_TEMPLATES: dict[str, dict[str, Any]] = {
    kind: {lang: _env.from_string(source) for lang, source in texts.items()}
    for kind, texts in MESSAGES.items()
}


def message_kinds() -> tuple[str, ...]:
    """Return every kind the catalog knows, in catalog order."""
    return tuple(MESSAGES)


def get_message(kind: str, language: Language = DEFAULT_LANGUAGE, *args: int) -> str:
    """Resolve *kind* to localized text.

    Args:
        kind: Message kind (``"required"``, ``"min_length"``, ...). The
            camelCase spellings (``"minLength"``) are accepted too.
        language: ``"ko"`` or ``"en"``.
        *args: Numeric arguments for parameterized kinds, in order.

    Returns:
        The rendered message, or ``""`` when *kind* is unknown.

    Raises:
        ConfigurationError: If *language* is not supported.
    """
    check_language(language)
    kind = _ALIASES.get(kind, kind)
    templates = _TEMPLATES.get(kind)
    if templates is None:
        return ""

    names = _PARAMS.get(kind, ())
    context: dict[str, Any] = {name: "" for name in names}
    context.update(zip(names, args, strict=False))
    return templates[language].render(context)
