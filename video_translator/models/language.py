"""
Supported languages.

ISO 639-1 codes offered as translation targets, with the English names the
speech recognition provider reports for detected languages.

Dependencies: None
System role: Language code catalogue
"""

SUPPORTED_LANGUAGES: dict[str, str] = {
    "es": "Spanish",
    "en": "English",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
}

_NAME_TO_CODE = {name.lower(): code for code, name in SUPPORTED_LANGUAGES.items()}


def is_supported_language(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES


def normalize_language(value: str | None, default: str) -> str:
    """
    Map a provider language label to an ISO code.

    Accepts either a code ("en") or an English name ("english"). Unknown
    two-letter codes pass through; anything else falls back to `default`.
    """
    if not value:
        return default
    label = value.strip().lower()
    if label in SUPPORTED_LANGUAGES:
        return label
    if label in _NAME_TO_CODE:
        return _NAME_TO_CODE[label]
    if len(label) == 2 and label.isalpha():
        return label
    return default
