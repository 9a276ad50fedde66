"""
Target languages a project can be created for, and their display names.

Display names are the language's own name for itself (autonym) as listed for
ISO 639-1 codes. Codes without a 2-letter ISO 639-1 entry (``kok``) have no
autonym in the table and are displayed as the raw code.
"""

from __future__ import annotations

from typing import Callable, Literal, Optional, get_args

LanguageCode = Literal[
    "as", "bn", "en", "gu", "hi", "kn", "kok", "ml", "mr",
    "ne", "or", "pa", "sa", "sd", "ta", "te", "ur",
]

SUPPORTED_LANGUAGES: tuple[str, ...] = get_args(LanguageCode)
DEFAULT_LANGUAGE: LanguageCode = "en"

# ISO 639-1 native names
# Source: https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes
NATIVE_NAMES = {
    'as': 'অসমীয়া',
    'bn': 'বাংলা',
    'en': 'English',
    'gu': 'ગુજરાતી',
    'hi': 'हिन्दी',
    'kn': 'ಕನ್ನಡ',
    'ml': 'മലയാളം',
    'mr': 'मराठी',
    'ne': 'नेपाली',
    'or': 'ଓଡ଼ିଆ',
    'pa': 'ਪੰਜਾਬੀ',
    'sa': 'संस्कृतम्',
    'sd': 'सिन्धी',
    'ta': 'தமிழ்',
    'te': 'తెలుగు',
    'ur': 'اردو',
}

NameLookup = Callable[[str], Optional[str]]


def is_supported_language(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES


def get_native_name(code: str) -> Optional[str]:
    """
    Get the native name for an ISO 639-1 language code.

    Examples:
        >>> get_native_name('hi')
        'हिन्दी'
        >>> get_native_name('kok') is None
        True
    """
    return NATIVE_NAMES.get(code)


def display_name(code: Optional[str], lookup: NameLookup = get_native_name) -> str:
    """Name to render for ``code``; the raw code when the lookup yields nothing."""
    if not code:
        return ""
    return lookup(code) or code


def language_options(lookup: NameLookup = get_native_name) -> list[dict[str, object]]:
    """Selector entries for every supported language, in allow-list order."""
    return [
        {
            "code": code,
            "name": display_name(code, lookup),
            "default": code == DEFAULT_LANGUAGE,
        }
        for code in SUPPORTED_LANGUAGES
    ]
