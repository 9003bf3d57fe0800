"""Language code mapping utilities."""

# Language name to ISO 639-1 code mapping
LANGUAGE_NAME_TO_CODE = {
    "spanish": "es",
    "english": "en",
    "french": "fr",
    "german": "de",
    "italian": "it",
    "portuguese": "pt",
}

# ISO 639-1 code to language name mapping
LANGUAGE_CODE_TO_NAME = {
    "es": "Spanish",
    "en": "English",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
}

LANGUAGE_CODE_TO_NATIVE_NAME = {
    "es": "Español",
    "en": "English",
    "fr": "Français",
    "de": "Deutsch",
    "it": "Italiano",
    "pt": "Português",
}

LANGUAGE_CODE_TO_FLAG = {
    "es": "🇪🇸",
    "en": "🇺🇸",
    "fr": "🇫🇷",
    "de": "🇩🇪",
    "it": "🇮🇹",
    "pt": "🇵🇹",
}

# BCP 47 tags handed to the speech synthesizer
LANGUAGE_CODE_TO_LOCALE = {
    "es": "es-ES",
    "en": "en-US",
    "fr": "fr-FR",
    "de": "de-DE",
    "it": "it-IT",
    "pt": "pt-PT",
}


def get_language_code(language_name_or_code: str) -> str:
    """Convert language name to ISO 639-1 code.

    Args:
        language_name_or_code: Language name (e.g., "Spanish") or code (e.g., "es")

    Returns:
        ISO 639-1 language code (e.g., "es")

    Raises:
        ValueError: If language is not supported
    """
    key = language_name_or_code.strip().lower()
    code = key if key in LANGUAGE_CODE_TO_NAME else LANGUAGE_NAME_TO_CODE.get(key)
    if code is None:
        supported = ", ".join(sorted(LANGUAGE_CODE_TO_NAME))
        raise ValueError(f"Unsupported language: '{language_name_or_code}' (supported: {supported})")
    return code


def _lookup(table: dict, language_code: str) -> str:
    try:
        return table[language_code.lower()]
    except KeyError:
        raise ValueError(f"Unsupported language code: '{language_code}'") from None


def get_language_name(language_code: str) -> str:
    """Convert ISO 639-1 code to language name.

    Args:
        language_code: ISO 639-1 language code (e.g., "es")

    Returns:
        Language name in English (e.g., "Spanish")

    Raises:
        ValueError: If language code is not supported
    """
    return _lookup(LANGUAGE_CODE_TO_NAME, language_code)


def get_native_name(language_code: str) -> str:
    """Name of the language in the language itself (e.g., "Español")."""
    return _lookup(LANGUAGE_CODE_TO_NATIVE_NAME, language_code)


def get_flag_emoji(language_code: str) -> str:
    return _lookup(LANGUAGE_CODE_TO_FLAG, language_code)


def get_locale_tag(language_code: str) -> str:
    """Convert ISO 639-1 code to the locale tag used for pronunciation.

    Example:
        >>> get_locale_tag("es")
        'es-ES'
    """
    return _lookup(LANGUAGE_CODE_TO_LOCALE, language_code)
