# utils/languages.py
from types import MappingProxyType

# quran.com translation resource ids used by the board
LANGUAGES = MappingProxyType({
    27: 'de',  # Bubenheim & Elyas
    19: 'en',  # Pickthall
    45: 'ru',  # Kuliev
})
LANGUAGES_FLIPPED = MappingProxyType({code: resource_id for resource_id, code in LANGUAGES.items()})

class UnknownLanguageError(LookupError):
    pass

def language_for_resource(resource_id):
    try:
        return LANGUAGES[int(resource_id)]
    except (KeyError, TypeError, ValueError):
        raise UnknownLanguageError(f"Unknown translation resource: {resource_id}")

def resource_for_language(language_code):
    try:
        return LANGUAGES_FLIPPED[language_code.lower()]
    except (KeyError, AttributeError):
        raise UnknownLanguageError(f"Unsupported language: {language_code}")

def supported_languages():
    return sorted(LANGUAGES_FLIPPED)
