"""i18n : cache de traduction, overlay, traducteur distant, dictionnaire d'interface."""
from .cache import TranslationCache
from .dispatcher import TranslationDispatcher
from .overlay import overlay
from .translator import GoogleTranslator
from .dictionary import t, LANGUAGE_NAMES, SUPPORTED_LOCALES, reload_cache

__all__ = [
    "TranslationCache",
    "TranslationDispatcher",
    "overlay",
    "GoogleTranslator",
    "t",
    "LANGUAGE_NAMES",
    "SUPPORTED_LOCALES",
    "reload_cache",
]
