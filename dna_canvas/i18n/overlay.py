"""
Translation Overlay — copie localisée d'un payload texte imbriqué.

Pour un champ `k` de valeur texte `v` :
  1. `k_<locale>` présent et défini → utilisé tel quel (traduction auteur)
  2. locale == langue de base       → `v` inchangé, aucune traduction
  3. cache (locale, v) rempli       → traduction en cache
  4. sinon                          → `v` immédiatement + fetch en arrière-plan

Synchrone, jamais bloquant, ne modifie jamais le payload d'entrée. Une
traduction fetchée n'apparaît qu'au prochain appel d'overlay().
"""
from typing import Any

from .cache import TranslationCache
from .dictionary import SUPPORTED_LOCALES


def overlay(payload: Any, locale: str, cache: TranslationCache, base_locale: str = "en") -> Any:
    """Retourne une copie résolue pour `locale` ; payload None → {}."""
    if payload is None:
        return {}
    return _walk(payload, locale, cache, base_locale)


def _walk(obj: Any, locale: str, cache: TranslationCache, base_locale: str) -> Any:
    if isinstance(obj, dict):
        return _walk_mapping(obj, locale, cache, base_locale)
    if isinstance(obj, (list, tuple)):
        return type(obj)(_walk(v, locale, cache, base_locale) for v in obj)
    if isinstance(obj, str):
        return _resolve_text(obj, locale, cache, base_locale)
    return obj


def _walk_mapping(data: dict, locale: str, cache: TranslationCache, base_locale: str) -> dict:
    resolved = {}
    for key, value in data.items():
        if not isinstance(value, str):
            resolved[key] = _walk(value, locale, cache, base_locale)
            continue
        if _is_authored_variant(key, data, locale):
            resolved[key] = value
            continue
        explicit = data.get(f"{key}_{locale}")
        if explicit is not None:
            resolved[key] = explicit
        else:
            resolved[key] = _resolve_text(value, locale, cache, base_locale)
    return resolved


def _is_authored_variant(key: Any, data: dict, locale: str) -> bool:
    """"title_ru" à côté de "title" : variante auteur, jamais envoyée en traduction.

    Suffixe reconnu : une langue de SUPPORTED_LOCALES ou la langue active.
    """
    if not isinstance(key, str):
        return False
    stem, sep, suffix = key.rpartition("_")
    return bool(sep) and (suffix in SUPPORTED_LOCALES or suffix == locale) and stem in data


def _resolve_text(text: str, locale: str, cache: TranslationCache, base_locale: str) -> str:
    if locale == base_locale or not text.strip():
        return text
    cached = cache.lookup(locale, text)
    if cached is not None:
        return cached
    cache.request_if_absent(locale, text)
    return text
