"""
Dictionnaire d'interface — chaînes statiques (nav, boutons, formulaire…).

Clés format "nav.home" → catalogue locales/{lang}.json (imbriqué).
Repli : langue demandée → anglais → la clé elle-même.
"""
import json
from pathlib import Path
from typing import Dict, Optional

_CATALOG_CACHE: dict = {}
_LOCALES_DIR = Path(__file__).parent / "locales"

FALLBACK_LOCALE = "en"

# Langues proposées par le sélecteur (traduction auto pour celles sans catalogue)
SUPPORTED_LOCALES = ("en", "ru", "uk", "de", "fr", "es", "it", "zh", "pl")

LANGUAGE_NAMES: Dict[str, Dict[str, str]] = {
    "en": {"name": "English", "flag": "🇬🇧"},
    "uk": {"name": "Українська", "flag": "🇺🇦"},
    "ru": {"name": "Русский", "flag": "🇷🇺"},
}


def _load_lang(lang: str) -> dict:
    """Charge locales/{lang}.json (lazy, mis en cache)."""
    if lang not in _CATALOG_CACHE:
        path = _LOCALES_DIR / f"{lang}.json"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _CATALOG_CACHE[lang] = json.load(f)
        else:
            _CATALOG_CACHE[lang] = {}
    return _CATALOG_CACHE[lang]


def _lookup(catalog: dict, key: str) -> Optional[str]:
    node = catalog
    for part in key.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        else:
            return None
    return node if isinstance(node, str) and node else None


def t(key: str, lang: str = FALLBACK_LOCALE) -> str:
    """
    Résout une clé d'interface.
    "nav.home", "ru" → "Главная" ; clé absente en ru → anglais ; absente partout → "nav.home"
    """
    return _lookup(_load_lang(lang), key) or _lookup(_load_lang(FALLBACK_LOCALE), key) or key


def catalog(lang: str) -> dict:
    """Catalogue brut d'une langue ({} si aucun fichier)."""
    return _load_lang(lang)


def available_catalogs() -> list[str]:
    return sorted(p.stem for p in _LOCALES_DIR.glob("*.json"))


def reload_cache():
    """Force le rechargement des catalogues (utile en dev)."""
    _CATALOG_CACHE.clear()
