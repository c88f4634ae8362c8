"""
Traducteur distant — endpoint public Google Translate (client gtx).

Contrat : texte vide ou langue de base → retourné tel quel ; toute erreur
(réseau, HTTP, JSON inattendu) → texte source, jamais d'exception.
"""
import logging
from typing import Optional

import requests

log = logging.getLogger(__name__)

DEFAULT_URL = "https://translate.googleapis.com/translate_a/single"


class GoogleTranslator:
    """Callable (text, target_locale) -> str, injecté dans TranslationCache."""

    def __init__(self, url: str = DEFAULT_URL, timeout: Optional[float] = None,
                 base_locale: str = "en", session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.base_locale = base_locale
        self.session = session or requests.Session()

    def __call__(self, text: str, target_locale: str) -> str:
        return self.translate(text, target_locale)

    def translate(self, text: str, target_locale: str) -> str:
        if not text or not target_locale or target_locale == self.base_locale:
            return text

        params = {"client": "gtx", "sl": "auto", "tl": target_locale, "dt": "t", "q": text}
        try:
            resp = self.session.get(self.url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            log.warning("Traduction échouée (%s) : %s", target_locale, e)
            return text

        # data[0] = liste de segments [traduit, source, ...], tout joindre sinon texte tronqué
        try:
            segments = data[0] if data else None
            if not segments:
                return text
            translated = "".join(seg[0] for seg in segments if seg and isinstance(seg[0], str))
        except (TypeError, IndexError, KeyError) as e:
            log.warning("Réponse de traduction inattendue (%s) : %s", target_locale, e)
            return text
        return translated or text
