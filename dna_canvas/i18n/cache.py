"""
Translation Cache — map (locale, texte source) → traduction + registre des fetchs en cours.

- fill() est idempotent : le premier écrivain gagne, une entrée n'est jamais réécrite.
- request_if_absent() garantit au plus UN fetch en cours par clé (single-flight).
- Le résultat d'un fetch n'atteint le reste du système que via fill().
- Aucune éviction : le cache vit autant que le process.
"""
import logging
import threading
from typing import Callable, Dict, Optional, Protocol, Set, Tuple

log = logging.getLogger(__name__)

Key = Tuple[str, str]
Translate = Callable[[str, str], str]


class Dispatcher(Protocol):
    def submit(self, func, *args) -> None: ...


class TranslationCache:

    def __init__(self, translate: Translate, dispatcher: Dispatcher, base_locale: str = "en"):
        self._translate = translate
        self._dispatcher = dispatcher
        self.base_locale = base_locale
        self._entries: Dict[Key, str] = {}
        self._pending: Set[Key] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Key) -> bool:
        return key in self._entries

    def lookup(self, locale: str, text: str) -> Optional[str]:
        return self._entries.get((locale, text))

    def fill(self, locale: str, text: str, translated: str) -> bool:
        """Enregistre une traduction. False si la clé existait déjà (no-op)."""
        key = (locale, text)
        with self._lock:
            if key in self._entries:
                return False
            self._entries[key] = translated
            return True

    def pending(self) -> Set[Key]:
        with self._lock:
            return set(self._pending)

    def request_if_absent(self, locale: str, text: str) -> bool:
        """
        Planifie un fetch si la clé n'est ni en cache ni déjà demandée.
        Retourne True si un fetch a été planifié.
        """
        if not text or not text.strip() or locale == self.base_locale:
            return False

        key = (locale, text)
        with self._lock:
            if key in self._entries or key in self._pending:
                return False
            self._pending.add(key)

        try:
            self._dispatcher.submit(self._fetch, locale, text)
        except Exception:
            # Rendu jamais bloqué : la clé reste absente, un prochain miss retentera
            log.exception("Planification du fetch impossible (%s)", locale)
            self._release(key)
            return False
        return True

    def _release(self, key: Key) -> None:
        with self._lock:
            self._pending.discard(key)

    def _fetch(self, locale: str, text: str) -> None:
        """Job détaché : traduit puis remplit le cache. Les erreurs s'arrêtent ici."""
        key = (locale, text)
        try:
            try:
                result = self._translate(text, locale)
            except Exception as e:
                log.warning("Fetch de traduction échoué (%s) : %s", locale, e)
                return
            # Le traducteur renvoie le texte source en cas d'échec : rien à mettre en cache
            if result and result != text:
                self.fill(locale, text, result)
        finally:
            # Libéré après fill : pas de fenêtre où la clé n'est ni en cache ni en cours
            self._release(key)
