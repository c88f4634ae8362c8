"""
API publique du moteur DNA — racine de composition.

Construit une fois au démarrage : store de tokens, cache de traduction,
dispatcher, traducteur. Chaque passe de rendu reçoit ces services via
un RenderContext.
"""
import logging
from pathlib import Path
from typing import Any, List, Optional

from .config import Settings
from .core.tokens import TokenStore
from .i18n.cache import Dispatcher, TranslationCache
from .i18n.dispatcher import TranslationDispatcher
from .i18n.translator import GoogleTranslator
from .page.document import PageDocument
from .page.render import BlockRenderer, RenderContext, render_pass

log = logging.getLogger(__name__)


class Engine:
    """
    Moteur de résolution DNA.

    Usage:
        >>> engine = Engine.from_settings(Settings.from_env())
        >>> engine.start()
        >>> items = engine.render(PageDocument(blocks=[...]))
    """

    def __init__(self, settings: Settings, store: TokenStore, cache: TranslationCache,
                 dispatcher: Optional[Dispatcher] = None):
        self.settings = settings
        self.store = store
        self.cache = cache
        self.dispatcher = dispatcher

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None,
                      translate=None, dispatcher: Optional[Dispatcher] = None) -> "Engine":
        """
        Args:
            settings: Configuration (défaut : Settings.from_env())
            translate: Traducteur (text, locale) -> str (défaut : GoogleTranslator)
            dispatcher: Exécuteur des fetchs (défaut : TranslationDispatcher APScheduler)
        """
        settings = settings or Settings.from_env()

        if settings.settings_path and Path(settings.settings_path).exists():
            store = TokenStore.load(Path(settings.settings_path), base_locale=settings.base_locale)
        else:
            if settings.settings_path:
                log.warning("Fichier de tokens introuvable : %s — défauts du schéma", settings.settings_path)
            store = TokenStore.defaults(base_locale=settings.base_locale)
        store.seed_locale(settings.lang_pref)

        translate = translate or GoogleTranslator(
            url=settings.translate_url,
            timeout=settings.translate_timeout,
            base_locale=settings.base_locale,
        )
        dispatcher = dispatcher or TranslationDispatcher(max_workers=settings.translate_workers)
        cache = TranslationCache(translate, dispatcher, base_locale=settings.base_locale)
        return cls(settings, store, cache, dispatcher)

    def start(self):
        if isinstance(self.dispatcher, TranslationDispatcher):
            self.dispatcher.start()
        log.info("Moteur DNA prêt — langue=%s", self.store.current_locale)

    def shutdown(self):
        if isinstance(self.dispatcher, TranslationDispatcher):
            self.dispatcher.shutdown()

    def context(self, locale: Optional[str] = None) -> RenderContext:
        return RenderContext(self.store, self.cache, locale=locale)

    def render(self, document: PageDocument, locale: Optional[str] = None,
               renderer: Optional[BlockRenderer] = None) -> List[Any]:
        return render_pass(document, self.context(locale), renderer)
