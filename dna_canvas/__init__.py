"""
DNA Canvas v0.1 — moteur de résolution de pages à blocs configurables.

Chaque bloc tire ses attributs visuels des tokens globaux (GL01…GL11) ou de
ses overrides locaux, et ses textes de l'overlay de traduction (traduction
auteur > cache > original + fetch en arrière-plan).

Usage:
    >>> from dna_canvas import Engine, Settings, PageDocument
    >>> engine = Engine.from_settings(Settings(lang_pref="de"))
    >>> engine.start()
    >>> doc = PageDocument(blocks=[{"id": "h1", "type": "B0201",
    ...                             "localOverrides": {"data": {"title": "Welcome"}}}])
    >>> engine.render(doc)[0].local_overrides["data"]["title"]
    'Welcome'

Usage (briques seules):
    >>> from dna_canvas import TokenStore, effective, resolve
    >>> effective(TokenStore.defaults(), "GL02", 2, local=None, default="#000000")
    '#3B82F6'
"""

from .config import Settings
from .engine import Engine

# ── core ─────────────────────────────────────────────────────────────────────
from .core.tokens import TokenStore, TokenGroup, Parameter
from .core.overrides import (
    effective, effective_number, effective_bool, resolve_family,
    blend_hex_opacity, to_rgba,
)
from .core.registry import BlockFamily, resolve, declared_family

# ── i18n ─────────────────────────────────────────────────────────────────────
from .i18n.cache import TranslationCache
from .i18n.dispatcher import TranslationDispatcher
from .i18n.overlay import overlay
from .i18n.translator import GoogleTranslator
from .i18n.dictionary import t

# ── page ─────────────────────────────────────────────────────────────────────
from .page.document import Block, PageDocument
from .page.render import RenderContext, ResolvedBlock, Placeholder, resolve_block, render_pass
from .page.theme import generate_css_variables

__version__ = "0.1.0"

__all__ = [
    "Settings", "Engine",
    # core
    "TokenStore", "TokenGroup", "Parameter",
    "effective", "effective_number", "effective_bool", "resolve_family",
    "blend_hex_opacity", "to_rgba",
    "BlockFamily", "resolve", "declared_family",
    # i18n
    "TranslationCache", "TranslationDispatcher", "overlay", "GoogleTranslator", "t",
    # page
    "Block", "PageDocument",
    "RenderContext", "ResolvedBlock", "Placeholder", "resolve_block", "render_pass",
    "generate_css_variables",
]
