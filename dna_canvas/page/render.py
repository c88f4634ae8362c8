"""
Passe de rendu — PageDocument → blocs résolus, prêts pour un renderer externe.

Pour chaque bloc visible, dans l'ordre :
  registry (famille) → overlay de traduction sur `data` → ResolvedBlock
Un type inconnu produit un Placeholder visible (jamais d'abandon silencieux).
"""
import copy
import logging
from typing import Any, Dict, List, Literal, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel

from ..core.overrides import effective_bool
from ..core.registry import BlockFamily, declared_family, is_sticky_code, resolve
from ..core.tokens import TokenStore
from ..core.values import parse_bool
from ..i18n.cache import TranslationCache
from ..i18n.overlay import overlay
from .document import Block, PageDocument

log = logging.getLogger(__name__)


class RenderContext:
    """Services partagés d'une passe de rendu (injectés, pas de singleton)."""

    def __init__(self, store: TokenStore, cache: TranslationCache, locale: Optional[str] = None):
        self.store = store
        self.cache = cache
        # Même normalisation que TokenStore.set_locale
        self.locale = (locale or "").strip().lower() or store.current_locale

    @property
    def base_locale(self) -> str:
        return self.store.base_locale


class ResolvedBlock(BaseModel):
    kind: Literal["block"] = "block"
    id: str
    type: str
    family: BlockFamily
    declared_family: BlockFamily
    locale: str
    local_overrides: Dict[str, Any]
    sticky: bool = False


class Placeholder(BaseModel):
    """Bloc non résolu — affiché comme tel avec ses identifiants de diagnostic."""
    kind: Literal["placeholder"] = "placeholder"
    id: str
    type_code: str
    label: str


RenderItem = Union[ResolvedBlock, Placeholder]


@runtime_checkable
class BlockRenderer(Protocol):
    def render_block(self, block: ResolvedBlock, ctx: RenderContext) -> Any: ...
    def render_placeholder(self, placeholder: Placeholder, ctx: RenderContext) -> Any: ...


def _is_sticky(block: Block, family: BlockFamily, store: TokenStore) -> bool:
    if is_sticky_code(block.type):
        return True
    if family is not BlockFamily.NAVBAR:
        return False
    # Local (data.stickyLogic) ?? global (GL11 position 0)
    return parse_bool(block.data.get("stickyLogic")) or effective_bool(store, "GL11", 0)


def resolve_block(block: Block, ctx: RenderContext) -> RenderItem:
    family = resolve(block.type)
    if family is None:
        log.warning("Type de bloc inconnu %r (id=%s)", block.type, block.id)
        return Placeholder(
            id=block.id,
            type_code=str(block.type),
            label=f"Bloc inconnu : type {block.type!r} (id {block.id})",
        )

    overrides = copy.deepcopy(block.local_overrides)
    overrides["data"] = overlay(block.data, ctx.locale, ctx.cache, ctx.base_locale)

    return ResolvedBlock(
        id=block.id,
        type=block.type,
        family=family,
        declared_family=declared_family(block.type),
        locale=ctx.locale,
        local_overrides=overrides,
        sticky=_is_sticky(block, family, ctx.store),
    )


def render_pass(document: PageDocument, ctx: RenderContext,
                renderer: Optional[BlockRenderer] = None) -> List[Any]:
    """
    Résout tous les blocs visibles. Sans renderer : liste de ResolvedBlock/Placeholder ;
    avec renderer : liste de ses sorties, dans l'ordre du document.
    """
    items = [resolve_block(b, ctx) for b in document.visible_blocks()]
    log.debug("Passe de rendu : %d bloc(s), langue=%s", len(items), ctx.locale)
    if renderer is None:
        return items
    return [
        renderer.render_block(item, ctx) if isinstance(item, ResolvedBlock)
        else renderer.render_placeholder(item, ctx)
        for item in items
    ]
