"""Page : document de blocs, passe de rendu, variables de thème."""
from .document import Block, PageDocument, OVERRIDE_SECTIONS
from .render import (
    RenderContext,
    ResolvedBlock,
    Placeholder,
    BlockRenderer,
    resolve_block,
    render_pass,
)
from .theme import css_variables, generate_css_variables, theme_mode

__all__ = [
    "Block",
    "PageDocument",
    "OVERRIDE_SECTIONS",
    "RenderContext",
    "ResolvedBlock",
    "Placeholder",
    "BlockRenderer",
    "resolve_block",
    "render_pass",
    "css_variables",
    "generate_css_variables",
    "theme_mode",
]
