"""
Variables CSS du viewer — dérivées des tokens globaux GL01/GL02/GL07/GL10.

Les renderers de blocs consomment ces custom properties (--dna-*) ; elles sont
recalculées à chaque appel depuis le store, jamais stockées.
"""
from typing import Dict

from ..core.overrides import blend_hex_opacity
from ..core.schema import Colors, Radius, Theme, Typography
from ..core.tokens import TokenStore

FONT_STACKS: Dict[str, str] = {
    "Code": "'JetBrains Mono', monospace",
    "Google Sans": "'Google Sans', 'Product Sans', sans-serif",
    "Share Tech": "'Share Tech', sans-serif",
    "Orbitron": "'Orbitron', sans-serif",
    "Agency": "'Agency FB', sans-serif",
    "Ancorli": "'Ancorli', sans-serif",
    "Lilex": "'Lilex', monospace",
}


def font_stack(font_name: str) -> str:
    return FONT_STACKS.get(font_name) or f"'{font_name or 'Inter'}', sans-serif"


def theme_mode(store: TokenStore) -> str:
    """Valeur de l'attribut data-theme ("dark" / "light")."""
    theme: Theme = store.record("GL10")
    return theme.site_theme.lower()


def css_variables(store: TokenStore) -> Dict[str, str]:
    """Dict {"--dna-…": valeur} ; valeurs invalides → défauts du schéma."""
    typo: Typography = store.record("GL01")
    colors: Colors = store.record("GL02")
    radius: Radius = store.record("GL07")

    return {
        "--dna-font-family": font_stack(typo.font_family),
        "--dna-unit": f"{typo.base_size}px",
        "--dna-bg": colors.bg,
        "--dna-surface": colors.surface,
        "--dna-accent": colors.accent,
        "--dna-accent-soft": blend_hex_opacity(colors.accent, colors.accent_opacity, colors.accent),
        "--dna-text-prim": colors.text_primary,
        "--dna-text-sec": colors.text_secondary,
        "--dna-border": colors.border,
        "--dna-pattern-opacity": f"{colors.pattern_opacity / 100:g}",
        "--dna-pattern-size": f"{colors.pattern_size}px",
        "--dna-pattern-color": colors.text_primary,
        "--dna-radius": f"{radius.base}px",
        "--ui-scale": "1",
    }


def generate_css_variables(store: TokenStore) -> str:
    """
    Génère le bloc :root { ... } + sélecteur data-theme.

    Returns:
        CSS prêt à injecter dans <style>
    """
    lines = "\n".join(f"  {name}: {value};" for name, value in css_variables(store).items())
    return f":root {{\n{lines}\n}}\n:root {{ color-scheme: {theme_mode(store)}; }}"
