"""
Schéma DNA — groupes de tokens globaux (GL01 … GL11).

Chaque groupe est un modèle Pydantic dont l'ORDRE DES CHAMPS est l'index
positionnel historique : `params[3]` de GL02 == `Colors.text_primary`.
Ne jamais réordonner ni insérer de champ au milieu d'un groupe publié ;
les nouveaux paramètres s'ajoutent en fin de modèle.

Types : int/float/bool/str/Literal. Le store reste en chaînes, la conversion
se fait dans `record_from_values()` via core.values (défaut du champ si échec).
"""
from typing import Dict, List, Literal, Optional, Tuple, Type, get_args, get_origin

from pydantic import BaseModel

from .values import encode, parse_bool, parse_enum, parse_int, parse_number


class TokenRecord(BaseModel):
    """Vue typée d'un groupe (lecture seule, recalculée à chaque lecture)."""
    model_config = {"frozen": True}


# ── GL01 · Typographie ───────────────────────────────────────────────────────

class Typography(TokenRecord):
    base_size: int = 16
    scale_ratio: float = 1.25
    line_height: float = 1.6
    heading_weight: str = "700"
    letter_spacing: float = -0.02
    uppercase: bool = False
    antialiased: bool = True
    font_family: str = "Inter"


# ── GL02 · Couleurs ──────────────────────────────────────────────────────────

class Colors(TokenRecord):
    bg: str = "#09090B"
    surface: str = "#18181B"
    accent: str = "#3B82F6"
    text_primary: str = "#FFFFFF"
    text_secondary: str = "#A1A1AA"
    border: str = "#27272A"
    accent_opacity: float = 100
    pattern_enabled: bool = False
    pattern_opacity: float = 10
    pattern_size: int = 20


# ── GL03 · Espacements ───────────────────────────────────────────────────────

class Spacing(TokenRecord):
    grid_unit: int = 8
    gap: int = 24
    padding_x: int = 40
    padding_y: int = 80
    section_gap: int = 0
    container_width: int = 1200
    flow_multiplier: float = 1.0


# ── GL04 · Boutons ───────────────────────────────────────────────────────────

class Buttons(TokenRecord):
    size: float = 1.0
    pad_x: float = 24
    pad_y: float = 12
    font: float = 12
    stroke: float = 1
    radius: float = 4
    shadow: bool = False


# ── GL05 · Sections ──────────────────────────────────────────────────────────

class Sections(TokenRecord):
    show_dividers: bool = False
    full_bleed: bool = False
    alternate_background: bool = False


# ── GL06 · Effets ────────────────────────────────────────────────────────────

class Effects(TokenRecord):
    shadow_offset: float = 10
    shadow_blur: float = 20
    glass_blur: float = 12
    glass_opacity: float = 20
    border_width: float = 0
    border_opacity: float = 10


# ── GL07 · Rayons ────────────────────────────────────────────────────────────

class Radius(TokenRecord):
    base: int = 8
    card: int = 12
    image: int = 16


# ── GL09 · Animation ─────────────────────────────────────────────────────────

class Animation(TokenRecord):
    duration: float = 0.8
    stagger: float = 0.1
    entrance_y: float = 20
    scale: float = 0.95
    blur: float = 10
    enabled: bool = True


# ── GL10 · Thème (positions 0-5 réservées à l'UI de l'éditeur) ──────────────

class Theme(TokenRecord):
    ui_scale: int = 100
    ui_accent: str = "#3B82F6"
    ui_density: str = "comfortable"
    ui_panel_side: str = "right"
    ui_grid_overlay: bool = False
    ui_snap: bool = True
    site_theme: Literal["Dark", "Light"] = "Dark"


# ── GL11 · Navigation ────────────────────────────────────────────────────────

class Navigation(TokenRecord):
    sticky: bool = False
    glass: bool = False
    hide_on_scroll: bool = False


GROUPS: Dict[str, Type[TokenRecord]] = {
    "GL01": Typography,
    "GL02": Colors,
    "GL03": Spacing,
    "GL04": Buttons,
    "GL05": Sections,
    "GL06": Effects,
    "GL07": Radius,
    "GL09": Animation,
    "GL10": Theme,
    "GL11": Navigation,
}

# Table de migration index historique → nom de champ
LEGACY_INDEX: Dict[str, Tuple[str, ...]] = {
    code: tuple(model.model_fields) for code, model in GROUPS.items()
}


def field_index(group_code: str, field_name: str) -> int:
    """Position historique d'un champ nommé (ValueError si inconnu)."""
    try:
        return LEGACY_INDEX[group_code].index(field_name)
    except (KeyError, ValueError):
        raise ValueError(f"Paramètre inconnu : {group_code}.{field_name}") from None


def default_values(group_code: str) -> List[str]:
    """Valeurs par défaut d'un groupe, encodées en chaînes, dans l'ordre positionnel."""
    model = GROUPS[group_code]
    return [encode(f.default) for f in model.model_fields.values()]


def _coerce(raw: Optional[str], annotation, default):
    if annotation is bool:
        return parse_bool(raw, default)
    if annotation is int:
        return parse_int(raw, default)
    if annotation is float:
        return parse_number(raw, default)
    if get_origin(annotation) is Literal:
        return parse_enum(raw, get_args(annotation), default)
    return default if raw is None else str(raw)


def record_from_values(group_code: str, values: List[Optional[str]]) -> TokenRecord:
    """Construit la vue typée d'un groupe depuis ses valeurs brutes positionnelles."""
    model = GROUPS[group_code]
    data = {}
    for i, (name, field) in enumerate(model.model_fields.items()):
        raw = values[i] if i < len(values) else None
        data[name] = _coerce(raw, field.annotation, field.default)
    return model(**data)
