"""
Override Resolver — valeur effective d'un attribut de bloc.

Priorité (du plus fort au plus faible) :
  1. override local du bloc (toute valeur sauf None, y compris "")
  2. token global (groupe, index), sauf chaîne vide
  3. défaut codé en dur fourni par l'appelant

Les composites (couleur hex + opacité → #RRGGBBAA / rgba()) sont recalculés
à chaque appel, jamais stockés.
"""
import re
from typing import Any, Dict, Mapping, Optional

from .tokens import TokenStore
from .values import is_defined, parse_bool, parse_number

USE_GLOBAL = "useGlobal"

_HEX = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def effective(store: TokenStore, group_code: str, index: int,
              local: Optional[Any] = None, default: str = "") -> str:
    """Valeur effective (chaîne) selon la chaîne local → global → défaut."""
    if is_defined(local):
        return str(local)
    value = store.get(group_code, index)
    # Valeur globale vide (null persisté) = absente
    if value:
        return value
    return default


def effective_number(store: TokenStore, group_code: str, index: int,
                     local: Optional[Any] = None, default: float = 0.0) -> float:
    """Même chaîne, puis parse_number ; NaN / vide → default."""
    return parse_number(effective(store, group_code, index, local, ""), default)


def effective_bool(store: TokenStore, group_code: str, index: int,
                   local: Optional[Any] = None, default: bool = False) -> bool:
    """Même chaîne, puis comparaison à "true" ; valeur non booléenne → default."""
    if isinstance(local, bool):
        return local
    return parse_bool(effective(store, group_code, index, local, ""), default)


def resolve_family(local_family: Optional[Mapping[str, Any]],
                   global_values: Mapping[str, str],
                   local_defaults: Mapping[str, str],
                   use_global: Optional[bool] = None) -> Dict[str, str]:
    """
    Résout une famille d'attributs munie d'un interrupteur d'héritage.

    - use_global explicite, sinon clé "useGlobal" de la famille locale ;
      absent → True (comportement historique : seul un False explicite active le local).
    - True  → valeurs globales uniquement, les valeurs locales sont ignorées.
    - False → chaque champ vient du local, ou de `local_defaults` s'il manque.
    """
    local_family = local_family or {}
    if use_global is None:
        use_global = local_family.get(USE_GLOBAL) is not False

    if use_global:
        return {k: str(v) for k, v in global_values.items()}

    resolved = {}
    for key in set(global_values) | set(local_defaults):
        value = local_family.get(key)
        if is_defined(value):
            resolved[key] = str(value)
        else:
            resolved[key] = str(local_defaults.get(key, global_values.get(key, "")))
    return resolved


# ── Composites couleur ───────────────────────────────────────────────────────

def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convertit #RGB / #RRGGBB / #RRGGBBAA en (R, G, B). ValueError si invalide."""
    m = _HEX.match((hex_color or "").strip())
    if not m:
        raise ValueError(f"Couleur hex invalide : {hex_color!r}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return tuple(int(digits[i:i+2], 16) for i in (0, 2, 4))


def _alpha(opacity: Any) -> float:
    """Opacité en pourcentage (0-100) → alpha 0..1, bornée ; invalide → 1."""
    pct = parse_number(opacity, 100.0)
    return max(0.0, min(100.0, pct)) / 100


def blend_hex_opacity(hex_color: str, opacity: Any, fallback: str = "") -> str:
    """"#3B82F6" + "50" → "#3B82F680". Couleur invalide → fallback."""
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return fallback
    a = round(_alpha(opacity) * 255)
    return f"#{r:02X}{g:02X}{b:02X}{a:02X}"


def to_rgba(hex_color: str, opacity: Any, fallback: str = "") -> str:
    """"#3B82F6" + "50" → "rgba(59, 130, 246, 0.5)". Couleur invalide → fallback."""
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return fallback
    return f"rgba({r}, {g}, {b}, {round(_alpha(opacity), 3):g})"
