"""
Valeurs typées à la frontière du store.

Le store ne conserve que des chaînes ; chaque consommateur passe la valeur
brute dans UNE de ces fonctions, avec un défaut documenté utilisé dès que le
parse échoue (None, chaîne vide, NaN, membre d'enum inconnu).
"""
import math
import re
from typing import Any, Iterable, Optional

_TRUE = "true"
_FALSE = "false"

# Préfixe accepté par parseFloat : signe, mantisse, exposant optionnel
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(raw: Any, default: float) -> float:
    """"12.5" → 12.5 ; "12px" → 12.0 ; "1e3" → 1000.0 (préfixe numérique, comme parseFloat) ; sinon default."""
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, (int, float)):
        return default if math.isnan(raw) else float(raw)

    m = _NUMBER_PREFIX.match(str(raw).strip())
    if not m:
        return default
    value = float(m.group(0))
    return default if math.isnan(value) else value


def parse_int(raw: Any, default: int) -> int:
    """Comme parseInt : partie entière du préfixe numérique, sinon default."""
    value = parse_number(raw, math.nan)
    if math.isnan(value):
        return default
    return int(value)


def parse_bool(raw: Any, default: bool = False) -> bool:
    """Seules "true"/"false" (casse ignorée) comptent ; tout le reste → default."""
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return default
    text = str(raw).strip().lower()
    if text == _TRUE:
        return True
    if text == _FALSE:
        return False
    return default


def parse_enum(raw: Any, allowed: Iterable[str], default: str) -> str:
    """Valeur si elle appartient à `allowed`, sinon default."""
    if raw is None:
        return default
    text = str(raw)
    return text if text in set(allowed) else default


def encode(value: Any) -> str:
    """Encode une valeur typée au format de stockage (tout est chaîne)."""
    if isinstance(value, bool):
        return _TRUE if value else _FALSE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_defined(value: Optional[Any]) -> bool:
    return value is not None
