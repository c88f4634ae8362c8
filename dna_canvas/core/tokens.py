"""
Token Store — arbre global des tokens DNA + langue active.

Format persistant (identique à l'éditeur) :
    {"GL01": {"params": [{"value": "16"}, {"value": "1.25"}, ...]}, ...}

Le store ne type jamais les valeurs : tout est chaîne, chaque consommateur
parse via core.values ou via `record()`.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .schema import GROUPS, TokenRecord, default_values, record_from_values
from .values import encode

log = logging.getLogger(__name__)

BASE_LOCALE = "en"


class Parameter(BaseModel):
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _as_string(cls, v):
        # Les réglages JSON peuvent contenir 16 ou true : stockés en "16" / "true"
        return "" if v is None else encode(v)


class TokenGroup(BaseModel):
    code: str
    params: List[Parameter] = Field(default_factory=list)


class TokenStore:
    """
    Store global des tokens. Instancié une fois au démarrage puis injecté
    dans chaque passe de rendu (pas d'état ambiant).

    Usage:
        >>> store = TokenStore.defaults()
        >>> store.get("GL02", 2)
        '#3B82F6'
    """

    def __init__(self, groups: Optional[Dict[str, TokenGroup]] = None,
                 base_locale: str = BASE_LOCALE):
        self._groups: Dict[str, TokenGroup] = dict(groups or {})
        self.base_locale = base_locale
        self.current_locale = base_locale
        self.preferred_locale: Optional[str] = None

    # ── Construction ─────────────────────────────────────────────────────────

    @classmethod
    def defaults(cls, base_locale: str = BASE_LOCALE) -> "TokenStore":
        return cls.from_settings({}, base_locale=base_locale)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any],
                      base_locale: str = BASE_LOCALE) -> "TokenStore":
        """
        Construit le store depuis les réglages persistés.
        Groupes/positions absents → défauts du schéma ; groupes inconnus conservés tels quels.
        """
        groups: Dict[str, TokenGroup] = {}
        for code in GROUPS:
            defaults = default_values(code)
            stored = TokenGroup.model_validate({**(settings.get(code) or {}), "code": code}).params
            params = [
                stored[i] if i < len(stored) else Parameter(value=defaults[i])
                for i in range(max(len(defaults), len(stored)))
            ]
            groups[code] = TokenGroup(code=code, params=params)

        for code, raw in settings.items():
            if code not in groups:
                groups[code] = TokenGroup.model_validate({**(raw or {}), "code": code})

        return cls(groups, base_locale=base_locale)

    @classmethod
    def load(cls, path: Path, base_locale: str = BASE_LOCALE) -> "TokenStore":
        """Charge le fichier JSON de réglages globaux."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        store = cls.from_settings(data, base_locale=base_locale)
        log.info("Tokens chargés depuis %s — %d groupe(s)", path, len(store._groups))
        return store

    # ── Accès positionnel ────────────────────────────────────────────────────

    def get(self, group_code: str, index: int) -> Optional[str]:
        """Valeur brute à (groupe, index) ; None si le groupe ou la position n'existe pas."""
        group = self._groups.get(group_code)
        if group is None or index < 0 or index >= len(group.params):
            return None
        return group.params[index].value

    def values(self, group_code: str) -> List[str]:
        group = self._groups.get(group_code)
        return [p.value for p in group.params] if group else []

    def set_value(self, group_code: str, index: int, value: Any) -> None:
        """Mutation issue de l'édition des réglages globaux."""
        group = self._groups.get(group_code)
        if group is None:
            raise ValueError(f"Groupe inconnu : {group_code!r}")
        if index < 0 or index >= len(group.params):
            raise ValueError(f"Index hors limites : {group_code}[{index}]")
        group.params[index] = Parameter(value=str(value))

    def record(self, group_code: str) -> TokenRecord:
        """Vue typée (champs nommés) d'un groupe du schéma fixe."""
        if group_code not in GROUPS:
            raise ValueError(f"Groupe hors schéma : {group_code!r}")
        return record_from_values(group_code, self.values(group_code))

    def snapshot(self) -> Dict[str, Dict[str, List[Dict[str, str]]]]:
        """Copie au format persistant."""
        return {
            code: {"params": [p.model_dump() for p in group.params]}
            for code, group in self._groups.items()
        }

    def group_codes(self) -> List[str]:
        return list(self._groups)

    def is_dark(self) -> bool:
        return self.get("GL10", 6) == "Dark"

    # ── Langue ───────────────────────────────────────────────────────────────

    def seed_locale(self, preference: Optional[str]) -> str:
        """Préférence persistée lue une fois au démarrage ; vide → langue de base."""
        code = (preference or "").strip().lower()
        if code:
            self.preferred_locale = code
            self.current_locale = code
        return self.current_locale

    def set_locale(self, code: str) -> str:
        code = (code or "").strip().lower()
        if not code:
            raise ValueError("Code langue vide")
        self.current_locale = code
        self.preferred_locale = code
        log.info("Langue active : %s", code)
        return code
