"""
Configuration — variables d'environnement DNA_*.

  DNA_BASE_LOCALE        langue d'auteur, jamais traduite (défaut "en")
  DNA_LANG_PREF          dernière langue choisie (préférence persistée)
  DNA_SETTINGS_PATH      fichier JSON des tokens globaux (absent → défauts du schéma)
  DNA_TRANSLATE_URL      endpoint du traducteur distant
  DNA_TRANSLATE_TIMEOUT  timeout HTTP en secondes (vide → aucun timeout)
  DNA_TRANSLATE_WORKERS  threads du dispatcher de traduction (défaut 4)
"""
import os
from typing import Optional

from pydantic import BaseModel, Field

from .i18n.translator import DEFAULT_URL


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Settings(BaseModel):
    base_locale: str = "en"
    lang_pref: Optional[str] = None
    settings_path: Optional[str] = None
    translate_url: str = DEFAULT_URL
    translate_timeout: Optional[float] = None
    translate_workers: int = Field(default=4, ge=1)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_locale=os.getenv("DNA_BASE_LOCALE", "en"),
            lang_pref=os.getenv("DNA_LANG_PREF") or None,
            settings_path=os.getenv("DNA_SETTINGS_PATH") or None,
            translate_url=os.getenv("DNA_TRANSLATE_URL", DEFAULT_URL),
            translate_timeout=_optional_float(os.getenv("DNA_TRANSLATE_TIMEOUT")),
            translate_workers=int(os.getenv("DNA_TRANSLATE_WORKERS", "4")),
        )
