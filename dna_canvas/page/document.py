"""
Document de page — liste ordonnée de blocs DNA.

Un bloc = id unique + code de type (immuable) + arbre d'overrides locaux.
Sous-arbres conventionnels de localOverrides : data, layout, style, media,
animation, background. Seul `data` est traduit par l'overlay.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

OVERRIDE_SECTIONS = ("data", "layout", "style", "media", "animation", "background")


class Block(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str = Field(..., frozen=True, description="Code DNA (B0201) ou nom de famille (Hero)")
    local_overrides: Dict[str, Any] = Field(default_factory=dict, alias="localOverrides")
    is_visible: bool = Field(default=True, alias="isVisible")

    def section(self, name: str) -> Dict[str, Any]:
        """Sous-arbre d'overrides ({} si absent ou mal formé)."""
        value = self.local_overrides.get(name)
        return value if isinstance(value, dict) else {}

    @property
    def data(self) -> Dict[str, Any]:
        return self.section("data")

    @property
    def style(self) -> Dict[str, Any]:
        return self.section("style")

    @property
    def layout(self) -> Dict[str, Any]:
        return self.section("layout")


class PageDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    blocks: List[Block] = Field(default_factory=list, alias="contentBlocks")

    @model_validator(mode="after")
    def _unique_ids(self):
        seen = set()
        for block in self.blocks:
            if block.id in seen:
                raise ValueError(f"Id de bloc dupliqué : {block.id!r}")
            seen.add(block.id)
        return self

    def visible_blocks(self) -> List[Block]:
        return [b for b in self.blocks if b.is_visible]
