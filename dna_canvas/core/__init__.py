"""Core module pour dna_canvas : tokens, overrides, registry."""
from .tokens import TokenStore, TokenGroup, Parameter, BASE_LOCALE
from .schema import GROUPS, LEGACY_INDEX, TokenRecord, field_index
from .overrides import (
    effective,
    effective_number,
    effective_bool,
    resolve_family,
    hex_to_rgb,
    blend_hex_opacity,
    to_rgba,
)
from .registry import BlockFamily, TYPE_CODES, STAND_INS, resolve, declared_family, codes_for

__all__ = [
    "TokenStore",
    "TokenGroup",
    "Parameter",
    "BASE_LOCALE",
    "GROUPS",
    "LEGACY_INDEX",
    "TokenRecord",
    "field_index",
    "effective",
    "effective_number",
    "effective_bool",
    "resolve_family",
    "hex_to_rgb",
    "blend_hex_opacity",
    "to_rgba",
    "BlockFamily",
    "TYPE_CODES",
    "STAND_INS",
    "resolve",
    "declared_family",
    "codes_for",
]
