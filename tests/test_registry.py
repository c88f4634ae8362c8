"""Tests registry — alias, substitutions, codes inconnus."""
import pytest

from dna_canvas.core.registry import (
    BlockFamily, TYPE_CODES, STAND_INS, resolve, declared_family, codes_for, is_sticky_code,
)


def test_legacy_hero_and_family_name_resolve_identically():
    assert resolve("B0201") is BlockFamily.HERO
    assert resolve("B0203") is resolve("Hero")


def test_every_code_resolves_like_its_canonical_name():
    for code, family in TYPE_CODES.items():
        assert resolve(code) is resolve(family.value), code


def test_every_family_has_a_canonical_code():
    for family in BlockFamily:
        assert declared_family(family.value) is family


@pytest.mark.parametrize("alias,family", [
    ("Contact", BlockFamily.CONTACT_FORM),
    ("B1301", BlockFamily.CONTACT_FORM),
    ("Reviews", BlockFamily.TESTIMONIALS),
    ("Socials", BlockFamily.SOCIAL_DOCK),
    ("B2401", BlockFamily.SOCIAL_DOCK),
])
def test_aliases(alias, family):
    assert resolve(alias) is family


def test_radar_chart_rendered_through_testimonials():
    assert declared_family("RadarChart") is BlockFamily.RADAR_CHART
    assert resolve("RadarChart") is BlockFamily.TESTIMONIALS
    assert STAND_INS[BlockFamily.RADAR_CHART] is BlockFamily.TESTIMONIALS


@pytest.mark.parametrize("code", ["", "B9999", "hero", "B0201 ", "Unknown", None, 42, ["B0201"], {"type": "Hero"}])
def test_unknown_codes_are_unresolved(code):
    assert resolve(code) is None


def test_codes_for_family():
    codes = codes_for(BlockFamily.HERO)
    assert set(codes) == {"B0201", "B0202", "B0203", "Hero"}


def test_sticky_codes():
    assert is_sticky_code("B0101")
    assert is_sticky_code("B0102")
    assert not is_sticky_code("Navbar")
    assert not is_sticky_code(None)
