"""Tests Token Store — valeurs typées, schéma positionnel, store, langue."""
import json
import math

import pytest

from dna_canvas.core.schema import LEGACY_INDEX, GROUPS, field_index, default_values
from dna_canvas.core.tokens import TokenStore
from dna_canvas.core.values import encode, parse_bool, parse_enum, parse_int, parse_number


# ── values ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("raw,expected", [
    ("12.5", 12.5), ("12px", 12.0), ("-0.02", -0.02), (" 8 ", 8.0), (".5", 0.5), (3, 3.0),
    ("1e3", 1000.0), ("2.5E-1px", 0.25), ("1e", 1.0),
])
def test_parse_number_ok(raw, expected):
    assert parse_number(raw, 99.0) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "-", "px12", math.nan, True])
def test_parse_number_fallback(raw):
    assert parse_number(raw, 99.0) == 99.0


def test_parse_int_truncates():
    assert parse_int("12.9", 0) == 12
    assert parse_int("auto", 7) == 7


def test_parse_bool_only_true_false():
    assert parse_bool("true") is True
    assert parse_bool("TRUE") is True
    assert parse_bool("false", True) is False
    assert parse_bool("yes", True) is True
    assert parse_bool(None) is False


def test_parse_enum():
    assert parse_enum("Light", ("Dark", "Light"), "Dark") == "Light"
    assert parse_enum("Blue", ("Dark", "Light"), "Dark") == "Dark"


def test_encode():
    assert encode(True) == "true"
    assert encode(16.0) == "16"
    assert encode(0.8) == "0.8"
    assert encode("Inter") == "Inter"


# ── schéma ───────────────────────────────────────────────────────────────────

def test_legacy_index_positions():
    assert LEGACY_INDEX["GL02"][2] == "accent"
    assert LEGACY_INDEX["GL02"][3] == "text_primary"
    assert LEGACY_INDEX["GL01"][7] == "font_family"
    assert LEGACY_INDEX["GL10"][6] == "site_theme"


def test_field_index():
    assert field_index("GL01", "uppercase") == 5
    with pytest.raises(ValueError):
        field_index("GL01", "inexistant")


def test_all_groups_have_defaults():
    for code in GROUPS:
        assert len(default_values(code)) == len(LEGACY_INDEX[code])
        assert all(isinstance(v, str) for v in default_values(code))


# ── TokenStore ───────────────────────────────────────────────────────────────

def test_defaults(store):
    assert store.get("GL02", 2) == "#3B82F6"
    assert store.get("GL10", 6) == "Dark"
    assert store.is_dark()


def test_from_settings_partial_group_filled_with_defaults():
    store = TokenStore.from_settings({"GL02": {"params": [{"value": "#000000"}]}})
    assert store.get("GL02", 0) == "#000000"
    assert store.get("GL02", 2) == "#3B82F6"


def test_from_settings_numbers_stored_as_strings():
    store = TokenStore.from_settings({"GL01": {"params": [{"value": 18}, {"value": 1.5}]}})
    assert store.get("GL01", 0) == "18"
    assert store.get("GL01", 1) == "1.5"


def test_from_settings_keeps_unknown_group():
    store = TokenStore.from_settings({"GL99": {"params": [{"value": "x"}]}})
    assert store.get("GL99", 0) == "x"
    assert "GL99" in store.group_codes()


def test_set_value_stores_string(store):
    store.set_value("GL01", 0, 20)
    assert store.get("GL01", 0) == "20"


def test_set_value_errors(store):
    with pytest.raises(ValueError, match="Groupe inconnu"):
        store.set_value("GL42", 0, "x")
    with pytest.raises(ValueError, match="Index hors limites"):
        store.set_value("GL01", 99, "x")


def test_record_typed_view(store):
    store.set_value("GL01", 5, "true")
    typo = store.record("GL01")
    assert typo.uppercase is True
    assert typo.base_size == 16
    assert typo.font_family == "Inter"


def test_record_malformed_value_uses_field_default(store):
    store.set_value("GL01", 0, "énorme")
    store.set_value("GL10", 6, "Blue")
    assert store.record("GL01").base_size == 16
    assert store.record("GL10").site_theme == "Dark"


def test_record_unknown_group(store):
    with pytest.raises(ValueError):
        store.record("GL08")


def test_snapshot_is_a_copy(store):
    snap = store.snapshot()
    snap["GL02"]["params"][2]["value"] = "#FFFFFF"
    assert store.get("GL02", 2) == "#3B82F6"


def test_load_from_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"GL10": {"params": [{"value": "100"}] * 6 + [{"value": "Light"}]}}))
    store = TokenStore.load(path)
    assert store.get("GL10", 6) == "Light"
    assert not store.is_dark()


# ── Langue active ────────────────────────────────────────────────────────────

def test_seed_locale_from_preference(store):
    assert store.current_locale == "en"
    assert store.seed_locale(" RU ") == "ru"
    assert store.preferred_locale == "ru"


def test_seed_locale_empty_keeps_base(store):
    assert store.seed_locale("") == "en"
    assert store.seed_locale(None) == "en"
    assert store.preferred_locale is None


def test_set_locale(store):
    assert store.set_locale("de") == "de"
    assert store.current_locale == "de"
    with pytest.raises(ValueError):
        store.set_locale("  ")
