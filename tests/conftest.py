"""Fixtures partagées : store, cache, dispatcher manuel (fetchs déterministes)."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from dna_canvas.core.tokens import TokenStore
from dna_canvas.i18n.cache import TranslationCache
from dna_canvas.i18n import dictionary


class ManualDispatcher:
    """Empile les jobs ; rien ne tourne tant que run_all() n'est pas appelé."""

    def __init__(self):
        self.jobs = []

    def submit(self, func, *args):
        self.jobs.append((func, args))

    def run_all(self):
        jobs, self.jobs = self.jobs, []
        for func, args in jobs:
            func(*args)
        return len(jobs)


class FakeTranslator:
    """Traducteur en mémoire : table (text, locale) → traduction, enregistre les appels."""

    def __init__(self, table=None):
        self.table = table or {}
        self.calls = []

    def __call__(self, text, locale):
        self.calls.append((text, locale))
        return self.table.get((text, locale), text)


@pytest.fixture
def store():
    return TokenStore.defaults()


@pytest.fixture
def dispatcher():
    return ManualDispatcher()


@pytest.fixture
def translator():
    return FakeTranslator({
        ("Welcome", "de"): "Willkommen",
        ("Hello", "ru"): "Привет",
        ("Hello", "de"): "Hallo",
    })


@pytest.fixture
def cache(translator, dispatcher):
    return TranslationCache(translator, dispatcher, base_locale="en")


@pytest.fixture(autouse=True)
def _fresh_dictionary():
    dictionary.reload_cache()
    yield
