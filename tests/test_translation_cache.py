"""Tests Translation Cache — fill idempotent, single-flight, échecs de fetch."""
import threading
import time

import pytest

from dna_canvas.i18n.cache import TranslationCache
from dna_canvas.i18n.dispatcher import TranslationDispatcher


# ── lookup / fill ────────────────────────────────────────────────────────────

def test_lookup_absent(cache):
    assert cache.lookup("ru", "Hello") is None


def test_fill_first_writer_wins(cache):
    assert cache.fill("ru", "Hello", "Привіт") is True
    assert cache.fill("ru", "Hello", "Здравствуйте") is False
    assert cache.lookup("ru", "Hello") == "Привіт"
    assert len(cache) == 1


def test_keys_are_per_locale(cache):
    cache.fill("ru", "Hello", "Привет")
    cache.fill("de", "Hello", "Hallo")
    assert cache.lookup("de", "Hello") == "Hallo"
    assert ("ru", "Hello") in cache


# ── request_if_absent ────────────────────────────────────────────────────────

def test_request_schedules_one_fetch(cache, dispatcher, translator):
    assert cache.request_if_absent("de", "Welcome") is True
    assert cache.request_if_absent("de", "Welcome") is False
    assert len(dispatcher.jobs) == 1
    assert cache.pending() == {("de", "Welcome")}

    dispatcher.run_all()
    assert cache.lookup("de", "Welcome") == "Willkommen"
    assert cache.pending() == set()
    assert translator.calls == [("Welcome", "de")]


def test_request_skipped_when_cached(cache, dispatcher):
    cache.fill("de", "Welcome", "Willkommen")
    assert cache.request_if_absent("de", "Welcome") is False
    assert dispatcher.jobs == []


@pytest.mark.parametrize("locale,text", [("en", "Welcome"), ("de", ""), ("de", "   ")])
def test_request_noop_for_base_locale_or_empty_text(cache, dispatcher, locale, text):
    assert cache.request_if_absent(locale, text) is False
    assert dispatcher.jobs == []


def test_fill_during_fetch_keeps_first_value(cache, dispatcher):
    cache.request_if_absent("de", "Welcome")
    cache.fill("de", "Welcome", "Herzlich willkommen")
    dispatcher.run_all()
    assert cache.lookup("de", "Welcome") == "Herzlich willkommen"


# ── Échecs ───────────────────────────────────────────────────────────────────

def test_fetch_failure_leaves_key_absent_and_retryable(dispatcher):
    def broken(text, locale):
        raise RuntimeError("réseau indisponible")

    cache = TranslationCache(broken, dispatcher)
    cache.request_if_absent("de", "Welcome")
    dispatcher.run_all()

    assert cache.lookup("de", "Welcome") is None
    assert cache.pending() == set()
    assert cache.request_if_absent("de", "Welcome") is True


def test_untranslated_result_not_cached(cache, dispatcher):
    # FakeTranslator renvoie le texte source pour une paire inconnue
    cache.request_if_absent("it", "Welcome")
    dispatcher.run_all()
    assert cache.lookup("it", "Welcome") is None
    assert cache.request_if_absent("it", "Welcome") is True


def test_dispatch_error_releases_pending(translator):
    class BrokenDispatcher:
        def submit(self, func, *args):
            raise RuntimeError("scheduler arrêté")

    cache = TranslationCache(translator, BrokenDispatcher())
    assert cache.request_if_absent("de", "Welcome") is False
    assert cache.pending() == set()


# ── Dispatcher APScheduler ───────────────────────────────────────────────────

def test_dispatcher_runs_job_detached():
    done = threading.Event()
    received = []

    def job(locale, text):
        received.append((locale, text))
        done.set()

    dispatcher = TranslationDispatcher(max_workers=1)
    dispatcher.start()
    try:
        dispatcher.submit(job, "de", "Welcome")
        assert done.wait(timeout=5)
    finally:
        dispatcher.shutdown()
    assert received == [("de", "Welcome")]
    assert not dispatcher.running


def test_cache_with_real_dispatcher(translator):
    dispatcher = TranslationDispatcher(max_workers=2)
    cache = TranslationCache(translator, dispatcher)
    dispatcher.start()
    try:
        cache.request_if_absent("de", "Welcome")
        for _ in range(100):
            if cache.lookup("de", "Welcome"):
                break
            time.sleep(0.05)
    finally:
        dispatcher.shutdown()
    assert cache.lookup("de", "Welcome") == "Willkommen"
