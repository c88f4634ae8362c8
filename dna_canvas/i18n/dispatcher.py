"""
Dispatcher APScheduler — exécution détachée des fetchs de traduction.

Chaque fetch est un job sans trigger : exécuté une fois, immédiatement, sur le
pool de threads du scheduler. Pas d'attente, pas d'annulation, pas de timeout.
"""
import logging
from typing import Any, Callable

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler

log = logging.getLogger(__name__)


class TranslationDispatcher:

    def __init__(self, max_workers: int = 4):
        self._scheduler = BackgroundScheduler(
            timezone="UTC",
            executors={"default": ThreadPoolExecutor(max_workers)},
            job_defaults={"misfire_grace_time": None, "coalesce": False},
        )

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def start(self):
        """Démarre le pool. Idempotent ; les jobs soumis avant start() partent au démarrage."""
        if self._scheduler.running:
            return
        self._scheduler.start()
        log.info("Dispatcher de traduction démarré")

    def shutdown(self):
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
            log.info("Dispatcher de traduction arrêté")

    def submit(self, func: Callable[..., Any], *args: Any) -> None:
        """Planifie func(*args) maintenant, sans retour consommé par l'appelant."""
        self._scheduler.add_job(func, args=list(args))
