"""
DNA Canvas — FastAPI app
Démarrer : uvicorn dna_canvas.main:app --reload --port 8001
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .engine import Engine
from .router import router

log = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """App FastAPI ; moteur construit depuis l'environnement si non fourni."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.engine.start()
        yield
        app.state.engine.shutdown()
        log.info("Moteur DNA arrêté")

    app = FastAPI(title="DNA Canvas", version="0.1.0", docs_url="/docs", lifespan=lifespan)
    app.state.engine = engine or Engine.from_settings()
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "dna_canvas", "version": "0.1.0"}

    return app


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
app = create_app()
