"""
Router FastAPI — endpoints du moteur DNA.

POST /dna/render      → PageDocument (+ locale) → blocs résolus / placeholders
GET  /dna/families    → codes de type par famille + substitutions
GET  /dna/tokens      → snapshot des tokens globaux + variables CSS
PUT  /dna/locale      → change la langue active
GET  /dna/i18n/{lang} → dictionnaire d'interface pour une langue
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .core.registry import STAND_INS, BlockFamily, codes_for
from .engine import Engine
from .i18n import dictionary
from .page.document import PageDocument
from .page.render import render_pass
from .page.theme import css_variables, theme_mode

router = APIRouter(prefix="/dna", tags=["dna"])


class RenderRequest(BaseModel):
    document: PageDocument
    locale: Optional[str] = None


class LocaleRequest(BaseModel):
    locale: str


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


@router.post("/render", summary="Résout un document de page")
def render(body: RenderRequest, engine: Engine = Depends(get_engine)) -> JSONResponse:
    """Résolution synchrone ; les traductions manquantes arrivent aux appels suivants."""
    ctx = engine.context(body.locale)
    items = render_pass(body.document, ctx)
    return JSONResponse({
        "locale": ctx.locale,
        "blocks": [item.model_dump(mode="json") for item in items],
    })


@router.get("/families", summary="Liste les familles de blocs et leurs codes")
def families() -> JSONResponse:
    data = []
    for family in BlockFamily:
        data.append({
            "family": family.value,
            "codes": codes_for(family),
            "rendered_as": STAND_INS.get(family, family).value,
        })
    return JSONResponse({"families": data})


@router.get("/tokens", summary="Tokens globaux + variables CSS dérivées")
def tokens(engine: Engine = Depends(get_engine)) -> JSONResponse:
    return JSONResponse({
        "settings": engine.store.snapshot(),
        "css_variables": css_variables(engine.store),
        "theme": theme_mode(engine.store),
        "locale": engine.store.current_locale,
    })


@router.put("/locale", summary="Change la langue active")
def set_locale(body: LocaleRequest, engine: Engine = Depends(get_engine)) -> dict:
    try:
        locale = engine.store.set_locale(body.locale)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return {"locale": locale}


@router.get("/i18n/{lang}", summary="Retourne le dictionnaire d'interface pour une langue")
def i18n_catalog(lang: str) -> JSONResponse:
    if lang not in dictionary.available_catalogs():
        return JSONResponse({"error": f"Langue '{lang}' non disponible"}, status_code=404)
    return JSONResponse(dictionary.catalog(lang))
