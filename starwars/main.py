import json
import logging
from typing import Any, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from .config import Settings, get_settings
from .models import MissingNameError
from .pages import add_page, view_page
from .store import CharacterStore

logger = logging.getLogger(__name__)

API_PREFIX = "/api/characters"

JSON_TYPE = "application/json"
FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


# ─────────────────────────────────────────────
# store / body helpers
# ─────────────────────────────────────────────
def get_store(req: Request) -> CharacterStore:
    return req.app.state.store


async def read_payload(req: Request) -> dict[str, Any]:
    """JSON object or form fields; anything else reads as an empty payload.

    A JSON body that does not parse is rejected with 400 before any record
    is touched.
    """
    ctype = req.headers.get("content-type", "")
    if ctype.startswith(FORM_TYPES):
        form = await req.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    if not ctype.startswith(JSON_TYPE):
        return {}

    raw = await req.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise HTTPException(400, "request body is not valid JSON")
    return body if isinstance(body, dict) else {}


async def missing_name_handler(req: Request, exc: MissingNameError) -> JSONResponse:
    logger.error("cannot create character: %s", exc)
    return JSONResponse({"detail": str(exc)}, status_code=500)


# ─────────────────────────────────────────────
# app factory
# ─────────────────────────────────────────────
def create_app(
    store: Optional[CharacterStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Star Wars Characters", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.store = store if store is not None else CharacterStore()
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.add_exception_handler(MissingNameError, missing_name_handler)

    # ─────────── pages ───────────
    @app.get("/", response_class=HTMLResponse)
    def view():
        return view_page(API_PREFIX)

    @app.get("/add", response_class=HTMLResponse)
    def add():
        return add_page(API_PREFIX)

    # ─────────── api ───────────
    @app.get(API_PREFIX)
    def list_characters(store: CharacterStore = Depends(get_store)):
        return [c.to_json() for c in store.list_all()]

    @app.get(API_PREFIX + "/{character}")
    def get_character(character: str, store: CharacterStore = Depends(get_store)):
        logger.info("looking up %s", character)
        chosen = store.find(character)
        # absence is a 200 with a literal false
        return chosen.to_json() if chosen is not None else False

    @app.post(API_PREFIX)
    async def create_character(req: Request, store: CharacterStore = Depends(get_store)):
        payload = await read_payload(req)
        return store.add(payload).to_json()

    return app


app = create_app()
