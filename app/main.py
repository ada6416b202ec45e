import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Imports de l'application
from app.core.config import settings
from app.db.base import Base
from app.db import session as db_session
from app.api.v2.api import api_router

# --- Configuration du logging ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _sanitize_origin(origin: str | None) -> str | None:
    if not origin:
        return None
    value = origin.strip()
    if not value:
        return None
    if value == "*":
        return value
    if not value.startswith("http"):
        value = f"https://{value}"
    return value.rstrip("/")


def _build_cors_origins() -> list[str]:
    origins = sorted({o for o in (_sanitize_origin(raw) for raw in settings.BACKEND_CORS_ORIGINS) if o})
    logger.info("CORS origins configurés: %s", origins)
    return origins


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("Vérification et création des tables de la base de données...")
    Base.metadata.create_all(bind=db_session.engine)
    logger.info("✅ Les tables de la base de données sont prêtes.")
    yield


# --- Initialisation de l'application FastAPI ---
app = FastAPI(
    title="JLPT Study API",
    openapi_url="/api/v2/openapi.json",
    lifespan=lifespan,
)

cors_origins = _build_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v2")


# --- Route Racine ---
@app.get("/")
def read_root():
    return {"message": "こんにちは、N4学習者さん！ (Hello, N4 learner!)"}
