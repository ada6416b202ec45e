import logging
from functools import lru_cache
from typing import Generator

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.ai_service import GeminiGenerator, TextGenerator
from app.core.config import settings
from app.core.exceptions import PipelineError
from app.db import session as db_session
from app.services.batch_selector import BatchSelector

log = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """Provide one SQLAlchemy session per request.

    FastAPI caches dependencies within a request, so the route handler and the
    ``BatchSelector`` dependency share this session and therefore the same
    transaction.
    """

    db = db_session.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache(maxsize=1)
def get_generator() -> TextGenerator:
    return GeminiGenerator.from_settings(settings)


def get_batch_selector(db: Session = Depends(get_db)) -> BatchSelector:
    return BatchSelector(
        db,
        grammar_sample_size=settings.GRAMMAR_SAMPLE_SIZE,
        kanji_sample_size=settings.KANJI_SAMPLE_SIZE,
    )


def to_http_exception(exc: PipelineError) -> HTTPException:
    """Translate a pipeline failure into the HTTP error returned to the client."""

    if exc.status_code >= 500:
        log.error("%s: %s", type(exc).__name__, exc.message)
    else:
        log.info("%s: %s", type(exc).__name__, exc.message)
    return HTTPException(status_code=exc.status_code, detail=exc.message)
