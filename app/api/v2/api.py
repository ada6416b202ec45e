# Fichier: app/api/v2/api.py
from fastapi import APIRouter
from .endpoints import (
    exam_router,
    generation_router,
    grammar_router,
    kanji_router,
)

api_router = APIRouter()

api_router.include_router(generation_router.router, prefix="/generation", tags=["Generation"])
api_router.include_router(grammar_router.router, prefix="/grammar", tags=["Grammar"])
api_router.include_router(exam_router.router, prefix="/exam", tags=["Exam"])
api_router.include_router(kanji_router.router, prefix="/kanji", tags=["Kanji"])
