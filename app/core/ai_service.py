# Fichier: app/core/ai_service.py

import logging
from typing import Any, Optional, Protocol

import requests

from app.core.config import Settings
from app.core.exceptions import GenerationUnreachableError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """One prompt in, one text blob out. No streaming, no conversation state."""

    def generate(self, prompt: str) -> str: ...


class GeminiGenerator:
    """Minimal REST client for Gemini ``generateContent``.

    Network errors, HTTP errors, a missing API key and responses without any
    text candidate all raise :class:`GenerationUnreachableError`. Nothing is
    retried.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = "gemini-2.0-flash",
        api_base: str = "https://generativelanguage.googleapis.com/v1beta/models",
        timeout_s: float = 60.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.endpoint = f"{api_base.rstrip('/')}/{model}:generateContent"
        self.timeout_s = timeout_s
        self._http = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiGenerator":
        if not settings.GOOGLE_API_KEY:
            logger.warning("⚠️ Clé API Google Gemini absente. Les appels Gemini échoueront.")
        return cls(
            settings.GOOGLE_API_KEY,
            model=settings.GEMINI_MODEL,
            api_base=settings.GEMINI_API_BASE,
            timeout_s=settings.GEMINI_TIMEOUT_S,
        )

    def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise GenerationUnreachableError("Gemini is not available (missing API key).")

        payload: dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }

        logger.info("Appel à l'API Gemini avec le modèle %s", self.model)
        try:
            response = self._http.post(
                self.endpoint,
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout_s,
            )
            response.raise_for_status()
            data: dict[str, Any] = response.json()
        except requests.RequestException as exc:
            logger.error("Erreur lors de l'appel à l'API Gemini : %s", exc)
            raise GenerationUnreachableError(f"Gemini call failed: {exc}") from exc
        except ValueError as exc:
            logger.error("Réponse Gemini illisible : %s", exc)
            raise GenerationUnreachableError("Gemini returned a non-JSON HTTP body") from exc

        text = extract_candidate_text(data)
        if not text:
            logger.error("Réponse Gemini sans contenu exploitable: %s", data)
            raise GenerationUnreachableError("Invalid Gemini response format")
        return text


def extract_candidate_text(data: Any) -> str:
    """Concatenate the text parts of the first candidate carrying any text."""
    if not isinstance(data, dict):
        return ""
    for candidate in data.get("candidates") or []:
        if not isinstance(candidate, dict):
            continue
        content = candidate.get("content") or {}
        parts = content.get("parts") or []
        texts = [part.get("text", "") for part in parts if isinstance(part, dict)]
        combined = "".join(texts).strip()
        if combined:
            return combined
    return ""
