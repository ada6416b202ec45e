# Fichier : app/utils/json_utils.py

from __future__ import annotations

import json
import re
from typing import Any, Optional

from app.core.exceptions import MalformedGenerationError

# ```json ... ``` (tag insensible à la casse)
_TAGGED_FENCE_RE = re.compile(r"```[ \t]*json\b\s*(.*?)```", re.IGNORECASE | re.DOTALL)
# n'importe quel bloc ``` ... ```
_GENERIC_FENCE_RE = re.compile(r"```(.*?)```", re.DOTALL)
# info-string d'un bloc non-json, ex: "```javascript\n"
_INFO_STRING_RE = re.compile(r"^[ \t]*[A-Za-z][\w+.-]*[ \t]*\n")


def match_tagged_fence(text: str) -> Optional[str]:
    """Return the inner content of the first ```json fenced block, or ``None``."""
    match = _TAGGED_FENCE_RE.search(text)
    if match is None:
        return None
    return match.group(1)


def match_generic_fence(text: str) -> Optional[str]:
    """Return the inner content of the first fenced block of any kind, or ``None``.

    A leading info-string line (``python``, ``js``...) is not part of the
    content and is dropped.
    """
    match = _GENERIC_FENCE_RE.search(text)
    if match is None:
        return None
    inner = match.group(1)
    return _INFO_STRING_RE.sub("", inner, count=1)


def sanitize_generation_text(raw: Optional[str]) -> str:
    """
    Extrait le JSON candidat d'une réponse du générateur :
      1) bloc ```json ... ```
      2) sinon n'importe quel bloc ``` ... ```
      3) sinon le texte complet
    Le résultat est toujours une chaîne (éventuellement invalide), jamais d'exception.
    """
    text = "" if raw is None else str(raw)

    inner = match_tagged_fence(text)
    if inner is None:
        inner = match_generic_fence(text)
    if inner is None:
        inner = text
    return inner.strip()


def parse_generation_json(candidate: str) -> Any:
    """Strict ``json.loads``; anything else is a :class:`MalformedGenerationError`."""
    try:
        return json.loads(candidate)
    except (TypeError, ValueError, RecursionError) as exc:
        preview = (candidate or "")[:80]
        raise MalformedGenerationError(
            f"Generator response is not valid JSON ({exc}); starts with {preview!r}"
        ) from exc
