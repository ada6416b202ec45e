# Fichier : app/core/prompt_manager.py

import logging
import os
import re
from functools import lru_cache
from typing import Any, Dict

logger = logging.getLogger(__name__)

# --- Emplacement des prompts .md ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PROMPTS_DIR = os.path.join(BASE_DIR, 'prompts')

# --- Défauts globaux ---
GLOBAL_DEFAULTS: Dict[str, Any] = {
    "jlpt_level": "N4",
    "min_vocab_per_example": 2,
    "max_vocab_per_example": 3,
    "question_count": 9,
}

# --- Regex pour {{ var }} et {{ var|default(...) }} ---
PLACEHOLDER_RE = re.compile(r"{{\s*([a-zA-Z_][\w\.]*)\s*(?:\|default\(([^)]*)\))?\s*}}")


def _coerce_literal(s: str) -> Any:
    """Transforme 'true'/'false'/nombre/'null' en littéraux Python; sinon string sans guillemets."""
    t = s.strip()
    if t.lower() in ("true", "false"):
        return t.lower() == "true"
    if t.lower() == "null":
        return None
    try:
        if "." in t:
            return float(t)
        return int(t)
    except ValueError:
        pass
    if (t.startswith("'") and t.endswith("'")) or (t.startswith('"') and t.endswith('"')):
        return t[1:-1]
    return t


def _lookup(context: Dict[str, Any], dotted: str) -> Any:
    """Looks up a dotted path in a nested context of dicts and objects."""
    cur: Any = context
    for part in dotted.split("."):
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        elif hasattr(cur, part):
            cur = getattr(cur, part)
        else:
            return None
    return cur


def _format_value(val: Any) -> str:
    if isinstance(val, bool):
        return "true" if val else "false"
    if val is None:
        return "null"
    # Les listes (grammaire, kanji tirés au sort) sont injectées séparées par des virgules
    if isinstance(val, (list, tuple)):
        return ", ".join(str(item) for item in val)
    return str(val)


def _render_template(template: str, context: Dict[str, Any]) -> str:
    def repl(m: re.Match) -> str:
        var = m.group(1)
        default_raw = m.group(2)
        val = _lookup(context, var)

        if val is None and default_raw is not None:
            val = _coerce_literal(default_raw)

        return _format_value(val)

    return PLACEHOLDER_RE.sub(repl, template)


JSON_GUARDRAIL = (
    "\n\n[OUTPUT CONSTRAINT]\n"
    "- Return ONLY one valid JSON value.\n"
    "- No markdown, no commentary outside the JSON."
)


@lru_cache(maxsize=32)
def get_prompt_template(path: str) -> str:
    """
    Charge un modèle de prompt depuis un fichier .md (``"jlpt.grammar_explanation"``
    -> ``prompts/jlpt/grammar_explanation.md``).
    """
    parts = path.split('.')
    file_name = f"{parts[-1]}.md"
    full_path = os.path.join(PROMPTS_DIR, *parts[:-1], file_name)

    try:
        with open(full_path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        logger.error("Prompt non trouvé à l'emplacement %s", full_path)
        raise


def get_prompt(path: str, ensure_json: bool = False, **kwargs) -> str:
    """
    Récupère un template et injecte variables + défauts.
    - Supporte {{ var }} et {{ var|default(...) }}.
    - ensure_json ajoute une garde 'JSON only'.
    """
    template = get_prompt_template(path)
    context = dict(GLOBAL_DEFAULTS)
    context.update(kwargs)

    rendered = _render_template(template, context).strip()
    if ensure_json:
        rendered = rendered + JSON_GUARDRAIL
    return rendered
