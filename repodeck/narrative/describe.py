"""Best-effort one-line description for repositories that lack one."""

from __future__ import annotations

import re

from repodeck.narrative import templates
from repodeck.vcs.models import RepositoryMetadata

MIN_SENTENCE_LENGTH = 20
MAX_DESCRIPTION_LENGTH = 150

_MARKUP = re.compile(r"!\[[^\]]*\]\([^)]*\)|<[^>]+>|[*_`]")
_LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")

_FRONTEND_HINTS = ("component", "pages/", "src/app", ".tsx", ".jsx", ".vue", ".svelte")
_BACKEND_HINTS = ("server", "api/", "routes", "controller", "handler")


def _clean(line: str) -> str:
    line = _LINK.sub(r"\1", line)
    return _MARKUP.sub("", line).strip()


def readme_summary(readme: str) -> str:
    """First prose line of a README, skipping headings, badges and code."""
    in_code = False
    for raw in readme.splitlines():
        line = raw.strip()
        if line.startswith("```"):
            in_code = not in_code
            continue
        if in_code or not line or line.startswith(("#", ">", "|", "-", "*", "[![", "<")):
            continue
        text = _clean(line)
        if len(text) < MIN_SENTENCE_LENGTH:
            continue
        text = text.rstrip("。.")
        if len(text) > MAX_DESCRIPTION_LENGTH:
            text = text[: MAX_DESCRIPTION_LENGTH - 1].rstrip() + "…"
        return text
    return ""


def structural_description(meta: RepositoryMetadata, language: str) -> str:
    paths = [f.path.lower() for f in meta.files]
    frontend = any(h in p for p in paths for h in _FRONTEND_HINTS)
    backend = any(h in p for p in paths for h in _BACKEND_HINTS)
    if frontend and backend:
        key = "description_fullstack"
    elif frontend:
        key = "description_frontend"
    elif backend:
        key = "description_backend"
    else:
        key = "description_default"
    return templates.phrase(language, key, language=meta.primary_language)


def describe(meta: RepositoryMetadata, language: str) -> tuple[str, str]:
    """Return ``(description, source)``.

    ``source`` is ``"description"``, ``"readme"`` or ``"structure"``
    depending on where the text came from.
    """
    if meta.description.strip():
        return meta.description.strip().rstrip("。."), "description"
    summary = readme_summary(meta.readme)
    if summary:
        return summary, "readme"
    return structural_description(meta, language), "structure"
