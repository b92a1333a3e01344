"""Dependency manifest parsing and file classification.

Turns raw manifest text (package.json, requirements.txt, pyproject.toml)
into Dependency records, and assigns each tree path an inferred type and an
importance score.
"""

from __future__ import annotations

import json
import re

from repodeck.vcs.models import Dependency, RepoFile

# Manifests probed by metadata sources, in lookup order.
MANIFEST_FILES: tuple[str, ...] = ("package.json", "requirements.txt", "pyproject.toml")

_VERSION_SPLIT = re.compile(r"[>=<!~;\[\s]")

_EXTENSION_TYPES: dict[str, str] = {
    "js": "javascript",
    "mjs": "javascript",
    "ts": "typescript",
    "jsx": "react",
    "tsx": "react",
    "py": "python",
    "java": "java",
    "kt": "kotlin",
    "cpp": "cpp",
    "c": "c",
    "h": "c",
    "cs": "csharp",
    "rb": "ruby",
    "php": "php",
    "md": "markdown",
    "rst": "markdown",
    "json": "json",
    "yml": "yaml",
    "yaml": "yaml",
    "toml": "toml",
    "css": "css",
    "scss": "css",
    "html": "html",
    "vue": "vue",
    "svelte": "svelte",
    "go": "go",
    "rs": "rust",
    "swift": "swift",
    "sql": "sql",
    "sh": "shell",
}

# (pattern, importance) checked in order; first hit wins.
_IMPORTANCE_RULES: list[tuple[re.Pattern[str], int]] = [
    (re.compile(r"^readme", re.IGNORECASE), 10),
    (re.compile(r"(^|/)(package\.json|requirements\.txt|pyproject\.toml|pom\.xml|Cargo\.toml|go\.mod)$"), 9),
    (re.compile(r"(^|/)(src|lib|app)/"), 8),
    (re.compile(r"(^|/)(tests?|spec|__tests__)/"), 7),
    (re.compile(r"\.config\.|(^|/)\.env|(^|/)Dockerfile"), 6),
    (re.compile(r"(^|/)(docs|documentation)/"), 5),
]

_MIN_IMPORTANCE = 3


def infer_file_type(path: str) -> str:
    """Map a file extension to a coarse type label."""
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return "unknown"
    ext = name.rsplit(".", 1)[-1].lower()
    return _EXTENSION_TYPES.get(ext, "unknown")


def file_importance(path: str) -> int:
    """Score a path in [3, 10] by how much it says about the project."""
    for pattern, score in _IMPORTANCE_RULES:
        if pattern.search(path):
            return score
    return _MIN_IMPORTANCE


def build_repo_file(path: str, size: int | None = None) -> RepoFile:
    return RepoFile(
        path=path,
        size=size or 0,
        type=infer_file_type(path),
        importance=file_importance(path),
    )


def parse_package_json(content: str) -> list[Dependency]:
    """Extract runtime and dev dependencies from package.json."""
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, TypeError):
        return []
    if not isinstance(data, dict):
        return []

    deps: list[Dependency] = []
    for section, kind in (("dependencies", "runtime"), ("devDependencies", "dev")):
        entries = data.get(section, {})
        if not isinstance(entries, dict):
            continue
        for name, version in entries.items():
            deps.append(Dependency(name=name, version=str(version), kind=kind))
    return deps


def parse_requirements_txt(content: str) -> list[Dependency]:
    """Extract pinned or unpinned package names from requirements.txt."""
    deps: list[Dependency] = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or line.startswith("-"):
            continue
        name = _VERSION_SPLIT.split(line, maxsplit=1)[0].strip()
        if not name:
            continue
        version = "latest"
        if "==" in line:
            version = line.split("==", 1)[1].split(";", 1)[0].strip() or "latest"
        deps.append(Dependency(name=name, version=version))
    return deps


def parse_pyproject(content: str) -> list[Dependency]:
    """Simple extraction of [project] dependencies from pyproject.toml."""
    deps: list[Dependency] = []
    in_deps = False
    for line in content.splitlines():
        stripped = line.strip()
        if re.match(r"^dependencies\s*=\s*\[", stripped):
            in_deps = "]" not in stripped
            deps.extend(_pyproject_items(stripped.split("=", 1)[1]))
            continue
        if in_deps:
            if stripped.startswith("]"):
                in_deps = False
                continue
            deps.extend(_pyproject_items(stripped))
            if "]" in stripped:
                in_deps = False
    return deps


def _pyproject_items(fragment: str) -> list[Dependency]:
    deps: list[Dependency] = []
    for item in re.findall(r'"([^"]+)"', fragment):
        name = _VERSION_SPLIT.split(item, maxsplit=1)[0].strip()
        if not name:
            continue
        version = item[len(name):].strip() or "latest"
        deps.append(Dependency(name=name, version=version))
    return deps


_PARSERS = {
    "package.json": parse_package_json,
    "requirements.txt": parse_requirements_txt,
    "pyproject.toml": parse_pyproject,
}


def parse_manifests(manifests: dict[str, str]) -> list[Dependency]:
    """Aggregate dependencies from every known manifest, deduplicated by name."""
    seen: set[str] = set()
    unique: list[Dependency] = []
    for filename in MANIFEST_FILES:
        content = manifests.get(filename)
        if not content:
            continue
        for dep in _PARSERS[filename](content):
            key = dep.name.lower()
            if key not in seen:
                seen.add(key)
                unique.append(dep)
    return unique
