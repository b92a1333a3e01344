"""Named heuristic rules used by the insight engine.

Every rule is a small pure function over lower-cased file paths, dependency
names or plain counts, so each one can be tested and extended on its own.
Thresholds are design constants.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

# ---------------------------------------------------------------------------
# Architecture patterns
# ---------------------------------------------------------------------------


def _count(paths: Sequence[str], fragment: str) -> int:
    return sum(1 for p in paths if fragment in p)


def _any(paths: Sequence[str], fragment: str) -> bool:
    return any(fragment in p for p in paths)


def is_mvc(paths: Sequence[str]) -> bool:
    return _any(paths, "model") and _any(paths, "view") and _any(paths, "controller")


def is_layered(paths: Sequence[str]) -> bool:
    return _any(paths, "repository") and _any(paths, "service") and _any(paths, "controller")


def is_service_oriented(paths: Sequence[str]) -> bool:
    return _count(paths, "service") > 3


def is_component_based(paths: Sequence[str]) -> bool:
    return _count(paths, "component") > 5


def is_modular(paths: Sequence[str]) -> bool:
    if not paths:
        return False
    if _any(paths, "module"):
        return True
    deep = sum(1 for p in paths if len(p.split("/")) > 3)
    return deep > len(paths) * 0.5


# Evaluated in this order; the first match becomes the architecture label.
ARCHITECTURE_RULES: list[tuple[str, Callable[[Sequence[str]], bool]]] = [
    ("MVC (Model-View-Controller)", is_mvc),
    ("Layered Architecture", is_layered),
    ("Service-Oriented Architecture", is_service_oriented),
    ("Component-Based Architecture", is_component_based),
    ("Modular Design", is_modular),
]


# ---------------------------------------------------------------------------
# Bucketed scores
# ---------------------------------------------------------------------------


def bucket(value: int, thresholds: Sequence[tuple[int, int]]) -> int:
    """Return the points of the first (threshold, points) pair value exceeds."""
    for threshold, points in thresholds:
        if value > threshold:
            return points
    return 0


FILE_COUNT_BUCKETS = [(100, 3), (50, 2), (20, 1)]
LANGUAGE_COUNT_BUCKETS = [(5, 3), (3, 2), (1, 1)]
COMMIT_COUNT_BUCKETS = [(100, 2), (50, 1)]

README_LENGTH_BUCKETS = [(1000, 2), (500, 1)]
STAR_BUCKETS = [(50, 2), (10, 1)]
MATURITY_COMMIT_BUCKETS = [(50, 1)]

TEST_PRESENCE_POINTS = 2
CONFIG_PRESENCE_POINTS = 1


def complexity_tier(score: int) -> str:
    if score >= 6:
        return "high"
    if score >= 3:
        return "medium"
    return "low"


def maturity_tier(score: int) -> str:
    if score >= 6:
        return "mature"
    if score >= 3:
        return "developing"
    return "early"


def difficulty_tier(score: int) -> str:
    if score >= 6:
        return "advanced"
    if score >= 3:
        return "intermediate"
    return "beginner"


# ---------------------------------------------------------------------------
# Presence checks
# ---------------------------------------------------------------------------

_TEST_FRAGMENTS = ("test", "spec", "__tests__")
_CONFIG_FRAGMENTS = (
    ".config",
    "config/",
    "package.json",
    "pyproject.toml",
    "setup.cfg",
    "cargo.toml",
    "go.mod",
    "tsconfig.json",
)


def is_test_path(path: str) -> bool:
    return any(f in path for f in _TEST_FRAGMENTS)


def has_tests(paths: Sequence[str]) -> bool:
    return any(is_test_path(p) for p in paths)


def has_config(paths: Sequence[str]) -> bool:
    return any(f in p for p in paths for f in _CONFIG_FRAGMENTS)


def has_source_dir(paths: Sequence[str]) -> bool:
    return any(p.split("/", 1)[0] in ("src", "lib") for p in paths if "/" in p)


def has_docs_dir(paths: Sequence[str]) -> bool:
    return any(p.split("/", 1)[0] in ("docs", "documentation") for p in paths if "/" in p)


def has_gitignore(paths: Sequence[str]) -> bool:
    return any(p.rsplit("/", 1)[-1] == ".gitignore" for p in paths)


def project_structure(paths: Sequence[str]) -> str:
    source = has_source_dir(paths)
    tests = has_tests(paths)
    if source and tests and has_docs_dir(paths) and has_config(paths):
        return "well-structured"
    if source and tests:
        return "source-and-tests"
    if source:
        return "source-only"
    return "flat"


def test_coverage(paths: Sequence[str]) -> str:
    if not paths:
        return "low"
    ratio = sum(1 for p in paths if is_test_path(p)) / len(paths)
    if ratio > 0.3:
        return "high"
    if ratio > 0.1:
        return "medium"
    return "low"


def documentation_level(markdown_files: int, readme_length: int) -> str:
    score = 0
    if readme_length > 100:
        score += 2
    if readme_length > 1000:
        score += 1
    if markdown_files > 1:
        score += 1
    if markdown_files > 3:
        score += 1
    if score >= 4:
        return "excellent"
    if score >= 3:
        return "good"
    if score >= 2:
        return "fair"
    return "poor"


# ---------------------------------------------------------------------------
# Framework / tool lexicon
# ---------------------------------------------------------------------------

# dependency name -> label; order here is the output order.
FRAMEWORK_DEPENDENCIES: dict[str, str] = {
    "next": "Next.js",
    "react": "React",
    "react-native": "React Native",
    "vue": "Vue.js",
    "nuxt": "Nuxt.js",
    "@angular/core": "Angular",
    "svelte": "Svelte",
    "electron": "Electron",
    "express": "Express",
    "fastify": "Fastify",
    "@nestjs/core": "NestJS",
    "django": "Django",
    "flask": "Flask",
    "fastapi": "FastAPI",
    "tensorflow": "TensorFlow",
    "torch": "PyTorch",
    "scikit-learn": "scikit-learn",
    "pandas": "pandas",
    "tailwindcss": "Tailwind CSS",
    "prisma": "Prisma",
    "mongoose": "Mongoose",
    "sqlalchemy": "SQLAlchemy",
    "socket.io": "Socket.IO",
}

# path fragment -> label, matched against lower-cased paths.
FRAMEWORK_PATHS: dict[str, str] = {
    "next.config": "Next.js",
    "nuxt.config": "Nuxt.js",
    "angular.json": "Angular",
    "manage.py": "Django",
    ".vue": "Vue.js",
    ".svelte": "Svelte",
    ".tsx": "React",
    ".jsx": "React",
}

TOOL_DEPENDENCIES: dict[str, str] = {
    "typescript": "TypeScript",
    "vite": "Vite",
    "webpack": "Webpack",
    "rollup": "Rollup",
    "parcel": "Parcel",
    "esbuild": "esbuild",
    "babel-loader": "Babel",
    "@babel/core": "Babel",
    "eslint": "ESLint",
    "prettier": "Prettier",
    "jest": "Jest",
    "vitest": "Vitest",
    "mocha": "Mocha",
    "pytest": "pytest",
    "cypress": "Cypress",
    "playwright": "Playwright",
    "@playwright/test": "Playwright",
    "storybook": "Storybook",
}

TOOL_PATHS: dict[str, str] = {
    "dockerfile": "Docker",
    "docker-compose": "Docker",
    ".github/workflows": "GitHub Actions",
    ".gitlab-ci": "GitLab CI",
    "webpack.config": "Webpack",
    "vite.config": "Vite",
    "tsconfig.json": "TypeScript",
    "makefile": "Make",
}


def match_lexicon(
    dependency_names: Sequence[str],
    paths: Sequence[str],
    by_dependency: dict[str, str],
    by_path: dict[str, str],
) -> tuple[str, ...]:
    """Labels whose dependency name or path fragment is present, deduplicated."""
    names = set(dependency_names)
    labels: list[str] = []
    for dep, label in by_dependency.items():
        if dep in names and label not in labels:
            labels.append(label)
    for fragment, label in by_path.items():
        if label not in labels and _any(paths, fragment):
            labels.append(label)
    return tuple(labels)


# ---------------------------------------------------------------------------
# Design patterns
# ---------------------------------------------------------------------------

_HOOK_FILE = re.compile(r"(^|/)use[A-Z]\w*\.")

DESIGN_PATTERN_RULES: list[tuple[str, Callable[[Sequence[str], Sequence[str]], bool]]] = [
    ("Factory Pattern", lambda low, raw: _any(low, "factory")),
    ("Observer Pattern", lambda low, raw: _any(low, "observer") or _any(low, "event")),
    ("Singleton Pattern", lambda low, raw: _any(low, "singleton")),
    ("Repository Pattern", lambda low, raw: _any(low, "repository")),
    ("Service Pattern", lambda low, raw: _any(low, "service")),
    ("Hooks Pattern", lambda low, raw: _any(low, "hook") or any(_HOOK_FILE.search(p) for p in raw)),
]


# ---------------------------------------------------------------------------
# Project type
# ---------------------------------------------------------------------------

# Checked in order against tokens from the repository name and description.
PROJECT_TYPE_CUES: list[tuple[str, frozenset[str]]] = [
    ("learning", frozenset({
        "toeic", "toefl", "ielts", "eiken", "learn", "learning", "study", "quiz",
        "flashcard", "flashcards", "vocabulary", "vocab", "education", "lesson",
        "course", "tutor",
    })),
    ("dashboard", frozenset({
        "dashboard", "dashboards", "admin", "analytics", "monitor", "monitoring",
        "console", "panel", "kpi",
    })),
    ("api", frozenset({
        "api", "apis", "rest", "graphql", "grpc", "server", "backend", "microservice",
        "microservices", "endpoint", "endpoints",
    })),
    ("data", frozenset({
        "ml", "ai", "data", "dataset", "analysis", "etl", "notebook", "prediction",
        "model", "models", "neural",
    })),
    ("cli", frozenset({"cli", "tool", "tools", "utility", "command", "terminal"})),
    ("library", frozenset({"library", "lib", "sdk", "package", "framework", "plugin", "module"})),
    ("mobile", frozenset({"mobile", "ios", "android", "flutter"})),
    ("game", frozenset({"game", "games", "gaming"})),
    ("web", frozenset({"web", "app", "frontend", "website", "site", "spa", "pwa"})),
]

# "machine learning" / "deep learning" describe data projects, not study apps.
_ML_QUALIFIERS = frozenset({"machine", "deep", "reinforcement"})

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_TOKEN = re.compile(r"[a-z0-9]+")


def tokenize(*texts: str) -> list[str]:
    """Split camelCase, kebab-case and prose into lower-case word tokens."""
    tokens: list[str] = []
    for text in texts:
        if text:
            tokens.extend(_TOKEN.findall(_CAMEL_BOUNDARY.sub(r"\1 \2", text).lower()))
    return tokens


def project_type_from_tokens(tokens: Sequence[str]) -> str | None:
    words = set(tokens)
    for kind, cues in PROJECT_TYPE_CUES:
        hits = words & cues
        if kind == "learning" and hits <= {"learn", "learning"} and words & _ML_QUALIFIERS:
            continue
        if hits:
            return kind
    return None


def project_type_from_paths(paths: Sequence[str]) -> str | None:
    if _any(paths, "component") or _any(paths, "pages/"):
        return "web"
    if _any(paths, "api/") or _any(paths, "server") or _any(paths, "routes"):
        return "api"
    return None


# ---------------------------------------------------------------------------
# Strengths, risks and features (stable keys)
# ---------------------------------------------------------------------------

LARGE_FILE_BYTES = 10_000


def strengths(
    stars: int, commit_count: int, tested: bool, readme_length: int, language_count: int
) -> tuple[str, ...]:
    found: list[str] = []
    if stars > 50:
        found.append("community-recognition")
    if commit_count > 100:
        found.append("active-development")
    if tested:
        found.append("tested")
    if readme_length > 1000:
        found.append("well-documented")
    if language_count == 1:
        found.append("unified-stack")
    return tuple(found)


def risks(
    tested: bool,
    readme_length: int,
    stars: int,
    dependency_count: int,
    large_files: int,
    paths: Sequence[str],
) -> tuple[str, ...]:
    found: list[str] = []
    if not tested:
        found.append("missing-tests")
    if readme_length < 500:
        found.append("thin-documentation")
    if stars < 10:
        found.append("low-visibility")
    if dependency_count > 20:
        found.append("dependency-sprawl")
    if large_files > 5:
        found.append("large-files")
    if paths and not has_gitignore(paths):
        found.append("missing-gitignore")
    return tuple(found)


def unique_features(
    dependency_names: Sequence[str], paths: Sequence[str], readme: str
) -> tuple[str, ...]:
    deps = " ".join(dependency_names)
    readme_tokens = set(tokenize(readme))
    found: list[str] = []
    if any(k in deps for k in ("tensorflow", "torch", "sklearn", "scikit-learn")) or (
        "machine" in readme_tokens and "learning" in readme_tokens
    ):
        found.append("machine-learning")
    if "socket" in deps or _any(paths, "socket"):
        found.append("realtime")
    if any(k in deps for k in ("react-native", "flutter")):
        found.append("mobile")
    if _any(paths, "api") or _any(paths, "routes"):
        found.append("rest-api")
    if _any(paths, "auth") or _any(paths, "login"):
        found.append("authentication")
    if _any(paths, "payment") or "stripe" in deps:
        found.append("payments")
    if _any(paths, "pwa") or _any(paths, "manifest.json") or _any(paths, "service-worker"):
        found.append("pwa")
    if "offline" in readme_tokens:
        found.append("offline")
    return tuple(found)
