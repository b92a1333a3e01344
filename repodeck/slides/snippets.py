"""Illustrative code snippets for the approach/implementation slide."""

from __future__ import annotations

import re

from repodeck.narrative import templates
from repodeck.slides.models import CodeSnippet
from repodeck.vcs.models import RepositoryMetadata

LAYOUT_FILES = 8

_IDENTIFIER = re.compile(r"[^0-9a-zA-Z]+")

_SNIPPETS: dict[str, str] = {
    "javascript": """// {name} - Core Implementation
function initializeApp() {{
  const config = {{
    name: '{name}',
    version: '1.0.0',
    features: [{features}],
  }};

  return new App(config);
}}""",
    "typescript": """// {name} - Type-Safe Implementation
interface AppConfig {{
  name: string;
  version: string;
  features: string[];
}}

class App {{
  constructor(private config: AppConfig) {{}}

  initialize(): Promise<void> {{
    return this.setupFeatures();
  }}
}}

export const app = new App({{ name: '{name}', version: '1.0.0', features: [{features}] }});""",
    "python": """# {name} - Python Implementation
class {class_name}:
    def __init__(self, name: str = "{name}") -> None:
        self.name = name
        self.features = [{features}]

    def initialize(self) -> None:
        \"\"\"Initialize the application with core features.\"\"\"
        self.setup_logging()
        self.load_configuration()""",
    "go": """// {name} - Go Implementation
package main

type App struct {{
	Name     string
	Features []string
}}

func main() {{
	app := App{{Name: "{name}", Features: []string{{{features}}}}}
	app.Run()
}}""",
}

_EXPLANATIONS: dict[str, dict[str, str]] = {
    "ja": {
        "javascript": "アプリケーションの初期化とコア機能",
        "typescript": "TypeScriptによる型安全な実装",
        "python": "Pythonによるクリーンな実装アプローチ",
        "go": "Goによるシンプルで高速な実装",
        "layout": "主要ファイルの構成",
    },
    "en": {
        "javascript": "Application bootstrap and core features",
        "typescript": "Type-safe implementation in TypeScript",
        "python": "A clean implementation approach in Python",
        "go": "A simple, fast implementation in Go",
        "layout": "Layout of the key files",
    },
    "zh": {
        "javascript": "应用初始化与核心功能",
        "typescript": "基于 TypeScript 的类型安全实现",
        "python": "基于 Python 的简洁实现",
        "layout": "主要文件结构",
    },
}


def _class_name(name: str) -> str:
    parts = [p for p in _IDENTIFIER.split(name) if p]
    ident = "".join(p[:1].upper() + p[1:] for p in parts) or "Application"
    return ident if not ident[0].isdigit() else f"App{ident}"


def _layout(meta: RepositoryMetadata) -> str:
    ranked = sorted(meta.files, key=lambda f: (-f.importance, f.path))[:LAYOUT_FILES]
    lines = [f"{meta.name}/"]
    lines += [f"├── {f.path}" for f in ranked[:-1]]
    lines.append(f"└── {ranked[-1].path}")
    return "\n".join(lines)


def code_snippet(
    meta: RepositoryMetadata, frameworks: tuple[str, ...] | list[str], language: str
) -> CodeSnippet:
    """Snippet keyed on the primary language.

    Languages without a template get a tree of the most important files when
    the file list is known, otherwise the JavaScript template.
    """
    key = meta.primary_language.lower()
    if key not in _SNIPPETS and meta.files:
        return CodeSnippet(
            language="text",
            code=_layout(meta),
            explanation=templates.text(_EXPLANATIONS, language, "layout"),
        )
    if key not in _SNIPPETS:
        key = "javascript"
    quote = '"' if key in ("python", "go") else "'"
    features = ", ".join(f"{quote}{fw}{quote}" for fw in frameworks[:3])
    code = _SNIPPETS[key].format(
        name=meta.name, class_name=_class_name(meta.name), features=features
    )
    return CodeSnippet(
        language=key,
        code=code,
        explanation=templates.text(_EXPLANATIONS, language, key),
    )
