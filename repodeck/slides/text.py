"""Localized slide titles, fixed slide copy and speaker-note templates.

Lookups go through ``repodeck.narrative.templates.text`` so any key missing
for en or zh resolves to the ja entry.
"""

from __future__ import annotations

SLIDE_TITLES: dict[str, dict[str, str]] = {
    "ja": {
        "why": "なぜ作ったのか",
        "problem": "解決したい課題",
        "approach": "アプローチ",
        "architecture": "技術アーキテクチャ",
        "result": "成果と効果",
        "next": "今後の展開",
        "introduction": "はじめに",
        "methods": "手法",
        "implementation": "実装",
        "results": "結果",
        "analysis": "分析",
        "discussion": "考察",
        "conclusion_ted": "ありがとうございました",
        "conclusion_imrad": "まとめ",
    },
    "en": {
        "why": "Why We Built This",
        "problem": "The Challenge",
        "approach": "Our Approach",
        "architecture": "Technical Architecture",
        "result": "Results & Impact",
        "next": "What's Next",
        "introduction": "Introduction",
        "methods": "Methods",
        "implementation": "Implementation",
        "results": "Results",
        "analysis": "Analysis",
        "discussion": "Discussion",
        "conclusion_ted": "Thank You",
        "conclusion_imrad": "Conclusion",
    },
    "zh": {
        "why": "为什么构建这个",
        "problem": "面临的挑战",
        "approach": "我们的方法",
        "architecture": "技术架构",
        "result": "结果与影响",
        "next": "下一步计划",
        "introduction": "引言",
        "methods": "方法",
        "implementation": "实现",
        "results": "结果",
        "analysis": "分析",
        "discussion": "讨论",
        "conclusion_ted": "谢谢",
        "conclusion_imrad": "结论",
    },
}

SLIDE_COPY: dict[str, dict[str, str]] = {
    "ja": {
        "default_description": "イノベーティブなソフトウェアプロジェクト",
        "architecture_content": "プロジェクトの技術構成",
        "architecture_chart": "技術構成",
        "analysis_content": "プロジェクト分析結果",
        "analysis_chart": "プロジェクト分析",
        "implementation_content": "主要な実装アプローチ",
        "no_languages": "言語情報なし",
        "github_url": "GitHub URL:",
        "purpose": "目的: {value}",
        "technology": "技術: {value}",
        "started_year": "開始: {value}年",
        "limitations": "制約: {value}",
        "future_work": "今後の課題: {value}",
        "applications": "応用可能性: {value}",
        "limit_tests": "テストカバレッジの拡充が必要",
        "limit_dependencies": "依存関係の最適化が必要",
        "limit_default": "特定の環境への依存",
        "apps_web": "Webアプリケーション開発全般",
        "apps_data": "データ分析・機械学習分野",
        "apps_default": "同様のプロジェクト開発",
        "conclusion_done": "✓ {name}の開発",
        "conclusion_languages": "✓ {value}つの技術を統合",
        "conclusion_commits": "✓ {value}回のイテレーション",
        "conclusion_outlook": "今後の発展に期待",
        "result_iterations": "{value}回の開発イテレーション",
        "result_stars": "{value}個のGitHubスター獲得",
    },
    "en": {
        "default_description": "An innovative software project",
        "architecture_content": "How the project is built",
        "architecture_chart": "Technology mix",
        "analysis_content": "Project analysis",
        "analysis_chart": "Project metrics",
        "implementation_content": "Core implementation approach",
        "no_languages": "No language data",
        "purpose": "Purpose: {value}",
        "technology": "Technology: {value}",
        "started_year": "Started: {value}",
        "limitations": "Limitations: {value}",
        "future_work": "Future work: {value}",
        "applications": "Applications: {value}",
        "limit_tests": "Test coverage needs to grow",
        "limit_dependencies": "Dependencies need slimming down",
        "limit_default": "Depends on a specific environment",
        "apps_web": "Web application development in general",
        "apps_data": "Data analysis and machine learning",
        "apps_default": "Similar projects",
        "conclusion_done": "✓ Built {name}",
        "conclusion_languages": "✓ Integrated {value} technologies",
        "conclusion_commits": "✓ {value} iterations",
        "conclusion_outlook": "More to come",
        "result_iterations": "{value} development iterations",
        "result_stars": "{value} GitHub stars earned",
    },
    "zh": {
        "default_description": "创新的软件项目",
        "architecture_content": "项目的技术构成",
        "architecture_chart": "技术构成",
        "analysis_content": "项目分析结果",
        "analysis_chart": "项目分析",
        "purpose": "目的: {value}",
        "technology": "技术: {value}",
        "started_year": "开始: {value}年",
        "limitations": "限制: {value}",
        "future_work": "后续课题: {value}",
        "applications": "应用前景: {value}",
        "result_iterations": "{value} 次开发迭代",
        "result_stars": "获得 {value} 个 GitHub 星标",
    },
}

NOTES: dict[str, dict[str, str]] = {
    "ja": {
        "title": "プロジェクト「{name}」の概要を説明します。このプロジェクトは{language}で開発され、{description}を目的としています。",
        "why": "なぜ「{name}」を始めたのかについて説明します。{content}",
        "problem": "「{name}」が解決したい課題について詳しく説明します。{content}",
        "approach": "「{name}」で採用したアプローチと技術的な判断について説明します。{content}",
        "result": "「{name}」の成果と実際の効果について説明します。{content}",
        "next": "「{name}」の今後の展開と改善計画について説明します。{content}",
        "introduction": "「{name}」の背景と目的を紹介します。{content}",
        "methods": "「{name}」の開発手法と技術選択について説明します。{content}",
        "results": "「{name}」で得られた結果を説明します。{content}",
        "architecture": "技術アーキテクチャについて説明します。主要言語は{language}で、{languages}種類の技術を組み合わせています。",
        "implementation": "実装の詳細について説明します。{language}を使用し、{files}個のファイルで構成されています。",
        "analysis": "プロジェクトの分析結果を説明します。{stars}個のスター、{forks}個のフォーク、{commits}回のコミットがあります。",
        "discussion": "「{name}」の制約と今後の課題について議論します。現在の制約と将来の発展可能性を説明します。",
        "conclusion": "プレゼンテーションのまとめです。{name}プロジェクトの価値と今後の展望について強調します。",
    },
    "en": {
        "title": "Introduce {name}: a {language} project whose purpose is {description}.",
        "why": "Explain why {name} was started. {content}",
        "problem": "Walk through the problem {name} addresses. {content}",
        "approach": "Describe the approach behind {name} and the key technical decisions. {content}",
        "result": "Present what {name} has achieved and its impact. {content}",
        "next": "Outline the roadmap and planned improvements for {name}. {content}",
        "introduction": "Introduce the background and goals of {name}. {content}",
        "methods": "Explain the methods and technology choices behind {name}. {content}",
        "results": "Present the results of {name}. {content}",
        "architecture": "Explain the architecture: the main language is {language}, combined with {languages} technologies in total.",
        "implementation": "Go through the implementation: written in {language} across {files} files.",
        "analysis": "Present the metrics: {stars} stars, {forks} forks and {commits} commits.",
        "discussion": "Discuss the limitations of {name} and the open questions ahead.",
        "conclusion": "Wrap up by restating the value of {name} and where it is heading.",
    },
    "zh": {
        "title": "介绍「{name}」项目：使用{language}开发，目标是{description}。",
        "why": "说明为什么启动「{name}」。{content}",
        "problem": "详细说明「{name}」要解决的问题。{content}",
        "result": "介绍「{name}」的成果及其实际效果。{content}",
        "analysis": "介绍项目分析结果：{stars} 个星标、{forks} 个派生、{commits} 次提交。",
        "conclusion": "总结本次演示，强调{name}项目的价值与未来展望。",
    },
}
