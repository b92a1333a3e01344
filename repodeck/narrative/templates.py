"""Localized text tables for the narrative generator.

Tables are keyed ``[language][...]``. ``ja`` is the reference language and
is complete; ``en`` and ``zh`` may omit entries, in which case lookups fall
back to ``ja`` (see ``text`` and ``family_text``).
"""

from __future__ import annotations

from typing import Any

DEFAULT_LANGUAGE = "ja"

FAMILIES: tuple[str, ...] = ("api", "dashboard", "learning", "library", "cli", "data", "generic")

SECTION_TITLES: dict[str, dict[str, str]] = {
    "ja": {
        "why": "なぜこのプロジェクトを作ったのか",
        "problem": "解決したい課題",
        "approach": "どのようにアプローチしたか",
        "result": "得られた結果",
        "next": "これからの展望",
    },
    "en": {
        "why": "Why This Project Exists",
        "problem": "The Problem",
        "approach": "How We Approached It",
        "result": "What We Achieved",
        "next": "What Comes Next",
    },
    "zh": {
        "why": "为什么创建这个项目",
        "problem": "要解决的问题",
        "approach": "我们的方法",
        "result": "取得的成果",
        "next": "未来展望",
    },
}

LABELS: dict[str, dict[str, str]] = {
    "ja": {
        "primary_language": "主要言語: {value}",
        "project_type": "プロジェクト種別: {value}",
        "started": "開発開始: {value}",
        "last_updated": "最終更新: {value}",
        "stars": "GitHubスター数: {value}個",
        "forks": "フォーク数: {value}個",
        "commits": "総コミット数: {value}回",
        "files": "ファイル数: {value}個",
        "languages": "使用言語: {value}種類",
        "dependencies": "依存パッケージ: {value}個",
        "framework": "フレームワーク: {value}",
        "tool": "ツール: {value}",
        "architecture": "アーキテクチャ: {value}",
        "design_pattern": "設計パターン: {value}",
        "maturity": "成熟度: {value}",
        "development_period": "開発期間: 約{value}ヶ月",
        "readme_complete": "詳細なREADMEを完備",
        "target_audience": "対象ユーザー: {value}",
        "separator": "、",
    },
    "en": {
        "primary_language": "Primary language: {value}",
        "project_type": "Project type: {value}",
        "started": "Started: {value}",
        "last_updated": "Last updated: {value}",
        "stars": "GitHub stars: {value}",
        "forks": "Forks: {value}",
        "commits": "Total commits: {value}",
        "files": "Files: {value}",
        "languages": "Languages: {value}",
        "dependencies": "Dependencies: {value}",
        "framework": "Framework: {value}",
        "tool": "Tool: {value}",
        "architecture": "Architecture: {value}",
        "design_pattern": "Design pattern: {value}",
        "maturity": "Maturity: {value}",
        "development_period": "Development period: about {value} months",
        "readme_complete": "Detailed README available",
        "target_audience": "Audience: {value}",
        "separator": ", ",
    },
    "zh": {
        "primary_language": "主要语言: {value}",
        "project_type": "项目类型: {value}",
        "started": "开始时间: {value}",
        "last_updated": "最后更新: {value}",
        "stars": "GitHub 星标: {value}",
        "forks": "派生数: {value}",
        "commits": "提交总数: {value}",
        "files": "文件数: {value}",
        "languages": "使用语言: {value}种",
        "dependencies": "依赖包: {value}个",
        "framework": "框架: {value}",
        "tool": "工具: {value}",
        "architecture": "架构: {value}",
        "design_pattern": "设计模式: {value}",
        "maturity": "成熟度: {value}",
        "development_period": "开发周期: 约{value}个月",
        "readme_complete": "提供详细的 README",
        "target_audience": "目标用户: {value}",
        "separator": "、",
    },
}

PROJECT_TYPE_NAMES: dict[str, dict[str, str]] = {
    "ja": {
        "api": "APIサービス",
        "dashboard": "ダッシュボード",
        "learning": "学習アプリケーション",
        "library": "ライブラリ",
        "cli": "開発ツール",
        "data": "データ分析・機械学習",
        "web": "Webアプリケーション",
        "mobile": "モバイルアプリケーション",
        "game": "ゲーム",
        "generic": "ソフトウェアプロジェクト",
    },
    "en": {
        "api": "API service",
        "dashboard": "Dashboard",
        "learning": "Learning application",
        "library": "Library",
        "cli": "Developer tool",
        "data": "Data science / ML",
        "web": "Web application",
        "mobile": "Mobile application",
        "game": "Game",
        "generic": "Software project",
    },
    "zh": {
        "api": "API 服务",
        "dashboard": "仪表盘",
        "learning": "学习应用",
        "library": "库",
        "cli": "开发工具",
        "data": "数据分析 / 机器学习",
        "web": "Web 应用",
        "mobile": "移动应用",
        "game": "游戏",
        "generic": "软件项目",
    },
}

TIER_NAMES: dict[str, dict[str, str]] = {
    "ja": {
        "low": "低", "medium": "中", "high": "高",
        "early": "初期段階", "developing": "成長段階", "mature": "成熟段階",
    },
    "en": {
        "low": "low", "medium": "medium", "high": "high",
        "early": "early", "developing": "developing", "mature": "mature",
    },
    "zh": {
        "low": "低", "medium": "中", "high": "高",
        "early": "早期阶段", "developing": "发展阶段", "mature": "成熟阶段",
    },
}

STRENGTH_TEXT: dict[str, dict[str, str]] = {
    "ja": {
        "community-recognition": "コミュニティから高い評価を獲得",
        "active-development": "活発な開発活動",
        "tested": "テストが整備されている",
        "well-documented": "充実したドキュメント",
        "unified-stack": "技術スタックが統一されている",
    },
    "en": {
        "community-recognition": "Recognized by the community",
        "active-development": "Active development",
        "tested": "Backed by tests",
        "well-documented": "Thorough documentation",
        "unified-stack": "Unified technology stack",
    },
    "zh": {
        "community-recognition": "获得社区高度认可",
        "active-development": "开发活跃",
        "tested": "具备测试",
        "well-documented": "文档完善",
        "unified-stack": "技术栈统一",
    },
}

RISK_TEXT: dict[str, dict[str, str]] = {
    "ja": {
        "missing-tests": "テストカバレッジの改善が必要",
        "thin-documentation": "ドキュメント整備が必要",
        "low-visibility": "コミュニティへの露出が少ない",
        "dependency-sprawl": "依存関係が多く管理が複雑",
        "large-files": "大きなファイルが多く保守が難しい",
        "missing-gitignore": ".gitignoreが未整備",
    },
    "en": {
        "missing-tests": "Test coverage needs work",
        "thin-documentation": "Documentation is thin",
        "low-visibility": "Limited community visibility",
        "dependency-sprawl": "Large dependency surface",
        "large-files": "Several oversized source files",
        "missing-gitignore": "No .gitignore in place",
    },
    "zh": {
        "missing-tests": "测试覆盖率有待提高",
        "thin-documentation": "文档有待完善",
        "low-visibility": "社区曝光度较低",
        "dependency-sprawl": "依赖数量较多，管理复杂",
        "large-files": "存在多个大型文件，维护困难",
        "missing-gitignore": "缺少 .gitignore",
    },
}

IMPROVEMENT_TEXT: dict[str, dict[str, str]] = {
    "ja": {
        "missing-tests": "テストの追加による品質向上",
        "thin-documentation": "READMEとドキュメントの充実",
        "low-visibility": "コミュニティへの発信強化",
        "dependency-sprawl": "依存関係の整理・最新化",
        "large-files": "大きなファイルのリファクタリング",
        "missing-gitignore": ".gitignoreの追加",
    },
    "en": {
        "missing-tests": "Add tests to raise quality",
        "thin-documentation": "Expand the README and docs",
        "low-visibility": "Share the project more widely",
        "dependency-sprawl": "Prune and update dependencies",
        "large-files": "Refactor oversized files",
        "missing-gitignore": "Add a .gitignore",
    },
    "zh": {
        "missing-tests": "补充测试以提升质量",
        "thin-documentation": "完善 README 与文档",
        "low-visibility": "加强社区推广",
        "dependency-sprawl": "整理并更新依赖",
        "large-files": "重构大型文件",
        "missing-gitignore": "添加 .gitignore",
    },
}

FEATURE_TEXT: dict[str, dict[str, str]] = {
    "ja": {
        "machine-learning": "機械学習・AI機能",
        "realtime": "リアルタイム通信機能",
        "mobile": "モバイルアプリ対応",
        "rest-api": "REST API機能",
        "authentication": "ユーザー認証機能",
        "payments": "決済処理の統合",
        "pwa": "PWA対応",
        "offline": "オフライン機能",
    },
    "en": {
        "machine-learning": "Machine learning capabilities",
        "realtime": "Real-time communication",
        "mobile": "Mobile support",
        "rest-api": "REST API",
        "authentication": "User authentication",
        "payments": "Payment processing",
        "pwa": "Progressive Web App support",
        "offline": "Offline functionality",
    },
    "zh": {
        "machine-learning": "机器学习 / AI 功能",
        "realtime": "实时通信",
        "mobile": "移动端支持",
        "rest-api": "REST API",
        "authentication": "用户认证",
        "payments": "支付集成",
        "pwa": "PWA 支持",
        "offline": "离线功能",
    },
}

CHALLENGE_TEXT: dict[str, dict[str, str]] = {
    "ja": {
        "complex-codebase": "複雑なコードベースのアーキテクチャ管理",
        "full-stack": "フロントエンドとバックエンドの連携",
        "scale": "大規模アプリケーションの性能最適化",
        "untested": "包括的なテストなしでの品質確保",
        "standard": "標準的なソフトウェア開発の課題",
    },
    "en": {
        "complex-codebase": "Keeping a complex architecture manageable",
        "full-stack": "Coordinating frontend and backend work",
        "scale": "Optimizing performance at scale",
        "untested": "Ensuring quality without comprehensive tests",
        "standard": "Standard software development challenges",
    },
    "zh": {
        "complex-codebase": "管理复杂的代码架构",
        "full-stack": "协调前后端开发",
        "scale": "大规模应用的性能优化",
        "untested": "在缺乏全面测试的情况下保证质量",
        "standard": "常规软件开发挑战",
    },
}

# Sentence fragments assembled by the section builders.
PHRASES: dict[str, dict[str, str]] = {
    "ja": {
        "why_with_description": "このプロジェクト「{name}」は、{description}を目的として開発されました。",
        "why_without_description": "このプロジェクト「{name}」は、{language}を使用して開発されたソフトウェアです。",
        "why_audience": "{audience}に向けて、従来のソリューションでは解決できない課題に取り組みました。",
        "problem_multi_stack": "複数の技術スタックを統合する必要があり、",
        "problem_single_stack": "{language}での開発において、",
        "problem_large": "大規模なコードベースの管理と",
        "problem_small": "効率的な開発と",
        "problem_closing": "保守性の確保が課題でした。",
        "problem_complexity": "プロジェクトの複雑度は「{tier}」（スコア {score}）と評価されます。",
        "approach_base": "{language}をベースとして、",
        "approach_frameworks": "{frameworks}などのフレームワークを活用し、",
        "approach_tools": "{tools}といったツールを組み合わせて開発を進めました。",
        "approach_no_tools": "モダンな開発手法を取り入れながら実装しました。",
        "approach_architecture": "全体の構成は{architecture}を採用しています。",
        "result_mature": "プロジェクトは成熟した状態に達しており、",
        "result_developing": "プロジェクトは継続的に改善が続けられており、",
        "result_early": "プロジェクトは初期段階ながら、",
        "result_readme": "充実したドキュメントとともに",
        "result_stars": "GitHubで{stars}個のスターを獲得するなど、",
        "result_closing": "着実な成果を上げています。",
        "result_activity": "これまでに{commits}回のコミットを重ねてきました。",
        "next_opening": "「{name}」は今後、次の方向で発展を目指します。",
        "next_impact": "この取り組みにより、{audience}の体験が大きく変わることを目指しています。",
        "description_fullstack": "{language}によるフルスタックアプリケーション",
        "description_frontend": "{language}によるフロントエンドアプリケーション",
        "description_backend": "{language}によるバックエンドサービス",
        "description_default": "{language}によるソフトウェアプロジェクト",
    },
    "en": {
        "why_with_description": "{name} was built with one purpose: {description}.",
        "why_without_description": "{name} is a software project written in {language}.",
        "why_audience": "It targets {audience}, whose needs existing solutions leave unmet.",
        "problem_multi_stack": "Several technology stacks had to work together, and ",
        "problem_single_stack": "Building with {language}, ",
        "problem_large": "managing a large codebase while ",
        "problem_small": "keeping development efficient while ",
        "problem_closing": "preserving maintainability was the core challenge.",
        "problem_complexity": "Overall complexity is rated {tier} (score {score}).",
        "approach_base": "Built on {language}, ",
        "approach_frameworks": "the project uses frameworks such as {frameworks}, ",
        "approach_tools": "combined with tools like {tools}.",
        "approach_no_tools": "following modern development practices.",
        "approach_architecture": "The codebase follows a {architecture} layout.",
        "result_mature": "The project has reached a mature state, ",
        "result_developing": "The project keeps improving steadily, ",
        "result_early": "Although still at an early stage, the project ",
        "result_readme": "ships with solid documentation, ",
        "result_stars": "has earned {stars} GitHub stars, ",
        "result_closing": "and delivers tangible results.",
        "result_activity": "Development so far spans {commits} commits.",
        "next_opening": "Next, {name} will grow in these directions.",
        "next_impact": "The goal is to fundamentally improve the experience of {audience}.",
        "description_fullstack": "a full-stack {language} application",
        "description_frontend": "a {language} frontend application",
        "description_backend": "a {language} backend service",
        "description_default": "a {language} software project",
    },
    "zh": {
        "why_with_description": "「{name}」项目的开发目标是：{description}。",
        "why_without_description": "「{name}」是一个使用{language}开发的软件项目。",
        "why_audience": "它面向{audience}，解决现有方案无法满足的需求。",
        "problem_multi_stack": "项目需要整合多种技术栈，",
        "problem_single_stack": "在使用{language}进行开发时，",
        "problem_large": "大规模代码库的管理与",
        "problem_small": "高效开发与",
        "problem_closing": "可维护性是主要挑战。",
        "problem_complexity": "项目复杂度评级为「{tier}」（得分 {score}）。",
        "approach_base": "以{language}为基础，",
        "approach_frameworks": "结合{frameworks}等框架，",
        "approach_tools": "并配合{tools}等工具推进开发。",
        "approach_no_tools": "采用现代开发方法进行实现。",
        "approach_architecture": "整体结构采用{architecture}。",
        "result_mature": "项目已进入成熟阶段，",
        "result_developing": "项目正在持续改进，",
        "result_early": "项目虽处于早期阶段，",
        "result_readme": "配有完善的文档，",
        "result_stars": "在 GitHub 上获得了 {stars} 个星标，",
        "result_closing": "取得了扎实的成果。",
        "result_activity": "迄今为止共有 {commits} 次提交。",
        "next_opening": "今后，「{name}」将朝以下方向发展。",
        "next_impact": "目标是从根本上改善{audience}的体验。",
        "description_fullstack": "基于{language}的全栈应用",
        "description_frontend": "基于{language}的前端应用",
        "description_backend": "基于{language}的后端服务",
        "description_default": "基于{language}的软件项目",
    },
}

# Per-family template text. zh covers only some families on purpose; the
# remaining ones resolve to ja.
FAMILY_TEXT: dict[str, dict[str, dict[str, Any]]] = {
    "ja": {
        "generic": {
            "hooks": [
                "もし毎日の小さな手間がひとつ消えたら、何を始めますか？",
                "このプロジェクトは、どんな「不便」から生まれたのでしょうか？",
                "身近な課題を、コードはどこまで解決できるでしょうか？",
            ],
            "approach_hook": "技術選択の背景には何があったのでしょうか？",
            "result_hook": "このプロジェクトはどんな成果を生み出しているでしょうか？",
            "why_context": "日々の開発や利用の中で見えてきた課題を、具体的な形で解決するために生まれました。",
            "problem_focus": "限られたリソースで、使いやすさと拡張性を両立させる必要がありました。",
            "result_focus": "継続的な改善によって、実用的なソフトウェアとして形になりつつあります。",
            "roadmap": ["段階的な機能拡張", "ユーザーフィードバックの継続的な取り込み", "技術コミュニティとの連携"],
        },
        "api": {
            "hooks": [
                "あなたのサービスは、他のシステムと「会話」できていますか？",
                "データをつなぐ窓口が不安定だったら、何が起きるでしょうか？",
                "APIひとつで、開発のスピードはどれだけ変わるでしょうか？",
            ],
            "why_context": "多くのプロダクトは信頼できるバックエンドに依存しています。{name}は、その機能を明確なインターフェースとして提供するために作られました。",
            "problem_focus": "安定した応答性能、一貫したエラー処理、そして後方互換性の維持が求められました。",
            "result_focus": "クライアントから安定して利用できるAPI基盤が整いました。",
            "roadmap": ["APIドキュメントの自動生成", "認証・レート制限の強化", "モニタリングとパフォーマンス改善"],
        },
        "dashboard": {
            "hooks": [
                "必要な数字に、いま何クリックでたどり着けますか？",
                "データはあるのに、判断に使えていないことはありませんか？",
                "ひと目で状況がわかる画面があったら、会議はどう変わるでしょうか？",
            ],
            "why_context": "散在するデータを一か所に集め、意思決定に使える形で可視化するために{name}が作られました。",
            "problem_focus": "多様なデータソースの統合と、見やすく高速な可視化の両立が課題でした。",
            "result_focus": "主要な指標を素早く把握できるダッシュボードが実現しました。",
            "roadmap": ["カスタマイズ可能なウィジェット", "リアルタイム更新への対応", "アラートと通知機能の追加"],
        },
        "learning": {
            "hooks": [
                "毎日の学習、三日坊主で終わっていませんか？",
                "学習アプリが、あなたの調子に合わせてくれたらどうでしょう？",
                "スコアアップに本当に必要なのは、量でしょうか、それとも続け方でしょうか？",
            ],
            "why_context": "多くの学習アプリは一律のペースを前提としています。{name}は、学習者一人ひとりが無理なく続けられる仕組みを目指して作られました。",
            "problem_focus": "学習意欲の維持、進捗の可視化、そして個人差への対応が大きな課題でした。",
            "result_focus": "学習を継続しやすい体験と、成果を実感できる仕組みが形になりました。",
            "roadmap": ["学習データに基づく出題の最適化", "学習記録の可視化強化", "オフライン学習への対応"],
        },
        "library": {
            "hooks": [
                "同じコードを、何度書き直してきましたか？",
                "「車輪の再発明」をやめたら、どれだけ時間が生まれるでしょうか？",
                "良いライブラリの条件とは何でしょうか？",
            ],
            "why_context": "繰り返し現れる実装パターンを再利用可能な部品にまとめるため、{name}が作られました。",
            "problem_focus": "汎用性と使いやすさ、そして安定したAPI設計のバランスが課題でした。",
            "result_focus": "他のプロジェクトから簡単に利用できる部品として提供されています。",
            "roadmap": ["APIの安定化とバージョニング", "ドキュメントとサンプルの拡充", "エコシステムとの連携強化"],
        },
        "cli": {
            "hooks": [
                "毎日くり返しているその作業、自動化できるとしたら？",
                "ターミナルでの数秒が、積み重なると何時間になるでしょうか？",
                "開発者の時間を一番奪っているのは何でしょうか？",
            ],
            "why_context": "繰り返しの手作業を減らし、開発者の時間を本来の仕事に戻すために{name}が作られました。",
            "problem_focus": "多様な環境での動作、わかりやすいコマンド設計、そして安全な既定値が求められました。",
            "result_focus": "日々の作業を短縮できる実用的なツールになりました。",
            "roadmap": ["プラグイン機構の追加", "設定ファイルの柔軟化", "CI環境との統合"],
        },
        "data": {
            "hooks": [
                "データは、まだ語られていない物語を持っているかもしれません。",
                "その予測は、どこまで信頼できるでしょうか？",
                "手元のデータから、どれだけの価値を引き出せているでしょうか？",
            ],
            "why_context": "データから意味のある知見を引き出し、再現可能な形で共有するために{name}が作られました。",
            "problem_focus": "データの品質、処理の再現性、そしてモデルの評価方法が課題でした。",
            "result_focus": "データ処理から分析までを再現可能な形で実行できるようになりました。",
            "roadmap": ["データパイプラインの自動化", "モデル評価の強化", "可視化とレポートの拡充"],
        },
    },
    "en": {
        "generic": {
            "hooks": [
                "What would you build if one daily annoyance simply disappeared?",
                "What everyday friction gave birth to this project?",
                "How far can a small codebase go in solving a real problem?",
            ],
            "approach_hook": "What drove the technology choices?",
            "result_hook": "What has this project actually delivered?",
            "why_context": "It grew out of concrete problems observed in day-to-day development and use.",
            "problem_focus": "Usability and extensibility had to be balanced with limited resources.",
            "result_focus": "Continuous iteration has turned it into practical, working software.",
            "roadmap": ["Incremental feature expansion", "Continuous user feedback", "Collaboration with the developer community"],
        },
        "api": {
            "hooks": [
                "Can your services actually talk to each other?",
                "What happens when the gateway to your data becomes unreliable?",
                "How much faster could a team ship with the right API?",
            ],
            "why_context": "Modern products depend on reliable backends; {name} exposes its capabilities through a clean programmatic interface.",
            "problem_focus": "It needed predictable latency, consistent error handling and backward compatibility.",
            "result_focus": "Clients now have a stable API foundation to build on.",
            "roadmap": ["Generated API documentation", "Stronger authentication and rate limiting", "Monitoring and performance tuning"],
        },
        "dashboard": {
            "hooks": [
                "How many clicks does it take to reach the number you need?",
                "Do you have the data but still struggle to act on it?",
                "How would your meetings change with one screen that tells the story?",
            ],
            "why_context": "{name} brings scattered data into one place and turns it into something decisions can rest on.",
            "problem_focus": "Integrating many data sources while keeping visualizations fast and readable was the hard part.",
            "result_focus": "Key metrics can now be understood at a glance.",
            "roadmap": ["Customizable widgets", "Real-time updates", "Alerts and notifications"],
        },
        "learning": {
            "hooks": [
                "How many study plans have you abandoned after three days?",
                "What if a learning app adapted to how you feel today?",
                "Is a better score about studying more, or about studying consistently?",
            ],
            "why_context": "Most learning apps assume a one-size-fits-all pace; {name} aims to help every learner keep going.",
            "problem_focus": "Sustaining motivation, visualizing progress and adapting to individual differences were the main challenges.",
            "result_focus": "Learners get an experience that is easy to stick with and progress they can see.",
            "roadmap": ["Question selection driven by learning data", "Richer progress visualization", "Offline study support"],
        },
        "library": {
            "hooks": [
                "How many times have you rewritten the same code?",
                "How much time would you save by not reinventing the wheel?",
                "What makes a library truly good to use?",
            ],
            "why_context": "{name} packages recurring implementation patterns into reusable building blocks.",
            "problem_focus": "Generality, ergonomics and a stable API had to be kept in balance.",
            "result_focus": "Other projects can adopt it as a ready-made component.",
            "roadmap": ["API stabilization and versioning", "More documentation and examples", "Deeper ecosystem integration"],
        },
        "cli": {
            "hooks": [
                "What if the task you repeat every day could run itself?",
                "How many hours do those few seconds in the terminal add up to?",
                "What steals the most time from developers?",
            ],
            "why_context": "{name} removes repetitive manual steps so developers can focus on real work.",
            "problem_focus": "It had to run across environments, offer clear commands and ship safe defaults.",
            "result_focus": "It has become a practical tool that shortens everyday work.",
            "roadmap": ["Plugin support", "More flexible configuration", "CI integration"],
        },
        "data": {
            "hooks": [
                "Your data may be holding a story no one has told yet.",
                "How far can you trust that prediction?",
                "How much value are you really extracting from your data?",
            ],
            "why_context": "{name} turns raw data into meaningful, reproducible insight.",
            "problem_focus": "Data quality, reproducible processing and sound model evaluation were the key challenges.",
            "result_focus": "Processing and analysis now run end to end in a reproducible way.",
            "roadmap": ["Automated data pipelines", "Stronger model evaluation", "Richer visualization and reporting"],
        },
    },
    "zh": {
        "generic": {
            "hooks": [
                "如果每天的一个小麻烦消失了，你会开始做什么？",
                "这个项目诞生于怎样的「不便」？",
                "代码能在多大程度上解决身边的问题？",
            ],
            "approach_hook": "技术选型的背后有哪些考量？",
            "result_hook": "这个项目带来了哪些成果？",
            "why_context": "它源于日常开发和使用中发现的具体问题。",
            "problem_focus": "需要在有限资源下兼顾易用性与可扩展性。",
            "result_focus": "通过持续迭代，它已经成为实用的软件。",
            "roadmap": ["逐步扩展功能", "持续吸收用户反馈", "加强与技术社区的合作"],
        },
        "api": {
            "hooks": [
                "你的服务之间真的在「对话」吗？",
                "如果数据入口变得不稳定，会发生什么？",
                "一个好的 API 能让开发提速多少？",
            ],
            "why_context": "现代产品依赖可靠的后端；{name} 通过清晰的接口提供其能力。",
            "problem_focus": "需要稳定的响应性能、一致的错误处理以及向后兼容。",
            "result_focus": "客户端现在拥有了稳定的 API 基础。",
            "roadmap": ["自动生成 API 文档", "加强认证与限流", "监控与性能优化"],
        },
        "dashboard": {
            "hooks": [
                "找到你需要的数字需要点击几次？",
                "明明有数据，却难以用于决策？",
                "如果有一个一目了然的界面，会议会有什么变化？",
            ],
            "why_context": "{name} 将分散的数据集中起来，转化为可用于决策的可视化信息。",
            "problem_focus": "难点在于整合多种数据源，同时保持可视化快速易读。",
            "result_focus": "关键指标现在可以一目了然。",
            "roadmap": ["可定制的组件", "实时更新", "告警与通知"],
        },
    },
}


AUDIENCE_TEXT: dict[str, dict[str, dict[str, str]]] = {
    "ja": {
        "generic": {"audience": "開発者やエンドユーザー"},
        "api": {"audience": "APIを利用する開発者やサービス"},
        "dashboard": {"audience": "データに基づいて判断するチームや管理者"},
        "learning": {"audience": "スコアアップを目指す学習者"},
        "library": {"audience": "同じ課題を抱える開発者"},
        "cli": {"audience": "日々の作業を効率化したい開発者"},
        "data": {"audience": "データサイエンティストや研究者"},
    },
    "en": {
        "generic": {"audience": "developers and end users"},
        "api": {"audience": "developers and services consuming the API"},
        "dashboard": {"audience": "teams and managers making data-driven decisions"},
        "learning": {"audience": "learners working to raise their scores"},
        "library": {"audience": "developers facing the same problem"},
        "cli": {"audience": "developers who want to streamline daily work"},
        "data": {"audience": "data scientists and researchers"},
    },
    "zh": {
        "generic": {"audience": "开发者和终端用户"},
        "api": {"audience": "调用 API 的开发者和服务"},
    },
}


def text(table: dict[str, dict[str, Any]], language: str, key: str) -> Any:
    """Look up ``table[language][key]``, falling back to the ja entry."""
    value = table.get(language, {}).get(key)
    if value:
        return value
    return table[DEFAULT_LANGUAGE][key]


def family_text(
    language: str, family: str, key: str, table: dict[str, dict[str, dict[str, Any]]] = FAMILY_TEXT
) -> Any:
    """Family-specific text with ja and generic-family fallbacks.

    Resolution order: (language, family) -> (ja, family) ->
    (language, generic) -> (ja, generic).
    """
    for lang, fam in (
        (language, family),
        (DEFAULT_LANGUAGE, family),
        (language, "generic"),
        (DEFAULT_LANGUAGE, "generic"),
    ):
        value = table.get(lang, {}).get(fam, {}).get(key)
        if value:
            return value
    raise KeyError(key)


def label(language: str, key: str, value: object = "") -> str:
    return text(LABELS, language, key).format(value=value)


def phrase(language: str, key: str, /, **values: object) -> str:
    return text(PHRASES, language, key).format(**values)
