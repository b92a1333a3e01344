"""Localized speaker-script copy.

Looked up with ``repodeck.narrative.templates.text``; zh only overrides a
few lines and everything else resolves to ja.
"""

from __future__ import annotations

SCRIPT_TEXT: dict[str, dict[str, str]] = {
    "ja": {
        "opening_breath": "深呼吸をして、聴衆とアイコンタクトを取りながら始めましょう。",
        "opening_question": "「{question}」と問いかけ、数秒の沈黙で考える時間を作りましょう。",
        "opening_problem": "実は、{problem}について多くの人が同じ課題を感じています。",
        "opening_promise": "今日は{name}がこの課題にどう取り組んでいるかをお話しします。",
        "question_fallback": "「同じような経験をされた方もいらっしゃるのではないでしょうか」",
        "approach_transition": "「では、具体的にどうアプローチしたかを見てみましょう」",
        "approach_stack": "{language}を選んだ理由を明確に伝えましょう。",
        "approach_technical": "{architecture}の構成と、主要なファイルの位置を順に示しましょう。",
        "approach_business": "それぞれの技術選択が、チームの時間やコストをどう減らしたかにつなげましょう。",
        "approach_general": "技術スタックを料理のレシピに例え、目的に合った材料を選んだことを伝えましょう。",
        "approach_analogy": "適切な材料を選ぶように、私たちも最適なツールを選びました。",
        "analogy_fallback": "「つまり、目的に最も合った技術を選んだということです」",
        "pace_beginner": "構成はシンプルなので、名前を挙げたら次へ進みましょう。",
        "pace_intermediate": "各レイヤーの説明のあとに一呼吸置き、聴衆がついてきているか確認しましょう。",
        "pace_advanced": "高度なコードベースです。速度を落とし、具体的な処理の流れを一つだけ追いましょう。",
        "structure_well-structured": "ソース、テスト、ドキュメントが分かれた整理された構成です。",
        "structure_source-and-tests": "ソースとテストが分かれた構成です。",
        "structure_source-only": "ソースディレクトリにまとまった構成です。",
        "structure_flat": "ファイルがルートに並ぶシンプルな構成です。",
        "result_transition": "成果は数字を効果的に使って伝えましょう。",
        "result_metrics": "{stars}個のスターと{commits}回のコミット、この数字が示す意味を説明しましょう。",
        "result_statistic": "{commits}回のコミットは、約{months}ヶ月の継続的な開発を意味します。",
        "result_statistic_short": "{commits}回のコミットが積み重なっています。",
        "result_quality": "数字だけでなく、質的な成果も含めて説明しましょう。",
        "next_transition": "最後に、未来への展望を希望と具体性を込めて話しましょう。",
        "next_vision": "「{vision}」この未来に向けた具体的なステップを示しましょう。",
        "next_invite": "聴衆に協力を呼びかけ、一緒に未来を作る感覚を演出しましょう。",
        "next_close": "力強く締めくくりましょう。「一緒にこの未来を作りませんか？」",
        "next_question": "この未来に共感していただけますか？",
        "next_fallback": "私たちは、この可能性を信じています。",
        "next_demo": "ロードマップの各段階を示しながら説明しましょう。",
        "emph_stack": "技術選択の理由",
        "emph_numbers": "具体的な数字",
        "emph_vision": "未来のビジョン",
        "emph_together": "一緒に作る",
        "suggest_question": "質問のあとに3秒の沈黙を作り、考える時間を与える",
        "suggest_problem": "声のトーンを少し上げて、課題の重要性を強調する",
        "suggest_stack": "ゆっくり明確に、選択の根拠を説明する",
        "suggest_numbers": "数字を言うときは声を張り、印象を強くする",
        "suggest_vision": "ビジョンを語る前に一呼吸置き、注意を集める",
        "suggest_together": "協力の呼びかけを表現を変えて2、3回繰り返す",
        "bridge_approach": "では、どう取り組んだのでしょうか。",
        "bridge_result": "その結果、何が生まれたのでしょうか。",
        "bridge_next": "ここから、どこへ向かうのでしょうか。",
        "memo_why": "【話者メモ】最初の挨拶は笑顔で、聴衆との関係を築きましょう。",
        "memo_approach": "【話者メモ】技術的な内容は聴衆のレベルに合わせて詳しさを調整しましょう。",
        "memo_result": "【話者メモ】成果は誇らしく、しかし謙虚に伝えましょう。",
        "memo_next": "【話者メモ】期待と現実的な計画のバランスを保ちましょう。",
        "default_question": "なぜこのプロジェクトが必要なのでしょうか？",
    },
    "en": {
        "opening_breath": "Take a breath and make eye contact before you begin.",
        "opening_question": 'Ask "{question}" and let the room think for a few seconds.',
        "opening_problem": "Many people run into the same thing: {problem}.",
        "opening_promise": "Today I'll show how {name} takes this on.",
        "question_fallback": '"Some of you have probably been here yourselves."',
        "approach_transition": "\"Let's look at how we actually approached it.\"",
        "approach_stack": "Explain clearly why {language} was the right base.",
        "approach_technical": "Walk through the {architecture} layout and point out where the key files live.",
        "approach_business": "Tie each technical choice to the time or cost it saves the team.",
        "approach_general": "Compare the stack to a recipe: we picked the ingredients that suit the dish.",
        "approach_analogy": "Just as a cook picks the right ingredients, we picked the right tools.",
        "analogy_fallback": '"In short, we chose what fits the job best."',
        "pace_beginner": "The stack is simple; name it and move on.",
        "pace_intermediate": "Pause after each layer and check the room is still with you.",
        "pace_advanced": "This is an advanced codebase. Slow down and follow one concrete path through it.",
        "structure_well-structured": "Source, tests and docs each have their own place.",
        "structure_source-and-tests": "Source and tests are kept apart.",
        "structure_source-only": "Everything lives under a single source directory.",
        "structure_flat": "Files sit at the top level; the layout is simple.",
        "result_transition": "Let the numbers carry this part.",
        "result_metrics": "{stars} stars and {commits} commits: say what those numbers mean.",
        "result_statistic": "{commits} commits amount to about {months} months of steady work.",
        "result_statistic_short": "{commits} commits so far.",
        "result_quality": "Go beyond the numbers and mention what improved in quality.",
        "next_transition": "Finish with the road ahead, hopeful but concrete.",
        "next_vision": '"{vision}": show the concrete steps toward it.',
        "next_invite": "Invite the audience in, so the future feels like something built together.",
        "next_close": 'Close strongly: "Shall we build this together?"',
        "next_question": "Does this future resonate with you?",
        "next_fallback": "We believe in what this can become.",
        "next_demo": "Show each stage of the roadmap as you describe it.",
        "emph_stack": "why this stack",
        "emph_numbers": "the concrete numbers",
        "emph_vision": "the vision",
        "emph_together": "building it together",
        "suggest_question": "Hold three seconds of silence after the question",
        "suggest_problem": "Raise your voice slightly to stress the problem",
        "suggest_stack": "Slow down and lay out the reasoning",
        "suggest_numbers": "Say the numbers louder so they stick",
        "suggest_vision": "Take a breath before the vision to draw attention",
        "suggest_together": "Repeat the invitation two or three times in different words",
        "bridge_approach": "So how did we tackle it?",
        "bridge_result": "What came of it?",
        "bridge_next": "Where does it go from here?",
        "memo_why": "Speaker memo: smile through the greeting and set a friendly tone.",
        "memo_approach": "Speaker memo: match the technical depth to the audience.",
        "memo_result": "Speaker memo: be proud of the results, but stay modest.",
        "memo_next": "Speaker memo: balance ambition with a realistic plan.",
        "default_question": "Why does this project need to exist?",
    },
    "zh": {
        "opening_breath": "深呼吸，与听众进行眼神交流后再开始。",
        "bridge_approach": "那么，我们是如何着手的呢？",
        "bridge_result": "结果带来了什么？",
        "bridge_next": "接下来会走向哪里？",
        "default_question": "为什么需要这个项目？",
    },
}
