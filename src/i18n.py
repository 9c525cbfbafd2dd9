"""UI strings for the dashboard (English and Chinese)."""

from __future__ import annotations

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "lang_en": "EN",
        "lang_zh": "中文",
        "lang_label": "Language",
        "nav": "Navigation",
        "dashboard": "Dashboard",
        "flashcards": "Flashcards",
        "quiz": "Quiz",
        "study_buddy": "Study Buddy",
        "flashcards_desc": "Generate interactive flashcards from your notes and track your progress.",
        "quiz_desc": "Create quizzes from your study material and see your score.",
        "study_buddy_desc": "Ask any study question and get instant AI-powered answers.",
        "go_flashcards": "Go to Flashcards",
        "go_quiz": "Go to Quiz",
        "go_study_buddy": "Go to Study Buddy",
        "progress": "Progress",
        "cards_progress": "{pos} / {total} cards",
        "questions_progress": "{pos} / {total} questions",
        "questions_asked": "Questions asked: {n}",
        "generate_flashcards_title": "Generate Flashcards",
        "notes_placeholder": "Paste your study notes here...",
        "generate_flashcards": "Generate Flashcards",
        "generating": "Generating...",
        "card_position": "Card {pos} of {total}",
        "flip": "Flip",
        "front": "Front",
        "back": "Back",
        "previous": "Previous",
        "next": "Next",
        "back_to_dashboard": "Back to Dashboard",
        "create_quiz_title": "Create a Quiz",
        "quiz_placeholder": "Paste text here to create a quiz...",
        "create_quiz": "Create Quiz",
        "creating": "Creating...",
        "question_position": "Question {pos} of {total}",
        "explanation": "Explanation:",
        "quiz_correct": "Correct!",
        "quiz_wrong": "Incorrect. The right answer is: {answer}",
        "quiz_complete": "Quiz Complete!",
        "quiz_score": "You scored {score} out of {total} ({pct}%)",
        "ask_title": "Ask StudyBot",
        "ask_placeholder": "Ask any study question...",
        "ask": "Ask",
        "thinking": "Thinking...",
        "flashcards_error": "Error generating flashcards.",
        "quiz_error": "Error generating quiz.",
        "dismiss": "Dismiss",
        "you": "You",
    },
    "zh": {
        "lang_en": "EN",
        "lang_zh": "中文",
        "lang_label": "语言",
        "nav": "导航",
        "dashboard": "仪表盘",
        "flashcards": "闪卡",
        "quiz": "测验",
        "study_buddy": "学习伙伴",
        "flashcards_desc": "根据你的笔记生成交互式闪卡，并跟踪学习进度。",
        "quiz_desc": "根据学习资料生成测验，查看你的得分。",
        "study_buddy_desc": "提出任何学习问题，立即获得 AI 解答。",
        "go_flashcards": "前往闪卡",
        "go_quiz": "前往测验",
        "go_study_buddy": "前往学习伙伴",
        "progress": "进度",
        "cards_progress": "{pos} / {total} 张卡片",
        "questions_progress": "{pos} / {total} 道题",
        "questions_asked": "已提问：{n}",
        "generate_flashcards_title": "生成闪卡",
        "notes_placeholder": "在此粘贴你的学习笔记...",
        "generate_flashcards": "生成闪卡",
        "generating": "生成中...",
        "card_position": "第 {pos} / {total} 张",
        "flip": "翻面",
        "front": "正面",
        "back": "背面",
        "previous": "上一张",
        "next": "下一张",
        "back_to_dashboard": "返回仪表盘",
        "create_quiz_title": "创建测验",
        "quiz_placeholder": "在此粘贴文本以生成测验...",
        "create_quiz": "创建测验",
        "creating": "创建中...",
        "question_position": "第 {pos} / {total} 题",
        "explanation": "解析：",
        "quiz_correct": "回答正确！",
        "quiz_wrong": "回答错误。正确答案：{answer}",
        "quiz_complete": "测验完成！",
        "quiz_score": "得分 {score} / {total}（{pct}%）",
        "ask_title": "向 StudyBot 提问",
        "ask_placeholder": "输入任何学习问题...",
        "ask": "提问",
        "thinking": "思考中...",
        "flashcards_error": "生成闪卡时出错。",
        "quiz_error": "生成测验时出错。",
        "dismiss": "关闭",
        "you": "你",
    },
}


def tr(lang: str, key: str, **kwargs: object) -> str:
    """Look up *key* for *lang*, falling back to English and then to the key itself."""
    table = STRINGS.get(lang) or STRINGS["en"]
    template = table.get(key) or STRINGS["en"].get(key) or key
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template
