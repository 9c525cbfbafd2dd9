"""
Global settings for StudyBot.
Light dashboard with a blue accent; runtime knobs come from the environment.
"""

import os

# Page
PAGE_TITLE = "StudyBot"
PAGE_ICON = "📚"

# Sidebar
SIDEBAR_HEADER = "StudyBot"
SIDEBAR_FOOTER = "Modern Dashboard — StudyBot"

# Palette
STUDYBOT_PRIMARY = "#1D4ED8"        # Blue
STUDYBOT_FLASHCARDS = "#2563EB"     # Flashcards accent
STUDYBOT_QUIZ = "#16A34A"           # Quiz accent (green)
STUDYBOT_BUDDY = "#9333EA"          # Study buddy accent (purple)
STUDYBOT_BG_PAGE = "#F3F4F6"        # Page background (light gray)
STUDYBOT_CARD_SHADOW = "0 2px 8px rgba(0,0,0,0.06)"

# Backend endpoints
API_BASE_URL = os.environ.get("STUDYBOT_API_BASE_URL", "http://localhost:3000")
API_TIMEOUT_S = float(os.environ.get("STUDYBOT_API_TIMEOUT", "30"))
FLASHCARDS_PATH = "/api/flashcards"
QUIZ_PATH = "/api/quiz"
STUDY_BUDDY_PATH = "/api/study-buddy"

# Quiz feedback window, seconds
FEEDBACK_DELAY_S = float(os.environ.get("STUDYBOT_FEEDBACK_DELAY", "1.2"))

# Logging
LOG_LEVEL = os.environ.get("STUDYBOT_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Transcript entry used when the study buddy cannot answer
CHAT_ERROR_MESSAGE = "Error answering your question."

DEFAULT_LANG = "en"
