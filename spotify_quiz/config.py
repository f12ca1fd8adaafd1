"""Configuration: quiz constants and app settings."""

import os
from pathlib import Path

# Spotify API
SPOTIFY_SCOPE = "user-top-read"
SPOTIFY_CACHE_PATH = "spotify_auth_cache.json"
SPOTIFY_REDIRECT_URI = "http://127.0.0.1:8888/callback"

# Quiz
TOP_ITEMS_LIMIT = 20  # Items requested per category and time window
QUIZ_LENGTH = 10

# Question templates
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_QUESTIONS_FILE = PACKAGE_DIR / "data" / "questions.json"
QUESTIONS_FILE_ENV_VAR = "SPOTIFY_QUIZ_QUESTIONS_FILE"

# Logging
LOG_LEVEL_ENV_VAR = "SPOTIFY_QUIZ_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def questions_file(configured: str = "") -> str:
    """Resolve the question template file: env var, then config, then the bundled pool."""
    override = os.getenv(QUESTIONS_FILE_ENV_VAR, "").strip()
    if override:
        return override
    if configured and configured.strip():
        return configured.strip()
    return str(DEFAULT_QUESTIONS_FILE)


def log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
