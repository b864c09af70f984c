"""
Configuration loaded from environment variables
Word source, label locale and server options come from .env or the process env
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path


PROJECT_ROOT = Path(__file__).parent.parent.parent


# Find .env file - could be in current dir, parent (project root), or set via env
def _find_env_file() -> str:
    """Find .env file in current or parent directory"""
    # Check current directory first
    if Path(".env").exists():
        return ".env"
    # Check project root (when running from backend/)
    parent_env = PROJECT_ROOT / ".env"
    if parent_env.exists():
        return str(parent_env)
    # Default to current directory
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    # Word source
    WORD_SOURCE: str = "files"  # files, bip39
    WORD_LIST_DIR: str = str(PROJECT_ROOT / "word-lists")
    WORD_LIST_PATTERN: str = "{length}-harfli-kelimeler.txt"
    CACHE_WORD_POOLS: bool = True

    # Presentation
    STRENGTH_LABEL_LOCALE: str = "en"  # en, tr

    # Application
    LOG_LEVEL: str = "INFO"
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    FRONTEND_URL: str = "http://localhost:3000"

    class Config:
        env_file = _find_env_file()
        case_sensitive = True


ALLOWED_WORD_SOURCES = ("files", "bip39")
ALLOWED_LABEL_LOCALES = ("en", "tr")
ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate settings that would otherwise fail on the first request."""
    errors = []

    if active_settings.WORD_SOURCE not in ALLOWED_WORD_SOURCES:
        allowed = ", ".join(ALLOWED_WORD_SOURCES)
        errors.append(f"WORD_SOURCE must be one of: {allowed}")

    if active_settings.WORD_SOURCE == "files":
        if "{length}" not in active_settings.WORD_LIST_PATTERN:
            errors.append("WORD_LIST_PATTERN must contain the {length} placeholder")
        if not active_settings.WORD_LIST_DIR.strip():
            errors.append("WORD_LIST_DIR must be configured when WORD_SOURCE=files")

    if active_settings.STRENGTH_LABEL_LOCALE not in ALLOWED_LABEL_LOCALES:
        allowed = ", ".join(ALLOWED_LABEL_LOCALES)
        errors.append(f"STRENGTH_LABEL_LOCALE must be one of: {allowed}")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        errors.append("LOG_LEVEL must be a standard logging level name")

    if errors:
        raise ValueError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
