"""
Configuration loaded from environment variables
Values may also come from a .env file in the working directory
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path

from passgen.limits import MAX_PASSWORD_LENGTH, MAX_SEPARATOR_CHARS, MAX_WORD_COUNT


# Find .env file - could be in current dir, project root, or absent
def _find_env_file() -> str:
    """Find .env file in current or project directory"""
    if Path(".env").exists():
        return ".env"
    project_env = Path(__file__).parent.parent / ".env"
    if project_env.exists():
        return str(project_env)
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    # Word lists
    WORDLISTS_RAW: str = "english,german"
    WORDLIST_DIR: Optional[str] = None     # Defaults to the bundled resources

    # Generation
    SAMPLING_MODE: str = "unbiased"        # unbiased, legacy
    DEFAULT_PASSWORD_LENGTH: int = 16
    DEFAULT_WORD_COUNT: int = 5
    DEFAULT_SEPARATOR: str = "-"

    # Strength estimation
    CHECK_ALPHABET_SIZE: int = 94
    EVALUATOR_MAX_CHARS: int = 72

    # Rate limiting
    RATE_LIMIT_PER_MINUTE: int = 60
    RATE_LIMIT_BURST: int = 10

    # Application
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    @property
    def wordlist_names(self) -> list[str]:
        raw = self.WORDLISTS_RAW
        if not raw:
            return []
        return [item.strip().lower() for item in str(raw).split(",") if item.strip()]

    @property
    def wordlist_dir(self) -> Optional[Path]:
        return Path(self.WORDLIST_DIR) if self.WORDLIST_DIR else None

    class Config:
        env_file = _find_env_file()
        case_sensitive = True
        extra = "ignore"


ALLOWED_SAMPLING_MODES = ("unbiased", "legacy")
ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_generator_settings(active_settings: Settings) -> None:
    """Validate generator settings before serving requests."""
    errors = []

    if active_settings.SAMPLING_MODE not in ALLOWED_SAMPLING_MODES:
        allowed = ", ".join(ALLOWED_SAMPLING_MODES)
        errors.append(f"SAMPLING_MODE must be one of: {allowed}")

    if not active_settings.wordlist_names:
        errors.append("WORDLISTS_RAW must name at least one word list")

    if active_settings.WORDLIST_DIR and not Path(active_settings.WORDLIST_DIR).is_dir():
        errors.append("WORDLIST_DIR must be an existing directory")

    if not 1 <= active_settings.DEFAULT_PASSWORD_LENGTH <= MAX_PASSWORD_LENGTH:
        errors.append(f"DEFAULT_PASSWORD_LENGTH must be between 1 and {MAX_PASSWORD_LENGTH}")

    if not 1 <= active_settings.DEFAULT_WORD_COUNT <= MAX_WORD_COUNT:
        errors.append(f"DEFAULT_WORD_COUNT must be between 1 and {MAX_WORD_COUNT}")

    if len(active_settings.DEFAULT_SEPARATOR) > MAX_SEPARATOR_CHARS:
        errors.append(f"DEFAULT_SEPARATOR must be at most {MAX_SEPARATOR_CHARS} characters")

    if active_settings.CHECK_ALPHABET_SIZE < 2:
        errors.append("CHECK_ALPHABET_SIZE must be >= 2")

    if active_settings.EVALUATOR_MAX_CHARS < 1:
        errors.append("EVALUATOR_MAX_CHARS must be >= 1")

    if active_settings.RATE_LIMIT_PER_MINUTE < 1 or active_settings.RATE_LIMIT_BURST < 1:
        errors.append("RATE_LIMIT_PER_MINUTE and RATE_LIMIT_BURST must be >= 1")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(ALLOWED_LOG_LEVELS)}")

    if errors:
        raise ValueError("Invalid generator configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
