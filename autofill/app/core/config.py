"""
Engine configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.

Matching thresholds and weights are business constants, not env-driven: callers and
tests rely on their exact values.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: autofill/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# When .env doesn't exist this is a no-op; platform env vars are used.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Engine settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "Autofill"
    app_version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"
    # Log every rule score while matching a field (DEBUG level)
    match_trace_logging: bool = False

    model_config = SettingsConfigDict(
        env_prefix="AUTOFILL_",
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

# Acceptance: a match below MEDIUM is dropped, below HIGH it needs user review
MEDIUM_CONFIDENCE_THRESHOLD: float = 0.6
HIGH_CONFIDENCE_THRESHOLD: float = 0.8

# Per-attribute weights; must sum to 1.0
ATTRIBUTE_WEIGHTS: dict[str, float] = {
    "label": 0.50,
    "placeholder": 0.30,
    "name": 0.15,
    "ariaLabel": 0.05,
}

# Reporting only: weighted contribution an attribute must exceed to be named as
# the match source. Checked in this order. Unrelated to the acceptance thresholds.
MATCHED_ON_THRESHOLDS: tuple[tuple[str, float], ...] = (
    ("label", 0.4),
    ("placeholder", 0.2),
    ("name", 0.1),
    ("ariaLabel", 0.0),
)

# Similarity scorer
EXACT_SCORE: float = 1.0
CONTAINS_SCORE: float = 0.85
FUZZY_FLOOR: float = 0.5

# Forms the scanner marks as embedded/cross-origin and thus unfillable
INACCESSIBLE_FORM_TYPES: frozenset[str] = frozenset({"google-forms"})
