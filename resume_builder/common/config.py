"""
Configuration loader for the resume builder core.

Loads settings from environment variables (.env file) and provides
type-safe access. The HTTP service layers its own pydantic settings on top
(see api_service.config).
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Centralized configuration for the resume builder core.

    All values loaded from environment variables.
    """

    # ===== Draft Storage =====
    # Directory holding the single draft slot file
    DRAFT_DIR: str = os.getenv("DRAFT_DIR", "./.drafts")
    # Slot name, kept identical to the browser client's storage key
    DRAFT_SLOT: str = os.getenv("DRAFT_SLOT", "resume-builder-draft")

    # ===== Narrative Generation =====
    # Simulated latency of the generation step (seconds)
    GENERATION_DELAY_SECONDS: float = float(os.getenv("GENERATION_DELAY_SECONDS", "2.0"))

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "simple")  # "simple" or "json"

    @classmethod
    def draft_path(cls) -> Path:
        """Full path of the draft slot file."""
        return Path(cls.DRAFT_DIR) / f"{cls.DRAFT_SLOT}.json"

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration values.
        Raises ValueError if a setting is unusable.
        """
        if cls.GENERATION_DELAY_SECONDS < 0:
            raise ValueError(
                f"GENERATION_DELAY_SECONDS must be >= 0, got {cls.GENERATION_DELAY_SECONDS}"
            )
        if not cls.DRAFT_SLOT.strip():
            raise ValueError("DRAFT_SLOT must not be blank")
        if cls.LOG_FORMAT not in {"simple", "json"}:
            raise ValueError(f"LOG_FORMAT must be 'simple' or 'json', got {cls.LOG_FORMAT!r}")

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        return f"""
Configuration Summary:
  Draft slot: {cls.draft_path()}
  Generation delay: {cls.GENERATION_DELAY_SECONDS}s
  Log level: {cls.LOG_LEVEL} ({cls.LOG_FORMAT})
        """.strip()
