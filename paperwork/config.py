"""Paperwork — Application configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class PaperworkSettings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {
        "env_prefix": "PAPERWORK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # ── Shrubbery artifacts ────────────────────────────────────
    artifact_dir: str = "."
    artifact_suffix: str = "_shrubbery"

    # ── Robotomy randomness ────────────────────────────────────
    # Seeded once per process; None draws from OS entropy.
    random_seed: int | None = None

    # ── Logging ────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: str = "console"


settings = PaperworkSettings()
