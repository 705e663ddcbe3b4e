"""
app/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the hosting platform injects these at runtime.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Job Application Upload API"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── Object storage (Supabase) ──────────────────────────────────────────────
    # Empty values fail each upload request, not application startup.
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    storage_bucket: str = "job-applications"

    # ── Rate limiter ───────────────────────────────────────────────────────────
    rate_limit_max_requests: int = 3       # admitted submissions per window
    rate_limit_window_seconds: int = 3600  # trailing window length

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def storage_configured(self) -> bool:
        """True when both the storage endpoint and the service credential are set."""
        return bool(self.supabase_url and self.supabase_service_role_key)


# Single shared instance — import this everywhere.
settings = Settings()
