"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Storage
    SEED_CANDIDATES: bool = True

    # Client
    API_BASE_URL: str = "http://127.0.0.1:8000"
    API_TIMEOUT_SECONDS: float = 10.0
    SUCCESS_MESSAGE_SECONDS: float = 3.0

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def allowed_origins(self) -> list[str]:
        """``ALLOWED_ORIGINS`` as a list; ``*`` stays a single wildcard entry."""
        raw = self.ALLOWED_ORIGINS.strip()
        if raw == "*":
            return ["*"]
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


settings = Settings()
