"""Application settings using Pydantic Settings for environment variable management."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:5173",  # Vite dev server
    "http://127.0.0.1:5173",
    "http://localhost:3000",  # Backend itself (manual testing)
]


class MissingCredentialError(RuntimeError):
    """Raised at startup when the Gemini API key is not configured."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Gemini Configuration
    google_gemini_key: str | None = Field(
        default=None,
        validation_alias="GOOGLE_GEMINI_KEY",
        description="Google Gemini API key (required)",
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash-lite", description="Gemini model to use"
    )
    review_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Upper bound in seconds for a single Gemini call",
    )

    # CORS Configuration
    cors_allowed_origins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS),
        description="Origins allowed to call the API with credentials (JSON list)",
    )

    # Observability
    logfire_token: str | None = Field(
        default=None, description="Pydantic Logfire token for observability"
    )

    # Application Settings
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Application environment"
    )

    # Server Configuration
    # Use a localhost default to avoid binding to all interfaces.
    # Override via env (e.g., HOST=0.0.0.0) only when needed (containers/proxies).
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3000, description="Server port")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


def require_gemini_key(config: Settings) -> str:
    """Return the configured Gemini API key.

    Raises:
        MissingCredentialError: If GOOGLE_GEMINI_KEY is unset or blank
    """
    key = (config.google_gemini_key or "").strip()
    if not key:
        raise MissingCredentialError(
            "GOOGLE_GEMINI_KEY is missing in environment variables"
        )
    return key


# Global settings instance
settings = Settings()
