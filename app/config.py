"""Application configuration using Pydantic settings."""

from typing import Dict, Literal, Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


MISSING_TOKENS_MESSAGE = "AI model tokens are missing from environment variables"


class ConfigurationError(RuntimeError):
    """Raised when required process configuration is absent."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # AI model credentials
    AI_MODEL_1_TOKEN: Optional[str] = None
    AI_MODEL_2_TOKEN: Optional[str] = None
    AI_MODEL_3_TOKEN: Optional[str] = None

    # AI model endpoints
    AI_MODEL_1_NAME: str = "gpt-4o"
    AI_MODEL_2_NAME: str = "claude-3-5-haiku-20241022"
    AI_MODEL_3_NAME: str = "generic-model"
    AI_MODEL_3_URL: str = "http://localhost:8000/v1/generate"
    AI_MAX_TOKENS: int = 1000
    AI_REQUEST_TIMEOUT: float = 60.0

    # Fan-out behaviour
    FANOUT_MODE: Literal["all_or_nothing", "best_effort"] = "all_or_nothing"
    REQUIRE_TOKENS_AT_STARTUP: bool = False

    # Langfuse
    LANGFUSE_PUBLIC_KEY: Optional[str] = None
    LANGFUSE_SECRET_KEY: Optional[str] = None
    LANGFUSE_HOST: str = "https://us.cloud.langfuse.com"

    # Application
    API_HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"
    SHUTDOWN_TIMEOUT: Optional[int] = None

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    def token_status(self) -> Dict[str, bool]:
        """Report which model tokens are configured, keyed by model slot."""
        return {
            "model_1": bool(self.AI_MODEL_1_TOKEN),
            "model_2": bool(self.AI_MODEL_2_TOKEN),
            "model_3": bool(self.AI_MODEL_3_TOKEN),
        }

    def resolve_tokens(self) -> Tuple[str, str, str]:
        """Return the three model tokens in model order.

        Raises:
            ConfigurationError: if any token is missing or empty
        """
        tokens = (self.AI_MODEL_1_TOKEN, self.AI_MODEL_2_TOKEN, self.AI_MODEL_3_TOKEN)
        if not all(tokens):
            raise ConfigurationError(MISSING_TOKENS_MESSAGE)
        return tokens  # type: ignore[return-value]


# Global settings instance
settings = Settings()
