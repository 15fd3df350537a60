"""Environment-based configuration for the credits extractor."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Credits extractor settings, loaded from environment variables."""

    # Server
    PORT: int = 8092

    # Anthropic credential (empty = extraction not configured)
    ANTHROPIC_API_KEY: str = ""

    # Messages API
    ANTHROPIC_API_URL: str = "https://api.anthropic.com/v1/messages"
    ANTHROPIC_VERSION: str = "2023-06-01"
    ANTHROPIC_MODEL: str = "claude-sonnet-4-20250514"
    MAX_OUTPUT_TOKENS: int = 2000

    # Upstream timeouts (read covers long PDF replies)
    UPSTREAM_TIMEOUT_SECONDS: int = 300
    UPSTREAM_CONNECT_TIMEOUT: int = 30

    model_config = {"env_prefix": "", "case_sensitive": True}


settings = Settings()
