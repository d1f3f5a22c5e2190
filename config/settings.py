from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys
    GEMINI_API_KEY: Optional[str] = ""
    OPENAI_API_KEY: Optional[str] = ""

    # Application Settings
    APP_NAME: str = "Sale Squid Review Analyzer"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = ["*"]

    # LLM Provider Configuration
    # Options: "gemini", "openai"
    ANALYSIS_PROVIDER: str = "gemini"

    # Model Settings
    GEMINI_MODEL: str = "gemini-2.5-flash"
    OPENAI_MODEL: str = "gpt-4o-mini"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_OUTPUT_TOKENS: int = 8192
    LLM_TIMEOUT: Optional[float] = None  # None = provider default, the pipeline adds no timeout

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
