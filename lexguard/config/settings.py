from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider: str = "gemini"
    attempt_timeout_seconds: int = 120
    default_language: str = "ru"

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-3.1-pro-preview"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-5"

    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
    openai_compatible_base_url: str = ""
