"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names (OPENAI_API_KEY, OPENAI_MODEL,
etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

API_KEY_PLACEHOLDER = "your-openai-api-key"


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4", validation_alias="OPENAI_MODEL")
    openai_temperature: float = Field(default=0.3, validation_alias="OPENAI_TEMPERATURE")
    openai_timeout_seconds: float = Field(default=60.0, validation_alias="OPENAI_TIMEOUT_SECONDS")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        validation_alias="CORS_ORIGINS",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def openai_configured(self) -> bool:
        key = (self.openai_api_key or "").strip()
        return bool(key) and API_KEY_PLACEHOLDER not in key


settings = Settings()
