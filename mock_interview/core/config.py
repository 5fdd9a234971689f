from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Mock Interview Backend"
    api_prefix: str = "/api"

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_feedback_model: str = "gpt-4o-mini"

    database_url: str = "sqlite:////tmp/mock_interview.db"

    log_level: str = "INFO"
    log_file: Optional[str] = None

    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    latest_interviews_limit: int = 20

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
