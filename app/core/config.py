from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Vibe Trip Planner API"
    api_prefix: str = "/api"

    hf_token: str = Field(default="", description="API key for the completion router")
    completion_base_url: str = "https://router.huggingface.co/v1"
    completion_model: str = "deepseek-ai/DeepSeek-R1:fastest"
    completion_temperature: float = 0.7
    completion_max_tokens: int = 900

    supabase_url: str | None = None
    supabase_service_role_key: str | None = None
    trips_table: str = "trips"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
