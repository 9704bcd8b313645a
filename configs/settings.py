from pathlib import Path
from typing import Literal
from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import Field

BUNDLED_KNOWLEDGE_PATH = (
    Path(__file__).parent.parent / "src" / "knowledge" / "data" / "andhra_culture.md"
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    knowledge_source: str = Field(
        default=str(BUNDLED_KNOWLEDGE_PATH),
        description="Path or http(s) URL of the cultural knowledge document"
    )
    knowledge_fetch_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds when the knowledge document is a URL"
    )
    default_region: Literal["coastal", "guntur", "rayalaseema"] = Field(
        default="coastal",
        description="Region used when a request names none"
    )
    vocabulary_words_per_response: int = Field(
        default=2,
        description="Telugu words drawn for each generated response"
    )
    deterministic_phrases: bool = Field(
        default=False,
        description="Always pick the first phrase instead of a random one"
    )
    regional_tone_probability: float = Field(
        default=0.3,
        description="Chance that the regional adapter injects a regional phrase"
    )
    selection_max_length: int = Field(
        default=100,
        description="Longest accepted selection string"
    )
    langchain_tracing_v2: bool = Field(
        default=False,
        description="Enable Langsmith tracing"
    )
    langchain_api_key: str = Field(
        default="",
        description="Langsmith API key"
    )
    langchain_project: str = Field(
        default="andhra-local-guide",
        description="Langsmith project name"
    )
    log_level: str = Field(default="INFO")
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
