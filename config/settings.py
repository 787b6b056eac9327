"""Application settings loaded from environment variables and .env."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ANIMAL = "platypus"


class Settings(BaseSettings):
    """Runtime settings (env prefix ASK_AND_LEARN_)."""

    default_animal: str = DEFAULT_ANIMAL
    json_indent: int = Field(4, ge=0)
    log_file: str | None = None
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(
        env_prefix="ASK_AND_LEARN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("default_animal")
    @classmethod
    def validate_default_animal(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("default_animal must not be empty")
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def parse_optional_str(cls, v):
        if v == "":
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
