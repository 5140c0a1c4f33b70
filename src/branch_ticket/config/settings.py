"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from branch_ticket.core.models.provider import Provider


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BRANCH_TICKET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="none",
    )

    # General
    log_level: str = "ERROR"

    # Repository location
    repo_path: str = "."
    git_dir: str = ".git"

    # Provider assumed for branches that track no remote ("none" disables)
    default_provider: Provider | None = Provider.ACRONIS


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
