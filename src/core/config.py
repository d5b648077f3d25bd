"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Builder settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="BUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Canvas layout
    stack_spacing: int = Field(default=80, ge=0, description="Vertical step between stacked nodes")
    duplicate_offset: int = Field(default=80, ge=0, description="Vertical offset of a duplicate")
    history_limit: int = Field(default=50, gt=0, description="Max undo snapshots")

    # Generation cache
    enable_cache: bool = Field(default=True, description="Cache generated bundles")
    cache_size: int = Field(default=32, gt=0, description="Cache max size")
    cache_ttl: int = Field(default=600, gt=0, description="Cache TTL (seconds)")

    # Export
    default_format: str = Field(default="react-native", description="Default export format")

    # Validation
    max_document_bytes: int = Field(default=1024 * 1024, gt=0, description="Max serialized document size")
    max_tree_depth: int = Field(default=20, gt=0, description="Max node nesting depth")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
