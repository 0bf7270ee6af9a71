# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to source/output locations, classifier defaults and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="QA_CORPUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Source documents
    source_dir: Path = Field(default=Path("."), description="Directory holding the markdown source documents")
    source_files: list[str] = Field(
        default_factory=lambda: ["React_QA.md", "Complete_React_QA_Final.md", "React_QA_Final.md"],
        description="Ordered source document names; order decides which duplicate is seen first",
    )

    # Output
    output_dir: Path = Field(default=Path("data"), description="Directory receiving the generated corpus files")
    output_basename: str = Field(default="reactQuestions", description="File stem of the JSON corpus")
    typescript_module: bool = Field(default=True, description="Also emit a TypeScript data module")
    typescript_export_name: str = Field(
        default="reactQuestions", description="Name of the array exported by the TypeScript module"
    )
    database_url: str | None = Field(
        default=None, description="Optional async SQLAlchemy URL for a SQLite copy of the corpus"
    )

    # Parsing
    default_topic: str = Field(default="React", description="Topic used when a section has no Category/Topic label")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
