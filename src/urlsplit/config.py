"""
Configuration management for urlsplit.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from urlsplit.batch.rows import parse_delimiter


class SuffixConfig(BaseSettings):
    """Configuration for the public suffix rule set."""

    list_path: Optional[Path] = Field(
        default=None,
        description=(
            "Cached public suffix list file. Defaults to the snapshot bundled "
            "with the publicsuffixlist package."
        ),
    )
    include_private: bool = Field(
        default=False,
        description="Also load rules from the PRIVATE DOMAINS section",
    )

    model_config = SettingsConfigDict(env_prefix="URLSPLIT_SUFFIX_")


class OutputConfig(BaseSettings):
    """Configuration for reading and writing rows."""

    delimiter: str = Field(
        default=",", description=r"Field delimiter (one ASCII character or '\t')"
    )
    quote: bool = Field(
        default=False, description="Enable CSV quoting when reading and writing"
    )
    headers: bool = Field(
        default=True, description="Write a header row and skip the input header"
    )

    model_config = SettingsConfigDict(env_prefix="URLSPLIT_OUTPUT_")

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        return parse_delimiter(value)


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    suffix: SuffixConfig = Field(default_factory=SuffixConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    # Global settings
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="URLSPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
