"""
Application configuration using Pydantic settings.

All configurable values are loaded from environment variables with sensible defaults.
Parsing defaults (prep time, servings, ...) and validator thresholds live here so
the parser and the validator read the same numbers.
"""
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator

# Get the directory containing this config file (recipe_ingest/)
_PACKAGE_DIR = Path(__file__).parent.resolve()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App metadata
    app_name: str = "Recipe Ingest"
    app_version: str = "0.1.0"
    debug: bool = False  # Forces DEBUG logging in the CLI

    # Logging configuration
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Segmentation
    min_block_length: int = 20  # Blocks shorter than this (after trim) are skipped

    # Recipe defaults applied to every parsed block
    default_prep_time: int = 15  # minutes
    default_cook_time: int = 30  # minutes
    default_servings: int = 4
    default_difficulty: str = "medium"
    default_is_public: bool = True

    # Tagging and provenance
    base_tag: str = "comfort-food"
    source_template: str = "Doc Bear's Comfort Food Survival Guide Volume {volume}"

    # Structural validator thresholds
    title_min_length: int = 3
    title_max_length: int = 100
    instruction_min_length: int = 10
    min_ingredients: int = 2
    max_ingredients: int = 50
    max_instructions: int = 30

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Expected one of: {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level

    @field_validator("default_difficulty")
    @classmethod
    def validate_default_difficulty(cls, value: str) -> str:
        if value not in ("easy", "medium", "hard"):
            raise ValueError(f"Invalid DEFAULT_DIFFICULTY '{value}'")
        return value

    @model_validator(mode="after")
    def validate_thresholds(self) -> "Settings":
        """Ensure segmentation and validator thresholds are usable."""
        if self.min_block_length < 1:
            raise ValueError("MIN_BLOCK_LENGTH must be at least 1")
        if self.title_min_length > self.title_max_length:
            raise ValueError("TITLE_MIN_LENGTH cannot exceed TITLE_MAX_LENGTH")
        if self.min_ingredients > self.max_ingredients:
            raise ValueError("MIN_INGREDIENTS cannot exceed MAX_INGREDIENTS")
        if "{volume}" not in self.source_template:
            raise ValueError("SOURCE_TEMPLATE must contain a '{volume}' placeholder")
        return self

    model_config = SettingsConfigDict(
        env_file=_PACKAGE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


def get_settings(**overrides) -> Settings:
    """
    Factory function to create Settings instance.

    Useful for testing where you need to override specific values
    without modifying environment variables.

    Args:
        **overrides: Key-value pairs to override default settings

    Returns:
        Settings instance with overrides applied

    Example:
        test_settings = get_settings(min_block_length=10, log_level="DEBUG")
    """
    return Settings(**overrides)


# Global settings instance (lazy initialization for testability)
# In tests, you can reload this module or use get_settings() directly
settings = get_settings()
