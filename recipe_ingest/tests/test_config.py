"""
Tests for application configuration and settings validation.

Tests the Settings class behavior including:
- Default values
- Environment variable overrides
- Threshold and template validation
"""
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from recipe_ingest.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_app_name_default(self):
        assert get_settings().app_name == "Recipe Ingest"

    def test_min_block_length_default(self):
        """Blocks shorter than 20 characters are treated as noise."""
        assert get_settings().min_block_length == 20

    def test_recipe_defaults(self):
        settings = get_settings()
        assert settings.default_prep_time == 15
        assert settings.default_cook_time == 30
        assert settings.default_servings == 4
        assert settings.default_difficulty == "medium"
        assert settings.default_is_public is True

    def test_source_template_default(self):
        settings = get_settings()
        assert settings.source_template.format(volume="2") == (
            "Doc Bear's Comfort Food Survival Guide Volume 2"
        )

    def test_validator_thresholds(self):
        settings = get_settings()
        assert settings.title_min_length == 3
        assert settings.title_max_length == 100
        assert settings.instruction_min_length == 10
        assert settings.min_ingredients == 2
        assert settings.max_ingredients == 50
        assert settings.max_instructions == 30


class TestEnvironmentOverrides:
    """Tests for loading values from environment variables."""

    def test_min_block_length_from_env(self):
        with patch.dict(os.environ, {"MIN_BLOCK_LENGTH": "40"}):
            assert Settings().min_block_length == 40

    def test_env_vars_are_case_insensitive(self):
        with patch.dict(os.environ, {"base_tag": "family-recipes"}):
            assert Settings().base_tag == "family-recipes"

    def test_overrides_beat_environment(self):
        with patch.dict(os.environ, {"DEFAULT_SERVINGS": "6"}):
            assert get_settings(default_servings=2).default_servings == 2


class TestSettingsValidation:
    """Tests for rejecting unusable configuration."""

    def test_log_level_normalized(self):
        assert get_settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid LOG_LEVEL"):
            get_settings(log_level="chatty")

    def test_invalid_difficulty(self):
        with pytest.raises(ValidationError, match="Invalid DEFAULT_DIFFICULTY"):
            get_settings(default_difficulty="extreme")

    def test_min_block_length_must_be_positive(self):
        with pytest.raises(ValidationError, match="MIN_BLOCK_LENGTH"):
            get_settings(min_block_length=0)

    def test_title_bounds_ordered(self):
        with pytest.raises(ValidationError, match="TITLE_MIN_LENGTH"):
            get_settings(title_min_length=50, title_max_length=10)

    def test_ingredient_bounds_ordered(self):
        with pytest.raises(ValidationError, match="MIN_INGREDIENTS"):
            get_settings(min_ingredients=10, max_ingredients=5)

    def test_source_template_needs_volume(self):
        with pytest.raises(ValidationError, match="volume"):
            get_settings(source_template="My Cookbook")
