"""
Tests for the recipe block parser.

Covers section accumulation, tag seeding and merging, defaults, the
required-field rules and logging of dropped lines and blocks.
"""
import logging

import pytest

from recipe_ingest.config import get_settings
from recipe_ingest.engine.parsing.block_parser import RecipeBlockParser, merge_tags
from recipe_ingest.models.schemas import Category, Difficulty


class TestWellFormedBlock:
    """Tests for a fully delimited recipe."""

    @pytest.fixture
    def recipe(self, block_parser, mac_and_cheese):
        return block_parser.parse_block(mac_and_cheese)

    def test_title(self, recipe):
        assert recipe.title == "Classic Mac and Cheese"

    def test_description_lines_joined_with_space(self, recipe):
        assert recipe.description == "Creamy, cheesy comfort food the whole family loves."

    def test_ingredients_in_source_order(self, recipe):
        assert [i.name for i in recipe.ingredients] == [
            "macaroni", "shredded cheddar", "milk", "salt",
        ]

    def test_ingredient_amounts(self, recipe):
        assert [(i.amount, i.unit) for i in recipe.ingredients] == [
            (1.0, "lb"), (2.0, "cups"), (1.5, "cups"), (0.5, "tsp"),
        ]

    def test_ingredient_defaults(self, recipe):
        ingredient = recipe.ingredients[0]
        assert ingredient.category == ""
        assert ingredient.alternatives == []
        assert ingredient.optional is False

    def test_instructions_verbatim(self, recipe):
        assert recipe.instructions == [
            "Cook the macaroni until al dente.",
            "Melt the cheese into the warm milk.",
            "Combine pasta and sauce, then bake for 20 minutes.",
        ]

    def test_tags_seeded_then_appended(self, recipe):
        assert recipe.tags == [
            "comfort-food", "volume-1", "baking", "quick", "family-friendly",
        ]

    def test_defaults_applied(self, recipe):
        assert recipe.prep_time == 15
        assert recipe.cook_time == 30
        assert recipe.servings == 4
        assert recipe.difficulty == Difficulty.MEDIUM
        assert recipe.is_public is True

    def test_source_uses_volume(self, recipe):
        assert recipe.source == "Doc Bear's Comfort Food Survival Guide Volume 1"

    def test_category_computed(self, recipe):
        assert recipe.category == Category.ENTREES

    def test_camel_case_serialization(self, recipe):
        data = recipe.model_dump(by_alias=True)
        assert data["prepTime"] == 15
        assert data["cookTime"] == 30
        assert data["isPublic"] is True
        assert data["category"] == Category.ENTREES


class TestImplicitSections:
    """Tests for blocks that lean on the implicit Title -> Description rule."""

    def test_bulleted_block_without_description(self, block_parser, beef_stew):
        recipe = block_parser.parse_block(beef_stew)
        assert recipe.title == "Hearty Beef Stew"
        assert recipe.description == ""
        assert len(recipe.ingredients) == 4
        assert recipe.ingredients[2].unit == "can"
        assert recipe.ingredients[3].name == "Salt to taste"
        assert recipe.category == Category.SOUPS

    def test_description_without_header(self, block_parser):
        block = (
            "Garlic Bread\n"
            "Crispy and buttery.\n"
            "-- Ingredients --\n1 loaf bread\n"
            "-- Instructions --\nSpread butter and bake."
        )
        recipe = block_parser.parse_block(block)
        assert recipe.description == "Crispy and buttery."
        assert recipe.category == Category.BREADS


class TestTags:
    """Tests for tag seeding and merging."""

    def test_duplicate_tags_not_reinserted(self, block_parser):
        block = (
            "Pancakes\n-- Ingredients --\n2 cups flour\n"
            "-- Instructions --\nMix and fry.\n"
            "-- Tags --\nBaking, Quick, Family-Friendly\n"
            "quick, COMFORT-FOOD, volume-1, Baking"
        )
        recipe = block_parser.parse_block(block)
        assert recipe.tags == [
            "comfort-food", "volume-1", "baking", "quick", "family-friendly",
        ]

    def test_volume_tag_lowercased(self, test_settings):
        parser = RecipeBlockParser("IV", settings=test_settings)
        assert parser.base_tags == ["comfort-food", "volume-iv"]
        assert parser.source.endswith("Volume IV")

    def test_merge_tags_preserves_order(self):
        tags = ["a", "b"]
        merge_tags(tags, ["c", "a", "", "d"])
        assert tags == ["a", "b", "c", "d"]

    def test_base_tags_fresh_per_block(self, block_parser, mac_and_cheese, beef_stew):
        """Tags from one block never leak into the next."""
        first = block_parser.parse_block(mac_and_cheese)
        second = block_parser.parse_block(beef_stew)
        assert "baking" in first.tags
        assert "baking" not in second.tags


class TestRequiredFields:
    """Tests for blocks that must be discarded."""

    def test_missing_ingredients_section(self, block_parser, missing_ingredients):
        assert block_parser.parse_block(missing_ingredients) is None

    def test_empty_ingredients_section(self, block_parser):
        block = "Nothing Soup\n-- Ingredients --\n-- Instructions --\nBoil water for a while."
        assert block_parser.parse_block(block) is None

    def test_all_ingredient_lines_unparseable(self, block_parser):
        block = "Odd One\n-- Ingredients --\nand\nx\n-- Instructions --\nDo the thing carefully."
        assert block_parser.parse_block(block) is None

    def test_missing_instructions(self, block_parser):
        block = "Half Recipe\n-- Ingredients --\n1 cup rice"
        assert block_parser.parse_block(block) is None

    def test_missing_title(self, block_parser):
        block = "-- Ingredients --\n1 cup rice\n-- Instructions --\nCook the rice."
        assert block_parser.parse_block(block) is None

    def test_unparseable_line_dropped_block_kept(self, block_parser):
        block = (
            "Rice Bowl\n-- Ingredients --\n1 cup rice\nand\n2 cups water\n"
            "-- Instructions --\nSimmer until tender."
        )
        recipe = block_parser.parse_block(block)
        assert [i.name for i in recipe.ingredients] == ["rice", "water"]


class TestSettingsDefaults:
    """Tests for configurable defaults."""

    def test_custom_defaults(self):
        custom = get_settings(
            default_prep_time=5,
            default_servings=8,
            default_difficulty="easy",
            default_is_public=False,
            base_tag="Family-Recipes",
            source_template="Family Cookbook {volume}",
        )
        parser = RecipeBlockParser("2", settings=custom)
        recipe = parser.parse_block(
            "Toast\n-- Ingredients --\n2 slices bread\n-- Instructions --\nToast the bread."
        )
        assert recipe.prep_time == 5
        assert recipe.servings == 8
        assert recipe.difficulty == Difficulty.EASY
        assert recipe.is_public is False
        assert recipe.tags[:2] == ["family-recipes", "volume-2"]
        assert recipe.source == "Family Cookbook 2"


class TestLogging:
    """Tests for log output on dropped lines and blocks."""

    def test_logs_failed_block(self, block_parser, missing_ingredients, caplog):
        with caplog.at_level(logging.WARNING, logger="recipe_ingest.engine.parsing.block_parser"):
            block_parser.parse_block(missing_ingredients, block_number=7)
        assert "Block 7: failed to parse" in caplog.text
        assert "RECIPE_MISSING_INGREDIENTS" in caplog.text

    def test_logs_dropped_ingredient_at_debug(self, block_parser, caplog):
        block = "Rice\n-- Ingredients --\n1 cup rice\nor\n-- Instructions --\nCook it slowly."
        with caplog.at_level(logging.DEBUG, logger="recipe_ingest.engine.parsing.block_parser"):
            block_parser.parse_block(block)
        assert "dropping ingredient line 'or'" in caplog.text
