"""
Shared pytest fixtures for recipe ingestion tests.

This module provides common fixtures for:
- Settings instances independent of the environment
- Parser, validator and service instances
- Sample delimited recipe text, well-formed and broken
"""
import pytest

from recipe_ingest.config import Settings, get_settings
from recipe_ingest.engine.parsing.block_parser import RecipeBlockParser
from recipe_ingest.engine.parsing.ingredients import IngredientLineParser
from recipe_ingest.engine.validator import StructuralValidator
from recipe_ingest.services.ingest_service import RecipeIngestService


# ============================================================================
# Sample Text
# ============================================================================

MAC_AND_CHEESE = """Classic Mac and Cheese

-- Description --
Creamy, cheesy comfort food
the whole family loves.

-- Ingredients --
1 lb macaroni
2 cups shredded cheddar
1 1/2 cups milk
½ tsp salt

-- Instructions --
Cook the macaroni until al dente.
Melt the cheese into the warm milk.
Combine pasta and sauce, then bake for 20 minutes.

-- Tags --
Baking, Quick, Family-Friendly
"""

BEEF_STEW = """**Hearty Beef Stew**
-- Ingredients --
- 2 lbs beef chuck, cubed
- 4 carrots, sliced
- 1 can diced tomatoes
- Salt to taste
-- Instructions --
Brown the beef in a heavy pot.
Add vegetables and simmer for two hours.
-- Tags --
stew, winter
"""

MISSING_INGREDIENTS = """Empty Pantry Surprise
-- Description --
There is nothing in here to cook.
-- Instructions --
Stare sadly into the empty cupboard.
"""


@pytest.fixture
def test_settings() -> Settings:
    """Settings with default values, independent of the environment."""
    return get_settings(log_level="INFO")


@pytest.fixture
def ingredient_parser() -> IngredientLineParser:
    return IngredientLineParser()


@pytest.fixture
def block_parser(test_settings) -> RecipeBlockParser:
    """Block parser for volume 1."""
    return RecipeBlockParser("1", settings=test_settings)


@pytest.fixture
def validator(test_settings) -> StructuralValidator:
    return StructuralValidator(settings=test_settings)


@pytest.fixture
def service(test_settings) -> RecipeIngestService:
    return RecipeIngestService(settings=test_settings)


@pytest.fixture
def mac_and_cheese() -> str:
    return MAC_AND_CHEESE


@pytest.fixture
def beef_stew() -> str:
    return BEEF_STEW


@pytest.fixture
def missing_ingredients() -> str:
    return MISSING_INGREDIENTS


@pytest.fixture
def cookbook_text() -> str:
    """Three blocks: two well-formed recipes around one without ingredients."""
    return "\n-- RECIPE BREAK --\n".join([MAC_AND_CHEESE, MISSING_INGREDIENTS, BEEF_STEW])
