#!/usr/bin/env python3
"""
Demo script for the recipe ingestion pipeline.
Validates and parses a small cookbook excerpt, one block of which is broken,
to show how bad blocks are reported and dropped.
"""
from recipe_ingest.engine.validator import format_validation_results
from recipe_ingest.services.ingest_service import RecipeIngestService

SAMPLE_TEXT = """Chicken and Dumplings

-- Description --
Old-fashioned Sunday supper.

-- Ingredients --
1 whole chicken
2 cups flour
1 1/2 tsp baking powder
¾ cup milk
Salt to taste

-- Instructions --
Simmer the chicken in salted water until tender.
Stir together flour, baking powder and milk.
Drop the dough by spoonfuls into the simmering broth.

-- Tags --
Sunday, Family-Friendly

-- RECIPE BREAK --

Lost Recipe
-- Description --
The ingredient list never made it out of the scanner.
-- Instructions --
Guess.

-- RECIPE BREAK --

**Sweet Iced Tea**
-- Ingredients --
- 8 cups water
- 6 tea bags
- 1 cup sugar
-- Instructions --
Steep the tea bags in boiling water for five minutes.
Stir in the sugar and chill before serving.
"""


def print_section(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70 + "\n")


def print_recipe(recipe):
    """Print a parsed recipe in a readable format."""
    print(f"{recipe.title}  [{recipe.category.value}]")
    if recipe.description:
        print(f"  {recipe.description}")
    for ingredient in recipe.ingredients:
        unit = f" {ingredient.unit}" if ingredient.unit else ""
        print(f"  • {ingredient.amount:g}{unit} {ingredient.name}")
    for number, step in enumerate(recipe.instructions, 1):
        print(f"  {number}. {step}")
    print(f"  tags: {', '.join(recipe.tags)}\n")


def main():
    """Run recipe ingestion demonstration."""
    print_section("Recipe Ingest Demo")
    service = RecipeIngestService()

    # STEP 1: Pre-flight validation
    print_section("STEP 1: Validate Recipe Text")
    report = service.validate(SAMPLE_TEXT)
    print(format_validation_results(report))

    # STEP 2: Parse, dropping the broken block
    print_section("STEP 2: Parse Recipes")
    result = service.parse(SAMPLE_TEXT, volume="1")
    for recipe in result.recipes:
        print_recipe(recipe)

    # STEP 3: Summary
    print_section("STEP 3: Summary")
    stats = result.stats
    print(f"✓ Recipes parsed:    {stats.total_recipes}")
    print(f"✓ With descriptions: {stats.with_descriptions}")
    print(f"✓ Categories:        {stats.categories}")
    if result.failed_blocks:
        print(f"⚠ Failed blocks:     {result.failed_blocks}")


if __name__ == "__main__":
    main()
