"""
Tests that the validator and the block parser agree on every block.

A block the validator marks valid must produce a recipe, and a block it marks
invalid must be dropped by the parser. The corpus below mixes well-formed
blocks with every way a required field can go missing.
"""
import itertools

import pytest

TITLES = ["Chicken Pot Pie", "**Bold Title**", "***\nLate Title", None]
INGREDIENT_SECTIONS = [
    "-- Ingredients --\n2 cups flour\n1 tsp salt",
    "-- Ingredients --\n- ½ cup butter\n• 3 eggs",
    "-- Ingredients --\nand\nor",
    "-- Ingredients --\n1 cup rice\nthen",
    "-- Ingredients --",
    None,
]
INSTRUCTION_SECTIONS = [
    "-- Instructions --\nMix everything together.\nBake for an hour.",
    "-- Instruction --\nStir.",
    "-- Instructions --",
    None,
]
TAG_SECTIONS = ["-- Tags --\ndinner, easy", None]


def _build_block(title, ingredients, instructions, tags):
    parts = [title, "A short description line.", ingredients, instructions, tags]
    return "\n".join(part for part in parts if part is not None)


CORPUS = [
    _build_block(*combo)
    for combo in itertools.product(TITLES, INGREDIENT_SECTIONS, INSTRUCTION_SECTIONS, TAG_SECTIONS)
]


@pytest.mark.parametrize("block", CORPUS)
def test_validator_agrees_with_parser(block, block_parser, validator):
    accepted = block_parser.parse_block(block) is not None
    assert validator.validate_block(block).is_valid == accepted


def test_corpus_has_both_outcomes(block_parser):
    outcomes = {block_parser.parse_block(block) is not None for block in CORPUS}
    assert outcomes == {True, False}


def test_ingredient_counts_match(block_parser, validator):
    for block in CORPUS:
        recipe = block_parser.parse_block(block)
        if recipe is not None:
            assert validator.validate_block(block).ingredient_count == len(recipe.ingredients)


def test_batch_failures_match_invalid_blocks(service):
    text = "\n--RECIPE BREAK--\n".join(CORPUS)
    report = service.validate(text)
    result = service.parse(text, "1")
    assert report.recipe_count == len(CORPUS)
    assert result.failed_blocks == report.invalid_recipe_numbers
    assert len(result.recipes) + len(result.failed_blocks) == len(CORPUS)
