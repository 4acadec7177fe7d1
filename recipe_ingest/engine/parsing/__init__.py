"""
Recipe text parsing module.

Turns delimited cookbook text into recipe records:
1. segment_text - cuts text into recipe blocks on the break marker
2. transition / iter_transitions - the section state machine shared with the validator
3. IngredientLineParser - amount/unit/name extraction for one ingredient line
4. RecipeBlockParser - builds a Recipe from one block
"""

from recipe_ingest.engine.parsing.models import (
    IngredientParseResult,
    ParsedIngredient,
    ParseFailure,
    SegmentationResult,
    Section,
    Transition,
)
from recipe_ingest.engine.parsing.grammar import (
    iter_transitions,
    match_section_header,
    missing_required_fields,
    transition,
)
from recipe_ingest.engine.parsing.segmenter import segment_text
from recipe_ingest.engine.parsing.ingredients import IngredientLineParser, parse_ingredient_line
from recipe_ingest.engine.parsing.block_parser import RecipeBlockParser

__all__ = [
    # Core models
    "Section",
    "Transition",
    "SegmentationResult",
    "ParsedIngredient",
    "ParseFailure",
    "IngredientParseResult",
    # Grammar
    "match_section_header",
    "transition",
    "iter_transitions",
    "missing_required_fields",
    # Parsers
    "segment_text",
    "IngredientLineParser",
    "parse_ingredient_line",
    "RecipeBlockParser",
]
