"""
Recipe ingestion service.

Orchestrates one upload: segment the text, parse every block, collect the
recipes that survived and report what was dropped. Optionally runs the
structural validator first and refuses the upload if it is invalid.
"""
import logging
from typing import List, Optional

from recipe_ingest.config import Settings
from recipe_ingest.engine.parsing.block_parser import RecipeBlockParser
from recipe_ingest.engine.parsing.segmenter import segment_text
from recipe_ingest.engine.validator import StructuralValidator
from recipe_ingest.errors import NoRecipesFoundError, RecipeFormatError
from recipe_ingest.models.schemas import (
    ParseBatchResult,
    ParseStats,
    Recipe,
    ValidationReport,
)

logger = logging.getLogger(__name__)


class RecipeIngestService:
    """Service for turning extracted cookbook text into recipe records."""

    def __init__(self, settings: Optional[Settings] = None):
        if settings is None:
            from recipe_ingest.config import settings as global_settings

            settings = global_settings
        self.settings = settings
        self.validator = StructuralValidator(settings=settings)

    def parse(self, text: str, volume: str) -> ParseBatchResult:
        """
        Parse every recipe block in the text.

        Blocks that fail the required-field checks are dropped and listed in
        failed_blocks; they never stop later blocks from being parsed.

        Args:
            text: Raw text from the document extractor.
            volume: Cookbook volume label.

        Returns:
            ParseBatchResult with recipes in block order.
        """
        segmentation = segment_text(text, self.settings.min_block_length)
        parser = RecipeBlockParser(volume, settings=self.settings)

        logger.info(f"Found {len(segmentation.blocks)} recipe section(s) for volume {volume}")

        recipes: List[Recipe] = []
        failed_blocks: List[int] = []
        for index, block in enumerate(segmentation.blocks):
            recipe = parser.parse_block(block, block_number=index + 1)
            if recipe is None:
                failed_blocks.append(index + 1)
                continue
            recipes.append(recipe)

        logger.info(
            f"Parsed {len(recipes)} recipe(s), {len(failed_blocks)} failed, "
            f"{segmentation.skipped} skipped"
        )

        return ParseBatchResult(
            volume=parser.volume,
            recipes=recipes,
            failed_blocks=failed_blocks,
            skipped_blocks=segmentation.skipped,
            stats=compute_parse_stats(recipes, len(failed_blocks), segmentation.skipped),
        )

    def validate(self, text: str) -> ValidationReport:
        """Run the structural validator over the text."""
        return self.validator.validate(text)

    def ingest(self, text: str, volume: str, strict: bool = False) -> ParseBatchResult:
        """
        Validate (when strict) and parse an upload.

        Args:
            text: Raw text from the document extractor.
            volume: Cookbook volume label.
            strict: Refuse the upload unless the validator passes it.

        Returns:
            ParseBatchResult for the upload.

        Raises:
            NoRecipesFoundError: strict mode and no recipe blocks were found.
            RecipeFormatError: strict mode and at least one block is invalid.
        """
        if strict:
            report = self.validate(text)
            if report.recipe_count == 0:
                raise NoRecipesFoundError(skipped_blocks=report.skipped_blocks)
            if not report.is_valid:
                raise RecipeFormatError(
                    invalid_recipes=report.invalid_recipe_numbers,
                    errors=[issue.message for issue in report.errors],
                )

        return self.parse(text, volume)


def compute_parse_stats(recipes: List[Recipe], failed: int = 0, skipped: int = 0) -> ParseStats:
    """Summarize a parse batch for review before import."""
    total = len(recipes)
    if total == 0:
        return ParseStats(failed_blocks=failed, skipped_blocks=skipped)

    return ParseStats(
        total_recipes=total,
        with_descriptions=sum(1 for r in recipes if r.description.strip()),
        avg_ingredients=round(sum(len(r.ingredients) for r in recipes) / total),
        avg_instructions=round(sum(len(r.instructions) for r in recipes) / total),
        categories=len({r.category for r in recipes}),
        failed_blocks=failed,
        skipped_blocks=skipped,
    )


def parse_recipes_from_text(
    text: str,
    volume: str,
    settings: Optional[Settings] = None,
) -> List[Recipe]:
    """Parse text into the list of recipes that satisfied every invariant."""
    return RecipeIngestService(settings=settings).parse(text, volume).recipes
