"""
Structural validator for delimited recipe text.

Pre-flight check run before an upload is committed. It walks the same
grammar as the block parser (segmentation, section headers, transitions and
required-field rules) but only counts and inspects lines; it never builds
Recipe objects. Every block is reported, valid or not, so the caller sees the
whole picture before deciding whether to import.
"""

import logging
import re
from typing import List, Optional

from recipe_ingest.config import Settings
from recipe_ingest.engine.parsing.grammar import (
    iter_transitions,
    missing_required_fields,
    split_tag_line,
)
from recipe_ingest.engine.parsing.ingredients import IngredientLineParser
from recipe_ingest.engine.parsing.models import ParseFailure, Section
from recipe_ingest.engine.parsing.segmenter import segment_text
from recipe_ingest.errors import ErrorCode
from recipe_ingest.models.schemas import (
    BlockReport,
    ValidationIssue,
    ValidationReport,
    WarningCode,
)

logger = logging.getLogger(__name__)

_AMOUNT_FREE_RE = re.compile(r"\b(?:pinch|dash|to taste)\b", re.IGNORECASE)
_AMOUNT_RE = re.compile("[0-9" + "".join(IngredientLineParser.UNICODE_FRACTIONS) + "]")

_FATAL_MESSAGES = {
    ErrorCode.RECIPE_MISSING_TITLE: "Missing title",
    ErrorCode.RECIPE_MISSING_INGREDIENTS: "Missing ingredients section or no ingredients found",
    ErrorCode.RECIPE_MISSING_INSTRUCTIONS: "Missing instructions section or no instructions found",
}


class StructuralValidator:
    """Checks recipe text structure and produces a ValidationReport."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        ingredient_parser: Optional[IngredientLineParser] = None,
    ):
        if settings is None:
            from recipe_ingest.config import settings as global_settings

            settings = global_settings

        self.settings = settings
        self.ingredient_parser = ingredient_parser or IngredientLineParser()

    def validate(self, text: str) -> ValidationReport:
        """
        Validate a whole upload.

        Args:
            text: Raw recipe text, recipes separated by break markers.

        Returns:
            ValidationReport; is_valid is False if any block is invalid or
            no blocks were found.
        """
        report = ValidationReport()
        segmentation = segment_text(text, self.settings.min_block_length)
        report.recipe_count = len(segmentation.blocks)
        report.skipped_blocks = segmentation.skipped

        if segmentation.skipped:
            report.warnings.append(ValidationIssue(
                code=WarningCode.BLOCKS_SKIPPED.value,
                message=(
                    f"{segmentation.skipped} section(s) shorter than "
                    f"{self.settings.min_block_length} characters were skipped"
                ),
            ))

        if not segmentation.blocks:
            report.is_valid = False
            report.errors.append(ValidationIssue(
                code=ErrorCode.FORMAT_NO_RECIPES_FOUND.value,
                message="No recipes found. Make sure to use --RECIPE BREAK-- to separate recipes.",
            ))
            logger.info("Validation found no recipe blocks")
            return report

        for index, block in enumerate(segmentation.blocks):
            block_report = self.validate_block(block, index + 1)
            report.recipes.append(block_report)
            if not block_report.is_valid:
                report.is_valid = False
            report.errors.extend(block_report.errors)
            report.warnings.extend(block_report.warnings)

        logger.info(
            f"Validated {report.recipe_count} recipe block(s): "
            f"{len(report.invalid_recipe_numbers)} invalid, {len(report.warnings)} warning(s)"
        )
        return report

    def validate_block(self, block: str, recipe_number: int = 1) -> BlockReport:
        """Validate a single recipe block."""
        result = BlockReport(recipe_number=recipe_number)
        tags: List[str] = []

        def warn(code: WarningCode, message: str) -> None:
            result.warnings.append(ValidationIssue(
                code=code.value,
                message=f"Recipe {recipe_number}: {message}",
                recipe_number=recipe_number,
            ))

        for step in iter_transitions(block):
            if step.is_header:
                self._mark_section(result, step.state)
                continue
            if step.content is None:
                continue

            line = step.content
            if step.section is Section.TITLE:
                result.title = line
            elif step.section is Section.DESCRIPTION:
                result.has_description = True
            elif step.section is Section.INGREDIENTS:
                self._check_ingredient(result, line, warn)
            elif step.section is Section.INSTRUCTIONS:
                result.instruction_count += 1
                if len(line) < self.settings.instruction_min_length:
                    warn(WarningCode.INSTRUCTION_TOO_SHORT, f'Very short instruction: "{line}"')
            elif step.section is Section.TAGS:
                line_tags = split_tag_line(line)
                if not line_tags:
                    warn(WarningCode.NO_TAGS, f'No valid tags found in tags line: "{line}"')
                for tag in line_tags:
                    if tag not in tags:
                        tags.append(tag)

        result.tag_count = len(tags)

        if result.title:
            if len(result.title) < self.settings.title_min_length:
                warn(WarningCode.TITLE_TOO_SHORT, f'Title is very short: "{result.title}"')
            if len(result.title) > self.settings.title_max_length:
                warn(WarningCode.TITLE_TOO_LONG, f"Title is very long ({len(result.title)} chars)")

        for code in missing_required_fields(
            result.title, result.ingredient_count, result.instruction_count
        ):
            result.is_valid = False
            result.errors.append(ValidationIssue(
                code=code.value,
                message=f"Recipe {recipe_number}: {_FATAL_MESSAGES[code]}",
                recipe_number=recipe_number,
            ))

        if not result.has_description_section:
            warn(WarningCode.NO_DESCRIPTION, "No description section found")
        if not result.has_tags_section:
            warn(WarningCode.NO_TAGS_SECTION, "No tags section found")
        elif result.tag_count == 0:
            warn(WarningCode.NO_TAGS, "No valid tags found in tags section")

        if result.ingredient_count > self.settings.max_ingredients:
            warn(
                WarningCode.TOO_MANY_INGREDIENTS,
                f"Very high ingredient count ({result.ingredient_count})",
            )
        if result.ingredient_count < self.settings.min_ingredients:
            warn(
                WarningCode.TOO_FEW_INGREDIENTS,
                f"Very few ingredients ({result.ingredient_count})",
            )
        if result.instruction_count > self.settings.max_instructions:
            warn(
                WarningCode.TOO_MANY_INSTRUCTIONS,
                f"Very high instruction count ({result.instruction_count})",
            )

        return result

    def _check_ingredient(self, result: BlockReport, line: str, warn) -> None:
        """Count an ingredient line the parser would keep; warn about the rest."""
        if isinstance(self.ingredient_parser.parse_line(line), ParseFailure):
            warn(
                WarningCode.INGREDIENT_UNPARSEABLE,
                f'Ingredient "{line}" cannot be parsed and will be dropped',
            )
            return

        result.ingredient_count += 1
        if not _AMOUNT_RE.search(line) and not _AMOUNT_FREE_RE.search(line):
            warn(WarningCode.INGREDIENT_NO_AMOUNT, f'Ingredient "{line}" has no amount specified')

    @staticmethod
    def _mark_section(result: BlockReport, section: Section) -> None:
        if section is Section.DESCRIPTION:
            result.has_description_section = True
        elif section is Section.INGREDIENTS:
            result.has_ingredients_section = True
        elif section is Section.INSTRUCTIONS:
            result.has_instructions_section = True
        elif section is Section.TAGS:
            result.has_tags_section = True


def validate_recipe_format(text: str, settings: Optional[Settings] = None) -> ValidationReport:
    """Validate recipe text with a fresh StructuralValidator."""
    return StructuralValidator(settings=settings).validate(text)


def format_validation_results(report: ValidationReport) -> str:
    """
    Render a ValidationReport as plain text for a terminal or upload log.

    Example output:
        === RECIPE FORMAT VALIDATION RESULTS ===
        Total recipes found: 2
        Overall status: INVALID
        ...
    """
    output = [
        "=== RECIPE FORMAT VALIDATION RESULTS ===",
        f"Total recipes found: {report.recipe_count}",
        f"Overall status: {'VALID' if report.is_valid else 'INVALID'}",
        "",
    ]

    if report.errors:
        output.append("ERRORS (must fix before import):")
        output.extend(f"  [x] {issue.message}" for issue in report.errors)
        output.append("")

    if report.warnings:
        output.append("WARNINGS (review recommended):")
        output.extend(f"  [!] {issue.message}" for issue in report.warnings)
        output.append("")

    output.append("RECIPE SUMMARY:")
    for block in report.recipes:
        status = "OK " if block.is_valid else "BAD"
        output.append(f'  {status} Recipe {block.recipe_number}: "{block.title}"')
        output.append(
            f"      Ingredients: {block.ingredient_count}, "
            f"Instructions: {block.instruction_count}, Tags: {block.tag_count}"
        )

    return "\n".join(output)
