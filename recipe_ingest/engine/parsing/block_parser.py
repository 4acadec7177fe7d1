"""
Recipe block parser.

Builds a Recipe from one block of delimited text by running the shared
section state machine (see grammar.py) and accumulating each emitted line
into the field of the section it belongs to. Ingredient lines go through the
IngredientLineParser; the category is assigned last by the CategoryClassifier.

A block missing its title, ingredients or instructions yields None.
"""

import logging
from typing import List, Optional

from recipe_ingest.config import Settings
from recipe_ingest.engine.classifier import CategoryClassifier
from recipe_ingest.engine.parsing.grammar import (
    iter_transitions,
    missing_required_fields,
    split_tag_line,
)
from recipe_ingest.engine.parsing.ingredients import IngredientLineParser
from recipe_ingest.engine.parsing.models import ParseFailure, Section
from recipe_ingest.models.schemas import Difficulty, Ingredient, Recipe

logger = logging.getLogger(__name__)


def merge_tags(tags: List[str], new_tags: List[str]) -> None:
    """Append tags not already present, preserving existing order."""
    for tag in new_tags:
        if tag and tag not in tags:
            tags.append(tag)


class RecipeBlockParser:
    """
    Per-block recipe builder.

    Holds only configuration (volume label, defaults, collaborators); every
    call to parse_block builds fresh state, so one instance can parse any
    number of blocks.
    """

    def __init__(
        self,
        volume: str,
        settings: Optional[Settings] = None,
        ingredient_parser: Optional[IngredientLineParser] = None,
        classifier: Optional[CategoryClassifier] = None,
    ):
        """
        Initialize the parser.

        Args:
            volume: Cookbook volume label; seeds the source and a volume tag.
            settings: Defaults and tagging config. Defaults to global settings.
            ingredient_parser: Ingredient line parser to use.
            classifier: Category classifier to use.
        """
        if settings is None:
            from recipe_ingest.config import settings as global_settings

            settings = global_settings

        self.volume = str(volume).strip()
        self.settings = settings
        self.ingredient_parser = ingredient_parser or IngredientLineParser()
        self.classifier = classifier or CategoryClassifier()

    @property
    def base_tags(self) -> List[str]:
        """Tags every recipe starts with, before author tags."""
        return [self.settings.base_tag.lower(), f"volume-{self.volume}".lower()]

    @property
    def source(self) -> str:
        return self.settings.source_template.format(volume=self.volume)

    def parse_block(self, block: str, block_number: int = 1) -> Optional[Recipe]:
        """
        Parse one recipe block.

        Args:
            block: Text of a single recipe (no break markers).
            block_number: 1-based position of the block, used for logging.

        Returns:
            Recipe if title, ingredients and instructions were all found,
            otherwise None.
        """
        title = ""
        description_parts: List[str] = []
        ingredients: List[Ingredient] = []
        instructions: List[str] = []
        tags = self.base_tags

        for step in iter_transitions(block):
            if step.content is None:
                continue

            if step.section is Section.TITLE:
                title = step.content
            elif step.section is Section.DESCRIPTION:
                description_parts.append(step.content)
            elif step.section is Section.INGREDIENTS:
                result = self.ingredient_parser.parse_line(step.content)
                if isinstance(result, ParseFailure):
                    logger.debug(
                        f"Block {block_number}: dropping ingredient line "
                        f"{result.raw_line!r} ({result.error_code.value})"
                    )
                    continue
                ingredients.append(Ingredient(**result.to_dict()))
            elif step.section is Section.INSTRUCTIONS:
                instructions.append(step.content)
            elif step.section is Section.TAGS:
                merge_tags(tags, split_tag_line(step.content))

        description = " ".join(description_parts)
        category = self.classifier.classify(title, tags, description)

        missing = missing_required_fields(title, len(ingredients), len(instructions))
        if missing:
            logger.warning(
                f"Block {block_number}: failed to parse "
                f"({', '.join(code.value for code in missing)})"
            )
            return None

        logger.info(
            f"Block {block_number}: parsed '{title}' with {len(ingredients)} ingredients, "
            f"{len(instructions)} instructions, category {category.value}"
        )

        return Recipe(
            title=title,
            description=description,
            ingredients=ingredients,
            instructions=instructions,
            tags=tags,
            category=category,
            prep_time=self.settings.default_prep_time,
            cook_time=self.settings.default_cook_time,
            servings=self.settings.default_servings,
            difficulty=Difficulty(self.settings.default_difficulty),
            is_public=self.settings.default_is_public,
            source=self.source,
        )
