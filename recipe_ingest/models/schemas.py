"""
Pydantic data models for parsed recipes and validation reports.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Fixed set of recipe categories."""
    SEASONINGS = "seasonings"
    SAUCES = "sauces"
    SALAD_DRESSINGS = "salad-dressings"
    MARINADES = "marinades"
    INGREDIENTS = "ingredients"
    ENTREES = "entrees"
    SIDE_DISHES = "side-dishes"
    SOUPS = "soups"
    SANDWICHES = "sandwiches"
    APPETIZERS = "appetizers"
    DESSERTS = "desserts"
    BREADS = "breads"
    PIZZA_DOUGH = "pizza-dough"
    SPECIALTY_ITEMS = "specialty-items"
    BEVERAGES = "beverages"
    BREAKFAST = "breakfast"


class Difficulty(str, Enum):
    """Recipe difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class WarningCode(str, Enum):
    """Non-fatal findings reported by the structural validator."""
    TITLE_TOO_SHORT = "TITLE_TOO_SHORT"
    TITLE_TOO_LONG = "TITLE_TOO_LONG"
    NO_DESCRIPTION = "NO_DESCRIPTION"
    NO_TAGS_SECTION = "NO_TAGS_SECTION"
    NO_TAGS = "NO_TAGS"
    INGREDIENT_NO_AMOUNT = "INGREDIENT_NO_AMOUNT"
    INGREDIENT_UNPARSEABLE = "INGREDIENT_UNPARSEABLE"
    INSTRUCTION_TOO_SHORT = "INSTRUCTION_TOO_SHORT"
    TOO_MANY_INGREDIENTS = "TOO_MANY_INGREDIENTS"
    TOO_FEW_INGREDIENTS = "TOO_FEW_INGREDIENTS"
    TOO_MANY_INSTRUCTIONS = "TOO_MANY_INSTRUCTIONS"
    BLOCKS_SKIPPED = "BLOCKS_SKIPPED"


class _CamelModel(BaseModel):
    """Base model serialised with camelCase keys for downstream consumers."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Ingredient(_CamelModel):
    """One parsed ingredient line."""
    amount: float = Field(1.0, description="Quantity, 1 when not stated")
    unit: str = Field("", description="Unit as written (lower-cased), empty when unitless")
    name: str = Field(..., min_length=1, description="Name of the ingredient")
    category: str = Field("", description="Filled in by a later enrichment stage")
    alternatives: List[str] = Field(default_factory=list)
    optional: bool = False


class Recipe(_CamelModel):
    """A recipe that satisfied every required-field invariant."""
    title: str = Field(..., min_length=1)
    description: str = ""
    ingredients: List[Ingredient] = Field(..., min_length=1)
    instructions: List[str] = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    category: Category = Category.ENTREES
    prep_time: int = Field(15, ge=0, description="Minutes")
    cook_time: int = Field(30, ge=0, description="Minutes")
    servings: int = Field(4, ge=1)
    difficulty: Difficulty = Difficulty.MEDIUM
    is_public: bool = True
    source: str = ""

    @field_validator("tags")
    @classmethod
    def tags_are_unique_lowercase(cls, tags: List[str]) -> List[str]:
        """Lower-case tags and drop repeats, keeping first-seen order."""
        seen: List[str] = []
        for tag in tags:
            tag = tag.lower()
            if tag not in seen:
                seen.append(tag)
        return seen


class ValidationIssue(_CamelModel):
    """An error or warning found by the structural validator."""
    code: str
    message: str
    recipe_number: Optional[int] = None


class BlockReport(_CamelModel):
    """Structural validation result for one recipe block."""
    recipe_number: int
    is_valid: bool = True
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationIssue] = Field(default_factory=list)
    title: str = ""
    has_description: bool = False
    ingredient_count: int = 0
    instruction_count: int = 0
    tag_count: int = 0
    has_description_section: bool = False
    has_ingredients_section: bool = False
    has_instructions_section: bool = False
    has_tags_section: bool = False


class ValidationReport(_CamelModel):
    """Structural validation result for a whole upload."""
    is_valid: bool = True
    recipe_count: int = 0
    skipped_blocks: int = 0
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationIssue] = Field(default_factory=list)
    recipes: List[BlockReport] = Field(default_factory=list)

    @property
    def invalid_recipe_numbers(self) -> List[int]:
        """Numbers (1-based) of the blocks marked invalid."""
        return [block.recipe_number for block in self.recipes if not block.is_valid]


class ParseStats(_CamelModel):
    """Summary statistics for one parse batch."""
    total_recipes: int = 0
    with_descriptions: int = 0
    avg_ingredients: int = 0
    avg_instructions: int = 0
    categories: int = 0
    failed_blocks: int = 0
    skipped_blocks: int = 0


class ParseBatchResult(_CamelModel):
    """Recipes parsed from one upload, plus what was dropped along the way."""
    volume: str
    recipes: List[Recipe] = Field(default_factory=list)
    failed_blocks: List[int] = Field(
        default_factory=list,
        description="1-based numbers of blocks that failed to parse",
    )
    skipped_blocks: int = 0
    stats: ParseStats = Field(default_factory=ParseStats)
