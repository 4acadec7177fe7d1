"""
Custom exceptions and error codes for the recipe ingestion pipeline.

This module provides:
- Structured error codes shared by the parser, the validator and the CLI
- Custom exception classes for the few failures that do escape a call
- Error response schema for consistent JSON output

Block-level and line-level parse problems are NOT raised: they are returned as
values tagged with an ErrorCode (see ParseFailure and ValidationIssue) so one bad
recipe never aborts a batch.
"""
from enum import Enum
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """
    Application-wide error codes for categorized error handling.

    Format: CATEGORY_SPECIFIC_ERROR
    Categories:
    - INGREDIENT_*: Single ingredient line failures (line dropped)
    - RECIPE_*: Required-field failures for one recipe block (block dropped)
    - FORMAT_*: Whole-input structural failures
    - INPUT_*: Reading input failures
    """

    # Ingredient line errors
    INGREDIENT_LINE_TOO_SHORT = "INGREDIENT_LINE_TOO_SHORT"
    INGREDIENT_NO_VALID_NAME = "INGREDIENT_NO_VALID_NAME"

    # Recipe block errors
    RECIPE_MISSING_TITLE = "RECIPE_MISSING_TITLE"
    RECIPE_MISSING_INGREDIENTS = "RECIPE_MISSING_INGREDIENTS"
    RECIPE_MISSING_INSTRUCTIONS = "RECIPE_MISSING_INSTRUCTIONS"

    # Whole-input errors
    FORMAT_NO_RECIPES_FOUND = "FORMAT_NO_RECIPES_FOUND"
    FORMAT_INVALID = "FORMAT_INVALID"

    # Input errors
    INPUT_READ_FAILED = "INPUT_READ_FAILED"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """Structured error response for JSON output."""
    error_code: ErrorCode
    message: str
    details: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(use_enum_values=True)


class RecipeIngestError(Exception):
    """
    Base exception for all recipe ingestion errors.

    Provides structured error information for consistent error handling.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        exit_code: int = 1,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.exit_code = exit_code
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        """Convert exception to ErrorResponse for JSON output."""
        return ErrorResponse(
            error_code=self.error_code,
            message=self.message,
            details=self.details if self.details else None,
        )


class NoRecipesFoundError(RecipeIngestError):
    """Raised when strict ingestion finds no recipe blocks at all."""

    def __init__(self, skipped_blocks: int = 0):
        message = "No recipes found. Make sure to use --RECIPE BREAK-- to separate recipes."
        if skipped_blocks:
            message += f" ({skipped_blocks} block(s) were too short to be recipes)"
        super().__init__(
            message=message,
            error_code=ErrorCode.FORMAT_NO_RECIPES_FOUND,
            details={"skipped_blocks": skipped_blocks},
        )


class RecipeFormatError(RecipeIngestError):
    """Raised when strict ingestion is requested and pre-flight validation fails."""

    def __init__(self, invalid_recipes: List[int], errors: List[str]):
        super().__init__(
            message=f"Recipe text failed validation: {len(invalid_recipes)} invalid recipe(s)",
            error_code=ErrorCode.FORMAT_INVALID,
            details={
                "invalid_recipes": invalid_recipes,
                "errors": errors,
            },
        )


class InputReadError(RecipeIngestError):
    """Raised when the input text cannot be read or decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            message=f"Could not read recipe text from {source}: {reason}",
            error_code=ErrorCode.INPUT_READ_FAILED,
            details={"source": source, "reason": reason},
            exit_code=2,
        )
