"""
Service layer orchestrating parse and validation batches.
"""
from recipe_ingest.services.ingest_service import (
    RecipeIngestService,
    compute_parse_stats,
    parse_recipes_from_text,
)

__all__ = ["RecipeIngestService", "compute_parse_stats", "parse_recipes_from_text"]
