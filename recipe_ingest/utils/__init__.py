"""
Text utility modules.
"""
from recipe_ingest.utils.sanitization import normalize_text, strip_emphasis, strip_list_marker

__all__ = ["normalize_text", "strip_emphasis", "strip_list_marker"]
