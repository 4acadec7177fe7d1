"""
Input sanitization utilities for extracted recipe text.

Text reaching the pipeline comes from document extraction and carries mixed
line endings, runs of blank lines, list bullets and markdown-style emphasis.
These helpers normalize it consistently for the parser and the validator.
"""
import re
from typing import List

# Three or more blank lines (whitespace-only lines count as blank)
_BLANK_RUN_RE = re.compile(r"\n(?:[ \t]*\n){3,}")

_LIST_MARKER_RE = re.compile(r"^\s*[-•*]\s*")

EMPHASIS_CHARS = "*_#~`"


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def collapse_blank_runs(text: str) -> str:
    """
    Collapse runs of three or more blank lines into a single blank line.

    Examples:
        >>> collapse_blank_runs("a\\n\\n\\n\\nb")
        'a\\n\\nb'
        >>> collapse_blank_runs("a\\n\\nb")
        'a\\n\\nb'
    """
    return _BLANK_RUN_RE.sub("\n\n", text)


def normalize_text(text: str) -> str:
    """Apply line-ending normalization and blank-run collapsing."""
    if not text:
        return ""
    return collapse_blank_runs(normalize_line_endings(text))


def strip_emphasis(value: str) -> str:
    """
    Remove leading and trailing emphasis markers from a line.

    Examples:
        >>> strip_emphasis("**Grandma's Meatloaf**")
        "Grandma's Meatloaf"
        >>> strip_emphasis("# Beef Stew")
        'Beef Stew'
    """
    return value.strip().strip(EMPHASIS_CHARS).strip()


def strip_list_marker(value: str) -> str:
    """Remove a single leading list bullet (-, •, *) and surrounding whitespace."""
    return _LIST_MARKER_RE.sub("", value, count=1).strip()


def split_lines(block: str) -> List[str]:
    """Split a block into stripped, non-empty lines."""
    return [line.strip() for line in block.split("\n") if line.strip()]
