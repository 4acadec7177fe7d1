"""
Shared grammar for delimited recipe text.

Both the recipe block parser and the structural validator read recipe text
through this module, so they agree on:
1. Where one recipe ends and the next begins (the break marker)
2. Which lines are section headers
3. How a block walks through its sections (the transition function)
4. Which missing fields make a recipe unusable

Expected layout of one block:

    Classic Mac and Cheese
    -- Description --
    Creamy, cheesy comfort food
    -- Ingredients --
    1 lb macaroni
    2 cups cheese
    -- Instructions --
    Cook the pasta until al dente.
    -- Tags --
    pasta, cheese
    -- RECIPE BREAK --
"""

import re
from typing import Iterator, List, Optional

from recipe_ingest.engine.parsing.models import Section, Transition
from recipe_ingest.errors import ErrorCode
from recipe_ingest.utils.sanitization import split_lines, strip_emphasis

# "-- RECIPE BREAK --", "--RECIPE BREAK--", "---recipe break---"
# Markers may sit mid-line. A match only starts at the first dash of a run,
# so long runs of plain dashes are scanned once.
BREAK_MARKER_RE = re.compile(
    r"(?<!-)-{2,}[ \t]*recipe[ \t]*break[ \t]*-{2,}", re.IGNORECASE
)

SECTION_HEADER_RE = re.compile(
    r"^-{2,}[ \t]*(description|ingredients?|instructions?|tags?)[ \t]*-{2,}$",
    re.IGNORECASE,
)

_HEADER_SECTIONS = {
    "description": Section.DESCRIPTION,
    "ingredient": Section.INGREDIENTS,
    "ingredients": Section.INGREDIENTS,
    "instruction": Section.INSTRUCTIONS,
    "instructions": Section.INSTRUCTIONS,
    "tag": Section.TAGS,
    "tags": Section.TAGS,
}

INITIAL_SECTION = Section.TITLE


def match_section_header(line: str) -> Optional[Section]:
    """
    Return the section a header line switches to, or None for content lines.

    Examples:
        >>> match_section_header("-- Ingredients --")
        <Section.INGREDIENTS: 'ingredients'>
        >>> match_section_header("--tag--")
        <Section.TAGS: 'tags'>
        >>> match_section_header("2 cups flour") is None
        True
    """
    match = SECTION_HEADER_RE.match(line.strip())
    if not match:
        return None
    return _HEADER_SECTIONS[match.group(1).lower()]


def transition(state: Section, line: str) -> Transition:
    """
    Advance the section state machine by one non-empty line.

    Rules:
    - A header line switches to its section and emits nothing.
    - In TITLE, the first line with text left after stripping emphasis markers
      is emitted as the title and the machine moves to DESCRIPTION, even when
      no "-- Description --" header follows.
    - In every other section the line is emitted verbatim for that section.
    """
    header = match_section_header(line)
    if header is not None:
        return Transition(state=header, is_header=True)

    if state is Section.TITLE:
        title = strip_emphasis(line)
        if not title:
            return Transition(state=Section.TITLE)
        return Transition(state=Section.DESCRIPTION, section=Section.TITLE, content=title)

    return Transition(state=state, section=state, content=line)


def iter_transitions(block: str) -> Iterator[Transition]:
    """Run the state machine over every non-empty line of a block."""
    state = INITIAL_SECTION
    for line in split_lines(block):
        step = transition(state, line)
        state = step.state
        yield step


def split_tag_line(line: str) -> List[str]:
    """Split a comma-separated tag line into trimmed, lower-cased tags."""
    return [piece.strip().lower() for piece in line.split(",") if piece.strip()]


def missing_required_fields(
    title: str,
    ingredient_count: int,
    instruction_count: int,
) -> List[ErrorCode]:
    """
    Return the required-field failures for a block, in a fixed order.

    An empty list means the block is a usable recipe. The parser drops a block
    when this is non-empty; the validator marks it invalid with these codes.
    """
    missing = []
    if not title or not title.strip():
        missing.append(ErrorCode.RECIPE_MISSING_TITLE)
    if ingredient_count <= 0:
        missing.append(ErrorCode.RECIPE_MISSING_INGREDIENTS)
    if instruction_count <= 0:
        missing.append(ErrorCode.RECIPE_MISSING_INSTRUCTIONS)
    return missing
