"""
Data models for recipe text parsing.

Contains the section state enum, the transition record produced by the
section state machine, and the tagged result of parsing one ingredient line.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from recipe_ingest.errors import ErrorCode


class Section(str, Enum):
    """Sections of a recipe block, in authoring order."""

    TITLE = "title"
    DESCRIPTION = "description"
    INGREDIENTS = "ingredients"
    INSTRUCTIONS = "instructions"
    TAGS = "tags"


@dataclass(frozen=True)
class Transition:
    """
    Result of feeding one non-empty line to the section state machine.

    - state: section the machine is in after the line
    - is_header: True if the line was a section header (never content)
    - section: section the content belongs to (None for headers/ignored lines)
    - content: text emitted for that section, if any

    Example:
        >>> transition(Section.TITLE, "**Beef Stew**")
        Transition(state=Section.DESCRIPTION, is_header=False,
                   section=Section.TITLE, content="Beef Stew")
    """

    state: Section
    is_header: bool = False
    section: Optional[Section] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class SegmentationResult:
    """Recipe blocks cut from one text, plus the count of too-short segments."""

    blocks: List[str] = field(default_factory=list)
    skipped: int = 0


@dataclass(frozen=True)
class ParsedIngredient:
    """An ingredient line that parsed into amount, unit and name."""

    amount: float
    unit: str
    name: str
    raw_line: str

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "unit": self.unit,
            "name": self.name,
            "category": "",
            "alternatives": [],
            "optional": False,
        }


@dataclass(frozen=True)
class ParseFailure:
    """An ingredient line that could not be parsed; the caller drops it."""

    error_code: ErrorCode
    raw_line: str
    reason: str


IngredientParseResult = Union[ParsedIngredient, ParseFailure]
