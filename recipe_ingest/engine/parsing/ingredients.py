"""
Ingredient line parser.

Turns one line from an ingredients section into an amount/unit/name triple:

    "1 1/2 cups sugar"  -> 1.5, "cups", "sugar"
    "½ tsp salt"        -> 0.5, "tsp",  "salt"
    "3 eggs"            -> 3.0, "",     "eggs"
    "Salt to taste"     -> 1.0, "",     "Salt to taste"

Leading quantities are normalized to decimal text first (mixed numbers and
ASCII fractions by division, unicode vulgar fractions by a literal lookup
table), then three patterns are tried from most to least specific.
"""

import logging
import re
from typing import Optional

from recipe_ingest.engine.parsing.models import (
    IngredientParseResult,
    ParsedIngredient,
    ParseFailure,
)
from recipe_ingest.errors import ErrorCode
from recipe_ingest.utils.sanitization import strip_list_marker

logger = logging.getLogger(__name__)


class IngredientLineParser:
    """
    Pattern-based ingredient line parser.

    Stateless; one instance can be shared across blocks and threads.
    """

    MIN_LINE_LENGTH = 2

    # Literal decimal strings, not computed: ⅓ is 0.33, not 0.333...
    UNICODE_FRACTIONS = {
        "½": "0.5",
        "¼": "0.25",
        "¾": "0.75",
        "⅓": "0.33",
        "⅔": "0.67",
        "⅛": "0.125",
        "⅜": "0.375",
        "⅝": "0.625",
        "⅞": "0.875",
    }

    UNITS = [
        # Volume
        "cup", "cups", "tsp", "tbsp", "tablespoon", "tablespoons",
        "teaspoon", "teaspoons", "qt", "quart", "gallon",
        # Weight
        "oz", "ounce", "ounces", "lb", "lbs", "pound", "pounds",
        # Count / container
        "stick", "sticks", "clove", "cloves", "can", "jar",
    ]

    # Words that are never an ingredient name on their own
    STOP_NAMES = {"and", "or", "then", "until", "while", "method", "attention"}

    _MIXED_NUMBER_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)(?=\s)")
    _FRACTION_RE = re.compile(r"^(\d+)/(\d+)(?=\s)")
    _UNICODE_FRACTION_RE = re.compile("^([" + "".join(UNICODE_FRACTIONS) + "])")

    _AMOUNT = r"(?P<amount>\d+(?:\.\d+)?|\.\d+)"
    _UNIT = "|".join(re.escape(u) for u in sorted(UNITS, key=len, reverse=True))

    _AMOUNT_UNIT_NAME_RE = re.compile(
        rf"^{_AMOUNT}\s*(?P<unit>{_UNIT})\.?\s+(?P<name>.+)$", re.IGNORECASE
    )
    _AMOUNT_NAME_RE = re.compile(rf"^{_AMOUNT}\s+(?P<name>.+)$")

    def parse_line(self, line: str) -> IngredientParseResult:
        """
        Parse a single ingredient line.

        Args:
            line: Raw line from the ingredients section.

        Returns:
            ParsedIngredient on success, ParseFailure when the line is too short
            or no pattern yields a usable name.
        """
        cleaned = strip_list_marker(line)
        if len(cleaned) < self.MIN_LINE_LENGTH:
            return ParseFailure(
                error_code=ErrorCode.INGREDIENT_LINE_TOO_SHORT,
                raw_line=line,
                reason=f"Ingredient line is shorter than {self.MIN_LINE_LENGTH} characters",
            )

        normalized = self.normalize_quantity(cleaned)

        match = self._AMOUNT_UNIT_NAME_RE.match(normalized)
        if match and self._is_valid_name(match.group("name")):
            return ParsedIngredient(
                amount=float(match.group("amount")),
                unit=match.group("unit").lower(),
                name=match.group("name").strip(),
                raw_line=line,
            )

        match = self._AMOUNT_NAME_RE.match(normalized)
        if match and self._is_valid_name(match.group("name")):
            return ParsedIngredient(
                amount=float(match.group("amount")),
                unit="",
                name=match.group("name").strip(),
                raw_line=line,
            )

        if self._is_valid_name(normalized):
            return ParsedIngredient(amount=1.0, unit="", name=normalized.strip(), raw_line=line)

        return ParseFailure(
            error_code=ErrorCode.INGREDIENT_NO_VALID_NAME,
            raw_line=line,
            reason="No ingredient name found",
        )

    def normalize_quantity(self, text: str) -> str:
        """
        Rewrite a leading quantity as decimal text.

        Examples:
            >>> IngredientLineParser().normalize_quantity("1 1/2 cups sugar")
            '1.5 cups sugar'
            >>> IngredientLineParser().normalize_quantity("1/4 tsp salt")
            '0.25 tsp salt'
            >>> IngredientLineParser().normalize_quantity("⅓ cup oil")
            '0.33 cup oil'
        """
        match = self._MIXED_NUMBER_RE.match(text)
        if match:
            value = self._divide(match.group(2), match.group(3))
            if value is not None:
                text = _format_amount(int(match.group(1)) + value) + text[match.end():]

        match = self._FRACTION_RE.match(text)
        if match:
            value = self._divide(match.group(1), match.group(2))
            if value is not None:
                text = _format_amount(value) + text[match.end():]

        match = self._UNICODE_FRACTION_RE.match(text)
        if match:
            text = self.UNICODE_FRACTIONS[match.group(1)] + text[match.end():]

        return text

    def _is_valid_name(self, name: Optional[str]) -> bool:
        """Check a candidate name is non-empty and not a connective word."""
        if name is None:
            return False
        name = name.strip()
        return bool(name) and name.lower() not in self.STOP_NAMES

    @staticmethod
    def _divide(numerator: str, denominator: str) -> Optional[float]:
        if int(denominator) == 0:
            return None
        return int(numerator) / int(denominator)


def _format_amount(value: float) -> str:
    """Render a float so float() reads back exactly the same value."""
    return repr(float(value))


_default_parser = IngredientLineParser()


def parse_ingredient_line(line: str) -> IngredientParseResult:
    """Parse one ingredient line with a shared parser instance."""
    return _default_parser.parse_line(line)
