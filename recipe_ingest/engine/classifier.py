"""
Keyword-based recipe category classifier.

Assigns exactly one Category to a recipe from its title, tags and description
using an ordered rule table. The first matching rule wins, so specific
categories (a marinade for chicken) are listed ahead of broad ones (entrees).

Keywords match as plain substrings of the lower-cased text: "fish" matches
"catfish" and "bread" matches "shortbread". Keep keywords specific enough that
they do not hide inside unrelated words.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from recipe_ingest.models.schemas import Category


@dataclass(frozen=True)
class CategoryRule:
    """
    One row of the classification table.

    The rule matches when any keyword occurs anywhere in the text and none of
    the excluded keywords do.
    """

    category: Category
    keywords: Sequence[str]
    excluded_keywords: Sequence[str] = field(default_factory=tuple)

    def matches(self, text: str) -> bool:
        if not any(kw in text for kw in self.keywords):
            return False
        return not any(kw in text for kw in self.excluded_keywords)


# Keywords that mark a recipe as a main course
MAIN_DISH_KEYWORDS = ("main", "entree", "chicken", "beef", "pork", "fish")

CATEGORY_RULES: List[CategoryRule] = [
    CategoryRule(
        Category.SEASONINGS,
        ("seasoning", "spice blend", "spice mix", "spice rub", "dry rub"),
    ),
    CategoryRule(
        Category.SAUCES,
        ("sauce", "gravy", "salsa", "pesto", "aioli"),
    ),
    CategoryRule(
        Category.SALAD_DRESSINGS,
        ("dressing", "vinaigrette"),
    ),
    CategoryRule(
        Category.MARINADES,
        ("marinade", "marinate"),
    ),
    CategoryRule(
        Category.BREADS,
        ("bread", "biscuit", "focaccia", "dinner roll", "tortilla"),
    ),
    CategoryRule(
        Category.PIZZA_DOUGH,
        ("pizza dough", "pizza crust", "pizza"),
    ),
    CategoryRule(
        Category.DESSERTS,
        (
            "dessert", "cheesecake", "cupcake", "pound cake", "layer cake", "sheet cake",
            "chocolate cake", "cookie", "brownie", "pudding",
            "cobbler", "fudge", "candy", "frosting", "ice cream", "sweet treat",
        ),
    ),
    CategoryRule(
        Category.BREAKFAST,
        (
            "breakfast", "brunch", "pancake", "waffle", "omelet", "omelette",
            "french toast", "granola", "oatmeal", "muffin",
        ),
    ),
    CategoryRule(
        Category.BEVERAGES,
        (
            "beverage", "drink", "smoothie", "lemonade", "iced tea", "sweet tea",
            "coffee", "cocoa", "punch", "cocktail", "milkshake",
        ),
    ),
    CategoryRule(
        Category.SOUPS,
        ("soup", "stew", "chowder", "bisque", "broth", "gumbo"),
    ),
    CategoryRule(
        Category.SANDWICHES,
        ("sandwich", "burger", "panini", "sloppy joe", "hoagie"),
    ),
    CategoryRule(
        Category.APPETIZERS,
        ("appetizer", "snack", "dip", "finger food", "bruschetta", "nacho", "deviled egg"),
    ),
    CategoryRule(
        Category.SIDE_DISHES,
        ("side dish", "potato", "vegetable", "rice", "salad", "slaw", "mashed"),
        excluded_keywords=MAIN_DISH_KEYWORDS,
    ),
]

DEFAULT_CATEGORY = Category.ENTREES


class CategoryClassifier:
    """Ordered keyword-rule classifier; rules are evaluated top to bottom."""

    def __init__(self, rules: Optional[Sequence[CategoryRule]] = None):
        self.rules = list(rules) if rules is not None else CATEGORY_RULES

    def classify(self, title: str, tags: Iterable[str] = (), description: str = "") -> Category:
        """
        Pick the category for a recipe.

        Args:
            title: Recipe title.
            tags: Recipe tags, including the base tags.
            description: Recipe description.

        Returns:
            Category of the first matching rule, or entrees.
        """
        text = " ".join([title, " ".join(tags), description]).lower()
        for rule in self.rules:
            if rule.matches(text):
                return rule.category
        return DEFAULT_CATEGORY


_default_classifier = CategoryClassifier()


def classify_category(title: str, tags: Iterable[str] = (), description: str = "") -> Category:
    """Classify with the default rule table."""
    return _default_classifier.classify(title, tags, description)
