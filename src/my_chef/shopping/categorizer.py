"""
Shopping categorization by keyword.
"""

from typing import Iterable

from ..constants import FRESH_KEYWORDS, PANTRY_KEYWORDS, SPICE_KEYWORDS
from ..data.models import AggregatedIngredient, ShoppingPlan

# Checked in order; the first matching bucket wins
BUCKETS = [
    ("spices", SPICE_KEYWORDS),
    ("fresh", FRESH_KEYWORDS),
    ("pantry", PANTRY_KEYWORDS),
]


def categorize_ingredient(name: str) -> str:
    """
    Pick the shopping bucket for an ingredient name.

    Returns:
        "spices", "fresh", "pantry" or "others"
    """
    name_lower = name.lower()
    for bucket, keywords in BUCKETS:
        if any(keyword in name_lower for keyword in keywords):
            return bucket
    return "others"


def categorize_ingredients(ingredients: Iterable[AggregatedIngredient]) -> ShoppingPlan:
    """Split aggregated ingredients into shopping buckets, keeping their order."""
    plan = ShoppingPlan()
    for ingredient in ingredients:
        getattr(plan, categorize_ingredient(ingredient.name)).append(ingredient.name)
    return plan
