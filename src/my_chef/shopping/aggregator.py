"""
Ingredient aggregation across the recipes of one plan.
"""

import logging
from typing import Dict, Iterable, List

from ..data.models import AggregatedIngredient, Recipe

logger = logging.getLogger(__name__)


def aggregate_ingredients(recipes: Iterable[Recipe]) -> List[AggregatedIngredient]:
    """
    Merge ingredient usage by lowercase name.

    Quantities are summed only while every contribution has a quantity in
    the same unit; the first mismatch makes the total indeterminate (None)
    for good.

    Args:
        recipes: Recipes picked during one generation run

    Returns:
        Aggregated ingredients, most widely used first (ties keep first-seen order)
    """
    merged: Dict[str, AggregatedIngredient] = {}

    for recipe in recipes:
        for ingredient in recipe.ingredients:
            key = ingredient.name.lower()
            existing = merged.get(key)
            if existing is None:
                merged[key] = AggregatedIngredient(
                    name=key,
                    total_quantity=ingredient.quantity,
                    unit=ingredient.unit,
                    recipe_count=1,
                    recipes=[recipe.name],
                )
            else:
                existing.add(ingredient, recipe.name)

    # sorted() is stable, so equal counts stay in first-appearance order
    return sorted(merged.values(), key=lambda item: item.recipe_count, reverse=True)
