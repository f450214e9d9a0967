"""
Exclusion filter for allergies and disliked ingredients.
"""

import logging
from typing import Iterable, List, Optional

from ..data.models import Recipe

logger = logging.getLogger(__name__)


def _normalize_terms(terms: Optional[Iterable[str]]) -> List[str]:
    return [t.strip().lower() for t in (terms or []) if t and t.strip()]


def contains_excluded(recipe: Recipe, terms: List[str]) -> bool:
    """Check whether any ingredient name contains any of the (lowercased) terms."""
    return any(
        term in name
        for name in recipe.ingredient_names()
        for term in terms
    )


def filter_recipes(
    recipes: Iterable[Recipe],
    allergies: Optional[Iterable[str]] = None,
    avoid_items: Optional[Iterable[str]] = None,
) -> List[Recipe]:
    """
    Drop recipes that use an allergen or an avoided ingredient.

    Matching is a case-insensitive substring test on ingredient names, so
    "虾" also removes recipes with "虾仁".

    Args:
        recipes: Candidate recipes
        allergies: Allergy terms (e.g., ["大蒜", "虾"])
        avoid_items: Ingredients to avoid (e.g., ["葱", "姜"])

    Returns:
        Recipes without any excluded ingredient, in input order
    """
    terms = _normalize_terms(allergies) + _normalize_terms(avoid_items)
    recipes = list(recipes)
    if not terms:
        return recipes

    kept = [r for r in recipes if not contains_excluded(r, terms)]
    logger.debug(f"Exclusion filter kept {len(kept)}/{len(recipes)} recipes (terms: {terms})")
    return kept
