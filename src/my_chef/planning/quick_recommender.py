"""
Quick "what to eat" recommendation.

Picks a balanced set of meat and vegetable dishes for a group, trying to
cover different kinds of meat before filling up at random.
"""

import logging
import math
from typing import List, Optional, Sequence

from ..constants import AQUATIC, MEAT_DISH_CATEGORIES, MEAT_TYPES, NON_VEGETABLE_CATEGORIES
from ..data.models import DishRecommendation, Recipe, SimpleRecipe
from .pools import RandomSource, UniformRandomSource, choose

logger = logging.getLogger(__name__)


def vegetable_dish_target(people_count: int) -> int:
    return (people_count + 1) // 2


def meat_dish_target(people_count: int) -> int:
    return math.ceil((people_count + 1) / 2)


def recommendation_message(people_count: int, meat_count: int, vegetable_count: int) -> str:
    return f"为{people_count}人推荐的菜品，包含{meat_count}个荤菜和{vegetable_count}个素菜。"


class QuickRecommender:
    """Builds a DishRecommendation from the full catalog."""

    # Groups larger than this get a dedicated fish dish
    FISH_DISH_THRESHOLD = 8

    def __init__(self, random_source: Optional[RandomSource] = None):
        self.rng = random_source or UniformRandomSource()

    def recommend(self, recipes: Sequence[Recipe], people_count: int) -> DishRecommendation:
        """
        Recommend dishes for a group.

        Args:
            recipes: Full catalog (no exclusions on this path)
            people_count: Number of people (1-10, validated by the caller)

        Returns:
            DishRecommendation; fewer dishes than targeted if the catalog is short
        """
        meat_pool = [r for r in recipes if r.category in MEAT_DISH_CATEGORIES]
        vegetable_pool = [r for r in recipes if r.category not in NON_VEGETABLE_CATEGORIES]

        meat_quota = meat_dish_target(people_count)

        fish_dish = None
        if people_count > self.FISH_DISH_THRESHOLD:
            fish_dish = self._pick_fish_dish(recipes, meat_pool)
            if fish_dish is not None:
                meat_quota -= 1

        meat_dishes = self._pick_by_meat_type(meat_pool, meat_quota)
        meat_dishes += self._draw(meat_pool, meat_quota - len(meat_dishes))
        vegetable_dishes = self._draw(vegetable_pool, vegetable_dish_target(people_count))

        dishes = ([fish_dish] if fish_dish else []) + meat_dishes + vegetable_dishes
        meat_count = len(meat_dishes) + (1 if fish_dish else 0)
        vegetable_count = len(vegetable_dishes)

        logger.info(
            f"Recommended {meat_count} meat and {vegetable_count} vegetable dishes "
            f"for {people_count} people"
        )

        return DishRecommendation(
            people_count=people_count,
            meat_dish_count=meat_count,
            vegetable_dish_count=vegetable_count,
            dishes=[SimpleRecipe.from_recipe(r) for r in dishes],
            message=recommendation_message(people_count, meat_count, vegetable_count),
        )

    def _pick_fish_dish(self, recipes: Sequence[Recipe], meat_pool: List[Recipe]) -> Optional[Recipe]:
        fish_dishes = [r for r in recipes if r.category == AQUATIC]
        if not fish_dishes:
            return None
        fish_dish = choose(fish_dishes, self.rng)
        # Not eligible again as a regular meat dish
        meat_pool[:] = [r for r in meat_pool if r.id != fish_dish.id]
        return fish_dish

    def _pick_by_meat_type(self, meat_pool: List[Recipe], quota: int) -> List[Recipe]:
        """One dish per meat type, in MEAT_TYPES order, until the quota is met."""
        picked: List[Recipe] = []
        for meat_type in MEAT_TYPES:
            if len(picked) >= quota:
                break
            options = [r for r in meat_pool if r.has_ingredient_like(meat_type)]
            if not options:
                continue
            dish = choose(options, self.rng)
            picked.append(dish)
            meat_pool.remove(dish)
        return picked

    def _draw(self, pool: List[Recipe], count: int) -> List[Recipe]:
        """Draw up to count recipes without replacement, removing them from pool."""
        drawn: List[Recipe] = []
        while len(drawn) < count and pool:
            drawn.append(pool.pop(self.rng.index(len(pool))))
        return drawn
