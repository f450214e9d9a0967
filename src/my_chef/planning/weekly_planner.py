"""
Weekly meal plan builder.

Fills breakfast, lunch and dinner for five weekdays and two weekend days,
then derives the grocery list from every dish that was picked. Dishes are
drawn without replacement: a recipe appears at most once per plan.
"""

import logging
import math
from typing import List, Optional, Sequence

from ..constants import (
    BREAKFAST,
    STAPLE,
    WEEKDAY_DINNER_CATEGORIES,
    WEEKDAY_LABELS,
    WEEKDAY_LUNCH_CATEGORIES,
    WEEKEND_LABELS,
    WEEKEND_MAIN_CATEGORIES,
)
from ..data.models import DayPlan, GroceryList, Recipe, SimpleRecipe, WeeklyMealPlan
from ..shopping.aggregator import aggregate_ingredients
from ..shopping.categorizer import categorize_ingredients
from .pools import RandomSource, RecipePools, UniformRandomSource

logger = logging.getLogger(__name__)


def weekday_breakfast_count(people_count: int) -> int:
    return max(1, math.ceil(people_count / 5))


def weekday_meal_count(people_count: int) -> int:
    """Dishes per weekday lunch or dinner."""
    return max(2, math.ceil(people_count / 3))


def weekend_breakfast_count(people_count: int) -> int:
    return max(2, math.ceil(people_count / 3))


def weekend_meal_count(people_count: int) -> int:
    """Weekend lunch/dinner: one extra dish for up to 4 people, two above."""
    extra = 1 if people_count <= 4 else 2
    return weekday_meal_count(people_count) + extra


class WeeklyPlanner:
    """Builds a WeeklyMealPlan from a (pre-filtered) set of recipes."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Initialize the planner.

        Args:
            random_source: Index provider (default: unseeded UniformRandomSource)
        """
        self.rng = random_source or UniformRandomSource()

    def build(self, recipes: Sequence[Recipe], people_count: int) -> WeeklyMealPlan:
        """
        Generate a week of meals and its grocery list.

        Args:
            recipes: Candidate recipes, already exclusion-filtered
            people_count: Number of people (1-10, validated by the caller)

        Returns:
            WeeklyMealPlan. Slots may hold fewer dishes than targeted when
            the pools run dry.
        """
        pools = RecipePools(recipes)
        selected: List[Recipe] = []
        plan = WeeklyMealPlan()

        meal_count = weekday_meal_count(people_count)
        for label in WEEKDAY_LABELS:
            day = DayPlan(day=label)
            day.breakfast = self._draw_breakfast(
                pools, weekday_breakfast_count(people_count), selected
            )
            day.lunch = self._draw_mixed(pools, WEEKDAY_LUNCH_CATEGORIES, meal_count, selected)
            day.dinner = self._draw_mixed(pools, WEEKDAY_DINNER_CATEGORIES, meal_count, selected)
            plan.weekdays.append(day)

        weekend_count = weekend_meal_count(people_count)
        for label in WEEKEND_LABELS:
            day = DayPlan(day=label)
            day.breakfast = self._draw_breakfast(
                pools, weekend_breakfast_count(people_count), selected
            )
            day.lunch = self._draw_alternating(pools, weekend_count, selected)
            day.dinner = self._draw_alternating(pools, weekend_count, selected)
            plan.weekend.append(day)

        ingredients = aggregate_ingredients(selected)
        plan.grocery_list = GroceryList(
            ingredients=ingredients,
            shopping_plan=categorize_ingredients(ingredients),
        )

        logger.info(
            f"Built weekly plan for {people_count} people: {len(selected)} dishes, "
            f"{len(ingredients)} grocery items"
        )
        return plan

    def _take(self, recipe: Optional[Recipe], selected: List[Recipe], slot: List[SimpleRecipe]):
        if recipe is None:
            return
        selected.append(recipe)
        slot.append(SimpleRecipe.from_recipe(recipe))

    def _draw_breakfast(
        self, pools: RecipePools, count: int, selected: List[Recipe]
    ) -> List[SimpleRecipe]:
        slot: List[SimpleRecipe] = []
        for _ in range(count):
            if not pools.has_stock(BREAKFAST):
                break
            self._take(pools.draw(BREAKFAST, self.rng), selected, slot)
        return slot

    def _draw_mixed(
        self,
        pools: RecipePools,
        categories: Sequence[str],
        count: int,
        selected: List[Recipe],
    ) -> List[SimpleRecipe]:
        """Weekday lunch/dinner: each dish from a randomly chosen category."""
        slot: List[SimpleRecipe] = []
        for _ in range(count):
            self._take(pools.draw_from_any(categories, self.rng), selected, slot)
        return slot

    def _draw_alternating(
        self, pools: RecipePools, count: int, selected: List[Recipe]
    ) -> List[SimpleRecipe]:
        """Weekend lunch/dinner: meat and aquatic in turn, staple when one runs out."""
        slot: List[SimpleRecipe] = []
        for i in range(count):
            category = WEEKEND_MAIN_CATEGORIES[i % len(WEEKEND_MAIN_CATEGORIES)]
            if not pools.has_stock(category):
                category = STAPLE
            self._take(pools.draw(category, self.rng), selected, slot)
        return slot
