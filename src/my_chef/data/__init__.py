"""
Catalog data: recipe models and the read-only Cookbook.
"""

from .cookbook import Cookbook
from .models import (
    AggregatedIngredient,
    DayPlan,
    DishRecommendation,
    GroceryList,
    Ingredient,
    NameOnlyRecipe,
    Recipe,
    RecipeValidationError,
    ShoppingPlan,
    SimpleRecipe,
    Step,
    WeeklyMealPlan,
)

__all__ = [
    "Cookbook",
    "AggregatedIngredient",
    "DayPlan",
    "DishRecommendation",
    "GroceryList",
    "Ingredient",
    "NameOnlyRecipe",
    "Recipe",
    "RecipeValidationError",
    "ShoppingPlan",
    "SimpleRecipe",
    "Step",
    "WeeklyMealPlan",
]
