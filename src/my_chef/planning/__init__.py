"""
Meal selection: exclusion filter, weekly planner and quick recommender.
"""

from .filters import filter_recipes
from .pools import RandomSource, RecipePools, SequenceRandomSource, UniformRandomSource
from .quick_recommender import QuickRecommender
from .weekly_planner import WeeklyPlanner

__all__ = [
    "filter_recipes",
    "RandomSource",
    "RecipePools",
    "SequenceRandomSource",
    "UniformRandomSource",
    "QuickRecommender",
    "WeeklyPlanner",
]
