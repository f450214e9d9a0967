"""
Grocery list generation: ingredient aggregation and shopping buckets.
"""

from .aggregator import aggregate_ingredients
from .categorizer import categorize_ingredient, categorize_ingredients

__all__ = [
    "aggregate_ingredients",
    "categorize_ingredient",
    "categorize_ingredients",
]
