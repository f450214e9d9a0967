"""
Random index sources and per-request recipe pools.

Every generation run builds its own RecipePools from the catalog, so drawing
(and removing) a recipe never affects the catalog or another request.
"""

import logging
import random
from typing import Dict, Iterable, List, Optional, Sequence

from ..data.models import Recipe

logger = logging.getLogger(__name__)


class RandomSource:
    """Provides uniform random indexes. Subclass to control selection."""

    def index(self, size: int) -> int:
        """Return an integer in [0, size). size must be positive."""
        raise NotImplementedError


class UniformRandomSource(RandomSource):
    """Production source backed by random.Random, optionally seeded."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def index(self, size: int) -> int:
        return self._random.randrange(size)


class SequenceRandomSource(RandomSource):
    """
    Replays a fixed sequence of values, wrapping them into range.

    Each call consumes the next value and returns value % size; the sequence
    repeats once exhausted. Used for reproducible plans in tests.
    """

    def __init__(self, values: Sequence[int]):
        if not values:
            raise ValueError("SequenceRandomSource needs at least one value")
        self._values = list(values)
        self._position = 0

    def index(self, size: int) -> int:
        value = self._values[self._position % len(self._values)]
        self._position += 1
        return value % size


def choose(items: Sequence, rng: RandomSource):
    """Pick one item uniformly. items must not be empty."""
    return items[rng.index(len(items))]


class RecipePools:
    """Mutable per-category recipe lists owned by a single generation run."""

    def __init__(self, recipes: Iterable[Recipe]):
        self._pools: Dict[str, List[Recipe]] = {}
        for recipe in recipes:
            self._pools.setdefault(recipe.category, []).append(recipe)

    def size(self, category: str) -> int:
        return len(self._pools.get(category, []))

    def has_stock(self, category: str) -> bool:
        return self.size(category) > 0

    def stocked(self, categories: Iterable[str]) -> List[str]:
        """The given categories that still have recipes, in the given order."""
        return [c for c in categories if self.has_stock(c)]

    def draw(self, category: str, rng: RandomSource) -> Optional[Recipe]:
        """
        Remove and return a random recipe from a category.

        Returns:
            The drawn Recipe, or None if the category is empty or unknown
        """
        pool = self._pools.get(category)
        if not pool:
            return None
        return pool.pop(rng.index(len(pool)))

    def draw_from_any(self, categories: Sequence[str], rng: RandomSource) -> Optional[Recipe]:
        """
        Draw one recipe from a randomly chosen category.

        A category is picked uniformly from all candidates; if it has run out,
        the pick is redrawn among the ones that still have stock. This gives the
        same distribution as redrawing from the full list until a stocked
        category comes up, and always terminates.

        Returns:
            The drawn Recipe, or None if every candidate category is exhausted
        """
        category = choose(categories, rng)
        if not self.has_stock(category):
            remaining = self.stocked(categories)
            if not remaining:
                return None
            category = choose(remaining, rng)
        return self.draw(category, rng)
