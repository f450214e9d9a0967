"""
Recipe catalog for my-chef.

The catalog is loaded once (remote JSON first, bundled archive as fallback)
and is read-only afterwards. Planners receive it explicitly; there is no
module-level instance.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import requests

from ..config import Settings
from .models import NameOnlyRecipe, Recipe, RecipeValidationError, SimpleRecipe

logger = logging.getLogger(__name__)


class Cookbook:
    """Read-only recipe catalog grouped by category."""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize an empty catalog. Call load() to populate it.

        Args:
            settings: Loader settings (defaults to Settings())
        """
        self.settings = settings or Settings()
        self._recipes: List[Recipe] = []
        self._categories: List[str] = []
        self.source: Optional[str] = None  # "remote", "archive" or None

    @classmethod
    def from_recipes(cls, recipes: Iterable[Recipe], settings: Optional[Settings] = None) -> "Cookbook":
        """Build a catalog directly from Recipe objects."""
        cookbook = cls(settings)
        cookbook._set_recipes(list(recipes))
        cookbook.source = "memory"
        return cookbook

    @property
    def recipes(self) -> List[Recipe]:
        # Copy so callers can't reorder or shrink the catalog
        return list(self._recipes)

    @property
    def categories(self) -> List[str]:
        return list(self._categories)

    @property
    def is_loaded(self) -> bool:
        return self.source is not None

    def load(self) -> "Cookbook":
        """
        Populate the catalog.

        Tries the remote URL once, then the bundled archive. A source counts
        as failed when it yields no valid recipe. If both fail the catalog
        stays empty; nothing is raised.

        Returns:
            self
        """
        recipes: List[Recipe] = []
        self.source = None

        if self.settings.offline:
            logger.info("Offline mode, skipping remote recipes")
        else:
            recipes = self._parse_entries(self._fetch_remote() or [])
            if recipes:
                self.source = "remote"
            else:
                logger.warning("Remote catalog had no valid recipes, falling back to archive")

        if not recipes:
            recipes = self._parse_entries(self._read_archive() or [])
            if recipes:
                self.source = "archive"

        self._set_recipes(recipes)
        logger.info(
            f"Loaded {len(self._recipes)} recipes in {len(self._categories)} categories "
            f"(source: {self.source or 'none'})"
        )
        return self

    def _fetch_remote(self) -> Optional[List[Dict[str, Any]]]:
        url = self.settings.recipes_url
        try:
            response = requests.get(url, timeout=self.settings.fetch_timeout)
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON list, got {type(data).__name__}")
            return data
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Loading remote recipes from {url} failed: {e}")
            return None

    def _read_archive(self) -> Optional[List[Dict[str, Any]]]:
        path = Path(self.settings.archive_path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON list, got {type(data).__name__}")
            logger.info(f"Using archived recipes from {path}")
            return data
        except (OSError, ValueError) as e:
            logger.error(f"Reading archived recipes from {path} failed: {e}")
            return None

    def _parse_entries(self, entries: List[Dict[str, Any]]) -> List[Recipe]:
        recipes = []
        for entry in entries:
            try:
                recipes.append(Recipe.from_dict(entry))
            except RecipeValidationError as e:
                logger.warning(f"Skipping invalid recipe entry: {e}")
        return recipes

    def _set_recipes(self, recipes: List[Recipe]):
        self._recipes = recipes
        categories = []
        for recipe in recipes:
            if recipe.category and recipe.category not in categories:
                categories.append(recipe.category)
        self._categories = categories

    # ---- Projections ----

    def recipes_in(self, category: str) -> List[Recipe]:
        """All recipes of a category, in catalog order."""
        return [r for r in self._recipes if r.category == category]

    @staticmethod
    def simplify(recipe: Recipe) -> SimpleRecipe:
        return SimpleRecipe.from_recipe(recipe)

    @staticmethod
    def name_only(recipe: Recipe) -> NameOnlyRecipe:
        return NameOnlyRecipe.from_recipe(recipe)

    def __len__(self) -> int:
        return len(self._recipes)
