"""
Data models for my-chef.

These models define the core entities used throughout the system:
- Recipe / Ingredient / Step: HowToCook catalog entries (read-only)
- SimpleRecipe / NameOnlyRecipe: projections returned by the tools
- AggregatedIngredient / ShoppingPlan / GroceryList: shopping output
- DayPlan / WeeklyMealPlan: weekly meal planning
- DishRecommendation: quick "what to eat" output

JSON keys follow the catalog and tool wire format (camelCase where the
tools have always used it).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class RecipeValidationError(ValueError):
    """Raised when a catalog entry does not have the expected shape."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_int(field_name: str, value: Any) -> int:
    """Integral catalog field (3 or 3.0); anything else is a validation error."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool):
        raise RecipeValidationError(f"'{field_name}' must be an integer, got {value!r}")
    return value


def _optional_int(field_name: str, value: Any) -> Optional[int]:
    return None if value is None else _to_int(field_name, value)


def _string_list(field_name: str, value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RecipeValidationError(f"'{field_name}' must be a list of strings")
    return tuple(value)


@dataclass(frozen=True)
class Ingredient:
    """Ingredient line of a recipe."""

    name: str  # "猪肉"
    quantity: Optional[float] = None  # 250.0, None for "适量"
    unit: Optional[str] = None  # "g"
    text_quantity: str = ""  # "- 猪肉 250g"
    notes: str = ""

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "text_quantity": self.text_quantity,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Ingredient":
        """
        Create Ingredient from a catalog dictionary.

        Raises:
            RecipeValidationError: If name is missing or quantity is not numeric
        """
        if not isinstance(data, dict):
            raise RecipeValidationError(f"ingredient must be an object, got {type(data).__name__}")

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise RecipeValidationError("ingredient is missing a name")

        quantity = data.get("quantity")
        if quantity is not None and not _is_number(quantity):
            raise RecipeValidationError(f"ingredient '{name}' has non-numeric quantity {quantity!r}")

        unit = data.get("unit")
        return cls(
            name=name,
            quantity=quantity,
            unit=str(unit) if unit is not None else None,
            text_quantity=data.get("text_quantity") or "",
            notes=data.get("notes") or "",
        )


@dataclass(frozen=True)
class Step:
    """Single preparation step."""

    step: int
    description: str

    def to_dict(self) -> Dict:
        return {"step": self.step, "description": self.description}


@dataclass(frozen=True)
class Recipe:
    """Recipe from the HowToCook catalog. Never mutated after loading."""

    id: str
    name: str
    description: str
    category: str
    ingredients: Tuple[Ingredient, ...] = ()
    steps: Tuple[Step, ...] = ()

    # Metadata carried by the dataset
    source_path: str = ""
    image_path: Optional[str] = None
    difficulty: int = 0
    tags: Tuple[str, ...] = ()
    servings: int = 1
    prep_time_minutes: Optional[int] = None
    cook_time_minutes: Optional[int] = None
    total_time_minutes: Optional[int] = None
    additional_notes: Tuple[str, ...] = ()

    def ingredient_names(self) -> List[str]:
        """Lowercased ingredient names, used for keyword matching."""
        return [ingredient.name.lower() for ingredient in self.ingredients]

    def has_ingredient_like(self, keyword: str) -> bool:
        """Check whether any ingredient name contains keyword (case-insensitive)."""
        keyword = keyword.lower()
        return any(keyword in name for name in self.ingredient_names())

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "source_path": self.source_path,
            "image_path": self.image_path,
            "category": self.category,
            "difficulty": self.difficulty,
            "tags": list(self.tags),
            "servings": self.servings,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "steps": [s.to_dict() for s in self.steps],
            "prep_time_minutes": self.prep_time_minutes,
            "cook_time_minutes": self.cook_time_minutes,
            "total_time_minutes": self.total_time_minutes,
            "additional_notes": list(self.additional_notes),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Recipe":
        """
        Create Recipe from a catalog dictionary, validating its shape.

        Args:
            data: One entry of all_recipes.json

        Returns:
            Recipe instance

        Raises:
            RecipeValidationError: If required fields are missing or malformed
        """
        if not isinstance(data, dict):
            raise RecipeValidationError(f"recipe must be an object, got {type(data).__name__}")

        for key in ("id", "name", "category"):
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise RecipeValidationError(f"recipe is missing '{key}': {data.get('name')!r}")

        raw_ingredients = data.get("ingredients") or []
        if not isinstance(raw_ingredients, list):
            raise RecipeValidationError(f"recipe '{data['name']}' has malformed ingredients")

        raw_steps = data.get("steps") or []
        if not isinstance(raw_steps, list):
            raise RecipeValidationError(f"recipe '{data['name']}' has malformed steps")

        steps = []
        for index, raw_step in enumerate(raw_steps, start=1):
            if isinstance(raw_step, dict):
                steps.append(Step(
                    step=_to_int("step", raw_step.get("step", index)),
                    description=str(raw_step.get("description", "")),
                ))
            else:
                steps.append(Step(step=index, description=str(raw_step)))

        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description") or "",
            category=data["category"],
            ingredients=tuple(Ingredient.from_dict(i) for i in raw_ingredients),
            steps=tuple(steps),
            source_path=data.get("source_path") or "",
            image_path=data.get("image_path"),
            difficulty=_to_int("difficulty", data.get("difficulty") or 0),
            tags=_string_list("tags", data.get("tags")),
            servings=_to_int("servings", data.get("servings") or 1),
            prep_time_minutes=_optional_int("prep_time_minutes", data.get("prep_time_minutes")),
            cook_time_minutes=_optional_int("cook_time_minutes", data.get("cook_time_minutes")),
            total_time_minutes=_optional_int("total_time_minutes", data.get("total_time_minutes")),
            additional_notes=_string_list("additional_notes", data.get("additional_notes")),
        )


@dataclass
class SimpleRecipe:
    """Recipe projection used inside plans and category listings."""

    id: str
    name: str
    description: str
    ingredients: List[Dict[str, str]] = field(default_factory=list)

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "SimpleRecipe":
        return cls(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description,
            ingredients=[
                {"name": i.name, "text_quantity": i.text_quantity}
                for i in recipe.ingredients
            ],
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "ingredients": [dict(i) for i in self.ingredients],
        }


@dataclass
class NameOnlyRecipe:
    """Smallest projection: name and description only."""

    name: str
    description: str

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "NameOnlyRecipe":
        return cls(name=recipe.name, description=recipe.description)

    def to_dict(self) -> Dict:
        return {"name": self.name, "description": self.description}


@dataclass
class AggregatedIngredient:
    """
    Ingredient usage merged across the recipes of one generation run.

    total_quantity of None means indeterminate: the contributions could not
    be summed (missing quantity or unit disagreement). It never becomes
    numeric again.
    """

    name: str  # aggregation key (lowercase)
    total_quantity: Optional[float] = None
    unit: Optional[str] = None
    recipe_count: int = 0
    recipes: List[str] = field(default_factory=list)

    @property
    def is_indeterminate(self) -> bool:
        return self.total_quantity is None

    def add(self, ingredient: Ingredient, recipe_name: str):
        """Merge one more occurrence of this ingredient."""
        # Both units must be present; two unitless amounts are not comparable
        if (
            self.unit
            and ingredient.unit
            and self.unit == ingredient.unit
            and self.total_quantity is not None
            and ingredient.quantity is not None
        ):
            self.total_quantity += ingredient.quantity
        else:
            self.total_quantity = None
            self.unit = None

        self.recipe_count += 1
        if recipe_name not in self.recipes:
            self.recipes.append(recipe_name)

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "totalQuantity": self.total_quantity,
            "unit": self.unit,
            "recipeCount": self.recipe_count,
            "recipes": list(self.recipes),
        }


@dataclass
class ShoppingPlan:
    """Ingredient names split into purchase buckets."""

    fresh: List[str] = field(default_factory=list)
    pantry: List[str] = field(default_factory=list)
    spices: List[str] = field(default_factory=list)
    others: List[str] = field(default_factory=list)

    def all_items(self) -> List[str]:
        return self.spices + self.fresh + self.pantry + self.others

    def to_dict(self) -> Dict:
        return {
            "fresh": list(self.fresh),
            "pantry": list(self.pantry),
            "spices": list(self.spices),
            "others": list(self.others),
        }


@dataclass
class GroceryList:
    """Aggregated ingredients for a plan plus their shopping buckets."""

    ingredients: List[AggregatedIngredient] = field(default_factory=list)
    shopping_plan: ShoppingPlan = field(default_factory=ShoppingPlan)

    def to_dict(self) -> Dict:
        return {
            "ingredients": [i.to_dict() for i in self.ingredients],
            "shoppingPlan": self.shopping_plan.to_dict(),
        }


@dataclass
class DayPlan:
    """Meals for a single day."""

    day: str  # "周一"
    breakfast: List[SimpleRecipe] = field(default_factory=list)
    lunch: List[SimpleRecipe] = field(default_factory=list)
    dinner: List[SimpleRecipe] = field(default_factory=list)

    def all_dishes(self) -> List[SimpleRecipe]:
        return self.breakfast + self.lunch + self.dinner

    def to_dict(self) -> Dict:
        return {
            "day": self.day,
            "breakfast": [r.to_dict() for r in self.breakfast],
            "lunch": [r.to_dict() for r in self.lunch],
            "dinner": [r.to_dict() for r in self.dinner],
        }


@dataclass
class WeeklyMealPlan:
    """Seven days of meals with the derived grocery list."""

    weekdays: List[DayPlan] = field(default_factory=list)
    weekend: List[DayPlan] = field(default_factory=list)
    grocery_list: GroceryList = field(default_factory=GroceryList)

    @property
    def days(self) -> List[DayPlan]:
        return self.weekdays + self.weekend

    def to_dict(self) -> Dict:
        return {
            "weekdays": [d.to_dict() for d in self.weekdays],
            "weekend": [d.to_dict() for d in self.weekend],
            "groceryList": self.grocery_list.to_dict(),
        }


@dataclass
class DishRecommendation:
    """Quick dish combination for a group."""

    people_count: int
    meat_dish_count: int
    vegetable_dish_count: int
    dishes: List[SimpleRecipe] = field(default_factory=list)
    message: str = ""

    def to_dict(self) -> Dict:
        return {
            "peopleCount": self.people_count,
            "meatDishCount": self.meat_dish_count,
            "vegetableDishCount": self.vegetable_dish_count,
            "dishes": [d.to_dict() for d in self.dishes],
            "message": self.message,
        }
