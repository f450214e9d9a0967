"""
Recipe tools for the MCP server.

These tools let an assistant browse the catalog, plan a week of meals with a
grocery list, or get a quick dish combination.
"""

import logging
from typing import Any, Dict, List, Optional

from ...data.cookbook import Cookbook
from ...planning.filters import filter_recipes
from ...planning.pools import RandomSource, UniformRandomSource
from ...planning.quick_recommender import QuickRecommender
from ...planning.weekly_planner import WeeklyPlanner

logger = logging.getLogger(__name__)

MIN_PEOPLE = 1
MAX_PEOPLE = 10


class ToolArgumentError(ValueError):
    """Raised when a tool is called with invalid arguments."""


class RecipeTools:
    """Recipe and meal planning tools backed by a loaded Cookbook."""

    def __init__(self, cookbook: Cookbook, random_source: Optional[RandomSource] = None):
        """
        Initialize recipe tools.

        Args:
            cookbook: Loaded, read-only recipe catalog
            random_source: Index provider shared by the planners (default: unseeded)
        """
        self.cookbook = cookbook
        self.random_source = random_source or UniformRandomSource()

    def get_all_recipes(self) -> List[Dict[str, Any]]:
        """
        List every recipe by name and description.

        Returns:
            List of {name, description} dictionaries
        """
        return [self.cookbook.name_only(r).to_dict() for r in self.cookbook.recipes]

    def get_recipes_by_category(self, category: str) -> List[Dict[str, Any]]:
        """
        List recipes of one category.

        Args:
            category: One of the catalog's categories

        Returns:
            List of simplified recipes {id, name, description, ingredients}

        Raises:
            ToolArgumentError: If the category is unknown
        """
        if category not in self.cookbook.categories:
            raise ToolArgumentError(
                f"Unknown category '{category}'. Available: {', '.join(self.cookbook.categories)}"
            )
        return [self.cookbook.simplify(r).to_dict() for r in self.cookbook.recipes_in(category)]

    def recommend_meals(
        self,
        people_count: int,
        allergies: Optional[List[str]] = None,
        avoid_items: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Build a weekly meal plan with a grocery list.

        Args:
            people_count: Number of people (1-10)
            allergies: Allergens to exclude (optional)
            avoid_items: Disliked ingredients to exclude (optional)

        Returns:
            Weekly meal plan dictionary (weekdays, weekend, groceryList)
        """
        people_count = _validate_people_count(people_count)
        allergies = _validate_terms("allergies", allergies)
        avoid_items = _validate_terms("avoidItems", avoid_items)

        recipes = filter_recipes(self.cookbook.recipes, allergies, avoid_items)
        plan = WeeklyPlanner(self.random_source).build(recipes, people_count)
        return plan.to_dict()

    def what_to_eat(self, people_count: int) -> Dict[str, Any]:
        """
        Recommend a dish combination for a group.

        Args:
            people_count: Number of people (1-10)

        Returns:
            Dish recommendation dictionary
        """
        people_count = _validate_people_count(people_count)
        recommendation = QuickRecommender(self.random_source).recommend(
            self.cookbook.recipes, people_count
        )
        return recommendation.to_dict()

    def dispatch(self, name: str, arguments: Optional[Dict[str, Any]]) -> Any:
        """
        Route a tool call to the matching method.

        Args:
            name: Tool name as registered with MCP
            arguments: Tool arguments

        Returns:
            JSON-serializable tool result

        Raises:
            ToolArgumentError: If the tool is unknown or arguments are invalid
        """
        arguments = arguments or {}

        if name == "my_chef_getAllRecipes":
            return self.get_all_recipes()

        elif name == "my_chef_getRecipesByCategory":
            if "category" not in arguments:
                raise ToolArgumentError("Missing required argument 'category'")
            return self.get_recipes_by_category(arguments["category"])

        elif name == "my_chef_recommendMeals":
            return self.recommend_meals(
                people_count=_require_people_count(arguments),
                allergies=arguments.get("allergies"),
                avoid_items=arguments.get("avoidItems"),
            )

        elif name == "mcp_howtocook_whatToEat":
            return self.what_to_eat(_require_people_count(arguments))

        raise ToolArgumentError(f"Unknown tool: {name}")


def _require_people_count(arguments: Dict[str, Any]) -> Any:
    if "peopleCount" not in arguments:
        raise ToolArgumentError("Missing required argument 'peopleCount'")
    return arguments["peopleCount"]


def _validate_people_count(value: Any) -> int:
    # JSON clients may send 4.0 for 4
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ToolArgumentError(f"peopleCount must be an integer, got {value!r}")
    if not MIN_PEOPLE <= value <= MAX_PEOPLE:
        raise ToolArgumentError(
            f"peopleCount must be between {MIN_PEOPLE} and {MAX_PEOPLE}, got {value}"
        )
    return value


def _validate_terms(name: str, value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ToolArgumentError(f"{name} must be a list of strings")
    return value


def build_tool_definitions(categories: List[str]) -> List[Dict[str, Any]]:
    """
    Tool definitions for MCP registration.

    The category tool lists the catalog's categories, so definitions are
    built after the catalog has loaded.
    """
    category_schema: Dict[str, Any] = {
        "type": "string",
        "description": "菜谱分类名称，如水产、早餐、荤菜、主食等",
    }
    if categories:
        category_schema["enum"] = list(categories)

    people_count_schema = {
        "type": "integer",
        "minimum": MIN_PEOPLE,
        "maximum": MAX_PEOPLE,
        "description": "用餐人数，1-10之间的整数",
    }

    return [
        {
            "name": "my_chef_getAllRecipes",
            "description": "获取所有的菜谱",
            "input_schema": {
                "type": "object",
                "properties": {
                    "no_param": {"type": "string", "description": "无参数"},
                },
            },
        },
        {
            "name": "my_chef_getRecipesByCategory",
            "description": f"根据分类查询菜谱，可选分类有: {', '.join(categories)}",
            "input_schema": {
                "type": "object",
                "properties": {"category": category_schema},
                "required": ["category"],
            },
        },
        {
            "name": "my_chef_recommendMeals",
            "description": "根据用户的忌口、过敏原、人数智能推荐菜谱，创建一周的膳食计划以及大致的购物清单",
            "input_schema": {
                "type": "object",
                "properties": {
                    "allergies": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": '过敏原列表，如["大蒜", "虾"]',
                    },
                    "avoidItems": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": '忌口食材列表，如["葱", "姜"]',
                    },
                    "peopleCount": people_count_schema,
                },
                "required": ["peopleCount"],
            },
        },
        {
            "name": "mcp_howtocook_whatToEat",
            "description": "不知道吃什么？根据人数直接推荐适合的菜品组合",
            "input_schema": {
                "type": "object",
                "properties": {
                    "peopleCount": dict(
                        people_count_schema,
                        description="用餐人数，1-10之间的整数，会根据人数推荐合适数量的菜品",
                    ),
                },
                "required": ["peopleCount"],
            },
        },
    ]
