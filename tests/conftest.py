"""
Pytest configuration and shared fixtures.

Fixtures are reusable test setup that can be injected into tests.
"""

import pytest

from my_chef.config import Settings
from my_chef.constants import AQUATIC, BREAKFAST, DESSERT, MEAT, SOUP, STAPLE, VEGETABLE
from my_chef.data.cookbook import Cookbook
from my_chef.data.models import Ingredient, Recipe
from my_chef.planning.pools import SequenceRandomSource, UniformRandomSource

ALL_CATEGORIES = [BREAKFAST, STAPLE, MEAT, AQUATIC, VEGETABLE, DESSERT, SOUP]


def _make_recipe(name, category, ingredients=(), recipe_id=None):
    """
    Build a Recipe from (name, quantity, unit) tuples.

    Usage in tests:
        recipe_factory("红烧肉", MEAT, [("猪肉", 500, "g"), ("盐", None, None)])
    """
    return Recipe(
        id=recipe_id or f"{category}-{name}",
        name=name,
        description=f"{name}的描述",
        category=category,
        ingredients=tuple(
            Ingredient(
                name=ing_name,
                quantity=quantity,
                unit=unit,
                text_quantity=f"- {ing_name} {quantity or '适量'}{unit or ''}",
            )
            for ing_name, quantity, unit in ingredients
        ),
    )


@pytest.fixture
def recipe_factory():
    """Factory for building test recipes."""
    return _make_recipe


@pytest.fixture
def offline_settings():
    """Settings that never touch the network."""
    return Settings(offline=True)


@pytest.fixture
def large_catalog():
    """
    Catalog with 40 recipes in every category.

    Large enough that a 10-person weekly plan never runs out of dishes.
    """
    recipes = []
    for category in ALL_CATEGORIES:
        for i in range(40):
            recipes.append(_make_recipe(
                f"{category}{i}",
                category,
                [
                    ("盐", 2, "g"),
                    (f"{category}主料{i % 7}", 100, "g"),
                    ("清水", None, None),
                ],
            ))
    return recipes


@pytest.fixture
def small_catalog():
    """Small mixed catalog with named dishes and realistic ingredients."""
    return [
        _make_recipe("煎蛋", BREAKFAST, [("鸡蛋", 1, "个"), ("食用油", 5, "ml")]),
        _make_recipe("豆浆", BREAKFAST, [("黄豆", 80, "g"), ("白糖", 10, "g")]),
        _make_recipe("蛋炒饭", STAPLE, [("米饭", 300, "g"), ("鸡蛋", 2, "个")]),
        _make_recipe("红烧肉", MEAT, [("五花猪肉", 500, "g"), ("生抽", 15, "ml")]),
        _make_recipe("宫保鸡丁", MEAT, [("鸡肉", 300, "g"), ("花生米", 50, "g")]),
        _make_recipe("油焖大虾", AQUATIC, [("大虾", 500, "g"), ("料酒", 15, "ml")]),
        _make_recipe("清蒸鲈鱼", AQUATIC, [("鲈鱼", 1, "条"), ("葱", 2, "根")]),
        _make_recipe("蒜蓉西兰花", VEGETABLE, [("西兰花", 300, "g"), ("大蒜", 4, "瓣")]),
        _make_recipe("双皮奶", DESSERT, [("牛奶", 250, "ml"), ("白糖", 20, "g")]),
        _make_recipe("紫菜蛋花汤", SOUP, [("紫菜", 5, "g"), ("鸡蛋", 1, "个")]),
    ]


@pytest.fixture
def small_cookbook(small_catalog):
    return Cookbook.from_recipes(small_catalog)


@pytest.fixture
def large_cookbook(large_catalog):
    return Cookbook.from_recipes(large_catalog)


@pytest.fixture
def first_pick():
    """Random source that always picks index 0."""
    return SequenceRandomSource([0])


@pytest.fixture
def seeded_random():
    return UniformRandomSource(seed=1234)
