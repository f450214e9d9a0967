#!/usr/bin/env python3
"""
Tests for catalog record parsing and serialization.
"""

import pytest

from my_chef.data.models import (
    AggregatedIngredient,
    Ingredient,
    NameOnlyRecipe,
    Recipe,
    RecipeValidationError,
    SimpleRecipe,
)


@pytest.fixture
def recipe_data():
    return {
        "id": "dishes-meat_dish-hong_shao_rou",
        "name": "红烧肉的做法",
        "description": "肥而不腻。",
        "source_path": "dishes/meat_dish/红烧肉.md",
        "image_path": None,
        "category": "荤菜",
        "difficulty": 3,
        "tags": ["荤菜"],
        "servings": 3,
        "ingredients": [
            {"name": "五花肉", "quantity": 500, "unit": "g", "text_quantity": "- 五花肉 500g", "notes": ""},
            {"name": "盐", "quantity": None, "unit": None, "text_quantity": "- 盐 适量", "notes": ""},
        ],
        "steps": [
            {"step": 1, "description": "切块焯水。"},
            {"step": 2, "description": "炖煮收汁。"},
        ],
        "prep_time_minutes": 15,
        "cook_time_minutes": 75,
        "total_time_minutes": 90,
        "additional_notes": ["可加鹌鹑蛋"],
    }


def test_recipe_from_dict(recipe_data):
    recipe = Recipe.from_dict(recipe_data)

    assert recipe.name == "红烧肉的做法"
    assert recipe.category == "荤菜"
    assert len(recipe.ingredients) == 2
    assert recipe.ingredients[0].quantity == 500
    assert recipe.ingredients[1].quantity is None
    assert [s.step for s in recipe.steps] == [1, 2]
    assert recipe.total_time_minutes == 90


def test_recipe_round_trips_through_dict(recipe_data):
    assert Recipe.from_dict(recipe_data).to_dict() == recipe_data


def test_recipe_is_immutable(recipe_data):
    recipe = Recipe.from_dict(recipe_data)
    with pytest.raises(AttributeError):
        recipe.name = "改名"


def test_plain_string_steps_are_numbered(recipe_data):
    recipe_data["steps"] = ["切块", "炖煮"]
    recipe = Recipe.from_dict(recipe_data)
    assert [(s.step, s.description) for s in recipe.steps] == [(1, "切块"), (2, "炖煮")]


@pytest.mark.parametrize("mutate", [
    lambda d: d.pop("id"),
    lambda d: d.pop("name"),
    lambda d: d.update(category=""),
    lambda d: d.update(ingredients="五花肉"),
    lambda d: d.update(ingredients=[{"quantity": 1}]),
    lambda d: d.update(ingredients=[{"name": "盐", "quantity": "少许"}]),
    lambda d: d.update(ingredients=[{"name": "盐", "quantity": True}]),
    lambda d: d.update(steps="炖"),
    lambda d: d.update(steps=[{"step": None, "description": "切块"}]),
    lambda d: d.update(steps=[{"step": "一", "description": "切块"}]),
    lambda d: d.update(difficulty="easy"),
    lambda d: d.update(difficulty=2.5),
    lambda d: d.update(servings="两人份"),
    lambda d: d.update(prep_time_minutes="十分钟"),
    lambda d: d.update(tags="荤菜"),
    lambda d: d.update(tags=[1]),
    lambda d: d.update(additional_notes={"note": "x"}),
])
def test_invalid_recipes_are_rejected(recipe_data, mutate):
    mutate(recipe_data)
    with pytest.raises(RecipeValidationError):
        Recipe.from_dict(recipe_data)


def test_integral_float_metadata_is_accepted(recipe_data):
    recipe_data.update(difficulty=3.0, servings=2.0)
    recipe = Recipe.from_dict(recipe_data)
    assert (recipe.difficulty, recipe.servings) == (3, 2)


def test_non_dict_entry_is_rejected():
    with pytest.raises(RecipeValidationError):
        Recipe.from_dict(["not", "a", "recipe"])


def test_projections(recipe_data):
    recipe = Recipe.from_dict(recipe_data)

    assert SimpleRecipe.from_recipe(recipe).to_dict() == {
        "id": "dishes-meat_dish-hong_shao_rou",
        "name": "红烧肉的做法",
        "description": "肥而不腻。",
        "ingredients": [
            {"name": "五花肉", "text_quantity": "- 五花肉 500g"},
            {"name": "盐", "text_quantity": "- 盐 适量"},
        ],
    }
    assert NameOnlyRecipe.from_recipe(recipe).to_dict() == {
        "name": "红烧肉的做法",
        "description": "肥而不腻。",
    }


def test_has_ingredient_like_ignores_case():
    recipe = Recipe(
        id="1", name="Garlic Shrimp", description="", category="水产",
        ingredients=(Ingredient(name="Tiger SHRIMP", quantity=200, unit="g"),),
    )
    assert recipe.has_ingredient_like("shrimp")
    assert not recipe.has_ingredient_like("beef")


def test_aggregated_ingredient_add():
    item = AggregatedIngredient(name="盐", total_quantity=2, unit="g", recipe_count=1, recipes=["A"])

    item.add(Ingredient(name="盐", quantity=3, unit="g"), "B")
    assert (item.total_quantity, item.unit, item.recipe_count) == (5, "g", 2)

    item.add(Ingredient(name="盐", quantity=1, unit="勺"), "B")
    assert item.is_indeterminate
    assert item.unit is None
    assert item.recipes == ["A", "B"]

    item.add(Ingredient(name="盐", quantity=3, unit="g"), "C")
    assert item.is_indeterminate
    assert item.recipe_count == 4
