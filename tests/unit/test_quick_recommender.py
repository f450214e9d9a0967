#!/usr/bin/env python3
"""
Tests for the quick "what to eat" recommender.
"""

import pytest

from my_chef.constants import AQUATIC, BREAKFAST, DESSERT, MEAT, SOUP, STAPLE, VEGETABLE
from my_chef.planning.pools import SequenceRandomSource
from my_chef.planning.quick_recommender import (
    QuickRecommender,
    meat_dish_target,
    vegetable_dish_target,
)


@pytest.mark.parametrize("people, meat, vegetable", [
    (1, 1, 1),
    (2, 2, 1),
    (3, 2, 2),
    (8, 5, 4),
    (9, 5, 5),
    (10, 6, 5),
])
def test_targets(people, meat, vegetable):
    assert meat_dish_target(people) == meat
    assert vegetable_dish_target(people) == vegetable


def test_nine_people_get_a_fish_dish(large_catalog, seeded_random):
    result = QuickRecommender(seeded_random).recommend(large_catalog, 9)
    aquatic_ids = {r.id for r in large_catalog if r.category == AQUATIC}

    assert result.meat_dish_count == 5
    assert result.vegetable_dish_count == 5
    assert len(result.dishes) == 10
    assert result.dishes[0].id in aquatic_ids

    ids = [d.id for d in result.dishes]
    assert len(ids) == len(set(ids))


def test_fish_dish_is_not_picked_twice(recipe_factory):
    """With one aquatic recipe it is the fish dish and not also a meat dish."""
    recipes = [
        recipe_factory("鱼", AQUATIC, [("鱼肉", 500, "g")]),
        recipe_factory("红烧肉", MEAT, [("猪肉", 500, "g")]),
    ]

    result = QuickRecommender(SequenceRandomSource([0])).recommend(recipes, 9)

    assert [d.name for d in result.dishes] == ["鱼", "红烧肉"]
    assert result.meat_dish_count == 2


def test_no_fish_dish_for_eight_people(recipe_factory, first_pick):
    recipes = [recipe_factory(f"A{i}", AQUATIC) for i in range(10)]

    result = QuickRecommender(first_pick).recommend(recipes, 8)

    assert result.meat_dish_count == 5
    assert [d.name for d in result.dishes] == ["A0", "A1", "A2", "A3", "A4"]


def test_no_aquatic_recipe_means_full_meat_quota(recipe_factory, first_pick):
    recipes = [recipe_factory(f"M{i}", MEAT) for i in range(10)]

    result = QuickRecommender(first_pick).recommend(recipes, 10)

    assert result.meat_dish_count == 6


def test_meat_types_are_covered_first(recipe_factory, first_pick):
    recipes = [
        recipe_factory("土豆炖牛肉", MEAT, [("牛肉", 300, "g")]),
        recipe_factory("红烧肉", MEAT, [("五花猪肉", 500, "g")]),
        recipe_factory("宫保鸡丁", MEAT, [("鸡肉", 300, "g")]),
        recipe_factory("回锅肉", MEAT, [("猪肉", 300, "g")]),
    ]

    result = QuickRecommender(first_pick).recommend(recipes, 3)

    # quota 2: first pork dish, then first chicken dish
    assert [d.name for d in result.dishes] == ["红烧肉", "宫保鸡丁"]
    assert result.meat_dish_count == 2


def test_dish_matching_two_meat_types_is_picked_once(recipe_factory, first_pick):
    recipes = [recipe_factory("双拼", MEAT, [("猪肉", 100, "g"), ("鸡肉", 100, "g")])]

    result = QuickRecommender(first_pick).recommend(recipes, 3)

    assert [d.name for d in result.dishes] == ["双拼"]
    assert result.meat_dish_count == 1


def test_fallback_fills_remaining_quota(recipe_factory, first_pick):
    recipes = [
        recipe_factory("蒜蓉扇贝", AQUATIC, [("扇贝", 6, "个")]),
        recipe_factory("油焖大虾", AQUATIC, [("大虾", 500, "g")]),
        recipe_factory("红烧肉", MEAT, [("猪肉", 500, "g")]),
    ]

    result = QuickRecommender(first_pick).recommend(recipes, 3)

    assert [d.name for d in result.dishes] == ["红烧肉", "蒜蓉扇贝"]


def test_vegetable_pool_skips_breakfast_and_staple(recipe_factory, first_pick):
    recipes = [
        recipe_factory("煎蛋", BREAKFAST),
        recipe_factory("米饭", STAPLE),
        recipe_factory("双皮奶", DESSERT),
        recipe_factory("紫菜汤", SOUP),
        recipe_factory("西兰花", VEGETABLE),
    ]

    result = QuickRecommender(first_pick).recommend(recipes, 10)

    assert result.meat_dish_count == 0
    assert result.vegetable_dish_count == 3
    assert [d.name for d in result.dishes] == ["双皮奶", "紫菜汤", "西兰花"]


def test_one_person_without_vegetables(recipe_factory, seeded_random):
    recipes = [
        recipe_factory("红烧肉", MEAT, [("猪肉", 500, "g")]),
        recipe_factory("米饭", STAPLE),
    ]

    result = QuickRecommender(seeded_random).recommend(recipes, 1)

    assert result.meat_dish_count == 1
    assert result.vegetable_dish_count == 0
    assert result.message == "为1人推荐的菜品，包含1个荤菜和0个素菜。"


def test_empty_catalog(seeded_random):
    result = QuickRecommender(seeded_random).recommend([], 5)

    assert result.dishes == []
    assert result.meat_dish_count == 0
    assert result.vegetable_dish_count == 0


def test_input_is_not_modified(small_catalog, seeded_random):
    before = list(small_catalog)
    QuickRecommender(seeded_random).recommend(small_catalog, 10)
    assert small_catalog == before


def test_to_dict(small_catalog, seeded_random):
    data = QuickRecommender(seeded_random).recommend(small_catalog, 2).to_dict()

    assert data["peopleCount"] == 2
    assert data["meatDishCount"] == 2
    assert data["vegetableDishCount"] == 1
    assert len(data["dishes"]) == 3
    assert set(data["dishes"][0]) == {"id", "name", "description", "ingredients"}
