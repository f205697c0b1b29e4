from __future__ import annotations

from kondate.meals.matcher import (
    best_match,
    match_score,
    matched_ingredients,
    select_meal_plan,
)
from kondate.meals.models import Category, Genre, Recipe


def _recipe(rid: str, category: Category, ingredients: list[str]) -> Recipe:
    return Recipe(
        id=rid,
        name=f"recipe {rid}",
        genre=Genre.japanese,
        category=category,
        ingredients=ingredients,
    )


# ── Scoring ──────────────────────────────────────────────────────────────


def test_score_counts_exact_ingredient():
    r = _recipe("1", Category.main_dish, ["豚肉", "玉ねぎ"])
    assert match_score(r, {"豚肉"}) == 1


def test_score_uses_containment_not_equality():
    r = _recipe("1", Category.main_dish, ["豚肉", "玉ねぎ"])
    assert match_score(r, {"豚"}) == 1


def test_score_counts_entries_not_tokens():
    # Two tokens hitting the same entry still count once.
    r = _recipe("1", Category.main_dish, ["豚ひき肉", "玉ねぎ"])
    assert match_score(r, {"豚", "ひき肉"}) == 1


def test_one_token_counts_every_matching_entry():
    r = _recipe("1", Category.main_dish, ["豚肉", "豚ひき肉", "玉ねぎ"])
    assert match_score(r, {"豚"}) == 2


def test_duplicate_ingredient_entries_each_count():
    r = _recipe("1", Category.side_dish, ["卵", "卵"])
    assert match_score(r, {"卵"}) == 2


def test_score_lowercases_recipe_ingredients():
    r = _recipe("1", Category.soup, ["Onion", "BACON"])
    assert match_score(r, {"onion", "bacon"}) == 2


def test_score_zero_without_overlap():
    r = _recipe("1", Category.soup, ["豆腐", "わかめ"])
    assert match_score(r, {"キャベツ"}) == 0


def test_matched_ingredients_keep_recipe_order():
    r = _recipe("1", Category.main_dish, ["玉ねぎ", "豚肉", "生姜"])
    assert matched_ingredients(r, {"生姜", "玉ねぎ"}) == ["玉ねぎ", "生姜"]


# ── Selection ────────────────────────────────────────────────────────────


def test_best_match_picks_highest_score():
    low = _recipe("1", Category.main_dish, ["鶏肉"])
    high = _recipe("2", Category.main_dish, ["豚肉", "玉ねぎ"])
    assert best_match([low, high], Category.main_dish, {"豚肉", "玉ねぎ"}) is high


def test_tie_goes_to_first_in_pool_order():
    pork = _recipe("pork", Category.main_dish, ["豚肉", "玉ねぎ"])
    chicken = _recipe("chicken", Category.main_dish, ["鶏肉", "じゃがいも"])
    query = {"豚肉", "じゃがいも"}

    assert match_score(pork, query) == 1
    assert match_score(chicken, query) == 1
    assert best_match([pork, chicken], Category.main_dish, query) is pork
    assert best_match([chicken, pork], Category.main_dish, query) is chicken


def test_best_match_ignores_other_categories():
    soup = _recipe("1", Category.soup, ["豚肉", "大根", "味噌"])
    main = _recipe("2", Category.main_dish, ["鶏肉"])
    assert best_match([soup, main], Category.main_dish, {"豚肉"}) is main


def test_best_match_empty_category_is_none():
    main = _recipe("1", Category.main_dish, ["豚肉"])
    assert best_match([main], Category.soup, {"豚肉"}) is None


def test_select_meal_plan_fills_each_course_independently():
    pool = [
        _recipe("m1", Category.main_dish, ["鶏肉"]),
        _recipe("m2", Category.main_dish, ["豚肉", "生姜"]),
        _recipe("s1", Category.side_dish, ["ほうれん草"]),
        _recipe("p1", Category.soup, ["豆腐", "味噌"]),
        _recipe("p2", Category.soup, ["豚肉", "味噌", "大根"]),
    ]
    plan = select_meal_plan(pool, {"豚肉", "大根"})

    assert plan.main_dish is pool[1]
    assert plan.side_dish is pool[2]
    assert plan.soup is pool[4]


def test_missing_category_is_absent_while_zero_score_sole_candidates_are_kept():
    pool = [
        _recipe("m1", Category.main_dish, ["鶏肉", "じゃがいも"]),
        _recipe("p1", Category.soup, ["豆腐", "わかめ"]),
    ]
    plan = select_meal_plan(pool, {"キャベツ"})

    assert plan.side_dish is None
    assert plan.main_dish is pool[0]
    assert plan.soup is pool[1]


def test_empty_pool_gives_all_absent_plan():
    plan = select_meal_plan([], {"豚肉"})
    assert plan.main_dish is None
    assert plan.side_dish is None
    assert plan.soup is None


def test_selection_is_idempotent_and_leaves_pool_untouched():
    pool = [
        _recipe("m1", Category.main_dish, ["豚肉"]),
        _recipe("m2", Category.main_dish, ["豚肉"]),
        _recipe("s1", Category.side_dish, ["卵"]),
    ]
    snapshot = [r.model_dump() for r in pool]

    first = select_meal_plan(pool, {"豚肉", "卵"})
    second = select_meal_plan(pool, {"豚肉", "卵"})

    assert first == second
    assert [r.model_dump() for r in pool] == snapshot


def test_selected_recipe_has_no_strictly_better_rival():
    pool = [
        _recipe("a", Category.side_dish, ["きゅうり"]),
        _recipe("b", Category.side_dish, ["きゅうり", "トマト", "ごま"]),
        _recipe("c", Category.side_dish, ["トマト", "ごま"]),
    ]
    query = {"トマト", "ごま", "きゅうり"}
    chosen = select_meal_plan(pool, query).side_dish

    assert chosen is not None
    best = match_score(chosen, query)
    assert all(match_score(r, query) <= best for r in pool)
    assert chosen.id == "b"


def test_plan_slot_lookup_by_category():
    pool = [_recipe("p1", Category.soup, ["味噌"])]
    plan = select_meal_plan(pool, {"味噌"})
    assert plan.slot(Category.soup) is pool[0]
    assert plan.slot(Category.main_dish) is None
