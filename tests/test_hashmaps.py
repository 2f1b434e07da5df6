import pytest

from rustdrill.drills.hashmaps import (
    Fruit,
    Team,
    build_scores_table,
    default_fruit_basket,
    fill_fruit_basket,
)


def test_at_least_three_types_of_fruits():
    assert len(default_fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(default_fruit_basket().values()) >= 5


def test_default_basket_has_two_bananas():
    assert default_fruit_basket()["banana"] == 2


def get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = fill_fruit_basket(get_fruit_basket())
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = fill_fruit_basket(get_fruit_basket())
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = fill_fruit_basket(get_fruit_basket())
    assert sum(basket.values()) > 11


def test_fill_mutates_in_place():
    basket = get_fruit_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.BANANA] == 1
    assert basket[Fruit.PINEAPPLE] == 1


def get_results():
    return (
        "England,France,4,2\n"
        "France,Italy,3,1\n"
        "Poland,Spain,2,0\n"
        "Germany,England,2,1\n"
    )


def test_build_scores():
    scores = build_scores_table(get_results())
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(get_results())["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(get_results())["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_team_records_name():
    assert build_scores_table(get_results())["France"] == Team("France", 5, 5)


def test_empty_results():
    assert build_scores_table("") == {}


def test_malformed_line():
    with pytest.raises(ValueError):
        build_scores_table("England,France,4\n")


def test_bad_goal_count():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_goal_count_too_large():
    with pytest.raises(ValueError):
        build_scores_table("England,France,256,2\n")


def test_goal_tally_overflow():
    with pytest.raises(OverflowError):
        build_scores_table("England,France,200,0\nEngland,Italy,100,0\n")