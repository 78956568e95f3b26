from domain.models import *
from domain.policies import ValuationPolicies
from domain.valuation import rank_players, raw_score, search_players, value_player, value_players


def make_player(**kwargs):
    defaults = dict(id="p1", name="Hassan Hojeij", role=Role.FWD)
    defaults.update(kwargs)
    return Player(**defaults)


def test_zero_matches_scores_zero_regardless_of_output():
    v = value_player(make_player(goals=12, assists=7, matches=0))
    assert v.score == 0
    assert v.tier == "TA3BENNN"
    assert v.total == 0


def test_score_tier_and_total():
    # (2 + 1 * 0.7) / 2 = 1.35 -> rung 1.2 (3.0 M$/match)
    v = value_player(make_player(goals=2, assists=1, matches=2))
    assert v.score == 1.35
    assert v.price_per_match == 3.0
    assert v.tier == "3ade"
    assert v.total == 3.0


def test_bonus_from_award_counters():
    v = value_player(make_player(goals=2, matches=1, motm_count=1, hattrick_count=1, clean_sheet_count=1))
    assert v.bonus == 1.1
    # 6.0 * (1 / 2) + 1.1
    assert v.total == 4.1


def test_display_rounding():
    v = value_player(make_player(goals=1, assists=1, matches=3))
    assert v.score == 0.57
    assert raw_score(make_player(goals=1, assists=1, matches=3)) == (1 + 0.7) / 3


def test_valuation_is_deterministic():
    p = make_player(goals=5, assists=3, matches=4, motm_count=2)
    assert value_player(p) == value_player(p)


def test_policies_override_weights():
    pol = ValuationPolicies(assistWeight=1.0, motmBonus=1.0)
    v = value_player(make_player(goals=1, assists=1, matches=1, motm_count=2), pol)
    assert v.score == 2.0
    assert v.bonus == 2.0


def test_ranking_orders_by_total_descending():
    players = [
        make_player(id="a", name="Ali Awada", matches=2, clean_sheet_count=1),
        make_player(id="b", name="Mhmd Badran", goals=1, assists=1, matches=1),
        make_player(id="c", name="Hassan Hojeij", goals=2, assists=1, matches=2),
    ]
    ranking = rank_players(players)
    assert [v.id for v in ranking] == ["c", "b", "a"]
    assert [v.total for v in ranking] == sorted((v.total for v in ranking), reverse=True)


def test_search_is_case_insensitive_substring():
    vals = value_players([make_player(id="a", name="Ali Awada"), make_player(id="b", name="Mhmd Badran")])
    assert [v.id for v in search_players(vals, "bad")] == ["b"]
    assert len(search_players(vals, "")) == 2
