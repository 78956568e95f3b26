from domain.ledger import (
    assign_to_team, clear_award, clear_clean_sheet, lineup_players, mark_played,
    roster_players, set_clean_sheet, set_stat, toggle_award, unassign,
)
from domain.models import *


def make_match(**kwargs):
    defaults = dict(id="m1", date="2025-03-01", status=MatchStatus.PLAYED)
    defaults.update(kwargs)
    return Match(**defaults)


def test_assign_creates_zero_stat_line():
    m = assign_to_team(make_match(), "p", Team.A)
    assert m.team_a == ("p",)
    assert m.stats["p"] == StatLine(0, 0)


def test_reassign_moves_player_between_teams():
    m = assign_to_team(make_match(), "p", Team.A)
    m = assign_to_team(m, "p", Team.B)
    assert m.team_b == ("p",)
    assert "p" not in m.team_a and "p" not in m.team_c
    assert m.team_of("p") == Team.B


def test_reassign_keeps_existing_stats():
    m = set_stat(assign_to_team(make_match(), "p", Team.A), "p", StatKind.GOALS, 2)
    m = assign_to_team(m, "p", Team.C)
    assert m.stats["p"].goals == 2


def test_assign_to_same_team_is_noop():
    m = assign_to_team(assign_to_team(make_match(), "q", Team.A), "p", Team.A)
    again = assign_to_team(m, "p", Team.A)
    assert again.team_a == ("q", "p")
    assert again.stats == m.stats


def test_unassign_drops_stats_but_keeps_snapshot():
    m = make_match(
        team_a=("p",), stats={"p": StatLine(2, 1)}, applied={"p": AppliedEntry(2, 1, True)}
    )
    m = unassign(m, "p")
    assert m.team_set() == frozenset()
    assert "p" not in m.stats
    assert m.applied["p"] == AppliedEntry(2, 1, True)


def test_set_stat_clamps_and_merges():
    m = set_stat(make_match(), "p", StatKind.ASSISTS, 3)
    m = set_stat(m, "p", StatKind.GOALS, -4)
    assert m.stats["p"] == StatLine(goals=0, assists=3)
    m = set_stat(m, "p", "goals", 5)
    assert m.stats["p"] == StatLine(goals=5, assists=3)


def test_mutators_return_new_match():
    m = make_match()
    assign_to_team(m, "p", Team.A)
    assert m.team_a == () and m.stats == {}


def test_toggle_and_clear_awards():
    m = toggle_award(make_match(), AwardField.MOTM, "p")
    m = toggle_award(m, AwardField.MOTM, "q")
    assert m.motm == ("p", "q")
    m = toggle_award(m, AwardField.MOTM, "p")
    assert m.motm == ("q",)
    m = toggle_award(m, AwardField.HATTRICKS, "q")
    m = clear_award(m, AwardField.MOTM)
    assert m.motm == ()
    assert m.hattricks == ("q",)


def test_clean_sheet_single_select():
    m = set_clean_sheet(make_match(), "p")
    m = set_clean_sheet(m, "q")
    assert m.clean_sheet_player == "q"
    assert clear_clean_sheet(m).clean_sheet_player is None
    assert set_clean_sheet(m, "").clean_sheet_player is None


def test_mark_played_is_one_way():
    m = mark_played(make_match(status=MatchStatus.UPCOMING))
    assert m.status == MatchStatus.PLAYED
    assert mark_played(m) is m


def test_rosters_skip_deleted_players():
    players = [Player(id="p", name="Ali Awada"), Player(id="q", name="Mhmd Badran")]
    m = make_match(team_a=("gone", "q", "p"))
    assert [p.id for p in roster_players(m, Team.A, players)] == ["q", "p"]
    assert [p.id for p in lineup_players(m, players)] == ["p", "q"]
