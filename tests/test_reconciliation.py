from domain.ledger import assign_to_team, set_stat, unassign
from domain.models import *
from domain.reconciliation import apply_to_totals, diff, reconciled_ids, StatDelta


def make_player(pid="p", **kwargs):
    return Player(id=pid, name=kwargs.pop("name", "Hassan Hojeij"), **kwargs)


def make_match(**kwargs):
    defaults = dict(id="m1", date="2025-03-01", status=MatchStatus.PLAYED)
    defaults.update(kwargs)
    return Match(**defaults)


def totals(player):
    return (player.goals, player.assists, player.matches)


def first_apply():
    p = make_player()
    m = make_match(team_a=("p",), stats={"p": StatLine(goals=2, assists=1)})
    return apply_to_totals([p], m)


def test_first_apply_commits_stats_and_counts_match():
    result = first_apply()
    assert totals(result.players[0]) == (2, 1, 1)
    assert result.match.applied["p"] == AppliedEntry(goals=2, assists=1, counted=True)


def test_apply_twice_is_noop():
    result = first_apply()
    again = apply_to_totals(result.players, result.match)
    assert totals(again.players[0]) == (2, 1, 1)
    assert again.match.applied == result.match.applied
    assert again.changed == {}


def test_re_edit_applies_only_the_difference():
    result = first_apply()
    edited = set_stat(result.match, "p", StatKind.GOALS, 3)
    again = apply_to_totals(result.players, edited)
    assert again.deltas["p"] == StatDelta(goals=1, assists=0, matches=0)
    assert totals(again.players[0]) == (3, 1, 1)


def test_removing_player_uncounts_the_match():
    result = first_apply()
    edited = set_stat(result.match, "p", StatKind.GOALS, 3)
    result = apply_to_totals(result.players, edited)
    removed = unassign(result.match, "p")
    assert "p" in reconciled_ids(removed)
    after = apply_to_totals(result.players, removed)
    assert after.deltas["p"] == StatDelta(goals=-3, assists=-1, matches=-1)
    assert totals(after.players[0]) == (0, 0, 0)
    assert after.match.applied["p"] == AppliedEntry(0, 0, False)
    # and nothing more happens on the next run
    assert totals(apply_to_totals(after.players, after.match).players[0]) == (0, 0, 0)


def test_lingering_stat_without_team_counts_stats_not_match():
    p = make_player(goals=4, assists=0, matches=3)
    m = make_match(stats={"p": StatLine(goals=1, assists=2)})
    result = apply_to_totals([p], m)
    assert totals(result.players[0]) == (5, 2, 3)
    assert result.match.applied["p"].counted is False


def test_moving_between_teams_does_not_double_count():
    result = first_apply()
    moved = assign_to_team(result.match, "p", Team.C)
    again = apply_to_totals(result.players, moved)
    assert totals(again.players[0]) == (2, 1, 1)


def test_unknown_ids_are_skipped_but_snapshotted():
    p = make_player()
    m = make_match(team_a=("p", "ghost"), stats={"p": StatLine(1, 0), "ghost": StatLine(3, 3)})
    result = apply_to_totals([p], m)
    assert [pl.id for pl in result.players] == ["p"]
    assert totals(result.players[0]) == (1, 0, 1)
    assert result.match.applied["ghost"] == AppliedEntry(3, 3, True)


def test_players_outside_the_match_are_untouched():
    other = make_player("q", name="Ali Awada", goals=7, matches=9)
    result = apply_to_totals([make_player(), other], make_match(team_b=("p",)))
    assert result.players[1] is other


def test_awards_are_not_promoted_to_counters():
    p = make_player()
    m = make_match(team_a=("p",), motm=("p",), hattricks=("p",), clean_sheet_player="p")
    result = apply_to_totals([p], m)
    q = result.players[0]
    assert (q.motm_count, q.hattrick_count, q.clean_sheet_count) == (0, 0, 0)


def test_apply_does_not_mutate_inputs():
    p = make_player()
    m = make_match(team_a=("p",), stats={"p": StatLine(2, 1)})
    apply_to_totals([p], m)
    assert totals(p) == (0, 0, 0)
    assert m.applied == {}


def test_diff_is_pure_over_snapshot_and_ledger():
    deltas = diff(
        snapshot={"p": AppliedEntry(2, 1, True)},
        ledger={"p": StatLine(2, 1), "q": StatLine(1, 0)},
        team_set=frozenset({"p", "q"}),
        ids=["p", "q"],
    )
    assert deltas["p"].is_zero
    assert deltas["q"] == StatDelta(goals=1, assists=0, matches=1)
