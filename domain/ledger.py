"""
Match stat ledger: pure state transitions over a single Match.

Every function takes a Match and returns a new one; player records are
never touched here. Authorization is enforced by the caller.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from .models import AwardField, Match, MatchStatus, Player, StatKind, StatLine, Team

_ROSTER_FIELDS = {Team.A: "team_a", Team.B: "team_b", Team.C: "team_c"}


def assign_to_team(match: Match, player_id: str, team: Team) -> Match:
    """Move a player into ``team`` (out of any other) and open a stat line."""
    team = Team(team)
    rosters = {
        name: tuple(pid for pid in match.roster(t) if pid != player_id)
        for t, name in _ROSTER_FIELDS.items()
    }
    rosters[_ROSTER_FIELDS[team]] = rosters[_ROSTER_FIELDS[team]] + (player_id,)
    stats = match.stats
    if player_id not in stats:
        stats = {**stats, player_id: StatLine()}
    return replace(match, stats=stats, **rosters)


def unassign(match: Match, player_id: str) -> Match:
    """Drop a player from every roster and from the live stats.

    The applied snapshot is left as is so the next reconciliation can undo
    what was previously committed.
    """
    stats = {pid: line for pid, line in match.stats.items() if pid != player_id}
    return replace(
        match,
        team_a=tuple(pid for pid in match.team_a if pid != player_id),
        team_b=tuple(pid for pid in match.team_b if pid != player_id),
        team_c=tuple(pid for pid in match.team_c if pid != player_id),
        stats=stats,
    )


def set_stat(match: Match, player_id: str, kind: StatKind, value: int) -> Match:
    kind = StatKind(kind)
    prev = match.stats.get(player_id, StatLine())
    nxt = replace(prev, **{kind.value: max(0, int(value))})
    return replace(match, stats={**match.stats, player_id: nxt})


def toggle_award(match: Match, award: AwardField, player_id: str) -> Match:
    award = AwardField(award)
    current = match.awards(award)
    if player_id in current:
        updated = tuple(pid for pid in current if pid != player_id)
    else:
        updated = current + (player_id,)
    return replace(match, **{award.value: updated})


def clear_award(match: Match, award: AwardField) -> Match:
    return replace(match, **{AwardField(award).value: ()})


def set_clean_sheet(match: Match, player_id: Optional[str]) -> Match:
    return replace(match, clean_sheet_player=player_id or None)


def clear_clean_sheet(match: Match) -> Match:
    return replace(match, clean_sheet_player=None)


def mark_played(match: Match) -> Match:
    """Upcoming -> played. Played matches are returned unchanged."""
    if match.status != MatchStatus.UPCOMING:
        return match
    return replace(match, status=MatchStatus.PLAYED)


def _index(players: Iterable[Player]) -> Dict[str, Player]:
    return {p.id: p for p in players}


def roster_players(match: Match, team: Team, players: Iterable[Player]) -> List[Player]:
    """Players on ``team`` in roster order; ids of deleted players are skipped."""
    by_id = _index(players)
    return [by_id[pid] for pid in match.roster(team) if pid in by_id]


def lineup_players(match: Match, players: Iterable[Player]) -> List[Player]:
    """Players on any team, in the order of the given player list."""
    ids = match.team_set()
    return [p for p in players if p.id in ids]
