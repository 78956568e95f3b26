"""
Reconciliation: commits a match's live stat sheet into player career totals.

The match keeps two fields side by side:
- ``stats`` (the live ledger), freely edited by admins;
- ``applied`` (the committed snapshot), written only here.

Reconciling diffs the live ledger against the snapshot, adds the difference
to each player's goals/assists/matches and stores the live values as the new
snapshot. Running it again without edits therefore changes nothing.

Awards (MOTM, hat-tricks, clean sheet) are not folded into player counters;
those counters are edited by hand on the player form.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import AbstractSet, Dict, Iterable, List, Mapping

from .models import AppliedEntry, Match, Player, StatLine


@dataclass(frozen=True)
class StatDelta:
    goals: int = 0
    assists: int = 0
    matches: int = 0

    @property
    def is_zero(self) -> bool:
        return self.goals == 0 and self.assists == 0 and self.matches == 0


@dataclass(frozen=True)
class ReconciliationResult:
    players: List[Player]
    match: Match
    deltas: Dict[str, StatDelta] = field(default_factory=dict)

    @property
    def changed(self) -> Dict[str, StatDelta]:
        return {pid: d for pid, d in self.deltas.items() if not d.is_zero}


def reconciled_ids(match: Match) -> List[str]:
    """Rosters, then live stat keys, then previously committed keys; no repeats."""
    ids = list(match.team_a) + list(match.team_b) + list(match.team_c)
    ids += list(match.stats) + list(match.applied)
    return list(dict.fromkeys(ids))


def diff(
    snapshot: Mapping[str, AppliedEntry],
    ledger: Mapping[str, StatLine],
    team_set: AbstractSet[str],
    ids: Iterable[str],
) -> Dict[str, StatDelta]:
    """Per-player change between the committed snapshot and the live ledger."""
    deltas: Dict[str, StatDelta] = {}
    for pid in ids:
        old = snapshot.get(pid, AppliedEntry())
        curr = ledger.get(pid, StatLine())
        deltas[pid] = StatDelta(
            goals=curr.goals - old.goals,
            assists=curr.assists - old.assists,
            matches=(1 if pid in team_set else 0) - (1 if old.counted else 0),
        )
    return deltas


def next_snapshot(
    ledger: Mapping[str, StatLine], team_set: AbstractSet[str], ids: Iterable[str]
) -> Dict[str, AppliedEntry]:
    snapshot: Dict[str, AppliedEntry] = {}
    for pid in ids:
        curr = ledger.get(pid, StatLine())
        snapshot[pid] = AppliedEntry(goals=curr.goals, assists=curr.assists, counted=pid in team_set)
    return snapshot


def apply_delta(player: Player, delta: StatDelta) -> Player:
    return replace(
        player,
        goals=player.goals + delta.goals,
        assists=player.assists + delta.assists,
        matches=player.matches + delta.matches,
    )


def apply_to_totals(players: Iterable[Player], match: Match) -> ReconciliationResult:
    """Commit ``match`` into ``players``; returns new players and the re-based match.

    Everything is computed from values captured on entry and returned as one
    result, so callers can persist players and match in a single write.
    Ids with no matching player are skipped (no record is created) but still
    enter the new snapshot.
    """
    ledger = match.live_ledger()
    snapshot = match.committed_snapshot()
    team_set = match.team_set()
    ids = reconciled_ids(match)

    deltas = diff(snapshot, ledger, team_set, ids)
    updated = [apply_delta(p, deltas[p.id]) if p.id in deltas else p for p in players]
    rebased = replace(match, applied=next_snapshot(ledger, team_set, ids))
    return ReconciliationResult(players=updated, match=rebased, deltas=deltas)
