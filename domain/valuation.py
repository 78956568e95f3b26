"""
Valuation: maps a Player's counters -> score, ladder tier, bonus and total value.
This module has no Streamlit/UI code and can be tested independently.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from .ladder import LADDER, lookup
from .models import LadderRow, Player, PlayerValuation
from .policies import ValuationPolicies

DEFAULT_POLICIES = ValuationPolicies()


def raw_score(player: Player, policies: Optional[ValuationPolicies] = None) -> float:
    """Per-match productivity index; zero until the player has a match."""
    pol = policies or DEFAULT_POLICIES
    if player.matches <= 0:
        return 0.0
    return (player.goals + player.assists * pol.assistWeight) / player.matches


def raw_bonus(player: Player, policies: Optional[ValuationPolicies] = None) -> float:
    pol = policies or DEFAULT_POLICIES
    return (
        player.motm_count * pol.motmBonus
        + player.hattrick_count * pol.hattrickBonus
        + player.clean_sheet_count * pol.cleanSheetBonus
    )


def value_player(
    player: Player,
    policies: Optional[ValuationPolicies] = None,
    ladder: List[LadderRow] = LADDER,
) -> PlayerValuation:
    """Derive display values for a player.

    The ladder is looked up with the unrounded score; rounding only applies
    to the returned numbers (score to 2 decimals, bonus and total to 1).
    """
    pol = policies or DEFAULT_POLICIES
    score = raw_score(player, pol)
    row = lookup(score, ladder)
    bonus = raw_bonus(player, pol)
    total = row.price * (player.matches / 2) + bonus
    return PlayerValuation(
        player=player,
        score=round(score, pol.scoreDecimals),
        price_per_match=row.price,
        tier=row.label,
        bonus=round(bonus, pol.valueDecimals),
        total=round(total, pol.valueDecimals),
    )


def value_players(
    players: Iterable[Player], policies: Optional[ValuationPolicies] = None
) -> List[PlayerValuation]:
    return [value_player(p, policies) for p in players]


def rank_players(
    players: Iterable[Player], policies: Optional[ValuationPolicies] = None
) -> List[PlayerValuation]:
    """Highest total first; ties keep roster order."""
    return sorted(value_players(players, policies), key=lambda v: v.total, reverse=True)


def search_players(
    valuations: Iterable[PlayerValuation], query: str
) -> List[PlayerValuation]:
    q = (query or "").strip().lower()
    return [v for v in valuations if q in v.name.lower()]
