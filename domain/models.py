"""
Domain Models for the Youth Football Tracker

These are pure data models with no Streamlit dependencies.
They define the core domain language and data structures.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


def new_id() -> str:
    """Short opaque identifier for players, matches and news items."""
    return uuid.uuid4().hex[:7]


class Role(str, Enum):
    """Player roles"""
    GK = "GK"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"


class MatchStatus(str, Enum):
    UPCOMING = "upcoming"
    PLAYED = "played"


class Team(str, Enum):
    """The three squads a match can be split into"""
    A = "A"
    B = "B"
    C = "C"


class AwardField(str, Enum):
    """Multi-select award sets on a match"""
    MOTM = "motm"
    HATTRICKS = "hattricks"


class StatKind(str, Enum):
    GOALS = "goals"
    ASSISTS = "assists"


@dataclass(frozen=True)
class Player:
    """Career record of a club player"""
    id: str
    name: str
    photo: str = ""
    role: Role = Role.MID
    goals: int = 0
    assists: int = 0
    matches: int = 0
    motm_count: int = 0        # +0.5 each
    hattrick_count: int = 0    # +0.3 each
    clean_sheet_count: int = 0  # +0.3 each

    @classmethod
    def create(cls, name: str, **fields) -> "Player":
        return cls(id=new_id(), name=name, **fields)


@dataclass(frozen=True)
class StatLine:
    """One player's numbers for one match"""
    goals: int = 0
    assists: int = 0


@dataclass(frozen=True)
class AppliedEntry:
    """What a match last committed into a player's career totals"""
    goals: int = 0
    assists: int = 0
    counted: bool = False


@dataclass(frozen=True)
class Match:
    """A fixture with its editable stat sheet and committed snapshot"""
    id: str
    date: str                      # YYYY-MM-DD
    status: MatchStatus = MatchStatus.UPCOMING
    time: Optional[str] = None     # HH:MM
    location: Optional[str] = None
    rivalry: Optional[str] = None
    notes: Optional[str] = None
    team_a: Tuple[str, ...] = ()
    team_b: Tuple[str, ...] = ()
    team_c: Tuple[str, ...] = ()
    stats: Dict[str, StatLine] = field(default_factory=dict)
    motm: Tuple[str, ...] = ()
    hattricks: Tuple[str, ...] = ()
    clean_sheet_player: Optional[str] = None
    applied: Dict[str, AppliedEntry] = field(default_factory=dict)

    def roster(self, team: Team) -> Tuple[str, ...]:
        return {Team.A: self.team_a, Team.B: self.team_b, Team.C: self.team_c}[Team(team)]

    def team_set(self) -> frozenset:
        """Current membership across all three rosters"""
        return frozenset(self.team_a) | frozenset(self.team_b) | frozenset(self.team_c)

    def team_of(self, player_id: str) -> Optional[Team]:
        for team in Team:
            if player_id in self.roster(team):
                return team
        return None

    def live_ledger(self) -> Dict[str, StatLine]:
        return dict(self.stats)

    def committed_snapshot(self) -> Dict[str, AppliedEntry]:
        return dict(self.applied)

    def awards(self, award: AwardField) -> Tuple[str, ...]:
        return self.motm if AwardField(award) == AwardField.MOTM else self.hattricks

    @property
    def kickoff(self) -> str:
        """Sort key combining date and optional time"""
        return f"{self.date}{self.time or ''}"

    def __str__(self) -> str:
        parts = [self.date]
        if self.time:
            parts.append(self.time)
        parts.append(self.location or "—")
        if self.rivalry:
            parts.append(f"🔥 {self.rivalry}")
        return " • ".join(parts)


@dataclass(frozen=True)
class NewsItem:
    id: str
    title: str
    date: str  # ISO timestamp of creation
    details: Optional[str] = None
    rivalry: Optional[str] = None
    img: Optional[str] = None  # URL or data URL, stored as-is


@dataclass(frozen=True)
class LadderRow:
    """One rung of the pricing ladder"""
    threshold: float  # inclusive lower bound on score
    price: float      # M$ per match
    label: str


@dataclass(frozen=True)
class PlayerValuation:
    """Display-ready values derived from a player's counters"""
    player: Player
    score: float
    price_per_match: float
    tier: str
    bonus: float
    total: float

    @property
    def id(self) -> str:
        return self.player.id

    @property
    def name(self) -> str:
        return self.player.name
