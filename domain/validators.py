"""
Validation helpers for the persisted JSON records (players, matches, news).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .models import MatchStatus, Role


class PlayerRecord(BaseModel):
    id: str
    name: str
    photo: str = ""
    role: Role = Role.MID
    goals: int = 0
    assists: int = 0
    matches: int = 0
    motmCount: int = 0
    hattrickCount: int = 0
    cleanSheetCount: int = 0


class StatRecord(BaseModel):
    goals: int = 0
    assists: int = 0


class AppliedRecord(BaseModel):
    goals: int = 0
    assists: int = 0
    counted: bool = False


class MatchRecord(BaseModel):
    id: str
    date: str
    time: Optional[str] = None
    location: Optional[str] = None
    rivalry: Optional[str] = None
    notes: Optional[str] = None
    status: MatchStatus = MatchStatus.UPCOMING
    teamA: List[str] = Field(default_factory=list)
    teamB: List[str] = Field(default_factory=list)
    teamC: List[str] = Field(default_factory=list)
    stats: Dict[str, StatRecord] = Field(default_factory=dict)
    motm: List[str] = Field(default_factory=list)
    hattricks: List[str] = Field(default_factory=list)
    cleanSheetPlayer: Optional[str] = None
    applied: Dict[str, AppliedRecord] = Field(default_factory=dict)


class NewsRecord(BaseModel):
    id: str
    title: str
    date: str
    details: Optional[str] = None
    rivalry: Optional[str] = None
    img: Optional[str] = None


def _validate_list(model: type, data: Any, what: str) -> list:
    try:
        return TypeAdapter(List[model]).validate_python(data)
    except ValidationError as e:
        # Re-raise with a cleaner message for UI consumption
        raise ValueError(f"{what} validation failed: {e}")


def validate_players(data: Any) -> List[PlayerRecord]:
    return _validate_list(PlayerRecord, data, "Players")


def validate_matches(data: Any) -> List[MatchRecord]:
    return _validate_list(MatchRecord, data, "Matches")


def validate_news(data: Any) -> List[NewsRecord]:
    return _validate_list(NewsRecord, data, "News")


def is_blank(value: Optional[str]) -> bool:
    """Required text fields that are empty or whitespace abort the operation."""
    return not value or not str(value).strip()


def counters_from_form(form: Dict[str, Any]) -> Dict[str, int]:
    """Coerce the numeric player form fields; missing or junk values become 0."""
    out: Dict[str, int] = {}
    for key in ("goals", "assists", "matches", "motm_count", "hattrick_count", "clean_sheet_count"):
        try:
            out[key] = max(0, int(form.get(key) or 0))
        except (TypeError, ValueError):
            out[key] = 0
    return out
