"""
Repository helpers for reading/writing the club's JSON data files
(players, news, matches) and optional valuation policy overrides.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from domain.models import AppliedEntry, Match, NewsItem, Player, StatLine
from domain.policies import ValuationPolicies
from domain.seed import builtin_players
from domain.validators import (
    MatchRecord, NewsRecord, PlayerRecord,
    validate_matches, validate_news, validate_players,
)
from services.config import Config

PLAYERS_FILE = "players.json"
NEWS_FILE = "news.json"
MATCHES_FILE = "matches.json"


def serialize_player(p: Player) -> Dict[str, Any]:
    return {
        "id": p.id,
        "name": p.name,
        "photo": p.photo,
        "role": p.role.value,
        "goals": p.goals,
        "assists": p.assists,
        "matches": p.matches,
        "motmCount": p.motm_count,
        "hattrickCount": p.hattrick_count,
        "cleanSheetCount": p.clean_sheet_count,
    }


def deserialize_player(r: PlayerRecord) -> Player:
    return Player(
        id=r.id,
        name=r.name,
        photo=r.photo,
        role=r.role,
        goals=r.goals,
        assists=r.assists,
        matches=r.matches,
        motm_count=r.motmCount,
        hattrick_count=r.hattrickCount,
        clean_sheet_count=r.cleanSheetCount,
    )


def serialize_match(m: Match) -> Dict[str, Any]:
    return {
        "id": m.id,
        "date": m.date,
        "time": m.time,
        "location": m.location,
        "rivalry": m.rivalry,
        "notes": m.notes,
        "status": m.status.value,
        "teamA": list(m.team_a),
        "teamB": list(m.team_b),
        "teamC": list(m.team_c),
        "stats": {pid: {"goals": s.goals, "assists": s.assists} for pid, s in m.stats.items()},
        "motm": list(m.motm),
        "hattricks": list(m.hattricks),
        "cleanSheetPlayer": m.clean_sheet_player,
        "applied": {
            pid: {"goals": a.goals, "assists": a.assists, "counted": a.counted}
            for pid, a in m.applied.items()
        },
    }


def deserialize_match(r: MatchRecord) -> Match:
    return Match(
        id=r.id,
        date=r.date,
        time=r.time,
        location=r.location,
        rivalry=r.rivalry,
        notes=r.notes,
        status=r.status,
        team_a=tuple(r.teamA),
        team_b=tuple(r.teamB),
        team_c=tuple(r.teamC),
        stats={pid: StatLine(s.goals, s.assists) for pid, s in r.stats.items()},
        motm=tuple(dict.fromkeys(r.motm)),
        hattricks=tuple(dict.fromkeys(r.hattricks)),
        clean_sheet_player=r.cleanSheetPlayer,
        applied={pid: AppliedEntry(a.goals, a.assists, a.counted) for pid, a in r.applied.items()},
    )


def serialize_news(n: NewsItem) -> Dict[str, Any]:
    return {
        "id": n.id,
        "title": n.title,
        "details": n.details,
        "rivalry": n.rivalry,
        "date": n.date,
        "img": n.img,
    }


def deserialize_news(r: NewsRecord) -> NewsItem:
    return NewsItem(id=r.id, title=r.title, date=r.date, details=r.details, rivalry=r.rivalry, img=r.img)


class ClubRepository:
    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = Path(data_dir or Config.DATA_DIR)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _read(self, name: str) -> Any:
        fp = self.data_dir / name
        if not fp.exists():
            return None
        with fp.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, name: str, data: Any) -> None:
        fp = self.data_dir / name
        tmp = fp.with_suffix(fp.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        tmp.replace(fp)

    def load_players(self) -> List[Player]:
        raw = self._read(PLAYERS_FILE)
        if raw is None:
            # Seed is written straight away so its ids stay stable across reruns
            players = builtin_players()
            self.save_players(players)
            return players
        return [deserialize_player(r) for r in validate_players(raw)]

    def save_players(self, players: List[Player]) -> None:
        self._write(PLAYERS_FILE, [serialize_player(p) for p in players])

    def load_matches(self) -> List[Match]:
        raw = self._read(MATCHES_FILE)
        if not raw:
            return []
        return [deserialize_match(r) for r in validate_matches(raw)]

    def save_matches(self, matches: List[Match]) -> None:
        self._write(MATCHES_FILE, [serialize_match(m) for m in matches])

    def load_news(self) -> List[NewsItem]:
        raw = self._read(NEWS_FILE)
        if not raw:
            return []
        return [deserialize_news(r) for r in validate_news(raw)]

    def save_news(self, news: List[NewsItem]) -> None:
        self._write(NEWS_FILE, [serialize_news(n) for n in news])

    def load_policies(self) -> ValuationPolicies:
        fp = self.data_dir / "policies.json"
        if not fp.exists():
            return ValuationPolicies()
        try:
            raw = json.loads(fp.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return ValuationPolicies()
        if not isinstance(raw, dict):
            return ValuationPolicies()
        pol = ValuationPolicies()
        pol.version = raw.get("version", pol.version)
        pol.assistWeight = float(raw.get("assistWeight", pol.assistWeight))
        pol.motmBonus = float(raw.get("motmBonus", pol.motmBonus))
        pol.hattrickBonus = float(raw.get("hattrickBonus", pol.hattrickBonus))
        pol.cleanSheetBonus = float(raw.get("cleanSheetBonus", pol.cleanSheetBonus))
        pol.scoreDecimals = int(raw.get("scoreDecimals", pol.scoreDecimals))
        pol.valueDecimals = int(raw.get("valueDecimals", pol.valueDecimals))
        return pol
