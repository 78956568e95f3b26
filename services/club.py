"""
Club service: the boundary between the pages and the domain.

Reads need nothing; every mutation takes an ``AdminSession`` and refuses to
run without one. State is read from the repository at the start of each
operation and written back before it returns.

Blank required fields (player name, match date, news title) and unknown ids
are silent no-ops that return None.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from domain import ledger
from domain.auth import AdminSession, require_admin
from domain.models import (
    AwardField, Match, MatchStatus, NewsItem, Player, PlayerValuation, Role, StatKind, Team, new_id,
)
from domain.reconciliation import ReconciliationResult, apply_to_totals
from domain.validators import counters_from_form, is_blank
from domain.valuation import rank_players, search_players, value_players
from services import audit
from services.logger import setup_logger
from services.repository import ClubRepository

logger = setup_logger(__name__)


def _opt(value: Optional[str]) -> Optional[str]:
    return value.strip() if value and value.strip() else None


class ClubService:
    def __init__(self, repo: ClubRepository | None = None, data_dir: Path | None = None) -> None:
        self.repo = repo or ClubRepository(data_dir)

    # ------------------------------------------------------------------ reads
    def players(self) -> List[Player]:
        return self.repo.load_players()

    def get_player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players() if p.id == player_id), None)

    def valuations(self, query: str = "") -> List[PlayerValuation]:
        vals = value_players(self.players(), self.repo.load_policies())
        return search_players(vals, query) if query else vals

    def ranking(self) -> List[PlayerValuation]:
        return rank_players(self.players(), self.repo.load_policies())

    def news(self) -> List[NewsItem]:
        return self.repo.load_news()

    def matches(self) -> List[Match]:
        return self.repo.load_matches()

    def get_match(self, match_id: str) -> Optional[Match]:
        return next((m for m in self.matches() if m.id == match_id), None)

    def upcoming(self) -> List[Match]:
        """Soonest first"""
        return sorted((m for m in self.matches() if m.status == MatchStatus.UPCOMING), key=lambda m: m.kickoff)

    def played(self) -> List[Match]:
        """Most recent first"""
        return sorted(
            (m for m in self.matches() if m.status == MatchStatus.PLAYED), key=lambda m: m.kickoff, reverse=True
        )

    # ---------------------------------------------------------------- players
    def add_player(
        self,
        session: Optional[AdminSession],
        name: str,
        photo: str = "",
        role: Role = Role.MID,
        **counters,
    ) -> Optional[Player]:
        require_admin(session)
        if is_blank(name):
            return None
        player = Player.create(name.strip(), photo=photo or "", role=Role(role), **counters_from_form(counters))
        self.repo.save_players(self.players() + [player])
        audit.log_event("player_added", {"id": player.id, "name": player.name}, self.repo.data_dir)
        logger.info("Added player %s (%s)", player.name, player.id)
        return player

    def update_player(
        self,
        session: Optional[AdminSession],
        player_id: str,
        name: str,
        photo: str = "",
        role: Role = Role.MID,
        **counters,
    ) -> Optional[Player]:
        """Overwrite every editable field of an existing player."""
        require_admin(session)
        if is_blank(name):
            return None
        players = self.players()
        current = next((p for p in players if p.id == player_id), None)
        if current is None:
            return None
        updated = replace(
            current, name=name.strip(), photo=photo or "", role=Role(role), **counters_from_form(counters)
        )
        self.repo.save_players([updated if p.id == player_id else p for p in players])
        audit.log_event(
            "player_updated",
            {"id": player_id, "name": updated.name, **counters_from_form(counters)},
            self.repo.data_dir,
        )
        return updated

    def delete_player(self, session: Optional[AdminSession], player_id: str) -> bool:
        """Remove a player; match rosters keep the id and skip it when shown."""
        require_admin(session)
        players = self.players()
        kept = [p for p in players if p.id != player_id]
        if len(kept) == len(players):
            return False
        self.repo.save_players(kept)
        audit.log_event("player_deleted", {"id": player_id}, self.repo.data_dir)
        return True

    # ------------------------------------------------------------------- news
    def add_news(
        self,
        session: Optional[AdminSession],
        title: str,
        details: Optional[str] = None,
        rivalry: Optional[str] = None,
        img: Optional[str] = None,
    ) -> Optional[NewsItem]:
        require_admin(session)
        if is_blank(title):
            return None
        item = NewsItem(
            id=new_id(),
            title=title.strip(),
            date=datetime.now(timezone.utc).isoformat(),
            details=_opt(details),
            rivalry=_opt(rivalry),
            img=img or None,
        )
        self.repo.save_news([item] + self.news())
        audit.log_event("news_added", {"id": item.id, "title": item.title}, self.repo.data_dir)
        return item

    def update_news(
        self,
        session: Optional[AdminSession],
        news_id: str,
        title: str,
        details: Optional[str] = None,
        rivalry: Optional[str] = None,
        img: Optional[str] = None,
    ) -> Optional[NewsItem]:
        """Edit a news item in place; creation date is kept and an empty ``img`` keeps the old one."""
        require_admin(session)
        if is_blank(title):
            return None
        items = self.news()
        current = next((n for n in items if n.id == news_id), None)
        if current is None:
            return None
        updated = replace(
            current, title=title.strip(), details=_opt(details), rivalry=_opt(rivalry), img=img or current.img
        )
        self.repo.save_news([updated if n.id == news_id else n for n in items])
        audit.log_event("news_updated", {"id": news_id, "title": updated.title}, self.repo.data_dir)
        return updated

    def delete_news(self, session: Optional[AdminSession], news_id: str) -> bool:
        require_admin(session)
        items = self.news()
        kept = [n for n in items if n.id != news_id]
        if len(kept) == len(items):
            return False
        self.repo.save_news(kept)
        audit.log_event("news_deleted", {"id": news_id}, self.repo.data_dir)
        return True

    # ---------------------------------------------------------------- matches
    def add_match(
        self,
        session: Optional[AdminSession],
        date: str,
        status: MatchStatus = MatchStatus.UPCOMING,
        time: Optional[str] = None,
        location: Optional[str] = None,
        rivalry: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Optional[Match]:
        require_admin(session)
        if is_blank(date):
            return None
        match = Match(
            id=new_id(),
            date=date.strip(),
            status=MatchStatus(status),
            time=_opt(time),
            location=_opt(location),
            rivalry=_opt(rivalry),
            notes=_opt(notes),
        )
        self.repo.save_matches([match] + self.matches())
        audit.log_event("match_added", {"id": match.id, "date": match.date, "status": match.status}, self.repo.data_dir)
        return match

    def delete_match(self, session: Optional[AdminSession], match_id: str) -> bool:
        """Delete a match record. Totals already committed from it stay as they are."""
        require_admin(session)
        matches = self.matches()
        kept = [m for m in matches if m.id != match_id]
        if len(kept) == len(matches):
            return False
        self.repo.save_matches(kept)
        audit.log_event("match_deleted", {"id": match_id}, self.repo.data_dir)
        return True

    def _edit_match(
        self, session: Optional[AdminSession], match_id: str, edit: Callable[[Match], Match]
    ) -> Optional[Match]:
        require_admin(session)
        matches = self.matches()
        current = next((m for m in matches if m.id == match_id), None)
        if current is None:
            return None
        updated = edit(current)
        self.repo.save_matches([updated if m.id == match_id else m for m in matches])
        return updated

    def mark_played(self, session: Optional[AdminSession], match_id: str) -> Optional[Match]:
        match = self._edit_match(session, match_id, ledger.mark_played)
        if match is not None:
            audit.log_event("match_played", {"id": match_id}, self.repo.data_dir)
        return match

    def assign_to_team(self, session: Optional[AdminSession], match_id: str, player_id: str, team: Team) -> Optional[Match]:
        return self._edit_match(session, match_id, lambda m: ledger.assign_to_team(m, player_id, team))

    def unassign(self, session: Optional[AdminSession], match_id: str, player_id: str) -> Optional[Match]:
        return self._edit_match(session, match_id, lambda m: ledger.unassign(m, player_id))

    def set_stat(
        self, session: Optional[AdminSession], match_id: str, player_id: str, kind: StatKind, value: int
    ) -> Optional[Match]:
        return self._edit_match(session, match_id, lambda m: ledger.set_stat(m, player_id, kind, value))

    def toggle_award(
        self, session: Optional[AdminSession], match_id: str, award: AwardField, player_id: str
    ) -> Optional[Match]:
        return self._edit_match(session, match_id, lambda m: ledger.toggle_award(m, award, player_id))

    def clear_award(self, session: Optional[AdminSession], match_id: str, award: AwardField) -> Optional[Match]:
        return self._edit_match(session, match_id, lambda m: ledger.clear_award(m, award))

    def set_clean_sheet(
        self, session: Optional[AdminSession], match_id: str, player_id: Optional[str]
    ) -> Optional[Match]:
        return self._edit_match(session, match_id, lambda m: ledger.set_clean_sheet(m, player_id))

    def clear_clean_sheet(self, session: Optional[AdminSession], match_id: str) -> Optional[Match]:
        return self._edit_match(session, match_id, ledger.clear_clean_sheet)

    # --------------------------------------------------------- reconciliation
    def reconcile(self, session: Optional[AdminSession], match_id: str) -> Optional[ReconciliationResult]:
        """Commit a match's sheet into career totals, then save players and match."""
        require_admin(session)
        matches = self.matches()
        match = next((m for m in matches if m.id == match_id), None)
        if match is None:
            return None
        result = apply_to_totals(self.players(), match)
        self.repo.save_players(result.players)
        self.repo.save_matches([result.match if m.id == match_id else m for m in matches])
        changed = result.changed
        audit.log_event("reconciled", {"match_id": match_id, "deltas": changed}, self.repo.data_dir)
        logger.info("Reconciled match %s: %d player(s) changed", match_id, len(changed))
        return result
