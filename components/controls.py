"""
Controls: admin unlock in the sidebar, entity forms and the match sheet editors.
Widgets only; every change goes through ClubService with the caller's token.
"""
from __future__ import annotations

import base64
from typing import Any, Dict, List, Optional

import streamlit as st

from domain.auth import AdminSession, unlock
from domain.ledger import lineup_players, roster_players
from domain.models import AwardField, Match, MatchStatus, Player, Role, StatKind, Team
from services.club import ClubService
from services.config import Config

SESSION_KEY = "admin_session"


def current_session() -> Optional[AdminSession]:
    return st.session_state.get(SESSION_KEY)


def admin_sidebar() -> Optional[AdminSession]:
    """Unlock/lock admin mode; returns the token held by this browser session."""
    st.sidebar.header("Access")
    session = current_session()
    if session is not None:
        st.sidebar.success("🔓 Admin mode")
        if st.sidebar.button("Lock", key="admin_lock"):
            st.session_state.pop(SESSION_KEY, None)
            st.rerun()
        return session

    st.sidebar.caption("🔒 Viewer mode")
    if not Config.admin_enabled():
        st.sidebar.warning("Admin PIN not set. Add FP_ADMIN_CODE to .env and restart the app.")
        return None
    pin = st.sidebar.text_input("Admin code", type="password", key="admin_pin")
    if st.sidebar.button("Unlock", key="admin_unlock"):
        token = unlock(pin, Config.ADMIN_CODE)
        if token is None:
            st.sidebar.error("Wrong code.")
        else:
            st.session_state[SESSION_KEY] = token
            st.rerun()
    return None


def as_data_url(upload) -> Optional[str]:
    """Encode an uploaded image so it can be stored alongside the JSON records."""
    if upload is None:
        return None
    data = base64.b64encode(upload.getvalue()).decode("ascii")
    return f"data:{upload.type};base64,{data}"


def player_form(existing: Optional[Player] = None, key: str = "player_form") -> Optional[Dict[str, Any]]:
    """Add/edit player form; returns submitted values or None."""
    p = existing or Player(id="", name="")
    with st.form(key, clear_on_submit=existing is None):
        name = st.text_input("Name", value=p.name)
        photo = st.text_input("Photo URL (optional)", value=p.photo if not p.photo.startswith("data:") else "")
        upload = st.file_uploader("Upload photo", type=["png", "jpg", "jpeg", "webp"])
        role = st.selectbox("Role", options=list(Role), format_func=lambda r: r.value, index=list(Role).index(p.role))
        c1, c2, c3 = st.columns(3)
        goals = c1.number_input("Goals", min_value=0, step=1, value=p.goals)
        assists = c2.number_input("Assists", min_value=0, step=1, value=p.assists)
        matches = c3.number_input("Matches", min_value=0, step=1, value=p.matches)
        c4, c5, c6 = st.columns(3)
        motm = c4.number_input("MOTM (×0.5M)", min_value=0, step=1, value=p.motm_count)
        hattricks = c5.number_input("Hat-tricks (×0.3M)", min_value=0, step=1, value=p.hattrick_count)
        clean_sheets = c6.number_input("Clean sheets (×0.3M)", min_value=0, step=1, value=p.clean_sheet_count)
        submitted = st.form_submit_button("Save changes" if existing else "Add player", type="primary")
    if not submitted:
        return None
    return {
        "name": name,
        "photo": as_data_url(upload) or photo or (p.photo if existing else ""),
        "role": role,
        "goals": goals,
        "assists": assists,
        "matches": matches,
        "motm_count": motm,
        "hattrick_count": hattricks,
        "clean_sheet_count": clean_sheets,
    }


def match_form(status: MatchStatus, key: str) -> Optional[Dict[str, Any]]:
    with st.form(key, clear_on_submit=True):
        date = st.date_input("Date", value=None)
        time = st.time_input("Time", value=None)
        location = st.text_input("Location")
        rivalry = st.text_input("Rivalry (optional)")
        notes = st.text_input("Notes (optional)")
        label = "Add to calendar" if status == MatchStatus.UPCOMING else "Add match"
        submitted = st.form_submit_button(label, type="primary")
    if not submitted:
        return None
    return {
        "date": date.isoformat() if date else "",
        "time": time.strftime("%H:%M") if time else None,
        "location": location,
        "rivalry": rivalry,
        "notes": notes,
        "status": status,
    }


def team_editor(service: ClubService, match: Match, players: List[Player], session: Optional[AdminSession]) -> None:
    cols = st.columns(3)
    names = {p.id: p.name for p in players}
    for col, team in zip(cols, Team):
        with col:
            st.markdown(f"**Team {team.value}**")
            if session is not None:
                choice = st.selectbox(
                    "Add player…",
                    options=[""] + [p.id for p in players],
                    format_func=lambda pid: names.get(pid, "Add player…") if pid else "Add player…",
                    key=f"add_{match.id}_{team.value}",
                    label_visibility="collapsed",
                )
                if choice:
                    service.assign_to_team(session, match.id, choice, team)
                    st.session_state.pop(f"add_{match.id}_{team.value}", None)
                    st.rerun()
            for p in roster_players(match, team, players):
                c1, c2 = st.columns([4, 1])
                c1.write(f"{p.name} ({p.role.value})")
                if session is not None and c2.button("✕", key=f"rm_{match.id}_{p.id}", help="Remove from team"):
                    service.unassign(session, match.id, p.id)
                    st.rerun()


def stat_sheet(service: ClubService, match: Match, players: List[Player], session: Optional[AdminSession]) -> None:
    lineup = lineup_players(match, players)
    if not lineup:
        st.caption("Add players to teams to edit their stats.")
        return
    for p in lineup:
        line = match.stats.get(p.id)
        goals_now = line.goals if line else 0
        assists_now = line.assists if line else 0
        c1, c2, c3 = st.columns([3, 1, 1])
        c1.write(p.name)
        goals = c2.number_input(
            "Goals", min_value=0, step=1, value=goals_now, disabled=session is None, key=f"g_{match.id}_{p.id}"
        )
        assists = c3.number_input(
            "Assists", min_value=0, step=1, value=assists_now, disabled=session is None, key=f"a_{match.id}_{p.id}"
        )
        if session is not None and goals != goals_now:
            service.set_stat(session, match.id, p.id, StatKind.GOALS, goals)
        if session is not None and assists != assists_now:
            service.set_stat(session, match.id, p.id, StatKind.ASSISTS, assists)


def awards_editor(service: ClubService, match: Match, players: List[Player], session: Optional[AdminSession]) -> None:
    disabled = session is None
    c1, c2, c3 = st.columns(3)
    for col, award, title in ((c1, AwardField.MOTM, "MOTM"), (c2, AwardField.HATTRICKS, "Hat-tricks")):
        with col:
            st.markdown(f"**{title}**")
            if not disabled and st.button("Clear", key=f"clear_{award.value}_{match.id}"):
                service.clear_award(session, match.id, award)
                st.rerun()
            selected = match.awards(award)
            for p in players:
                checked = st.checkbox(
                    p.name, value=p.id in selected, disabled=disabled, key=f"{award.value}_{match.id}_{p.id}"
                )
                if not disabled and checked != (p.id in selected):
                    service.toggle_award(session, match.id, award, p.id)
    with c3:
        st.markdown("**Clean sheet**")
        if not disabled and st.button("Clear", key=f"clear_cs_{match.id}"):
            service.clear_clean_sheet(session, match.id)
            st.session_state.pop(f"cs_{match.id}", None)
            st.rerun()
        options = [""] + [p.id for p in players]
        names = {p.id: p.name for p in players}
        current = match.clean_sheet_player if match.clean_sheet_player in names else ""
        choice = st.selectbox(
            "Clean sheet",
            options=options,
            index=options.index(current),
            format_func=lambda pid: names.get(pid, "—"),
            disabled=disabled,
            key=f"cs_{match.id}",
            label_visibility="collapsed",
        )
        if not disabled and choice != current:
            service.set_clean_sheet(session, match.id, choice or None)
