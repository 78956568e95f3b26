import streamlit as st

from components.banners import match_banner
from components.controls import admin_sidebar, awards_editor, match_form, stat_sheet, team_editor
from domain.models import MatchStatus
from services.club import ClubService

st.set_page_config(page_title="Matches", page_icon="📋", layout="wide")
st.title("📋 Matches (played)")

session = admin_sidebar()
service = ClubService()
selected_id = st.session_state.get("selected_match")

left, right = st.columns([2, 3])
with left:
    if session is not None:
        st.subheader("➕ Add played match")
        values = match_form(MatchStatus.PLAYED, key="add_played")
        if values is not None:
            service.add_match(session, **values)
            st.rerun()

    st.subheader("📋 Played matches")
    played = service.played()
    if not played:
        st.caption("No played matches.")
    for m in played:
        with st.container(border=True):
            match_banner(m)
            c1, c2 = st.columns(2)
            if selected_id == m.id:
                if c1.button("Close", key=f"close_{m.id}"):
                    st.session_state.pop("selected_match", None)
                    st.rerun()
            elif c1.button("Open", key=f"open_{m.id}"):
                st.session_state["selected_match"] = m.id
                st.rerun()
            if session is not None and c2.button("Delete", key=f"del_{m.id}"):
                service.delete_match(session, m.id)
                if selected_id == m.id:
                    st.session_state.pop("selected_match", None)
                st.rerun()

with right:
    st.subheader("📑 Match details (played)")
    match = service.get_match(selected_id) if selected_id else None
    if match is None or match.status != MatchStatus.PLAYED:
        st.caption("Select a played match to view teams, stats & awards.")
    else:
        match_banner(match)
        c1, c2 = st.columns(2)
        if session is not None and c1.button("Save changes & close", type="primary"):
            result = service.reconcile(session, match.id)
            st.session_state.pop("selected_match", None)
            if result is not None:
                st.toast(f"Totals updated for {len(result.changed)} player(s).")
            st.rerun()
        if c2.button("Close"):
            st.session_state.pop("selected_match", None)
            st.rerun()

        players = service.players()
        st.markdown("#### Teams")
        team_editor(service, match, players, session)
        st.markdown("#### Stats for this match")
        stat_sheet(service, match, players, session)
        st.markdown("#### Awards")
        awards_editor(service, match, players, session)
