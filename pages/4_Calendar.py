import streamlit as st

from components.banners import match_banner
from components.controls import admin_sidebar, match_form, team_editor
from domain.models import MatchStatus
from services.club import ClubService

st.set_page_config(page_title="Calendar", page_icon="📅", layout="wide")
st.title("📅 Calendar (upcoming)")

session = admin_sidebar()
service = ClubService()
selected_id = st.session_state.get("selected_match")

left, right = st.columns([2, 3])
with left:
    st.subheader("📅 Add upcoming match")
    if session is None:
        st.caption("Unlock admin mode to add matches.")
    else:
        values = match_form(MatchStatus.UPCOMING, key="add_upcoming")
        if values is not None:
            service.add_match(session, **values)
            st.rerun()

with right:
    st.subheader("📆 Upcoming")
    upcoming = service.upcoming()
    if not upcoming:
        st.caption("No upcoming matches.")
    players = service.players() if upcoming else []
    for m in upcoming:
        with st.container(border=True):
            match_banner(m)
            c1, c2, c3 = st.columns(3)
            if selected_id == m.id:
                if c1.button("Close", key=f"close_{m.id}"):
                    st.session_state.pop("selected_match", None)
                    st.rerun()
            elif c1.button("Open", key=f"open_{m.id}"):
                st.session_state["selected_match"] = m.id
                st.rerun()
            if session is not None and c2.button("Convert to played", key=f"play_{m.id}"):
                service.mark_played(session, m.id)
                st.rerun()
            if session is not None and c3.button("Delete", key=f"del_{m.id}"):
                service.delete_match(session, m.id)
                st.rerun()
            if selected_id == m.id:
                team_editor(service, m, players, session)
