import streamlit as st

from components.cards import player_card
from components.controls import admin_sidebar, player_form
from services.club import ClubService

st.set_page_config(page_title="Players", page_icon="👟", layout="wide")
st.title("👟 Players")

session = admin_sidebar()
service = ClubService()

if session is not None:
    editing_id = st.session_state.get("editing_player")
    editing = service.get_player(editing_id) if editing_id else None
    with st.expander("✏️ Edit player" if editing else "➕ Add player", expanded=editing is not None):
        values = player_form(editing, key=f"player_form_{editing.id}" if editing else "player_form_new")
        if values is not None:
            if editing:
                service.update_player(session, editing.id, **values)
                st.session_state.pop("editing_player", None)
            else:
                service.add_player(session, **values)
            st.rerun()
        if editing and st.button("Cancel"):
            st.session_state.pop("editing_player", None)
            st.rerun()

query = st.text_input("Search player…")
vals = service.valuations(query)
if not vals:
    st.info("No players found.")

cols = st.columns(3)
for i, val in enumerate(vals):
    with cols[i % 3]:
        player_card(val)
        if session is not None:
            c1, c2 = st.columns(2)
            if c1.button("Edit", key=f"edit_{val.id}"):
                st.session_state["editing_player"] = val.id
                st.rerun()
            if c2.button("Delete", key=f"del_{val.id}"):
                service.delete_player(session, val.id)
                st.rerun()
