"""
Banner components for the page header and match summaries.
"""
from __future__ import annotations

import streamlit as st
from domain.models import Match


def header_banner(is_admin: bool) -> None:
    mode = "🔓 Admin" if is_admin else "🔒 Viewer"
    st.markdown(
        f"<div class='club-banner'><strong>⚽ Youth Football Tracker</strong> — {mode}</div>",
        unsafe_allow_html=True,
    )


def match_banner(match: Match) -> None:
    st.markdown(f"**{match}**")
    if match.notes:
        st.caption(match.notes)
