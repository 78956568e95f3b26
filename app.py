"""
Youth Football Tracker - Main Application Entry Point

This is a thin bootstrapper that configures Streamlit and shows the news feed.
All business logic is contained in the domain/ and services/ modules.
"""

import streamlit as st

from components.banners import header_banner
from components.cards import news_card
from components.controls import admin_sidebar, as_data_url
from services.club import ClubService

# Configure Streamlit page
st.set_page_config(
    page_title="⚽ Youth Football Tracker",
    page_icon="⚽",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for better styling
st.markdown("""
<style>
    .main > div {
        padding-top: 2rem;
    }
    .club-banner {
        background: linear-gradient(90deg, #2563eb, #14b8a6, #22c55e);
        color: white;
        border-radius: 16px;
        padding: 1rem 1.5rem;
        margin-bottom: 1rem;
    }
</style>
""", unsafe_allow_html=True)


def _news_editor(service: ClubService, session, item) -> None:
    with st.form(f"edit_news_{item.id}"):
        title = st.text_input("Title", value=item.title)
        details = st.text_input("Details", value=item.details or "")
        rivalry = st.text_input("Rivalry", value=item.rivalry or "")
        upload = st.file_uploader("Replace image", type=["png", "jpg", "jpeg", "webp"])
        c1, c2 = st.columns(2)
        save = c1.form_submit_button("Save", type="primary")
        cancel = c2.form_submit_button("Cancel")
    if save:
        service.update_news(session, item.id, title, details, rivalry, as_data_url(upload))
        st.session_state.pop("editing_news", None)
        st.rerun()
    if cancel:
        st.session_state.pop("editing_news", None)
        st.rerun()


def main():
    """Main application entry point"""
    session = admin_sidebar()
    header_banner(session is not None)
    st.caption("Manage players, matches, stats & news — with automatic pricing and rankings.")

    service = ClubService()
    left, right = st.columns([3, 1])
    with left:
        st.subheader("📰 Latest News & Rivalries")
        if session is not None:
            with st.form("add_news", clear_on_submit=True):
                title = st.text_input("Title")
                details = st.text_input("Details (optional)")
                rivalry = st.text_input("Rivalry (optional)")
                upload = st.file_uploader("Image (optional)", type=["png", "jpg", "jpeg", "webp"])
                if st.form_submit_button("Add news", type="primary"):
                    service.add_news(session, title, details, rivalry, as_data_url(upload))

        items = service.news()
        if not items:
            st.info("No news yet.")
        for item in items:
            if session is not None and st.session_state.get("editing_news") == item.id:
                _news_editor(service, session, item)
                continue
            news_card(item)
            if session is not None:
                c1, c2, _ = st.columns([1, 1, 6])
                if c1.button("Edit", key=f"edit_{item.id}"):
                    st.session_state["editing_news"] = item.id
                    st.rerun()
                if c2.button("Delete", key=f"del_{item.id}"):
                    service.delete_news(session, item.id)
                    st.rerun()
    with right:
        st.subheader("📌 Tips")
        st.markdown(
            "- Friends see Viewer mode. Enter the admin code in the sidebar to edit.\n"
            "- All data is stored locally in the app's data folder."
        )


if __name__ == "__main__":
    main()
