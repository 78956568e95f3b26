import streamlit as st

from components.controls import admin_sidebar
from components.tables import ranking_table
from services.club import ClubService

st.set_page_config(page_title="Ranking", page_icon="🏆", layout="wide")
st.title("🏆 Ranking (Total value)")

admin_sidebar()
ranking = ClubService().ranking()
if not ranking:
    st.info("No players yet.")
else:
    ranking_table(ranking)
