import streamlit as st

from components.controls import admin_sidebar
from components.tables import ladder_table
from domain.ladder import LADDER
from services.club import ClubService

st.set_page_config(page_title="Settings", page_icon="⚙️")
st.title("⚙️ Settings / Info")

admin_sidebar()
pol = ClubService().repo.load_policies()

st.markdown(f"Average score = ((Goals × 1) + (Assists × {pol.assistWeight})) ÷ Matches")
st.markdown("Total = Price per match × (Matches ÷ 2) + Bonus")
st.markdown(
    f"Bonus: MOTM +{pol.motmBonus}, Hat-trick +{pol.hattrickBonus}, Clean sheet +{pol.cleanSheetBonus}."
)
st.caption("Weights can be overridden in data/policies.json.")

st.subheader("Ladder")
ladder_table(LADDER)
