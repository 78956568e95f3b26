import streamlit as st

from components.controls import admin_sidebar
from services.audit import read_events
from services.config import Config

st.set_page_config(page_title="Audit", page_icon="📊")
st.title("📊 Audit log")

session = admin_sidebar()
if session is None:
    st.info("Unlock admin mode to view the audit log.")
    st.stop()

rows = read_events(Config.DATA_DIR)
if not rows:
    st.info("No admin activity recorded yet.")
    st.stop()

st.caption(f"Showing {len(rows)} most recent events")
for r in rows:
    with st.expander(f"{r.get('ts')} • {r.get('event')}"):
        st.json(r.get("payload", {}))
