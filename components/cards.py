"""
Player and news card components.
"""
from __future__ import annotations

import streamlit as st
from domain.models import NewsItem, PlayerValuation

DEFAULT_PHOTO = "https://placehold.co/96x96?text=%E2%9A%BD"


def player_card(val: PlayerValuation) -> None:
    p = val.player
    with st.container(border=True):
        c1, c2 = st.columns([1, 3])
        with c1:
            st.image(p.photo or DEFAULT_PHOTO, width=72)
        with c2:
            st.markdown(f"**{p.name}**")
            st.caption(f"Role: {p.role.value}")
            st.caption(f"Lvl: **{val.tier}** • Price/m: **{val.price_per_match} M$**")
        g, a, m = st.columns(3)
        g.markdown(f"**G**: {p.goals}")
        a.markdown(f"**A**: {p.assists}")
        m.markdown(f"**M**: {p.matches}")
        s, b, t = st.columns(3)
        s.markdown(f"**Score/m**: {val.score}")
        b.markdown(f"**Bonus**: {val.bonus} M$")
        t.markdown(f"**Total**: {val.total} M$")


def news_card(item: NewsItem) -> None:
    with st.container(border=True):
        st.markdown(f"**{item.title}**")
        st.caption(item.date[:16].replace("T", " "))
        if item.rivalry:
            st.markdown(f"🔥 Rivalry: **{item.rivalry}**")
        if item.img:
            st.image(item.img, use_container_width=True)
        if item.details:
            st.write(item.details)
