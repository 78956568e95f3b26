"""
Tables component for ranking and ladder views.
"""
from __future__ import annotations

import streamlit as st
from typing import List

from domain.models import LadderRow, PlayerValuation


def ranking_table(ranking: List[PlayerValuation]) -> None:
    rows = [
        {
            "#": i + 1,
            "Player": v.name,
            "Role": v.player.role.value,
            "G": v.player.goals,
            "A": v.player.assists,
            "M": v.player.matches,
            "Score/m": v.score,
            "Lvl": v.tier,
            "Bonus": v.bonus,
            "Total": v.total,
        }
        for i, v in enumerate(ranking)
    ]
    st.dataframe(rows, hide_index=True, use_container_width=True)


def ladder_table(ladder: List[LadderRow]) -> None:
    rows = [{"Score ≥": r.threshold, "Price / match (M$)": r.price, "Level": r.label} for r in ladder]
    st.dataframe(rows, hide_index=True, use_container_width=True)
