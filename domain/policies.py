"""
Valuation policy model with defaults; kept pure (no file IO here).
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ValuationPolicies:
    version: str = "1.0.0"
    assistWeight: float = 0.7
    motmBonus: float = 0.5
    hattrickBonus: float = 0.3
    cleanSheetBonus: float = 0.3
    scoreDecimals: int = 2
    valueDecimals: int = 1
