"""
Fallback roster used when no players have been saved yet.
"""
from typing import List

from .models import Player, Role


def builtin_players() -> List[Player]:
    return [
        Player.create("Hassan Hojeij", photo="/players/hassan.jpg", role=Role.FWD, goals=2, assists=1, matches=2),
        Player.create("Mhmd Badran", photo="/players/badran.jpg", role=Role.MID, goals=1, assists=1, matches=1),
        Player.create("Ali Awada", photo="/players/ali.jpg", role=Role.DEF, matches=2, clean_sheet_count=1),
    ]
