from __future__ import annotations

from typing import List

from .models import LadderRow


# Score per match -> price per match (M$) and level label.
LADDER: List[LadderRow] = sorted(
    [
        LadderRow(0.0, 0.3, "TA3BENNN"),
        LadderRow(0.2, 0.5, "Koussa"),
        LadderRow(0.4, 1.0, "Fesh amal"),
        LadderRow(0.6, 1.5, "Lache le foot"),
        LadderRow(0.8, 2.0, "Bencher"),
        LadderRow(1.0, 2.5, "Imohem lniye"),
        LadderRow(1.2, 3.0, "3ade"),
        LadderRow(1.4, 3.5, "Ma2boul"),
        LadderRow(1.6, 4.0, "Fi ta2adom"),
        LadderRow(1.8, 5.0, "Mesh 3ali"),
        LadderRow(2.0, 6.0, "Starter"),
        LadderRow(2.2, 7.0, "Fi mahara"),
        LadderRow(2.4, 8.0, "Superstar"),
        LadderRow(2.6, 9.0, "7ellooo"),
        LadderRow(2.8, 10.0, "wooow"),
        LadderRow(3.0, 11.0, "Machinee"),
        LadderRow(3.2, 12.0, "Crazyyy"),
        LadderRow(3.4, 13.0, "Sobhanallah"),
        LadderRow(3.6, 14.0, "De2o 3al khashab"),
        LadderRow(3.8, 15.0, "La3ibbb"),
        LadderRow(4.0, 16.0, "btestehel duaa men Rayan"),
        LadderRow(4.2, 17.0, "3ndo fans"),
        LadderRow(4.4, 18.0, "Ossa kbir eee"),
        LadderRow(4.6, 19.0, "Wa7echhh"),
        LadderRow(4.8, 20.0, "Messi"),
        LadderRow(5.0, 25.0, "GOAT (adam level)"),
    ],
    key=lambda r: r.threshold,
)


def lookup(score: float, ladder: List[LadderRow] = LADDER) -> LadderRow:
    """Return the rung with the greatest threshold not above ``score``.

    Scores below the first threshold fall back to the first rung.
    """
    row = ladder[0]
    for r in ladder:
        if score >= r.threshold:
            row = r
        else:
            break
    return row
