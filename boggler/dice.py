"""Roll random Boggle boards with the standard dice."""

import random
from typing import Sequence

from boggler.board import Board

Die = tuple[str, str, str, str, str, str]

# "New" Boggle dice, 1987 to ~2008
DICE: list[Die] = [
    ("a", "a", "e", "e", "g", "n"),
    ("e", "l", "r", "t", "t", "y"),
    ("a", "o", "o", "t", "t", "w"),
    ("a", "b", "b", "j", "o", "o"),
    ("e", "h", "r", "t", "v", "w"),
    ("c", "i", "m", "o", "t", "u"),
    ("d", "i", "s", "t", "t", "y"),
    ("e", "i", "o", "s", "s", "t"),
    ("d", "e", "l", "r", "v", "y"),
    ("a", "c", "h", "o", "p", "s"),
    ("h", "i", "m", "n", "qu", "u"),
    ("e", "e", "i", "n", "s", "u"),
    ("e", "e", "g", "h", "n", "w"),
    ("a", "f", "f", "k", "p", "s"),
    ("h", "l", "n", "n", "r", "z"),
    ("d", "e", "i", "l", "r", "x"),
]


def roll_board(
    dims: tuple[int, int] = (4, 4),
    dice: Sequence[Die] = DICE,
    rng: random.Random | None = None,
) -> Board:
    """Shake the dice into the grid and roll each one.

    Boards with more cells than there are dice use some dice more than once.
    """
    rng = rng or random.Random()
    rows, cols = dims
    n = rows * cols
    copies = -(-n // len(dice))
    shaken = rng.sample([*dice] * copies, n)
    faces = [rng.choice(die) for die in shaken]
    return Board([faces[r * cols : (r + 1) * cols] for r in range(rows)])
