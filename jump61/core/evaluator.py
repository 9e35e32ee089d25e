from typing import Optional

from jump61.config import CONFIG
from jump61.core.board import Board
from jump61.core.side import Side


class Evaluator:
    """Material evaluation from Red's point of view."""

    def __init__(self, winning_value: Optional[int] = None):
        self.cfg = CONFIG.eval
        self.winning_value = winning_value if winning_value is not None else self.cfg.winning_value

    def evaluate(self, board: Board) -> int:
        """+winning_value if Red owns every cell, -winning_value if Blue does,
        otherwise the number of Red cells minus the number of Blue cells."""
        red = board.num_cells_of(Side.RED)
        blue = board.num_cells_of(Side.BLUE)
        cells = board.size() * board.size()
        if red == cells:
            return self.winning_value
        if blue == cells:
            return -self.winning_value
        return red - blue
