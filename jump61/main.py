from typing import Optional, Tuple

from jump61.config import CONFIG
from jump61.core.board import Board
from jump61.core.evaluator import Evaluator
from jump61.core.search import SearchEngine
from jump61.core.side import Side


class Engine:
    """The authoritative game board plus a search for whoever is to move."""

    def __init__(self, size: Optional[int] = None, depth: Optional[int] = None):
        self.board = Board(size or CONFIG.board.size)
        self.search = SearchEngine(Evaluator(), depth=depth)

    def get_best_move(self) -> Tuple[Tuple[int, int], int]:
        return self.search.search_best_move(self.board, self.board.whose_move())

    def play_best_move(self) -> Tuple[int, int]:
        (row, col), _ = self.get_best_move()
        self.board.add_spot(self.board.whose_move(), row, col)
        return row, col

    def make_move(self, row: int, col: int) -> bool:
        return self.board.add_spot(self.board.whose_move(), row, col)

    def undo(self):
        self.board.undo()

    def new_game(self, size: Optional[int] = None):
        self.board.clear(size or self.board.size())

    def is_game_over(self) -> bool:
        return self.board.get_winner() is not None

    def winner(self) -> Optional[Side]:
        return self.board.get_winner()

    def print_board(self):
        print(self.board.to_display_string())
