import logging
import time
from typing import Optional, Tuple

from jump61.config import CONFIG
from jump61.core.board import Board
from jump61.core.evaluator import Evaluator
from jump61.core.side import Side
from jump61.core.utils import format_info

logger = logging.getLogger(__name__)

INF = 10**9

Move = Tuple[int, int]


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 alpha_beta: Optional[bool] = None):
        """
        evaluator.evaluate(board) must return an int, positive when Red is
        ahead. depth is the number of plies searched; alpha_beta=False turns
        pruning off (plain minimax, same answer).
        """
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth if depth is not None else CONFIG.search.depth
        self.alpha_beta = CONFIG.search.alpha_beta if alpha_beta is None else alpha_beta
        self.nodes = 0

    def search_best_move(self, board: Board, side: Side, depth: Optional[int] = None) -> Tuple[Move, int]:
        """
        Returns ((row, col), score) for SIDE, score from Red's point of view.
        The game must not be over and depth must be positive.
        """
        depth = depth if depth is not None else self.max_depth
        if depth <= 0:
            raise ValueError(f"search depth must be positive, got {depth}")
        if board.get_winner() is not None:
            raise ValueError("cannot search a finished game")

        self.nodes = 0
        work = board.copy()
        start_time = time.time()

        score, best = self._minimax(work, side, depth, -INF, INF)
        move = (work.row(best), work.col(best))

        elapsed = time.time() - start_time
        win_threshold = min(self.evaluator.winning_value, INF)
        logger.info(format_info(depth, score, self.nodes, elapsed, move, win_threshold))
        return move, score

    def choose_move(self, board: Board, side: Side, depth: Optional[int] = None) -> Move:
        move, _ = self.search_best_move(board, side, depth)
        return move

    def _minimax(self, board: Board, side: Side, depth: int, alpha: int, beta: int) -> Tuple[int, Optional[int]]:
        """Value of BOARD with SIDE to move, and the square achieving it.
        Red maximizes, Blue minimizes. Ties keep the first square found."""
        self.nodes += 1
        if depth == 0:
            return self.evaluator.evaluate(board), None

        winner = board.get_winner()
        if winner is Side.RED:
            return INF, None
        if winner is Side.BLUE:
            return -INF, None

        maximizing = side is Side.RED
        best_score = -INF if maximizing else INF
        best_move = None

        for n in range(board.size() * board.size()):
            if not board.is_playable(side, n):
                continue
            child = board.copy()
            child.add_spot(side, n, check_turn=False)
            score, _ = self._minimax(child, side.opposite(), depth - 1, alpha, beta)

            if maximizing:
                if best_move is None or score > best_score:
                    best_score, best_move = score, n
                alpha = max(alpha, best_score)
            else:
                if best_move is None or score < best_score:
                    best_score, best_move = score, n
                beta = min(beta, best_score)

            if self.alpha_beta and alpha >= beta:
                break

        if best_move is None:
            # Nothing playable, which only happens on a decided board.
            return self.evaluator.evaluate(board), None
        return best_score, best_move


def choose_move(board: Board, side: Side, depth: int) -> Move:
    """Best (row, col) for SIDE on BOARD, searching DEPTH plies."""
    return SearchEngine(depth=depth).choose_move(board, side)
