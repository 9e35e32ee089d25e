"""Core engine components: sides, cells, board, evaluator and search."""

from .side import Side
from .cell import Cell, EMPTY_CELL
from .board import Board, ConstantBoard, UnsupportedOperation
from .evaluator import Evaluator
from .search import SearchEngine, choose_move
