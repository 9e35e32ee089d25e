"""FastAPI REST interface for the engine: one in-process board plus search."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Optional

from jump61.config import CONFIG
from jump61.core.board import Board
from jump61.core.evaluator import Evaluator
from jump61.core.search import SearchEngine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

board = Board(CONFIG.board.size)
_board_lock = threading.Lock()


class MoveRequest(BaseModel):
    row: int
    col: int


class ClearRequest(BaseModel):
    size: int = Field(ge=CONFIG.board.min_size, le=CONFIG.board.max_size)


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(default=None, gt=0)


def _side_name(side) -> Optional[str]:
    return side.name.lower() if side is not None else None


def _state() -> dict:
    return {
        "size": board.size(),
        "whose_move": _side_name(board.whose_move()),
        "winner": _side_name(board.get_winner()),
        "total_pieces": board.total_pieces(),
        "cells": [
            {"side": _side_name(cell.side), "spots": cell.spots}
            for cell in (board.get(n) for n in range(board.size() * board.size()))
        ],
        "dump": str(board),
    }


@app.get("/board")
def get_board():
    with _board_lock:
        return _state()


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        if board.get_winner() is not None:
            raise HTTPException(status_code=400, detail="Game is already over")
        if not board.exists(req.row, req.col):
            raise HTTPException(status_code=400, detail=f"No such cell: {req.row} {req.col}")
        side = board.whose_move()
        if not board.add_spot(side, req.row, req.col):
            raise HTTPException(status_code=400, detail=f"Illegal move for {side}: {req.row} {req.col}")
        return _state()


@app.post("/undo")
def undo_move():
    with _board_lock:
        board.undo()
        return _state()


@app.post("/clear")
def clear_board(req: ClearRequest):
    with _board_lock:
        board.clear(req.size)
        return _state()


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.clear(board.size())
        return _state()


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if board.get_winner() is not None:
            raise HTTPException(status_code=400, detail="Game is already over")
        side = board.whose_move()
        search_board = board.copy()

    # one engine per search; its node count belongs to this request alone
    engine = SearchEngine(Evaluator(), depth=CONFIG.search.depth)
    (row, col), score = engine.search_best_move(search_board, side, req.depth)
    return {"row": row, "col": col, "score": score, "side": _side_name(side)}
