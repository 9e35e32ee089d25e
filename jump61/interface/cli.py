"""Text front end: reads Jump61 commands and lets the engine play automated sides.

Commands, one per line, case-insensitive. Blank lines and lines starting
with '#' are ignored, as are extra operands.

    size N      start over on an N x N board
    new         start over on a board of the current size
    R C, R:C    add a spot for the side to move at row R, column C
    undo        take back one move
    dump        print the board
    auto P      let the engine play P (red, r, blue or b)
    manual P    read P's moves from the input
    quit        stop (so does end of input)

Initially Red is manual and Blue is automated (see [ui] in config.toml).
"""

import re
import sys
from typing import Iterable, Optional, TextIO

from jump61.config import CONFIG, configure_logging
from jump61.core.side import Side
from jump61.main import Engine

MOVE_RE = re.compile(r"(\d+)\s*[:\s]\s*(\d+)")


class TextGame:
    def __init__(self, engine: Optional[Engine] = None, out: Optional[TextIO] = None):
        self.engine = engine or Engine()
        self.out = out or sys.stdout
        self.auto = {Side.RED: CONFIG.ui.auto_red, Side.BLUE: CONFIG.ui.auto_blue}
        self._reported_win = False

    @property
    def board(self):
        return self.engine.board

    def run(self, lines: Optional[Iterable[str]] = None):
        """Execute LINES (standard input by default) until quit or end of input."""
        self._play_automated()
        for line in lines if lines is not None else sys.stdin:
            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """Execute one command line. Returns False on quit."""
        line = line.strip()
        if not line or line.startswith("#"):
            return True
        words = line.lower().split()
        cmd = words[0]
        try:
            if cmd == "quit":
                return False
            elif cmd == "size":
                self._new_game(int(words[1]))
            elif cmd == "new":
                self._new_game(self.board.size())
            elif cmd == "undo":
                self.engine.undo()
            elif cmd == "dump":
                self._say(str(self.board), end="")
            elif cmd in ("auto", "manual"):
                self.auto[Side.parse(words[1])] = cmd == "auto"
            elif MOVE_RE.match(line):
                self._manual_move(*map(int, MOVE_RE.match(line).groups()))
            else:
                self._say(f"Unknown command: {line}")
        except (IndexError, ValueError):
            self._say(f"Invalid command: {line}")
        self._check_winner()
        self._play_automated()
        return True

    def _say(self, msg: str, end: str = "\n"):
        print(msg, file=self.out, end=end)

    def _new_game(self, size: int):
        if not CONFIG.board.min_size <= size <= CONFIG.board.max_size:
            raise ValueError(f"board size must be between {CONFIG.board.min_size} and {CONFIG.board.max_size}")
        self.engine.new_game(size)

    def _manual_move(self, row: int, col: int):
        if self.engine.is_game_over() or not self.engine.make_move(row, col):
            self._say(f"Invalid move: {row} {col}")

    def _play_automated(self):
        while not self.engine.is_game_over() and self.auto[self.board.whose_move()]:
            side = self.board.whose_move()
            row, col = self.engine.play_best_move()
            self._say(f"{side} moves {row} {col}.")
            self._check_winner()

    def _check_winner(self):
        winner = self.engine.winner()
        if winner is None:
            self._reported_win = False
        elif not self._reported_win:
            self._say(f"{winner} wins.")
            self._reported_win = True


def main():
    configure_logging()
    TextGame().run()


if __name__ == "__main__":
    main()
