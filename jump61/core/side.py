"""Sides of a Jump61 game: the two players plus the neutral owner."""

from enum import Enum


class Side(Enum):
    NEUTRAL = "-"
    RED = "r"
    BLUE = "b"

    @property
    def marker(self) -> str:
        """One-character marker used in board dumps."""
        return self.value

    def opposite(self) -> "Side":
        if self is Side.RED:
            return Side.BLUE
        if self is Side.BLUE:
            return Side.RED
        return Side.NEUTRAL

    def playable_square(self, owner: "Side") -> bool:
        """True iff this side may add a spot to a cell owned by OWNER."""
        return owner is Side.NEUTRAL or owner is self

    @staticmethod
    def parse(text: str) -> "Side":
        """Parse 'red'/'r' or 'blue'/'b', ignoring case."""
        name = text.strip().lower()
        if name in ("red", "r"):
            return Side.RED
        if name in ("blue", "b"):
            return Side.BLUE
        raise ValueError(f"not a player: {text!r}")

    def __str__(self) -> str:
        return self.name.capitalize()
