from dataclasses import dataclass

from jump61.core.side import Side


@dataclass(frozen=True)
class Cell:
    """Contents of one board cell: its owner and how many spots it holds."""

    side: Side
    spots: int

    def __post_init__(self):
        if self.spots < 1:
            raise ValueError(f"a cell holds at least one spot, got {self.spots}")

    def __str__(self) -> str:
        return f"{self.spots}{self.side.marker}"


# A cleared cell.
EMPTY_CELL = Cell(Side.NEUTRAL, 1)
