"""
Board model: players, pieces, positions, and the 10x10 grid.

A cell is either empty (None) or holds a Piece. Pieces are tagged with their
owner and rank as plain enum fields; every "is this mine?" or "is this a
queen?" question in the engine is a direct field comparison.

Red starts on rows 0-2 and advances towards row 9; Black starts on rows 7-9
and advances towards row 0. Only dark squares ((row + col) odd) ever hold a
piece.

Boards can also be written as a compact text diagram, one line per row with
row 0 first:

    .  empty square
    r  red man        R  red queen
    b  black man      B  black queen

The diagram is used by the terminal interface and by the tests to set up
arbitrary positions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple

from supercheckers.constants import BOARD_SIZE, START_ROWS


class Player(str, Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Player":
        return Player.BLACK if self is Player.RED else Player.RED

    @property
    def forward(self) -> int:
        """Row direction a man of this player advances in (+1 or -1)."""
        return 1 if self is Player.RED else -1

    @property
    def promotion_row(self) -> int:
        """The farthest row for this player, where a man becomes a queen."""
        return BOARD_SIZE - 1 if self is Player.RED else 0


class Rank(str, Enum):
    MAN = "man"
    QUEEN = "queen"


@dataclass
class Piece:
    """
    A single piece on the board.

    Promotion changes the rank of this same object in place; a piece is never
    replaced by a new one when it becomes a queen.
    """

    owner: Player
    rank: Rank = Rank.MAN

    @property
    def is_queen(self) -> bool:
        return self.rank is Rank.QUEEN

    def promote(self) -> None:
        self.rank = Rank.QUEEN

    def symbol(self) -> str:
        letter = "r" if self.owner is Player.RED else "b"
        return letter.upper() if self.is_queen else letter


_SYMBOLS: dict[str, tuple[Player, Rank]] = {
    "r": (Player.RED, Rank.MAN),
    "R": (Player.RED, Rank.QUEEN),
    "b": (Player.BLACK, Rank.MAN),
    "B": (Player.BLACK, Rank.QUEEN),
}


class Position(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(row: int, col: int) -> bool:
    return (row + col) % 2 == 1


class Board:
    """
    The 10x10 grid of cells.

    Accessors take a Position (or any (row, col) pair). They do not bounds
    check; callers that handle positions coming from outside the engine must
    call in_bounds() first.
    """

    def __init__(self) -> None:
        self.cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def initial(cls) -> "Board":
        """Return a board with the standard starting layout."""
        board = cls()
        for row in range(BOARD_SIZE):
            if row < START_ROWS:
                owner = Player.RED
            elif row >= BOARD_SIZE - START_ROWS:
                owner = Player.BLACK
            else:
                continue
            for col in range(BOARD_SIZE):
                if is_dark(row, col):
                    board.cells[row][col] = Piece(owner)
        return board

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """
        Parse a text diagram (see module docstring) into a Board.

        Blank lines and surrounding whitespace are ignored.

        Raises:
            ValueError: wrong number of rows or columns, an unknown character,
                        or a piece placed on a light square.
        """
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"expected {BOARD_SIZE} rows, got {len(rows)}")

        board = cls()
        for row, line in enumerate(rows):
            if len(line) != BOARD_SIZE:
                raise ValueError(f"row {row}: expected {BOARD_SIZE} cells, got {len(line)}")
            for col, char in enumerate(line):
                if char == ".":
                    continue
                if char not in _SYMBOLS:
                    raise ValueError(f"row {row}: unknown cell {char!r}")
                if not is_dark(row, col):
                    raise ValueError(f"piece on light square {row},{col}")
                owner, rank = _SYMBOLS[char]
                board.cells[row][col] = Piece(owner, rank)
        return board

    def to_text(self) -> str:
        return "\n".join(
            "".join(piece.symbol() if piece else "." for piece in row)
            for row in self.cells
        )

    def get(self, pos: tuple[int, int]) -> Piece | None:
        row, col = pos
        return self.cells[row][col]

    def set(self, pos: tuple[int, int], piece: Piece | None) -> None:
        row, col = pos
        self.cells[row][col] = piece

    def is_empty(self, pos: tuple[int, int]) -> bool:
        return self.get(pos) is None

    def pieces(self, player: Player) -> Iterator[tuple[Position, Piece]]:
        """Yield (position, piece) for every piece of player, row-major."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self.cells[row][col]
                if piece is not None and piece.owner is player:
                    yield Position(row, col), piece

    def count(self, player: Player) -> int:
        return sum(1 for _ in self.pieces(player))

    def copy(self) -> "Board":
        clone = Board()
        clone.cells = [
            [Piece(p.owner, p.rank) if p else None for p in row]
            for row in self.cells
        ]
        return clone

    def __str__(self) -> str:
        return self.to_text()
