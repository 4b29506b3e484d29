"""
Rules engine: move legality, capture-chain continuation, and move execution.

check_move() answers "may this piece go from here to there, and what would it
capture?" without touching the board. apply_move() performs a move that the
caller has already validated. can_capture_more() decides whether a piece that
just captured must keep the turn.

Two rules differ from standard draughts:

- A man only steps forward, but it may capture backwards.
- A queen capture may land any distance past the captured pieces as long as
  the destination is empty and no own piece sits on the path.

The chain check only looks for man-style single jumps, also for queens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from supercheckers.board import Board, Player, Position, in_bounds
from supercheckers.constants import DIRECTIONS

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveCheck:
    """Outcome of check_move(). captures is empty for quiet moves."""

    valid: bool
    captures: tuple[Position, ...] = field(default_factory=tuple)


_INVALID = MoveCheck(False)


def _is_opponent(board: Board, pos: tuple[int, int], player: Player) -> bool:
    piece = board.get(pos)
    return piece is not None and piece.owner is not player


def check_move(
    board: Board,
    current_player: Player,
    frm: tuple[int, int],
    to: tuple[int, int],
) -> MoveCheck:
    """
    Decide whether moving the piece at frm to to is legal.

    Ownership of the piece at frm is not checked here; pieces met on the way
    are judged as friend or foe relative to current_player.

    Args:
        board:          The current position. Not modified.
        current_player: The side to move.
        frm:            Source square.
        to:             Destination square.

    Returns:
        MoveCheck with valid=False for any rejected move, otherwise the
        ordered tuple of squares whose pieces the move would capture.
    """
    frm, to = Position(*frm), Position(*to)
    if not (in_bounds(*frm) and in_bounds(*to)):
        return _INVALID

    if not board.is_empty(to):
        return _INVALID

    piece = board.get(frm)
    if piece is None:
        return _INVALID

    drow = to.row - frm.row
    dcol = to.col - frm.col
    distance = abs(drow)
    if distance != abs(dcol) or distance == 0:
        return _INVALID

    step_row = drow // distance
    step_col = dcol // distance

    if not piece.is_queen:
        if distance == 1:
            # Quiet man moves only go forward.
            if drow == current_player.forward:
                return MoveCheck(True)
            return _INVALID
        if distance == 2:
            # Man captures are allowed in every direction.
            middle = Position(frm.row + step_row, frm.col + step_col)
            if _is_opponent(board, middle, current_player):
                return MoveCheck(True, (middle,))
        return _INVALID

    captures: list[Position] = []
    for i in range(1, distance):
        square = Position(frm.row + step_row * i, frm.col + step_col * i)
        occupant = board.get(square)
        if occupant is None:
            continue
        if occupant.owner is current_player:
            return _INVALID
        captures.append(square)

    # With no captures on the way the path is clear, so this doubles as the
    # quiet queen move.
    return MoveCheck(True, tuple(captures))


def is_valid_capture(
    board: Board,
    player: Player,
    frm: tuple[int, int],
    to: tuple[int, int],
    capture: tuple[int, int],
) -> bool:
    """
    Single-jump check shared by the chain tracker.

    The landing square must be on the board and empty, the capture square on
    the board and holding an opponent piece, and the square halfway between
    frm and to must hold an opponent piece as well.
    """
    if not in_bounds(*to) or not board.is_empty(to):
        return False
    if not in_bounds(*capture) or not _is_opponent(board, capture, player):
        return False

    path = ((frm[0] + to[0]) // 2, (frm[1] + to[1]) // 2)
    return _is_opponent(board, path, player)


def can_capture_more(board: Board, player: Player, position: tuple[int, int]) -> bool:
    """Return True if the piece at position has another single jump available."""
    row, col = position
    if not in_bounds(row, col) or board.is_empty(position):
        return False

    for drow, dcol in DIRECTIONS:
        capture = (row + drow, col + dcol)
        landing = (row + 2 * drow, col + 2 * dcol)
        if is_valid_capture(board, player, position, landing, capture):
            return True
    return False


def apply_move(
    board: Board,
    frm: tuple[int, int],
    to: tuple[int, int],
    captures: tuple[tuple[int, int], ...] | list[tuple[int, int]] = (),
) -> bool:
    """
    Execute a move that has already been validated with check_move().

    Captured pieces are removed, the moving piece is relocated, and a man that
    lands on its owner's farthest row is promoted in place.

    Returns:
        True if the move promoted the piece to a queen.
    """
    piece = board.get(frm)

    for square in captures:
        board.set(square, None)

    board.set(to, piece)
    board.set(frm, None)

    if not piece.is_queen and to[0] == piece.owner.promotion_row:
        piece.promote()
        _log.debug("%s piece promoted to queen at %s", piece.owner.value, Position(*to))
        return True
    return False
