"""
Candidate move enumeration for the hint engine.

enumerate_moves() lists every move the given player could make, each tagged
with a priority from supercheckers.evaluate. The list is in discovery order:
pieces row-major, then directions in DIRECTIONS order, then outward along each
ray. The best-move selector relies on that order to break ties.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from supercheckers.board import Board, Piece, Player, Position, in_bounds
from supercheckers.constants import BOARD_SIZE, DIRECTIONS
from supercheckers.evaluate import multi_capture_score, score_move


@dataclass(frozen=True)
class Move:
    """
    A candidate move.

    Attributes:
        frm:      Source square.
        to:       Destination square.
        captures: Squares whose pieces the move removes, in path order.
        priority: Heuristic score. Only meaningful for enumerated candidates.
    """

    frm: Position
    to: Position
    captures: tuple[Position, ...] = field(default_factory=tuple)
    priority: int = 0

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)


def _man_moves(board: Board, player: Player, frm: Position, piece: Piece) -> list[Move]:
    moves: list[Move] = []
    for drow, dcol in DIRECTIONS:
        to = Position(frm.row + drow, frm.col + dcol)
        if not in_bounds(*to):
            continue

        target = board.get(to)
        if target is None:
            if drow == player.forward:
                moves.append(Move(frm, to, (), score_move(piece, False, to)))
        elif target.owner is not player:
            landing = Position(to.row + drow, to.col + dcol)
            if in_bounds(*landing) and board.is_empty(landing):
                moves.append(Move(frm, landing, (to,), score_move(piece, True, landing)))
    return moves


def queen_capture_moves(
    board: Board,
    player: Player,
    frm: Position,
    drow: int,
    dcol: int,
) -> list[Move]:
    """
    Walk one ray from a queen and list its capturing landings.

    Every opponent piece met on the ray is added to the running capture list,
    and every empty square reached once that list is non-empty becomes a
    candidate carrying all captures so far. The walk ends at the board edge or
    at the player's own piece.
    """
    moves: list[Move] = []
    captured: list[Position] = []
    row, col = frm

    for _ in range(1, BOARD_SIZE):
        row += drow
        col += dcol
        if not in_bounds(row, col):
            break

        square = Position(row, col)
        occupant = board.get(square)
        if occupant is None:
            if captured:
                moves.append(
                    Move(frm, square, tuple(captured), multi_capture_score(len(captured)))
                )
        elif occupant.owner is not player:
            captured.append(square)
        else:
            break

    return moves


def _queen_moves(board: Board, player: Player, frm: Position, piece: Piece) -> list[Move]:
    moves: list[Move] = []
    for drow, dcol in DIRECTIONS:
        for dist in range(1, BOARD_SIZE):
            to = Position(frm.row + drow * dist, frm.col + dcol * dist)
            if not in_bounds(*to):
                break

            occupant = board.get(to)
            if occupant is not None:
                if occupant.owner is not player:
                    moves.extend(queen_capture_moves(board, player, frm, drow, dcol))
                break

            moves.append(Move(frm, to, (), score_move(piece, False, to)))
    return moves


def piece_moves(board: Board, player: Player, frm: Position) -> list[Move]:
    """All candidate moves for the single piece at frm."""
    piece = board.get(frm)
    if piece is None:
        return []
    if piece.is_queen:
        return _queen_moves(board, player, frm, piece)
    return _man_moves(board, player, frm, piece)


def enumerate_moves(board: Board, player: Player) -> list[Move]:
    """
    Return every candidate move for player, in discovery order.

    An empty list means the player has no legal move left.
    """
    moves: list[Move] = []
    for frm, _piece in board.pieces(player):
        moves.extend(piece_moves(board, player, frm))
    return moves
