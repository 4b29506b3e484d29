"""
Best-move selection and hint explanation.

This is a single-ply greedy selector, not a search in the game-tree sense:
every candidate from enumerate_moves() already carries its priority, so the
best move is simply the highest one. Ties go to the candidate enumerated
first, which falls out of Python's stable sort.

explain_move() turns the chosen move into an ordered list of tagged
statements that the interface can render however it likes. It must be called
before the move is applied, since it inspects the moving piece on the board.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel

from supercheckers.board import Board, Player
from supercheckers.evaluate import is_promotion
from supercheckers.moves import Move, enumerate_moves

_log = logging.getLogger(__name__)


class RationaleKind(str, Enum):
    CAPTURE = "capture"
    MULTI_CAPTURE = "multi_capture"
    PROMOTION = "promotion"
    QUEEN_MOVE = "queen_move"
    STRATEGY = "strategy"


class RationaleStatement(BaseModel):
    """
    One line of a hint explanation.

    Fields:
        kind:    What aspect of the move this statement is about.
        summary: Short description of the effect (e.g. "Removes 2 opponent pieces").
        reason:  Why that effect is desirable.
    """

    kind: RationaleKind
    summary: str
    reason: str


def rank_moves(moves: list[Move]) -> list[Move]:
    """Sort candidates by descending priority, keeping enumeration order on ties."""
    return sorted(moves, key=lambda m: m.priority, reverse=True)


def get_best_move(board: Board, player: Player, moves: list[Move] | None = None) -> Move | None:
    """
    Return the highest-priority candidate move for player.

    Args:
        board:  The current position. Not modified.
        player: The side to move.
        moves:  Optional pre-filtered candidates. Defaults to every move from
                enumerate_moves(board, player).

    Returns:
        The chosen Move, or None if there are no candidates.
    """
    if moves is None:
        moves = enumerate_moves(board, player)
    if not moves:
        return None

    best = rank_moves(moves)[0]
    _log.debug(
        "best of %d candidates for %s: %s -> %s (priority %d)",
        len(moves), player.value, best.frm, best.to, best.priority,
    )
    return best


def explain_move(board: Board, move: Move) -> list[RationaleStatement]:
    """
    Build the rationale for a suggested move.

    Statements appear in a fixed order: capture, promotion, queen move. The
    generic strategy statement is only given when none of those applies.
    """
    piece = board.get(move.frm)
    statements: list[RationaleStatement] = []

    if len(move.captures) == 1:
        statements.append(RationaleStatement(
            kind=RationaleKind.CAPTURE,
            summary=f"Removes 1 opponent piece at ({move.captures[0]})",
            reason="Captures reduce opponent options and gain material advantage.",
        ))
    elif move.captures:
        statements.append(RationaleStatement(
            kind=RationaleKind.MULTI_CAPTURE,
            summary=f"Removes {len(move.captures)} opponent pieces",
            reason="Captures reduce opponent options and gain material advantage.",
        ))

    if piece is not None and is_promotion(piece, move.to):
        statements.append(RationaleStatement(
            kind=RationaleKind.PROMOTION,
            summary="This move creates a queen",
            reason="Queens have unlimited movement and can capture multiple pieces.",
        ))

    if piece is not None and piece.is_queen:
        distance = abs(move.to.row - move.frm.row)
        statements.append(RationaleStatement(
            kind=RationaleKind.QUEEN_MOVE,
            summary=f"Travels {distance} squares diagonally",
            reason="Queens control long diagonals and create multiple threats.",
        ))

    if not statements:
        statements.append(RationaleStatement(
            kind=RationaleKind.STRATEGY,
            summary="Safe positioning move",
            reason="Maintains piece safety while preparing for future captures.",
        ))

    return statements
