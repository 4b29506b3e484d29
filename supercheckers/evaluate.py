"""
Move priority scoring for the hint engine.

The hint engine never searches ahead; it ranks each candidate move by a small
additive score and suggests the highest one. The terms, in order of weight:

1. Captures (+100, and +50 more when a queen captures).
2. Promotion: a man landing on its farthest row (+80).
3. Centralisation: 10 minus the Manhattan distance from the destination to
   the board centre. This term goes negative near the corners.
4. Queen mobility (+10 for any queen move).

Queen multi-captures found by walking a ray are scored separately by
multi_capture_score(), which only counts the captured pieces.
"""

from supercheckers.board import Piece, Position
from supercheckers.constants import (
    CAPTURE_BONUS,
    CENTER_BASE,
    CENTER_COL,
    CENTER_ROW,
    MULTI_CAPTURE_BASE,
    MULTI_CAPTURE_PER_PIECE,
    PROMOTION_BONUS,
    QUEEN_CAPTURE_BONUS,
    QUEEN_MOBILITY_BONUS,
)


def is_promotion(piece: Piece, to: Position) -> bool:
    """True if moving this piece to `to` would make it a queen."""
    return not piece.is_queen and to.row == piece.owner.promotion_row


def center_distance(pos: Position) -> int:
    return abs(pos.row - CENTER_ROW) + abs(pos.col - CENTER_COL)


def score_move(piece: Piece, is_capture: bool, to: Position) -> int:
    """
    Additive priority of moving `piece` to `to`.

    Args:
        piece:      The moving piece (its rank before the move).
        is_capture: Whether the move removes an opponent piece.
        to:         Destination square.

    Returns:
        Integer priority; higher is better. Not bounded below.
    """
    priority = 0

    if is_capture:
        priority += CAPTURE_BONUS
        if piece.is_queen:
            priority += QUEEN_CAPTURE_BONUS

    if is_promotion(piece, to):
        priority += PROMOTION_BONUS

    priority += CENTER_BASE - center_distance(to)

    if piece.is_queen:
        priority += QUEEN_MOBILITY_BONUS

    return priority


def multi_capture_score(capture_count: int) -> int:
    """Priority of a queen capture along a ray, from its capture count alone."""
    return MULTI_CAPTURE_BASE + MULTI_CAPTURE_PER_PIECE * capture_count
