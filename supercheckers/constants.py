"""
Engine constants: board geometry, starting layout, and hint priority weights.

All numeric constants used by the rules engine and the hint heuristic are
defined here so that the other modules never introduce magic numbers of their
own. The priority weights are deliberately coarse: the hint engine is a
single-ply greedy ranking, so the weights only need to order move categories
(captures > promotions > positional moves), not to be precise.
"""

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------
# 10x10 board, pieces live on the dark squares where (row + col) is odd.

BOARD_SIZE: int = 10

# Number of rows each side fills at the start of the game.
START_ROWS: int = 3

# Diagonal directions as (drow, dcol). The order is significant: candidate
# enumeration walks them in this order, and ties in the hint ranking are
# broken by enumeration order.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# Board centre used by the positional term of the priority score.
CENTER_ROW: int = BOARD_SIZE // 2
CENTER_COL: int = BOARD_SIZE // 2

# ---------------------------------------------------------------------------
# Priority weights (hint engine only)
# ---------------------------------------------------------------------------

CAPTURE_BONUS: int = 100
QUEEN_CAPTURE_BONUS: int = 50  # on top of CAPTURE_BONUS
PROMOTION_BONUS: int = 80
CENTER_BASE: int = 10          # minus the Manhattan distance to the centre
QUEEN_MOBILITY_BONUS: int = 10

# Queen multi-capture candidates use their own formula:
#   MULTI_CAPTURE_BASE + MULTI_CAPTURE_PER_PIECE * len(captures)
MULTI_CAPTURE_BASE: int = 100
MULTI_CAPTURE_PER_PIECE: int = 50
