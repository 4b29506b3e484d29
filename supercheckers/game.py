"""
Game API: the entry points an interface calls.

All game state lives in one GameState object that the caller creates with
new_game() and passes to every operation. Each call runs to completion
(read the board, decide, mutate, return) before the next one is made; there
is no hidden module-level state.

    new_game()                 fresh board, Red to move
    attempt_move(state, a, b)  validate and play one move for the side to move
    finish_turn(state)         stop an ongoing capture chain and pass the turn
    request_hint(state)        best move for the side to move, with rationale

Illegal moves are routine input, so they are reported through
MoveResult.accepted rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import BaseModel

from supercheckers.board import Board, Player, Position, in_bounds
from supercheckers.moves import Move, enumerate_moves
from supercheckers.rules import apply_move, can_capture_more, check_move
from supercheckers.search import RationaleStatement, explain_move, get_best_move

_log = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Everything needed to continue a game.

    Attributes:
        board:          The position. Mutated in place by attempt_move().
        current_player: The side to move.
        turn_active:    False once the game has ended; every move is then
                        rejected and no hints are given.
        capture_chain:  Square of the piece that must keep capturing before
                        the turn can pass, or None outside a chain.
        winner:         Set when the side to move has no legal move left.
    """

    board: Board = field(default_factory=Board.initial)
    current_player: Player = Player.RED
    turn_active: bool = True
    capture_chain: Position | None = None
    winner: Player | None = None


class MoveResult(BaseModel):
    """
    Outcome of attempt_move().

    Fields:
        accepted:           False if the move was rejected; nothing changed.
        captured_positions: Squares whose pieces were removed.
        promoted:           The moved piece became a queen.
        chain_continues:    The same piece has another capture available and
                            the same player keeps the turn.
        next_player:        Who moves next.
    """

    accepted: bool
    captured_positions: list[Position] = []
    promoted: bool = False
    chain_continues: bool = False
    next_player: Player


class Hint(BaseModel):
    """Suggested move for the side to move, with its explanation."""

    move: Move
    rationale: list[RationaleStatement]


def new_game() -> GameState:
    """Return a GameState at the starting position with Red to move."""
    return GameState()


def _reject(state: GameState, reason: str) -> MoveResult:
    _log.debug("move rejected for %s: %s", state.current_player.value, reason)
    return MoveResult(accepted=False, next_player=state.current_player)


def _end_turn(state: GameState) -> None:
    mover = state.current_player
    state.capture_chain = None
    state.current_player = mover.opponent

    if not enumerate_moves(state.board, state.current_player):
        state.turn_active = False
        state.winner = mover
        _log.info("%s has no legal moves; %s wins", state.current_player.value, mover.value)


def attempt_move(state: GameState, frm: tuple[int, int], to: tuple[int, int]) -> MoveResult:
    """
    Try to play frm -> to for the side to move.

    The move must start from one of the current player's pieces. While a
    capture chain is in progress only the chained piece may move, and only
    by capturing.

    On a capturing move, if the piece can jump again from its landing square
    the player keeps the turn and state.capture_chain points at the piece.
    Otherwise the turn passes to the opponent.

    Args:
        state: The game. Mutated when the move is accepted.
        frm:   Source square as (row, col).
        to:    Destination square as (row, col).

    Returns:
        MoveResult describing what happened.
    """
    player = state.current_player

    if not state.turn_active:
        return _reject(state, "game is over")
    if not (in_bounds(*frm) and in_bounds(*to)):
        return _reject(state, "square off the board")

    frm, to = Position(*frm), Position(*to)
    piece = state.board.get(frm)
    if piece is None or piece.owner is not player:
        return _reject(state, f"no {player.value} piece at {frm}")

    if state.capture_chain is not None and frm != state.capture_chain:
        return _reject(state, f"capture chain must continue from {state.capture_chain}")

    check = check_move(state.board, player, frm, to)
    if not check.valid:
        return _reject(state, f"illegal move {frm} -> {to}")
    if state.capture_chain is not None and not check.captures:
        return _reject(state, "capture chain may only continue by capturing")

    promoted = apply_move(state.board, frm, to, check.captures)
    captured = list(check.captures)
    _log.debug("%s played %s -> %s capturing %d", player.value, frm, to, len(captured))

    if captured and can_capture_more(state.board, player, to):
        state.capture_chain = to
        return MoveResult(
            accepted=True,
            captured_positions=captured,
            promoted=promoted,
            chain_continues=True,
            next_player=player,
        )

    _end_turn(state)
    return MoveResult(
        accepted=True,
        captured_positions=captured,
        promoted=promoted,
        next_player=state.current_player,
    )


def finish_turn(state: GameState) -> bool:
    """
    End an ongoing capture chain and pass the turn.

    Returns:
        False if no capture chain was in progress (nothing changes).
    """
    if not state.turn_active or state.capture_chain is None:
        return False
    _end_turn(state)
    return True


def request_hint(state: GameState) -> Hint | None:
    """
    Suggest the best move for the side to move.

    During a capture chain only the chained piece's captures are considered.

    Returns:
        A Hint, or None when the game is over or no candidate move exists.
    """
    if not state.turn_active:
        return None

    player = state.current_player
    moves = enumerate_moves(state.board, player)
    if state.capture_chain is not None:
        moves = [m for m in moves if m.frm == state.capture_chain and m.is_capture]

    best = get_best_move(state.board, player, moves)
    if best is None:
        return None
    return Hint(move=best, rationale=explain_move(state.board, best))
