"""
Text protocol handler for playing Super Checkers from a terminal or script.

The engine only knows about GameState objects; this module is the piece that
turns typed commands into engine calls and engine results into status lines.
It reads one command per line from stdin and writes replies to stdout, one
fact per line, flushed immediately so that a driving script can read replies
as they come.

Commands:
    newgame                      reset to the starting position
    board                        print the board diagram and the side to move
    position <player> <rows...>  load a position: player is red|black, followed
                                 by 10 row strings (see supercheckers.board)
    move <r1> <c1> <r2> <c2>     play a move for the side to move
    finish                       end an ongoing capture chain
    hint                         suggest a move and explain it
    quit                         exit

Replies:
    ok | invalid | error <message>
    captured <r,c>   promoted   chain <r,c>   turn <player>   gameover <winner>
    hint <r,c> -> <r,c> priority <n>   why <kind> <summary>   nohint

Diagnostics go through logging to stderr; stdout carries replies only.
"""

import logging
import sys
from typing import TextIO

from supercheckers.board import Board, Player
from supercheckers.game import GameState, attempt_move, finish_turn, new_game, request_hint

_log = logging.getLogger(__name__)


def _send(line: str) -> None:
    """Write a reply line to stdout and flush immediately."""
    print(line, flush=True)


class CommandHandler:
    """
    Stateful handler for the text protocol.

    Holds the current game; run_loop() creates one instance and dispatches
    each command line to it.
    """

    def __init__(self) -> None:
        self.state: GameState = new_game()

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_newgame(self) -> None:
        self.state = new_game()
        _send("ok")
        self._send_turn()

    def handle_board(self) -> None:
        for line in self.state.board.to_text().splitlines():
            _send(line)
        self._send_turn()

    def handle_position(self, tokens: list[str]) -> None:
        """
        Load an arbitrary position.

        Args:
            tokens: The command tokens with "position" already stripped:
                    the side to move followed by ten row strings.
        """
        if not tokens:
            _send("error position needs a player and 10 rows")
            return

        try:
            player = Player(tokens[0].lower())
            board = Board.from_text("\n".join(tokens[1:]))
        except ValueError as e:
            _send(f"error {e}")
            return

        self.state = GameState(board=board, current_player=player)
        _send("ok")
        self._send_turn()

    def handle_move(self, tokens: list[str]) -> None:
        """
        Play a move for the side to move.

        Args:
            tokens: Four integers: from-row, from-col, to-row, to-col.
        """
        try:
            r1, c1, r2, c2 = (int(t) for t in tokens)
        except ValueError:
            _send("error move needs four integers: r1 c1 r2 c2")
            return

        result = attempt_move(self.state, (r1, c1), (r2, c2))
        if not result.accepted:
            _send("invalid")
            return

        _send("ok")
        for square in result.captured_positions:
            _send(f"captured {square}")
        if result.promoted:
            _send("promoted")
        if result.chain_continues:
            _send(f"chain {self.state.capture_chain}")
            return
        self._send_turn()

    def handle_finish(self) -> None:
        if not finish_turn(self.state):
            _send("invalid")
            return
        _send("ok")
        self._send_turn()

    def handle_hint(self) -> None:
        hint = request_hint(self.state)
        if hint is None:
            _send("nohint")
            return

        move = hint.move
        _send(f"hint {move.frm} -> {move.to} priority {move.priority}")
        for statement in hint.rationale:
            _send(f"why {statement.kind.value} {statement.summary}")

    def handle_quit(self) -> None:
        sys.exit(0)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _send_turn(self) -> None:
        if not self.state.turn_active:
            winner = self.state.winner.value if self.state.winner else "none"
            _send(f"gameover {winner}")
        else:
            _send(f"turn {self.state.current_player.value}")


def run_loop(stream: TextIO = sys.stdin) -> None:
    """
    Main command loop.

    Reads lines from stream and dispatches each command to the
    CommandHandler until "quit" is received or the stream is exhausted.

    Each command is wrapped in a try/except so that a bug in one handler does
    not end the session; the error is logged and the loop continues.
    """
    handler = CommandHandler()

    for raw_line in stream:
        line = raw_line.strip()
        if not line:
            continue

        tokens = line.split()
        command = tokens[0].lower()
        args = tokens[1:]

        try:
            if command == "newgame":
                handler.handle_newgame()
            elif command == "board":
                handler.handle_board()
            elif command == "position":
                handler.handle_position(args)
            elif command == "move":
                handler.handle_move(args)
            elif command == "finish":
                handler.handle_finish()
            elif command == "hint":
                handler.handle_hint()
            elif command == "quit":
                handler.handle_quit()
            else:
                _log.warning("ignoring unknown command: %r", command)

        except Exception:
            _log.exception("unhandled error for command %r", command)


def main() -> None:
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    run_loop()


if __name__ == "__main__":
    main()
