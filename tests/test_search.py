"""
Tests for supercheckers.search: best-move selection and hint rationale.
"""

from conftest import place
from supercheckers.board import Player, Position, Rank
from supercheckers.moves import Move
from supercheckers.search import RationaleKind, explain_move, get_best_move, rank_moves

RED, BLACK = Player.RED, Player.BLACK
QUEEN = Rank.QUEEN


def _kinds(statements):
    return [s.kind for s in statements]


class TestGetBestMove:

    def test_prefers_longest_queen_capture(self, empty_board):
        place(empty_board, 0, 0, RED, QUEEN)
        place(empty_board, 2, 2, BLACK)
        place(empty_board, 4, 4, BLACK)
        best = get_best_move(empty_board, RED)
        assert best.to == Position(5, 5)
        assert best.captures == (Position(2, 2), Position(4, 4))
        assert best.priority == 200

    def test_ties_go_to_first_enumerated(self, initial_board):
        # (2,3)->(3,4), (2,5)->(3,4), (2,5)->(3,6), (2,7)->(3,6) all score 7.
        best = get_best_move(initial_board, RED)
        assert best.frm == Position(2, 3)
        assert best.to == Position(3, 4)
        assert best.priority == 7

    def test_capture_beats_promotion(self, empty_board):
        place(empty_board, 8, 1, RED)
        place(empty_board, 4, 4, RED)
        place(empty_board, 5, 5, BLACK)
        best = get_best_move(empty_board, RED)
        assert best.captures == (Position(5, 5),)

    def test_no_moves_returns_none(self, empty_board):
        place(empty_board, 4, 5, BLACK)
        assert get_best_move(empty_board, RED) is None

    def test_explicit_empty_candidate_list(self, initial_board):
        assert get_best_move(initial_board, RED, []) is None

    def test_rank_moves_is_stable(self):
        a = Move(Position(0, 1), Position(1, 2), (), 5)
        b = Move(Position(0, 3), Position(1, 4), (), 9)
        c = Move(Position(0, 5), Position(1, 6), (), 5)
        assert rank_moves([a, b, c]) == [b, a, c]


class TestExplainMove:

    def test_single_capture(self, empty_board):
        place(empty_board, 2, 2, RED)
        place(empty_board, 3, 3, BLACK)
        move = get_best_move(empty_board, RED)
        statements = explain_move(empty_board, move)
        assert _kinds(statements) == [RationaleKind.CAPTURE]
        assert "(3,3)" in statements[0].summary

    def test_queen_multi_capture(self, empty_board):
        place(empty_board, 0, 0, RED, QUEEN)
        place(empty_board, 2, 2, BLACK)
        place(empty_board, 4, 4, BLACK)
        move = get_best_move(empty_board, RED)
        statements = explain_move(empty_board, move)
        assert _kinds(statements) == [RationaleKind.MULTI_CAPTURE, RationaleKind.QUEEN_MOVE]
        assert "2 opponent pieces" in statements[0].summary
        assert "Travels 5 squares" in statements[1].summary

    def test_promotion(self, empty_board):
        place(empty_board, 8, 3, RED)
        move = get_best_move(empty_board, RED)
        assert move.to.row == 9
        assert _kinds(explain_move(empty_board, move)) == [RationaleKind.PROMOTION]

    def test_capture_that_promotes(self, empty_board):
        place(empty_board, 7, 2, RED)
        place(empty_board, 8, 3, BLACK)
        move = get_best_move(empty_board, RED)
        assert move.to == Position(9, 4)
        assert _kinds(explain_move(empty_board, move)) == [
            RationaleKind.CAPTURE,
            RationaleKind.PROMOTION,
        ]

    def test_quiet_queen_move(self, empty_board):
        place(empty_board, 9, 0, BLACK, QUEEN)
        move = get_best_move(empty_board, BLACK)
        statements = explain_move(empty_board, move)
        assert _kinds(statements) == [RationaleKind.QUEEN_MOVE]

    def test_safe_positioning(self, initial_board):
        move = get_best_move(initial_board, RED)
        statements = explain_move(initial_board, move)
        assert _kinds(statements) == [RationaleKind.STRATEGY]
        assert statements[0].summary == "Safe positioning move"
        assert statements[0].reason
