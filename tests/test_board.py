"""
Tests for supercheckers.board: starting layout, text diagrams, piece helpers.
"""

import pytest

from supercheckers.board import Board, Piece, Player, Position, Rank, in_bounds, is_dark
from supercheckers.constants import BOARD_SIZE


class TestInitialLayout:

    def test_each_side_has_fifteen_men(self, initial_board):
        assert initial_board.count(Player.RED) == 15
        assert initial_board.count(Player.BLACK) == 15

    def test_pieces_only_on_dark_squares(self, initial_board):
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if not is_dark(row, col):
                    assert initial_board.get((row, col)) is None

    def test_red_on_top_rows_black_on_bottom_rows(self, initial_board):
        for pos, piece in initial_board.pieces(Player.RED):
            assert pos.row < 3
            assert piece.rank is Rank.MAN
        for pos, _piece in initial_board.pieces(Player.BLACK):
            assert pos.row >= 7

    def test_middle_rows_are_empty(self, initial_board):
        for row in range(3, 7):
            assert all(cell is None for cell in initial_board.cells[row])


class TestTextDiagram:

    def test_round_trip_initial_board(self, initial_board):
        text = initial_board.to_text()
        assert Board.from_text(text).to_text() == text

    def test_first_row_of_initial_board(self, initial_board):
        assert initial_board.to_text().splitlines()[0] == ".r.r.r.r.r"

    def test_parses_queens(self):
        rows = ["." * 10] * 10
        rows[0] = ".R" + "." * 8
        rows[9] = "B" + "." * 9
        board = Board.from_text("\n".join(rows))
        assert board.get((0, 1)) == Piece(Player.RED, Rank.QUEEN)
        assert board.get((9, 0)) == Piece(Player.BLACK, Rank.QUEEN)

    def test_rejects_wrong_row_count(self):
        with pytest.raises(ValueError, match="expected 10 rows"):
            Board.from_text("\n".join(["." * 10] * 9))

    def test_rejects_wrong_row_length(self):
        rows = ["." * 10] * 10
        rows[4] = "." * 9
        with pytest.raises(ValueError, match="row 4"):
            Board.from_text("\n".join(rows))

    def test_rejects_unknown_character(self):
        rows = ["." * 10] * 10
        rows[0] = ".x" + "." * 8
        with pytest.raises(ValueError, match="unknown cell"):
            Board.from_text("\n".join(rows))

    def test_rejects_piece_on_light_square(self):
        rows = ["." * 10] * 10
        rows[0] = "r" + "." * 9
        with pytest.raises(ValueError, match="light square"):
            Board.from_text("\n".join(rows))


class TestPieceAndPlayer:

    def test_promotion_keeps_identity(self):
        piece = Piece(Player.RED)
        same = piece
        piece.promote()
        assert same is piece
        assert piece.is_queen

    def test_player_helpers(self):
        assert Player.RED.opponent is Player.BLACK
        assert Player.BLACK.opponent is Player.RED
        assert Player.RED.forward == 1
        assert Player.BLACK.forward == -1
        assert Player.RED.promotion_row == 9
        assert Player.BLACK.promotion_row == 0

    def test_symbols(self):
        assert Piece(Player.RED).symbol() == "r"
        assert Piece(Player.BLACK, Rank.QUEEN).symbol() == "B"

    @pytest.mark.parametrize("row, col, expected", [
        (0, 0, True), (9, 9, True), (-1, 0, False), (0, 10, False), (10, 3, False),
    ])
    def test_in_bounds(self, row, col, expected):
        assert in_bounds(row, col) is expected

    def test_copy_is_independent(self, initial_board):
        clone = initial_board.copy()
        clone.set((0, 1), None)
        clone.get((2, 1)).promote()
        assert initial_board.get((0, 1)) is not None
        assert not initial_board.get((2, 1)).is_queen

    def test_position_str(self):
        assert str(Position(3, 4)) == "3,4"
