"""Shared helpers for building test positions."""

from __future__ import annotations

import pytest

from supercheckers.board import Board, Piece, Player, Rank


def place(board: Board, row: int, col: int, owner: Player, rank: Rank = Rank.MAN) -> Piece:
    """Put a new piece on the board and return it."""
    piece = Piece(owner, rank)
    board.set((row, col), piece)
    return piece


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()
