"""
Super Checkers engine package.

This package implements the rules of Super Checkers on a 10x10 board (move
legality, capture chains, queen promotion) and a greedy hint engine that
suggests the best available move with a short rationale.

Modules:
    constants — Board geometry and hint priority weights
    board     — Players, pieces, positions, and the grid
    rules     — Move legality, capture-chain continuation, move execution
    evaluate  — Priority scoring of candidate moves
    moves     — Candidate move enumeration
    search    — Best-move selection and hint explanation
    game      — GameState and the entry points an interface calls
"""
