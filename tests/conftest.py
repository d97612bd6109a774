"""
Shared pytest fixtures for the engine and transport tests.

Boards are written top row first, exactly as they appear on screen:

    EMPTY GRID TEMPLATE
    [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ]
"""

from typing import Callable

import pytest

from engine.board import Board

# A full board without four in a row for either side: columns alternate
# 1/2 and the colours swap every two rows, so no direction has a run
# longer than two.
DRAWN_GRID = [
    [1, 2, 1, 2, 1, 2, 1],
    [1, 2, 1, 2, 1, 2, 1],
    [2, 1, 2, 1, 2, 1, 2],
    [2, 1, 2, 1, 2, 1, 2],
    [1, 2, 1, 2, 1, 2, 1],
    [1, 2, 1, 2, 1, 2, 1],
]


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def make_board() -> Callable[[list[list[int]]], Board]:
    """Return a factory that copies a nested grid into a fresh Board."""
    return Board.from_grid


@pytest.fixture
def drawn_grid() -> list[list[int]]:
    return [list(row) for row in DRAWN_GRID]
