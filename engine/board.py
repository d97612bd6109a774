"""
Board representation, move generation, and four-in-a-row detection.

The grid is stored as a list of rows, row 0 at the top. Stones fall to the
highest row index that is still empty, so a cell is playable when it is
empty and either sits on the bottom row or has a stone directly below it.

The search mutates one Board in place (set a cell, recurse, clear it again),
so the class is small: no move history, no undo stack.
"""

from dataclasses import dataclass

from engine.constants import COMPUTER_PLAYER, EMPTY, HEIGHT, USER_PLAYER, WIDTH

Grid = list[list[int]]

# Direction vectors tested by has_line, in scan order:
# right, down, down-right diagonal, down-left diagonal.
LINE_DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (-1, 1))


@dataclass(frozen=True, order=True)
class Move:
    """A cell on the board: x is the column, y the row (0 = top)."""

    x: int
    y: int


class Board:
    """
    A 7x6 connect-four grid.

    Attributes:
        grid: HEIGHT rows of WIDTH cell values (EMPTY, USER_PLAYER or
              COMPUTER_PLAYER). Indexed as grid[y][x].
    """

    def __init__(self, grid: Grid | None = None) -> None:
        if grid is None:
            grid = [[EMPTY] * WIDTH for _ in range(HEIGHT)]
        self.grid: Grid = grid

    @classmethod
    def from_grid(cls, grid: list[list[int]]) -> "Board":
        """Build a board from a nested list, copying the rows."""
        return cls([list(row) for row in grid])

    def get(self, x: int, y: int) -> int:
        return self.grid[y][x]

    def set(self, x: int, y: int, value: int) -> None:
        self.grid[y][x] = value

    def copy(self) -> "Board":
        return Board.from_grid(self.grid)

    def key(self) -> tuple[tuple[int, ...], ...]:
        """Hashable snapshot of the cell contents, used as the evaluation cache key."""
        return tuple(tuple(row) for row in self.grid)

    def has_ground(self, x: int, y: int) -> bool:
        return y + 1 == HEIGHT or self.grid[y + 1][x] != EMPTY

    def available_moves(self) -> list[Move]:
        """
        Return every playable cell in row-major order (top row first).

        The order decides which of several equally scored moves the search
        reports, so it must stay stable.
        """
        return [
            Move(x, y)
            for y in range(HEIGHT)
            for x in range(WIDTH)
            if self.grid[y][x] == EMPTY and self.has_ground(x, y)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __repr__(self) -> str:
        rows = "".join("".join(str(cell) for cell in row) + "/" for row in self.grid)
        return f"Board({rows[:-1]})"


def other_player(player: int) -> int:
    return USER_PLAYER if player == COMPUTER_PLAYER else COMPUTER_PLAYER


def _check_sequence(
    grid: Grid,
    player: int,
    length: int,
    start_x: int,
    start_y: int,
    step_x: int,
    step_y: int,
) -> bool:
    end_x = start_x + (length - 1) * step_x
    end_y = start_y + (length - 1) * step_y
    if not (0 <= end_x < WIDTH and 0 <= end_y < HEIGHT):
        return False

    for i in range(length):
        if grid[start_y + i * step_y][start_x + i * step_x] != player:
            return False
    return True


def has_line(grid: Grid, player: int, length: int) -> tuple[bool, Move | None]:
    """
    Find a run of `length` stones of `player` in any of the four directions.

    Start cells are scanned row-major; for each start cell the directions are
    tried in LINE_DIRECTIONS order.

    Args:
        grid:   Board contents, indexed grid[y][x]. Not modified.
        player: The mark to look for.
        length: Required run length (WIN_LENGTH for a win check).

    Returns:
        (True, start cell of the first run found) or (False, None).
    """
    for y in range(HEIGHT):
        for x in range(WIDTH):
            for step_x, step_y in LINE_DIRECTIONS:
                if _check_sequence(grid, player, length, x, y, step_x, step_y):
                    return True, Move(x, y)
    return False, None
