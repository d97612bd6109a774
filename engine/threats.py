"""
Threat detection: count near-complete lines and collect zugzwang candidates.

A threat is a window of WIN_LENGTH cells that belongs entirely to one player
except for at most one empty cell (the wildcard). When the cell under the
wildcard is still empty the threat cannot be completed right away; it becomes
a zugzwang candidate that the simulator in engine.zugzwang resolves later.

Three window families are scanned: horizontal, down-right diagonal and
down-left diagonal. Vertical threats are left out on purpose: a vertical
wildcard is always playable at once, so it never produces a candidate and the
search sees it directly.

Overlapping detections of the same gap are suppressed differently per family:
the horizontal scan moves its cursor past the matched window, the diagonal
scans remember where each accepted pattern ended and skip later windows that
start on the same diagonal before that point.
"""

from engine.board import Grid, Move
from engine.constants import EMPTY, HEIGHT, WIDTH
from engine.zugzwang import ZugzwangCandidate


def _candidate_at(grid: Grid, player: int, x: int, y: int) -> ZugzwangCandidate | None:
    """Return a candidate for the wildcard at (x, y) if the cell beneath it is empty."""
    if y + 1 < HEIGHT and grid[y + 1][x] == EMPTY:
        return ZugzwangCandidate.create(Move(x, y), player)
    return None


def check_sequence_horizontal(
    grid: Grid,
    player: int,
    length: int,
    start_x: int,
    y: int,
) -> tuple[bool, ZugzwangCandidate | None, int]:
    """
    Test the horizontal window starting at (start_x, y).

    Returns:
        (matched, candidate, cursor). On a match the cursor is moved to the
        wildcard's offset inside the window, or to the last cell of a full
        window, so the caller does not report the same gap twice. Without a
        match the cursor is returned unchanged.
    """
    if start_x + length - 1 >= WIDTH:
        return False, None, start_x

    pattern_end = length - 1
    wildcard = True
    candidate = None

    for i in range(length):
        cell = grid[y][start_x + i]
        if cell != player:
            if cell == EMPTY and wildcard:
                candidate = _candidate_at(grid, player, start_x + i, y)
                wildcard = False
                # End the pattern at the gap so a second gap further right
                # can still be found by the next window.
                pattern_end = i
                continue
            return False, None, start_x

    return True, candidate, start_x + pattern_end


def check_sequence_diagonal(
    grid: Grid,
    player: int,
    length: int,
    start_x: int,
    start_y: int,
    pattern_ends: list[Move],
) -> tuple[bool, ZugzwangCandidate | None]:
    """
    Test the down-right diagonal window starting at (start_x, start_y).

    pattern_ends holds the end cells of diagonals accepted earlier in the
    same scan; an accepted window appends its own end (the wildcard cell, or
    the last cell when the window is full).
    """
    end_x = start_x + length - 1
    end_y = start_y + length - 1
    if end_x >= WIDTH or end_y >= HEIGHT:
        return False, None

    for pattern_end in pattern_ends:
        x_diff = start_x - pattern_end.x
        y_diff = start_y - pattern_end.y
        if x_diff <= 0 and y_diff <= 0 and x_diff == y_diff:
            return False, None

    candidate = None
    wildcard = True

    for i in range(length):
        x = start_x + i
        y = start_y + i
        cell = grid[y][x]
        if cell != player:
            if cell == EMPTY and wildcard:
                candidate = _candidate_at(grid, player, x, y)
                wildcard = False
                end_x, end_y = x, y
                continue
            return False, None

    pattern_ends.append(Move(end_x, end_y))
    return True, candidate


def check_sequence_diagonal_mirrored(
    grid: Grid,
    player: int,
    length: int,
    start_x: int,
    start_y: int,
    pattern_ends: list[Move],
) -> tuple[bool, ZugzwangCandidate | None]:
    """Down-left counterpart of check_sequence_diagonal (steps of (-1, +1))."""
    end_x = start_x - length + 1
    end_y = start_y + length - 1
    if end_x < 0 or end_y >= HEIGHT:
        return False, None

    for pattern_end in pattern_ends:
        x_diff = start_x - pattern_end.x
        y_diff = start_y - pattern_end.y
        if x_diff >= 0 and y_diff <= 0 and x_diff == -y_diff:
            return False, None

    candidate = None
    wildcard = True

    for i in range(length):
        x = start_x - i
        y = start_y + i
        cell = grid[y][x]
        if cell != player:
            if cell == EMPTY and wildcard:
                candidate = _candidate_at(grid, player, x, y)
                wildcard = False
                end_x, end_y = x, y
                continue
            return False, None

    pattern_ends.append(Move(end_x, end_y))
    return True, candidate


def count_threats(
    grid: Grid,
    player: int,
    length: int,
    candidates: list[ZugzwangCandidate],
) -> int:
    """
    Count the threats of `player` and collect their zugzwang candidates.

    The horizontal and down-right scans share one row-major pass: after the
    horizontal window at the cursor is tested (and the cursor possibly moved
    forward), the diagonal window is tested at the moved cursor. The
    down-left scan runs afterwards, column by column.

    Args:
        grid:       Board contents, indexed grid[y][x]. Not modified.
        player:     Whose threats to count.
        length:     Window length (WIN_LENGTH).
        candidates: Accumulator shared across players within one evaluation;
                    candidates are appended in detection order.

    Returns:
        Number of matching windows, full windows included.
    """
    count = 0
    diagonal_pattern_ends: list[Move] = []
    mirrored_pattern_ends: list[Move] = []

    for y in range(HEIGHT):
        x = 0
        while x < WIDTH:
            found, candidate, x = check_sequence_horizontal(grid, player, length, x, y)
            if found:
                count += 1
            if candidate is not None:
                candidates.append(candidate)

            found, candidate = check_sequence_diagonal(
                grid, player, length, x, y, diagonal_pattern_ends
            )
            if found:
                count += 1
            if candidate is not None:
                candidates.append(candidate)

            x += 1

    for x in range(WIDTH):
        for y in range(HEIGHT):
            found, candidate = check_sequence_diagonal_mirrored(
                grid, player, length, x, y, mirrored_pattern_ends
            )
            if found:
                count += 1
            if candidate is not None:
                candidates.append(candidate)

    return count
