"""Tests for threat counting and zugzwang candidate detection."""

from engine.board import Move
from engine.constants import COMPUTER_PLAYER, USER_PLAYER, WIN_LENGTH
from engine.threats import (
    check_sequence_diagonal,
    check_sequence_diagonal_mirrored,
    check_sequence_horizontal,
    count_threats,
)
from engine.zugzwang import ZugzwangCandidate


def test_horizontal_match_moves_cursor() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [2, 2, 0, 2, 1, 0, 0],
        [0, 0, 0, 2, 2, 2, 2],
        [0, 0, 0, 0, 0, 0, 0],
    ]

    found, _, cursor = check_sequence_horizontal(grid, COMPUTER_PLAYER, WIN_LENGTH, 0, 3)
    assert found
    assert cursor == 2

    found, candidate, cursor = check_sequence_horizontal(grid, COMPUTER_PLAYER, WIN_LENGTH, 3, 4)
    assert found
    assert candidate is None
    assert cursor == 6


def test_horizontal_mismatch_keeps_cursor() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [2, 2, 1, 2, 1, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ]

    assert check_sequence_horizontal(grid, COMPUTER_PLAYER, WIN_LENGTH, 0, 3) == (False, None, 0)


def test_horizontal_out_of_bounds() -> None:
    grid = [[2] * 7 for _ in range(6)]
    assert check_sequence_horizontal(grid, COMPUTER_PLAYER, WIN_LENGTH, 4, 0) == (False, None, 4)


def test_count_threats_horizontal() -> None:
    grid = [
        [2, 1, 1, 2, 0, 2, 2],  # 3-6
        [2, 2, 0, 2, 0, 0, 0],  # 0-3
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 2, 2, 2, 2, 0],  # 1-4 and 2-5
    ]

    assert count_threats(grid, COMPUTER_PLAYER, WIN_LENGTH, []) == 4


def test_diagonal_records_pattern_end_at_gap() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [2, 0, 0, 0, 0, 0, 0],
        [0, 2, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 1, 1, 2, 1, 0, 0],
    ]

    pattern_ends: list[Move] = []
    found, candidate = check_sequence_diagonal(grid, COMPUTER_PLAYER, WIN_LENGTH, 0, 2, pattern_ends)

    assert found
    # The gap at (2, 4) sits on a stone, so it can be played at once.
    assert candidate is None
    assert pattern_ends == [Move(2, 4)]


def test_diagonal_duplicates_are_suppressed() -> None:
    grid = [
        [2, 0, 0, 0, 0, 0, 0],
        [0, 2, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 2, 0, 0, 0],
        [0, 0, 0, 0, 2, 0, 0],
        [0, 1, 1, 2, 1, 2, 0],
    ]

    assert count_threats(grid, COMPUTER_PLAYER, WIN_LENGTH, []) == 1


def test_mirrored_diagonal_duplicates_are_suppressed() -> None:
    grid = [
        [0, 0, 0, 0, 0, 1, 0],
        [0, 0, 0, 0, 1, 0, 0],
        [0, 0, 0, 1, 0, 0, 0],
        [0, 0, 1, 0, 0, 0, 0],
        [0, 1, 0, 0, 0, 0, 0],
        [1, 1, 1, 2, 1, 0, 0],
    ]

    assert count_threats(grid, USER_PLAYER, WIN_LENGTH, []) == 1


def test_multiple_diagonals() -> None:
    grid = [
        [0, 0, 0, 0, 0, 1, 0],
        [0, 1, 0, 0, 1, 0, 0],
        [0, 0, 1, 1, 0, 0, 0],
        [0, 0, 1, 0, 1, 0, 0],
        [0, 1, 0, 0, 1, 1, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ]

    assert count_threats(grid, USER_PLAYER, WIN_LENGTH, []) == 4


def test_windows_do_not_cross_the_edges() -> None:
    grid = [
        [0, 0, 0, 2, 0, 0, 0],
        [0, 0, 0, 0, 2, 0, 0],
        [0, 0, 0, 0, 0, 2, 0],
        [2, 0, 0, 0, 0, 0, 2],
        [2, 0, 0, 0, 0, 0, 0],
        [2, 0, 0, 0, 2, 2, 2],
    ]

    assert count_threats(grid, COMPUTER_PLAYER, WIN_LENGTH, []) == 2


def test_mirrored_diagonal() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 2, 0, 0, 0],
        [0, 0, 2, 0, 0, 0, 0],
        [0, 2, 0, 0, 0, 0, 0],
    ]

    assert check_sequence_diagonal_mirrored(grid, COMPUTER_PLAYER, WIN_LENGTH, 4, 2, [])[0]
    assert count_threats(grid, COMPUTER_PLAYER, WIN_LENGTH, []) == 1


def test_horizontal_candidate() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [1, 1, 0, 1, 0, 0, 0],
        [2, 2, 0, 2, 0, 0, 0],
        [1, 1, 0, 1, 0, 0, 0],
    ]

    _, candidate, _ = check_sequence_horizontal(grid, COMPUTER_PLAYER, WIN_LENGTH, 0, 4)
    assert candidate == ZugzwangCandidate(Move(2, 4), True, COMPUTER_PLAYER)


def test_diagonal_candidate() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 2, 0, 0, 0],
        [1, 1, 0, 1, 2, 0, 0],
        [1, 2, 0, 1, 0, 0, 0],
        [2, 1, 0, 1, 0, 0, 2],
    ]

    _, candidate = check_sequence_diagonal(grid, COMPUTER_PLAYER, WIN_LENGTH, 3, 2, [])
    assert candidate == ZugzwangCandidate(Move(5, 4), True, COMPUTER_PLAYER)


def test_mirrored_diagonal_candidate() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [1, 0, 2, 0, 2, 0, 0],
        [1, 2, 2, 1, 0, 0, 0],
        [2, 1, 2, 1, 1, 0, 2],
    ]

    _, candidate = check_sequence_diagonal_mirrored(grid, COMPUTER_PLAYER, WIN_LENGTH, 3, 2, [])
    assert candidate == ZugzwangCandidate(Move(3, 2), True, COMPUTER_PLAYER)


def test_count_threats_collects_diagonal_candidates() -> None:
    grid = [
        [0, 0, 2, 1, 1, 2, 0],
        [0, 0, 1, 2, 1, 2, 0],
        [0, 0, 1, 2, 1, 1, 0],
        [0, 0, 1, 1, 2, 2, 0],
        [0, 0, 2, 2, 1, 1, 0],
        [0, 0, 1, 1, 2, 2, 0],
    ]

    candidates: list[ZugzwangCandidate] = []
    count_threats(grid, USER_PLAYER, WIN_LENGTH, candidates)

    assert candidates == [
        ZugzwangCandidate(Move(6, 3), False, USER_PLAYER),
        ZugzwangCandidate(Move(1, 1), False, USER_PLAYER),
    ]


def test_count_threats_collects_mirrored_candidates() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 1],
        [0, 0, 0, 0, 0, 0, 2],
        [0, 0, 0, 0, 1, 0, 2],
        [0, 0, 1, 1, 0, 0, 2],
        [0, 0, 1, 2, 0, 0, 1],
    ]

    candidates: list[ZugzwangCandidate] = []
    count_threats(grid, USER_PLAYER, WIN_LENGTH, candidates)

    assert candidates == [ZugzwangCandidate(Move(5, 2), True, USER_PLAYER)]


def test_candidate_requires_empty_cell_below() -> None:
    grid = [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [2, 2, 0, 2, 0, 0, 0],
    ]

    candidates: list[ZugzwangCandidate] = []
    assert count_threats(grid, COMPUTER_PLAYER, WIN_LENGTH, candidates) == 1
    # The gap is on the bottom row: playable now, so not a zugzwang.
    assert candidates == []
