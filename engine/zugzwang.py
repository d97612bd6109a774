"""
Rule-based zugzwang simulation.

A depth-limited search cannot see to the end of a column-filling race: both
sides hold squares they need but cannot take yet, and whoever is eventually
forced to play underneath the opponent's square loses. This module replays
such a race with a fixed rule table instead of a tree search.

Only the columns holding at least one candidate take part. Each column is
compacted into a stack of HEIGHT slots, bottom slot first, and every column
is treated as empty when the simulation starts. The two sides alternate; on
every turn the mover either completes one of its own squares (and wins),
or fills the slot the rule table likes best.
"""

from dataclasses import dataclass
from typing import Iterable

from engine.board import Move, other_player
from engine.constants import CONTESTED, EMPTY, HEIGHT

# Results of a single simulated turn, from the mover's point of view.
_TURN_CONTINUES = 0
_TURN_WIN = 1
_TURN_LOSS = -1
_TURN_DRAW = 3


@dataclass(frozen=True)
class ZugzwangCandidate:
    """
    A threat square that cannot be completed yet because the cell below is empty.

    Attributes:
        square: The empty cell that would complete the player's line.
        even:   True when square.y is even. Kept for callers that reason
                about parity directly; the simulator derives parity from
                stack positions.
        player: Owner of the threat.
    """

    square: Move
    even: bool
    player: int

    @classmethod
    def create(cls, square: Move, player: int) -> "ZugzwangCandidate":
        return cls(square, square.y % 2 == 0, player)


def group_by_column(candidates: Iterable[ZugzwangCandidate]) -> dict[int, list[ZugzwangCandidate]]:
    """
    Group candidates by column.

    Keys come out in ascending column order; inside each column the
    candidates keep the order they were passed in.
    """
    grouped: dict[int, list[ZugzwangCandidate]] = {}
    for candidate in candidates:
        grouped.setdefault(candidate.square.x, []).append(candidate)
    return {column: grouped[column] for column in sorted(grouped)}


def build_stacks(candidates: Iterable[ZugzwangCandidate]) -> list[list[int]]:
    """
    Compact the candidates into one bottom-up stack per occupied column.

    A slot claimed by both players becomes CONTESTED and stays that way no
    matter how many further claims arrive.
    """
    grouped = group_by_column(candidates)
    stacks = [[EMPTY] * HEIGHT for _ in grouped]

    for stack, column in zip(stacks, grouped.values()):
        for candidate in column:
            slot = HEIGHT - 1 - candidate.square.y
            if stack[slot] == CONTESTED:
                continue
            if stack[slot] == other_player(candidate.player):
                stack[slot] = CONTESTED
            else:
                stack[slot] = candidate.player

    return stacks


def _column_is_empty(column: list[int], y: int) -> bool:
    return all(cell == EMPTY for cell in column[y:])


def _rules(column: list[int], y: int, player: int) -> list[tuple[int, bool, bool]]:
    """
    The ordered (score, condition, first_priority) table for one column.

    Order matters: see _apply_rules.
    """
    opponent = other_player(player)
    size = len(column)
    above = column[y + 1] if y + 1 < size else None
    two_above = column[y + 2] if y + 2 < size else None

    return [
        # Block the opponent's square.
        (7, column[y] == opponent, True),
        # Start filling a column nobody needs.
        (6, _column_is_empty(column, y), False),
        # Uncover our own square on an odd level (y counts from 0 at the bottom).
        (2, above == player and (y + 2) % 2 != 0, True),
        # Uncover our own square.
        (1, above == player, True),
        # Play two below our own odd square to take control of its timing.
        (5, two_above == player and (y + 1) % 2 == 0, False),
        # Play two below our own square.
        (4, two_above == player, False),
        # Play two below an opponent or contested square.
        (4, two_above in (opponent, CONTESTED), False),
        # The next three slots are free.
        (
            3,
            y + 3 < size
            and column[y] == EMPTY
            and column[y + 1] == EMPTY
            and column[y + 2] == EMPTY,
            False,
        ),
        # Neither this slot nor the one above is ours.
        (1, above is not None and column[y] != player and above != player, False),
        # Anything goes.
        (0, True, False),
    ]


def _apply_rules(rules: list[tuple[int, bool, bool]], best: list[int], x: int) -> None:
    """
    Offer column x to the running best move.

    The first rule whose condition holds and whose score beats best[1] wins
    the column. A holding first_priority rule that does not beat it ends the
    search for this column; other holding rules fall through to the next one.
    """
    for score, condition, first_priority in rules:
        if not condition:
            continue
        if best[1] < score:
            best[0] = x
            best[1] = score
            return
        if first_priority:
            return


def simulate_turn(stacks: list[list[int]], player: int, heights: list[int]) -> int:
    """
    Play one turn for `player`, advancing `heights` in place.

    Returns:
        0 when play continues, 1 when `player` completes a square, -1 when
        `player` has no column left to play, 3 when every column is full.
    """
    opponent = other_player(player)
    filled_columns = 0
    best = [0, -1]  # [column, score]

    for x, column in enumerate(stacks):
        y = heights[x]
        if y >= HEIGHT:
            filled_columns += 1
            continue

        if column[y] in (player, CONTESTED):
            return _TURN_WIN

        # Never play directly under a square the opponent can use.
        if y + 1 < HEIGHT and column[y + 1] in (opponent, CONTESTED):
            continue

        _apply_rules(_rules(column, y, player), best, x)

    if filled_columns == len(stacks):
        return _TURN_DRAW

    if best == [0, -1]:
        # Only reachable when every open column sits under an opponent square.
        return _TURN_LOSS

    heights[best[0]] += 1
    return _TURN_CONTINUES


def simulate(candidates: Iterable[ZugzwangCandidate], player: int, player_started: bool) -> int:
    """
    Decide who wins the column-filling race for the given candidates.

    Args:
        candidates:     Candidates of both players from one evaluation.
        player:         The side the verdict is reported for.
        player_started: True when `player` made the opening move of the
                        game, i.e. `player` moves first in the simulation.

    Returns:
        1 when `player` wins the race, -1 when it loses, 0 for a draw.
    """
    stacks = build_stacks(candidates)
    heights = [0] * len(stacks)
    player_at_turn = player if player_started else other_player(player)

    while True:
        result = simulate_turn(stacks, player_at_turn, heights)
        if result != _TURN_CONTINUES:
            if result == _TURN_DRAW:
                return 0
            return result if player_at_turn == player else -result
        player_at_turn = other_player(player_at_turn)
