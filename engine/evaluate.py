"""
Static position evaluation for the search.

A position is scored from one player's perspective as the difference between
that player's and the opponent's "strength":

    strength = threats * THREAT_SCORE + sum(column_weight(x)) * CENTRALITY_SCORE

where the sum runs over the player's stones. A player who already has four
in a row gets MAX_SCORE instead, and the combined score collapses to the
matching sentinel.

With zugzwang evaluation enabled, the candidates collected while counting
both players' threats are handed to engine.zugzwang.simulate, and its
verdict (-1, 0 or 1) is added with weight ZUGZWANG_SCORE. The verdict is
large enough to dominate everything except a realized win.

Scores are cached per search call, keyed on the exact board contents. The
player, the starting side and the zugzwang flag are fixed for one search, so
they are not part of the key.
"""

from engine.board import Board, has_line, other_player
from engine.constants import (
    CENTRALITY_SCORE,
    HEIGHT,
    MAX_SCORE,
    THREAT_SCORE,
    WIDTH,
    WIN_LENGTH,
    ZUGZWANG_SCORE,
)
from engine.threats import count_threats
from engine.zugzwang import ZugzwangCandidate, simulate

EvaluationCache = dict[tuple[tuple[int, ...], ...], int]


def column_weight(x: int) -> int:
    """Centrality weight of column x: 3 in the middle, falling to 0 at the edges."""
    center = WIDTH // 2
    return x if x <= center else WIDTH - 1 - x


def evaluate_centrality(board: Board, player: int) -> int:
    total = 0
    for y in range(HEIGHT):
        for x in range(WIDTH):
            if board.grid[y][x] == player:
                total += column_weight(x) * CENTRALITY_SCORE
    return total


def evaluate_position(board: Board, player: int, candidates: list[ZugzwangCandidate]) -> int:
    """
    Score how strong `player` stands, ignoring the opponent.

    Args:
        board:      Position to score. Not modified.
        player:     Whose stones and threats are counted.
        candidates: Receives the zugzwang candidates found while counting
                    threats. Left untouched when `player` has already won.

    Returns:
        MAX_SCORE if `player` has four in a row, otherwise the weighted sum
        of threats and centrality.
    """
    if has_line(board.grid, player, WIN_LENGTH)[0]:
        return MAX_SCORE

    score = count_threats(board.grid, player, WIN_LENGTH, candidates) * THREAT_SCORE
    score += evaluate_centrality(board, player)
    return score


def evaluation(
    board: Board,
    cache: EvaluationCache,
    player: int,
    player_started: bool,
    zugzwang_evaluation: bool,
) -> int:
    """
    Signed score of `board` from `player`'s perspective, memoized in `cache`.

    Args:
        board:               Position to score. Not modified.
        cache:               Per-search memo keyed on board.key().
        player:              Side the score is reported for.
        player_started:      True when `player` made the opening move of the
                             game; decides who moves first in the zugzwang
                             simulation.
        zugzwang_evaluation: Add the simulator's verdict when True.

    Returns:
        MAX_SCORE / -MAX_SCORE when either side already has four in a row
        (the opponent's win is checked first), otherwise the strength
        difference plus the optional zugzwang term.
    """
    key = board.key()
    cached = cache.get(key)
    if cached is not None:
        return cached

    candidates: list[ZugzwangCandidate] = []

    max_side = evaluate_position(board, player, candidates)
    min_side = evaluate_position(board, other_player(player), candidates)

    # Sentinels are reported as is, never subtracted.
    if min_side == MAX_SCORE:
        result = -MAX_SCORE
    elif max_side == MAX_SCORE:
        result = MAX_SCORE
    else:
        result = max_side - min_side
        if zugzwang_evaluation:
            result += simulate(candidates, player, player_started) * ZUGZWANG_SCORE

    cache[key] = result
    return result
