"""
Search entry point: minimax with alpha-beta pruning over a fixed depth.

This module defines the stable public interface that web/app.py and
interface/cli.py depend on. The signature of compute_best_move() is the
contract between the engine and every transport.

The computer is always the maximizing side and the user the minimizing
side, so the search is written as two mutually recursive functions rather
than negamax: leaf scores come from engine.evaluate.evaluation, which is
always computed from the computer's perspective and cached per call.

Board handling:
    The caller's Board is mutated in place. Every recursive call writes one
    stone, searches, and clears that cell again before returning, including
    when a cutoff stops the loop early. Only compute_best_move() leaves a
    stone behind: the move it finally chooses.

Move ordering:
    Moves are searched in Board.available_moves() order (row-major, top row
    first). Only a strictly better score replaces the best root move, so among
    equally scored moves the first one in that order is reported.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from engine.board import Board, Move, has_line
from engine.constants import (
    COMPUTER_PLAYER,
    EMPTY,
    MAX_SCORE,
    MIN_SCORE,
    USER_PLAYER,
    WIN_LENGTH,
    Difficulty,
)
from engine.evaluate import EvaluationCache, evaluation

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """State of the game after the computer's move."""

    NEXT_MOVE = "NextMove"
    COMPUTER_WINS = "ComputerWins"
    PLAYER_WINS = "PlayerWins"
    DRAW = "Draw"
    NONE = "None"


@dataclass
class SearchState:
    """
    Per-call search context.

    Attributes:
        difficulty:     Depth and zugzwang setting. difficulty.depth is also
                        how the search recognizes the root ply.
        player_started: True when the computer made the opening move of the
                        game. Passed through to the evaluator.
        cache:          Evaluation memo, discarded when the call returns.
        node_count:     Number of positions visited. Reported by tools/bench.py.
    """

    difficulty: Difficulty
    player_started: bool
    cache: EvaluationCache = field(default_factory=dict)
    node_count: int = 0


def _is_terminal(board: Board, depth: int, moves: list[Move]) -> bool:
    return (
        depth == 0
        or not moves
        or has_line(board.grid, COMPUTER_PLAYER, WIN_LENGTH)[0]
        or has_line(board.grid, USER_PLAYER, WIN_LENGTH)[0]
    )


def _leaf_score(board: Board, state: SearchState) -> int:
    return evaluation(
        board,
        state.cache,
        COMPUTER_PLAYER,
        state.player_started,
        state.difficulty.zugzwang_evaluation,
    )


def maximize(
    board: Board,
    depth: int,
    alpha: int,
    beta: int,
    state: SearchState,
) -> tuple[Move | None, int]:
    """
    Computer to move: return the highest score reachable within `depth` plies.

    Args:
        board: Current position. Modified in place and restored on return.
        depth: Remaining plies. The call with depth == state.difficulty.depth
               is the root.
        alpha: Lower bound of the window; also the starting best score, so a
               node where nothing beats alpha returns alpha.
        beta:  Upper bound of the window. Scanning stops once the best score
               reaches it.
        state: Per-call context.

    Returns:
        (best move, score). The move is only set at the root and only when
        some move scored strictly above the initial alpha.
    """
    state.node_count += 1
    moves = board.available_moves()

    if _is_terminal(board, depth, moves):
        return None, _leaf_score(board, state)

    best_move = None
    max_val = alpha

    for move in moves:
        board.set(move.x, move.y, COMPUTER_PLAYER)
        try:
            _, val = minimize(board, depth - 1, max_val, beta, state)
        finally:
            board.set(move.x, move.y, EMPTY)

        if val > max_val:
            max_val = val
            if depth == state.difficulty.depth:
                best_move = move
            if max_val >= beta:
                break

    return best_move, max_val


def minimize(
    board: Board,
    depth: int,
    alpha: int,
    beta: int,
    state: SearchState,
) -> tuple[None, int]:
    """
    User to move: return the lowest score reachable within `depth` plies.

    Mirror image of maximize(): the running minimum starts at beta and
    scanning stops once it drops to alpha. Never reports a move.
    """
    state.node_count += 1
    moves = board.available_moves()

    if _is_terminal(board, depth, moves):
        return None, _leaf_score(board, state)

    min_val = beta

    for move in moves:
        board.set(move.x, move.y, USER_PLAYER)
        try:
            _, val = maximize(board, depth - 1, alpha, min_val, state)
        finally:
            board.set(move.x, move.y, EMPTY)

        if val < min_val:
            min_val = val
            if min_val <= alpha:
                break

    return None, min_val


def compute_best_move(
    board: Board,
    computer_started: bool,
    difficulty: Difficulty,
    rng: random.Random | None = None,
) -> tuple[Move | None, int, Outcome]:
    """
    Choose the computer's move for `board` and play it.

    Args:
        board:            Current position. The chosen move is written into
                          it as a COMPUTER_PLAYER stone; otherwise unchanged.
        computer_started: True when the computer made the first move of the
                          game.
        difficulty:       Search depth and zugzwang setting.
        rng:              Source for the fallback move when every line loses.
                          Defaults to the module-level random generator.

    Returns:
        (move, score, outcome):
            - move:    The cell played, or None when the board was full.
            - score:   Root score from the computer's perspective. MIN_SCORE
                       means the user can force a win whatever is played.
            - outcome: Whether the move ended the game, and how.
    """
    state = SearchState(difficulty=difficulty, player_started=computer_started)

    move, score = maximize(board, difficulty.depth, MIN_SCORE, MAX_SCORE, state)
    logger.debug(
        "search depth=%d nodes=%d cached=%d score=%d",
        difficulty.depth,
        state.node_count,
        len(state.cache),
        score,
    )

    free_moves = board.available_moves()

    # Every line loses: play something rather than resign.
    if move is None and free_moves:
        move = (rng or random).choice(free_moves)
        logger.debug("no move avoids a forced loss, playing %s at random", move)

    if not free_moves and score != MIN_SCORE:
        return None, 0, Outcome.DRAW

    if move is not None:
        board.set(move.x, move.y, COMPUTER_PLAYER)

    if has_line(board.grid, COMPUTER_PLAYER, WIN_LENGTH)[0]:
        outcome = Outcome.COMPUTER_WINS
    elif has_line(board.grid, USER_PLAYER, WIN_LENGTH)[0]:
        outcome = Outcome.PLAYER_WINS
    else:
        outcome = Outcome.NEXT_MOVE

    return move, score, outcome
