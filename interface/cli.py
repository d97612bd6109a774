"""
Command-line front end: read a board from stdin, print the computer's move.

The board is six lines of seven characters, top row first:

    .  or 0   empty
    X  or 1   user stone
    O  or 2   computer stone

Whitespace inside a line is ignored and blank lines are skipped, so both
"..X...." and ". . X . . . ." are accepted.

Output on stdout is the board after the computer's move followed by one
result line:

    move 3 4 score 2000 result NextMove

Critical rule: stdout carries only the board and the result line so the
output can be piped into other tools. Diagnostics go to stderr.
"""

import argparse
import logging
import sys
from typing import Iterable

from engine.board import Board
from engine.constants import COMPUTER_PLAYER, EMPTY, HEIGHT, USER_PLAYER, WIDTH, Difficulty
from engine.search import compute_best_move

_log = logging.getLogger(__name__)

_CELL_CHARS = {
    ".": EMPTY,
    "0": EMPTY,
    "X": USER_PLAYER,
    "x": USER_PLAYER,
    "1": USER_PLAYER,
    "O": COMPUTER_PLAYER,
    "o": COMPUTER_PLAYER,
    "2": COMPUTER_PLAYER,
}
_CELL_SYMBOLS = {EMPTY: ".", USER_PLAYER: "X", COMPUTER_PLAYER: "O"}


def _send(line: str) -> None:
    print(line, flush=True)


def parse_board(lines: Iterable[str]) -> Board:
    """
    Parse the text board format described in the module docstring.

    Raises:
        ValueError: Wrong number of rows or cells, or an unknown character.
    """
    rows = []
    for raw_line in lines:
        line = "".join(raw_line.split())
        if not line:
            continue
        if len(line) != WIDTH:
            raise ValueError(f"row {len(rows)} has {len(line)} cells, expected {WIDTH}")
        try:
            rows.append([_CELL_CHARS[char] for char in line])
        except KeyError as exc:
            raise ValueError(f"unknown cell character {exc.args[0]!r}") from None

    if len(rows) != HEIGHT:
        raise ValueError(f"board has {len(rows)} rows, expected {HEIGHT}")
    return Board(rows)


def format_board(board: Board) -> str:
    return "\n".join("".join(_CELL_SYMBOLS[cell] for cell in row) for row in board.grid)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m interface.cli",
        description="Compute the computer's next connect-four move for a board read from stdin.",
    )
    parser.add_argument(
        "--difficulty",
        type=int,
        default=2,
        help="0 easy, 1 medium, anything else hard (default: 2)",
    )
    parser.add_argument(
        "--computer-started",
        action="store_true",
        help="the computer made the opening move of the game",
    )
    parser.add_argument("--verbose", action="store_true", help="log search details to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    try:
        board = parse_board(sys.stdin)
    except ValueError as exc:
        _log.error("invalid board: %s", exc)
        return 2

    move, score, outcome = compute_best_move(
        board, args.computer_started, Difficulty.from_level(args.difficulty)
    )

    _send(format_board(board))
    position = f"{move.x} {move.y}" if move is not None else "(none)"
    _send(f"move {position} score {score} result {outcome.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
