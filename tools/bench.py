#!/usr/bin/env python3
"""
Benchmark: measure nodes visited and time per move for every difficulty.

Run before and after each search or evaluation change to quantify the
effect. A lower node count at the same depth indicates more effective
pruning; a lower time per node indicates a faster evaluation function.

Usage: python3 tools/bench.py
"""
import os
import sys
import time

_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from engine.constants import DIFFICULTY_PRESETS, HARD, MAX_SCORE, MIN_SCORE  # noqa: E402
from engine.search import SearchState, maximize  # noqa: E402
from interface.cli import parse_board  # noqa: E402

# Fixed positions spanning opening, middlegame, and zugzwang-heavy endings.
# These are fixed forever: the same positions are used for every version comparison.
POSITIONS = [
    ("Center reply", [
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "...X...",
    ]),
    ("Block three", [
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "XXX....",
    ]),
    ("Early mid", [
        ".......",
        ".......",
        ".......",
        "...O...",
        "..XX...",
        "..OXO..",
    ]),
    ("Zugzwang", [
        ".......",
        ".......",
        ".......",
        "..OOO..",
        "X.XX...",
        ".......",
    ]),
    ("Late ending", [
        "..XOXO.",
        "..XOOX.",
        "..XXXO.",
        "..OOOX.",
        ".OOXXO.",
        ".XXOOOX",
    ]),
]


def run_position(label: str, rows: list[str], difficulty) -> dict:
    """Search one position at one difficulty and return metrics.

    Calls maximize() directly instead of compute_best_move() so the
    SearchState, and with it the node count, stays available.

    Args:
        label: Human-readable position name for display.
        rows: The position in interface.cli text format.
        difficulty: Preset to search with.

    Returns:
        Dict with keys: label, depth, move, score, nodes, time_ms.
    """
    board = parse_board(rows)
    state = SearchState(difficulty=difficulty, player_started=False)

    start = time.perf_counter()
    move, score = maximize(board, difficulty.depth, MIN_SCORE, MAX_SCORE, state)
    time_ms = int((time.perf_counter() - start) * 1000)

    return {
        "label": label,
        "depth": difficulty.depth,
        "move": f"{move.x},{move.y}" if move is not None else "(none)",
        "score": score,
        "nodes": state.node_count,
        "time_ms": time_ms,
    }


def main() -> None:
    """Run all benchmark positions at every difficulty and print a summary table."""
    presets = sorted(set(DIFFICULTY_PRESETS.values()) | {HARD}, key=lambda d: d.depth)

    print(f"Connect4 engine benchmark ({sys.executable})")
    print()
    print(
        f"{'Position':<14} {'Depth':>5} {'Move':<7} {'Score':>20} "
        f"{'Nodes':>9} {'Time(ms)':>9}"
    )
    print("-" * 70)

    results = []
    for difficulty in presets:
        for label, rows in POSITIONS:
            r = run_position(label, rows, difficulty)
            results.append(r)
            print(
                f"{r['label']:<14} {r['depth']:>5} {r['move']:<7} {r['score']:>20} "
                f"{r['nodes']:>9,} {r['time_ms']:>9,}"
            )

    total_nodes = sum(r["nodes"] for r in results)
    total_ms = sum(r["time_ms"] for r in results)
    print("-" * 70)
    print(f"{'TOTAL':<14} {'':>5} {'':<7} {'':>20} {total_nodes:>9,} {total_ms:>9,}")


if __name__ == "__main__":
    main()
