"""
Engine constants: board geometry, player marks, score weights, and difficulty presets.

All numeric constants used throughout the engine are defined here so that
future modules never need to introduce new magic numbers. Centralizing
constants makes tuning and experimentation much easier.

The score weights are chosen so that the terms never collide in practice:
one zugzwang verdict outweighs any realistic number of threats, and one
threat outweighs the centrality bonus of a full board.
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------
# Coordinates are (x, y): x grows left to right, y grows top to bottom.
# (0, 0) is the top-left cell, (6, 5) the bottom-right cell.

WIDTH: int = 7
HEIGHT: int = 6

# Number of stones in a row needed to win.
WIN_LENGTH: int = 4

# ---------------------------------------------------------------------------
# Cell values
# ---------------------------------------------------------------------------

EMPTY: int = 0
USER_PLAYER: int = 1
COMPUTER_PLAYER: int = 2

# Marker used only inside the zugzwang simulator for a cell both players
# need to complete one of their lines.
CONTESTED: int = 4

# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------
# MAX_SCORE is the largest signed 64-bit integer, the value HTTP clients
# receive for a won position. MIN_SCORE is its exact negation (not
# -MAX_SCORE - 1), so the two sentinels are symmetric.

MAX_SCORE: int = 2**63 - 1
MIN_SCORE: int = -MAX_SCORE

ZUGZWANG_SCORE: int = 100_000_000
THREAT_SCORE: int = 10_000
CENTRALITY_SCORE: int = 1_000

# ---------------------------------------------------------------------------
# Difficulty presets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Difficulty:
    """
    Search configuration selected by the client.

    Attributes:
        depth:                Number of plies searched from the root.
        zugzwang_evaluation:  Whether leaf scores include the zugzwang
                              simulator's verdict.
    """

    depth: int
    zugzwang_evaluation: bool

    @classmethod
    def from_level(cls, level: int) -> "Difficulty":
        """Map a client level (0 easy, 1 medium, anything else hard) to a preset."""
        return DIFFICULTY_PRESETS.get(level, HARD)


EASY = Difficulty(depth=4, zugzwang_evaluation=False)
MEDIUM = Difficulty(depth=6, zugzwang_evaluation=True)
HARD = Difficulty(depth=8, zugzwang_evaluation=True)

DIFFICULTY_PRESETS: dict[int, Difficulty] = {
    0: EASY,
    1: MEDIUM,
}
