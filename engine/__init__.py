"""
Connect Four AI engine package.

This package implements a classical connect-four engine using minimax search
with alpha-beta pruning, a threat-counting evaluation function, and a
rule-based zugzwang simulation for column-filling endgames.

Modules:
    constants - Board size, player marks, score weights, difficulty presets
    board     - Grid representation, move generation, four-in-a-row check
    threats   - Threat counting and zugzwang candidate detection
    zugzwang  - Rule-based simulation of column-filling races
    evaluate  - Static position evaluation with a per-search cache
    search    - Alpha-beta minimax and the compute_best_move entry point
"""

__version__ = "1.0.0"
