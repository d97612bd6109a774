"""
Interface package: non-HTTP front ends for the connect-four engine.

Modules:
    cli - Reads a board from stdin and prints the computer's move.
          Run as: python -m interface.cli --difficulty 1 < board.txt
"""
