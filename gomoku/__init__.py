"""
Gomoku move-selection engine.
Picks the next move for a 15x15 five-in-a-row position.
"""

__version__ = "0.1.0"
