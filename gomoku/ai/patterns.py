"""
Pattern definitions for Gomoku heuristic evaluation.
Half-axis line scanning and per-axis pattern scoring.
"""

from dataclasses import dataclass
from enum import IntEnum

from ..game.board import Board, EMPTY


class PatternScore(IntEnum):
    """Score values for different patterns."""
    FIVE = 100_000            # Win
    OPEN_FOUR = 10_000        # Unstoppable
    FOUR = 1_000              # Must block
    OPEN_THREE = 500          # Very dangerous
    THREE = 100               # Needs attention
    OPEN_TWO = 50
    TWO = 10
    ONE = 1


@dataclass(frozen=True)
class Run:
    """
    Result of scanning one half-axis away from a cell.

    count: same-color stones found, excluding the reference cell, plus any
        run found just past a single empty gap.
    blocked: the run ends at the board edge or an opponent stone.
    """
    count: int
    blocked: bool


def scan_half_axis(board: Board, row: int, col: int, dr: int, dc: int,
                   color: int) -> Run:
    """
    Walk from (row + dr, col + dc) in direction (dr, dc) counting stones of color.

    If the walk stops on an empty cell and the cell after that holds color,
    that second run is folded into the count (patterns like XX_X). Only one
    gap is ever crossed.
    """
    count = 0
    r, c = row + dr, col + dc

    while Board.is_valid_pos(r, c) and board.get(r, c) == color:
        count += 1
        r, c = r + dr, c + dc

    if not Board.is_valid_pos(r, c) or board.get(r, c) != EMPTY:
        return Run(count, True)

    # One empty cell: look through it
    r, c = r + dr, c + dc
    while Board.is_valid_pos(r, c) and board.get(r, c) == color:
        count += 1
        r, c = r + dr, c + dc

    return Run(count, False)


def score_axis(positive: Run, negative: Run) -> int:
    """Score one axis from its two half-axis runs plus the placed stone."""
    total = positive.count + negative.count + 1
    both_blocked = positive.blocked and negative.blocked
    one_blocked = positive.blocked or negative.blocked

    if total >= 5:
        return PatternScore.FIVE
    if both_blocked:
        return 0
    if total == 4:
        return PatternScore.FOUR if one_blocked else PatternScore.OPEN_FOUR
    if total == 3:
        return PatternScore.THREE if one_blocked else PatternScore.OPEN_THREE
    if total == 2:
        return PatternScore.TWO if one_blocked else PatternScore.OPEN_TWO
    return PatternScore.ONE
