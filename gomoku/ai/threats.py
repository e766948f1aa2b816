"""
Critical move detection for Gomoku.

Forced moves are found by an ordered list of tiers. Each tier places a
hypothetical stone on every empty cell (row-major) and tests a predicate;
the first cell that satisfies the highest tier wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..game.board import Board
from ..game.rules import Rules


class CriticalReason(Enum):
    """Which tier produced a forced move."""
    WIN = "WIN"
    BLOCK_WIN = "BLOCK_WIN"
    CREATE_OPEN_FOUR = "CREATE_OPEN_FOUR"
    BLOCK_OPEN_FOUR = "BLOCK_OPEN_FOUR"


@dataclass(frozen=True)
class CriticalTier:
    """One priority level of the detector."""
    reason: CriticalReason
    for_opponent: bool  # Place the opponent's stone instead of ours
    predicate: Callable[[Board, int, int, int], bool]


@dataclass(frozen=True)
class CriticalMove:
    """A forced move and the tier that produced it."""
    row: int
    col: int
    reason: CriticalReason

    @property
    def move(self) -> tuple:
        return (self.row, self.col)


# Highest priority first
CRITICAL_TIERS = (
    CriticalTier(CriticalReason.WIN, False, Rules.check_five_at),
    CriticalTier(CriticalReason.BLOCK_WIN, True, Rules.check_five_at),
    CriticalTier(CriticalReason.CREATE_OPEN_FOUR, False, Rules.has_open_four),
    CriticalTier(CriticalReason.BLOCK_OPEN_FOUR, True, Rules.has_open_four),
)


def find_tier_move(board: Board, color: int, tier: CriticalTier,
                   cells: Optional[list] = None) -> Optional[tuple]:
    """
    Return the first empty cell (row-major) satisfying a single tier.

    Args:
        board: Current board state
        color: Color to move
        tier: Tier to evaluate
        cells: Empty cells to scan; computed from the board if omitted

    Returns:
        (row, col) or None
    """
    stone = Rules.opposite(color) if tier.for_opponent else color
    if cells is None:
        cells = board.empty_cells()

    for row, col in cells:
        with board.hypothetical(row, col, stone):
            if tier.predicate(board, row, col, stone):
                return (row, col)
    return None


def find_critical_move(board: Board, color: int) -> Optional[CriticalMove]:
    """
    Check for forced moves that MUST be played.
    Returns a CriticalMove if one is forced, None otherwise.

    Priority:
    1. Winning move (5 in a row)
    2. Block opponent's winning move
    3. Create an open four
    4. Block opponent's open four
    """
    cells = board.empty_cells()
    if not cells:
        return None

    for tier in CRITICAL_TIERS:
        move = find_tier_move(board, color, tier, cells)
        if move is not None:
            return CriticalMove(move[0], move[1], tier.reason)
    return None
