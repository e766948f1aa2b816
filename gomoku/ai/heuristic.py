"""
Heuristic evaluation function for Gomoku.
Scores a single placement using pattern-based scoring along the 4 axes.
"""

from ..game.board import Board
from ..game.rules import Rules
from .patterns import scan_half_axis, score_axis


# Direction vectors for line extraction
DIRECTIONS = [
    (0, 1),   # Horizontal →
    (1, 0),   # Vertical ↓
    (1, 1),   # Diagonal ↘
    (1, -1),  # Diagonal ↙
]


class Heuristic:
    """
    Evaluates candidate placements for the AI.
    Attack value for the mover plus the value of denying the cell to the opponent.
    """

    # Weights for different factors
    ATTACK_WEIGHT = 1.1   # Slightly prefer our own threats when scores are close
    DEFENSE_WEIGHT = 1.0

    def __init__(self, attack_weight: float = ATTACK_WEIGHT,
                 defense_weight: float = DEFENSE_WEIGHT):
        self.attack_weight = attack_weight
        self.defense_weight = defense_weight

    def score_placement(self, board: Board, row: int, col: int, color: int) -> int:
        """
        Score placing a color stone at an empty (row, col).

        The stone is placed for the duration of the call and always removed
        again, so the board is unchanged afterwards.

        Args:
            board: Current board state
            row, col: Empty cell to evaluate
            color: The color to evaluate for (BLACK or WHITE)

        Returns:
            Sum of the per-axis pattern scores
        """
        with board.hypothetical(row, col, color):
            return sum(score for _, _, score in self._scan_axes(board, row, col, color))

    def axis_breakdown(self, board: Board, row: int, col: int, color: int) -> list:
        """Per-direction (direction, total_count, score) for debugging."""
        with board.hypothetical(row, col, color):
            return list(self._scan_axes(board, row, col, color))

    def _scan_axes(self, board: Board, row: int, col: int, color: int):
        for dr, dc in DIRECTIONS:
            positive = scan_half_axis(board, row, col, dr, dc, color)
            negative = scan_half_axis(board, row, col, -dr, -dc, color)
            total = positive.count + negative.count + 1
            yield (dr, dc), total, int(score_axis(positive, negative))

    def evaluate_move(self, board: Board, row: int, col: int, color: int) -> float:
        """
        Combined score of a candidate move.
        attack * ATTACK_WEIGHT + threat * DEFENSE_WEIGHT, where threat is what
        the same cell would be worth to the opponent.
        """
        attack = self.score_placement(board, row, col, color)
        threat = self.score_placement(board, row, col, Rules.opposite(color))
        return attack * self.attack_weight + threat * self.defense_weight
