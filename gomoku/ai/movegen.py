"""
Move generation and ordering for Gomoku AI.
Restricts evaluation to cells near existing stones.
"""

from typing import Optional

from ..game.board import Board, CENTER
from .heuristic import Heuristic


class MoveGenerator:
    """
    Generates and scores candidate moves for the AI.
    Candidates keep first-seen order so ties resolve deterministically.
    """

    # Chebyshev distance from an existing stone
    RADIUS = 2

    def __init__(self, heuristic: Heuristic, radius: int = RADIUS):
        self.heuristic = heuristic
        self.radius = radius

    def generate_candidates(self, board: Board) -> list:
        """
        Get candidate positions.

        Returns:
            List of (row, col) tuples in first-seen order; the center alone
            for an empty board
        """
        if board.is_empty_board():
            return [CENTER]
        return board.get_adjacent_empty(radius=self.radius)

    def score_candidates(self, board: Board, color: int,
                         candidates: Optional[list] = None) -> list:
        """Combined heuristic score for each candidate, as (score, move) in generation order."""
        if candidates is None:
            candidates = self.generate_candidates(board)
        return [(self.heuristic.evaluate_move(board, row, col, color), (row, col))
                for row, col in candidates]

    def get_moves(self, board: Board, color: int, limit: Optional[int] = None) -> list:
        """
        Get ordered list of candidate moves.

        Args:
            board: Current board state
            color: Color to generate moves for
            limit: Maximum number of moves to return (None = all)

        Returns:
            List of (score, (row, col)) tuples, best first; equal scores keep
            generation order
        """
        scored_moves = self.score_candidates(board, color)
        # sort is stable, so ties stay in first-seen order
        scored_moves.sort(key=lambda x: x[0], reverse=True)
        if limit is not None:
            scored_moves = scored_moves[:limit]
        return scored_moves
