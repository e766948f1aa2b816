"""Tests for candidate generation."""

import sys
sys.path.insert(0, '.')

from gomoku.game.board import Board, BLACK, WHITE
from gomoku.ai.heuristic import Heuristic
from gomoku.ai.movegen import MoveGenerator


class TestCandidates:

    def setup_method(self):
        self.move_gen = MoveGenerator(Heuristic())

    def test_empty_board_center(self):
        assert self.move_gen.generate_candidates(Board()) == [(7, 7)]

    def test_single_stone(self):
        """One stone at (7,7): the 24 cells within distance 2, no duplicates."""
        board = Board()
        board.place_stone(7, 7, BLACK)
        candidates = self.move_gen.generate_candidates(board)

        expected = {
            (r, c)
            for r in range(5, 10)
            for c in range(5, 10)
            if (r, c) != (7, 7)
        }
        assert len(candidates) == 24
        assert set(candidates) == expected

    def test_row_major_within_neighbourhood(self):
        board = Board()
        board.place_stone(7, 7, BLACK)
        candidates = self.move_gen.generate_candidates(board)
        assert candidates == sorted(candidates)

    def test_overlapping_neighbourhoods(self):
        """Cells near two stones appear once."""
        board = Board()
        board.place_stone(7, 7, BLACK)
        board.place_stone(7, 9, WHITE)
        candidates = self.move_gen.generate_candidates(board)
        assert len(candidates) == len(set(candidates))
        # 5x7 block minus the two stones
        assert len(candidates) == 33

    def test_radius(self):
        move_gen = MoveGenerator(Heuristic(), radius=1)
        board = Board()
        board.place_stone(7, 7, BLACK)
        assert len(move_gen.generate_candidates(board)) == 8

    def test_score_candidates_generation_order(self):
        board = Board()
        board.place_stone(7, 7, BLACK)
        scored = self.move_gen.score_candidates(board, WHITE)
        assert [move for _, move in scored] == self.move_gen.generate_candidates(board)

    def test_get_moves_best_first(self):
        board = Board()
        for col in (5, 6):
            board.place_stone(7, col, BLACK)
        moves = self.move_gen.get_moves(board, BLACK, limit=3)
        assert len(moves) == 3
        scores = [score for score, _ in moves]
        assert scores == sorted(scores, reverse=True)
        # Extending the two (directly or across one gap) makes an open three
        assert moves[0][1] in ((7, 3), (7, 4), (7, 7), (7, 8))
        assert moves[0][0] == moves[1][0] == moves[2][0]

    def test_get_moves_stable_ties(self):
        """Equal scores keep generation order."""
        board = Board()
        board.place_stone(7, 7, BLACK)
        moves = self.move_gen.get_moves(board, BLACK)
        order = self.move_gen.generate_candidates(board)
        for (s1, m1), (s2, m2) in zip(moves, moves[1:]):
            if s1 == s2:
                assert order.index(m1) < order.index(m2)


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
