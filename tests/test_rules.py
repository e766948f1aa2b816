"""Tests for Gomoku game rules."""

import sys
sys.path.insert(0, '.')

from gomoku.game.board import Board, BLACK, WHITE, BOARD_SIZE
from gomoku.game.rules import Rules, GameStatus


class TestLineCounting:
    """Contiguous line counting through a cell."""

    def test_opposite(self):
        assert Rules.opposite(BLACK) == WHITE
        assert Rules.opposite(WHITE) == BLACK

    def test_count_consecutive(self):
        """Counting stops at the first non-matching cell."""
        board = Board()
        board.place_stone(5, 6, BLACK)
        board.place_stone(5, 7, BLACK)
        board.place_stone(5, 8, WHITE)
        assert Rules.count_consecutive(board, 5, 5, BLACK, 0, 1) == 2
        assert Rules.count_consecutive(board, 5, 5, BLACK, 0, -1) == 0

    def test_count_line_open_ends(self):
        """_XXX_ has three stones and two open ends."""
        board = Board()
        for col in (4, 5, 6):
            board.place_stone(7, col, BLACK)
        assert Rules.count_line(board, 7, 5, BLACK, 0, 1) == (3, 2)

    def test_count_line_edge_is_closed(self):
        """The board edge closes a line."""
        board = Board()
        for col in (0, 1, 2):
            board.place_stone(0, col, WHITE)
        assert Rules.count_line(board, 0, 0, WHITE, 0, 1) == (3, 1)

    def test_count_line_ignores_gaps(self):
        """XX_X is counted as two, not three."""
        board = Board()
        for col in (3, 4, 6):
            board.place_stone(7, col, BLACK)
        total, _ = Rules.count_line(board, 7, 4, BLACK, 0, 1)
        assert total == 2


class TestFiveAndFour:
    """Win and open-four predicates."""

    def test_check_five_at(self):
        board = Board()
        for row in range(3, 8):
            board.place_stone(row, 2, WHITE)
        assert Rules.check_five_at(board, 5, 2, WHITE)
        assert not Rules.check_five_at(board, 5, 2, BLACK)

    def test_overline_counts_as_five(self):
        """Six in a row still wins."""
        board = Board()
        for col in range(2, 8):
            board.place_stone(9, col, BLACK)
        assert Rules.check_five_at(board, 9, 4, BLACK)

    def test_open_four_one_open_end(self):
        """Four contiguous stones with one open end is an open four."""
        board = Board()
        board.place_stone(7, 2, WHITE)
        for col in (3, 4, 5, 6):
            board.place_stone(7, col, BLACK)
        assert Rules.has_open_four(board, 7, 6, BLACK)

    def test_open_four_against_edge(self):
        """The edge blocks one end; the other open end is enough."""
        board = Board()
        for col in (0, 1, 2, 3):
            board.place_stone(4, col, BLACK)
        assert Rules.has_open_four(board, 4, 0, BLACK)

    def test_four_blocked_both_ends(self):
        """Four contiguous stones with both ends blocked is not an open four."""
        board = Board()
        board.place_stone(7, 2, WHITE)
        board.place_stone(7, 7, WHITE)
        for col in (3, 4, 5, 6):
            board.place_stone(7, col, BLACK)
        assert not Rules.has_open_four(board, 7, 4, BLACK)

    def test_three_is_not_open_four(self):
        board = Board()
        for col in (3, 4, 5):
            board.place_stone(7, col, BLACK)
        assert not Rules.has_open_four(board, 7, 4, BLACK)

    def test_split_four_is_not_open_four(self):
        """The predicate does not look through gaps."""
        board = Board()
        for col in (3, 4, 6, 7):
            board.place_stone(7, col, BLACK)
        assert not Rules.has_open_four(board, 7, 4, BLACK)


class TestWinningLine:
    """Derived game-over queries."""

    def test_get_five_positions(self):
        board = Board()
        for i in range(5):
            board.place_stone(2 + i, 2 + i, BLACK)
        positions = Rules.get_five_positions(board, 4, 4, BLACK)
        assert positions == [(2, 2), (3, 3), (4, 4), (5, 5), (6, 6)]

    def test_get_five_positions_none(self):
        board = Board()
        board.place_stone(4, 4, BLACK)
        assert Rules.get_five_positions(board, 4, 4, BLACK) == []

    def test_find_five_line(self):
        board = Board()
        for col in range(10, 15):
            board.place_stone(14, col, WHITE)
        board.place_stone(0, 0, BLACK)
        color, positions = Rules.find_five_line(board)
        assert color == WHITE
        assert positions == [(14, c) for c in range(10, 15)]

    def test_find_five_line_none(self):
        board = Board()
        for col in range(4):
            board.place_stone(3, col, BLACK)
        assert Rules.find_five_line(board) is None

    def test_game_status(self):
        board = Board()
        assert Rules.game_status(board) == GameStatus.PLAYING

        for row in range(5):
            board.place_stone(row, 7, BLACK)
        assert Rules.game_status(board) == GameStatus.BLACK_WINS

    def test_game_status_white_wins(self):
        board = Board()
        for i in range(5):
            board.place_stone(4 + i, 10 - i, WHITE)
        assert Rules.game_status(board) == GameStatus.WHITE_WINS

    def test_game_status_draw(self):
        """A full board without five is a draw."""
        board = Board()
        # Column pairs alternate and each row flips: runs never exceed two
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                color = BLACK if (col // 2 + row) % 2 == 0 else WHITE
                board.place_stone(row, col, color)
        assert Rules.find_five_line(board) is None
        assert Rules.game_status(board) == GameStatus.DRAW

    def test_valid_moves(self):
        board = Board()
        board.place_stone(0, 0, BLACK)
        moves = Rules.get_valid_moves(board)
        assert (0, 0) not in moves
        assert moves[0] == (0, 1)
        assert Rules.is_valid_move(board, 0, 1)
        assert not Rules.is_valid_move(board, 0, 0)
        assert not Rules.is_valid_move(board, 15, 15)


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
