"""
Gomoku game rules implementation.
Line counting, five-in-a-row and open-four detection, game status.
"""

from enum import Enum
from typing import Optional

from .board import Board, BLACK, WHITE

# 4 directions (one per axis)
DIRECTIONS_4 = [
    (0, 1),    # horizontal →
    (1, 0),    # vertical ↓
    (1, 1),    # diagonal ↘
    (1, -1),   # diagonal ↙
]


class GameStatus(Enum):
    """Outcome of a position."""
    PLAYING = "playing"
    BLACK_WINS = "black-wins"
    WHITE_WINS = "white-wins"
    DRAW = "draw"


class Rules:
    """Free-style Gomoku rules: five or more in a row wins."""

    WIN_LENGTH = 5

    @staticmethod
    def opposite(color: int) -> int:
        """Get the opposite color."""
        return WHITE if color == BLACK else BLACK

    @staticmethod
    def count_consecutive(board: Board, row: int, col: int, color: int,
                          dr: int, dc: int) -> int:
        """
        Count consecutive stones in one direction from (row, col).
        Does not include the starting position.
        """
        count = 0
        r, c = row + dr, col + dc

        while Board.is_valid_pos(r, c) and board.get(r, c) == color:
            count += 1
            r += dr
            c += dc

        return count

    @staticmethod
    def count_line(board: Board, row: int, col: int, color: int,
                   dr: int, dc: int) -> tuple:
        """
        Count total consecutive stones through (row, col) in a line.
        Returns (total_count, open_ends)
        open_ends: 0, 1, or 2 (number of open ends)
        """
        # Count in positive direction
        pos_count = Rules.count_consecutive(board, row, col, color, dr, dc)

        # Count in negative direction
        neg_count = Rules.count_consecutive(board, row, col, color, -dr, -dc)

        total = pos_count + neg_count + 1  # +1 for the stone at (row, col)

        # Check open ends
        open_ends = 0

        # Positive end
        end_r, end_c = row + (pos_count + 1) * dr, col + (pos_count + 1) * dc
        if board.is_empty(end_r, end_c):
            open_ends += 1

        # Negative end
        end_r, end_c = row - (neg_count + 1) * dr, col - (neg_count + 1) * dc
        if board.is_empty(end_r, end_c):
            open_ends += 1

        return (total, open_ends)

    @staticmethod
    def check_five_at(board: Board, row: int, col: int, color: int) -> bool:
        """Check if there's 5 or more in a row through (row, col)."""
        for dr, dc in DIRECTIONS_4:
            total, _ = Rules.count_line(board, row, col, color, dr, dc)
            if total >= Rules.WIN_LENGTH:
                return True
        return False

    @staticmethod
    def has_open_four(board: Board, row: int, col: int, color: int) -> bool:
        """
        Check if the stone at (row, col) is part of an open four.

        Open four here means 4+ contiguous stones (no gaps) with at least
        one open end in some direction.
        """
        for dr, dc in DIRECTIONS_4:
            total, open_ends = Rules.count_line(board, row, col, color, dr, dc)
            if total >= 4 and open_ends >= 1:
                return True
        return False

    @staticmethod
    def get_five_positions(board: Board, row: int, col: int, color: int) -> list:
        """Get positions forming a five-in-row through (row, col)."""
        for dr, dc in DIRECTIONS_4:
            positions = [(row, col)]

            # Positive direction
            r, c = row + dr, col + dc
            while Board.is_valid_pos(r, c) and board.get(r, c) == color:
                positions.append((r, c))
                r, c = r + dr, c + dc

            # Negative direction
            r, c = row - dr, col - dc
            while Board.is_valid_pos(r, c) and board.get(r, c) == color:
                positions.append((r, c))
                r, c = r - dr, c - dc

            if len(positions) >= Rules.WIN_LENGTH:
                return sorted(positions)

        return []

    @staticmethod
    def find_five_line(board: Board) -> Optional[tuple]:
        """
        Search the entire board for a five-in-row.
        Returns (color, positions) for the first line found, or None.
        """
        for color in (BLACK, WHITE):
            if not board.has_five_in_row(color):
                continue
            for row, col in board.occupied_cells():
                if board.get(row, col) != color:
                    continue
                positions = Rules.get_five_positions(board, row, col, color)
                if positions:
                    return (color, positions)
        return None

    @staticmethod
    def game_status(board: Board) -> GameStatus:
        """Derive the game status from the stones on the board."""
        line = Rules.find_five_line(board)
        if line is not None:
            color, _ = line
            return GameStatus.BLACK_WINS if color == BLACK else GameStatus.WHITE_WINS
        if board.is_full():
            return GameStatus.DRAW
        return GameStatus.PLAYING

    @staticmethod
    def is_valid_move(board: Board, row: int, col: int) -> bool:
        """A move is valid when the cell is on the board and empty."""
        return board.is_empty(row, col)

    @staticmethod
    def get_valid_moves(board: Board) -> list:
        """Get all valid moves in row-major order."""
        return board.empty_cells()
