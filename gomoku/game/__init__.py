from .board import Board, EMPTY, BLACK, WHITE, BOARD_SIZE
from .rules import Rules, GameStatus

__all__ = ['Board', 'Rules', 'GameStatus', 'EMPTY', 'BLACK', 'WHITE', 'BOARD_SIZE']
