"""
Advisory move suggestions from an external text generator.

The advisor sees the board as text and replies with a coordinate such as
"H8". Columns are letters A-O, rows are numbers 1-15. Whatever happens on
the advisor side, the result here is either a move or None.
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Callable, Optional

from ..game.board import Board, BLACK, BOARD_SIZE, COLUMN_LABELS

logger = logging.getLogger(__name__)

# Tried in order; the first match that lands on the board wins
_PATTERNS = [
    re.compile(r'([A-Oa-o])\s*[,\s]?\s*(\d{1,2})'),    # H8, H 8, H,8
    re.compile(r'(\d{1,2})\s*[,\s]?\s*([A-Oa-o])'),    # 8H, 8 H, 8,H
    re.compile(r'\(([A-Oa-o])\s*,\s*(\d{1,2})\)'),     # (H,8)
    re.compile(r'\((\d{1,2})\s*,\s*([A-Oa-o])\)'),     # (8,H)
]


def parse_suggestion(text: str) -> Optional[tuple]:
    """
    Extract a (row, col) move from free text.

    Returns None when no pattern matches or the coordinate is off the board.
    """
    if not text:
        return None

    for pattern in _PATTERNS:
        match = pattern.search(text)
        if not match:
            continue

        first, second = match.group(1), match.group(2)
        if first.isalpha():
            letter, number = first, second
        else:
            number, letter = first, second

        col = ord(letter.upper()) - ord('A')
        row = int(number) - 1
        if Board.is_valid_pos(row, col):
            return (row, col)

    return None


def format_move(row: int, col: int) -> str:
    """Render (row, col) as a coordinate like H8."""
    return f'{COLUMN_LABELS[col]}{row + 1}'


def build_prompt(board: Board, color: int) -> str:
    """Build the advisor prompt for the side to move."""
    own = 'Black (X)' if color == BLACK else 'White (O)'
    other = 'White (O)' if color == BLACK else 'Black (X)'
    return (
        f"You are a strong Gomoku (five in a row) player.\n\n"
        f"Current {BOARD_SIZE}x{BOARD_SIZE} board, X = black, O = white, . = empty:\n"
        f"{board}\n\n"
        f"You play {own}; your opponent plays {other}.\n\n"
        f"Things to check:\n"
        f"1. Whether you have four in a row that can win now\n"
        f"2. Whether the opponent has a three or four that must be blocked\n"
        f"3. Where you can build an open three or a double three\n"
        f"4. Only empty cells (.) can be played\n\n"
        f"Reply with the coordinate only (for example H8), nothing else."
    )


class SuggestionClient:
    """
    Asks an external provider for a move suggestion with a timeout.

    provider: any callable taking the prompt text and returning reply text.
    """

    DEFAULT_TIMEOUT = 5.0  # seconds

    def __init__(self, provider: Callable[[str], str],
                 timeout: float = DEFAULT_TIMEOUT):
        self.provider = provider
        self.timeout = timeout

    def suggest(self, board: Board, color: int) -> Optional[tuple]:
        """
        Request and parse a suggestion.

        Returns (row, col) or None. Timeouts, provider errors and unparseable
        replies all give None; occupancy is checked later by the engine.
        """
        prompt = build_prompt(board, color)
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self.provider, prompt)
        try:
            reply = future.result(timeout=self.timeout)
        except FutureTimeout:
            future.cancel()
            logger.warning("Suggestion timed out after %.1fs", self.timeout)
            return None
        except Exception as e:
            logger.warning("Suggestion failed, using rule engine only: %s", e)
            return None
        finally:
            # Don't block on a provider that is still running
            executor.shutdown(wait=False)

        move = parse_suggestion(str(reply).strip() if reply is not None else '')
        logger.info("Advisor suggested %r, parsed: %s", reply, move)
        return move
