"""
Bitboard implementation for Gomoku.
15x15 board represented as 225-bit integers for fast operations.
"""

from contextlib import contextmanager

EMPTY = 0
BLACK = 1
WHITE = 2

BOARD_SIZE = 15
TOTAL_CELLS = BOARD_SIZE * BOARD_SIZE  # 225
CENTER = (BOARD_SIZE // 2, BOARD_SIZE // 2)

# Column labels used by the text form (A..O)
COLUMN_LABELS = ''.join(chr(ord('A') + i) for i in range(BOARD_SIZE))

# Direction shifts for pattern detection
DIRECTIONS = {
    'horizontal': 1,
    'vertical': BOARD_SIZE,           # 15
    'diagonal_down': BOARD_SIZE + 1,  # 16 (↘)
    'diagonal_up': BOARD_SIZE - 1,    # 14 (↙)
}

# Accepted spellings when building a board from external data
_CELL_VALUES = {
    EMPTY: EMPTY, BLACK: BLACK, WHITE: WHITE,
    None: EMPTY, 'black': BLACK, 'white': WHITE,
    '.': EMPTY, 'X': BLACK, 'O': WHITE,
}

_SYMBOLS = {EMPTY: '.', BLACK: 'X', WHITE: 'O'}


def _create_start_mask(min_col: int, max_col: int) -> int:
    """Create a mask of cells whose column lies in [min_col, max_col]."""
    mask = 0
    for row in range(BOARD_SIZE):
        for col in range(min_col, max_col + 1):
            mask |= (1 << (row * BOARD_SIZE + col))
    return mask


# Valid starting cells for a line of N stones, indexed by N.
# A horizontal or ↘ line must start at least N-1 columns from the right edge,
# a ↙ line at least N-1 columns from the left edge.
RIGHTWARD_START_MASKS = [_create_start_mask(0, BOARD_SIZE - max(n, 1)) for n in range(6)]
LEFTWARD_START_MASKS = [_create_start_mask(max(n, 1) - 1, BOARD_SIZE - 1) for n in range(6)]


class Board:
    """
    Bitboard representation of a Gomoku board.
    Uses two 225-bit integers to track black and white stones.
    """

    def __init__(self):
        self.black = 0  # 225-bit integer for black stones
        self.white = 0  # 225-bit integer for white stones

    @classmethod
    def from_grid(cls, grid) -> 'Board':
        """
        Build a board from a 15x15 nested sequence of cells.

        Cells may be EMPTY/BLACK/WHITE, None/"black"/"white" or "."/"X"/"O".
        Raises ValueError on wrong dimensions or unknown cell values.
        """
        if len(grid) != BOARD_SIZE:
            raise ValueError(f"board must have {BOARD_SIZE} rows, got {len(grid)}")

        board = cls()
        for row, cells in enumerate(grid):
            if len(cells) != BOARD_SIZE:
                raise ValueError(
                    f"row {row} must have {BOARD_SIZE} cells, got {len(cells)}"
                )
            for col, cell in enumerate(cells):
                try:
                    color = _CELL_VALUES[cell]
                except (KeyError, TypeError):
                    raise ValueError(
                        f"invalid cell value {cell!r} at ({row}, {col})"
                    ) from None
                if color != EMPTY:
                    board.place_stone(row, col, color)
        return board

    @classmethod
    def from_text(cls, text: str) -> 'Board':
        """
        Parse the textual form produced by str(board).

        Also accepts bare 15-character rows such as "...X...O.......".
        Header lines of column letters and leading row numbers are skipped.
        """
        rows = []
        for line in text.splitlines():
            tokens = line.split()
            if not tokens:
                continue
            if ''.join(tokens) == COLUMN_LABELS:
                continue  # Column header
            if tokens[0].isdigit():
                tokens = tokens[1:]
            if len(tokens) == 1:
                tokens = list(tokens[0])
            rows.append(tokens)
        return cls.from_grid(rows)

    def to_grid(self) -> list:
        """Return the board as a list of rows of cell constants."""
        return [[self.get(r, c) for c in range(BOARD_SIZE)]
                for r in range(BOARD_SIZE)]

    def copy(self):
        """Create a copy of the board."""
        new_board = Board()
        new_board.black = self.black
        new_board.white = self.white
        return new_board

    @staticmethod
    def pos_to_bit(row: int, col: int) -> int:
        """Convert (row, col) to bit position."""
        return row * BOARD_SIZE + col

    @staticmethod
    def bit_to_pos(bit: int) -> tuple:
        """Convert bit position to (row, col)."""
        return (bit // BOARD_SIZE, bit % BOARD_SIZE)

    @staticmethod
    def is_valid_pos(row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get(self, row: int, col: int) -> int:
        """Get stone at position. Returns EMPTY, BLACK, or WHITE."""
        if not self.is_valid_pos(row, col):
            return EMPTY

        bit = 1 << self.pos_to_bit(row, col)
        if self.black & bit:
            return BLACK
        if self.white & bit:
            return WHITE
        return EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        """Check if position is on the board and empty."""
        return self.is_valid_pos(row, col) and self.get(row, col) == EMPTY

    def place_stone(self, row: int, col: int, color: int) -> bool:
        """
        Place a stone on the board.
        Returns True if successful, False if position is occupied or off-board.
        """
        if not self.is_empty(row, col):
            return False

        bit = 1 << self.pos_to_bit(row, col)
        if color == BLACK:
            self.black |= bit
        else:
            self.white |= bit
        return True

    def remove_stone(self, row: int, col: int) -> int:
        """
        Remove a stone from the board.
        Returns the color of the removed stone.
        """
        if not self.is_valid_pos(row, col):
            return EMPTY

        bit = 1 << self.pos_to_bit(row, col)

        if self.black & bit:
            self.black &= ~bit
            return BLACK
        if self.white & bit:
            self.white &= ~bit
            return WHITE
        return EMPTY

    @contextmanager
    def hypothetical(self, row: int, col: int, color: int):
        """
        Temporarily place a stone for the duration of a with-block.

        The stone is removed again on every exit path, exceptions included.
        Raises ValueError if the cell is occupied or off-board.
        """
        if not self.place_stone(row, col, color):
            raise ValueError(f"cannot place hypothetical stone at ({row}, {col})")
        try:
            yield self
        finally:
            self.remove_stone(row, col)

    def get_occupied(self) -> int:
        """Get bitboard of all occupied positions."""
        return self.black | self.white

    def get_stones(self, color: int) -> int:
        """Get bitboard for specific color."""
        return self.black if color == BLACK else self.white

    def count_stones(self, color: int) -> int:
        """Count number of stones of a color."""
        stones = self.get_stones(color)
        return bin(stones).count('1')

    def stone_count(self) -> int:
        """Count stones of both colors."""
        return bin(self.get_occupied()).count('1')

    def is_empty_board(self) -> bool:
        return self.get_occupied() == 0

    def is_full(self) -> bool:
        return self.stone_count() == TOTAL_CELLS

    def empty_cells(self) -> list:
        """All empty positions in row-major order."""
        occupied = self.get_occupied()
        return [self.bit_to_pos(bit) for bit in range(TOTAL_CELLS)
                if not (occupied >> bit) & 1]

    def occupied_cells(self) -> list:
        """All occupied positions in row-major order."""
        occupied = self.get_occupied()
        return [self.bit_to_pos(bit) for bit in range(TOTAL_CELLS)
                if (occupied >> bit) & 1]

    def get_adjacent_empty(self, radius: int = 2) -> list:
        """
        Get all empty positions within `radius` (Chebyshev) of existing stones.

        Each position appears once, in first-seen order: stones are visited
        row-major and each neighbourhood is walked row-major.
        Returns an empty list for an empty board.
        """
        candidates = []
        seen = set()

        for row, col in self.occupied_cells():
            for dr in range(-radius, radius + 1):
                for dc in range(-radius, radius + 1):
                    nr, nc = row + dr, col + dc
                    if (nr, nc) in seen or not self.is_empty(nr, nc):
                        continue
                    seen.add((nr, nc))
                    candidates.append((nr, nc))

        return candidates

    def check_line(self, color: int, direction: str, count: int) -> bool:
        """
        Check if there's a line of 'count' consecutive stones.
        Uses bit shifting for fast detection; start masks prevent edge wrapping.
        """
        stones = self.get_stones(color)
        shift = DIRECTIONS[direction]

        result = stones
        for i in range(1, count):
            result &= (stones >> (shift * i))

        # Keep only starting cells whose line stays on the board
        if direction in ('horizontal', 'diagonal_down'):
            result &= RIGHTWARD_START_MASKS[min(count, 5)]
        elif direction == 'diagonal_up':
            result &= LEFTWARD_START_MASKS[min(count, 5)]
        # vertical direction doesn't need masking

        return result != 0

    def has_five_in_row(self, color: int) -> bool:
        """Check if color has 5 or more in a row."""
        for direction in DIRECTIONS:
            if self.check_line(color, direction, 5):
                return True
        return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.black == other.black and self.white == other.white

    def __str__(self) -> str:
        """String representation: A-O column headers, 1-15 row labels."""
        lines = ['   ' + ' '.join(COLUMN_LABELS)]

        for row in range(BOARD_SIZE):
            cells = ' '.join(_SYMBOLS[self.get(row, col)] for col in range(BOARD_SIZE))
            lines.append(f'{row + 1:2d} {cells}')

        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f'Board(black={bin(self.black)}, white={bin(self.white)})'
