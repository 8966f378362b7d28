"""Board state container and victory checking (fixed three-in-a-row rule)."""

# Cell marks
EMPTY = 0
PLAYER = -1
COMPUTER = 1

SYMBOLS = {EMPTY: " ", PLAYER: "X", COMPUTER: "O"}

OUT_OF_RANGE = "Row and column must be within the board range."
OCCUPIED = "The cell is already occupied."


class Board:
    def __init__(self, size=3):
        # Store cells as -1 (player), 0 (empty), 1 (computer)
        if size < 3:
            raise ValueError("board size must be at least 3")
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def move_error(self, row, col):
        """Return why (row, col) is not playable, or None if it is."""
        if not self.in_bounds(row, col):
            return OUT_OF_RANGE
        if not self.is_empty(row, col):
            return OCCUPIED
        return None

    def is_valid_move(self, row, col):
        return self.move_error(row, col) is None

    def place(self, row, col, mark):
        """Set a cell. Callers validate first; nothing is re-checked here."""
        self.cells[row][col] = mark

    def clear(self, row, col):
        self.cells[row][col] = EMPTY

    def check_win(self, mark):
        """
        True if `mark` fills one of the fixed three-cell lines.

        Only the leading three cells of each row and column and the two
        diagonals through (1, 1) are inspected, so on boards larger than 3x3
        a line elsewhere does not count.
        """
        cells = self.cells
        for i in range(self.size):
            if cells[i][0] == mark and cells[i][1] == mark and cells[i][2] == mark:
                return True
            if cells[0][i] == mark and cells[1][i] == mark and cells[2][i] == mark:
                return True

        if cells[0][0] == mark and cells[1][1] == mark and cells[2][2] == mark:
            return True
        return cells[0][2] == mark and cells[1][1] == mark and cells[2][0] == mark

    def is_full(self):
        return all(cell != EMPTY for row in self.cells for cell in row)

    def empty_cells(self):
        """Empty cells in row-major order."""
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.cells[row][col] == EMPTY
        ]

    def snapshot(self):
        return [row[:] for row in self.cells]

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = self.snapshot()
        return new_board

    def render(self):
        """Rows joined by ' | ' with a dashed separator between rows."""
        separator = "-" * (self.size * 4 - 1)
        lines = []
        for row in range(self.size):
            lines.append(" | ".join(SYMBOLS[cell] for cell in self.cells[row]))
            if row < self.size - 1:
                lines.append(separator)
        return "\n".join(lines)
