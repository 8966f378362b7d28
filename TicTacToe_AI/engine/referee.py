"""Move validation for the game loop."""


class InvalidMoveError(ValueError):
    """Out-of-range coordinate or occupied cell."""

    def __init__(self, move, reason):
        super().__init__(f"Invalid move! {reason}")
        self.move = move
        self.reason = reason


def check_move(move, board):
    """
    Validate a move against bounds and occupancy.
    Raises InvalidMoveError on invalid moves.
    """
    row, col = move
    reason = board.move_error(row, col)
    if reason is not None:
        raise InvalidMoveError(move, reason)
    return True
