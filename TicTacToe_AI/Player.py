"""Player interface for the human at the console and the minimax computer."""

try:
    from Board import COMPUTER
    from ai import search_minimax
except ImportError:
    from TicTacToe_AI.Board import COMPUTER
    from TicTacToe_AI.ai import search_minimax


class Player:
    def __init__(self, mark):
        self.mark = mark

    def next_move(self, board):
        """Return 0-indexed (row, col) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, mark, input_fn=None, output_fn=None):
        super().__init__(mark)
        # None means the builtins, looked up per call
        self.input_fn = input_fn
        self.output_fn = output_fn

    def _ask(self, prompt):
        return (self.input_fn or input)(prompt)

    def _say(self, message):
        (self.output_fn or print)(message)

    def next_move(self, board):
        """Text-input player; asks 1-indexed coordinates until the move is legal."""
        while True:
            try:
                row = int(self._ask(f"Enter row (1-{board.size}): ").strip()) - 1
                col = int(self._ask(f"Enter column (1-{board.size}): ").strip()) - 1
            except ValueError:
                self._say("Invalid input! Please enter a number.")
                continue

            reason = board.move_error(row, col)
            if reason is None:
                return row, col
            self._say(f"Invalid move! {reason}")


class MinimaxPlayer(Player):
    def __init__(self, mark=COMPUTER, stats=None):
        super().__init__(mark)
        self.stats = stats

    def next_move(self, board):
        return search_minimax.choose_move(
            board,
            maximizing=self.mark == COMPUTER,
            stats=self.stats,
        )
