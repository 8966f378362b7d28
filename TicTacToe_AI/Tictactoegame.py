"""Game loop and turn management: human against the minimax computer."""

from enum import Enum

try:
    from Board import Board, PLAYER, COMPUTER
    from engine import referee
except ImportError:
    from TicTacToe_AI.Board import Board, PLAYER, COMPUTER
    from TicTacToe_AI.engine import referee


class GameState(Enum):
    PLAYER_TURN = "player_turn"
    COMPUTER_TURN = "computer_turn"
    PLAYER_WON = "player_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"

    @property
    def is_terminal(self):
        return self in (GameState.PLAYER_WON, GameState.COMPUTER_WON, GameState.DRAW)


RESULT_MESSAGES = {
    GameState.PLAYER_WON: "Congratulations! You won!",
    GameState.COMPUTER_WON: "Computer wins! You lose!",
    GameState.DRAW: "It's a tie!",
}

_TURN_MARK = {GameState.PLAYER_TURN: PLAYER, GameState.COMPUTER_TURN: COMPUTER}
_WIN_STATE = {PLAYER: GameState.PLAYER_WON, COMPUTER: GameState.COMPUTER_WON}
# Consecutive invalid moves tolerated from one player before giving up
MAX_REJECTED_MOVES = 9

_NEXT_TURN = {
    GameState.PLAYER_TURN: GameState.COMPUTER_TURN,
    GameState.COMPUTER_TURN: GameState.PLAYER_TURN,
}


class Tictactoegame:
    def __init__(self, board_size, human_player, computer_player, first=GameState.PLAYER_TURN, logger=print, output_fn=print, renderer=None, max_rejected=MAX_REJECTED_MOVES):
        if first not in _TURN_MARK:
            raise ValueError(f"first must be a turn state, got {first}")
        self.board = Board(size=board_size)
        self.players = {PLAYER: human_player, COMPUTER: computer_player}
        self.state = first
        self.logger = logger
        self.output_fn = output_fn
        self.renderer = renderer or self._render
        self.max_rejected = max_rejected
        self.move_index = 0

    def _render(self, board):
        self.output_fn("")
        self.output_fn(board.render())
        self.output_fn("")

    def advance(self, move):
        """Apply a validated move for the side to move and return the new state."""
        if self.state.is_terminal:
            raise ValueError(f"Game is already over: {self.state.value}")

        mark = _TURN_MARK[self.state]
        referee.check_move(move, self.board)
        self.board.place(*move, mark)
        self.move_index += 1
        self.logger(f"Move {self.move_index}: {'X' if mark == PLAYER else 'O'} {move}")

        if self.board.check_win(mark):
            self.state = _WIN_STATE[mark]
        elif self.board.is_full():
            self.state = GameState.DRAW
        else:
            self.state = _NEXT_TURN[self.state]
        return self.state

    def play(self):
        """Run a single game. Returns the terminal GameState."""
        self.output_fn("Welcome to Tic-Tac-Toe!")

        while not self.state.is_terminal:
            self.renderer(self.board)
            player = self.players[_TURN_MARK[self.state]]

            rejected = 0
            while True:
                move = player.next_move(self.board)
                try:
                    self.advance(move)
                    break
                except referee.InvalidMoveError as exc:
                    self.logger(f"Rejected {move}: {exc}")
                    rejected += 1
                    if rejected > self.max_rejected:
                        raise

        self.renderer(self.board)
        self.logger(f"Result: {self.state.value}")
        self.output_fn(RESULT_MESSAGES[self.state])
        return self.state
