"""Exhaustive minimax for the computer side, with a forced-win short-circuit."""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass

try:
    from Board import COMPUTER, PLAYER, EMPTY
except ImportError:
    from TicTacToe_AI.Board import COMPUTER, PLAYER, EMPTY


LOGGER = logging.getLogger(__name__)

WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0
INF = float("inf")


@dataclass(frozen=True)
class Terminal:
    """Position already decided; there is no move to make."""

    score: int


@dataclass(frozen=True)
class BestMove:
    row: int
    col: int
    score: int

    @property
    def move(self):
        return (self.row, self.col)


@contextmanager
def _simulate(board, row, col, mark):
    board.place(row, col, mark)
    try:
        yield
    finally:
        board.clear(row, col)


def evaluate_terminal(board):
    """Return the terminal score of `board`, or None while the game is open."""
    if board.check_win(PLAYER):
        return LOSS_SCORE
    if board.check_win(COMPUTER):
        return WIN_SCORE
    if board.is_full():
        return DRAW_SCORE
    return None


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, stats=None):
        self.stats_list = stats
        self.nodes_evaluated = 0
        self.start_time = None

    def search(self, board, maximizing):
        """
        Score every continuation of `board` and return the best one for the
        side to move: the computer maximizes, the player minimizes.
        """
        self.nodes_evaluated = 0
        self.start_time = time.time()
        result = self._minimax(board, maximizing)
        LOGGER.debug("minimax evaluated %d nodes -> %s", self.nodes_evaluated, result)
        if self.stats_list is not None:
            self._record_stats(maximizing, result)
        return result

    def _minimax(self, board, maximizing):
        self.nodes_evaluated += 1

        score = evaluate_terminal(board)
        if score is not None:
            return Terminal(score)

        mark = COMPUTER if maximizing else PLAYER
        best_score = -INF if maximizing else INF
        best = None

        for row in range(board.size):
            for col in range(board.size):
                if board.cells[row][col] != EMPTY:
                    continue

                with _simulate(board, row, col, mark):
                    child = self._minimax(board, not maximizing)

                if maximizing:
                    if child.score == WIN_SCORE:
                        return BestMove(row, col, child.score)
                    if child.score > best_score:
                        best_score = child.score
                        best = BestMove(row, col, child.score)
                else:
                    if child.score == LOSS_SCORE:
                        return BestMove(row, col, child.score)
                    if child.score < best_score:
                        best_score = child.score
                        best = BestMove(row, col, child.score)

        return best

    def _record_stats(self, maximizing, result):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "maximizing": maximizing,
            "nodes": self.nodes_evaluated,
            "score": result.score,
            "time": total_time,
            "nps": self.nodes_evaluated / total_time,
        })


def search(board, maximizing=True, stats=None):
    """Run a fresh search; returns Terminal or BestMove."""
    return MinimaxSearcher(stats=stats).search(board, maximizing)


def choose_move(board, maximizing=True, stats=None):
    """Return the (row, col) the side to move should play."""
    result = search(board, maximizing=maximizing, stats=stats)
    if isinstance(result, Terminal):
        raise ValueError("No move to choose: the game is already decided")
    return result.move
