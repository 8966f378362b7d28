"""Entry point for Tic-Tac-Toe. Load config, wire players, start one game."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import configure, log_event
    from Board import PLAYER, COMPUTER
    from Tictactoegame import Tictactoegame, GameState
    from Player import HumanPlayer, MinimaxPlayer
except ImportError:
    from TicTacToe_AI.utils.cli import parse_args
    from TicTacToe_AI.utils.logger import configure, log_event
    from TicTacToe_AI.Board import PLAYER, COMPUTER
    from TicTacToe_AI.Tictactoegame import Tictactoegame, GameState
    from TicTacToe_AI.Player import HumanPlayer, MinimaxPlayer


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 3,
    "first": "player",
    "mode": "human-vs-ai",
    "log_level": "WARNING",
}

FIRST_TURN = {"player": GameState.PLAYER_TURN, "computer": GameState.COMPUTER_TURN}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `TicTacToe_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML over the defaults; a missing file means defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        pass
    return settings


def _quiet(message):
    pass


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings["board_size"]
    first = args.first or settings["first"]
    mode = args.mode or settings["mode"]
    log_level = args.log_level or settings["log_level"]
    configure(log_level)

    if first not in FIRST_TURN:
        raise ValueError(f"Unsupported first mover: {first}")

    if mode == "human-vs-ai":
        human = HumanPlayer(PLAYER)
    elif mode == "ai-vs-ai":
        human = MinimaxPlayer(PLAYER)
    else:
        raise ValueError(f"Unsupported mode: {mode}")

    verbose = mode == "ai-vs-ai" or str(log_level).upper() in ("DEBUG", "INFO")
    game = Tictactoegame(
        board_size=board_size,
        human_player=human,
        computer_player=MinimaxPlayer(COMPUTER),
        first=FIRST_TURN[first],
        logger=log_event if verbose else _quiet,
    )
    return game.play()


if __name__ == "__main__":
    main()
