"""CLI options for board size, who moves first, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe against a minimax computer")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings, normally 3)")
    parser.add_argument(
        "--first",
        choices=["player", "computer"],
        default=None,
        help="Who makes the opening move (default from settings or player)",
    )
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-ai"],
        default=None,
        help="Play mode; ai-vs-ai lets minimax play the human side too",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level for search diagnostics",
    )
    return parser.parse_args(argv)
