"""CLI options for selecting players, difficulty, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku AI (five or more in a row wins)")
    parser.add_argument("--board-size", type=int, help="Board size (default 15)")
    parser.add_argument("--difficulty", type=int, choices=[1, 2, 3], help="AI difficulty: 1 easy, 2 medium, 3 hard")
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-human", "ai-vs-ai", "human-vs-human"],
        default=None,
        help="Play mode (who plays black/white)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the hard-tier tie-break")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--weights", default=None, help="Path to evaluator weights YAML")
    parser.add_argument("--load", default=None, help="Resume a game saved with 'save PATH' (keeps its saved difficulty unless --difficulty is given)")
    parser.add_argument("--log-level", default=None, help="Level for library diagnostics (DEBUG shows search stats)")
    return parser.parse_args(argv)
