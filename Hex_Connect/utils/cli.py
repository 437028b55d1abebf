"""CLI options for the board source, stone markers, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Hex winner detection for a finished board")
    parser.add_argument("board", nargs="?", default="-", help="Board text file, one row per line ('-' for stdin)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--black", help="Character marking a black stone (default from settings)")
    parser.add_argument("--white", help="Character marking a white stone (default from settings)")
    parser.add_argument("--dump", action="store_true", default=None, help="Print the board with connected stones after evaluation")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default from settings or WARNING)",
    )
    return parser.parse_args(argv)
