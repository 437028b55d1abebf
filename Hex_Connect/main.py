"""Entry point for Hex winner detection. Load config, read the board, print the winner."""

import logging
import sys
from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import configure_logging, log_event
    from Board import BoardError, load
    from engine import referee
except ImportError:
    from Hex_Connect.utils.cli import parse_args
    from Hex_Connect.utils.logger import configure_logging, log_event
    from Hex_Connect.Board import BoardError, load
    from Hex_Connect.engine import referee


PROJECT_DIR = Path(__file__).resolve().parent

LOGGER = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "black_stone": "X",
    "white_stone": "O",
    "dump": False,
    "log_level": "WARNING",
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Hex_Connect/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        LOGGER.debug("settings file %s not found, using defaults", path)
    return settings


def read_board_lines(source):
    """Read board rows from a file path or stdin ('-'); trailing empty lines are dropped."""
    if source == "-":
        text = sys.stdin.read()
    else:
        with open(source, "r", encoding="utf-8") as f:
            text = f.read()
    lines = text.splitlines()
    while lines and not lines[-1]:
        lines.pop()
    return lines


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    configure_logging(args.log_level or settings.get("log_level", "WARNING"))
    black = args.black or settings.get("black_stone", "X")
    white = args.white or settings.get("white_stone", "O")
    dump = args.dump if args.dump is not None else bool(settings.get("dump", False))

    try:
        lines = read_board_lines(args.board)
    except OSError as exc:
        log_event(f"Cannot read board: {exc}")
        return 2
    try:
        board = load(lines, black=black, white=white)
    except BoardError as exc:
        log_event(f"Invalid board: {exc}")
        return 2

    result = referee.winner_of(board)
    if dump:
        board.dump()
    print(result or "none")
    return 0


if __name__ == "__main__":
    sys.exit(main())
