"""CLI parser construction for the checklist TUI."""

import argparse
from typing import Iterable


def build_parser(themes: Iterable[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checklist",
        description="Terminal checklist editor for '- [ ] task' files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="keys: j/k move, space toggle, enter new, e edit, d delete, q quit",
    )
    parser.add_argument("file", help="checklist file to load and save (created on first change)")
    parser.add_argument("--theme", choices=sorted(themes), default=None, help="color palette")
    parser.add_argument("--tick-rate", type=float, default=None, metavar="HZ", help="ticks per second")
    parser.add_argument("--frame-rate", type=float, default=None, metavar="FPS", help="redraws per second")
    parser.add_argument("--log-file", default=None, help="where to write logs")
    return parser
