#!/usr/bin/env python3
"""
checklist — terminal editor for a plain-text checkbox list.

This is a thin facade: parse arguments, merge configuration, set up logging,
and hand over to the TUI.
"""

import logging
import sys
from typing import List, Optional

from config import load_settings
from logging_setup import setup_logging

from .cli_parser import build_parser
from .tui_app import cmd_tui
from .tui_themes import THEMES


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser(THEMES.keys()).parse_args(argv)
    settings = load_settings(
        {
            "theme": args.theme,
            "tick_rate": args.tick_rate,
            "frame_rate": args.frame_rate,
            "log_file": args.log_file,
        }
    )
    for key, value in settings.items():
        setattr(args, key, value)
    setup_logging(args.log_file, args.log_level)
    logging.getLogger("checklist").info("Starting on %s", args.file)
    return cmd_tui(args)


if __name__ == "__main__":
    sys.exit(main())
