from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "checklist"


def setup_logging(log_file: str | Path, level: str | int = logging.INFO) -> logging.Logger:
    """
    Send ``checklist.*`` logs to a file.

    Nothing goes to the console: the full-screen UI owns the terminal.
    Safe to call more than once; previous handlers are replaced.
    """
    log_path = Path(log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fh = logging.FileHandler(str(log_path), encoding="utf-8")
    fh.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(fh)
    return logger
