from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


class LocationRichHandler(RichHandler):
    """RichHandler that renders records as "file:line - Message" on stderr."""

    _COLORS = {
        "DEBUG": "blue",
        "INFO": "white",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red",
    }

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.console = Console(stderr=True)

    def format(self, record: logging.LogRecord) -> str:
        pathname = Path(record.pathname)
        try:
            relative_path = pathname.relative_to(Path.cwd())
        except ValueError:
            relative_path = pathname

        color = self._COLORS.get(record.levelname, "white")
        return f"[{color}]{relative_path}:{record.lineno} - {record.getMessage()}[/{color}]"


def setup_logger(name: str = __name__, level: int = logging.INFO, log_file: str | Path | None = None) -> logging.Logger:
    """
    Configure a logger with colored console output and an optional plain log file.

    Log format: "file:line - Message"
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        ch = LocationRichHandler(show_time=False, show_level=False, show_path=False, markup=True)
        ch.setLevel(level)
        logger.addHandler(ch)

        if log_file is not None:
            fh = logging.FileHandler(str(log_file))
            fh.setLevel(level)
            fh.setFormatter(logging.Formatter("%(pathname)s:%(lineno)d - %(message)s"))
            logger.addHandler(fh)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    return logger


def get_logger(name: str = __name__) -> logging.Logger:
    """
    Return a logger, attaching the default handler on first use.

    Applications can call setup_logger() again to change the level.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    return setup_logger(name)
