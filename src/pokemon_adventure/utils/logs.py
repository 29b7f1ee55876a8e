"""Console and file logging for whatever front end drives a GameSession.

The engine modules only create loggers; a presentation layer calls
setup_logging() once at startup to decide where their output goes.
"""

import datetime
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from src.pokemon_adventure.constants import LOG_FILE_LIMIT

THEME = Theme(
    {
        "logging.level.debug": "dim white",
        "logging.level.info": "white",
        "logging.level.warning": "yellow",
        "logging.level.error": "red",
        "logging.level.critical": "bold bright_red",
    },
)
CONSOLE = Console(theme=THEME)


def prune_log_files(log_folder: Path, limit: int = LOG_FILE_LIMIT) -> None:
    """Delete the oldest *.log files so that a new one fits under the limit."""
    log_files = sorted(log_folder.glob("*.log"), key=lambda f: f.stat().st_mtime)
    while log_files and len(log_files) >= limit:
        log_files.pop(0).unlink()


def setup_logging(console_log_level: int, file_log_level: int = logging.INFO, log_folder: Optional[Path] = None) -> Optional[Path]:
    """Route engine logs to a rich console handler and, optionally, a log file.

    Returns the path of the log file, or None when no folder was given.
    """
    console_handler = RichHandler(
        level=console_log_level,
        console=CONSOLE,
        show_time=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers: list[logging.Handler] = [console_handler]

    log_path = None
    if log_folder is not None:
        log_folder.mkdir(parents=True, exist_ok=True)
        prune_log_files(log_folder)
        log_path = log_folder / f"{datetime.datetime.now(tz=datetime.timezone.utc):%Y%m%d_%H%M%S_%f}.log"
        file_handler = logging.FileHandler(filename=log_path, encoding="utf-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(logging.Formatter("[%(asctime)s] [%(levelname)s] {%(name)s} | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logging.basicConfig(
        level=min(console_log_level, file_log_level),
        handlers=handlers,
        force=True,
    )
    return log_path
