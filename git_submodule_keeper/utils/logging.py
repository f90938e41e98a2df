"""Logging setup for the git-submodule-keeper command line"""
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

PACKAGE_PREFIX = 'git_submodule_keeper.'

CONSOLE_FORMAT = '%(levelname)s [%(name)s] %(message)s'
DEBUG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
DATE_FORMAT = '%H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name on a terminal.

    The record passed in is left untouched so other handlers see plain text.
    """

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',     # Cyan
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_color: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return super().format(record)
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def get_log_file() -> Path:
    """Return the path of the debug log file."""
    return Path.home() / '.git-submodule-keeper' / 'git-submodule-keeper.log'


def _level_for(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    stream: Optional[TextIO] = None,
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure logging for one command invocation.

    Warnings go to stderr; -v adds info messages and --debug adds debug
    messages, timestamps and a log file that is rewritten on every run.

    Args:
        verbose: Show INFO level messages
        debug: Show DEBUG level messages and write them to log_file
        stream: Console stream, stderr by default
        log_file: Debug log location, get_log_file() by default
    """
    level = _level_for(verbose, debug)
    stream = stream or sys.stderr

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(
        fmt=DEBUG_FORMAT if debug else CONSOLE_FORMAT,
        datefmt=DATE_FORMAT,
        use_color=hasattr(stream, 'isatty') and stream.isatty(),
    ))
    root_logger.addHandler(console_handler)

    if debug:
        path = log_file or get_log_file()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        root_logger.addHandler(file_handler)

    # GitPython logs every git invocation at debug level
    logging.getLogger('git').setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger named after the module, without the package prefix."""
    # Keep "services." so service loggers do not nest under GitPython's "git" logger
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX):]
    return logging.getLogger(name)
