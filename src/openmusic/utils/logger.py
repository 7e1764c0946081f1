from typing import List, Optional
import logging
import sys
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
QUIET_PACKAGES = ("aiosqlite", "asyncio")

def init_logger(log_filepath: Optional[str], log_level: int, db_echo: bool, silence_other_packages: bool = True) -> None:
    """
    Sets up logging for openmusic. Modules get their logger with `logging.getLogger(__name__)`

    Args:
        log_filepath (Optional[str]): Where to also write the log, its directory is created if needed. None logs to stderr only
        log_level (int): The desired log level
        db_echo (bool): Whether or not to show every statement sqlalchemy runs
        silence_other_packages (bool): Whether or not to only show warnings from aiosqlite and asyncio
    """
    # stderr, not stdout, the cli prints its results on stdout
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_filepath:
        log_dir = os.path.dirname(log_filepath)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_filepath))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers, force=True)

    # the engine logger stays quiet at DEBUG unless db_echo is set
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if db_echo else logging.WARNING)

    if silence_other_packages:
        for package in QUIET_PACKAGES:
            logging.getLogger(package).setLevel(logging.WARNING)
