from typing import Optional
import logging
import os
import yaml

from openmusic.utils.app_params import AppParams

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///openmusic.db"
DEFAULT_LOG_FILEPATH = "logs/openmusic.log"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

def extract_app_params(config_filepath: Optional[str]) -> AppParams:
    """
    Builds the AppParams from a .yaml config file, falling back to defaults for anything it leaves out.
    `OPENMUSIC_DATABASE_URL` in the environment wins over the file

    Args:
        config_filepath (Optional[str]): The path to a .yaml file, or None to use only the defaults

    Returns: 
        AppParams: dataclass instance containing all extracted app params
    """
    config = {}
    if config_filepath is not None:
        with open(config_filepath, "r") as file:
            config = yaml.safe_load(file)

        if config is None:
            raise Exception(f"Error reading the config file {config_filepath}: it is empty")

    paths = config.get("paths") or {}
    debug = config.get("debug") or {}
    log_level_name = str(debug.get("log_level", "INFO")).upper()

    return AppParams(
        database_url=os.getenv("OPENMUSIC_DATABASE_URL", paths.get("database_url", DEFAULT_DATABASE_URL)),
        log_enabled=bool(debug.get("log", False)),
        log_level=LOG_LEVELS.get(log_level_name, logging.INFO),
        log_filepath=debug.get("log_filepath", DEFAULT_LOG_FILEPATH),
        db_echo=bool(debug.get("db_echo", False)),
    )
