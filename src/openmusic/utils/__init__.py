from .app_params import AppParams
from .config import extract_app_params
from .ids import generate_id
from .logger import init_logger

__all__ = [
    # config related utility
    "AppParams", "extract_app_params",

    # id related utility
    "generate_id",

    # logging related utility
    "init_logger"
]
