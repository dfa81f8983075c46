import logging

from .config import get_settings

FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    logger = logging.getLogger()
    logger.setLevel(get_settings().log_level)

    formatter = logging.Formatter(FORMAT)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(formatter)
