import logging

from party_membership.core.config import settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(f"party_membership.{name}")
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(ch)
    logger.setLevel(settings.LOG_LEVEL.upper())
    return logger
