import logging
import os
from logging.handlers import RotatingFileHandler

from config.settings import DEBUG, LOG_DIR, LOG_FILE


def setup_logging():
    logger = logging.getLogger("reservas")
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    os.makedirs(LOG_DIR, exist_ok=True)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if DEBUG else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))

    file_handler = RotatingFileHandler(os.path.join(LOG_DIR, LOG_FILE), maxBytes=10_000_000, backupCount=5, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
