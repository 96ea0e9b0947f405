import logging
from typing import Optional


def prepare_logger(
    logger_name: str,
    logger_level: str = "DEBUG",
    logger_file_name: Optional[str] = None,
) -> logging.Logger:
    logger = logging.getLogger(logger_name)
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Calling twice for the same name must not duplicate the output
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if logger_file_name:
            file_handler = logging.FileHandler(logger_file_name, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logger.setLevel(logger_level.upper())
    return logger
