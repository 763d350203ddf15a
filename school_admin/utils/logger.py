import logging
import os


def setup_logger(name: str = "school_admin") -> logging.Logger:
    """
    Set up and configure a logger for console output.

    Args:
        name (str): The name of the logger

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logger.setLevel(level)

    # If the logger already has handlers, prevent adding more.
    if logger.hasHandlers():
        return logger

    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)

    logger.addHandler(console_handler)

    return logger


# Create a default logger instance
logger = setup_logger()
