"""
Logging Configuration For Webhook Relay.
Provides Structured Logging For Production Use.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Iterable

# Libraries That Log Every Outbound Telegram Request At INFO
NOISY_LOGGERS = ("httpx", "httpcore", "telegram", "werkzeug")


def setup_logging(log_level: str = "INFO", log_file: str = "logs/webhookrelay.log",
                  quiet: Iterable[str] = NOISY_LOGGERS) -> logging.Logger:
    """
    Setup Console And Rotating File Logging.

    Args:
        log_level: Logging Level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path To Log File
        quiet: Third Party Loggers Held At WARNING Unless DEBUG Is Requested

    Returns:
        Configured Logger Instance
    """

    # Create Logs Directory If It Doesn't Exist
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger('webhookrelay')
    logger.setLevel(numeric_level)

    # Remove Any Existing Handlers
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'
    )
    simple_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    # File Handler With Rotation
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(detailed_formatter)
    logger.addHandler(file_handler)

    library_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in quiet:
        logging.getLogger(name).setLevel(library_level)

    return logger


# Global Logger Instance
logger = setup_logging(
    os.getenv('LOG_LEVEL', 'INFO'),
    os.getenv('LOG_FILE', 'logs/webhookrelay.log')
)
