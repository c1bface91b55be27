import sys
from typing import List
from loguru import logger
import os

from .config import LoggingSettings

def setup_logging(debug_mode: bool = True, log_dir: str = "logs", file_logging: bool = True) -> List[int]:
    """
    Configures Loguru logger.

    Command parameter mismatches are traced at DEBUG, so they only show
    up on the console when `debug_mode` is on.

    Returns:
        Ids of the handlers added, for `logger.remove(handler_id)`.
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if debug_mode else "INFO"
    handler_ids = [
        logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")
    ]

    # File Handler
    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        handler_ids.append(
            logger.add(os.path.join(log_dir, "pixellab_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")
        )

    logger.info("Logging initialized.")
    return handler_ids

def setup_logging_from_settings(settings: LoggingSettings) -> List[int]:
    """Configure logging from the `logging` section of AppConfig."""
    return setup_logging(
        debug_mode=settings.debug_mode,
        log_dir=settings.log_dir,
        file_logging=settings.file_logging,
    )
