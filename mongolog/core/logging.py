import sys
from typing import Optional
from loguru import logger
from pymongo.collection import Collection
import os

from .config import LoggingSettings
from ..sink import MongoSink, register_panic_level


def setup_logging(settings: LoggingSettings, collection: Optional[Collection] = None) -> Optional[int]:
    """
    Configures Loguru logger.

    Console and file handlers are always set up from `settings`. When a
    collection is given, a MongoSink is attached as well and its handler id
    is returned so the caller can remove it again.
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if settings.debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")

    # File Handler
    if settings.file_logging:
        os.makedirs(settings.log_dir, exist_ok=True)
        logger.add(os.path.join(settings.log_dir, "app_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    sink_id = None
    if collection is not None:
        register_panic_level(logger)
        sink = MongoSink(settings.origin, collection)
        sink_id = logger.add(sink, level=settings.store_level, filter=sink.accepts)

    logger.info("Logging initialized.")
    return sink_id
