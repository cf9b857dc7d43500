from .config import AppConfig, ConfigManager, LoggingSettings, MongoSettings
from .database import MongoManager, db_manager
from .logging import setup_logging

__all__ = [
    "AppConfig",
    "ConfigManager",
    "LoggingSettings",
    "MongoManager",
    "MongoSettings",
    "db_manager",
    "setup_logging",
]
