from typing import Any
import json
import os
from pydantic import BaseModel, Field
from loguru import logger


class MongoSettings(BaseModel):
    host: str = 'localhost'
    port: int = 27017
    database_name: str = "mongolog"
    collection_name: str = "logs"
    server_selection_timeout_ms: int = 5000


class LoggingSettings(BaseModel):
    debug_mode: bool = True
    log_dir: str = "logs"
    file_logging: bool = True
    origin: str = "system"
    store_level: str = "DEBUG"  # minimum loguru level written to MongoDB


class AppConfig(BaseModel):
    mongo: MongoSettings = Field(default_factory=MongoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class ConfigManager:
    """
    Loads the application configuration and keeps it on disk.

    Missing or unreadable files fall back to defaults, which are then
    written back so there is always a file to edit.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """
        Update a setting and autosave.

        The whole section is re-validated, so e.g. a non-numeric Mongo port
        raises pydantic's ValidationError (a ValueError) and nothing changes.
        """
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        updated = type(section_obj).model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, updated)
        self._save()
        logger.info(f"Config updated: {section}.{key}")

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if self.filepath.endswith('.toml'):
            # no TOML writer in the stdlib, leave hand-written files alone
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
