import sys
from loguru import logger

from mongolog.core.config import ConfigManager
from mongolog.core.database import db_manager
from mongolog.core.logging import setup_logging
from pymongo.errors import PyMongoError


def main(config_path: str = "config.json", origin: str = None):
    print("--- 1. Load Config ---")
    config = ConfigManager(config_path)
    if origin:
        config.update("logging", "origin", origin)
    print(f"Origin: {config.get('logging', 'origin')}")

    print("--- 2. Connect Mongo ---")
    db_manager.init(config.data.mongo)
    collection = db_manager.get_collection()

    print("--- 3. Attach Sink ---")
    setup_logging(config.data.logging, collection)

    print("--- 4. Log Something ---")
    logger.bind(code=42).error("disk full")
    try:
        raise OSError("connection refused")
    except OSError as e:
        logger.bind(error=e).warning("retrying upload")
    logger.log("PANIC", "demo panic entry")

    try:
        count = collection.count_documents({})
        print(f"Documents in '{collection.name}': {count}")
    except PyMongoError as e:
        print(f"Count failed (Expected if no DB connection): {e}")
    finally:
        db_manager.close()


if __name__ == "__main__":
    main(*sys.argv[1:3])
